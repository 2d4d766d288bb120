"""Main Textual TUI application."""

from textual.app import App, ComposeResult
from textual.containers import Container, Horizontal, Vertical
from textual.widgets import Button, Footer, Header, Input, Label, RichLog

from solscan.app.actions.audit_action import AuditAction
from solscan.app.actions.copy_log_action import CopyLogAction
from solscan.app.actions.init_action import InitAction
from solscan.app.actions.select_mode_action import SelectModeAction
from solscan.app.actions.start_over_action import StartOverAction
from solscan.app.components.input_section import InputSection
from solscan.app.components.log_display import LogDisplay
from solscan.app.state import AppState
from solscan.domain.modes import AnalysisMode, ModeController
from solscan.domain.models import Context

MODE_BUTTON_PREFIX = "mode-"


class AnalyzerApp(App):
    """Main analyzer application TUI."""

    CSS = """
    Screen {
        layout: vertical;
    }

    Container {
        layout: vertical;
        height: 1fr;
    }

    #controls {
        height: auto;
    }

    .control-group {
        margin-right: 2;
    }

    .section-label {
        text-style: bold;
        height: 1;
    }

    #log-label {
        text-style: bold;
        height: 1;
    }

    #results-log {
        height: 20;
        border: solid $primary;
    }

    Input {
        width: 40;
    }

    Button {
        width: auto;
        min-width: 10;
    }

    .mode-button {
        width: 11;
        margin-right: 1;
    }

    .mode-button.selected {
        background: $accent;
        text-style: bold;
    }
    """

    TITLE = "solscan"

    def __init__(
        self,
        source_ref: str | None = None,
        mode: AnalysisMode = AnalysisMode.SPEED,
        generate_pdf: bool = False,
    ):
        """Initialize the app with an optional source and starting mode."""
        super().__init__()
        self.source_ref = source_ref
        self.generate_pdf = generate_pdf
        self.state = AppState()
        self.mode_controller = ModeController(mode)
        self.components: dict[str, LogDisplay | InputSection] = {}
        self.actions: dict[str, object] = {}

    def compose(self) -> ComposeResult:
        """Create child widgets for the app."""
        yield Header()

        with Container():
            yield Label("Log", id="log-label")
            yield RichLog(id="results-log")

            with Horizontal(id="controls"):
                with Vertical(classes="control-group"):
                    yield Label("Mode", classes="section-label")
                    with Horizontal():
                        for mode in AnalysisMode:
                            classes = "mode-button"
                            if mode == self.mode_controller.mode:
                                classes += " selected"
                            yield Button(
                                mode.name.capitalize(),
                                id=f"{MODE_BUTTON_PREFIX}{mode.value}",
                                classes=classes,
                            )

                with Vertical(classes="control-group"):
                    yield Label("Contract", classes="section-label")
                    yield Input(
                        placeholder="contracts/Vault.sol or https://...",
                        id="source-input",
                        value=self.source_ref or "",
                    )

                with Vertical(classes="control-group"):
                    yield Label("Actions", classes="section-label")
                    with Horizontal():
                        yield Button("Run analysis", id="analyze-button", variant="primary")
                        yield Button("Start over", id="start-over-button")
                        yield Button("Copy log", id="copy-log-button")

        yield Footer()

    def on_mount(self) -> None:
        """Called when app is mounted."""
        log = LogDisplay(self.query_one("#results-log", RichLog))
        self.components["log"] = log
        self.components["input"] = InputSection(self.query_one("#source-input", Input))
        self.mode_controller.log_display = log

        self.actions["audit"] = AuditAction()
        self.actions["init"] = InitAction(log, self.mode_controller)
        self.actions["start_over"] = StartOverAction(self.actions["init"], self.components["input"])
        self.actions["copy_log"] = CopyLogAction(log, self)
        self.actions["select_mode"] = SelectModeAction(log, self.mode_controller)

        self.actions["init"].execute()

        if self.source_ref:
            self.set_timer(0.1, self._auto_run)
        else:
            self.set_timer(0.1, self._focus_input)

    def _focus_input(self) -> None:
        """Focus the input field."""
        self.query_one("#source-input", Input).focus()

    async def _auto_run(self) -> None:
        """Auto-run analysis with the source given on the command line."""
        source_ref, source_kind = self.components["input"].get_source_info()
        await self._handle_analysis(source_ref, source_kind)

    def _update_mode_selection(self, mode: AnalysisMode) -> None:
        """Refresh button styling to show the selected mode."""
        for candidate in AnalysisMode:
            button = self.query_one(f"#{MODE_BUTTON_PREFIX}{candidate.value}", Button)
            if candidate == mode:
                button.add_class("selected")
            else:
                button.remove_class("selected")

    async def _handle_analysis(self, source_ref: str, source_kind: str) -> None:
        """Handle analysis action."""
        ctx = Context(
            source_ref=source_ref,
            source_kind=source_kind,
            mode_controller=self.mode_controller,
            log_display=self.components["log"],
            generate_pdf=self.generate_pdf,
        )

        try:
            result = await self.actions["audit"].execute(ctx)
        except ValueError:
            # Reported to the log by AuditAction
            return

        self.state.mark_analysis_complete(source_ref, result)

    def _start_over(self) -> None:
        """Reset the UI to initial state for a new analysis."""
        self.state.reset()
        self.actions["start_over"].execute()
        self._focus_input()

    async def on_button_pressed(self, event: Button.Pressed) -> None:
        """Handle button press events."""
        button_id = event.button.id or ""

        if button_id == "copy-log-button":
            self.actions["copy_log"].execute()
        elif button_id == "analyze-button":
            source_ref, source_kind = self.components["input"].get_source_info()
            await self._handle_analysis(source_ref, source_kind)
        elif button_id == "start-over-button":
            self._start_over()
        elif button_id.startswith(MODE_BUTTON_PREFIX):
            mode = AnalysisMode.parse(button_id[len(MODE_BUTTON_PREFIX):])
            self.actions["select_mode"].execute(mode)
            self._update_mode_selection(mode)

    async def on_input_submitted(self, event: Input.Submitted) -> None:
        """Handle Enter key press in input field."""
        if event.input.id == "source-input":
            source_ref, source_kind = self.components["input"].get_source_info()
            await self._handle_analysis(source_ref, source_kind)
