"""Environment-driven settings for artifacts, limits and defaults."""

import os
from pathlib import Path

from solscan.domain.modes import AnalysisMode


DEFAULT_ARTIFACTS_DIR = "artifacts"
ARTIFACTS_DIR_ENV = "SOLSCAN_ARTIFACTS_DIR"
HOST_HINT_ENV = "SOLSCAN_ARTIFACTS_HOST_PATH"

DEFAULT_MAX_SOURCE_BYTES = 1024 * 1024
MAX_SOURCE_BYTES_ENV = "SOLSCAN_MAX_SOURCE_BYTES"

DEFAULT_MODE = AnalysisMode.SPEED
MODE_ENV = "SOLSCAN_MODE"

TEMPLATE_PATH_ENV = "SOLSCAN_TEMPLATE_PATH"


def get_artifacts_dir() -> Path:
    """
    Resolve the artifacts directory, ensuring it exists.

    Uses SOLSCAN_ARTIFACTS_DIR if set, otherwise ./artifacts.
    """
    target = os.getenv(ARTIFACTS_DIR_ENV, DEFAULT_ARTIFACTS_DIR)
    path = Path(target).expanduser()
    path.mkdir(parents=True, exist_ok=True)
    return path.resolve()


def get_host_hint(artifacts_dir: Path) -> str | None:
    """
    Return a host-friendly hint for where artifacts should appear.

    If SOLSCAN_ARTIFACTS_HOST_PATH is set, return that value.
    Otherwise, if the artifacts dir was customized, remind users to check
    their bind mount for that container path.
    """
    host_hint = os.getenv(HOST_HINT_ENV)
    if host_hint:
        return host_hint

    env_dir = os.getenv(ARTIFACTS_DIR_ENV)
    if env_dir and env_dir != DEFAULT_ARTIFACTS_DIR:
        return f"Host bind mount for {artifacts_dir}"

    return None


def get_max_source_bytes() -> int:
    """
    Maximum accepted source size in UTF-8 bytes.

    Raises:
        ValueError: If SOLSCAN_MAX_SOURCE_BYTES is not a positive integer
    """
    raw = os.getenv(MAX_SOURCE_BYTES_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MAX_SOURCE_BYTES

    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{MAX_SOURCE_BYTES_ENV} must be an integer, got {raw!r}")
    if value <= 0:
        raise ValueError(f"{MAX_SOURCE_BYTES_ENV} must be positive, got {value}")
    return value


def get_default_mode() -> AnalysisMode:
    """
    Initial operational mode.

    Raises:
        ValueError: If SOLSCAN_MODE names an unknown mode
    """
    raw = os.getenv(MODE_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_MODE
    return AnalysisMode.parse(raw)
