"""solscan - static vulnerability analyzer for Solidity contracts."""

__version__ = "0.1.0"
