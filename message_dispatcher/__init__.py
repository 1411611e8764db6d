"""Message dispatcher: formatted messages sent through pluggable channels."""

__version__ = "0.1.0"
