"""Exceptions raised by htmlel."""


class HtmlElError(Exception):
    """Base class for htmlel errors."""


class UnsupportedOperation(HtmlElError):
    """An attribute kind does not implement a mandatory operation."""

    def __init__(self, name: str, operation: str) -> None:
        super().__init__(f"operation not supported: '{operation}' on attribute '{name}'")
        self.name = name
        self.operation = operation


class ConfigError(HtmlElError):
    """A render configuration file could not be loaded."""


__all__ = ["ConfigError", "HtmlElError", "UnsupportedOperation"]
