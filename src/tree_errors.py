"""Errors raised by the ordered tree package."""

from typing import Any, Optional


class TreeError(Exception):
    """Base class for every error raised by this package."""


class EmptyTreeError(TreeError, ValueError):
    """An order query was made on a tree that holds no elements."""

    def __init__(self, operation: str) -> None:
        self.operation = operation
        super().__init__(f"{operation} from empty tree")


class ConfigError(TreeError):
    def __init__(self, message: str, config_key: Optional[str] = None, value: Any = None) -> None:
        self.config_key = config_key
        self.value = value
        super().__init__(message)

    def __str__(self) -> str:
        if self.config_key is None:
            return super().__str__()
        return f"[{self.config_key}] {super().__str__()}"
