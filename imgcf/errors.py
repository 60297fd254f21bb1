from __future__ import annotations

from typing import Any


class ImgCfError(ValueError):
    """Base error raised when an img tag cannot be rewritten."""


class MissingFieldError(ImgCfError):
    """Raised when a required img attribute is absent."""

    def __init__(self, field: str) -> None:
        self.field = field
        super().__init__(f"missing required img attribute: {field}")


class InvalidDimensionError(ImgCfError):
    """Raised when width/height is not a plain non-negative integer."""

    def __init__(self, field: str, value: Any) -> None:
        self.field = field
        self.value = value
        super().__init__(f"invalid img attribute {field}: {value!r}")


__all__ = ["ImgCfError", "InvalidDimensionError", "MissingFieldError"]
