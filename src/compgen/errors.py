"""Custom exception types raised by the compgen generators."""

from __future__ import annotations


class GenerationError(RuntimeError):
    """Base class for errors raised while generating component sources."""


class UnsupportedVariantError(GenerationError):
    """Raised when a file kind or flag combination has no matching template."""

    def __init__(self, message: str, *, variant: object | None = None) -> None:
        super().__init__(message)
        self.variant = variant


class DegenerateNameError(GenerationError):
    """Raised when a component name contains no usable identifier characters."""

    def __init__(self, name: str) -> None:
        super().__init__(f"component name {name!r} does not contain any identifier characters")
        self.name = name


__all__ = ["DegenerateNameError", "GenerationError", "UnsupportedVariantError"]
