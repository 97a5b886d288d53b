"""Exception taxonomy for argument validation and structural failures."""

from __future__ import annotations

from typing import Optional


class KernelError(Exception):
    """Base class of every error raised by :mod:`geokernel`."""


class ArgumentNullError(KernelError, ValueError):
    """Raised when a required argument is ``None``."""

    def __init__(self, argument: str, message: Optional[str] = None):
        super().__init__(message or f"{argument} is None")
        self.argument = argument


class ArgumentOutOfRangeError(KernelError, ValueError):
    """Raised when an argument lies outside its permitted range."""

    def __init__(self, argument: str, message: str):
        super().__init__(message)
        self.argument = argument


class UniqueAnchorError(KernelError, NotImplementedError):
    """Raised when a ring has no uniquely occurring coordinate to anchor on."""


def require(value: object, argument: str) -> None:
    if value is None:
        raise ArgumentNullError(argument)


__all__ = [
    "KernelError",
    "ArgumentNullError",
    "ArgumentOutOfRangeError",
    "UniqueAnchorError",
    "require",
]
