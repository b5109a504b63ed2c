"""
Marshalling Exceptions.

Custom exceptions raised while translating between domain values and wire
records.

Design Principles:
- Hierarchy: All inherit from MarshallingError base
- Rich context: Exceptions carry the shape or path they failed on
- I/O failures reading a security store are NOT wrapped; OSError propagates
"""

from typing import Optional


class MarshallingError(Exception):
    """
    Base exception for marshalling errors.

    Allows catching every marshalling failure with one handler.
    """
    pass


class DecodeError(MarshallingError, ValueError):
    """
    A wrapped JSON configuration document could not be decoded.

    Raised when the JSON is syntactically invalid or does not fit the
    requested in-memory shape. No partial result is ever returned.

    Attributes:
        target: Name of the shape that was requested (e.g. "ConfTree")
    """

    def __init__(self, target: str, message: str):
        super().__init__(f"Cannot decode {target}: {message}")
        self.target = target
        self.message = message


class StoreTooLargeError(MarshallingError):
    """
    A security store file exceeds the configured size bound.

    Attributes:
        path: File that was being read
        limit: Configured bound in bytes
    """

    def __init__(self, path: str, limit: int):
        super().__init__(f"Security store {path} is too large (more than {limit} bytes)")
        self.path = path
        self.limit = limit


class MissingOptionError(MarshallingError, KeyError):
    """Mandatory configuration option is absent from a ConfTree."""

    def __init__(self, key: str, component: Optional[str] = None):
        where = f"component {component!r}" if component else "global options"
        super().__init__(f"Missing option {key!r} in {where}")
        self.key = key
        self.component = component

    def __str__(self) -> str:
        return self.args[0]


__all__ = [
    "MarshallingError",
    "DecodeError",
    "StoreTooLargeError",
    "MissingOptionError",
]
