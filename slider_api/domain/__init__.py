"""
Domain layer: REST status values, configuration documents and errors.
"""

from .exceptions import (
    DecodeError,
    MarshallingError,
    MissingOptionError,
    StoreTooLargeError,
)

__all__ = [
    "DecodeError",
    "MarshallingError",
    "MissingOptionError",
    "StoreTooLargeError",
]
