"""
Security Store Transfer - certificate store files to/from GetCertificateStoreResponseProto.

Purpose:
- Resolve a SecurityStore handle to a file and load it whole
- Embed the bytes in the single binary field of the response record
- Hand the bytes back verbatim on the receiving side

Design:
- Whole-file reads only: the complete content is in memory on both sides
- OSError (missing file, permission denied) propagates unchanged, no retry
- An optional bound (MarshallingConfig.max_store_bytes) caps the read;
  None keeps the historical unbounded behaviour
- The async variant reads through aiofiles so callers on an event loop
  do not block it
"""

import logging
from pathlib import Path
from typing import Optional

import aiofiles

from slider_api.api.proto.messages import GetCertificateStoreResponseProto
from slider_api.config import MarshallingConfig
from slider_api.domain.exceptions import StoreTooLargeError
from slider_api.domain.models.security_store import SecurityStore

logger = logging.getLogger(__name__)


def _check_bound(max_bytes: Optional[int]) -> None:
    if max_bytes is not None and max_bytes < 0:
        raise ValueError(f"max_bytes must be >= 0, got {max_bytes}")


def _check_size(path: Path, content: bytes, max_bytes: Optional[int]) -> bytes:
    # Reads ask for max_bytes + 1, so a longer result means the file is over the bound
    if max_bytes is not None and len(content) > max_bytes:
        raise StoreTooLargeError(str(path), max_bytes)
    logger.debug("Read security store %s (%d bytes)", path, len(content))
    return content


def read_store_bytes(path: Path, max_bytes: Optional[int] = None) -> bytes:
    """
    Read a store file completely.

    Args:
        path: File to read
        max_bytes: Optional upper bound on the file size

    Returns:
        Full file content; b"" for an empty file

    Raises:
        OSError: If the file cannot be opened or read
        StoreTooLargeError: If the file is larger than max_bytes
        ValueError: If max_bytes is negative
    """
    _check_bound(max_bytes)
    with open(path, "rb") as f:
        content = f.read() if max_bytes is None else f.read(max_bytes + 1)
    return _check_size(path, content, max_bytes)


async def aread_store_bytes(path: Path, max_bytes: Optional[int] = None) -> bytes:
    """
    Read a store file completely without blocking the event loop.

    Same contract as read_store_bytes().
    """
    _check_bound(max_bytes)
    async with aiofiles.open(path, "rb") as f:
        content = await (f.read() if max_bytes is None else f.read(max_bytes + 1))
    return _check_size(path, content, max_bytes)


def marshall_security_store(
    security_store: SecurityStore,
    config: Optional[MarshallingConfig] = None,
) -> GetCertificateStoreResponseProto:
    """
    Load a security store into a GetCertificateStoreResponseProto.

    Raises:
        OSError: If the store file cannot be read
        StoreTooLargeError: If the configured bound is exceeded
    """
    config = config or MarshallingConfig.default()
    path = security_store.resolve(config.store_base_path)
    content = read_store_bytes(path, config.max_store_bytes)
    return GetCertificateStoreResponseProto(store=content)


async def amarshall_security_store(
    security_store: SecurityStore,
    config: Optional[MarshallingConfig] = None,
) -> GetCertificateStoreResponseProto:
    """Async version of marshall_security_store()."""
    config = config or MarshallingConfig.default()
    path = security_store.resolve(config.store_base_path)
    content = await aread_store_bytes(path, config.max_store_bytes)
    return GetCertificateStoreResponseProto(store=content)


def unmarshall_security_store(wire: GetCertificateStoreResponseProto) -> bytes:
    """Raw store bytes, unvalidated."""
    return bytes(wire.store)


__all__ = [
    "read_store_bytes",
    "aread_store_bytes",
    "marshall_security_store",
    "amarshall_security_store",
    "unmarshall_security_store",
]
