"""
Unit tests for security store transfer.

Tests:
- Sync and async whole-file reads
- Empty files
- OSError propagation for missing files
- Size bound from MarshallingConfig
- Handle resolution against a base directory
"""

import os

import pytest

from slider_api.api.proto.messages import GetCertificateStoreResponseProto
from slider_api.api.proto.store_transfer import (
    amarshall_security_store,
    aread_store_bytes,
    marshall_security_store,
    read_store_bytes,
    unmarshall_security_store,
)
from slider_api.config import MarshallingConfig
from slider_api.domain.exceptions import MarshallingError, StoreTooLargeError
from slider_api.domain.models import SecurityStore, StoreType

# Bytes that are not valid UTF-8 and include every byte value
KEYSTORE_BYTES = bytes(range(256)) * 4 + b"\xfe\xed\xfe\xed"


@pytest.fixture
def keystore_file(tmp_path):
    path = tmp_path / "keystore.p12"
    path.write_bytes(KEYSTORE_BYTES)
    return path


@pytest.fixture
def empty_file(tmp_path):
    path = tmp_path / "empty.jks"
    path.write_bytes(b"")
    return path


class TestReadStoreBytes:
    """Tests for the sync file read."""

    def test_reads_whole_file(self, keystore_file):
        assert read_store_bytes(keystore_file) == KEYSTORE_BYTES

    def test_empty_file(self, empty_file):
        assert read_store_bytes(empty_file) == b""

    def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_store_bytes(tmp_path / "missing.jks")

    def test_at_limit_allowed(self, keystore_file):
        assert read_store_bytes(keystore_file, max_bytes=len(KEYSTORE_BYTES)) == KEYSTORE_BYTES

    def test_over_limit_rejected(self, keystore_file):
        with pytest.raises(StoreTooLargeError) as exc_info:
            read_store_bytes(keystore_file, max_bytes=len(KEYSTORE_BYTES) - 1)

        assert exc_info.value.limit == len(KEYSTORE_BYTES) - 1
        assert exc_info.value.path == str(keystore_file)
        assert f"more than {len(KEYSTORE_BYTES) - 1} bytes" in str(exc_info.value)

    def test_zero_limit_allows_empty_file(self, empty_file):
        assert read_store_bytes(empty_file, max_bytes=0) == b""

    def test_negative_limit_rejected(self, empty_file):
        """Test a negative bound is a ValueError, not a size rejection."""
        with pytest.raises(ValueError) as exc_info:
            read_store_bytes(empty_file, max_bytes=-1)

        assert not isinstance(exc_info.value, StoreTooLargeError)


class TestAsyncReadStoreBytes:
    """Tests for the aiofiles-backed read."""

    @pytest.mark.asyncio
    async def test_reads_whole_file(self, keystore_file):
        assert await aread_store_bytes(keystore_file) == KEYSTORE_BYTES

    @pytest.mark.asyncio
    async def test_empty_file(self, empty_file):
        assert await aread_store_bytes(empty_file) == b""

    @pytest.mark.asyncio
    async def test_missing_file_raises_oserror(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await aread_store_bytes(tmp_path / "missing.jks")

    @pytest.mark.asyncio
    async def test_over_limit_rejected(self, keystore_file):
        with pytest.raises(StoreTooLargeError):
            await aread_store_bytes(keystore_file, max_bytes=10)

    @pytest.mark.asyncio
    async def test_negative_limit_rejected(self, empty_file):
        with pytest.raises(ValueError):
            await aread_store_bytes(empty_file, max_bytes=-1)


class TestMarshallSecurityStore:
    """Tests for embedding stores in GetCertificateStoreResponseProto."""

    def test_round_trip(self, keystore_file, wire_round_trip):
        """Test bytes survive marshall -> serialize -> unmarshall unchanged."""
        wire = wire_round_trip(marshall_security_store(SecurityStore.keystore(keystore_file)))

        assert unmarshall_security_store(wire) == KEYSTORE_BYTES

    def test_empty_store_both_directions(self, empty_file, wire_round_trip):
        """Test a 0-byte file gives empty bytes, not an error."""
        wire = marshall_security_store(SecurityStore.truststore(empty_file))

        assert wire.HasField("store")
        assert unmarshall_security_store(wire_round_trip(wire)) == b""

    def test_missing_file_propagates(self, tmp_path):
        """Test OSError is not wrapped in a marshalling error."""
        store = SecurityStore.keystore(tmp_path / "absent.p12")

        with pytest.raises(OSError) as exc_info:
            marshall_security_store(store)

        assert not isinstance(exc_info.value, MarshallingError)

    @pytest.mark.skipif(
        not hasattr(os, "geteuid") or os.geteuid() == 0,
        reason="root can read files regardless of permissions",
    )
    def test_permission_denied_propagates(self, keystore_file):
        keystore_file.chmod(0)
        try:
            with pytest.raises(PermissionError):
                marshall_security_store(SecurityStore.keystore(keystore_file))
        finally:
            keystore_file.chmod(0o600)

    def test_relative_handle_uses_base_path(self, keystore_file, tmp_path):
        config = MarshallingConfig(store_base_path=tmp_path)
        wire = marshall_security_store(SecurityStore.keystore("keystore.p12"), config)

        assert wire.store == KEYSTORE_BYTES

    def test_absolute_handle_ignores_base_path(self, keystore_file, tmp_path):
        config = MarshallingConfig(store_base_path=tmp_path / "elsewhere")
        wire = marshall_security_store(SecurityStore.keystore(keystore_file), config)

        assert wire.store == KEYSTORE_BYTES

    def test_config_bound_applies(self, keystore_file):
        config = MarshallingConfig(max_store_bytes=16)

        with pytest.raises(StoreTooLargeError):
            marshall_security_store(SecurityStore.keystore(keystore_file), config)

    def test_testing_config_accepts_small_store(self, keystore_file, tmp_path):
        config = MarshallingConfig.for_testing(store_base_path=tmp_path)
        wire = marshall_security_store(SecurityStore.keystore("keystore.p12"), config)

        assert len(wire.store) == len(KEYSTORE_BYTES)

    @pytest.mark.asyncio
    async def test_async_round_trip(self, keystore_file, tmp_path):
        config = MarshallingConfig(store_base_path=tmp_path)
        wire = await amarshall_security_store(SecurityStore.keystore("keystore.p12"), config)

        assert unmarshall_security_store(wire) == KEYSTORE_BYTES

    @pytest.mark.asyncio
    async def test_async_missing_file_propagates(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            await amarshall_security_store(SecurityStore.keystore(tmp_path / "absent.p12"))


class TestUnmarshallSecurityStore:
    """Tests for the receiving side."""

    def test_bytes_returned_verbatim(self):
        payload = b"\x00\x01not-a-keystore\xff"
        assert unmarshall_security_store(GetCertificateStoreResponseProto(store=payload)) == payload

    def test_returns_bytes_type(self):
        result = unmarshall_security_store(GetCertificateStoreResponseProto(store=b"abc"))
        assert isinstance(result, bytes)


class TestSecurityStoreHandle:
    """Tests for the SecurityStore value."""

    def test_factories_set_type(self, tmp_path):
        assert SecurityStore.keystore(tmp_path / "k").store_type is StoreType.KEYSTORE
        assert SecurityStore.truststore(tmp_path / "t").store_type is StoreType.TRUSTSTORE

    def test_string_path_normalized(self):
        store = SecurityStore(file="certs/keystore.p12")
        assert store.resolve() == store.file
        assert str(store.file) == os.path.join("certs", "keystore.p12")

    def test_resolve_relative(self, tmp_path):
        store = SecurityStore.keystore("keystore.p12")
        assert store.resolve(tmp_path) == tmp_path / "keystore.p12"
