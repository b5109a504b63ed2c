"""
Security store handle.

A SecurityStore names a keystore or truststore file held by the
application master's credential store. Only the handle lives here; reading
the file is the job of the store transfer codec.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional, Union


class StoreType(Enum):
    """Kind of certificate store."""
    KEYSTORE = "keystore"
    TRUSTSTORE = "truststore"


@dataclass(frozen=True)
class SecurityStore:
    """
    Handle to a certificate store file.

    Attributes:
        file: Store file; relative paths are resolved against a base directory
        store_type: Keystore or truststore
    """
    file: Path
    store_type: StoreType = StoreType.KEYSTORE

    def __post_init__(self):
        if not isinstance(self.file, Path):
            object.__setattr__(self, "file", Path(self.file))

    @classmethod
    def keystore(cls, file: Union[str, Path]) -> "SecurityStore":
        return cls(file=Path(file), store_type=StoreType.KEYSTORE)

    @classmethod
    def truststore(cls, file: Union[str, Path]) -> "SecurityStore":
        return cls(file=Path(file), store_type=StoreType.TRUSTSTORE)

    def resolve(self, base_path: Optional[Path] = None) -> Path:
        """
        Resolve the handle to the file path to read.

        Args:
            base_path: Directory that relative store paths live under

        Returns:
            Absolute paths unchanged, relative ones joined to base_path
        """
        if base_path is None or self.file.is_absolute():
            return self.file
        return Path(base_path) / self.file
