"""
Marshalling Configuration.

Settings for the REST type marshalling layer. The marshallers are pure
functions; the only tunable behaviour is how security store files are located
and how much of one may be loaded into memory.

Usage:
    from slider_api.config import MarshallingConfig

    # Library default: unbounded reads, paths used as given
    config = MarshallingConfig.default()

    # For testing
    config = MarshallingConfig.for_testing(store_base_path=tmp_path)

    # From environment
    config = MarshallingConfig.from_env()
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional

ENV_MAX_STORE_BYTES = "SLIDER_STORE_MAX_BYTES"
ENV_STORE_BASE_PATH = "SLIDER_STORE_BASE_PATH"

# Keystores and truststores are a few KB; 1 MiB leaves room for large chains
TESTING_MAX_STORE_BYTES = 1024 * 1024


@dataclass
class MarshallingConfig:
    """
    Marshalling layer configuration.

    Attributes:
        max_store_bytes: Upper bound on a security store read, None for no bound
        store_base_path: Directory relative store paths are resolved against
    """
    max_store_bytes: Optional[int] = None
    store_base_path: Optional[Path] = None

    def __post_init__(self):
        if self.store_base_path is not None and not isinstance(self.store_base_path, Path):
            self.store_base_path = Path(self.store_base_path)
        self.validate()

    @classmethod
    def default(cls) -> "MarshallingConfig":
        """Unbounded reads with paths used as given."""
        return cls()

    @classmethod
    def for_testing(cls, store_base_path: Optional[Path] = None) -> "MarshallingConfig":
        """Config for unit tests."""
        return cls(
            max_store_bytes=TESTING_MAX_STORE_BYTES,
            store_base_path=store_base_path,
        )

    @classmethod
    def from_env(cls) -> "MarshallingConfig":
        """
        Create config from environment variables.

        Environment variables:
            SLIDER_STORE_MAX_BYTES: Store read bound in bytes (unset = unbounded)
            SLIDER_STORE_BASE_PATH: Base directory for relative store paths
        """
        max_bytes = os.getenv(ENV_MAX_STORE_BYTES)
        base_path = os.getenv(ENV_STORE_BASE_PATH)
        config = cls(
            max_store_bytes=int(max_bytes) if max_bytes else None,
            store_base_path=Path(base_path) if base_path else None,
        )
        config.validate()
        return config

    def validate(self) -> None:
        if self.max_store_bytes is not None and self.max_store_bytes < 0:
            raise ValueError(f"max_store_bytes must be >= 0, got {self.max_store_bytes}")

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "max_store_bytes": self.max_store_bytes,
            "store_base_path": str(self.store_base_path) if self.store_base_path else None,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MarshallingConfig":
        """Deserialize from dictionary."""
        base_path = data.get("store_base_path")
        return cls(
            max_store_bytes=data.get("max_store_bytes"),
            store_base_path=Path(base_path) if base_path else None,
        )
