"""
Slider REST types - protobuf marshalling for the application master API.

Translates the status and configuration model of a Slider application
master to and from its protobuf wire records:
- Liveness, component and container status values
- Wrapped JSON configuration documents (ConfTree, AggregateConf)
- Certificate store files

Architecture follows:
- Immutable domain values, explicit optional fields
- One named conversion per entity and direction
- Errors propagate; nothing is retried or swallowed
"""

__version__ = "0.1.0"

# Domain Models
from slider_api.domain.models import (
    ApplicationLivenessInformation,
    ComponentInformation,
    ContainerInformation,
    SecurityStore,
    StoreType,
    ConfTree,
    AggregateConf,
    ConfTreeOperations,
)

# Errors
from slider_api.domain.exceptions import (
    MarshallingError,
    DecodeError,
    StoreTooLargeError,
    MissingOptionError,
)

# Configuration
from slider_api.config import MarshallingConfig

__all__ = [
    "__version__",
    "ApplicationLivenessInformation",
    "ComponentInformation",
    "ContainerInformation",
    "SecurityStore",
    "StoreType",
    "ConfTree",
    "AggregateConf",
    "ConfTreeOperations",
    "MarshallingError",
    "DecodeError",
    "StoreTooLargeError",
    "MissingOptionError",
    "MarshallingConfig",
]
