"""
Domain models for Slider REST types.

Status values (liveness, component, container) are frozen dataclasses;
configuration documents are pydantic models.
"""

from .liveness import ApplicationLivenessInformation
from .component import ComponentInformation
from .container import ContainerInformation
from .security_store import SecurityStore, StoreType
from .conf_tree import (
    CONF_TREE_SCHEMA,
    AggregateConf,
    ConfTree,
    ConfTreeOperations,
)

__all__ = [
    "ApplicationLivenessInformation",
    "ComponentInformation",
    "ContainerInformation",
    "SecurityStore",
    "StoreType",
    "CONF_TREE_SCHEMA",
    "AggregateConf",
    "ConfTree",
    "ConfTreeOperations",
]
