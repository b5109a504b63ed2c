"""
Protobuf marshalling for Slider REST types.

Provides:
- Wire message classes (messages.py)
- Presence-aware field mapping (field_mapping.py)
- Wrapped JSON configuration documents (json_documents.py)
- Security store transfer (store_transfer.py)
- Per-entity marshall/unmarshall functions (marshalling.py)

Usage:
    from slider_api.api.proto import marshall_container, unmarshall_container

    wire = marshall_container(info)
    assert unmarshall_container(wire) == info
"""

from .marshalling import (
    marshall_liveness,
    unmarshall_liveness,
    marshall_component,
    unmarshall_component,
    marshall_container,
    unmarshall_container,
    marshall_live_containers,
    unmarshall_live_containers,
    marshall_security_store,
    amarshall_security_store,
    unmarshall_security_store,
    unmarshall_json,
    unmarshall_to_conf_tree,
    unmarshall_to_aggregate_conf,
    unmarshall_to_conf_tree_operations,
)

__all__ = [
    "marshall_liveness",
    "unmarshall_liveness",
    "marshall_component",
    "unmarshall_component",
    "marshall_container",
    "unmarshall_container",
    "marshall_live_containers",
    "unmarshall_live_containers",
    "marshall_security_store",
    "amarshall_security_store",
    "unmarshall_security_store",
    "unmarshall_json",
    "unmarshall_to_conf_tree",
    "unmarshall_to_aggregate_conf",
    "unmarshall_to_conf_tree_operations",
]
