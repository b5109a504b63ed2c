"""
REST Type Marshalling - domain status values <-> protobuf records.

Created: 2026-10-17
Status: Active

Purpose:
- One explicitly named marshall/unmarshall pair per entity
- Field tables declare which wire fields are optional; field_mapping.py
  applies the presence rules
- Configuration documents and security stores are delegated to
  json_documents.py and store_transfer.py and re-exported here

Architecture:
    REST / RPC dispatch
         │
         ▼
    marshalling.py  (per-entity composition)
         │
         ├──► field_mapping.py    (scalars + sequences)
         ├──► json_documents.py   (WrappedJsonProto)
         └──► store_transfer.py   (GetCertificateStoreResponseProto)

Usage:
    from slider_api.api.proto.marshalling import marshall_component, unmarshall_component

    wire = marshall_component(info)
    payload = wire.SerializeToString()
"""

from typing import Iterable, List

from slider_api.api.proto.field_mapping import (
    optional,
    read_first_present,
    read_messages,
    read_scalars,
    read_sequence,
    required,
    write_messages,
    write_scalars,
    write_sequence,
)
from slider_api.api.proto.json_documents import (
    unmarshall_json,
    unmarshall_to_aggregate_conf,
    unmarshall_to_conf_tree,
    unmarshall_to_conf_tree_operations,
)
from slider_api.api.proto.messages import (
    ApplicationLivenessInformationProto,
    ComponentInformationProto,
    ContainerInformationProto,
    GetLiveContainersResponseProto,
)
from slider_api.api.proto.store_transfer import (
    amarshall_security_store,
    marshall_security_store,
    unmarshall_security_store,
)
from slider_api.domain.models import (
    ApplicationLivenessInformation,
    ComponentInformation,
    ContainerInformation,
)


# ═══════════════════════════════════════════════════════════════════════════════
# Field Tables
# ═══════════════════════════════════════════════════════════════════════════════

LIVENESS_FIELDS = (
    required("all_requests_satisfied", "allRequestsSatisfied"),
    required("requests_outstanding", "requestsOutstanding"),
)

COMPONENT_FIELDS = (
    required("name", "name"),
    required("priority", "priority"),
    required("placement_policy", "placementPolicy"),
    required("actual", "actual"),
    required("completed", "completed"),
    required("desired", "desired"),
    required("failed", "failed"),
    required("releasing", "releasing"),
    required("requested", "requested"),
    required("started", "started"),
    required("start_failed", "startFailed"),
    required("total_requested", "totalRequested"),
    required("node_failed", "nodeFailed"),
    required("preempted", "preempted"),
    required("failed_recently", "failedRecently"),
    optional("failure_message", "failureMessage"),
)

# host is absent on purpose: it has two wire sources, see unmarshall_container()
CONTAINER_FIELDS = (
    required("container_id", "containerId"),
    required("component", "component"),
    required("app_version", "appVersion"),
    required("create_time", "createTime"),
    required("start_time", "startTime"),
    required("state", "state"),
    optional("released", "released"),
    optional("exit_code", "exitCode"),
    optional("diagnostics", "diagnostics"),
    optional("placement", "placement"),
)

# Checked in this order; the full URL wins over the short host name
HOST_SOURCES = ("hostURL", "host")


# ═══════════════════════════════════════════════════════════════════════════════
# Liveness
# ═══════════════════════════════════════════════════════════════════════════════


def marshall_liveness(info: ApplicationLivenessInformation) -> ApplicationLivenessInformationProto:
    wire = ApplicationLivenessInformationProto()
    write_scalars(info, wire, LIVENESS_FIELDS)
    return wire


def unmarshall_liveness(wire: ApplicationLivenessInformationProto) -> ApplicationLivenessInformation:
    return ApplicationLivenessInformation(**read_scalars(wire, LIVENESS_FIELDS))


# ═══════════════════════════════════════════════════════════════════════════════
# Components
# ═══════════════════════════════════════════════════════════════════════════════


def marshall_component(info: ComponentInformation) -> ComponentInformationProto:
    """
    Convert a component status to its wire record.

    Counters are always written. failureMessage is written only when set and
    containers only when the domain list is not None.
    """
    wire = ComponentInformationProto()
    write_scalars(info, wire, COMPONENT_FIELDS)
    write_sequence(wire, "containers", info.containers)
    return wire


def unmarshall_component(wire: ComponentInformationProto) -> ComponentInformation:
    """
    Convert a wire record to a component status.

    A record without failureMessage yields failure_message=None, and
    containers is always a tuple (empty when the wire list is empty).
    """
    return ComponentInformation(
        containers=tuple(read_sequence(wire, "containers")),
        **read_scalars(wire, COMPONENT_FIELDS),
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Containers
# ═══════════════════════════════════════════════════════════════════════════════


def marshall_container(info: ContainerInformation) -> ContainerInformationProto:
    """
    Convert a container status to its wire record.

    The domain host is written to the short host field; hostURL is only
    ever produced by other writers.
    """
    wire = ContainerInformationProto()
    write_scalars(info, wire, CONTAINER_FIELDS)
    if info.host is not None:
        wire.host = info.host
    write_sequence(wire, "output", info.output)
    return wire


def unmarshall_container(wire: ContainerInformationProto) -> ContainerInformation:
    """
    Convert a wire record to a container status.

    host is taken from hostURL when that field is present, otherwise from
    host, otherwise left as None. The choice does not depend on the order
    the fields were set in.
    """
    return ContainerInformation(
        host=read_first_present(wire, *HOST_SOURCES),
        output=tuple(read_sequence(wire, "output")),
        **read_scalars(wire, CONTAINER_FIELDS),
    )


def marshall_live_containers(infos: Iterable[ContainerInformation]) -> GetLiveContainersResponseProto:
    wire = GetLiveContainersResponseProto()
    write_messages(wire, "containers", infos, marshall_container)
    return wire


def unmarshall_live_containers(wire: GetLiveContainersResponseProto) -> List[ContainerInformation]:
    return read_messages(wire, "containers", unmarshall_container)


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
