"""
Slider Cluster Messages - protobuf wire envelopes.

Created: 2026-10-17
Status: Active

Purpose:
- Define the wire records exchanged with clients and other cluster nodes
- Expose the generated message classes under stable Python names
- Keep proto2 semantics so every singular field carries a presence bit

Design:
- The schema is declared as a FileDescriptorProto and loaded into a private
  DescriptorPool, so no protoc step is needed at install time
- Field names are the camelCase names of the Slider wire contract
- Only presence matters to the marshalling layer; numbering is fixed here
  for compatibility and must never be reused

Usage:
    from slider_api.api.proto.messages import ContainerInformationProto

    wire = ContainerInformationProto(containerId="container_01", state=3)
    if wire.HasField("exitCode"):
        ...
"""

from google.protobuf import descriptor_pb2, descriptor_pool, message_factory

_Field = descriptor_pb2.FieldDescriptorProto

PROTO_PACKAGE = "org.apache.slider.api"
PROTO_FILE_NAME = "slider_api/SliderClusterMessages.proto"

_OPTIONAL = _Field.LABEL_OPTIONAL
_REQUIRED = _Field.LABEL_REQUIRED
_REPEATED = _Field.LABEL_REPEATED

_BOOL = _Field.TYPE_BOOL
_INT32 = _Field.TYPE_INT32
_INT64 = _Field.TYPE_INT64
_STRING = _Field.TYPE_STRING
_BYTES = _Field.TYPE_BYTES
_MESSAGE = _Field.TYPE_MESSAGE


# ═══════════════════════════════════════════════════════════════════════════════
# Schema
# ═══════════════════════════════════════════════════════════════════════════════

# (message name, [(field name, number, type, label, nested type name)])
_SCHEMA = [
    ("ApplicationLivenessInformationProto", [
        ("allRequestsSatisfied", 1, _BOOL, _OPTIONAL, None),
        ("requestsOutstanding", 2, _INT32, _OPTIONAL, None),
    ]),
    ("ComponentInformationProto", [
        ("name", 1, _STRING, _OPTIONAL, None),
        ("priority", 2, _INT32, _OPTIONAL, None),
        ("desired", 3, _INT32, _OPTIONAL, None),
        ("actual", 4, _INT32, _OPTIONAL, None),
        ("releasing", 5, _INT32, _OPTIONAL, None),
        ("requested", 6, _INT32, _OPTIONAL, None),
        ("failed", 7, _INT32, _OPTIONAL, None),
        ("started", 8, _INT32, _OPTIONAL, None),
        ("startFailed", 9, _INT32, _OPTIONAL, None),
        ("completed", 10, _INT32, _OPTIONAL, None),
        ("totalRequested", 11, _INT32, _OPTIONAL, None),
        ("failureMessage", 12, _STRING, _OPTIONAL, None),
        ("placementPolicy", 13, _INT32, _OPTIONAL, None),
        ("containers", 14, _STRING, _REPEATED, None),
        ("failedRecently", 15, _INT32, _OPTIONAL, None),
        ("nodeFailed", 16, _INT32, _OPTIONAL, None),
        ("preempted", 17, _INT32, _OPTIONAL, None),
    ]),
    ("ContainerInformationProto", [
        ("containerId", 1, _STRING, _OPTIONAL, None),
        ("component", 2, _STRING, _OPTIONAL, None),
        ("released", 3, _BOOL, _OPTIONAL, None),
        ("state", 4, _INT32, _OPTIONAL, None),
        ("exitCode", 5, _INT32, _OPTIONAL, None),
        ("diagnostics", 6, _STRING, _OPTIONAL, None),
        ("createTime", 7, _INT64, _OPTIONAL, None),
        ("startTime", 8, _INT64, _OPTIONAL, None),
        ("output", 9, _STRING, _REPEATED, None),
        ("host", 10, _STRING, _OPTIONAL, None),
        ("hostURL", 11, _STRING, _OPTIONAL, None),
        ("placement", 12, _STRING, _OPTIONAL, None),
        ("appVersion", 13, _STRING, _OPTIONAL, None),
    ]),
    ("GetCertificateStoreResponseProto", [
        ("store", 1, _BYTES, _REQUIRED, None),
    ]),
    ("WrappedJsonProto", [
        ("json", 1, _STRING, _REQUIRED, None),
    ]),
    ("GetLiveContainersResponseProto", [
        ("containers", 1, _MESSAGE, _REPEATED, "ContainerInformationProto"),
    ]),
]


def _build_file_descriptor() -> descriptor_pb2.FileDescriptorProto:
    """Translate the schema table into a proto2 FileDescriptorProto."""
    file_proto = descriptor_pb2.FileDescriptorProto(
        name=PROTO_FILE_NAME,
        package=PROTO_PACKAGE,
        syntax="proto2",
    )
    for message_name, fields in _SCHEMA:
        message = file_proto.message_type.add(name=message_name)
        for name, number, field_type, label, type_name in fields:
            field = message.field.add(
                name=name,
                number=number,
                type=field_type,
                label=label,
            )
            if type_name:
                field.type_name = f".{PROTO_PACKAGE}.{type_name}"
    return file_proto


_POOL = descriptor_pool.DescriptorPool()
_POOL.AddSerializedFile(_build_file_descriptor().SerializeToString())


def _message_class(name: str):
    return message_factory.GetMessageClass(
        _POOL.FindMessageTypeByName(f"{PROTO_PACKAGE}.{name}")
    )


# ═══════════════════════════════════════════════════════════════════════════════
# Message Classes
# ═══════════════════════════════════════════════════════════════════════════════

ApplicationLivenessInformationProto = _message_class("ApplicationLivenessInformationProto")
ComponentInformationProto = _message_class("ComponentInformationProto")
ContainerInformationProto = _message_class("ContainerInformationProto")
GetCertificateStoreResponseProto = _message_class("GetCertificateStoreResponseProto")
WrappedJsonProto = _message_class("WrappedJsonProto")
GetLiveContainersResponseProto = _message_class("GetLiveContainersResponseProto")

# Short names used by the REST layer
LivenessInfo = ApplicationLivenessInformationProto
ComponentInfo = ComponentInformationProto
ContainerInfo = ContainerInformationProto
CertificateStoreResponse = GetCertificateStoreResponseProto
WrappedJson = WrappedJsonProto
GetLiveContainersResponse = GetLiveContainersResponseProto


__all__ = [
    "PROTO_PACKAGE",
    "ApplicationLivenessInformationProto",
    "ComponentInformationProto",
    "ContainerInformationProto",
    "GetCertificateStoreResponseProto",
    "WrappedJsonProto",
    "GetLiveContainersResponseProto",
    "LivenessInfo",
    "ComponentInfo",
    "ContainerInfo",
    "CertificateStoreResponse",
    "WrappedJson",
    "GetLiveContainersResponse",
]
