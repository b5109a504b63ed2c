"""
Field Mapping - presence-aware copying between domain values and wire records.

Created: 2026-10-17
Status: Active

Purpose:
- Single source of truth for optional vs. required field handling
- Used by every per-entity marshaller in marshalling.py
- Keeps the entity marshallers declarative (tables of FieldSpec)

Rules:
- Scalars, outbound: optional + None -> not written, the presence bit stays
  clear. Required + None -> written with the wire field's zero value.
- Scalars, inbound: optional -> copied only if the presence bit is set,
  otherwise the domain default (None) is kept. Required -> always copied.
- Sequences, outbound: None -> untouched; present (even empty) -> appended
  in order.
- Sequences, inbound: always a list, empty when the wire list is empty.
- No type coercion in either direction; protobuf rejects mismatched types.
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, TypeVar

from google.protobuf.message import Message

T = TypeVar("T")


@dataclass(frozen=True)
class FieldSpec:
    """
    Mapping of one domain attribute to one wire field.

    Attributes:
        domain_attr: Attribute name on the domain value
        wire_field: Field name on the protobuf message
        optional: Whether the wire presence bit carries the domain None
    """
    domain_attr: str
    wire_field: str
    optional: bool = False


def required(domain_attr: str, wire_field: str) -> FieldSpec:
    return FieldSpec(domain_attr, wire_field, optional=False)


def optional(domain_attr: str, wire_field: str) -> FieldSpec:
    return FieldSpec(domain_attr, wire_field, optional=True)


# ═══════════════════════════════════════════════════════════════════════════════
# Scalars
# ═══════════════════════════════════════════════════════════════════════════════


def zero_value(wire: Message, wire_field: str) -> Any:
    """Declared default of a wire field ("" / 0 / False)."""
    return wire.DESCRIPTOR.fields_by_name[wire_field].default_value


def write_scalars(domain: Any, wire: Message, specs: Iterable[FieldSpec]) -> None:
    """
    Copy scalar attributes from a domain value onto a wire message.

    Args:
        domain: Source domain value
        wire: Destination message, modified in place
        specs: Field mappings to apply
    """
    for spec in specs:
        value = getattr(domain, spec.domain_attr)
        if value is None:
            if spec.optional:
                continue
            value = zero_value(wire, spec.wire_field)
        setattr(wire, spec.wire_field, value)


def read_scalars(wire: Message, specs: Iterable[FieldSpec]) -> Dict[str, Any]:
    """
    Collect scalar fields from a wire message as domain keyword arguments.

    Absent optional fields produce no entry, so the domain value keeps its
    unset default.

    Returns:
        Mapping of domain attribute name to wire value
    """
    fields: Dict[str, Any] = {}
    for spec in specs:
        if spec.optional and not wire.HasField(spec.wire_field):
            continue
        fields[spec.domain_attr] = getattr(wire, spec.wire_field)
    return fields


def read_first_present(wire: Message, *wire_fields: str) -> Optional[Any]:
    """
    Value of the first optional field, in the given order, whose presence bit is set.

    Returns:
        The field value, or None when none of the fields is present
    """
    for wire_field in wire_fields:
        if wire.HasField(wire_field):
            return getattr(wire, wire_field)
    return None


# ═══════════════════════════════════════════════════════════════════════════════
# Sequences
# ═══════════════════════════════════════════════════════════════════════════════


def write_sequence(wire: Message, wire_field: str, values: Optional[Sequence[Any]]) -> None:
    """Append values to a repeated field; None leaves the field untouched."""
    if values is None:
        return
    getattr(wire, wire_field).extend(values)


def read_sequence(wire: Message, wire_field: str) -> List[Any]:
    """Contents of a repeated field as a new list, never None."""
    return list(getattr(wire, wire_field))


def write_messages(
    wire: Message,
    wire_field: str,
    items: Optional[Iterable[T]],
    marshall: Callable[[T], Message],
) -> None:
    """Marshall each item and append it to a repeated message field."""
    if items is None:
        return
    repeated = getattr(wire, wire_field)
    for item in items:
        repeated.append(marshall(item))


def read_messages(
    wire: Message,
    wire_field: str,
    unmarshall: Callable[[Message], T],
) -> List[T]:
    """Unmarshall every element of a repeated message field, in order."""
    repeated = getattr(wire, wire_field)
    return [unmarshall(item) for item in repeated]


__all__ = [
    "FieldSpec",
    "required",
    "optional",
    "zero_value",
    "write_scalars",
    "read_scalars",
    "read_first_present",
    "write_sequence",
    "read_sequence",
    "write_messages",
    "read_messages",
]
