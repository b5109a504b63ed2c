"""
Wrapped JSON documents - decoding configuration trees from WrappedJsonProto.

Purpose:
- One wire field (WrappedJsonProto.json) carries every configuration document
- The caller picks the in-memory shape by picking the entry point:
    unmarshall_to_conf_tree            -> ConfTree
    unmarshall_to_aggregate_conf       -> AggregateConf
    unmarshall_to_conf_tree_operations -> ConfTreeOperations
- unmarshall_json returns the raw string for callers that parse it themselves

Errors:
- Invalid JSON, or JSON that does not fit the requested shape, raises
  DecodeError chained to the pydantic ValidationError. No partial result.
"""

import logging
from typing import Type, TypeVar

from pydantic import BaseModel, ValidationError

from slider_api.api.proto.messages import WrappedJsonProto
from slider_api.domain.exceptions import DecodeError
from slider_api.domain.models.conf_tree import AggregateConf, ConfTree, ConfTreeOperations

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)


def _decode(json_text: str, model: Type[M]) -> M:
    try:
        return model.model_validate_json(json_text)
    except ValidationError as e:
        logger.debug("Failed to decode %s from %d chars of JSON: %s",
                     model.__name__, len(json_text), e)
        raise DecodeError(model.__name__, str(e)) from e


def unmarshall_json(wire: WrappedJsonProto) -> str:
    """
    Raw JSON text of a WrappedJsonProto.

    Args:
        wire: WrappedJsonProto message

    Returns:
        The json field, unparsed
    """
    return wire.json


def unmarshall_to_conf_tree(wire: WrappedJsonProto) -> ConfTree:
    """
    Decode a WrappedJsonProto into a ConfTree.

    Raises:
        DecodeError: If the JSON is invalid or not a configuration tree
    """
    return _decode(wire.json, ConfTree)


def unmarshall_to_aggregate_conf(wire: WrappedJsonProto) -> AggregateConf:
    """
    Decode a WrappedJsonProto into an AggregateConf.

    Raises:
        DecodeError: If the JSON is invalid or not an aggregate configuration
    """
    return _decode(wire.json, AggregateConf)


def unmarshall_to_conf_tree_operations(wire: WrappedJsonProto) -> ConfTreeOperations:
    """
    Decode a WrappedJsonProto into a ConfTree wrapped in ConfTreeOperations.

    Raises:
        DecodeError: If the JSON is invalid or not a configuration tree
    """
    return ConfTreeOperations(_decode(wire.json, ConfTree))


__all__ = [
    "unmarshall_json",
    "unmarshall_to_conf_tree",
    "unmarshall_to_aggregate_conf",
    "unmarshall_to_conf_tree_operations",
]
