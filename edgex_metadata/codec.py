"""JSON encoding and decoding of core-metadata entities.

Decoding never raises: malformed or mismatching payloads are logged and
reported as None, leaving the caller to decide what an undecodable body
means for its operation.
"""

import json
import logging
from collections.abc import Iterable
from typing import TypeVar

from pydantic import TypeAdapter, ValidationError

from edgex_metadata.schema import EdgexModel

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=EdgexModel)


def read(model: type[M], data: bytes | str) -> M | None:
    """Decode a JSON document into a model instance.

    Args:
        model: Model class to decode into.
        data: JSON payload.

    Returns:
        Decoded instance, or None if the payload is not valid for the model.
    """
    try:
        return model.model_validate_json(data)
    except ValidationError as e:
        logger.error("Unable to decode %s: %s", model.__name__, e)
        return None


def read_list(model: type[M], data: bytes | str) -> list[M] | None:
    """Decode a JSON array into a list of model instances.

    Args:
        model: Model class of the list elements.
        data: JSON payload.

    Returns:
        Decoded list, or None if the payload is not a valid array of the model.
    """
    try:
        return TypeAdapter(list[model]).validate_json(data)  # type: ignore[valid-type]
    except ValidationError as e:
        logger.error("Unable to decode list of %s: %s", model.__name__, e)
        return None


def to_dict(obj: EdgexModel, include_id: bool) -> dict[str, object]:
    """Convert a model to its wire representation.

    Unset (None) fields are omitted. Without ``include_id`` the object is
    being created: its id is dropped and nested entities listed in
    ``reference_fields`` are reduced to name references.

    Args:
        obj: Entity to convert.
        include_id: Whether to keep the id field.

    Returns:
        Dictionary with camelCase keys.
    """
    payload = obj.model_dump(mode="json", by_alias=True, exclude_none=True)
    if not include_id:
        payload.pop("id", None)
        for field_name in obj.reference_fields:
            ref = getattr(obj, field_name)
            key = type(obj).model_fields[field_name].alias or field_name
            if ref is not None:
                payload[key] = {"name": ref.name}
    return payload


def write(obj: EdgexModel, include_id: bool) -> bytes:
    """Encode a model as a JSON document.

    Args:
        obj: Entity to encode.
        include_id: Whether the id is part of the document (updates) or
            left to the server (creates).

    Returns:
        UTF-8 JSON bytes.
    """
    return json.dumps(to_dict(obj, include_id)).encode("utf-8")


def write_device_sparse(
    name: str | None = None,
    device_id: str | None = None,
    description: str | None = None,
    labels: Iterable[str] | None = None,
    profile_name: str | None = None,
) -> bytes:
    """Encode a partial device document for an update.

    Only the arguments that are not None appear in the document.

    Returns:
        UTF-8 JSON bytes.
    """
    payload: dict[str, object] = {}
    if name is not None:
        payload["name"] = name
    if device_id is not None:
        payload["id"] = device_id
    if description is not None:
        payload["description"] = description
    if labels is not None:
        payload["labels"] = list(labels)
    if profile_name is not None:
        payload["profile"] = {"name": profile_name}
    return json.dumps(payload).encode("utf-8")


__all__ = ["read", "read_list", "to_dict", "write", "write_device_sparse"]
