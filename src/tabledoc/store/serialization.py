"""JSON encoding of entities and tables.

Record keys are written in camelCase and read back case-insensitively, so
``first_name``, ``firstName`` and ``FirstName`` all address the same field.
"""

from __future__ import annotations

import dataclasses
import functools
import json
from typing import Any, Iterable, TypeVar, get_type_hints

from ..core.types import Entity

E = TypeVar("E", bound=Entity)


def to_camel_case(name: str) -> str:
    """Convert a snake_case field name to camelCase."""
    head, *rest = name.split("_")
    return head + "".join(part[:1].upper() + part[1:] for part in rest)


def _fold(key: str) -> str:
    return key.replace("_", "").lower()


@functools.cache
def _field_types(cls: type) -> dict[str, Any]:
    return get_type_hints(cls)


def encode_entity(entity: Entity) -> dict[str, Any]:
    """Convert an entity into a JSON-ready mapping with camelCase keys."""
    return _encode_fields(entity)


def _encode_fields(obj: Any) -> dict[str, Any]:
    return {
        to_camel_case(f.name): _encode_value(getattr(obj, f.name))
        for f in dataclasses.fields(obj)
    }


def _encode_value(value: Any) -> Any:
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return _encode_fields(value)
    if isinstance(value, (list, tuple)):
        return [_encode_value(v) for v in value]
    if isinstance(value, dict):
        return {key: _encode_value(v) for key, v in value.items()}
    return value


def encode_entities(entities: Iterable[Entity]) -> str:
    """Serialize entities into the raw text of a table."""
    return json.dumps([encode_entity(e) for e in entities], ensure_ascii=False)


def _decode_fields(cls: type, record: Any) -> dict[str, Any]:
    if not isinstance(record, dict):
        raise ValueError(f"Expected a JSON object, got {type(record).__name__}")

    types = _field_types(cls)
    by_key = {_fold(f.name): f.name for f in dataclasses.fields(cls) if f.init}
    kwargs = {}
    for key, value in record.items():
        name = by_key.get(_fold(key))
        if name is None:
            continue
        field_type = types.get(name)
        if isinstance(field_type, type) and dataclasses.is_dataclass(field_type) and value is not None:
            value = field_type(**_decode_fields(field_type, value))
        kwargs[name] = value
    return kwargs


def decode_entity(entity_type: type[E], record: Any) -> E:
    """Build an entity from one decoded JSON record.

    Nested dataclass fields are rebuilt from their objects with the same
    key rules.

    Args:
        entity_type: Dataclass type to instantiate.
        record: Decoded JSON value; must be an object.

    Returns:
        New entity instance. Keys without a matching field are ignored.

    Raises:
        ValueError: If the record is not an object or its id is not an integer.
    """
    kwargs = _decode_fields(entity_type, record)

    entity_id = kwargs.get("id", 0)
    if not isinstance(entity_id, int) or isinstance(entity_id, bool):
        raise ValueError(f"Entity id must be an integer, got {entity_id!r}")

    return entity_type(**kwargs)


def _parse(text: str) -> Any:
    try:
        return json.loads(text)
    except RecursionError as e:
        raise ValueError("JSON nesting is too deep") from e


def decode_entities(entity_type: type[E], raw: str) -> list[E]:
    """Deserialize the raw text of a table into entities.

    Raises:
        ValueError: If the text is not a JSON array of records.
    """
    data = _parse(raw)
    if not isinstance(data, list):
        raise ValueError(f"Expected a JSON array, got {type(data).__name__}")
    return [decode_entity(entity_type, record) for record in data]


def encode_document(tables: dict[str, str]) -> str:
    """Serialize the whole table mapping into the on-disk document text."""
    return json.dumps(
        {name: json.loads(raw) for name, raw in tables.items()},
        ensure_ascii=False,
        indent=2,
    )


def decode_document(text: str) -> dict[str, str]:
    """Parse the on-disk document into a table-name to raw-text mapping.

    Raises:
        ValueError: If the text is not a JSON object.
    """
    data = _parse(text)
    if not isinstance(data, dict):
        raise ValueError(f"Expected a JSON object at top level, got {type(data).__name__}")
    return {name: json.dumps(value, ensure_ascii=False) for name, value in data.items()}
