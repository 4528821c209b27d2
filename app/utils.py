from __future__ import annotations

from dataclasses import field, fields, is_dataclass
from typing import Any
from xml.etree.ElementTree import Element

JSONRecord = dict[str, Any]

# Field kinds understood by decode_element().
TEXT = "text"
ATTRIBUTE = "attribute"
REFERENCE = "reference"
RECORD = "record"
SEQUENCE = "sequence"


def text(tag: str | None = None) -> Any:
    """Text content of the child element ``tag`` (defaults to the field name)."""
    return field(default=None, metadata={"kind": TEXT, "tag": tag})


def attribute(name: str | None = None) -> Any:
    """Attribute of the element the record is decoded from."""
    return field(default=None, metadata={"kind": ATTRIBUTE, "tag": name})


def reference(tag: str | None = None, attr: str = "id") -> Any:
    """Foreign-key reference: the identifier attribute of a child element.

    The referenced entity is never resolved, only its id is kept.
    """
    return field(default=None, metadata={"kind": REFERENCE, "tag": tag, "attr": attr})


def record(cls: type, tag: str | None = None) -> Any:
    return field(default=None, metadata={"kind": RECORD, "tag": tag, "record": cls})


def sequence(cls: type, item: str, tag: str | None = None) -> Any:
    """Repeated ``item`` children under a container element.

    Stays None when the container is missing, so an absent container and an
    empty one remain distinguishable.
    """
    return field(
        default=None,
        metadata={"kind": SEQUENCE, "tag": tag, "record": cls, "item": item},
    )


def decode_element(cls: type, el: Element) -> Any:
    """Map the known children/attributes of ``el`` onto the dataclass ``cls``.

    Unknown elements are ignored and missing ones leave the field unset.
    """
    values: dict[str, Any] = {}
    for f in fields(cls):
        meta = f.metadata
        kind = meta.get("kind")
        tag = meta.get("tag") or f.name
        if kind == ATTRIBUTE:
            values[f.name] = el.get(tag)
            continue
        child = el.find(tag)
        if child is None:
            continue
        if kind == TEXT:
            values[f.name] = child.text
        elif kind == REFERENCE:
            values[f.name] = child.get(meta["attr"])
        elif kind == RECORD:
            values[f.name] = decode_element(meta["record"], child)
        elif kind == SEQUENCE:
            values[f.name] = [
                decode_element(meta["record"], item) for item in child.findall(meta["item"])
            ]
    return cls(**values)


def is_empty(value: object) -> bool:
    return value is None or value == ""


def record_to_dict(obj: Any) -> JSONRecord:
    """Convert a record tree to plain dicts, eliding empty values.

    Nested records that end up with no keys are dropped; sequences are kept
    even when empty so their multiplicity survives.
    """
    out: JSONRecord = {}
    for f in fields(obj):
        value = getattr(obj, f.name)
        if is_empty(value):
            continue
        if isinstance(value, list):
            out[f.name] = [record_to_dict(v) for v in value]
        elif is_dataclass(value):
            nested = record_to_dict(value)
            if nested:
                out[f.name] = nested
        else:
            out[f.name] = value
    return out


__all__ = [
    "JSONRecord",
    "text",
    "attribute",
    "reference",
    "record",
    "sequence",
    "decode_element",
    "is_empty",
    "record_to_dict",
]
