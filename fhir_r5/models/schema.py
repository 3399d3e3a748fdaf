"""
Schema introspection over the pydantic models.

The codec and the validators never hard-code field lists; they walk the
``FieldSpec`` records derived here from each model's annotations.
"""

import types
import typing
from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import Any

from pydantic import BaseModel

from fhir_r5.constants import ROOT_PATH
from fhir_r5.models.base import Binding, OpenType
from fhir_r5.models.primitives import Primitive
from fhir_r5.models.resource import Resource


def escape_token(token: str | int) -> str:
    """Escape one JSON Pointer reference token."""
    return str(token).replace("~", "~0").replace("/", "~1")


def join_path(path: str, *tokens: str | int) -> str:
    """Append reference tokens to a JSON Pointer: ``join_path("/", "entry", 3)`` -> ``/entry/3``."""
    for token in tokens:
        path = (path if path != ROOT_PATH else "") + "/" + escape_token(token)
    return path


class FieldKind(str, Enum):
    PRIMITIVE = "primitive"
    COMPLEX = "complex"
    RESOURCE = "resource"
    CHOICE = "choice"
    SCALAR = "scalar"


@dataclass(frozen=True)
class FieldSpec:
    """Shape of one declared field of a model."""

    name: str
    json_name: str
    kind: FieldKind
    types: tuple[type, ...]
    is_list: bool
    required: bool
    binding: type[Enum] | None = None

    def variant_key(self, variant: type) -> str:
        """JSON key of one alternative of a choice field (``value`` + ``Quantity``)."""
        return self.json_name + type_suffix(variant)

    def variants(self) -> dict[str, type]:
        """All JSON keys of a choice field, mapped to the class each one holds."""
        return {self.variant_key(variant): variant for variant in self.types}


def type_suffix(cls: type) -> str:
    """Type name as it appears in a choice key: ``dateTime`` -> ``DateTime``."""
    name = cls.fhir_type if issubclass(cls, Primitive) else cls.__name__
    return name[:1].upper() + name[1:]


def _is_union(annotation: Any) -> bool:
    return typing.get_origin(annotation) in (typing.Union, types.UnionType)


def _kind_of(cls: type) -> FieldKind:
    if cls is str:
        return FieldKind.SCALAR
    if issubclass(cls, Primitive):
        return FieldKind.PRIMITIVE
    if issubclass(cls, Resource):
        return FieldKind.RESOURCE
    if issubclass(cls, BaseModel):
        return FieldKind.COMPLEX
    raise TypeError(f"Unsupported field type: {cls!r}")


@cache
def fields_of(cls: type[BaseModel]) -> tuple[FieldSpec, ...]:
    """
    Return the field specs of a model in declaration order.

    ``X | None`` marks an optional field, ``list[X]`` a repeating one, and a
    union of two or more classes a choice element.
    """
    specs = []
    for name, info in cls.model_fields.items():
        if issubclass(cls, Primitive) and name == "value":
            continue
        annotation = info.annotation
        if _is_union(annotation):
            members = tuple(arg for arg in typing.get_args(annotation) if arg is not type(None))
            annotation = members[0] if len(members) == 1 else typing.Union[members]

        is_list = typing.get_origin(annotation) is list
        if is_list:
            annotation = typing.get_args(annotation)[0]

        binding = next((m.value_set for m in info.metadata if isinstance(m, Binding)), None)
        open_type = any(isinstance(m, OpenType) for m in info.metadata)

        if open_type:
            from fhir_r5.models.open_types import OPEN_TYPES

            kind, field_types = FieldKind.CHOICE, OPEN_TYPES
        elif _is_union(annotation):
            kind, field_types = FieldKind.CHOICE, typing.get_args(annotation)
        else:
            kind, field_types = _kind_of(annotation), (annotation,)

        specs.append(
            FieldSpec(
                name=name,
                json_name=info.alias or name,
                kind=kind,
                types=field_types,
                is_list=is_list,
                required=info.is_required(),
                binding=binding,
            )
        )
    return tuple(specs)


@cache
def json_index(cls: type[BaseModel]) -> dict[str, tuple[FieldSpec, type | None]]:
    """
    Map every JSON key a model accepts to its field spec.

    Choice alternatives map to ``(spec, variant_class)``; other keys to
    ``(spec, None)``. Primitive-typed keys also accept their ``_key`` sibling.
    """
    index: dict[str, tuple[FieldSpec, type | None]] = {}
    for spec in fields_of(cls):
        if spec.kind is FieldKind.CHOICE:
            for key, variant in spec.variants().items():
                index[key] = (spec, variant)
                if issubclass(variant, Primitive):
                    index["_" + key] = (spec, variant)
            continue
        index[spec.json_name] = (spec, None)
        if spec.kind is FieldKind.PRIMITIVE:
            index["_" + spec.json_name] = (spec, None)
    return index
