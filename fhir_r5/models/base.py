"""
Base element types for the FHIR R5 model.

Every element, data type and backbone element is a pydantic model whose
attributes are snake_case and whose JSON names are the camelCase aliases.
Unknown JSON members are kept in the pydantic extra side-map so they can be
emitted back unchanged.
"""

from dataclasses import dataclass
from enum import Enum
from functools import cache
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator
from pydantic.alias_generators import to_camel


@dataclass(frozen=True)
class Binding:
    """Required terminology binding attached to a ``code`` element."""

    value_set: type[Enum]


@dataclass(frozen=True)
class OpenType:
    """Marks a choice element that admits every open data type (``Extension.value[x]``)."""


@cache
def bound_fields(cls: type[BaseModel]) -> tuple[tuple[str, type[Enum]], ...]:
    """Return ``(attribute, enum)`` pairs for every required-binding field of a model."""
    result = []
    for name, info in cls.model_fields.items():
        for meta in info.metadata:
            if isinstance(meta, Binding):
                result.append((name, meta.value_set))
    return tuple(result)


def coerce_code(value_set: type[Enum], code: Any) -> Enum:
    """
    Resolve a code against a required value set.

    Raises:
        ValueError: If the code is not a member of the value set
    """
    if isinstance(code, value_set):
        return code
    raw = code.value if isinstance(code, Enum) else code
    try:
        return value_set(raw)
    except ValueError:
        raise ValueError(f"'{raw}' is not a valid {value_set.__name__} code") from None


def check_bindings(model: BaseModel) -> None:
    """Coerce bound ``code`` values of a model to their enum members in place."""
    for name, value_set in bound_fields(type(model)):
        field_value = getattr(model, name)
        items = field_value if isinstance(field_value, list) else [field_value]
        for item in items:
            if item is not None and item.value is not None:
                item.value = coerce_code(value_set, item.value)


def check_open_type(cls: type, value: Any) -> Any:
    """Field validator for open-type choice elements (``value[x]`` of any data type)."""
    if value is None:
        return value
    from fhir_r5.models.open_types import OPEN_TYPES

    if type(value) not in OPEN_TYPES:
        raise ValueError(f"value must be a FHIR data type instance, got {type(value).__name__}")
    return value


class FhirModel(BaseModel):
    """Common pydantic configuration for all FHIR model classes."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
        protected_namespaces=(),
    )

    @model_validator(mode="after")
    def _check_bindings(self) -> "FhirModel":
        check_bindings(self)
        return self


class Element(FhirModel):
    """Base definition for all elements in a resource."""

    id: str | None = None
    extension: list["Extension"] | None = None


class BackboneElement(Element):
    """Base for elements defined inside a resource (and BackboneType data types)."""

    modifier_extension: list["Extension"] | None = None


class Extension(Element):
    """
    Open-content extension.

    Carries either exactly one ``value[x]`` or one or more nested extensions,
    never both and never neither.
    """

    url: str
    value: Annotated[Any, OpenType()] = None

    _check_open_type = field_validator("value")(check_open_type)

    @model_validator(mode="after")
    def _check_shape(self) -> "Extension":
        has_value = self.value is not None
        has_nested = bool(self.extension)
        if has_value and has_nested:
            raise ValueError("Extension must not carry both value[x] and nested extensions")
        if not has_value and not has_nested:
            raise ValueError("Extension must carry either value[x] or nested extensions")
        return self


Element.model_rebuild()
BackboneElement.model_rebuild()
Extension.model_rebuild()
