"""
JSON tree to typed model.

The parser is schema-driven: for each model it walks the ``FieldSpec``
records from ``fhir_r5.models.schema``, fuses primitive values with their
``_field`` siblings, resolves choice keys to a single variant and
dispatches resource slots on their own ``resourceType``.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel

from fhir_r5.codec.registry import ResourceRegistry
from fhir_r5.config.logging import get_logger
from fhir_r5.errors import (
    InvalidExtensionError,
    InvalidLexicalFormError,
    MissingRequiredFieldError,
    MultipleChoiceVariantsError,
    PrimitiveSiblingMisalignmentError,
    ResourceTypeMismatchError,
    StructuralError,
    UnknownCodeForRequiredBindingError,
    UnknownFieldError,
    UnknownResourceTypeError,
)
from fhir_r5.models.base import Extension, coerce_code
from fhir_r5.models.primitives import JsonNumber, Primitive, number_lexical
from fhir_r5.models.resource import Resource
from fhir_r5.models.schema import FieldKind, FieldSpec, fields_of, join_path, json_index
from fhir_r5.validation import check_constraints

logger = get_logger(__name__)


def _json_type(raw: Any) -> str:
    if isinstance(raw, dict):
        return "object"
    if isinstance(raw, list):
        return "array"
    if isinstance(raw, bool):
        return "boolean"
    if isinstance(raw, JsonNumber) or number_lexical(raw) is not None:
        return "number"
    if isinstance(raw, str):
        return "string"
    return "null"


def _is_string(raw: Any) -> bool:
    return isinstance(raw, str) and not isinstance(raw, JsonNumber)


class Parser:
    """
    Builds typed models from decoded JSON.

    Args:
        strict: Reject undeclared members instead of keeping them in the
            model's extra side-map
    """

    def __init__(self, strict: bool = False):
        self.strict = strict

    def parse_resource(
        self, obj: Any, path: str = "/", expected: type[Resource] | None = None
    ) -> Resource:
        """
        Parse a JSON object that carries a ``resourceType``.

        Raises:
            CodecError: On any structural, lexical, cardinality or discriminator failure
        """
        if not isinstance(obj, dict):
            raise StructuralError(path, f"expected a resource object, got {_json_type(obj)}")

        name = obj.get("resourceType")
        if name is None:
            raise UnknownResourceTypeError(None, path)
        if not _is_string(name):
            raise StructuralError(join_path(path, "resourceType"), "resourceType must be a string")

        resource_cls = ResourceRegistry.get(name)
        if resource_cls is None:
            raise UnknownResourceTypeError(name, path)
        if expected is not None and not issubclass(resource_cls, expected):
            raise ResourceTypeMismatchError(expected.resource_type, name, path)

        logger.debug("Dispatching resource", resource_type=name, path=path)
        return self.parse_model(resource_cls, obj, path)

    def parse_model(self, cls: type[BaseModel], obj: Any, path: str) -> BaseModel:
        """Parse a JSON object into an instance of ``cls``."""
        if not isinstance(obj, dict):
            raise StructuralError(
                path, f"expected an object for {cls.__name__}, got {_json_type(obj)}"
            )

        index = json_index(cls)
        # field name -> {json key without "_": [value, element]}
        found: dict[str, dict[str, list[Any]]] = {}
        specs: dict[str, tuple[FieldSpec, type | None]] = {}
        extras: dict[str, Any] = {}
        is_resource = issubclass(cls, Resource)

        for key, raw in obj.items():
            if is_resource and key == "resourceType":
                continue
            entry = index.get(key)
            if entry is None:
                if self.strict:
                    raise UnknownFieldError(path, key)
                logger.debug("Keeping unknown field", path=path, field=key)
                extras[key] = raw
                continue
            spec, variant = entry
            base_key = key[1:] if key.startswith("_") else key
            slot = found.setdefault(spec.name, {}).setdefault(base_key, [None, None])
            slot[1 if key.startswith("_") else 0] = raw
            specs[base_key] = (spec, variant)

        known: dict[str, Any] = {}
        for spec in fields_of(cls):
            present = found.get(spec.name)
            if not present:
                if spec.required:
                    raise MissingRequiredFieldError(join_path(path, spec.json_name))
                continue
            if spec.kind is FieldKind.CHOICE:
                if len(present) > 1:
                    raise MultipleChoiceVariantsError(path, sorted(present))
                key, (raw, element) = next(iter(present.items()))
                variant = specs[key][1]
                value = self._parse_single(spec, variant, key, raw, element, path)
            else:
                raw, element = present[spec.json_name]
                value = self._parse_field(spec, raw, element, path)
            if value is not None:
                known[spec.name] = value
            elif spec.required:
                raise MissingRequiredFieldError(join_path(path, spec.json_name))

        instance = cls.model_construct(**known)
        if extras:
            instance.model_extra.update(extras)

        if isinstance(instance, Extension):
            self._check_extension(instance, path)
        check_constraints(instance, path)
        return instance

    def _parse_field(
        self, spec: FieldSpec, raw: Any, element: Any, path: str
    ) -> Any:
        key = spec.json_name
        field_type = spec.types[0]
        if not spec.is_list:
            return self._parse_single(spec, field_type, key, raw, element, path)

        if spec.kind is FieldKind.PRIMITIVE:
            return self._parse_primitive_list(spec, field_type, raw, element, path)

        if element is not None:
            raise StructuralError(join_path(path, "_" + key), f"'{key}' is not a primitive")
        field_path = join_path(path, key)
        if not isinstance(raw, list):
            raise StructuralError(field_path, f"expected an array, got {_json_type(raw)}")
        if not raw:
            return self._empty_array(field_path)
        items = []
        for i, item in enumerate(raw):
            item_path = join_path(field_path, i)
            if item is None:
                raise StructuralError(item_path, "null is not allowed in this array")
            items.append(self._parse_value(spec, field_type, item, item_path))
        return items

    def _parse_single(
        self,
        spec: FieldSpec,
        field_type: type,
        key: str,
        raw: Any,
        element: Any,
        path: str,
    ) -> Any:
        field_path = join_path(path, key)
        if isinstance(raw, list) or isinstance(element, list):
            raise StructuralError(field_path, "expected a single value, got an array")
        if issubclass(field_type, Primitive):
            if raw is None and element is None:
                raise StructuralError(field_path, "null is not allowed here")
            return self._parse_primitive(
                spec, field_type, raw, element, field_path, join_path(path, "_" + key)
            )
        if element is not None:
            raise StructuralError(join_path(path, "_" + key), f"'{key}' is not a primitive")
        if raw is None:
            raise StructuralError(field_path, "null is not allowed here")
        return self._parse_value(spec, field_type, raw, field_path)

    def _parse_value(self, spec: FieldSpec, field_type: type, raw: Any, path: str) -> Any:
        if field_type is str:
            if not _is_string(raw):
                raise InvalidLexicalFormError("string", raw, path, "expected a JSON string")
            if not raw:
                raise InvalidLexicalFormError("string", raw, path, "empty string is not allowed")
            return raw
        if issubclass(field_type, Resource):
            return self.parse_resource(raw, path, expected=field_type)
        return self.parse_model(field_type, raw, path)

    def _parse_primitive(
        self,
        spec: FieldSpec,
        field_type: type[Primitive],
        raw: Any,
        element: Any,
        path: str,
        element_path: str,
    ) -> Primitive:
        value = None
        if raw is not None:
            if isinstance(raw, (dict, list)):
                raise StructuralError(
                    path, f"expected a {field_type.fhir_type} scalar, got {_json_type(raw)}"
                )
            try:
                value = field_type.from_json(raw)
            except ValueError as e:
                raise InvalidLexicalFormError(field_type.fhir_type, raw, path, str(e)) from e
            if spec.binding is not None:
                value = self._check_binding(spec.binding, value, path)

        if element is None:
            return field_type.model_construct(value=value)

        instance = self.parse_model(field_type, element, element_path)
        if value is None and instance.id is None and not instance.extension and not instance.model_extra:
            raise StructuralError(element_path, "primitive carries neither a value nor an id or extension")
        instance.value = value
        return instance

    def _parse_primitive_list(
        self,
        spec: FieldSpec,
        field_type: type[Primitive],
        raw: Any,
        element: Any,
        path: str,
    ) -> list[Primitive] | None:
        key = spec.json_name
        field_path = join_path(path, key)
        element_path = join_path(path, "_" + key)
        if raw is None and element is None:
            raise StructuralError(field_path, "null is not allowed here")
        if raw is not None and not isinstance(raw, list):
            raise StructuralError(field_path, f"expected an array, got {_json_type(raw)}")
        if element is not None and not isinstance(element, list):
            raise StructuralError(element_path, f"expected an array, got {_json_type(element)}")
        if raw is not None and element is not None and len(raw) != len(element):
            raise PrimitiveSiblingMisalignmentError(
                field_path,
                f"'{key}' has {len(raw)} items but '_{key}' has {len(element)}",
            )

        values = raw if raw is not None else [None] * len(element)
        elements = element if element is not None else [None] * len(values)
        if not values:
            return self._empty_array(field_path)

        items = []
        for i, (item, item_element) in enumerate(zip(values, elements)):
            if item is None and item_element is None:
                raise PrimitiveSiblingMisalignmentError(
                    join_path(field_path, i), "both value and sibling element are null"
                )
            items.append(
                self._parse_primitive(
                    spec,
                    field_type,
                    item,
                    item_element,
                    join_path(field_path, i),
                    join_path(element_path, i),
                )
            )
        return items

    def _check_binding(self, value_set: type[Enum], value: Any, path: str) -> Enum:
        try:
            return coerce_code(value_set, value)
        except ValueError:
            raise UnknownCodeForRequiredBindingError(path, value, value_set.__name__) from None

    def _empty_array(self, path: str) -> None:
        if self.strict:
            raise StructuralError(path, "arrays must not be empty")
        logger.debug("Dropping empty array", path=path)
        return None

    def _check_extension(self, extension: Extension, path: str) -> None:
        has_value = extension.value is not None
        has_nested = bool(extension.extension)
        if has_value and has_nested:
            raise InvalidExtensionError(path, "extension carries both value[x] and nested extensions")
        if not has_value and not has_nested:
            raise InvalidExtensionError(path, "extension carries neither value[x] nor nested extensions")
