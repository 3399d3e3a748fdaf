"""
Typed model to JSON tree.

Emission mirrors parsing: ``resourceType`` first, then declared fields in
declaration order, then any kept unknown members. Absent optionals are
omitted, never written as ``null``. Primitive arrays are split into a
value array and a ``_field`` array with positional ``null`` padding.
"""

from typing import Any

from pydantic import BaseModel

from fhir_r5.errors import PrimitiveSiblingMisalignmentError
from fhir_r5.models.primitives import Primitive
from fhir_r5.models.resource import Resource
from fhir_r5.models.schema import FieldKind, FieldSpec, fields_of, join_path, type_suffix


def _as_primitive(field_type: type[Primitive], value: Any) -> Primitive:
    if isinstance(value, Primitive):
        return value
    # Plain values assigned after construction are wrapped on the way out
    return field_type.model_validate(value)


def _accepts(variant: type[Primitive], value: Any) -> bool:
    try:
        variant.coerce(value)
    except (TypeError, ValueError):
        return False
    return True


def _variant_of(spec: FieldSpec, value: Any) -> type:
    if type(value) in spec.types:
        return type(value)
    for variant in spec.types:
        if isinstance(value, variant):
            return variant
    if not isinstance(value, BaseModel):
        # A plain scalar is wrapped only when exactly one primitive variant accepts it
        matches = [v for v in spec.types if issubclass(v, Primitive) and _accepts(v, value)]
        if len(matches) == 1:
            return matches[0]
        if matches:
            names = ", ".join(v.fhir_type for v in matches)
            raise TypeError(f"{value!r} is ambiguous for '{spec.json_name}[x]' ({names}); assign a typed value")
    raise TypeError(
        f"{type(value).__name__} is not an allowed type for '{spec.json_name}[x]'"
    )


class Emitter:
    """Builds the FHIR JSON tree of a typed model."""

    def emit_resource(self, resource: Resource, path: str = "/") -> dict[str, Any]:
        out: dict[str, Any] = {"resourceType": type(resource).resource_type}
        self._emit_fields(resource, out, path)
        return out

    def emit_model(self, model: BaseModel, path: str) -> dict[str, Any]:
        if isinstance(model, Resource):
            return self.emit_resource(model, path)
        out: dict[str, Any] = {}
        self._emit_fields(model, out, path)
        return out

    def _emit_fields(self, model: BaseModel, out: dict[str, Any], path: str) -> None:
        for spec in fields_of(type(model)):
            value = getattr(model, spec.name)
            if value is None or (spec.is_list and not value):
                continue
            if spec.kind is FieldKind.CHOICE:
                variant = _variant_of(spec, value)
                key = spec.json_name + type_suffix(variant)
                if issubclass(variant, Primitive):
                    self._emit_primitive(out, key, _as_primitive(variant, value), path)
                else:
                    out[key] = self.emit_model(value, join_path(path, key))
            elif spec.kind is FieldKind.SCALAR:
                out[spec.json_name] = value
            elif spec.kind is FieldKind.PRIMITIVE:
                field_type = spec.types[0]
                if spec.is_list:
                    items = [_as_primitive(field_type, item) for item in value]
                    self._emit_primitive_list(out, spec.json_name, items, path)
                else:
                    self._emit_primitive(out, spec.json_name, _as_primitive(field_type, value), path)
            elif spec.is_list:
                out[spec.json_name] = [
                    self.emit_model(item, join_path(path, spec.json_name, i))
                    for i, item in enumerate(value)
                ]
            else:
                out[spec.json_name] = self.emit_model(value, join_path(path, spec.json_name))

        for key, value in (model.model_extra or {}).items():
            out.setdefault(key, value)

    def _element_of(self, primitive: Primitive, path: str) -> dict[str, Any] | None:
        element: dict[str, Any] = {}
        self._emit_fields(primitive, element, path)
        return element or None

    def _emit_primitive(
        self, out: dict[str, Any], key: str, primitive: Primitive, path: str
    ) -> None:
        value = primitive.to_json()
        element = self._element_of(primitive, join_path(path, "_" + key))
        if value is None and element is None:
            raise PrimitiveSiblingMisalignmentError(
                join_path(path, key), "primitive carries neither a value nor an element"
            )
        if value is not None:
            out[key] = value
        if element is not None:
            out["_" + key] = element

    def _emit_primitive_list(
        self, out: dict[str, Any], key: str, primitives: list[Primitive], path: str
    ) -> None:
        values = []
        elements = []
        for i, primitive in enumerate(primitives):
            value = primitive.to_json()
            element = self._element_of(primitive, join_path(path, "_" + key, i))
            if value is None and element is None:
                raise PrimitiveSiblingMisalignmentError(
                    join_path(path, key, i), "primitive carries neither a value nor an element"
                )
            values.append(value)
            elements.append(element)

        if any(value is not None for value in values):
            out[key] = values
        if any(element is not None for element in elements):
            out["_" + key] = elements
