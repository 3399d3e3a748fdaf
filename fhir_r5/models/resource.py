"""
Resource frame: the ``Resource`` and ``DomainResource`` base classes.

Concrete resources set ``resource_type``, the value of the JSON
``resourceType`` discriminator.
"""

from typing import Any, ClassVar

from pydantic import model_validator

from fhir_r5.models.base import Extension, FhirModel
from fhir_r5.models.datatypes import Meta, Narrative
from fhir_r5.models.primitives import Code, Id, Uri


class Resource(FhirModel):
    """Base of every FHIR resource."""

    resource_type: ClassVar[str] = "Resource"

    id: Id | None = None
    meta: Meta | None = None
    implicit_rules: Uri | None = None
    language: Code | None = None

    @model_validator(mode="before")
    @classmethod
    def _strip_resource_type(cls, data: Any) -> Any:
        if isinstance(data, dict) and "resourceType" in data:
            data = dict(data)
            name = data.pop("resourceType")
            if name != cls.resource_type:
                raise ValueError(f"resourceType '{name}' does not match {cls.resource_type}")
        return data


class DomainResource(Resource):
    """A resource with narrative, contained resources and extensions."""

    resource_type: ClassVar[str] = "DomainResource"

    text: Narrative | None = None
    contained: list[Resource] | None = None
    extension: list[Extension] | None = None
    modifier_extension: list[Extension] | None = None


def is_concrete(cls: type) -> bool:
    """True for resource classes that may appear in a document (not the abstract bases)."""
    return (
        isinstance(cls, type)
        and issubclass(cls, Resource)
        and cls.resource_type not in ("Resource", "DomainResource")
        and cls.__dict__.get("resource_type") is not None
    )
