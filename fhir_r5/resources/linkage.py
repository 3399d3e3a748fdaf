"""Linkage resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Code,
    DomainResource,
    Reference,
)


class LinkageType(str, Enum):
    SOURCE = "source"
    ALTERNATE = "alternate"
    HISTORICAL = "historical"


class LinkageItem(BackboneElement):
    type: Annotated[Code, Binding(LinkageType)]
    resource: Reference


class Linkage(DomainResource):
    """Identifies two or more records (resource instances) that refer to the same real-world occurrence."""

    resource_type: ClassVar[str] = "Linkage"

    active: Boolean | None = None
    author: Reference | None = None
    item: list[LinkageItem]
