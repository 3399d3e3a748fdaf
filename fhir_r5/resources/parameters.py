"""
Parameters resource.

Operation request/response parameters. A parameter carries at most one of
``value[x]``, ``resource`` or nested ``part`` parameters.
"""

from typing import Annotated, Any, ClassVar

from pydantic import field_validator

from fhir_r5.models import BackboneElement, OpenType, Resource, String
from fhir_r5.models.base import check_open_type


class ParametersParameter(BackboneElement):
    name: String
    value: Annotated[Any, OpenType()] = None
    resource: Resource | None = None
    part: list["ParametersParameter"] | None = None

    _check_open_type = field_validator("value")(check_open_type)

    def get_part(self, name: str) -> "ParametersParameter | None":
        """Return the first nested part with the given name."""
        for part in self.part or []:
            if part.name is not None and part.name.value == name:
                return part
        return None


class Parameters(Resource):
    """Operation request or response."""

    resource_type: ClassVar[str] = "Parameters"

    parameter: list[ParametersParameter] | None = None

    def get_parameter(self, name: str) -> ParametersParameter | None:
        """Return the first parameter with the given name."""
        for parameter in self.parameter or []:
            if parameter.name is not None and parameter.name.value == name:
                return parameter
        return None


ParametersParameter.model_rebuild()
