"""Binary resource."""

from typing import ClassVar

from fhir_r5.models import Base64Binary, Code, Reference, Resource


class Binary(Resource):
    """
    Pure binary content defined by a format other than FHIR.

    Binary is not a DomainResource: it has no narrative, contained
    resources or extensions.
    """

    resource_type: ClassVar[str] = "Binary"

    content_type: Code
    security_context: Reference | None = None
    data: Base64Binary | None = None
