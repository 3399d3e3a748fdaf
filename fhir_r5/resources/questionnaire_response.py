"""QuestionnaireResponse resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Attachment,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    Coding,
    Date,
    DateTime,
    Decimal,
    DomainResource,
    Identifier,
    Integer,
    Quantity,
    Reference,
    String,
    Time,
    Uri,
)


class QuestionnaireResponseStatus(str, Enum):
    IN_PROGRESS = "in-progress"
    COMPLETED = "completed"
    AMENDED = "amended"
    ENTERED_IN_ERROR = "entered-in-error"
    STOPPED = "stopped"


class QuestionnaireResponseItemAnswer(BackboneElement):
    value: (
        Boolean
        | Decimal
        | Integer
        | Date
        | DateTime
        | Time
        | String
        | Uri
        | Attachment
        | Coding
        | Quantity
        | Reference
    )
    item: list["QuestionnaireResponseItem"] | None = None


class QuestionnaireResponseItem(BackboneElement):
    """Groups and questions; answers may carry nested items."""

    link_id: String
    definition: Uri | None = None
    text: String | None = None
    answer: list[QuestionnaireResponseItemAnswer] | None = None
    item: list["QuestionnaireResponseItem"] | None = None


class QuestionnaireResponse(DomainResource):
    """A structured set of questions and their answers."""

    resource_type: ClassVar[str] = "QuestionnaireResponse"

    identifier: list[Identifier] | None = None
    based_on: list[Reference] | None = None
    part_of: list[Reference] | None = None
    questionnaire: Canonical
    status: Annotated[Code, Binding(QuestionnaireResponseStatus)]
    subject: Reference | None = None
    encounter: Reference | None = None
    authored: DateTime | None = None
    author: Reference | None = None
    source: Reference | None = None
    item: list[QuestionnaireResponseItem] | None = None


QuestionnaireResponseItemAnswer.model_rebuild()
QuestionnaireResponseItem.model_rebuild()
