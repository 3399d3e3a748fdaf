"""
Questionnaire resource.

Items nest to arbitrary depth: ``QuestionnaireItem.item`` holds further
``QuestionnaireItem`` values.
"""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    Attachment,
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    Coding,
    ContactDetail,
    Date,
    DateTime,
    Decimal,
    DomainResource,
    Identifier,
    Integer,
    Markdown,
    Period,
    Quantity,
    Reference,
    String,
    Time,
    Uri,
    UsageContext,
)
from fhir_r5.models.codes import PublicationStatus


class QuestionnaireItemType(str, Enum):
    GROUP = "group"
    DISPLAY = "display"
    QUESTION = "question"
    BOOLEAN = "boolean"
    DECIMAL = "decimal"
    INTEGER = "integer"
    DATE = "date"
    DATE_TIME = "dateTime"
    TIME = "time"
    STRING = "string"
    TEXT = "text"
    URL = "url"
    CODING = "coding"
    ATTACHMENT = "attachment"
    REFERENCE = "reference"
    QUANTITY = "quantity"


class QuestionnaireItemOperator(str, Enum):
    EXISTS = "exists"
    EQUALS = "="
    NOT_EQUALS = "!="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_OR_EQUALS = ">="
    LESS_OR_EQUALS = "<="


class EnableWhenBehavior(str, Enum):
    ALL = "all"
    ANY = "any"


class QuestionnaireItemDisabledDisplay(str, Enum):
    HIDDEN = "hidden"
    PROTECTED = "protected"


class QuestionnaireAnswerConstraint(str, Enum):
    OPTIONS_ONLY = "optionsOnly"
    OPTIONS_OR_TYPE = "optionsOrType"
    OPTIONS_OR_STRING = "optionsOrString"


class QuestionnaireItemEnableWhen(BackboneElement):
    question: String
    operator: Annotated[Code, Binding(QuestionnaireItemOperator)]
    answer: (
        Boolean
        | Decimal
        | Integer
        | Date
        | DateTime
        | Time
        | String
        | Coding
        | Quantity
        | Reference
    )


class QuestionnaireItemAnswerOption(BackboneElement):
    value: Integer | Date | Time | String | Coding | Reference
    initial_selected: Boolean | None = None


class QuestionnaireItemInitial(BackboneElement):
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


class QuestionnaireItem(BackboneElement):
    """Questions and sections within the Questionnaire."""

    link_id: String
    definition: Uri | None = None
    code: list[Coding] | None = None
    prefix: String | None = None
    text: String | None = None
    type: Annotated[Code, Binding(QuestionnaireItemType)]
    enable_when: list[QuestionnaireItemEnableWhen] | None = None
    enable_behavior: Annotated[Code | None, Binding(EnableWhenBehavior)] = None
    disabled_display: Annotated[Code | None, Binding(QuestionnaireItemDisabledDisplay)] = None
    required: Boolean | None = None
    repeats: Boolean | None = None
    read_only: Boolean | None = None
    max_length: Integer | None = None
    answer_constraint: Annotated[Code | None, Binding(QuestionnaireAnswerConstraint)] = None
    answer_value_set: Canonical | None = None
    answer_option: list[QuestionnaireItemAnswerOption] | None = None
    initial: list[QuestionnaireItemInitial] | None = None
    item: list["QuestionnaireItem"] | None = None


class Questionnaire(DomainResource):
    """A structured set of questions intended to guide the collection of answers from end-users."""

    resource_type: ClassVar[str] = "Questionnaire"

    url: Uri | None = None
    identifier: list[Identifier] | None = None
    version: String | None = None
    version_algorithm: String | Coding | None = None
    name: String | None = None
    title: String | None = None
    derived_from: list[Canonical] | None = None
    status: Annotated[Code, Binding(PublicationStatus)]
    experimental: Boolean | None = None
    subject_type: list[Code] | None = None
    date: DateTime | None = None
    publisher: String | None = None
    contact: list[ContactDetail] | None = None
    description: Markdown | None = None
    use_context: list[UsageContext] | None = None
    jurisdiction: list[CodeableConcept] | None = None
    purpose: Markdown | None = None
    copyright: Markdown | None = None
    copyright_label: String | None = None
    approval_date: Date | None = None
    last_review_date: Date | None = None
    effective_period: Period | None = None
    code: list[Coding] | None = None
    item: list[QuestionnaireItem] | None = None


QuestionnaireItem.model_rebuild()
