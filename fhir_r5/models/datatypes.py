"""
General-purpose FHIR R5 data types.

These are fixed-field records reused across resources: codings, identifiers,
quantities, names, addresses, timing and dosage, references, and the
resource metadata types ``Meta`` and ``Narrative``.
"""

from typing import Annotated

from fhir_r5.models.base import BackboneElement, Binding, Element
from fhir_r5.models.codes import (
    AddressType,
    AddressUse,
    ContactPointSystem,
    ContactPointUse,
    DaysOfWeek,
    EventTiming,
    IdentifierUse,
    NameUse,
    NarrativeStatus,
    QuantityComparator,
    UnitsOfTime,
)
from fhir_r5.models.primitives import (
    Base64Binary,
    Boolean,
    Canonical,
    Code,
    DateTime,
    Decimal,
    Id,
    Instant,
    Integer,
    Integer64,
    Markdown,
    PositiveInt,
    String,
    Time,
    UnsignedInt,
    Uri,
    Url,
    Xhtml,
)


class Coding(Element):
    """A reference to a code defined by a terminology system."""

    system: Uri | None = None
    version: String | None = None
    code: Code | None = None
    display: String | None = None
    user_selected: Boolean | None = None


class CodeableConcept(Element):
    """A concept given by one or more codings and/or free text."""

    coding: list[Coding] | None = None
    text: String | None = None


class Period(Element):
    """Time range defined by start and end date/time; both bounds inclusive."""

    start: DateTime | None = None
    end: DateTime | None = None


class Quantity(Element):
    """A measured amount (or an amount that can potentially be measured)."""

    value: Decimal | None = None
    comparator: Annotated[Code | None, Binding(QuantityComparator)] = None
    unit: String | None = None
    system: Uri | None = None
    code: Code | None = None


class Age(Quantity):
    pass


class Count(Quantity):
    pass


class Distance(Quantity):
    pass


class Duration(Quantity):
    pass


class Money(Element):
    value: Decimal | None = None
    currency: Code | None = None


class Range(Element):
    """Set of values bounded by low and high."""

    low: Quantity | None = None
    high: Quantity | None = None


class Ratio(Element):
    numerator: Quantity | None = None
    denominator: Quantity | None = None


class RatioRange(Element):
    low_numerator: Quantity | None = None
    high_numerator: Quantity | None = None
    denominator: Quantity | None = None


class Identifier(Element):
    """An identifier intended for computation."""

    use: Annotated[Code | None, Binding(IdentifierUse)] = None
    type: CodeableConcept | None = None
    system: Uri | None = None
    value: String | None = None
    period: Period | None = None
    assigner: "Reference | None" = None


class Reference(Element):
    """
    A reference from one resource to another.

    Targets are interpreted only as data; nothing here resolves them.
    """

    reference: String | None = None
    type: Uri | None = None
    identifier: Identifier | None = None
    display: String | None = None


class CodeableReference(Element):
    """A reference to a resource or a concept."""

    concept: CodeableConcept | None = None
    reference: Reference | None = None


class SampledData(Element):
    origin: Quantity
    interval: Decimal | None = None
    interval_unit: Code
    factor: Decimal | None = None
    lower_limit: Decimal | None = None
    upper_limit: Decimal | None = None
    dimensions: PositiveInt
    code_map: Canonical | None = None
    offsets: String | None = None
    data: String | None = None


class Attachment(Element):
    """Content in a format defined elsewhere; ``hash`` is a base64 SHA-1."""

    content_type: Code | None = None
    language: Code | None = None
    data: Base64Binary | None = None
    url: Url | None = None
    size: Integer64 | None = None
    hash: Base64Binary | None = None
    title: String | None = None
    creation: DateTime | None = None
    height: PositiveInt | None = None
    width: PositiveInt | None = None
    frames: PositiveInt | None = None
    duration: Decimal | None = None
    pages: PositiveInt | None = None


class Address(Element):
    use: Annotated[Code | None, Binding(AddressUse)] = None
    type: Annotated[Code | None, Binding(AddressType)] = None
    text: String | None = None
    line: list[String] | None = None
    city: String | None = None
    district: String | None = None
    state: String | None = None
    postal_code: String | None = None
    country: String | None = None
    period: Period | None = None


class HumanName(Element):
    use: Annotated[Code | None, Binding(NameUse)] = None
    text: String | None = None
    family: String | None = None
    given: list[String] | None = None
    prefix: list[String] | None = None
    suffix: list[String] | None = None
    period: Period | None = None


class ContactPoint(Element):
    system: Annotated[Code | None, Binding(ContactPointSystem)] = None
    value: String | None = None
    use: Annotated[Code | None, Binding(ContactPointUse)] = None
    rank: PositiveInt | None = None
    period: Period | None = None


class Annotation(Element):
    """A text note with attribution."""

    author: Reference | String | None = None
    time: DateTime | None = None
    text: Markdown


class Signature(Element):
    """A digital signature along with supporting context."""

    type: list[Coding] | None = None
    when: Instant | None = None
    who: Reference | None = None
    on_behalf_of: Reference | None = None
    target_format: Code | None = None
    sig_format: Code | None = None
    data: Base64Binary | None = None


class TimingRepeat(Element):
    bounds: Duration | Range | Period | None = None
    count: PositiveInt | None = None
    count_max: PositiveInt | None = None
    duration: Decimal | None = None
    duration_max: Decimal | None = None
    duration_unit: Annotated[Code | None, Binding(UnitsOfTime)] = None
    frequency: PositiveInt | None = None
    frequency_max: PositiveInt | None = None
    period: Decimal | None = None
    period_max: Decimal | None = None
    period_unit: Annotated[Code | None, Binding(UnitsOfTime)] = None
    day_of_week: Annotated[list[Code] | None, Binding(DaysOfWeek)] = None
    time_of_day: list[Time] | None = None
    when: Annotated[list[Code] | None, Binding(EventTiming)] = None
    offset: UnsignedInt | None = None


class Timing(BackboneElement):
    """An event that may occur multiple times."""

    event: list[DateTime] | None = None
    repeat: TimingRepeat | None = None
    code: CodeableConcept | None = None


class DosageDoseAndRate(Element):
    type: CodeableConcept | None = None
    dose: Range | Quantity | None = None
    rate: Ratio | Range | Quantity | None = None


class Dosage(BackboneElement):
    """How the medication is/was taken or should be taken."""

    sequence: Integer | None = None
    text: String | None = None
    additional_instruction: list[CodeableConcept] | None = None
    patient_instruction: String | None = None
    timing: Timing | None = None
    as_needed: Boolean | None = None
    as_needed_for: list[CodeableConcept] | None = None
    site: CodeableConcept | None = None
    route: CodeableConcept | None = None
    method: CodeableConcept | None = None
    dose_and_rate: list[DosageDoseAndRate] | None = None
    max_dose_per_period: list[Ratio] | None = None
    max_dose_per_administration: Quantity | None = None
    max_dose_per_lifetime: Quantity | None = None


class Meta(Element):
    """Metadata about a resource."""

    version_id: Id | None = None
    last_updated: Instant | None = None
    source: Uri | None = None
    profile: list[Canonical] | None = None
    security: list[Coding] | None = None
    tag: list[Coding] | None = None


class Narrative(Element):
    """Human-readable summary of the resource."""

    status: Annotated[Code, Binding(NarrativeStatus)]
    div: Xhtml


class ProductShelfLife(BackboneElement):
    type: CodeableConcept | None = None
    period: Duration | String | None = None
    special_precautions_for_storage: list[CodeableConcept] | None = None


class MarketingStatus(BackboneElement):
    country: CodeableConcept | None = None
    jurisdiction: CodeableConcept | None = None
    status: CodeableConcept
    date_range: Period | None = None
    restore_date: DateTime | None = None


Identifier.model_rebuild()
Reference.model_rebuild()
