"""MeasureReport resource."""

from enum import Enum
from typing import Annotated, ClassVar

from fhir_r5.models import (
    BackboneElement,
    Binding,
    Boolean,
    Canonical,
    Code,
    CodeableConcept,
    DateTime,
    DomainResource,
    Duration,
    Identifier,
    Integer,
    Period,
    Quantity,
    Range,
    Reference,
    String,
)


class MeasureReportStatus(str, Enum):
    COMPLETE = "complete"
    PENDING = "pending"
    ERROR = "error"


class MeasureReportType(str, Enum):
    INDIVIDUAL = "individual"
    SUBJECT_LIST = "subject-list"
    SUMMARY = "summary"
    DATA_EXCHANGE = "data-exchange"


class SubmitDataUpdateType(str, Enum):
    INCREMENTAL = "incremental"
    SNAPSHOT = "snapshot"


class MeasureReportGroupPopulation(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    count: Integer | None = None
    subject_results: Reference | None = None
    subject_report: list[Reference] | None = None
    subjects: Reference | None = None


class MeasureReportGroupStratifierStratumComponent(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept
    value: CodeableConcept | Boolean | Quantity | Range | Reference


class MeasureReportGroupStratifierStratum(BackboneElement):
    value: CodeableConcept | Boolean | Quantity | Range | Reference | None = None
    component: list[MeasureReportGroupStratifierStratumComponent] | None = None
    population: list[MeasureReportGroupPopulation] | None = None
    measure_score: Quantity | DateTime | CodeableConcept | Period | Range | Duration | None = None


class MeasureReportGroupStratifier(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    stratum: list[MeasureReportGroupStratifierStratum] | None = None


class MeasureReportGroup(BackboneElement):
    link_id: String | None = None
    code: CodeableConcept | None = None
    subject: Reference | None = None
    population: list[MeasureReportGroupPopulation] | None = None
    measure_score: Quantity | DateTime | CodeableConcept | Period | Range | Duration | None = None
    stratifier: list[MeasureReportGroupStratifier] | None = None


class MeasureReport(DomainResource):
    """The results of a measure evaluation."""

    resource_type: ClassVar[str] = "MeasureReport"

    identifier: list[Identifier] | None = None
    status: Annotated[Code, Binding(MeasureReportStatus)]
    type: Annotated[Code, Binding(MeasureReportType)]
    data_update_type: Annotated[Code | None, Binding(SubmitDataUpdateType)] = None
    measure: Canonical | None = None
    subject: Reference | None = None
    date: DateTime | None = None
    reporter: Reference | None = None
    reporting_vendor: Reference | None = None
    location: Reference | None = None
    period: Period
    input_parameters: Reference | None = None
    scoring: CodeableConcept | None = None
    improvement_notation: CodeableConcept | None = None
    group: list[MeasureReportGroup] | None = None
    supplemental_data: list[Reference] | None = None
    evaluated_resource: list[Reference] | None = None
