"""Device resource."""

from enum import Enum
from typing import Annotated, ClassVar

from pydantic import Field

from fhir_r5.models import (
    Annotation,
    Attachment,
    BackboneElement,
    Base64Binary,
    Binding,
    Boolean,
    Code,
    CodeableConcept,
    CodeableReference,
    ContactPoint,
    Count,
    DateTime,
    DomainResource,
    Duration,
    Identifier,
    Integer,
    Quantity,
    Range,
    Reference,
    String,
    Uri,
)


class DeviceStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"
    ENTERED_IN_ERROR = "entered-in-error"


class DeviceNameType(str, Enum):
    REGISTERED_NAME = "registered-name"
    USER_FRIENDLY_NAME = "user-friendly-name"
    PATIENT_REPORTED_NAME = "patient-reported-name"


class UdiEntryType(str, Enum):
    BARCODE = "barcode"
    RFID = "rfid"
    MANUAL = "manual"
    CARD = "card"
    SELF_REPORTED = "self-reported"
    ELECTRONIC_TRANSMISSION = "electronic-transmission"
    UNKNOWN = "unknown"


class DeviceUdiCarrier(BackboneElement):
    """Unique Device Identifier (UDI) barcode string."""

    device_identifier: String
    issuer: Uri
    jurisdiction: Uri | None = None
    carrier_aidc: Base64Binary | None = Field(default=None, alias="carrierAIDC")
    carrier_hrf: String | None = Field(default=None, alias="carrierHRF")
    entry_type: Annotated[Code | None, Binding(UdiEntryType)] = None


class DeviceName(BackboneElement):
    value: String
    type: Annotated[Code, Binding(DeviceNameType)]
    display: Boolean | None = None


class DeviceVersion(BackboneElement):
    type: CodeableConcept | None = None
    component: Identifier | None = None
    install_date: DateTime | None = None
    value: String


class DeviceConformsTo(BackboneElement):
    category: CodeableConcept | None = None
    specification: CodeableConcept
    version: String | None = None


class DeviceProperty(BackboneElement):
    type: CodeableConcept
    value: (
        Quantity
        | CodeableConcept
        | String
        | Boolean
        | Integer
        | Range
        | Attachment
    )


class Device(DomainResource):
    """A type of manufactured item that is used in the provision of healthcare."""

    resource_type: ClassVar[str] = "Device"

    identifier: list[Identifier] | None = None
    display_name: String | None = None
    definition: CodeableReference | None = None
    udi_carrier: list[DeviceUdiCarrier] | None = None
    status: Annotated[Code | None, Binding(DeviceStatus)] = None
    availability_status: CodeableConcept | None = None
    biological_source_event: Identifier | None = None
    manufacturer: String | None = None
    manufacture_date: DateTime | None = None
    expiration_date: DateTime | None = None
    lot_number: String | None = None
    serial_number: String | None = None
    name: list[DeviceName] | None = None
    model_number: String | None = None
    part_number: String | None = None
    category: list[CodeableConcept] | None = None
    type: list[CodeableConcept] | None = None
    version: list[DeviceVersion] | None = None
    conforms_to: list[DeviceConformsTo] | None = None
    property: list[DeviceProperty] | None = None
    mode: CodeableConcept | None = None
    cycle: Count | None = None
    duration: Duration | None = None
    owner: Reference | None = None
    contact: list[ContactPoint] | None = None
    location: Reference | None = None
    url: Uri | None = None
    endpoint: list[Reference] | None = None
    gateway: list[CodeableReference] | None = None
    note: list[Annotation] | None = None
    safety: list[CodeableConcept] | None = None
    parent: Reference | None = None
