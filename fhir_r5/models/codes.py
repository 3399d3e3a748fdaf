"""
Required-binding value sets used by the general-purpose data types.

Resource-specific value sets live beside their resource.
"""

from enum import Enum


class IdentifierUse(str, Enum):
    """Purpose of an identifier."""

    USUAL = "usual"
    OFFICIAL = "official"
    TEMP = "temp"
    SECONDARY = "secondary"
    OLD = "old"


class QuantityComparator(str, Enum):
    """How a quantity value should be interpreted relative to the real value."""

    LESS_THAN = "<"
    LESS_OR_EQUAL = "<="
    GREATER_OR_EQUAL = ">="
    GREATER_THAN = ">"


class AddressUse(str, Enum):
    HOME = "home"
    WORK = "work"
    TEMP = "temp"
    OLD = "old"
    BILLING = "billing"


class AddressType(str, Enum):
    POSTAL = "postal"
    PHYSICAL = "physical"
    BOTH = "both"


class NameUse(str, Enum):
    USUAL = "usual"
    OFFICIAL = "official"
    TEMP = "temp"
    NICKNAME = "nickname"
    ANONYMOUS = "anonymous"
    OLD = "old"
    MAIDEN = "maiden"


class ContactPointSystem(str, Enum):
    PHONE = "phone"
    FAX = "fax"
    EMAIL = "email"
    PAGER = "pager"
    URL = "url"
    SMS = "sms"
    OTHER = "other"


class ContactPointUse(str, Enum):
    HOME = "home"
    WORK = "work"
    TEMP = "temp"
    OLD = "old"
    MOBILE = "mobile"


class UnitsOfTime(str, Enum):
    """UCUM units used by Timing."""

    SECOND = "s"
    MINUTE = "min"
    HOUR = "h"
    DAY = "d"
    WEEK = "wk"
    MONTH = "mo"
    YEAR = "a"


class DaysOfWeek(str, Enum):
    MON = "mon"
    TUE = "tue"
    WED = "wed"
    THU = "thu"
    FRI = "fri"
    SAT = "sat"
    SUN = "sun"


class EventTiming(str, Enum):
    """Real-world event relating to the schedule."""

    MORN = "MORN"
    MORN_EARLY = "MORN.early"
    MORN_LATE = "MORN.late"
    NOON = "NOON"
    AFT = "AFT"
    AFT_EARLY = "AFT.early"
    AFT_LATE = "AFT.late"
    EVE = "EVE"
    EVE_EARLY = "EVE.early"
    EVE_LATE = "EVE.late"
    NIGHT = "NIGHT"
    PHS = "PHS"
    IMD = "IMD"
    HS = "HS"
    WAKE = "WAKE"
    C = "C"
    CM = "CM"
    CD = "CD"
    CV = "CV"
    AC = "AC"
    ACM = "ACM"
    ACD = "ACD"
    ACV = "ACV"
    PC = "PC"
    PCM = "PCM"
    PCD = "PCD"
    PCV = "PCV"


class NarrativeStatus(str, Enum):
    GENERATED = "generated"
    EXTENSIONS = "extensions"
    ADDITIONAL = "additional"
    EMPTY = "empty"


class PublicationStatus(str, Enum):
    """Lifecycle status of a canonical (knowledge) resource."""

    DRAFT = "draft"
    ACTIVE = "active"
    RETIRED = "retired"
    UNKNOWN = "unknown"


class RelatedArtifactType(str, Enum):
    DOCUMENTATION = "documentation"
    JUSTIFICATION = "justification"
    CITATION = "citation"
    PREDECESSOR = "predecessor"
    SUCCESSOR = "successor"
    DERIVED_FROM = "derived-from"
    DEPENDS_ON = "depends-on"
    COMPOSED_OF = "composed-of"
    PART_OF = "part-of"
    AMENDS = "amends"
    AMENDED_WITH = "amended-with"
    APPENDS = "appends"
    APPENDED_WITH = "appended-with"
    CITES = "cites"
    CITED_BY = "cited-by"
    COMMENTS_ON = "comments-on"
    COMMENT_IN = "comment-in"
    CONTAINS = "contains"
    CONTAINED_IN = "contained-in"
    CORRECTS = "corrects"
    CORRECTION_IN = "correction-in"
    REPLACES = "replaces"
    REPLACED_WITH = "replaced-with"
    RETRACTS = "retracts"
    RETRACTED_BY = "retracted-by"
    SIGNS = "signs"
    SIMILAR_TO = "similar-to"
    SUPPORTS = "supports"
    SUPPORTED_WITH = "supported-with"
    TRANSFORMS = "transforms"
    TRANSFORMED_INTO = "transformed-into"
    TRANSFORMED_WITH = "transformed-with"
    DOCUMENTS = "documents"
    SPECIFICATION_OF = "specification-of"
    CREATED_WITH = "created-with"
    CITE_AS = "cite-as"


class TriggerType(str, Enum):
    NAMED_EVENT = "named-event"
    PERIODIC = "periodic"
    DATA_CHANGED = "data-changed"
    DATA_ADDED = "data-added"
    DATA_MODIFIED = "data-modified"
    DATA_REMOVED = "data-removed"
    DATA_ACCESSED = "data-accessed"
    DATA_ACCESS_ENDED = "data-access-ended"


class ValueFilterComparator(str, Enum):
    EQ = "eq"
    GT = "gt"
    LT = "lt"
    GE = "ge"
    LE = "le"
    SA = "sa"
    EB = "eb"


class SortDirection(str, Enum):
    ASCENDING = "ascending"
    DESCENDING = "descending"


class OperationParameterUse(str, Enum):
    IN = "in"
    OUT = "out"


class PriceComponentType(str, Enum):
    BASE = "base"
    SURCHARGE = "surcharge"
    DEDUCTION = "deduction"
    DISCOUNT = "discount"
    TAX = "tax"
    INFORMATIONAL = "informational"


class AdministrativeGender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    OTHER = "other"
    UNKNOWN = "unknown"


class RequestStatus(str, Enum):
    """Status of a request resource (ServiceRequest, CarePlan, CommunicationRequest...)."""

    DRAFT = "draft"
    ACTIVE = "active"
    ON_HOLD = "on-hold"
    REVOKED = "revoked"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class RequestIntent(str, Enum):
    PROPOSAL = "proposal"
    PLAN = "plan"
    DIRECTIVE = "directive"
    ORDER = "order"
    ORIGINAL_ORDER = "original-order"
    REFLEX_ORDER = "reflex-order"
    FILLER_ORDER = "filler-order"
    INSTANCE_ORDER = "instance-order"
    OPTION = "option"


class RequestPriority(str, Enum):
    ROUTINE = "routine"
    URGENT = "urgent"
    ASAP = "asap"
    STAT = "stat"


class EventStatus(str, Enum):
    """Status of an event resource (Procedure, Communication...)."""

    PREPARATION = "preparation"
    IN_PROGRESS = "in-progress"
    NOT_DONE = "not-done"
    ON_HOLD = "on-hold"
    STOPPED = "stopped"
    COMPLETED = "completed"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class ObservationStatus(str, Enum):
    """Status shared by Observation and DiagnosticReport-style results."""

    REGISTERED = "registered"
    PRELIMINARY = "preliminary"
    FINAL = "final"
    AMENDED = "amended"
    CORRECTED = "corrected"
    CANCELLED = "cancelled"
    ENTERED_IN_ERROR = "entered-in-error"
    UNKNOWN = "unknown"


class FinancialResourceStatus(str, Enum):
    ACTIVE = "active"
    CANCELLED = "cancelled"
    DRAFT = "draft"
    ENTERED_IN_ERROR = "entered-in-error"


class ActionParticipantType(str, Enum):
    CARETEAM = "careteam"
    DEVICE = "device"
    GROUP = "group"
    HEALTHCARESERVICE = "healthcareservice"
    LOCATION = "location"
    ORGANIZATION = "organization"
    PATIENT = "patient"
    PRACTITIONER = "practitioner"
    PRACTITIONERROLE = "practitionerrole"
    RELATEDPERSON = "relatedperson"


class ActionConditionKind(str, Enum):
    APPLICABILITY = "applicability"
    START = "start"
    STOP = "stop"


class ActionRelationshipType(str, Enum):
    BEFORE = "before"
    BEFORE_START = "before-start"
    BEFORE_END = "before-end"
    CONCURRENT = "concurrent"
    CONCURRENT_WITH_START = "concurrent-with-start"
    CONCURRENT_WITH_END = "concurrent-with-end"
    AFTER = "after"
    AFTER_START = "after-start"
    AFTER_END = "after-end"


class ActionGroupingBehavior(str, Enum):
    VISUAL_GROUP = "visual-group"
    LOGICAL_GROUP = "logical-group"
    SENTENCE_GROUP = "sentence-group"


class ActionSelectionBehavior(str, Enum):
    ANY = "any"
    ALL = "all"
    ALL_OR_NONE = "all-or-none"
    EXACTLY_ONE = "exactly-one"
    AT_MOST_ONE = "at-most-one"
    ONE_OR_MORE = "one-or-more"


class ActionRequiredBehavior(str, Enum):
    MUST = "must"
    COULD = "could"
    MUST_UNLESS_DOCUMENTED = "must-unless-documented"


class ActionPrecheckBehavior(str, Enum):
    YES = "yes"
    NO = "no"


class ActionCardinalityBehavior(str, Enum):
    SINGLE = "single"
    MULTIPLE = "multiple"


class SearchParamType(str, Enum):
    """Data type of a search parameter."""

    NUMBER = "number"
    DATE = "date"
    STRING = "string"
    TOKEN = "token"
    REFERENCE = "reference"
    COMPOSITE = "composite"
    QUANTITY = "quantity"
    URI = "uri"
    SPECIAL = "special"
    RESOURCE = "resource"
