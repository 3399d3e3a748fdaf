"""
FHIR R5 primitive types.

Each primitive is an ``Element`` (``id``, ``extension``) plus a ``value``,
which is exactly the ``(value?, element?)`` pair carried in FHIR JSON as
``"field"`` and ``"_field"``. Lexical forms are preserved: decimals and
date/time values keep their source text.
"""

import datetime as dt
import decimal
import re
from enum import Enum
from typing import Any, ClassVar

from pydantic import field_validator, model_validator

from fhir_r5.models.base import Element

INT32_MIN = -(2**31)
INT32_MAX = 2**31 - 1
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_YEAR = r"([0-9]([0-9]([0-9][1-9]|[1-9]0)|[1-9]00)|[1-9]000)"
_MONTH = r"(0[1-9]|1[0-2])"
_DAY = r"(0[1-9]|[1-2][0-9]|3[0-1])"
_TIME = r"([01][0-9]|2[0-3]):[0-5][0-9]:([0-5][0-9]|60)(\.[0-9]{1,9})?"
_ZONE = r"(Z|(\+|-)((0[0-9]|1[0-3]):[0-5][0-9]|14:00))"

DATE_PATTERN = re.compile(rf"{_YEAR}(-{_MONTH}(-{_DAY})?)?")
DATETIME_PATTERN = re.compile(rf"{_YEAR}(-{_MONTH}(-{_DAY}(T{_TIME}{_ZONE})?)?)?")
INSTANT_PATTERN = re.compile(rf"{_YEAR}-{_MONTH}-{_DAY}T{_TIME}{_ZONE}")
TIME_PATTERN = re.compile(_TIME)
DECIMAL_PATTERN = re.compile(r"-?(0|[1-9][0-9]*)(\.[0-9]+)?([eE][+-]?[0-9]+)?")
INTEGER_PATTERN = re.compile(r"-?(0|[1-9][0-9]*)")
CODE_PATTERN = re.compile(r"[^\s]+( [^\s]+)*")
ID_PATTERN = re.compile(r"[A-Za-z0-9\-\.]{1,64}")
URI_PATTERN = re.compile(r"\S+")
OID_PATTERN = re.compile(r"urn:oid:[0-2](\.(0|[1-9][0-9]*))+")
UUID_PATTERN = re.compile(
    r"urn:uuid:[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}"
)
BASE64_PATTERN = re.compile(r"(\s*([0-9a-zA-Z\+/=]){4}\s*)+")
STRING_PATTERN = re.compile(r"[ \r\n\t\S]+")

_DATE_PARTS = re.compile(
    r"(?P<year>\d{4})(-(?P<month>\d{2})(-(?P<day>\d{2})"
    r"(T(?P<hour>\d{2}):(?P<minute>\d{2}):(?P<second>\d{2})(\.(?P<fraction>\d+))?"
    r"(?P<zone>Z|[+-]\d{2}:\d{2}))?)?)?"
)


class JsonNumber(str):
    """A JSON number kept as its exact source lexical form."""

    __slots__ = ()


class DatePrecision(int, Enum):
    """Precision of a partial date/time value."""

    YEAR = 1
    MONTH = 2
    DAY = 3
    SECOND = 4


def number_lexical(raw: Any) -> str | None:
    """Return the lexical form of a JSON number, or None when ``raw`` is not a number."""
    if isinstance(raw, JsonNumber):
        return str(raw)
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        return str(raw)
    if isinstance(raw, float):
        return repr(raw)
    if isinstance(raw, decimal.Decimal):
        return str(raw)
    return None


class Primitive(Element):
    """Base for all FHIR primitive types: an optional value plus optional id/extension."""

    fhir_type: ClassVar[str] = ""

    value: Any = None

    @model_validator(mode="before")
    @classmethod
    def _wrap_scalar(cls, data: Any) -> Any:
        if isinstance(data, Primitive):
            return {"value": data.value, "id": data.id, "extension": data.extension}
        if isinstance(data, dict):
            return data
        return {"value": data}

    @field_validator("value", mode="before")
    @classmethod
    def _check_value(cls, value: Any) -> Any:
        if value is None:
            return value
        return cls.coerce(value)

    @model_validator(mode="after")
    def _check_not_empty(self) -> "Primitive":
        if self.value is None and self.id is None and not self.extension:
            raise ValueError(f"{self.fhir_type} must carry a value, an id or an extension")
        return self

    @classmethod
    def coerce(cls, value: Any) -> Any:
        """
        Validate a Python value for this primitive type.

        Raises:
            ValueError: If the value does not satisfy the lexical/range rules
        """
        return cls.from_json(value)

    @classmethod
    def from_json(cls, raw: Any) -> Any:
        """
        Convert a JSON scalar to the in-memory value.

        Raises:
            ValueError: If the scalar has the wrong JSON type or lexical form
        """
        raise NotImplementedError

    def to_json(self) -> Any:
        """Convert the in-memory value back to its JSON scalar."""
        return self.value

    def __str__(self) -> str:
        return "" if self.value is None else str(self.to_json())


class _StringPrimitive(Primitive):
    pattern: ClassVar[re.Pattern[str]] = STRING_PATTERN

    value: str | None = None

    @classmethod
    def from_json(cls, raw: Any) -> str:
        if not isinstance(raw, str) or isinstance(raw, JsonNumber):
            raise ValueError(f"{cls.fhir_type} must be a JSON string")
        if not cls.pattern.fullmatch(raw):
            raise ValueError(f"'{raw}' is not a valid {cls.fhir_type}")
        return raw


class Boolean(Primitive):
    fhir_type: ClassVar[str] = "boolean"

    value: bool | None = None

    @classmethod
    def from_json(cls, raw: Any) -> bool:
        if not isinstance(raw, bool):
            raise ValueError("boolean must be JSON true or false")
        return raw


class Integer(Primitive):
    fhir_type: ClassVar[str] = "integer"
    minimum: ClassVar[int] = INT32_MIN
    maximum: ClassVar[int] = INT32_MAX

    value: int | None = None

    @classmethod
    def from_json(cls, raw: Any) -> int:
        lexical = number_lexical(raw)
        if lexical is None or not INTEGER_PATTERN.fullmatch(lexical):
            raise ValueError(f"{cls.fhir_type} must be a JSON integer")
        return cls._check_range(int(lexical))

    @classmethod
    def coerce(cls, value: Any) -> int:
        if isinstance(value, int) and not isinstance(value, bool):
            return cls._check_range(value)
        return cls.from_json(value)

    @classmethod
    def _check_range(cls, number: int) -> int:
        if not cls.minimum <= number <= cls.maximum:
            raise ValueError(f"{number} is out of range for {cls.fhir_type}")
        return number


class PositiveInt(Integer):
    fhir_type: ClassVar[str] = "positiveInt"
    minimum: ClassVar[int] = 1


class UnsignedInt(Integer):
    fhir_type: ClassVar[str] = "unsignedInt"
    minimum: ClassVar[int] = 0


class Integer64(Primitive):
    """64-bit integer, carried in JSON as a string."""

    fhir_type: ClassVar[str] = "integer64"

    value: int | None = None

    @classmethod
    def from_json(cls, raw: Any) -> int:
        if not isinstance(raw, str) or isinstance(raw, JsonNumber):
            raise ValueError("integer64 must be a JSON string")
        if not INTEGER_PATTERN.fullmatch(raw):
            raise ValueError(f"'{raw}' is not a valid integer64")
        return cls.coerce(int(raw))

    @classmethod
    def coerce(cls, value: Any) -> int:
        if isinstance(value, str):
            return cls.from_json(value)
        if not isinstance(value, int) or isinstance(value, bool):
            raise ValueError("integer64 must be an integer")
        if not INT64_MIN <= value <= INT64_MAX:
            raise ValueError(f"{value} is out of range for integer64")
        return value

    def to_json(self) -> str | None:
        return None if self.value is None else str(self.value)


class Decimal(Primitive):
    """Decimal number; the value is the exact source lexical form."""

    fhir_type: ClassVar[str] = "decimal"

    value: str | None = None

    @classmethod
    def from_json(cls, raw: Any) -> str:
        lexical = number_lexical(raw)
        if lexical is None:
            raise ValueError("decimal must be a JSON number")
        if not DECIMAL_PATTERN.fullmatch(lexical):
            raise ValueError(f"'{lexical}' is not a valid decimal")
        return lexical

    @classmethod
    def coerce(cls, value: Any) -> str:
        if isinstance(value, str) and not isinstance(value, JsonNumber):
            value = JsonNumber(value)
        return cls.from_json(value)

    def as_decimal(self) -> decimal.Decimal | None:
        """Return the value as a ``decimal.Decimal`` (precision preserved)."""
        return None if self.value is None else decimal.Decimal(self.value)

    def to_json(self) -> JsonNumber | None:
        return None if self.value is None else JsonNumber(self.value)


class String(_StringPrimitive):
    fhir_type: ClassVar[str] = "string"


class Markdown(_StringPrimitive):
    fhir_type: ClassVar[str] = "markdown"


class Xhtml(_StringPrimitive):
    """Limited XHTML content of ``Narrative.div``; not parsed at this layer."""

    fhir_type: ClassVar[str] = "xhtml"


class Uri(_StringPrimitive):
    fhir_type: ClassVar[str] = "uri"
    pattern: ClassVar[re.Pattern[str]] = URI_PATTERN


class Url(Uri):
    fhir_type: ClassVar[str] = "url"


class Canonical(Uri):
    fhir_type: ClassVar[str] = "canonical"


class Oid(Uri):
    fhir_type: ClassVar[str] = "oid"
    pattern: ClassVar[re.Pattern[str]] = OID_PATTERN


class Uuid(Uri):
    fhir_type: ClassVar[str] = "uuid"
    pattern: ClassVar[re.Pattern[str]] = UUID_PATTERN


class Id(_StringPrimitive):
    fhir_type: ClassVar[str] = "id"
    pattern: ClassVar[re.Pattern[str]] = ID_PATTERN


class Base64Binary(_StringPrimitive):
    fhir_type: ClassVar[str] = "base64Binary"
    pattern: ClassVar[re.Pattern[str]] = BASE64_PATTERN


class Code(Primitive):
    """
    Coded token. For required bindings the value is stored as the enum member,
    otherwise as the verbatim string.
    """

    fhir_type: ClassVar[str] = "code"

    value: Any = None

    @classmethod
    def from_json(cls, raw: Any) -> str:
        if not isinstance(raw, str) or isinstance(raw, JsonNumber):
            raise ValueError("code must be a JSON string")
        if not CODE_PATTERN.fullmatch(raw):
            raise ValueError(f"'{raw}' is not a valid code")
        return raw

    @classmethod
    def coerce(cls, value: Any) -> Any:
        if isinstance(value, Enum):
            cls.from_json(value.value)
            return value
        return cls.from_json(value)

    def to_json(self) -> str | None:
        if isinstance(self.value, Enum):
            return self.value.value
        return self.value


class _TemporalPrimitive(_StringPrimitive):
    @classmethod
    def from_json(cls, raw: Any) -> str:
        lexical = super().from_json(raw)
        parts = _DATE_PARTS.fullmatch(lexical)
        if parts and parts["day"] and parts["second"] != "60":
            try:
                dt.date(int(parts["year"]), int(parts["month"]), int(parts["day"]))
            except ValueError:
                raise ValueError(f"'{raw}' is not a calendar date") from None
        return lexical

    @classmethod
    def coerce(cls, value: Any) -> str:
        if isinstance(value, dt.datetime):
            if value.tzinfo is None:
                raise ValueError(f"{cls.fhir_type} with a time requires a timezone")
            value = value.isoformat().replace("+00:00", "Z")
        elif isinstance(value, dt.date):
            value = value.isoformat()
        return cls.from_json(value)

    @property
    def precision(self) -> DatePrecision | None:
        """Precision of the value (year, month, day or second)."""
        if self.value is None:
            return None
        parts = _DATE_PARTS.fullmatch(self.value)
        if parts["hour"]:
            return DatePrecision.SECOND
        if parts["day"]:
            return DatePrecision.DAY
        if parts["month"]:
            return DatePrecision.MONTH
        return DatePrecision.YEAR

    def date_parts(self) -> tuple[int, ...]:
        """Calendar components present in the value: (year[, month[, day]])."""
        parts = _DATE_PARTS.fullmatch(self.value or "")
        if not parts:
            return ()
        return tuple(int(parts[key]) for key in ("year", "month", "day") if parts[key])

    def to_python(self) -> dt.date | dt.datetime | None:
        """
        Convert to a Python date or datetime.

        Partial dates are anchored at the first day of their period; values with
        a time become timezone-aware datetimes.
        """
        if self.value is None:
            return None
        parts = _DATE_PARTS.fullmatch(self.value)
        year = int(parts["year"])
        month = int(parts["month"] or 1)
        day = int(parts["day"] or 1)
        if not parts["hour"]:
            return dt.date(year, month, day)
        fraction = (parts["fraction"] or "0")[:6].ljust(6, "0")
        return dt.datetime(
            year,
            month,
            day,
            int(parts["hour"]),
            int(parts["minute"]),
            min(int(parts["second"]), 59),
            int(fraction),
            tzinfo=_parse_zone(parts["zone"]),
        )


def _parse_zone(zone: str) -> dt.tzinfo:
    if zone == "Z":
        return dt.timezone.utc
    sign = -1 if zone[0] == "-" else 1
    hours, minutes = zone[1:].split(":")
    return dt.timezone(sign * dt.timedelta(hours=int(hours), minutes=int(minutes)))


class Date(_TemporalPrimitive):
    """Date with year, month or day precision: ``YYYY``, ``YYYY-MM``, ``YYYY-MM-DD``."""

    fhir_type: ClassVar[str] = "date"
    pattern: ClassVar[re.Pattern[str]] = DATE_PATTERN

    @classmethod
    def coerce(cls, value: Any) -> str:
        if isinstance(value, dt.datetime):
            raise ValueError("date must not carry a time")
        return super().coerce(value)


class DateTime(_TemporalPrimitive):
    """Date, optionally with a time; a time always carries a timezone."""

    fhir_type: ClassVar[str] = "dateTime"
    pattern: ClassVar[re.Pattern[str]] = DATETIME_PATTERN


class Instant(_TemporalPrimitive):
    """Instant with at least seconds precision and a mandatory timezone."""

    fhir_type: ClassVar[str] = "instant"
    pattern: ClassVar[re.Pattern[str]] = INSTANT_PATTERN

    @classmethod
    def coerce(cls, value: Any) -> str:
        if isinstance(value, dt.date) and not isinstance(value, dt.datetime):
            raise ValueError("instant requires a time")
        return super().coerce(value)


class Time(_StringPrimitive):
    """Time of day ``hh:mm:ss`` with optional fractional seconds."""

    fhir_type: ClassVar[str] = "time"
    pattern: ClassVar[re.Pattern[str]] = TIME_PATTERN

    @classmethod
    def coerce(cls, value: Any) -> str:
        if isinstance(value, dt.time):
            value = value.isoformat()
        return cls.from_json(value)

    def to_python(self) -> dt.time | None:
        if self.value is None:
            return None
        clock, _, fraction = self.value.partition(".")
        hour, minute, second = (int(part) for part in clock.split(":"))
        return dt.time(hour, minute, min(second, 59), int(fraction[:6].ljust(6, "0") or 0))


PRIMITIVE_TYPES: tuple[type[Primitive], ...] = (
    Base64Binary,
    Boolean,
    Canonical,
    Code,
    Date,
    DateTime,
    Decimal,
    Id,
    Instant,
    Integer,
    Integer64,
    Markdown,
    Oid,
    PositiveInt,
    String,
    Time,
    UnsignedInt,
    Uri,
    Url,
    Uuid,
)
