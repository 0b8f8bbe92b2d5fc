"""
Flexible scalar codecs for WooCommerce payloads

WooCommerce (and the plugins that extend it) are loose about scalar types:
integers and prices arrive quoted, dates arrive in several layouts and empty
strings stand in for null. The types here decode those wire forms into strict
native values and re-encode them in the form the API expects.
"""

import logging
import math
import re
import struct
from datetime import datetime, timezone
from enum import IntEnum
from typing import Annotated, Any, Optional

from pydantic import PlainSerializer, PlainValidator

logger = logging.getLogger(__name__)

NULL_MARKERS = ("", "null")

STRING_TIME_LAYOUTS = ("%Y-%m-%dT%H:%M:%S", "%Y-%m-%d", "%d/%m/%Y")
CUSTOM_TIME_LAYOUT = "%Y-%m-%dT%H:%M:%S"

DECIMAL_INT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Smallest magnitude that rounds to infinity as a float32
FLOAT32_OVERFLOW = 2.0 ** 128 * (1 - 2.0 ** -25)

ZERO_TIME = datetime.min.replace(tzinfo=timezone.utc)


def _clean(raw: Any) -> str:
    """Render a raw JSON scalar as text with quotes and surrounding whitespace removed"""
    if raw is None:
        return ""
    return str(raw).replace('"', "").strip()


def _parse_int(text: str) -> int:
    """Parse ASCII decimal text only, without digit separators"""
    if not DECIMAL_INT_PATTERN.fullmatch(text):
        raise ValueError(f"invalid decimal integer {text!r}")
    return int(text)


def _parse_float32(text: str) -> float:
    if not text.isascii() or "_" in text:
        raise ValueError(f"invalid float {text!r}")
    value = float(text)
    if math.isfinite(value) and abs(value) >= FLOAT32_OVERFLOW:
        raise ValueError(f"{text!r} is out of float32 range")
    return value


def _parse_time(text: str, layout: str) -> datetime:
    """strptime that also rejects unpadded fields such as 2026-1-9"""
    parsed = datetime.strptime(text, layout)
    if parsed.strftime(layout) != text:
        raise ValueError(f"{text!r} does not match {layout!r}")
    return parsed


def _to_float32(value: float) -> float:
    return struct.unpack("f", struct.pack("f", value))[0]


def _shortest_float32(value: float) -> float:
    """Shortest decimal that still rounds to the same float32"""
    for digits in range(6, 10):
        candidate = float(f"{value:.{digits}g}")
        if _to_float32(candidate) == value:
            return candidate
    return value


def _encode_time(value: datetime) -> Optional[str]:
    if value == ZERO_TIME:
        return None
    return value.isoformat().replace("+00:00", "Z")


class StringInt(int):
    """Integer that may be sent quoted; unparseable input decodes to zero"""

    @classmethod
    def decode(cls, raw: Any) -> "StringInt":
        if isinstance(raw, StringInt):
            return raw
        text = _clean(raw)
        if text in NULL_MARKERS:
            return cls(0)
        try:
            return cls(_parse_int(text))
        except ValueError:
            logger.warning(f"Error parsing string int {raw!r}, setting to zero")
            return cls(0)

    def encode(self) -> int:
        return int(self)

    def int64(self) -> int:
        return int(self)

    def __str__(self) -> str:
        return str(int(self))


class StringFloat(float):
    """
    Float with 32-bit precision that may be sent quoted

    Unlike StringInt, a payload that is not a number is an error: these
    fields carry prices and totals.
    """

    def __new__(cls, value: float = 0.0):
        return super().__new__(cls, _to_float32(float(value)))

    @classmethod
    def decode(cls, raw: Any) -> "StringFloat":
        if isinstance(raw, StringFloat):
            return raw
        text = str(raw).strip('"') if raw is not None else ""
        if text in NULL_MARKERS:
            return cls(0.0)
        try:
            return cls(_parse_float32(text))
        except ValueError as e:
            raise ValueError(f"invalid string float {raw!r}: {e}") from e

    def encode(self) -> float:
        return _shortest_float32(float(self))

    def float32(self) -> float:
        return float(self)

    def float64(self) -> float:
        return float(self)


def parse_string_float(text: str) -> StringFloat:
    """Build a StringFloat from text, falling back to zero"""
    try:
        return StringFloat(float(text))
    except ValueError:
        return StringFloat(0.0)


class StringOrInt(str):
    """
    Value that is either an integer or free text

    Numeric payloads are kept in canonical decimal form and re-encoded as a
    bare number; anything else keeps its literal text.
    """

    @classmethod
    def decode(cls, raw: Any) -> "StringOrInt":
        if isinstance(raw, StringOrInt):
            return raw
        if raw is None or raw in NULL_MARKERS:
            return cls("")
        try:
            return cls(str(_parse_int(_clean(raw))))
        except ValueError:
            return cls(str(raw))

    def is_numeric(self) -> bool:
        return DECIMAL_INT_PATTERN.fullmatch(self) is not None

    def encode(self) -> Any:
        if self == "":
            return None
        if self.is_numeric():
            return int(self)
        return str(self)

    def int64(self) -> int:
        return int(self) if self.is_numeric() else 0


class StringTime:
    """
    Date/time accepting several layouts

    Layouts are tried in order: YYYY-MM-DDTHH:MM:SS, YYYY-MM-DD, DD/MM/YYYY.
    Empty or "null" input yields the zero time. Parsed values are UTC.
    """

    __slots__ = ("_value",)

    layouts = STRING_TIME_LAYOUTS

    def __init__(self, value: Optional[datetime] = None):
        if value is None:
            value = ZERO_TIME
        elif value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        self._value = value

    @classmethod
    def decode(cls, raw: Any) -> "StringTime":
        if isinstance(raw, cls):
            return raw
        if isinstance(raw, datetime):
            return cls(raw)
        text = _clean(raw)
        if text in NULL_MARKERS:
            return cls()
        for layout in cls.layouts:
            try:
                return cls(_parse_time(text, layout))
            except ValueError:
                continue
        raise ValueError(f"cannot parse {text!r} as {cls.__name__}")

    def encode(self) -> Optional[str]:
        return _encode_time(self._value)

    def time(self) -> datetime:
        return self._value

    def is_zero(self) -> bool:
        return self._value == ZERO_TIME

    def __eq__(self, other: object) -> bool:
        if isinstance(other, StringTime):
            return self._value == other._value
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self._value)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._value.isoformat()})"


class CustomTime(StringTime):
    """Date/time with the single YYYY-MM-DDTHH:MM:SS layout used by subscriptions"""

    __slots__ = ()

    layouts = (CUSTOM_TIME_LAYOUT,)


class PersonType(IntEnum):
    """Brazilian billing person type ("F" individual, "J" company)"""

    UNKNOWN = 0
    PESSOA_FISICA = 1
    PESSOA_JURIDICA = 2

    @classmethod
    def decode(cls, raw: Any) -> "PersonType":
        if isinstance(raw, PersonType):
            return raw
        return {"F": cls.PESSOA_FISICA, "J": cls.PESSOA_JURIDICA}.get(_clean(raw), cls.UNKNOWN)

    def encode(self) -> Optional[str]:
        return {PersonType.PESSOA_FISICA: "F", PersonType.PESSOA_JURIDICA: "J"}.get(self)


def _field(codec: type) -> Any:
    return Annotated[
        codec,
        PlainValidator(codec.decode),
        PlainSerializer(lambda value: value.encode()),
    ]


# Field aliases for pydantic schemas
StringIntField = _field(StringInt)
StringFloatField = _field(StringFloat)
StringOrIntField = _field(StringOrInt)
StringTimeField = _field(StringTime)
CustomTimeField = _field(CustomTime)
PersonTypeField = _field(PersonType)
