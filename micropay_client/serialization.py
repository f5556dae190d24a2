"""Shared serialization utilities for request payloads and response decoding."""

from dataclasses import fields, is_dataclass
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from enum import Enum
from typing import Any, Callable, TypeVar

from micropay_client.exceptions import DecodeError, UnknownVariantError

E = TypeVar("E", bound=Enum)


def to_camel(name: str) -> str:
    """Convert a snake_case field name to the server's camelCase."""
    head, *tail = name.split("_")
    return head + "".join(part.capitalize() for part in tail)


def serialize_value(value: Any, decimal_as: Callable[[Decimal], Any] = float) -> Any:
    """Serialize a value to a JSON-friendly form.

    Parameters
    ----------
    value : Any
        Value to convert.
    decimal_as : Callable[[Decimal], Any]
        Conversion for ``Decimal``. Display output uses ``float``; request
        bodies use ``decimal_to_wire`` so amounts are sent exactly.
    """
    if isinstance(value, Decimal):
        return decimal_as(value)
    elif isinstance(value, Enum):
        return value.value
    elif isinstance(value, datetime):
        return value.isoformat()
    elif isinstance(value, date):
        return value.isoformat()
    elif is_dataclass(value):
        return to_dict(value)
    elif isinstance(value, dict):
        return {k: serialize_value(v, decimal_as) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [serialize_value(v, decimal_as) for v in value]
    return value


def decimal_to_wire(value: Decimal) -> str:
    """Render a Decimal as a plain, exponent-free string (``1E+2`` -> ``"100"``)."""
    return format(value, "f")


def to_payload(obj: Any) -> dict:
    """Convert a request dataclass to a camelCase JSON body.

    ``None`` fields are dropped so optional fields are omitted
    rather than sent as ``null``. Amounts go out as plain decimal strings,
    which the server binds to ``BigDecimal`` without a binary float in
    between.
    """
    return {
        to_camel(f.name): serialize_value(getattr(obj, f.name), decimal_to_wire)
        for f in fields(obj)
        if getattr(obj, f.name) is not None
    }


def to_dict(obj: Any) -> dict:
    """Convert a model to a JSON-friendly dict (snake_case keys) for display."""
    if is_dataclass(obj):
        return {f.name: serialize_value(getattr(obj, f.name)) for f in fields(obj)}
    elif isinstance(obj, dict):
        return {k: serialize_value(v) for k, v in obj.items()}
    else:
        return {"value": serialize_value(obj)}


def require(data: dict, key: str, model: str) -> Any:
    """Return ``data[key]`` or raise DecodeError when it is missing or null."""
    if not isinstance(data, dict):
        raise DecodeError(f"{model}: expected a JSON object, got {type(data).__name__}")
    value = data.get(key)
    if value is None:
        raise DecodeError(f"{model}: missing required field {key!r}")
    return value


def parse_enum(enum_cls: type[E], value: Any) -> E:
    """Decode a closed enum value, failing loudly on unknown variants."""
    try:
        return enum_cls(value)
    except ValueError:
        raise UnknownVariantError(enum_cls.__name__, value) from None


def parse_optional_enum(enum_cls: type[E], value: Any) -> E | None:
    if value is None:
        return None
    return parse_enum(enum_cls, value)


def parse_decimal(value: Any, field_name: str = "amount") -> Decimal:
    """Decode a JSON number (or numeric string) into a Decimal."""
    if isinstance(value, bool):
        raise DecodeError(f"{field_name}: expected a number, got {value!r}")
    if isinstance(value, Decimal):
        return value
    try:
        result = Decimal(str(value))
    except (InvalidOperation, ValueError):
        raise DecodeError(f"{field_name}: expected a number, got {value!r}") from None
    if not result.is_finite():
        raise DecodeError(f"{field_name}: expected a finite number, got {value!r}")
    return result


def parse_datetime(value: Any) -> datetime | None:
    """Decode an ISO-8601 timestamp; ``None`` passes through."""
    if value is None:
        return None
    if isinstance(value, list):
        # Jackson without JavaTimeModule tweaks: [yyyy, MM, dd, HH, mm, ss, nanos]
        try:
            parts = [int(p) for p in value]
            if len(parts) == 7:
                parts[6] //= 1000
            return datetime(*parts)
        except (TypeError, ValueError):
            raise DecodeError(f"Invalid timestamp: {value!r}") from None
    try:
        return datetime.fromisoformat(str(value))
    except ValueError:
        raise DecodeError(f"Invalid timestamp: {value!r}") from None


def parse_optional_str(value: Any) -> str | None:
    return None if value is None else str(value)
