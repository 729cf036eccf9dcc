# domain/models/schema.py
"""
Storage independent schema tables.

Each entity declares a ``dict[str, FieldSpec]`` describing its public, writable
fields. ``validate_document`` consumes that table, casts incoming values the
way a document store would (numeric strings, "true"/"false") and rejects what
does not fit. Uniqueness is declared here but enforced by the database.
"""
import math
import re
from dataclasses import dataclass
from typing import Any, Mapping

from domain.exceptions import CastError, ValidationError

STRING = "String"
INTEGER = "Integer"
NUMBER = "Number"
BOOLEAN = "Boolean"

_INTEGER_RE = re.compile(r"^-?[0-9]+$")

MAX_INTEGER = 2**63 - 1
MIN_INTEGER = -2**63


@dataclass(frozen=True)
class FieldSpec:
    kind: str
    required: bool = False
    unique: bool = False
    enum: tuple[str, ...] | None = None
    min: float | None = None
    max: float | None = None
    pattern: str | None = None


Schema = Mapping[str, FieldSpec]


def unique_fields(schema: Schema) -> list[str]:
    return [name for name, spec in schema.items() if spec.unique]


def cast_value(field: str, spec: FieldSpec, value: Any) -> Any:
    if spec.kind == STRING:
        if isinstance(value, str):
            return value
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        raise CastError(field, value, "string")

    if spec.kind == INTEGER:
        if isinstance(value, bool):
            raise CastError(field, value, INTEGER)
        if isinstance(value, int):
            number = value
        elif isinstance(value, float) and value.is_integer():
            number = int(value)
        elif isinstance(value, str) and len(value.strip()) <= 20 and _INTEGER_RE.match(value.strip()):
            number = int(value.strip())
        else:
            raise CastError(field, value, INTEGER)
        # database integer columns are signed 64 bit
        if not MIN_INTEGER <= number <= MAX_INTEGER:
            raise CastError(field, value, INTEGER)
        return number

    if spec.kind == NUMBER:
        if isinstance(value, bool):
            raise CastError(field, value, NUMBER)
        if not isinstance(value, (int, float, str)):
            raise CastError(field, value, NUMBER)
        try:
            number = float(value.strip() if isinstance(value, str) else value)
        except (ValueError, OverflowError):
            raise CastError(field, value, NUMBER)
        if math.isnan(number) or math.isinf(number):
            raise CastError(field, value, NUMBER)
        return number

    if spec.kind == BOOLEAN:
        if isinstance(value, bool):
            return value
        if value in (0, 1) and isinstance(value, int):
            return bool(value)
        if isinstance(value, str) and value.strip().lower() in ("true", "false"):
            return value.strip().lower() == "true"
        raise CastError(field, value, BOOLEAN)

    raise ValueError(f"Unknown field kind {spec.kind!r} for {field}")


def _check_constraints(field: str, spec: FieldSpec, value: Any) -> list[str]:
    errors = []
    if spec.enum is not None and value not in spec.enum:
        errors.append(f"{field}: `{value}` is not a valid enum value for path `{field}`.")
    if spec.min is not None and value < spec.min:
        errors.append(f"{field}: Path `{field}` ({value}) is less than minimum allowed value ({spec.min:g}).")
    if spec.max is not None and value > spec.max:
        errors.append(f"{field}: Path `{field}` ({value}) is more than maximum allowed value ({spec.max:g}).")
    if spec.pattern is not None and not re.fullmatch(spec.pattern, value):
        errors.append(f"{field}: Path `{field}` is invalid ({value}).")
    return errors


def validate_document(model_name: str, schema: Schema, data: Any, *, partial: bool = False) -> dict:
    """
    Validate ``data`` against ``schema`` and return the cleaned document.

    Fields not declared in the schema are dropped. With ``partial=True`` only
    the fields present in ``data`` are checked (used by updates).
    """
    if not isinstance(data, Mapping):
        raise ValidationError(f"{model_name} validation failed: document must be an object")

    cleaned: dict[str, Any] = {}
    errors: list[str] = []
    for field, spec in schema.items():
        if field not in data:
            if spec.required and not partial:
                errors.append(f"{field}: Path `{field}` is required.")
            continue

        value = data[field]
        if value is None or (isinstance(value, str) and value == ""):
            if spec.required:
                errors.append(f"{field}: Path `{field}` is required.")
            else:
                cleaned[field] = None
            continue

        try:
            value = cast_value(field, spec, value)
        except CastError as exc:
            errors.append(f"{field}: {exc}")
            continue

        errors.extend(_check_constraints(field, spec, value))
        cleaned[field] = value

    if errors:
        raise ValidationError(f"{model_name} validation failed: {', '.join(errors)}")
    return cleaned
