# adapters/repository/query_filter.py
"""
Translate document style filters into SQLAlchemy conditions.

Supported shapes::

    {"company": 1}                          equality
    {"unit": [1, 2]}                        IN
    {"healthscore": {"$gte": 50}}           operators
    {"$or": [{"user": 1}, {"unit": 2}]}     boolean composition

``_id`` is accepted as an alias of ``id``.
"""
from typing import Any, Mapping

from sqlalchemy import and_, or_, true

from domain.exceptions import ValidationError
from domain.models.schema import FieldSpec, Schema, INTEGER, cast_value

ID_SPEC = FieldSpec(INTEGER)

_COMPARISONS = {
    "$eq": lambda column, value: column.is_(None) if value is None else column == value,
    "$ne": lambda column, value: column.is_not(None) if value is None else column != value,
    "$gt": lambda column, value: column > value,
    "$gte": lambda column, value: column >= value,
    "$lt": lambda column, value: column < value,
    "$lte": lambda column, value: column <= value,
}
_MEMBERSHIP = {
    "$in": lambda column, values: column.in_(values),
    "$nin": lambda column, values: column.not_in(values),
}


def _cast(field: str, spec: FieldSpec, value: Any) -> Any:
    if value is None:
        return None
    return cast_value(field, spec, value)


def _cast_list(field: str, spec: FieldSpec, values: Any) -> list:
    if not isinstance(values, list):
        raise ValidationError(f"Filter on {field} expects an array")
    return [_cast(field, spec, value) for value in values]


def _field_condition(field: str, spec: FieldSpec, column, value: Any):
    if isinstance(value, Mapping):
        clauses = []
        for op, operand in value.items():
            if op in _COMPARISONS:
                clauses.append(_COMPARISONS[op](column, _cast(field, spec, operand)))
            elif op in _MEMBERSHIP:
                clauses.append(_MEMBERSHIP[op](column, _cast_list(field, spec, operand)))
            else:
                raise ValidationError(f"Unsupported filter operator {op!r} on {field}")
        return and_(true(), *clauses)
    if isinstance(value, list):
        return column.in_(_cast_list(field, spec, value))
    if value is None:
        return column.is_(None)
    return column == _cast(field, spec, value)


def build_conditions(entity, schema: Schema, filter_query: Mapping[str, Any] | None) -> list:
    if not filter_query:
        return []
    if not isinstance(filter_query, Mapping):
        raise ValidationError("Filter must be an object")

    conditions = []
    for key, value in filter_query.items():
        if key in ("$and", "$or"):
            if not isinstance(value, list) or not value:
                raise ValidationError(f"{key} expects a non-empty array")
            clauses = [and_(true(), *build_conditions(entity, schema, item)) for item in value]
            conditions.append(and_(*clauses) if key == "$and" else or_(*clauses))
            continue

        field = "id" if key == "_id" else key
        spec = ID_SPEC if field == "id" else schema.get(field)
        if spec is None:
            raise ValidationError(f"Unknown filter field {key!r}")
        conditions.append(_field_condition(field, spec, getattr(entity, field), value))
    return conditions
