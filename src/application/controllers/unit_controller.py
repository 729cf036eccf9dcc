from typing import Any
from fastapi import APIRouter, Body, Depends, Query, status
from infrastructure.database import get_db
from sqlalchemy.orm import Session
from application.use_cases.unit_use_cases import UnitUseCases
from application.use_cases.access_policy import UNITS, can_view, scope_query
from application.use_cases.security import get_current_user
from application.utils.utils import parse_number, to_http_exception
from domain.entities.user_classes import CurrentUser

router = APIRouter(prefix="/api/v1/units", tags=["units"])

@router.get("", summary="List units (paginated)")
def get_units(
        page: str | None = Query(None),
        size: str | None = Query(None),
        company: str | None = Query(None),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        query = scope_query(current, UNITS, requested_company=parse_number("company", company))
        return UnitUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), query)
    except Exception as exc:
        raise to_http_exception(exc)

@router.post("/filter", summary="List units matching the filter sent on the body")
def filter_units(
        payload: dict[str, Any] | None = Body(None),
        page: str | None = Query(None),
        size: str | None = Query(None),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        query = scope_query(current, UNITS, payload)
        return UnitUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), query)
    except Exception as exc:
        raise to_http_exception(exc)

@router.get("/{unit_id}")
def get_unit_by_id(unit_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    """A unit from another company is answered with an empty object, not an error."""
    try:
        unit = UnitUseCases(db).get_by_id(unit_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return unit if can_view(current, UNITS, unit) else {}

@router.put("", status_code=status.HTTP_201_CREATED)
def create_unit(payload: dict[str, Any] = Body(...), db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        UnitUseCases(db).create(payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return "unit created"

@router.post("/{unit_id}")
def update_unit(
        unit_id: str,
        payload: dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        uc = UnitUseCases(db)
        if not can_view(current, UNITS, uc.get_by_id(unit_id)):
            return {}
        unit = uc.update({"id": unit_id}, payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return unit or {}

@router.delete("/{unit_id}")
def remove_unit(unit_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        uc = UnitUseCases(db)
        if not can_view(current, UNITS, uc.get_by_id(unit_id)):
            return {}
        unit = uc.remove(unit_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return unit or {}
