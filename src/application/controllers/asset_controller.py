from typing import Any
from fastapi import APIRouter, Body, Depends, Query, status
from infrastructure.database import get_db
from sqlalchemy.orm import Session
from application.use_cases.asset_use_cases import AssetUseCases
from application.use_cases.access_policy import ASSETS, can_view, scope_query
from application.use_cases.security import get_current_user
from application.utils.utils import parse_number, to_http_exception
from domain.entities.user_classes import CurrentUser

router = APIRouter(prefix="/api/v1/assets", tags=["assets"])

@router.get("", summary="List assets (paginated)")
def get_assets(
        page: str | None = Query(None),
        size: str | None = Query(None),
        company: str | None = Query(None),
        unit: str | None = Query(None),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        query = {}
        unit_id = parse_number("unit", unit)
        if unit_id is not None:
            query["unit"] = unit_id
        query = scope_query(current, ASSETS, query, requested_company=parse_number("company", company))
        return AssetUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), query)
    except Exception as exc:
        raise to_http_exception(exc)

@router.post("/filter", summary="List assets matching the filter sent on the body")
def filter_assets(
        payload: dict[str, Any] | None = Body(None),
        page: str | None = Query(None),
        size: str | None = Query(None),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        query = scope_query(current, ASSETS, payload)
        return AssetUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), query)
    except Exception as exc:
        raise to_http_exception(exc)

@router.get("/{asset_id}")
def get_asset_by_id(asset_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        asset = AssetUseCases(db).get_by_id(asset_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return asset if can_view(current, ASSETS, asset) else {}

@router.put("", status_code=status.HTTP_201_CREATED)
def create_asset(payload: dict[str, Any] = Body(...), db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        AssetUseCases(db).create(payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return "asset created"

@router.post("/{asset_id}")
def update_asset(
        asset_id: str,
        payload: dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        uc = AssetUseCases(db)
        if not can_view(current, ASSETS, uc.get_by_id(asset_id)):
            return {}
        asset = uc.update({"id": asset_id}, payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return asset or {}

@router.delete("/{asset_id}")
def remove_asset(asset_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        uc = AssetUseCases(db)
        if not can_view(current, ASSETS, uc.get_by_id(asset_id)):
            return {}
        asset = uc.remove(asset_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return asset or {}
