from typing import Any
from fastapi import APIRouter, Body, Depends, Query, status
from infrastructure.database import get_db
from sqlalchemy.orm import Session
from application.use_cases.company_use_cases import CompanyUseCases
from application.use_cases.access_policy import COMPANIES, can_view, scope_query
from application.use_cases.security import get_current_user
from application.utils.utils import parse_number, to_http_exception
from domain.entities.user_classes import CurrentUser

router = APIRouter(prefix="/api/v1/companies", tags=["companies"])

@router.get("", summary="List companies (paginated)")
def get_companies(
        page: str | None = Query(None),
        size: str | None = Query(None),
        company: str | None = Query(None),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        query = scope_query(current, COMPANIES, requested_company=parse_number("company", company))
        return CompanyUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), query)
    except Exception as exc:
        raise to_http_exception(exc)

@router.post("/filter", summary="List companies matching the filter sent on the body")
def filter_companies(
        payload: dict[str, Any] | None = Body(None),
        page: str | None = Query(None),
        size: str | None = Query(None),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        query = scope_query(current, COMPANIES, payload)
        return CompanyUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), query)
    except Exception as exc:
        raise to_http_exception(exc)

@router.get("/{company_id}")
def get_company_by_id(company_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        company = CompanyUseCases(db).get_by_id(company_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return company if can_view(current, COMPANIES, company) else {}

@router.put("", status_code=status.HTTP_201_CREATED)
def create_company(payload: dict[str, Any] = Body(...), db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        CompanyUseCases(db).create(payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return "company created"

@router.post("/{company_id}")
def update_company(
        company_id: str,
        payload: dict[str, Any] = Body(...),
        db: Session = Depends(get_db),
        current: CurrentUser = Depends(get_current_user),
):
    try:
        uc = CompanyUseCases(db)
        if not can_view(current, COMPANIES, uc.get_by_id(company_id)):
            return {}
        company = uc.update({"id": company_id}, payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return company or {}

@router.delete("/{company_id}")
def remove_company(company_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        uc = CompanyUseCases(db)
        if not can_view(current, COMPANIES, uc.get_by_id(company_id)):
            return {}
        company = uc.remove(company_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return company or {}
