from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.orm import Session
from infrastructure.database import get_db
from application.use_cases.reports_use_cases import ReportsUseCases
from application.use_cases.access_policy import REPORTS, scope_query
from application.use_cases.security import get_current_user
from application.utils.utils import get_query_list, parse_number, to_http_exception
from domain.entities.user_classes import CurrentUser

router = APIRouter(prefix="/api/v1/reports", tags=["reports"])

@router.get("", summary="Asset count and average health grouped by status and groupField")
def get_avg_health(
    request: Request,
    company: str | None = Query(None),
    unit: str | None = Query(None),
    user: str | None = Query(None),
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
):
    """
    Query string:
    - `groupField` (repeatable, `groupField[]` also accepted): extra fields to group by
    - `company`, `unit`, `user`: filters, `company` is overridden by the caller's own company
    """
    try:
        query = {}
        for field, value in (("unit", unit), ("user", user)):
            parsed = parse_number(field, value)
            if parsed is not None:
                query[field] = parsed
        query = scope_query(current, REPORTS, query, requested_company=parse_number("company", company))
        return ReportsUseCases(db).get_avg_health(get_query_list(request, "groupField"), query)
    except Exception as exc:
        raise to_http_exception(exc)
