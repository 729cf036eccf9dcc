# application/use_cases/access_policy.py
"""
Role based narrowing of queries.

Nothing here raises: records outside the actor's reach are filtered out of
list queries, or hidden (the caller answers ``{}``) on single reads.
"""
from typing import Any, Mapping

from domain.entities.user_classes import CurrentUser, RoleType

COMPANIES = "companies"
UNITS = "units"
ASSETS = "assets"
REPORTS = "reports"

SCOPED_RESOURCES = (COMPANIES, UNITS, ASSETS, REPORTS)
OWNED_RESOURCES = (ASSETS, REPORTS)  # employees only see their own assets


def company_field(resource: str) -> str:
    return "id" if resource == COMPANIES else "company"


def scope_query(
    actor: CurrentUser,
    resource: str,
    query: Mapping[str, Any] | None = None,
    requested_company: int | None = None,
) -> dict:
    """Return ``query`` narrowed to what ``actor`` may list for ``resource``."""
    scoped = dict(query or {})
    if resource not in SCOPED_RESOURCES:
        return scoped

    field = company_field(resource)
    company = actor.company or requested_company
    if company is not None:
        if field == "id":
            scoped.pop("_id", None)
        scoped[field] = company

    if actor.role == RoleType.employee and resource in OWNED_RESOURCES:
        scoped["user"] = actor.id
    return scoped


def can_view(actor: CurrentUser, resource: str, record: Mapping[str, Any] | None) -> bool:
    if not record:
        return False
    if resource not in SCOPED_RESOURCES:
        return True
    if actor.company and record.get(company_field(resource)) != actor.company:
        return False
    if actor.role == RoleType.employee and resource in OWNED_RESOURCES and record.get("user") != actor.id:
        return False
    return True
