from typing import Any
from fastapi import APIRouter, Body, Depends, Query, status
from sqlalchemy.orm import Session
from infrastructure.database import get_db
from application.use_cases.user_use_cases import UserUseCases
from application.use_cases.security import get_current_user
from application.utils.utils import parse_number, to_http_exception
from domain.entities.user_classes import CurrentUser

# users are not narrowed by company: the user list is shared by every actor
router = APIRouter(prefix="/api/v1/users", tags=["users"])

@router.get("", summary="List users (paginated)")
def get_users(
    page: str | None = Query(None),
    size: str | None = Query(None),
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
):
    try:
        return UserUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10))
    except Exception as exc:
        raise to_http_exception(exc)

@router.post("/filter", summary="List users matching the filter sent on the body")
def filter_users(
    payload: dict[str, Any] | None = Body(None),
    page: str | None = Query(None),
    size: str | None = Query(None),
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
):
    try:
        return UserUseCases(db).get(parse_number("page", page, 0), parse_number("size", size, 10), payload)
    except Exception as exc:
        raise to_http_exception(exc)

@router.get("/{user_id}")
def get_user_by_id(user_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        user = UserUseCases(db).get_by_id(user_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return user or {}

@router.put("", status_code=status.HTTP_201_CREATED)
def create_user(payload: dict[str, Any] = Body(...), db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    """
    Creates a user. The plaintext password of the body is hashed before it
    reaches the database.
    """
    try:
        UserUseCases(db).create(payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return "user created"

@router.post("/{user_id}")
def update_user(
    user_id: str,
    payload: dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current: CurrentUser = Depends(get_current_user),
):
    """
    Updates a user. The stored password hash only changes when the body
    carries a new password.
    """
    try:
        user = UserUseCases(db).update({"id": user_id}, payload)
    except Exception as exc:
        raise to_http_exception(exc)
    return user or {}

@router.delete("/{user_id}")
def remove_user(user_id: str, db: Session = Depends(get_db), current: CurrentUser = Depends(get_current_user)):
    try:
        user = UserUseCases(db).remove(user_id)
    except Exception as exc:
        raise to_http_exception(exc)
    return user or {}
