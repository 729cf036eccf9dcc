# autentication_controller.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from infrastructure.database import get_db
from domain.models.user_models import LoginRequest
from application.use_cases.user_use_cases import UserUseCases
from application.use_cases.security import create_access_token
from application.utils.utils import to_http_exception

SERVER_VERSION = "asset monitor server 0.1.0"

router = APIRouter(tags=["auth"])

logger = logging.getLogger(__name__)

@router.get("/api", summary="Liveness check")
def liveness():
    return SERVER_VERSION

@router.post("/login")
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    try:
        user = UserUseCases(db).login(payload.username, payload.password)
    except Exception as exc:
        raise to_http_exception(exc)

    if not user:
        logger.info("Failed login attempt for %r", payload.username)
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="username or password incorrect"
        )

    token = create_access_token(id=user["id"], name=user["name"], role=user["role"], company=user["company"])
    # the id travels in the token subject
    user_fields = {field: value for field, value in user.items() if field != "id"}
    return {**user_fields, "token": token}
