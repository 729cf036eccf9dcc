# utils.py
import logging
import re
from fastapi import HTTPException, Request, status
from sqlalchemy.exc import DataError, IntegrityError

from domain.exceptions import ValidationError
from domain.models.schema import MAX_INTEGER

logger = logging.getLogger(__name__)

def parse_number(field: str, value: str | None, default: int | None = None) -> int | None:
    """Parses a non-negative integer query parameter, ``default`` when absent."""
    if value is None or value == "":
        return default
    text = str(value).strip()
    if not re.fullmatch(r"[0-9]+", text) or len(text) > len(str(MAX_INTEGER)) or int(text) > MAX_INTEGER:
        raise ValidationError(f"{field} {value} is invalid, it must be a positive integer")
    return int(text)

def get_query_list(request: Request, name: str) -> list[str]:
    """Repeated query parameter, accepting both ``name=a&name=b`` and ``name[]=a``."""
    params = request.query_params
    return params.getlist(name) + params.getlist(f"{name}[]")

def get_error_status(error: Exception) -> int:
    if isinstance(error, (ValidationError, IntegrityError, DataError)):
        return status.HTTP_400_BAD_REQUEST
    return status.HTTP_500_INTERNAL_SERVER_ERROR

def to_http_exception(error: Exception) -> HTTPException:
    status_code = get_error_status(error)
    if status_code == status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.exception("Unexpected error", exc_info=error)
        return HTTPException(status_code=status_code, detail="[ERROR] Internal server error")
    logger.warning("[ERROR] %s", error)
    return HTTPException(status_code=status_code, detail=f"[ERROR] {error}")
