# security.py
import logging
from datetime import datetime, timedelta, timezone
from jose import jwt, JWTError
from passlib.context import CryptContext
from fastapi import HTTPException, status, Depends
from fastapi.security import APIKeyHeader
from pydantic import ValidationError

from domain.models.user_models import TokenPayload
from domain.entities.user_classes import CurrentUser, RoleType
from infrastructure.config import ACCESS_TOKEN_EXPIRE_HOURS, JWT_SECRET

logger = logging.getLogger(__name__)

pwd_context = CryptContext(
    schemes=["bcrypt_sha256"],
    deprecated="auto",
)

access_token_header = APIKeyHeader(name="x-access-token", auto_error=False)

ALGORITHM = "HS256"
TOKEN_ISSUER = "asset monitor server"

def hash_password(raw: str) -> str:
    if not isinstance(raw, str):
        raise TypeError("Password must be a string")
    return pwd_context.hash(raw)

def verify_password(raw: str, hashed: str) -> bool:
    if not isinstance(raw, str) or not hashed:
        return False
    try:
        return pwd_context.verify(raw, hashed)
    except (ValueError, TypeError):
        # stored value is not a hash this context knows
        logger.warning("Unrecognized password hash format")
        return False

def create_access_token(*, id: int, name: str, role: RoleType | str, company: int | None, expires_hours: int | None = None) -> str:
    expire = datetime.now(timezone.utc) + timedelta(hours=expires_hours or ACCESS_TOKEN_EXPIRE_HOURS)
    payload = {
        "iss": TOKEN_ISSUER,
        "sub": str(id),
        "name": name,
        "role": role.value if hasattr(role, "value") else str(role),
        "company": company,
        "exp": expire,
    }
    return jwt.encode(payload, JWT_SECRET, algorithm=ALGORITHM)

def decode_token(token: str) -> TokenPayload:
    try:
        payload = jwt.decode(token, JWT_SECRET, algorithms=[ALGORITHM], issuer=TOKEN_ISSUER)
        return TokenPayload(
            sub=payload.get("sub"),
            name=payload.get("name"),
            role=payload.get("role"),
            company=payload.get("company"),
        )
    except (JWTError, ValidationError):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")

def get_current_user(token: str | None = Depends(access_token_header)) -> CurrentUser:
    if not token:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Token must be provided")
    payload = decode_token(token)
    if not payload.sub.isdigit():
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Invalid token")
    return CurrentUser(id=int(payload.sub), role=payload.role, company=payload.company, name=payload.name)
