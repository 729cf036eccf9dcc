from typing import Any, Mapping
from sqlalchemy.orm import Session
from adapters.repository.user_repository import UserRepository
from application.use_cases.resource_use_cases import ResourceUseCases
from application.use_cases.security import hash_password, verify_password
from domain.models.schema import cast_value
from domain.models.user_models import USER_SCHEMA

def _is_blank(value: Any) -> bool:
    return value is None or value == ""

class UserUseCases(ResourceUseCases):

    def __init__(self, db: Session):
        self.user_repo = UserRepository(db)
        super().__init__(self.user_repo)

    def _with_hashed_password(self, user: Any) -> Any:
        if not isinstance(user, Mapping) or _is_blank(user.get("password")):
            return user
        # numbers are accepted as passwords, so cast before hashing
        password = cast_value("password", USER_SCHEMA["password"], user["password"])
        return {**user, "password": hash_password(password)}

    def create(self, user: Any) -> dict:
        return self.user_repo.create(self._with_hashed_password(user))

    def update(self, query: Mapping[str, Any], update: Any) -> dict | None:
        # without a new password the stored hash is left untouched
        if isinstance(update, Mapping) and _is_blank(update.get("password")):
            update = {field: value for field, value in update.items() if field != "password"}
        return self.user_repo.find_one_and_update(query, self._with_hashed_password(update))

    def login(self, username: str | None, password: str | None) -> dict | None:
        if not username or not password:
            return None
        user = self.user_repo.find_by_login(username)
        if user is None or not verify_password(password, user.password):
            return None
        return self.user_repo.serialize(user)
