from sqlalchemy import or_, select

from adapters.repository.document_repository import DocumentRepository
from domain.entities.user_entity import User
from domain.models.user_models import USER_SCHEMA, UserRead

class UserRepository(DocumentRepository):
    entity = User
    schema = USER_SCHEMA
    model_name = "User"
    read_model = UserRead

    def find_by_login(self, login: str) -> User | None:
        """Row matching ``login`` as username or e-mail. Returns the ORM row, hash included."""
        query = (
            select(User)
            .where(or_(User.username == login, User.email == login))
            .order_by(User.id.asc())
        )
        return self.db.execute(query).scalars().first()
