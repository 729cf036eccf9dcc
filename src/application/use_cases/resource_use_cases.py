from typing import Any, Mapping

from adapters.repository.document_repository import DocumentRepository
from domain.exceptions import ValidationError
from domain.models.page_models import Page
from domain.models.schema import MAX_INTEGER

class ResourceUseCases:
    """Pagination and CRUD pass-through shared by every resource."""

    def __init__(self, repo: DocumentRepository):
        self.repo = repo

    def get(self, page: int, size: int, query: Mapping[str, Any] | None = None) -> Page[dict]:
        if page * size > MAX_INTEGER:
            raise ValidationError(f"page {page} is out of range for size {size}")
        query = query or {}
        total = self.repo.count_documents(query)
        content = self.repo.find(query, skip=page * size, limit=size)
        return Page[dict](content=content, total=total, page=page, size=size)

    def get_by_id(self, _id) -> dict | None:
        return self.repo.find_by_id(_id)

    def create(self, record: Any) -> dict:
        return self.repo.create(record)

    def update(self, query: Mapping[str, Any], update: Any) -> dict | None:
        return self.repo.find_one_and_update(query, update)

    def remove(self, _id) -> dict | None:
        return self.repo.find_one_and_delete({"id": _id})
