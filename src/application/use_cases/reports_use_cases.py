from typing import Any, Iterable, Mapping
from sqlalchemy.orm import Session
from adapters.repository.asset_repository import AssetRepository

class ReportsUseCases:

    def __init__(self, db: Session):
        self.repo = AssetRepository(db)

    def get_avg_health(self, group_fields: Iterable[str] = (), query: Mapping[str, Any] | None = None) -> list[dict]:
        return self.repo.aggregate_health(group_fields, query or {})
