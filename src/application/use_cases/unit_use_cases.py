from sqlalchemy.orm import Session
from adapters.repository.unit_repository import UnitRepository
from application.use_cases.resource_use_cases import ResourceUseCases

class UnitUseCases(ResourceUseCases):

    def __init__(self, db: Session):
        super().__init__(UnitRepository(db))
