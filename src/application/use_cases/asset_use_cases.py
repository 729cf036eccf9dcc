from sqlalchemy.orm import Session
from adapters.repository.asset_repository import AssetRepository
from application.use_cases.resource_use_cases import ResourceUseCases

class AssetUseCases(ResourceUseCases):

    def __init__(self, db: Session):
        super().__init__(AssetRepository(db))
