from sqlalchemy.orm import Session
from adapters.repository.company_repository import CompanyRepository
from application.use_cases.resource_use_cases import ResourceUseCases

class CompanyUseCases(ResourceUseCases):

    def __init__(self, db: Session):
        super().__init__(CompanyRepository(db))
