from adapters.repository.document_repository import DocumentRepository
from domain.entities.company_entity import Company
from domain.models.company_models import COMPANY_SCHEMA, CompanyRead

class CompanyRepository(DocumentRepository):
    entity = Company
    schema = COMPANY_SCHEMA
    model_name = "Company"
    read_model = CompanyRead
