from adapters.repository.document_repository import DocumentRepository
from domain.entities.unit_entity import Unit
from domain.models.unit_models import UNIT_SCHEMA, UnitRead

class UnitRepository(DocumentRepository):
    entity = Unit
    schema = UNIT_SCHEMA
    model_name = "Unit"
    read_model = UnitRead
