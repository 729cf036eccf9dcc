from pydantic import BaseModel, ConfigDict

from domain.models.schema import FieldSpec, STRING, BOOLEAN

COMPANY_SCHEMA = {
    "name": FieldSpec(STRING, required=True),
    "description": FieldSpec(STRING),
    "cnpj": FieldSpec(STRING, required=True, unique=True, pattern=r"\d{14}"),
    "active": FieldSpec(BOOLEAN, required=True),
}

class CompanyRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    description: str | None = None
    cnpj: str
    active: bool
