from pydantic import BaseModel, ConfigDict

from domain.models.schema import FieldSpec, STRING, INTEGER

UNIT_SCHEMA = {
    "name": FieldSpec(STRING, required=True),
    "company": FieldSpec(INTEGER, required=True),
}

class UnitRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    company: int
