from pydantic import BaseModel

from domain.entities.asset_entity import AssetStatus
from domain.models.schema import FieldSpec, STRING, INTEGER, NUMBER

ASSET_SCHEMA = {
    "name": FieldSpec(STRING, required=True),
    "healthscore": FieldSpec(NUMBER, required=True, min=0, max=100),
    "status": FieldSpec(STRING, required=True, enum=tuple(status.value for status in AssetStatus)),
    "serialnumber": FieldSpec(STRING, unique=True),
    "description": FieldSpec(STRING),
    "user": FieldSpec(INTEGER, required=True),
    "unit": FieldSpec(INTEGER, required=True),
    "company": FieldSpec(INTEGER, required=True),
}

# fields a report may be grouped by
GROUPABLE_FIELDS = ("name", "status", "serialnumber", "description", "user", "unit", "company")

class AssetRead(BaseModel):
    id: int
    name: str
    healthscore: float
    status: AssetStatus
    serialnumber: str | None = None
    description: str | None = None
    image: str = ""
    user: int
    unit: int
    company: int
