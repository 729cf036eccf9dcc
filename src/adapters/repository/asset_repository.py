import base64
import binascii
from typing import Any, Iterable, Mapping

from sqlalchemy import func, select

from adapters.repository.document_repository import DocumentRepository
from adapters.repository.query_filter import build_conditions
from domain.entities.asset_entity import Asset
from domain.exceptions import ValidationError
from domain.models.asset_models import ASSET_SCHEMA, GROUPABLE_FIELDS, AssetRead


def compose_image(image_type: str | None, image_buffer: bytes | None) -> str:
    if not image_type:
        return ""
    return f"{image_type},{base64.b64encode(image_buffer or b'').decode('ascii')}"


def decompose_image(image: Any) -> tuple[str | None, bytes | None]:
    """Split a data URI (``data:<mime>;base64,<payload>``) into its stored parts."""
    if image is None or image == "":
        return None, None
    if not isinstance(image, str) or "," not in image:
        raise ValidationError("Asset validation failed: image: Path `image` must be a data URI")
    image_type, payload = image.split(",", 1)
    if not image_type:
        raise ValidationError("Asset validation failed: image: Path `image` has no type prefix")
    try:
        image_buffer = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError):
        raise ValidationError("Asset validation failed: image: Path `image` is not valid base64")
    return image_type, image_buffer


class AssetRepository(DocumentRepository):
    entity = Asset
    schema = ASSET_SCHEMA
    model_name = "Asset"
    read_model = AssetRead

    def serialize(self, row: Asset) -> dict:
        fields = {field: getattr(row, field) for field in ASSET_SCHEMA}
        image = compose_image(row.image_type, row.image_buffer)
        return AssetRead(id=row.id, image=image, **fields).model_dump(mode="json")

    def to_columns(self, document: Any, *, partial: bool = False) -> dict:
        values = super().to_columns(document, partial=partial)
        if "image" in document:
            values["image_type"], values["image_buffer"] = decompose_image(document["image"])
        return values

    def aggregate_health(self, group_fields: Iterable[str] = (), filter_query: Mapping | None = None) -> list[dict]:
        """
        Count and average healthscore per (status, *group_fields).

        ``status`` is always part of the group key; the key fields are
        returned as top level fields next to ``total`` and ``averageHealth``.
        """
        fields = list(dict.fromkeys(["status", *group_fields]))
        unknown = [field for field in fields if field not in GROUPABLE_FIELDS]
        if unknown:
            raise ValidationError(f"Cannot group assets by {', '.join(unknown)}")

        columns = [getattr(Asset, field) for field in fields]
        conditions = build_conditions(Asset, ASSET_SCHEMA, filter_query)
        query = (
            select(
                *[column.label(field) for column, field in zip(columns, fields)],
                func.count(Asset.id).label("total"),
                func.avg(Asset.healthscore).label("averageHealth"),
            )
            .where(*conditions)
            .group_by(*columns)
        )

        reports = []
        for row in self.db.execute(query).all():
            mapping = row._mapping
            report = {field: mapping[field] for field in fields}
            report["total"] = mapping["total"]
            report["averageHealth"] = round(float(mapping["averageHealth"]), 2)
            reports.append(report)
        return reports
