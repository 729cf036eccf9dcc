from infrastructure.database import Base
from enum import Enum as PyEnum
from sqlalchemy import Integer, Float, String, LargeBinary
from sqlalchemy.orm import Mapped, mapped_column


class AssetStatus(str, PyEnum):
    in_downtime = "inDowntime"
    in_operation = "inOperation"
    in_alert = "inAlert"


class Asset(Base):
    __tablename__ = 'assets'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    healthscore: Mapped[float] = mapped_column(Float, nullable=False)
    status: Mapped[str] = mapped_column(String(32), index=True, nullable=False)
    serialnumber: Mapped[str | None] = mapped_column(String(255), unique=True, nullable=True)
    description: Mapped[str | None] = mapped_column(String(1024), nullable=True)

    # the public "image" is composed from these two at the repository boundary
    image_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    image_buffer: Mapped[bytes | None] = mapped_column(LargeBinary, nullable=True)

    user: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    unit: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
    company: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
