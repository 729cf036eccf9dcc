from infrastructure.database import Base
from sqlalchemy import Integer, String
from sqlalchemy.orm import Mapped, mapped_column


class Unit(Base):
    __tablename__ = 'units'

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    # company id, no foreign key
    company: Mapped[int] = mapped_column(Integer, index=True, nullable=False)
