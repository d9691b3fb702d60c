from sqlalchemy import Boolean, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from src.config.table_names import TableNames
from src.models.base import Base, TimeStamp


class Rsvp(Base, TimeStamp):
    __tablename__ = TableNames.RSVPS.value

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    attending: Mapped[bool] = mapped_column(Boolean, nullable=False, index=True)
    num_of_guests: Mapped[int | None] = mapped_column(Integer, nullable=True)
    num_of_children: Mapped[int | None] = mapped_column(Integer, nullable=True)
    update_token: Mapped[str] = mapped_column(String(64), nullable=False, unique=True, index=True)

    def __repr__(self) -> str:
        return f"<Rsvp {self.email} attending={self.attending}>"
