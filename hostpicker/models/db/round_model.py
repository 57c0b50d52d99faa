import uuid

from sqlalchemy import Column, Uuid
from sqlalchemy.orm import relationship

from hostpicker.database import Base, UTCDateTime, utcnow


class RoundModel(Base):
    """SQLAlchemy model for rounds table.

    A round stores nothing but its identity and start time; whether it is
    open or exhausted is derived from its selections.
    """

    __tablename__ = "rounds"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    # Relationships
    selections = relationship(
        "SelectionModel",
        back_populates="round",
        cascade="all, delete-orphan",
        passive_deletes=True,
    )
