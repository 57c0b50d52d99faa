import uuid

from sqlalchemy import Boolean, Column, Index, String, Uuid, false
from sqlalchemy.orm import relationship

from hostpicker.database import Base, UTCDateTime, utcnow


class ParticipantModel(Base):
    """SQLAlchemy model for participants table."""

    __tablename__ = "participants"
    __table_args__ = (
        Index("idx_participants_archived_created", "archived", "created_at"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    name = Column(String(255), nullable=False)
    archived = Column(Boolean, nullable=False, default=False, server_default=false())
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    # Relationships
    selections = relationship("SelectionModel", back_populates="participant")
