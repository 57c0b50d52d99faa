import uuid

from sqlalchemy import Column, ForeignKey, Index, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from hostpicker.database import Base, UTCDateTime, utcnow


class SelectionModel(Base):
    """SQLAlchemy model for selections table."""

    __tablename__ = "selections"
    __table_args__ = (
        UniqueConstraint(
            "round_id", "participant_id", name="uq_selections_round_participant"
        ),
        Index("idx_selections_participant", "participant_id"),
    )

    id = Column(Uuid, primary_key=True, default=uuid.uuid4)
    round_id = Column(
        Uuid, ForeignKey("rounds.id", ondelete="CASCADE"), nullable=False
    )
    participant_id = Column(Uuid, ForeignKey("participants.id"), nullable=False)
    created_at = Column(UTCDateTime, nullable=False, default=utcnow)

    # Relationships
    round = relationship("RoundModel", back_populates="selections")
    participant = relationship("ParticipantModel", back_populates="selections")
