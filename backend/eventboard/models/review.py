"""Review ORM model and the Reviewable mixin."""
import uuid
from sqlalchemy import Column, String, Integer, Text, DateTime, ForeignKey, Index
from sqlalchemy.orm import Session, relationship
from sqlalchemy.sql import func
from eventboard.database import Base


class Review(Base):
    __tablename__ = "reviews"
    __table_args__ = (Index("ix_reviews_reviewable", "reviewable_type", "reviewable_id"),)

    id = Column(String(36), primary_key=True, default=lambda: str(uuid.uuid4()))
    user_id = Column(String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False)
    reviewable_type = Column(String(50), nullable=False)
    reviewable_id = Column(String(36), nullable=False)
    score = Column(Integer, nullable=False)
    comment = Column(Text, nullable=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now())

    user = relationship("User", back_populates="reviews")


class Reviewable:
    """Mixin for entities that can receive reviews.

    Subclasses set ``reviewable_type``, the tag stored in
    ``reviews.reviewable_type`` for rows that target them.
    """

    reviewable_type = ""

    def reviews(self, db: Session):
        """Query over the reviews left on this entity."""
        return db.query(Review).filter(
            Review.reviewable_type == self.reviewable_type,
            Review.reviewable_id == self.id,
        )

    def review_by(self, user, score: int, comment=None) -> Review:
        """Build (but do not persist) a review of this entity by ``user``."""
        return Review(
            user_id=user.id,
            reviewable_type=self.reviewable_type,
            reviewable_id=self.id,
            score=score,
            comment=comment,
        )
