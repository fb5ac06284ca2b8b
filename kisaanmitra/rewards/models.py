from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.sql import func

from kisaanmitra.db.base import Base


# ======================================================
# REWARD GRANTS (one row per verified step transition)
# ======================================================
class RewardGrant(Base):
    __tablename__ = "reward_grants"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)

    points = Column(Integer, nullable=False, default=0)
    eco_points = Column(Integer, nullable=False, default=0)

    # "<journey_id>:<step_id>:<reset_count>" for journey steps
    idempotency_key = Column(String(128), nullable=False)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "idempotency_key", name="uq_reward_grant_key"),
    )


# ======================================================
# BADGES
# ======================================================
class UserBadge(Base):
    __tablename__ = "user_badges"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    key = Column(String(64), nullable=False)  # e.g. "first_verification", "first_harvest"
    earned_at = Column(DateTime(timezone=True), server_default=func.now())

    __table_args__ = (
        UniqueConstraint("user_id", "key", name="uq_user_badge"),
    )
