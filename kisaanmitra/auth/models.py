
from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func

from kisaanmitra.db.base import Base


class User(Base):
    """Farmer profile. points / eco_points are the reward ledger totals."""
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)

    email = Column(String, unique=True, index=True, nullable=False)
    username = Column(String, unique=True, index=True, nullable=False)
    name = Column(String, nullable=False, default="")

    password_hash = Column(String, nullable=False)

    # Farmer | Learner | Expert
    role = Column(String, default="Farmer", nullable=False)

    location = Column(String, nullable=False, default="")
    soil_type = Column(String, nullable=False, default="")

    # Only ever increased through RewardLedger.apply
    points = Column(Integer, nullable=False, default=0)
    eco_points = Column(Integer, nullable=False, default=0)

    created_at = Column(DateTime(timezone=True), server_default=func.now())

    # Track when user was last active (updated on every authenticated request)
    last_active = Column(DateTime(timezone=True), nullable=True)
