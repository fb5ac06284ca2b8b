"""
Journey value types and their persisted row.

A user's journeys are stored together as one JSON document
(`journey_collections.data`) and always rewritten as a whole.
"""
import enum
import time
import uuid
from dataclasses import dataclass, field, replace
from datetime import datetime
from typing import Optional

from sqlalchemy import Column, Integer, DateTime, ForeignKey, JSON
from sqlalchemy.sql import func

from kisaanmitra.db.base import Base


class JourneyStatus(str, enum.Enum):
    active = "active"
    completed = "completed"
    failed = "failed"


def new_journey_id() -> str:
    # "j-<millis>-<hex>": the suffix keeps two starts in one millisecond apart
    return f"j-{int(time.time() * 1000)}-{uuid.uuid4().hex[:6]}"


def _iso(value: Optional[datetime]) -> Optional[str]:
    return value.isoformat() if value else None


def _parse(value: Optional[str]) -> Optional[datetime]:
    return datetime.fromisoformat(value) if value else None


@dataclass
class JourneyStepState:
    step_id: str
    verified: bool = False
    verified_at: Optional[datetime] = None
    proof_image_url: Optional[str] = None
    ai_feedback: Optional[str] = None

    def cleared(self) -> "JourneyStepState":
        return JourneyStepState(step_id=self.step_id)

    def to_dict(self) -> dict:
        return {
            "step_id": self.step_id,
            "verified": self.verified,
            "verified_at": _iso(self.verified_at),
            "proof_image_url": self.proof_image_url,
            "ai_feedback": self.ai_feedback,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "JourneyStepState":
        return cls(
            step_id=data["step_id"],
            verified=bool(data.get("verified", False)),
            verified_at=_parse(data.get("verified_at")),
            proof_image_url=data.get("proof_image_url"),
            ai_feedback=data.get("ai_feedback"),
        )


@dataclass
class Journey:
    id: str
    crop_id: str
    crop_name: str
    start_date: datetime
    status: JourneyStatus = JourneyStatus.active
    current_step_index: int = 0
    steps: list[JourneyStepState] = field(default_factory=list)
    health_score: int = 100
    reset_count: int = 0

    @property
    def is_active(self) -> bool:
        return self.status == JourneyStatus.active

    @property
    def verified_count(self) -> int:
        return sum(1 for s in self.steps if s.verified)

    def copy(self, **changes) -> "Journey":
        """Deep enough copy: step states are duplicated, never shared."""
        steps = changes.pop("steps", None)
        if steps is None:
            steps = [replace(s) for s in self.steps]
        return replace(self, steps=steps, **changes)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "crop_id": self.crop_id,
            "crop_name": self.crop_name,
            "start_date": _iso(self.start_date),
            "status": self.status.value,
            "current_step_index": self.current_step_index,
            "steps": [s.to_dict() for s in self.steps],
            "health_score": self.health_score,
            "reset_count": self.reset_count,
        }

    @classmethod
    def from_dict(cls, data: dict) -> "Journey":
        return cls(
            id=data["id"],
            crop_id=data["crop_id"],
            crop_name=data.get("crop_name", ""),
            start_date=_parse(data["start_date"]),
            status=JourneyStatus(data.get("status", "active")),
            current_step_index=int(data.get("current_step_index", 0)),
            steps=[JourneyStepState.from_dict(s) for s in data.get("steps", [])],
            health_score=int(data.get("health_score", 100)),
            reset_count=int(data.get("reset_count", 0)),
        )


class JourneyCollection(Base):
    """
    All journeys of one user, stored as a single JSON list.

    IMPORTANT:
    - Written only through JourneyStore.save_all (full replace)
    - Single writer per user; no version column
    """

    __tablename__ = "journey_collections"

    id = Column(Integer, primary_key=True, index=True)

    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, unique=True, index=True)

    data = Column(JSON, nullable=False, default=list)

    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
