"""
Reward ledger: additive point grants on a farmer profile.

Each grant carries an idempotency key; applying the same key twice is a
no-op, so a duplicated verification event can never pay out twice.
"""
import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from kisaanmitra.auth.models import User
from kisaanmitra.core.errors import NotFoundError, PersistenceError
from kisaanmitra.rewards.models import RewardGrant

logger = logging.getLogger(__name__)


class RewardLedger:
    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _user(self) -> User:
        user = self.db.get(User, self.user_id)
        if user is None:
            raise NotFoundError(f"user {self.user_id} does not exist")
        return user

    def has_grant(self, key: str) -> bool:
        return (
            self.db.query(RewardGrant.id)
            .filter_by(user_id=self.user_id, idempotency_key=key)
            .first()
            is not None
        )

    def apply(self, points: int, eco_points: int, key: str, commit: bool = True) -> bool:
        """
        Grant the delta once per key. Returns True if newly applied.

        With commit=False the grant is flushed into the caller's transaction
        and a failure there rolls back everything the caller staged.
        """
        if points < 0 or eco_points < 0:
            raise ValueError("reward deltas must be non-negative")

        if self.has_grant(key):
            logger.info("[LEDGER] user=%s key=%s already granted, skipped", self.user_id, key)
            return False

        user = self._user()
        self.db.add(RewardGrant(
            user_id=self.user_id,
            points=points,
            eco_points=eco_points,
            idempotency_key=key,
        ))
        user.points = (user.points or 0) + points
        user.eco_points = (user.eco_points or 0) + eco_points
        try:
            if commit:
                self.db.commit()
            else:
                self.db.flush()
        except IntegrityError as e:
            self.db.rollback()
            if not commit:
                raise PersistenceError(f"reward grant {key} conflicted") from e
            # The unique constraint caught a grant we did not see in has_grant
            logger.warning("[LEDGER] user=%s key=%s lost insert race, skipped", self.user_id, key)
            return False
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error("[LEDGER] user=%s key=%s grant failed: %r", self.user_id, key, e)
            raise PersistenceError(f"could not record reward grant {key}") from e

        logger.info(
            "[LEDGER] user=%s +%s points +%s eco key=%s",
            self.user_id, points, eco_points, key,
        )
        return True

    def totals(self) -> tuple[int, int]:
        user = self._user()
        return user.points or 0, user.eco_points or 0


def reconcile_user_totals(db: Session, dry_run: bool = False) -> list[dict]:
    """
    Recompute every profile's points / eco_points from its RewardGrant rows.
    Returns one entry per user whose stored totals disagreed.
    """
    sums = {
        user_id: (points or 0, eco or 0)
        for user_id, points, eco in (
            db.query(
                RewardGrant.user_id,
                func.sum(RewardGrant.points),
                func.sum(RewardGrant.eco_points),
            )
            .group_by(RewardGrant.user_id)
            .all()
        )
    }

    drift = []
    for user in db.query(User).order_by(User.id.asc()).all():
        expected = sums.get(user.id, (0, 0))
        stored = (user.points or 0, user.eco_points or 0)
        if stored == expected:
            continue
        drift.append({"user_id": user.id, "stored": stored, "expected": expected})
        if not dry_run:
            user.points, user.eco_points = expected

    if drift and not dry_run:
        db.commit()
    return drift
