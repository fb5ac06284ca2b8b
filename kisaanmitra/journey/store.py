"""
Per-user journey persistence.

The whole collection is read and written at once: callers build the full
updated list and hand it to save_all.
"""
import logging
from typing import Iterable

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from kisaanmitra.core.errors import NotFoundError, PersistenceError
from kisaanmitra.journey.models import Journey, JourneyCollection

logger = logging.getLogger(__name__)


class JourneyStore:
    def __init__(self, db: Session, user_id: int):
        self.db = db
        self.user_id = user_id

    def _row(self):
        return (
            self.db.query(JourneyCollection)
            .filter(JourneyCollection.user_id == self.user_id)
            .first()
        )

    def load_all(self) -> list[Journey]:
        """Every journey of the user; empty when nothing was saved yet."""
        row = self._row()
        if row is None or not row.data:
            return []
        return [Journey.from_dict(item) for item in row.data]

    def save_all(self, journeys: Iterable[Journey], commit: bool = True) -> None:
        """
        Overwrite the stored collection with exactly `journeys`.

        With commit=False the write is only flushed; the caller finishes the
        transaction with commit() so other rows can join it.
        """
        payload = [j.to_dict() for j in journeys]
        try:
            row = self._row()
            if row is None:
                row = JourneyCollection(user_id=self.user_id, data=payload)
                self.db.add(row)
            else:
                # New list object so SQLAlchemy sees the JSON column as changed
                row.data = payload
            self.db.flush()
        except SQLAlchemyError as e:
            self._fail("save", e)
        if commit:
            self.commit()
        logger.info("[JOURNEY STORE] saved user=%s journeys=%d", self.user_id, len(payload))

    def commit(self) -> None:
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self._fail("commit", e)

    def _fail(self, action: str, e: SQLAlchemyError):
        self.db.rollback()
        logger.error("[JOURNEY STORE] %s failed user=%s: %r", action, self.user_id, e)
        raise PersistenceError(f"could not save journeys for user {self.user_id}") from e

    def get(self, journey_id: str) -> Journey:
        for journey in self.load_all():
            if journey.id == journey_id:
                return journey
        raise NotFoundError(f"journey '{journey_id}' not found")

    def replace(self, journey: Journey, commit: bool = True) -> None:
        """Swap one journey's entry (append if new) and save the collection."""
        journeys = self.load_all()
        for i, existing in enumerate(journeys):
            if existing.id == journey.id:
                journeys[i] = journey
                break
        else:
            journeys.append(journey)
        self.save_all(journeys, commit=commit)
