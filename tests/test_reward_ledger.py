import pytest

from conftest import failing_commit
from kisaanmitra.auth.models import User
from kisaanmitra.core.errors import NotFoundError, PersistenceError
from kisaanmitra.rewards.ledger import RewardLedger, reconcile_user_totals
from kisaanmitra.rewards.models import RewardGrant


def test_apply_adds_to_profile_totals(db, farmer):
    ledger = RewardLedger(db, farmer.id)

    assert ledger.apply(100, 50, "j-1:s1:0")
    assert ledger.apply(120, 80, "j-1:s2:0")

    assert ledger.totals() == (220, 130)
    db.refresh(farmer)
    assert (farmer.points, farmer.eco_points) == (220, 130)


def test_same_key_is_applied_once(db, farmer):
    ledger = RewardLedger(db, farmer.id)

    assert ledger.apply(100, 50, "j-1:s1:0")
    assert not ledger.apply(100, 50, "j-1:s1:0")

    assert ledger.totals() == (100, 50)
    assert db.query(RewardGrant).filter_by(user_id=farmer.id).count() == 1
    assert ledger.has_grant("j-1:s1:0")
    assert not ledger.has_grant("j-1:s1:1")


def test_keys_are_scoped_per_user(db, farmer):
    other = User(email="sita@example.com", username="sita", password_hash="x:y")
    db.add(other)
    db.commit()

    assert RewardLedger(db, farmer.id).apply(100, 50, "j-1:s1:0")
    assert RewardLedger(db, other.id).apply(100, 50, "j-1:s1:0")


def test_zero_reward_is_recorded(db, farmer):
    ledger = RewardLedger(db, farmer.id)

    assert ledger.apply(0, 0, "j-1:s1:0")
    assert ledger.totals() == (0, 0)
    assert ledger.has_grant("j-1:s1:0")


def test_negative_deltas_are_rejected(db, farmer):
    with pytest.raises(ValueError):
        RewardLedger(db, farmer.id).apply(-10, 0, "j-1:s1:0")


def test_unknown_user_is_not_found(db):
    with pytest.raises(NotFoundError):
        RewardLedger(db, 9999).apply(10, 10, "j-1:s1:0")


def test_reconcile_fixes_drifted_totals(db, farmer):
    RewardLedger(db, farmer.id).apply(100, 50, "j-1:s1:0")
    farmer.points = 999
    db.commit()

    report = reconcile_user_totals(db, dry_run=True)
    assert report == [{"user_id": farmer.id, "stored": (999, 50), "expected": (100, 50)}]
    db.refresh(farmer)
    assert farmer.points == 999

    reconcile_user_totals(db)
    db.refresh(farmer)
    assert farmer.points == 100
    assert reconcile_user_totals(db) == []


def test_reconcile_zeroes_profiles_without_grants(db, farmer):
    farmer.eco_points = 40
    db.commit()

    reconcile_user_totals(db)

    db.refresh(farmer)
    assert (farmer.points, farmer.eco_points) == (0, 0)


def test_failed_commit_raises_and_pays_nothing(db, farmer, monkeypatch):
    ledger = RewardLedger(db, farmer.id)

    monkeypatch.setattr(db, "commit", failing_commit)
    with pytest.raises(PersistenceError):
        ledger.apply(100, 50, "j-1:s1:0")
    monkeypatch.undo()

    assert ledger.totals() == (0, 0)
    assert not ledger.has_grant("j-1:s1:0")
    assert ledger.apply(100, 50, "j-1:s1:0")


def test_staged_grant_is_undone_with_its_transaction(db, farmer):
    ledger = RewardLedger(db, farmer.id)

    assert ledger.apply(100, 50, "j-1:s1:0", commit=False)
    db.rollback()

    assert ledger.totals() == (0, 0)
    assert not ledger.has_grant("j-1:s1:0")
