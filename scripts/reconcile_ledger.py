"""
Reconcile profile totals with the reward ledger.

Purpose:
- Recompute users.points / users.eco_points from reward_grants
- SAFE to run multiple times

Usage:
    python scripts/reconcile_ledger.py            # fix drift
    python scripts/reconcile_ledger.py --dry-run  # report only
"""
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(project_root))

from kisaanmitra.db.session import SessionLocal
from kisaanmitra.rewards.ledger import reconcile_user_totals


def main(dry_run: bool = False):
    db = SessionLocal()

    try:
        drift = reconcile_user_totals(db, dry_run=dry_run)
        for row in drift:
            print(f"  user={row['user_id']} stored={row['stored']} expected={row['expected']}", flush=True)

        action = "Would fix" if dry_run else "Fixed"
        print(f"✅ Ledger reconciliation complete. {action} {len(drift)} profile(s).")
    except Exception as e:
        db.rollback()
        print("❌ Error while reconciling ledger")
        print(str(e))
        raise
    finally:
        db.close()


if __name__ == "__main__":
    main(dry_run="--dry-run" in sys.argv[1:])
