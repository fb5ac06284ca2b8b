"""
Configuration constants for the application.
"""
import os
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables from .env file if it exists
env_path = Path(__file__).resolve().parent.parent.parent / '.env'
load_dotenv(dotenv_path=env_path)

# OpenAI API Key for proof verification and journey summaries
# IMPORTANT: Do NOT hardcode keys in code or commit them to git.
# Set OPENAI_API_KEY in your environment (or hosting provider env vars).
OPENAI_API_KEY = os.getenv("OPENAI_API_KEY", "").strip()

# Vision-capable model used to judge proof photos
VERIFIER_MODEL = os.getenv("VERIFIER_MODEL", "gpt-4o-mini")

# A verifier call that takes longer than this counts as a failed verification
VERIFIER_TIMEOUT_SECONDS = float(os.getenv("VERIFIER_TIMEOUT_SECONDS", "20"))

# Text model for the short journey summary shown before starting a crop
SUMMARY_MODEL = os.getenv("SUMMARY_MODEL", "gpt-4o-mini")

# Display-only session statistics (per verified step).
# These are NOT the ledger totals, which come from each step's catalog points.
SESSION_XP_PER_STEP = 100
SESSION_ECO_PER_STEP = 50

# Every new journey starts fully healthy
INITIAL_HEALTH_SCORE = 100

ENABLE_DEBUG_ROUTES = os.getenv("ENABLE_DEBUG_ROUTES", "0") == "1"
