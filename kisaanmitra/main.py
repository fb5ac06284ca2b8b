from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from kisaanmitra.core.config import ENABLE_DEBUG_ROUTES
from kisaanmitra.db.base import Base, engine
from kisaanmitra.auth.models import User  # noqa: F401
from kisaanmitra.journey.models import JourneyCollection  # noqa: F401
from kisaanmitra.rewards.models import RewardGrant, UserBadge  # noqa: F401  Import so create_all picks them up

from kisaanmitra.auth.routes import router as auth_router
from kisaanmitra.catalog.routes import router as catalog_router
from kisaanmitra.journey.routes import router as journey_router
from kisaanmitra.api.routes import router as api_router
from kisaanmitra.web.debug_routes import router as debug_router


app = FastAPI(title="KisaanMitra", version="0.1.0")

# Only expose debug routes (including diagnostics) when explicitly enabled.
if ENABLE_DEBUG_ROUTES:
    app.include_router(debug_router)

# Create database tables (still useful in dev; in production prefer Alembic)
Base.metadata.create_all(bind=engine)

# Log OpenAI status once at startup (unified client)
try:
    from kisaanmitra.ai.openai_client import log_startup as _ai_log_startup
    _ai_log_startup()
except Exception as _e:
    print(f"[AI] startup log failed: {_e}", flush=True)

# Include routers
app.include_router(auth_router)
app.include_router(catalog_router)
app.include_router(journey_router)
app.include_router(api_router)


# Redirect root to the crop catalog
@app.get("/", include_in_schema=False)
def root():
    return RedirectResponse(url="/catalog/crops")
