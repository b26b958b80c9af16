import os
import logging
from fastapi import FastAPI, Depends
from fastapi.middleware.cors import CORSMiddleware
from .database import init_db, async_session_maker
from .errors import PortfolioError, portfolio_error_handler
from .routers.portfolio import router as portfolio_router
from .routers.entries import education_router, experiences_router, skills_router
from .schemas import AdminRead
from .services.seed import create_admin_user, seed_portfolio_from_file
from .settings.config import settings
from .users import fastapi_users, auth_backend
from .utils import require_admin_user

logging.basicConfig(level=settings.LOG_LEVEL.upper())
logger = logging.getLogger(__name__)

app = FastAPI(title="Portfolio")

# Enable CORS if needed
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(PortfolioError, portfolio_error_handler)

# ----------------------
# Route Includes
# ----------------------
app.include_router(portfolio_router)
app.include_router(experiences_router)
app.include_router(education_router)
app.include_router(skills_router)

# Authentication Routes
app.include_router(
    fastapi_users.get_auth_router(auth_backend),
    prefix="/api/auth/jwt",
    tags=["auth"]
)


@app.get("/api/auth/me", response_model=AdminRead, tags=["auth"])
async def auth_me(admin=Depends(require_admin_user)):
    return admin


@app.get("/health")
async def health():
    return {"status": "ok"}


# ----------------------
# Startup seeding
# ----------------------
async def _seed_portfolio_startup():
    # Default to portfolio_site/data/portfolio_seed.json (override with PORTFOLIO_SEED_PATH)
    default_path = os.path.join(os.path.dirname(__file__), "data", "portfolio_seed.json")
    path = settings.PORTFOLIO_SEED_PATH or default_path
    if not os.path.exists(path):
        logger.info("No portfolio seed found at %s; skipping.", path)
        return

    try:
        async with async_session_maker() as db:
            created = await seed_portfolio_from_file(db, path)
            logger.info("Portfolio seed %s", "applied" if created else "skipped (already published)")
    except Exception:
        logger.exception("Portfolio seed failed")


async def _create_admin_startup():
    try:
        async with async_session_maker() as db:
            await create_admin_user(db)
    except Exception:
        logger.exception("Admin bootstrap failed")


@app.on_event("startup")
async def on_startup():
    from . import models  # Required for SQLAlchemy model detection
    await init_db()
    await _create_admin_startup()
    await _seed_portfolio_startup()
