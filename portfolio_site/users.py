import logging
from fastapi import Depends
from fastapi_users import FastAPIUsers
from fastapi_users.manager import BaseUserManager, IntegerIDMixin
from fastapi_users.authentication import CookieTransport, AuthenticationBackend, JWTStrategy
from fastapi_users.db import SQLAlchemyUserDatabase
from .models import AdminUser
from .database import get_db
from .settings.config import settings


logger = logging.getLogger(__name__)


SECRET = settings.SECRET.strip()
if not SECRET or SECRET == "CHANGE_ME_SECRET":
    raise RuntimeError(
        "SECRET environment variable must be set to a strong value; the default placeholder is not allowed."
    )

# -------------------------
# Database Dependency
# -------------------------
async def get_user_db(session=Depends(get_db)):
    yield SQLAlchemyUserDatabase(session, AdminUser)

# -------------------------
# User Manager
# -------------------------
class AdminManager(IntegerIDMixin, BaseUserManager[AdminUser, int]):
    reset_password_token_secret = SECRET
    verification_token_secret = SECRET

    async def on_after_login(self, user: AdminUser, request=None, response=None):
        logger.info("Admin %s logged in", user.id)

async def get_user_manager(user_db=Depends(get_user_db)):
    yield AdminManager(user_db)

# -------------------------
# Authentication Backend
# -------------------------
cookie_transport = CookieTransport(
    cookie_name="session",
    cookie_max_age=settings.SESSION_LIFETIME_SECONDS,
    cookie_secure=settings.COOKIE_SECURE,
    cookie_httponly=True,
)

def get_jwt_strategy() -> JWTStrategy:
    return JWTStrategy(secret=SECRET, lifetime_seconds=settings.SESSION_LIFETIME_SECONDS)

auth_backend = AuthenticationBackend(
    name="jwt",
    transport=cookie_transport,
    get_strategy=get_jwt_strategy,
)

# -------------------------
# FastAPI Users instance
# -------------------------
fastapi_users = FastAPIUsers[AdminUser, int](
    get_user_manager,
    [auth_backend],
)
