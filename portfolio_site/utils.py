from fastapi import Depends, HTTPException, status

from .models import AdminUser
from .users import fastapi_users


# The only capability the portfolio routes need: "is this caller an admin"
async def require_admin_user(
    user: AdminUser = Depends(fastapi_users.current_user(active=True)),
):
    if not user:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Not authenticated")
    if not getattr(user, "is_superuser", False):
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")
    return user
