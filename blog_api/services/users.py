from __future__ import annotations

from typing import Optional

from sqlalchemy import select

from blog_api.config import ADMIN_ROLE
from blog_api.db.sa import session_scope
from blog_api.models.user_models import User


async def get_admin() -> Optional[User]:
    async with session_scope() as session:
        res = await session.execute(select(User).where(User.user_role == ADMIN_ROLE).limit(1))
        return res.scalar_one_or_none()
