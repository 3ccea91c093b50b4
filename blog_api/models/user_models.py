from __future__ import annotations

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from blog_api.db.base import Base


class User(Base):
    __tablename__ = "users"

    id: Mapped[str] = mapped_column(String(32), primary_key=True)
    user_name: Mapped[str] = mapped_column(String(64), nullable=False)
    user_email: Mapped[str] = mapped_column(String(320), unique=True, nullable=False, index=True)
    # MD5 hex digest of the plaintext password
    user_password: Mapped[str] = mapped_column(String(32), nullable=False)
    user_role: Mapped[str] = mapped_column(String(32), nullable=False, index=True)
