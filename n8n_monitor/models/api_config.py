"""
Stored n8n API connection settings.

Only one row ever exists; the store pins it to ``CONFIG_ROW_ID``.
"""

from __future__ import annotations

from sqlalchemy import Boolean, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from . import Base


CONFIG_ROW_ID = 1


class ApiConfiguration(Base):
    __tablename__ = "n8n_configs"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=False)
    api_url: Mapped[str] = mapped_column(String(2048), nullable=False)
    api_key: Mapped[str] = mapped_column(Text, nullable=False)
    refresh_interval: Mapped[int] = mapped_column(Integer, nullable=False, default=60)  # seconds, 0 = off
    notifications_enabled: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
