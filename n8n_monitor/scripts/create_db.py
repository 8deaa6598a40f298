"""Create database tables for the n8n monitor backend."""

from __future__ import annotations

import logging

from n8n_monitor.core.db import engine
from n8n_monitor.models import Base


logger = logging.getLogger("scripts.create_db")


def main() -> None:
    logging.basicConfig(level=logging.INFO)
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created/verified.")


if __name__ == "__main__":
    main()
