from __future__ import annotations

import logging

from . import models  # noqa: F401  (регистрирует таблицы в Base.metadata)
from .base import Base
from .session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ensured on %s", engine.url)
