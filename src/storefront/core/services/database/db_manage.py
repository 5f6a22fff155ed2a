"""Schema management for the storefront database."""

from loguru import logger
from sqlmodel import SQLModel

from src.storefront.core.services.database.db_session import DbSessionService


class DbManageService:
    def __init__(self, database_service: DbSessionService | None = None):
        self._database_service = database_service or DbSessionService()

    def create_all(self) -> None:
        """Create all database tables."""
        import src.storefront.entities  # noqa: F401

        SQLModel.metadata.create_all(self._database_service.engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        import src.storefront.entities  # noqa: F401

        SQLModel.metadata.drop_all(self._database_service.engine)
        logger.warning("All database tables dropped.")
