"""Simple dependency container for wiring core services."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from bank_account_service.core.config import Settings
from bank_account_service.infrastructure.database.session import Database
from bank_account_service.seed import seed_demo_data

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database

    @classmethod
    def from_settings(cls, settings: Settings) -> "ApplicationContainer":
        return cls(
            settings=settings,
            database=Database.from_settings(settings.database, debug=settings.debug),
        )

    async def startup(self) -> None:
        """Create tables and load demo data when enabled."""
        await self.database.init_models()
        if self.settings.seed.enabled:
            await seed_demo_data(self.database, self.settings.seed)
        logger.info("%s ready (%s)", self.settings.project_name, self.settings.environment)

    async def shutdown(self) -> None:
        await self.database.dispose()


__all__ = ["ApplicationContainer"]
