"""
Load demo customers and accounts.

Run ``python -m bank_account_service.seed`` against a file database, or let
the application do it on startup when ``SEED__ENABLED`` is true.
"""
from __future__ import annotations

import asyncio
import logging
import random

from bank_account_service.core.config import SeedSettings, get_settings
from bank_account_service.infrastructure.database.session import Database
from bank_account_service.modules.accounts.models import AccountType, BankAccountRequest
from bank_account_service.modules.accounts.service import BankAccountService
from bank_account_service.modules.customers.service import CustomerService

logger = logging.getLogger(__name__)


async def seed_demo_data(
    database: Database,
    settings: SeedSettings,
    rng: random.Random | None = None,
) -> int:
    """Create the configured customers with random accounts; returns accounts created."""
    rng = rng or random.Random()
    created = 0

    async with database.session() as session:
        customers = CustomerService.with_session(session)
        if await customers.list_customers():
            logger.info("Customers already present, skipping seed")
            return 0

        accounts = BankAccountService.with_session(session)
        for name in settings.customers:
            customer = await customers.create_customer(name)
            for _ in range(settings.accounts_per_customer):
                await accounts.add_account(
                    BankAccountRequest(
                        balance=round(rng.uniform(0, settings.max_balance), 2),
                        currency=settings.currency,
                        type=rng.choice(list(AccountType)),
                        customer_id=customer.id,
                    )
                )
                created += 1

    logger.info("Seeded %d customers with %d accounts", len(settings.customers), created)
    return created


async def main() -> None:
    settings = get_settings()
    database = Database.from_settings(settings.database, debug=settings.debug)
    try:
        await database.init_models()
        created = await seed_demo_data(database, settings.seed)
        print(f"Seeded {created} accounts into {settings.database_url}")
    finally:
        await database.dispose()


if __name__ == "__main__":
    asyncio.run(main())
