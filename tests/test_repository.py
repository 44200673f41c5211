"""Tests for the SQLAlchemy repositories on an in-memory database."""

from dataclasses import replace
from datetime import datetime, timedelta, timezone

import pytest

from bank_account_service.infrastructure.database.repositories.bank_account_repository import (
    SqlBankAccountRepository,
)
from bank_account_service.infrastructure.database.repositories.customer_repository import (
    SqlCustomerRepository,
)
from bank_account_service.modules.accounts import AccountType, BankAccount
from bank_account_service.modules.customers import Customer

T0 = datetime(2024, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_account(index: int, account_type=AccountType.CURRENT_ACCOUNT, customer=None) -> BankAccount:
    return BankAccount(
        id=f"acc-{index}",
        created_at=T0 + timedelta(minutes=index),
        balance=100.0 * index,
        currency="MAD",
        type=account_type,
        customer=customer,
    )


@pytest.fixture
def accounts(session):
    return SqlBankAccountRepository(session)


@pytest.fixture
def customers(session):
    return SqlCustomerRepository(session)


class TestBankAccountRepository:
    @pytest.mark.asyncio
    async def test_save_then_find_by_id(self, accounts):
        saved = await accounts.save(make_account(1))

        found = await accounts.find_by_id("acc-1")

        assert found == saved
        assert found.created_at == T0 + timedelta(minutes=1)
        assert found.type is AccountType.CURRENT_ACCOUNT

    @pytest.mark.asyncio
    async def test_find_by_id_missing_returns_none(self, accounts):
        assert await accounts.find_by_id("nope") is None

    @pytest.mark.asyncio
    async def test_save_existing_overwrites_in_place(self, accounts):
        original = await accounts.save(make_account(1))

        await accounts.save(replace(original, balance=-5.0, currency="USD"))

        stored = await accounts.find_all()
        assert len(stored) == 1
        assert stored[0].id == "acc-1"
        assert stored[0].balance == -5.0
        assert stored[0].currency == "USD"
        assert stored[0].created_at == original.created_at

    @pytest.mark.asyncio
    async def test_find_all_returns_insertion_order(self, accounts):
        for index in (1, 2, 3):
            await accounts.save(make_account(index))

        stored = await accounts.find_all()

        assert [account.id for account in stored] == ["acc-1", "acc-2", "acc-3"]

    @pytest.mark.asyncio
    async def test_equal_created_at_keeps_insertion_order(self, accounts):
        for account_id in ("zzz", "mmm", "aaa"):
            await accounts.save(replace(make_account(0), id=account_id, created_at=T0))

        stored = await accounts.find_all()

        assert [account.id for account in stored] == ["zzz", "mmm", "aaa"]

    @pytest.mark.asyncio
    async def test_update_keeps_position(self, accounts):
        for index in (1, 2, 3):
            await accounts.save(make_account(index))

        await accounts.save(replace(make_account(1), balance=0.0))

        assert [account.id for account in await accounts.find_all()] == ["acc-1", "acc-2", "acc-3"]

    @pytest.mark.asyncio
    async def test_find_by_type_keeps_stored_order(self, accounts):
        types = [
            AccountType.CURRENT_ACCOUNT,
            AccountType.SAVING_ACCOUNT,
            AccountType.CURRENT_ACCOUNT,
            AccountType.SAVING_ACCOUNT,
            AccountType.CURRENT_ACCOUNT,
        ]
        for index, account_type in enumerate(types):
            await accounts.save(make_account(index, account_type))

        current = await accounts.find_by_type(AccountType.CURRENT_ACCOUNT)
        saving = await accounts.find_by_type(AccountType.SAVING_ACCOUNT)

        assert [account.id for account in current] == ["acc-0", "acc-2", "acc-4"]
        assert [account.id for account in saving] == ["acc-1", "acc-3"]

    @pytest.mark.asyncio
    async def test_delete_by_id(self, accounts):
        await accounts.save(make_account(1))

        assert await accounts.delete_by_id("acc-1") is True
        assert await accounts.find_by_id("acc-1") is None
        assert await accounts.delete_by_id("acc-1") is False

    @pytest.mark.asyncio
    async def test_customer_is_loaded_with_account(self, accounts, customers):
        owner = await customers.save(Customer(name="Hanae"))
        await accounts.save(make_account(1, customer=owner))
        await accounts.save(make_account(2))

        owned = await accounts.find_by_customer(owner.id)
        orphan = await accounts.find_by_id("acc-2")

        assert [account.id for account in owned] == ["acc-1"]
        assert owned[0].customer == owner
        assert orphan.customer is None


class TestCustomerRepository:
    @pytest.mark.asyncio
    async def test_save_assigns_numeric_ids(self, customers):
        first = await customers.save(Customer(name="Mohamed"))
        second = await customers.save(Customer(name="Imane"))

        assert isinstance(first.id, int)
        assert second.id > first.id
        assert [c.name for c in await customers.find_all()] == ["Mohamed", "Imane"]

    @pytest.mark.asyncio
    async def test_save_existing_renames(self, customers):
        saved = await customers.save(Customer(name="Yasine"))

        await customers.save(Customer(id=saved.id, name="Yassine"))

        assert (await customers.find_by_id(saved.id)).name == "Yassine"
        assert len(await customers.find_all()) == 1

    @pytest.mark.asyncio
    async def test_delete_by_id(self, customers):
        saved = await customers.save(Customer(name="Hanae"))

        assert await customers.delete_by_id(saved.id) is True
        assert await customers.find_by_id(saved.id) is None
        assert await customers.delete_by_id(saved.id) is False
