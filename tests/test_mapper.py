"""Tests for entity <-> payload mapping."""

from datetime import datetime, timezone

from bank_account_service.modules.accounts import (
    AccountMapper,
    AccountProjection,
    AccountType,
    BankAccount,
    BankAccountRequest,
)
from bank_account_service.modules.customers import Customer


class TestFromRequest:
    def test_stamps_identity_and_creation_time(self, mapper):
        account = mapper.from_request(
            BankAccountRequest(balance=120.5, currency="MAD", type=AccountType.SAVING_ACCOUNT)
        )

        assert account.id == "acc-0001"
        assert account.created_at == datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
        assert account.balance == 120.5
        assert account.currency == "MAD"
        assert account.type is AccountType.SAVING_ACCOUNT
        assert account.customer is None

    def test_every_call_mints_a_new_id(self):
        mapper = AccountMapper()
        request = BankAccountRequest(balance=1.0)

        first = mapper.from_request(request)
        second = mapper.from_request(request)

        assert first.id != second.id
        assert first.created_at.tzinfo is not None

    def test_attaches_customer(self, mapper):
        customer = Customer(id=7, name="Yassine")

        account = mapper.from_request(BankAccountRequest(currency="USD"), customer)

        assert account.customer == customer
        assert account.customer_id == 7

    def test_absent_fields_stay_absent(self, mapper):
        account = mapper.from_request(BankAccountRequest())

        assert account.balance is None
        assert account.currency is None
        assert account.type is None


def test_from_bank_account_copies_fields():
    created = datetime(2023, 5, 4, tzinfo=timezone.utc)
    customer = Customer(id=1, name="Mohamed")
    account = BankAccount(
        id="abc",
        created_at=created,
        balance=42.0,
        currency="EUR",
        type=AccountType.CURRENT_ACCOUNT,
        customer=customer,
    )

    response = AccountMapper().from_bank_account(account)

    assert response.id == "abc"
    assert response.created_at == created
    assert response.balance == 42.0
    assert response.currency == "EUR"
    assert response.type is AccountType.CURRENT_ACCOUNT
    assert response.customer == customer


def test_projection_keeps_only_id_type_balance():
    account = BankAccount(
        id="abc",
        created_at=datetime(2023, 5, 4, tzinfo=timezone.utc),
        balance=99.0,
        currency="EUR",
        type=AccountType.SAVING_ACCOUNT,
        customer=Customer(id=1, name="Mohamed"),
    )
    mapper = AccountMapper()

    projection = mapper.to_projection(account)
    response = mapper.from_projection(projection)

    assert projection == AccountProjection(id="abc", type=AccountType.SAVING_ACCOUNT, balance=99.0)
    assert response.id == "abc"
    assert response.type is AccountType.SAVING_ACCOUNT
    assert response.balance == 99.0
    assert response.currency is None
    assert response.created_at is None
    assert response.customer is None
