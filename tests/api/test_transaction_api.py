"""
Tests for transaction API endpoints.

Besides status codes and payloads, these check that a
rejected use or cancel leaves a FAIL record behind.
"""

from sqlalchemy import select

from account_system.models import Account, Transaction
from account_system.models.enums import TransactionResultType


def setup_account(client, user_id, initial_balance=10000):
    response = client.post("/account", json={
        "user_id": user_id,
        "initial_balance": initial_balance,
    })
    return response.json()["account_number"]


def use(client, user_id, account_number, amount):
    return client.post("/transaction/use", json={
        "user_id": user_id,
        "account_number": account_number,
        "amount": amount,
    })


def balance_of(db_session, account_number):
    account = db_session.execute(
        select(Account).where(Account.account_number == account_number)
    ).scalar_one()
    db_session.refresh(account)
    return account.balance


def failed_transactions(db_session):
    return db_session.execute(
        select(Transaction).where(
            Transaction.transaction_result_type == TransactionResultType.FAIL
        )
    ).scalars().all()


class TestUseBalance:

    def test_use_returns_transaction(self, client, db_session, make_user):
        user = make_user()
        number = setup_account(client, user.id)

        response = use(client, user.id, number, 800)

        assert response.status_code == 200
        data = response.json()
        assert data["account_number"] == number
        assert data["transaction_result_type"] == "SUCCESS"
        assert data["amount"] == 800
        assert len(data["transaction_id"]) == 32
        assert balance_of(db_session, number) == 9200

    def test_rejected_use_records_failure(self, client, db_session, make_user):
        user = make_user()
        number = setup_account(client, user.id, 100)

        response = use(client, user.id, number, 1000)

        assert response.status_code == 400
        assert response.json() == {
            "account_number": number,
            "error_code": "AMOUNT_EXCEEDS_BALANCE",
            "error_message": "The amount exceeds the account balance.",
        }
        assert balance_of(db_session, number) == 100
        failures = failed_transactions(db_session)
        assert len(failures) == 1
        assert failures[0].amount == 1000
        assert failures[0].balance_snapshot == 100

    def test_unknown_account_records_nothing(self, client, db_session, make_user):
        user = make_user()

        response = use(client, user.id, "1000000000", 100)

        assert response.status_code == 404
        assert response.json()["error_code"] == "ACCOUNT_NOT_FOUND"
        assert failed_transactions(db_session) == []

    def test_amount_below_minimum_returns_422(self, client, make_user):
        user = make_user()
        number = setup_account(client, user.id)

        response = use(client, user.id, number, 5)

        assert response.status_code == 422
        assert response.json()["error_code"] == "INVALID_REQUEST"
        assert response.json()["account_number"] == number

    def test_non_positive_amount_returns_error_body(self, client, db_session, make_user):
        user = make_user()
        number = setup_account(client, user.id)

        response = use(client, user.id, number, -5000)

        assert response.status_code == 422
        assert response.json()["error_code"] == "INVALID_REQUEST"
        assert balance_of(db_session, number) == 10000
        assert failed_transactions(db_session) == []


class TestCancelBalance:

    def test_cancel_returns_transaction(self, client, db_session, make_user):
        user = make_user()
        number = setup_account(client, user.id)
        used = use(client, user.id, number, 800).json()

        response = client.post("/transaction/cancel", json={
            "transaction_id": used["transaction_id"],
            "account_number": number,
            "amount": 800,
        })

        assert response.status_code == 200
        assert response.json()["transaction_result_type"] == "SUCCESS"
        assert response.json()["transaction_id"] != used["transaction_id"]
        assert balance_of(db_session, number) == 10000

    def test_partial_cancel_records_failure(self, client, db_session, make_user):
        user = make_user()
        number = setup_account(client, user.id)
        used = use(client, user.id, number, 800).json()

        response = client.post("/transaction/cancel", json={
            "transaction_id": used["transaction_id"],
            "account_number": number,
            "amount": 500,
        })

        assert response.status_code == 400
        assert response.json()["error_code"] == "PARTIAL_CANCEL_NOT_ALLOWED"
        assert balance_of(db_session, number) == 9200
        failures = failed_transactions(db_session)
        assert len(failures) == 1
        assert failures[0].transaction_type.value == "CANCEL"


class TestQueryTransaction:

    def test_query_transaction(self, client, make_user):
        user = make_user()
        number = setup_account(client, user.id)
        used = use(client, user.id, number, 2000).json()

        response = client.get(f"/transaction/{used['transaction_id']}")

        assert response.status_code == 200
        data = response.json()
        assert data["account_number"] == number
        assert data["transaction_type"] == "USE"
        assert data["transaction_result_type"] == "SUCCESS"
        assert data["amount"] == 2000

    def test_unknown_transaction_returns_404(self, client):
        response = client.get("/transaction/missing")

        assert response.status_code == 404
        assert response.json()["error_code"] == "TRANSACTION_NOT_FOUND"
