"""
Tests for account API endpoints.

These test the HTTP layer: status codes, response format,
and error translation. Business rules are tested in
test_account_service.py.
"""


def create_account(client, user_id, initial_balance=1000):
    return client.post("/account", json={
        "user_id": user_id,
        "initial_balance": initial_balance,
    })


class TestCreateAccount:

    def test_create_account_returns_201(self, client, make_user):
        user = make_user()
        response = create_account(client, user.id)
        assert response.status_code == 201

    def test_create_account_returns_data(self, client, make_user):
        user = make_user()
        data = create_account(client, user.id).json()

        assert data["user_id"] == user.id
        assert data["account_number"] == "1000000000"
        assert data["registered_at"] is not None

    def test_unknown_user_returns_404(self, client):
        response = create_account(client, 999)

        assert response.status_code == 404
        assert response.json() == {
            "account_number": None,
            "error_code": "USER_NOT_FOUND",
            "error_message": "User not found.",
        }

    def test_negative_initial_balance_returns_422(self, client, make_user):
        user = make_user()
        response = create_account(client, user.id, initial_balance=-1)

        assert response.status_code == 422
        data = response.json()
        assert data["account_number"] is None
        assert data["error_code"] == "INVALID_REQUEST"
        assert "initial_balance" in data["error_message"]

    def test_account_cap_returns_400(self, client, make_user):
        user = make_user()
        for _ in range(10):
            create_account(client, user.id)

        response = create_account(client, user.id)

        assert response.status_code == 400
        assert response.json()["error_code"] == "MAX_ACCOUNTS_PER_USER_EXCEEDED"


class TestDeleteAccount:

    def test_delete_empty_account(self, client, make_user):
        user = make_user()
        number = create_account(client, user.id, 0).json()["account_number"]

        response = client.request("DELETE", "/account", json={
            "user_id": user.id,
            "account_number": number,
        })

        assert response.status_code == 200
        data = response.json()
        assert data["account_number"] == number
        assert data["unregistered_at"] is not None

    def test_delete_with_balance_returns_400(self, client, make_user):
        user = make_user()
        number = create_account(client, user.id, 100).json()["account_number"]

        response = client.request("DELETE", "/account", json={
            "user_id": user.id,
            "account_number": number,
        })

        assert response.status_code == 400
        assert response.json()["error_code"] == "BALANCE_NOT_EMPTY"
        assert response.json()["account_number"] == number


class TestGetAccounts:

    def test_list_accounts(self, client, make_user):
        user = make_user()
        create_account(client, user.id, 1000)
        create_account(client, user.id, 2000)

        response = client.get("/account", params={"user_id": user.id})

        assert response.status_code == 200
        assert response.json() == [
            {"account_number": "1000000000", "balance": 1000},
            {"account_number": "1000000001", "balance": 2000},
        ]

    def test_list_for_unknown_user_returns_404(self, client):
        response = client.get("/account", params={"user_id": 999})
        assert response.status_code == 404

    def test_get_account_by_id(self, client, make_user):
        user = make_user()
        create_account(client, user.id, 1000)

        response = client.get("/account/1")

        assert response.status_code == 200
        data = response.json()
        assert data["id"] == 1
        assert data["account_user_id"] == user.id
        assert data["account_number"] == "1000000000"
        assert data["account_status"] == "IN_USE"
        assert data["balance"] == 1000

    def test_negative_account_id_returns_400(self, client):
        response = client.get("/account/-10")

        assert response.status_code == 400
        assert response.json()["error_code"] == "INVALID_REQUEST"

    def test_missing_account_id_returns_404(self, client):
        response = client.get("/account/3333")
        assert response.status_code == 404
