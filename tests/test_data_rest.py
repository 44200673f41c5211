"""Tests for the repository style endpoints under /api/data."""

DATA = "/api/data"


def create(client, account_type="CURRENT_ACCOUNT", balance=100.0):
    r = client.post(
        f"{DATA}/bankAccounts",
        json={"balance": balance, "currency": "MAD", "type": account_type},
    )
    assert r.status_code == 201, r.text
    return r.json()


class TestCollections:
    def test_list_is_wrapped_in_embedded(self, client):
        created = create(client)

        body = client.get(f"{DATA}/bankAccounts").json()

        items = body["_embedded"]["bankAccounts"]
        assert [item["id"] for item in items] == [created["id"]]
        assert body["_links"]["self"]["href"].endswith("/api/data/bankAccounts")
        assert items[0]["_links"]["self"]["href"].endswith(f"/bankAccounts/{created['id']}")

    def test_search_by_type(self, client):
        kinds = ["CURRENT_ACCOUNT", "SAVING_ACCOUNT", "CURRENT_ACCOUNT", "SAVING_ACCOUNT", "CURRENT_ACCOUNT"]
        created = [create(client, kind) for kind in kinds]

        r = client.get(f"{DATA}/bankAccounts/search/byType", params={"t": "CURRENT_ACCOUNT"})

        assert r.status_code == 200
        items = r.json()["_embedded"]["bankAccounts"]
        expected = [a["id"] for a in created if a["type"] == "CURRENT_ACCOUNT"]
        assert [item["id"] for item in items] == expected
        assert {item["type"] for item in items} == {"CURRENT_ACCOUNT"}

    def test_search_by_unknown_type_is_rejected(self, client):
        r = client.get(f"{DATA}/bankAccounts/search/byType", params={"t": "GOLD"})

        assert r.status_code == 422

    def test_search_index_lists_by_type(self, client):
        body = client.get(f"{DATA}/bankAccounts/search").json()

        assert "byType" in body["_links"]


class TestProjection:
    def test_single_account_projection(self, client):
        created = create(client, "SAVING_ACCOUNT", 321.0)

        r = client.get(f"{DATA}/bankAccounts/{created['id']}", params={"projection": "p1"})

        assert r.status_code == 200
        body = r.json()
        assert set(body) == {"id", "type", "balance", "_links"}
        assert body["id"] == created["id"]
        assert body["type"] == "SAVING_ACCOUNT"
        assert body["balance"] == 321.0

    def test_collection_projection(self, client):
        create(client)
        create(client, "SAVING_ACCOUNT")

        body = client.get(f"{DATA}/bankAccounts", params={"projection": "p1"}).json()

        for item in body["_embedded"]["bankAccounts"]:
            assert "currency" not in item
            assert "createdAt" not in item
            assert "customer" not in item

    def test_projection_omits_populated_customer(self, seeded_client):
        full = seeded_client.get("/api/bankAccounts").json()
        assert all(account["customer"] is not None for account in full)

        body = seeded_client.get(f"{DATA}/bankAccounts", params={"projection": "p1"}).json()

        items = body["_embedded"]["bankAccounts"]
        assert [item["id"] for item in items] == [account["id"] for account in full]
        for item, account in zip(items, full):
            assert set(item) == {"id", "type", "balance", "_links"}
            assert (item["type"], item["balance"]) == (account["type"], account["balance"])
            assert "customer" not in item["_links"]

    def test_customer_accounts_projection(self, seeded_client):
        customer = seeded_client.get(f"{DATA}/customers").json()["_embedded"]["customers"][0]

        body = seeded_client.get(
            f"{DATA}/customers/{customer['id']}/bankAccounts", params={"projection": "p1"}
        ).json()

        items = body["_embedded"]["bankAccounts"]
        assert len(items) == 3
        assert all(set(item) == {"id", "type", "balance", "_links"} for item in items)

    def test_search_by_type_projection(self, client):
        saving = create(client, "SAVING_ACCOUNT", 7.0)
        create(client)

        r = client.get(f"{DATA}/bankAccounts/search/byType", params={"t": "SAVING_ACCOUNT", "projection": "p1"})

        items = r.json()["_embedded"]["bankAccounts"]
        assert [{k: v for k, v in item.items() if k != "_links"} for item in items] == [
            {"id": saving["id"], "type": "SAVING_ACCOUNT", "balance": 7.0}
        ]

    def test_projection_of_missing_account_is_404(self, client):
        r = client.get(f"{DATA}/bankAccounts/missing", params={"projection": "p1"})

        assert r.status_code == 404

    def test_full_view_without_projection(self, client):
        created = create(client)

        body = client.get(f"{DATA}/bankAccounts/{created['id']}").json()

        assert body["currency"] == "MAD"
        assert body["createdAt"] == created["createdAt"]

    def test_unknown_projection_is_400(self, client):
        created = create(client)

        r = client.get(f"{DATA}/bankAccounts/{created['id']}", params={"projection": "p9"})

        assert r.status_code == 400


class TestWrites:
    def test_patch_is_partial(self, client):
        created = create(client, "SAVING_ACCOUNT", 5.0)

        r = client.patch(f"{DATA}/bankAccounts/{created['id']}", json={"currency": "USD"})

        assert r.status_code == 200
        body = r.json()
        assert body["currency"] == "USD"
        assert body["balance"] == 5.0
        assert body["type"] == "SAVING_ACCOUNT"
        assert body["createdAt"] == created["createdAt"]

    def test_delete_then_get_is_404(self, client):
        created = create(client)

        assert client.delete(f"{DATA}/bankAccounts/{created['id']}").status_code == 204
        assert client.get(f"{DATA}/bankAccounts/{created['id']}").status_code == 404

    def test_get_missing_is_404(self, client):
        assert client.get(f"{DATA}/bankAccounts/missing").status_code == 404


class TestCustomers:
    def test_customers_listing(self, seeded_client):
        body = seeded_client.get(f"{DATA}/customers").json()

        names = [c["name"] for c in body["_embedded"]["customers"]]
        assert names == ["Hanae", "Imane"]

    def test_customer_accounts(self, seeded_client):
        customers = seeded_client.get(f"{DATA}/customers").json()["_embedded"]["customers"]
        customer_id = customers[0]["id"]

        body = seeded_client.get(f"{DATA}/customers/{customer_id}/bankAccounts").json()

        assert len(body["_embedded"]["bankAccounts"]) == 3

    def test_account_customer_link(self, seeded_client):
        account = seeded_client.get(f"{DATA}/bankAccounts").json()["_embedded"]["bankAccounts"][0]

        r = seeded_client.get(f"{DATA}/bankAccounts/{account['id']}/customer")

        assert r.status_code == 200
        assert r.json()["name"] in {"Hanae", "Imane"}

    def test_unknown_customer_is_404(self, client):
        assert client.get(f"{DATA}/customers/999").status_code == 404
        assert client.get(f"{DATA}/customers/999/bankAccounts").status_code == 404
