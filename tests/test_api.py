"""HTTP API tests using FastAPI's TestClient."""

API = "/api/v1"

ACCOUNT = {"name": "Ana Perez", "email": "ana@shop.com", "password": "secret123"}

ADDRESS = {
    "full_name": "Ana Perez",
    "phone": "5512345678",
    "full_address": "Calle Falsa 123, Ciudad",
}

ORDER = {
    "name": "Ana Perez",
    "email": "ana@shop.com",
    "phone": "5512345678",
    "address": "Calle Falsa 123, Ciudad",
    "payment_method": "Tarjeta de Crédito",
}


def register(client):
    resp = client.post(f"{API}/auth/register", json=ACCOUNT)
    assert resp.status_code == 201
    return resp.json()


def test_health(client):
    resp = client.get("/")
    assert resp.status_code == 200
    assert resp.json()["status"] == "ok"


def test_app_state_holds_only_the_facade(client):
    assert client.app.state.facade is not None
    assert not hasattr(client.app.state, "db")
    assert not hasattr(client.app.state, "settings")


class TestProductsAPI:
    def test_list(self, client):
        resp = client.get(f"{API}/products")
        assert resp.status_code == 200
        assert len(resp.json()) == 5

    def test_search(self, client):
        resp = client.get(f"{API}/products", params={"q": "laptop"})
        assert [p["id"] for p in resp.json()] == ["2"]

    def test_get_one(self, client):
        resp = client.get(f"{API}/products/1")
        assert resp.status_code == 200
        assert resp.json()["name"] == "Smartphone Galaxy"

    def test_unknown_product(self, client):
        resp = client.get(f"{API}/products/999")
        assert resp.status_code == 404
        assert resp.json()["detail"] == "Product not found"


class TestCartAPI:
    def test_empty_cart(self, client):
        resp = client.get(f"{API}/cart")
        assert resp.status_code == 200
        assert resp.json() == {"items": [], "total_quantity": 0, "total_price": 0.0}

    def test_add_update_remove(self, client):
        resp = client.post(f"{API}/cart", json={"product_id": "1"})
        assert resp.status_code == 200
        assert resp.json()["total_quantity"] == 1

        resp = client.post(f"{API}/cart", json={"product_id": "1", "quantity": 2})
        body = resp.json()
        assert len(body["items"]) == 1
        assert body["items"][0]["quantity"] == 3

        resp = client.patch(f"{API}/cart/1", json={"quantity": 5})
        assert resp.json()["items"][0]["quantity"] == 5

        resp = client.delete(f"{API}/cart/1")
        assert resp.json()["items"] == []

    def test_patch_to_zero_removes_line(self, client):
        client.post(f"{API}/cart", json={"product_id": "3"})
        resp = client.patch(f"{API}/cart/3", json={"quantity": 0})
        assert resp.json()["items"] == []

    def test_add_unknown_product(self, client):
        resp = client.post(f"{API}/cart", json={"product_id": "999"})
        assert resp.status_code == 404

    def test_clear(self, client):
        client.post(f"{API}/cart", json={"product_id": "1"})
        client.post(f"{API}/cart", json={"product_id": "2"})

        resp = client.delete(f"{API}/cart")
        assert resp.status_code == 200
        assert client.get(f"{API}/cart").json()["items"] == []


class TestAuthAPI:
    def test_register_then_conflict(self, client):
        body = register(client)
        assert body["email"] == "ana@shop.com"
        assert body["is_logged_in"] is True
        assert "password" not in body

        resp = client.post(f"{API}/auth/register", json=ACCOUNT)
        assert resp.status_code == 409

    def test_register_validation(self, client):
        resp = client.post(f"{API}/auth/register", json={**ACCOUNT, "password": "123"})
        assert resp.status_code == 422

    def test_login_logout(self, client):
        register(client)

        resp = client.post(f"{API}/auth/logout")
        assert resp.json()["is_logged_in"] is False

        resp = client.post(
            f"{API}/auth/login", json={"email": "ana@shop.com", "password": "wrong-pass"}
        )
        assert resp.status_code == 401
        assert resp.json()["detail"] == "Invalid email or password"

        resp = client.post(
            f"{API}/auth/login", json={"email": "ana@shop.com", "password": "secret123"}
        )
        assert resp.status_code == 200
        assert resp.json() == {"name": "Ana Perez", "email": "ana@shop.com", "is_logged_in": True}

    def test_me_without_account(self, client):
        resp = client.get(f"{API}/auth/me")
        assert resp.status_code == 404

    def test_wipe_account(self, client):
        register(client)

        resp = client.delete(f"{API}/auth/me")
        assert resp.status_code == 204
        assert client.get(f"{API}/auth/me").status_code == 404


class TestAddressesAPI:
    def test_requires_login(self, client):
        assert client.get(f"{API}/addresses").status_code == 401

        register(client)
        client.post(f"{API}/auth/logout")
        resp = client.post(f"{API}/addresses", json=ADDRESS)
        assert resp.status_code == 401

    def test_default_switching(self, client):
        register(client)

        first = client.post(f"{API}/addresses", json={**ADDRESS, "is_default": True})
        assert first.status_code == 201
        first_id = first.json()["id"]

        second = client.post(
            f"{API}/addresses",
            json={**ADDRESS, "full_address": "Avenida Siempre Viva 742"},
        ).json()
        assert second["is_default"] is False

        resp = client.post(f"{API}/addresses/{second['id']}/default")
        assert resp.status_code == 200
        assert resp.json()["is_default"] is True

        listing = client.get(f"{API}/addresses").json()
        assert [a["id"] for a in listing if a["is_default"]] == [second["id"]]
        assert client.get(f"{API}/addresses/default").json()["id"] == second["id"]
        assert client.get(f"{API}/addresses/{first_id}").json()["is_default"] is False

    def test_update_and_delete(self, client):
        register(client)
        address = client.post(f"{API}/addresses", json=ADDRESS).json()

        resp = client.put(
            f"{API}/addresses/{address['id']}",
            json={**ADDRESS, "full_name": "Luis Gomez", "is_default": True},
        )
        assert resp.status_code == 200
        assert resp.json()["full_name"] == "Luis Gomez"
        assert resp.json()["is_default"] is True

        assert client.get(f"{API}/addresses/count").json() == {"count": 1}

        resp = client.delete(f"{API}/addresses/{address['id']}")
        assert resp.status_code == 204
        assert client.get(f"{API}/addresses/count").json() == {"count": 0}
        assert client.get(f"{API}/addresses/default").status_code == 404

    def test_unknown_address(self, client):
        register(client)
        assert client.get(f"{API}/addresses/missing").status_code == 404
        assert client.post(f"{API}/addresses/missing/default").status_code == 404
        assert client.delete(f"{API}/addresses/missing").status_code == 404

    def test_address_validation(self, client):
        register(client)
        resp = client.post(f"{API}/addresses", json={**ADDRESS, "phone": "12ab"})
        assert resp.status_code == 422


class TestCheckoutAPI:
    def test_empty_cart(self, client):
        resp = client.post(f"{API}/checkout", json=ORDER)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Cart is empty"

    def test_checkout_saves_address_and_clears_cart(self, client):
        register(client)
        client.post(f"{API}/cart", json={"product_id": "3", "quantity": 2})

        resp = client.post(f"{API}/checkout", json={**ORDER, "save_address": True})
        assert resp.status_code == 200
        body = resp.json()
        assert body["total_quantity"] == 2
        assert body["total"] == 179.98
        assert body["saved_address_id"]

        assert client.get(f"{API}/cart").json()["items"] == []
        default = client.get(f"{API}/addresses/default").json()
        assert default["id"] == body["saved_address_id"]

    def test_save_address_as_guest(self, client):
        client.post(f"{API}/cart", json={"product_id": "1"})
        resp = client.post(f"{API}/checkout", json={**ORDER, "save_address": True})
        assert resp.status_code == 401

    def test_invalid_payment_method(self, client):
        client.post(f"{API}/cart", json={"product_id": "1"})
        resp = client.post(f"{API}/checkout", json={**ORDER, "payment_method": "Bitcoin"})
        assert resp.status_code == 422
