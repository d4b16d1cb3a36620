"""Integration tests for the server-rendered pages."""

import uuid


class TestProductPages:
    def test_home_lists_products(self, client, create_product):
        create_product(title="Mechanical Keyboard")
        response = client.get("/")
        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "Mechanical Keyboard" in response.text

    def test_products_page_links(self, client, create_product):
        for index in range(3):
            create_product(code=f"KB-{index}", title=f"Keyboard {index}")
        response = client.get("/products", params={"limit": 2})
        assert response.status_code == 200
        assert "/products?page=2&amp;limit=2" in response.text
        assert "Page 1 of 2" in response.text

    def test_realtime_page_subscribes_to_feed(self, client):
        response = client.get("/realtimeproducts")
        assert response.status_code == 200
        assert 'socket.on("productos"' in response.text


class TestCartPage:
    def test_cart_page(self, client, create_product):
        cart_id = client.post("/api/carts").json()["cart_id"]
        product_id = create_product(title="Mechanical Keyboard", price=10.0)
        client.post(f"/api/carts/{cart_id}/product/{product_id}", json={"quantity": 2})

        response = client.get(f"/carts/{cart_id}")
        assert response.status_code == 200
        assert "Mechanical Keyboard" in response.text
        assert "Total: $20.00" in response.text

    def test_missing_cart(self, client):
        assert client.get(f"/carts/{uuid.uuid4()}").status_code == 404


class TestSessionPages:
    def test_login_and_register_pages(self, client):
        assert client.get("/login").status_code == 200
        assert client.get("/register").status_code == 200

    def test_profile_redirects_anonymous(self, client):
        response = client.get("/profile", follow_redirects=False)
        assert response.status_code == 302
        assert response.headers["location"] == "/login"

    def test_profile_for_logged_in_user(self, client):
        client.post(
            "/api/sessions/register",
            json={"first_name": "Ada", "last_name": "Lovelace", "email": "ada@example.com", "password": "pw"},
        )
        client.post("/api/sessions/login", json={"email": "ada@example.com", "password": "pw"})
        response = client.get("/profile")
        assert response.status_code == 200
        assert "ada@example.com" in response.text
