"""Storefront load test scenarios.

Two stateful SequentialTaskSet journeys (an administrator maintaining the
catalogue, a shopper filling and purchasing a cart) plus a stateless browser
hammering the listing endpoint. Every product write fans out a live feed
broadcast, so the admin journey also measures broadcast cost.
"""

import random

from locust import HttpUser, SequentialTaskSet, between, task

from loadtests.data_generators import listing_params, product_data, product_update_data, registration_data
from loadtests.helpers.state import AdminState, ShopperState


def _find_product_id(client, code):
    with client.get(
        "/api/products",
        params={"limit": 100},
        catch_response=True,
        name="GET /api/products (lookup)",
    ) as resp:
        if resp.status_code != 200:
            resp.failure(f"Listing failed: {resp.status_code}")
            return None
        return next((p["id"] for p in resp.json()["payload"] if p["code"] == code), None)


class CatalogueAdminJourney(SequentialTaskSet):
    """Add products -> Update one -> Delete one."""

    def on_start(self):
        self.state = AdminState()

    @task
    def add_products(self):
        payload = [product_data() for _ in range(3)]
        with self.client.post(
            "/api/products",
            json=payload,
            catch_response=True,
            name="POST /api/products",
        ) as resp:
            if resp.status_code == 201:
                self.state.product_codes = [p["code"] for p in payload]
            else:
                resp.failure(f"Add products failed: {resp.status_code}")
                self.interrupt()

    @task
    def find_products(self):
        for code in self.state.product_codes:
            product_id = _find_product_id(self.client, code)
            if product_id:
                self.state.product_ids.append(product_id)
        if not self.state.product_ids:
            self.interrupt()

    @task
    def update_product(self):
        with self.client.put(
            f"/api/products/{self.state.product_ids[0]}",
            json=product_update_data(),
            catch_response=True,
            name="PUT /api/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Update failed: {resp.status_code}")

    @task
    def delete_product(self):
        with self.client.delete(
            f"/api/products/{self.state.product_ids[-1]}",
            catch_response=True,
            name="DELETE /api/products/{id}",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Delete failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class ShopperJourney(SequentialTaskSet):
    """Register -> Login -> Browse -> Add to cart -> View cart -> Purchase."""

    def on_start(self):
        self.state = ShopperState()

    @task
    def register(self):
        payload = registration_data()
        with self.client.post(
            "/api/sessions/register",
            json=payload,
            catch_response=True,
            name="POST /api/sessions/register",
        ) as resp:
            if resp.status_code == 201:
                self.state.email = payload["email"]
                self.state.password = payload["password"]
                self.state.cart_id = resp.json()["cart_id"]
            else:
                resp.failure(f"Register failed: {resp.status_code}")
                self.interrupt()

    @task
    def login(self):
        with self.client.post(
            "/api/sessions/login",
            json={"email": self.state.email, "password": self.state.password},
            catch_response=True,
            name="POST /api/sessions/login",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Login failed: {resp.status_code}")
                self.interrupt()

    @task
    def browse(self):
        with self.client.get(
            "/api/products",
            params={"available": "true", "limit": 20},
            catch_response=True,
            name="GET /api/products",
        ) as resp:
            if resp.status_code != 200:
                resp.failure(f"Browse failed: {resp.status_code}")
                self.interrupt()
                return
            products = resp.json()["payload"]
        if not products:
            self.interrupt()
        chosen = random.sample(products, k=min(2, len(products)))
        self.state.cart_product_ids = [p["id"] for p in chosen]

    @task
    def add_to_cart(self):
        for product_id in self.state.cart_product_ids:
            with self.client.post(
                f"/api/carts/{self.state.cart_id}/product/{product_id}",
                json={"quantity": random.randint(1, 3)},
                catch_response=True,
                name="POST /api/carts/{cid}/product/{pid}",
            ) as resp:
                if resp.status_code != 200:
                    resp.failure(f"Add to cart failed: {resp.status_code}")

    @task
    def view_cart(self):
        self.client.get(f"/api/carts/{self.state.cart_id}", name="GET /api/carts/{cid}")

    @task
    def purchase(self):
        with self.client.post(
            f"/api/carts/{self.state.cart_id}/purchase",
            catch_response=True,
            name="POST /api/carts/{cid}/purchase",
        ) as resp:
            if resp.status_code == 200:
                if resp.json()["ticket"]:
                    self.state.tickets += 1
            else:
                resp.failure(f"Purchase failed: {resp.status_code}")

    @task
    def done(self):
        self.interrupt()


class CatalogueAdminUser(HttpUser):
    tasks = [CatalogueAdminJourney]
    wait_time = between(1, 3)
    weight = 1


class ShopperUser(HttpUser):
    tasks = [ShopperJourney]
    wait_time = between(1, 3)
    weight = 3


class BrowsingUser(HttpUser):
    """Read-only traffic against the listing query builder and views."""

    wait_time = between(0.5, 2)
    weight = 5

    @task(5)
    def list_products(self):
        self.client.get("/api/products", params=listing_params(), name="GET /api/products")

    @task(2)
    def products_page(self):
        self.client.get("/products", params=listing_params(), name="GET /products")

    @task(1)
    def home(self):
        self.client.get("/", name="GET /")
