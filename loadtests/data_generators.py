"""Faker-based data generators for Locust load test scenarios.

Each generator produces payloads that pass the API's request validation and
match the field names of the storefront's Pydantic schemas.
"""

import random
import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ("electronics", "books", "home", "toys", "garden", "sports", "clothing")


def product_code() -> str:
    """Unique product codes like 'LT-a1b2c3d4'."""
    return f"LT-{uuid.uuid4().hex[:8]}"


def product_data() -> dict:
    """Generate a product creation payload."""
    return {
        "title": fake.catch_phrase()[:255],
        "description": fake.paragraph(nb_sentences=2),
        "code": product_code(),
        "price": round(random.uniform(1, 500), 2),
        "stock": random.randint(5, 200),
        "category": random.choice(CATEGORIES),
        "thumbnails": [fake.image_url() for _ in range(random.randint(0, 2))],
    }


def product_update_data() -> dict:
    """A partial update touching price and stock."""
    return {
        "price": round(random.uniform(1, 500), 2),
        "stock": random.randint(0, 200),
    }


def listing_params() -> dict:
    """Random combination of the listing query parameters."""
    params = {"page": random.randint(1, 3), "limit": random.choice([5, 10, 20])}
    if random.random() < 0.5:
        params["category"] = random.choice(CATEGORIES)
    if random.random() < 0.3:
        params["available"] = random.choice(["true", "false"])
    if random.random() < 0.4:
        params["sortByPrice"] = random.choice(["asc", "desc"])
    return params


def valid_email() -> str:
    """Generate emails that pass registration validation.

    Rules: exactly one @, no spaces, valid domain with dot,
    no leading/trailing dots, no consecutive dots.
    """
    local = fake.user_name()[:20]
    domain = fake.free_email_domain()
    return f"{local}.{uuid.uuid4().hex[:4]}@{domain}"


def registration_data() -> dict:
    return {
        "first_name": fake.first_name()[:100],
        "last_name": fake.last_name()[:100],
        "email": valid_email(),
        "age": random.randint(18, 80),
        "password": fake.password(length=12),
    }
