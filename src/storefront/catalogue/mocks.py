"""Faker-based mock products for UI and load-test fixtures. Nothing is persisted."""

import uuid

from faker import Faker

fake = Faker()

CATEGORIES = ("electronics", "books", "home", "toys", "garden", "sports", "clothing")


def mock_product() -> dict:
    """Generate one product document shaped like ``Product.to_document``."""
    return {
        "id": str(uuid.uuid4()),
        "title": fake.catch_phrase()[:255],
        "description": fake.paragraph(nb_sentences=3),
        "code": f"MOCK-{fake.unique.bothify('????-####').upper()}",
        "price": float(fake.pydecimal(left_digits=4, right_digits=2, positive=True)),
        "status": fake.boolean(chance_of_getting_true=85),
        "stock": fake.random_int(min=0, max=500),
        "category": fake.random_element(CATEGORIES),
        "thumbnails": [fake.image_url() for _ in range(fake.random_int(min=0, max=3))],
        "owner": "admin",
    }


def mock_products(count: int) -> list[dict]:
    if count < 0:
        raise ValueError("count must not be negative")
    return [mock_product() for _ in range(count)]
