"""Storefront: product catalogue, shopping carts and sessions with a live product feed."""
