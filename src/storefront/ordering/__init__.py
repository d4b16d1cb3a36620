"""Shopping carts and purchase tickets."""
