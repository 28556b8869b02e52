# ezelectronics/api/__init__.py
from ezelectronics.api.routers import carts, health, products, reviews, users

__all__ = ["carts", "health", "products", "reviews", "users"]
