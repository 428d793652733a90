# product_api/models/__init__.py
# Importă modelele ca să fie înregistrate în Base.metadata (create_all / Alembic autogenerate).
from product_api.models.product import Product

__all__ = ["Product"]
