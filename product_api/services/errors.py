# product_api/services/errors.py
from __future__ import annotations

from fastapi import status


class ProductError(Exception):
    """
    Baza erorilor de domeniu. Fiecare subclasă își declară tipul și codul HTTP,
    iar handler-ul din main.py le mapează determinist (fără if/else pe mesaje).
    """
    kind: str = "internal"
    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_detail: str = "Product operation failed."

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class InvalidProductError(ProductError):
    """Payload invalid (ex. `id` trimis la creare)."""
    kind = "invalid"
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = "Invalid product request."


class ProductNotFoundError(ProductError):
    """Nu există produs cu id-ul cerut."""
    kind = "not_found"
    status_code = status.HTTP_404_NOT_FOUND
    default_detail = "Product not found."


class DuplicateSKUError(ProductError):
    """Ridicată când se încalcă unicitatea SKU."""
    kind = "conflict"
    status_code = status.HTTP_409_CONFLICT
    default_detail = "SKU already exists."
