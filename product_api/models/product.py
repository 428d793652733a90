# product_api/models/product.py
from __future__ import annotations

import uuid

from sqlalchemy import CheckConstraint, Float, Index, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from product_api.database import Base


class Product(Base):
    """
    Produsul persistat (tabel: products).

    Note:
    - `id` este UUID generat la insert de store adapter; nu vine niciodată de la client la creare.
    - `name` NOT NULL și non-blank (CHECK la nivel DB).
    - `price` NOT NULL, strict pozitiv (CHECK la nivel DB).
    - `sku` NOT NULL + index UNIC; conflictele devin DuplicateSKUError.
    """
    __tablename__ = "products"
    __table_args__ = (
        Index("ix_products_sku", "sku", unique=True),
        CheckConstraint("price > 0", name="price_positive"),
        CheckConstraint("length(trim(name)) > 0", name="name_not_blank"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    price: Mapped[float] = mapped_column(Float, nullable=False)
    sku: Mapped[str] = mapped_column(String(64), nullable=False)

    def __repr__(self) -> str:
        # scurtează numele în repr pentru loguri mai curate
        name_preview = (self.name[:32] + "…") if self.name and len(self.name) > 33 else self.name
        return f"<Product id={self.id!r} name={name_preview!r} sku={self.sku!r}>"
