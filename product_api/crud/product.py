# product_api/crud/product.py
from __future__ import annotations

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from product_api.models.product import Product
from product_api.services.errors import DuplicateSKUError, InvalidProductError


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = getattr(exc, "orig", None)
    pgcode = getattr(orig, "pgcode", None) or getattr(orig, "sqlstate", None)
    return pgcode == "23505" or "unique" in str(orig or exc).lower()


def save(db: Session, obj: Product) -> Product:
    """
    Insert dacă `obj.id` e None (generează UUID4), altfel suprascrie rândul cu acel id.
    Ridică DuplicateSKUError pe conflict de unicitate (SKU), InvalidProductError pe restul constrângerilor.
    """
    if obj.id is None:
        obj.id = uuid.uuid4()
        db.add(obj)
    else:
        obj = db.merge(obj)

    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        # doar indexul unic pe sku devine DuplicateSKUError; CHECK / NOT NULL => payload invalid
        if _is_unique_violation(e):
            raise DuplicateSKUError("SKU already exists.") from e
        raise InvalidProductError("Product violates a database constraint.") from e
    db.refresh(obj)
    return obj


def find_by_id(db: Session, product_id: uuid.UUID) -> Optional[Product]:
    """Returnează produsul după ID (sau None)."""
    return db.get(Product, product_id)


def find_by_sku(db: Session, sku: str) -> Optional[Product]:
    """Returnează produsul după SKU (sau None)."""
    if not sku:
        return None
    q = select(Product).where(Product.sku == sku)
    return db.execute(q).scalar_one_or_none()


def find_all(db: Session) -> List[Product]:
    # ordinea nu face parte din contract; sortăm doar pentru output stabil
    stmt = select(Product).order_by(Product.name.asc(), Product.id.asc())
    return list(db.execute(stmt).scalars().all())


def delete_by_id(db: Session, product_id: uuid.UUID) -> bool:
    """Șterge produsul după ID. Returnează True dacă s-a șters ceva."""
    obj = find_by_id(db, product_id)
    if not obj:
        return False
    db.delete(obj)
    db.commit()
    return True
