# product_api/services/product_service.py
from __future__ import annotations

import logging
import string
import uuid
from typing import List

from sqlalchemy.orm import Session

from product_api.crud import product as crud
from product_api.models.product import Product
from product_api.schemas.product import ProductDTO
from product_api.services.errors import InvalidProductError, ProductNotFoundError

logger = logging.getLogger("product-api.service")

DELETED_MESSAGE = "Product deleted successfully"
NO_MISSING_LETTER = "_"


def create(db: Session, dto: ProductDTO) -> Product:
    """Creează un produs nou; id-ul e generat de store, nu de client."""
    if dto.id is not None:
        raise InvalidProductError("id must be absent when creating a product.")
    obj = crud.save(db, Product(name=dto.name, price=dto.price, sku=dto.sku))
    logger.info("Product created id=%s sku=%s", obj.id, obj.sku)
    return obj


def update(db: Session, product_id: uuid.UUID, dto: ProductDTO) -> Product:
    """
    Suprascrie name/price pentru un produs existent.
    Nu e upsert: un id inexistent ridică ProductNotFoundError.
    SKU-ul e imutabil după creare: valoarea din payload e ignorată.
    """
    obj = get_by_id(db, product_id)
    if dto.sku != obj.sku:
        logger.info("Ignoring sku change on update id=%s (%s -> %s)", obj.id, obj.sku, dto.sku)
    obj.name = dto.name
    obj.price = dto.price
    obj = crud.save(db, obj)
    logger.info("Product updated id=%s sku=%s", obj.id, obj.sku)
    return obj


def get_all(db: Session) -> List[Product]:
    items = crud.find_all(db)
    logger.debug("Listed %d products", len(items))
    return items


def get_by_id(db: Session, product_id: uuid.UUID) -> Product:
    obj = crud.find_by_id(db, product_id)
    if obj is None:
        raise ProductNotFoundError(f"Product {product_id} not found.")
    return obj


def get_by_sku(db: Session, sku: str) -> Product:
    obj = crud.find_by_sku(db, sku)
    if obj is None:
        raise ProductNotFoundError(f"Product with sku {sku!r} not found.")
    return obj


def delete(db: Session, product_id: uuid.UUID) -> str:
    """Șterge produsul; tolerant la lipsă (mesajul de confirmare e același)."""
    removed = crud.delete_by_id(db, product_id)
    if removed:
        logger.info("Product deleted id=%s", product_id)
    else:
        logger.info("Delete requested for missing product id=%s", product_id)
    return DELETED_MESSAGE


def find_missing_letter(name: str | None) -> str:
    """
    Prima literă a..z (în ordine alfabetică) care nu apare în `name`.
    Case-insensitive; ignoră orice nu e literă ASCII.
    Întoarce "_" pentru nume gol/doar spații sau când apar toate cele 26 de litere.
    """
    if name is None or not name.strip():
        return NO_MISSING_LETTER
    present = set(name.lower())
    for letter in string.ascii_lowercase:
        if letter not in present:
            return letter
    return NO_MISSING_LETTER


def missing_letter_of(obj: Product) -> str:
    return find_missing_letter(obj.name)


def to_dto(obj: Product) -> ProductDTO:
    """Mapează entitatea pe transfer object, cu diagnosticul missingLetter completat."""
    return ProductDTO(
        id=obj.id,
        name=obj.name,
        price=obj.price,
        sku=obj.sku,
        missing_letter=missing_letter_of(obj),
    )
