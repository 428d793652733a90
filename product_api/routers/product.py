# product_api/routers/product.py
from __future__ import annotations

import uuid
from typing import List

from fastapi import APIRouter, Depends, status
from fastapi.responses import PlainTextResponse
from sqlalchemy.orm import Session

from product_api.database import get_db
from product_api.schemas.product import ProductDTO
from product_api.services import product_service as service

router = APIRouter(prefix="/products", tags=["products"])

# Erorile de domeniu (InvalidProductError / ProductNotFoundError / DuplicateSKUError)
# nu se prind aici: handler-ul ProductError din main.py le mapează pe 400/404/409.


@router.post(
    "",
    response_model=ProductDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a product",
)
def create_product(payload: ProductDTO, db: Session = Depends(get_db)):
    return service.to_dto(service.create(db, payload))


@router.put(
    "/{product_id}",
    response_model=ProductDTO,
    summary="Update a product",
)
def update_product(product_id: uuid.UUID, payload: ProductDTO, db: Session = Depends(get_db)):
    """Suprascrie name/price/sku; `id` din body e ignorat în favoarea celui din path."""
    return service.to_dto(service.update(db, product_id, payload))


@router.delete(
    "/{product_id}",
    response_class=PlainTextResponse,
    summary="Delete a product",
)
def delete_product(product_id: uuid.UUID, db: Session = Depends(get_db)):
    return PlainTextResponse(service.delete(db, product_id))


@router.get(
    "",
    response_model=List[ProductDTO],
    summary="List all products",
)
def list_products(db: Session = Depends(get_db)):
    return [service.to_dto(p) for p in service.get_all(db)]


@router.get(
    "/by-sku/{sku}",
    response_model=ProductDTO,
    summary="Get a product by SKU",
)
def get_product_by_sku(sku: str, db: Session = Depends(get_db)):
    return service.to_dto(service.get_by_sku(db, sku))


@router.get(
    "/{product_id}",
    response_model=ProductDTO,
    summary="Get a product by id",
)
def get_product(product_id: uuid.UUID, db: Session = Depends(get_db)):
    return service.to_dto(service.get_by_id(db, product_id))
