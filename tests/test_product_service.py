# tests/test_product_service.py
from __future__ import annotations

import uuid

import pytest
from pydantic import ValidationError

from product_api.crud import product as crud
from product_api.models.product import Product
from product_api.schemas.product import ProductDTO
from product_api.services import product_service as service
from product_api.services.errors import (
    DuplicateSKUError,
    InvalidProductError,
    ProductError,
    ProductNotFoundError,
)


def _dto(name: str = "Widget", price: float = 9.99, sku: str | None = None, **extra) -> ProductDTO:
    return ProductDTO(name=name, price=price, sku=sku or f"SKU-{uuid.uuid4().hex[:10]}", **extra)


def test_create_then_get_returns_same_fields(db):
    created = service.create(db, _dto(sku="WID-001"))
    assert isinstance(created.id, uuid.UUID)

    fetched = service.get_by_id(db, created.id)
    assert (fetched.name, fetched.price, fetched.sku) == ("Widget", 9.99, "WID-001")


def test_create_with_id_is_rejected_without_store_mutation(db):
    with pytest.raises(InvalidProductError):
        service.create(db, _dto(id=uuid.uuid4()))
    assert service.get_all(db) == []


def test_ids_are_generated_and_unique(db):
    a = service.create(db, _dto())
    b = service.create(db, _dto())
    assert a.id != b.id


def test_duplicate_sku_raises_conflict(db):
    service.create(db, _dto(sku="DUP-1"))
    with pytest.raises(DuplicateSKUError):
        service.create(db, _dto(name="Other", sku="DUP-1"))
    assert len(service.get_all(db)) == 1


def test_update_overwrites_name_price_and_keeps_id_and_sku(db):
    created = service.create(db, _dto(sku="WID-001"))
    updated = service.update(db, created.id, _dto(name="Widget2", price=19.99, sku="WID-001B"))

    assert updated.id == created.id
    again = service.get_by_id(db, created.id)
    assert (again.name, again.price, again.sku) == ("Widget2", 19.99, "WID-001")
    assert len(service.get_all(db)) == 1


def test_update_ignores_id_from_payload(db):
    created = service.create(db, _dto())
    updated = service.update(db, created.id, _dto(name="Renamed", id=uuid.uuid4()))
    assert updated.id == created.id
    assert updated.name == "Renamed"


def test_update_missing_id_is_not_an_upsert(db):
    missing = uuid.uuid4()
    with pytest.raises(ProductNotFoundError):
        service.update(db, missing, _dto())
    assert crud.find_by_id(db, missing) is None


def test_update_never_changes_stored_sku(db):
    service.create(db, _dto(sku="A-1"))
    b = service.create(db, _dto(sku="B-1"))
    updated = service.update(db, b.id, _dto(name="Renamed", sku="A-1"))
    assert updated.sku == "B-1"
    db.expire_all()
    assert service.get_by_id(db, b.id).sku == "B-1"
    assert crud.find_by_sku(db, "A-1").id != b.id


def test_save_maps_check_violation_to_invalid_not_duplicate(db):
    with pytest.raises(InvalidProductError) as ei:
        crud.save(db, Product(name="Free", price=0.0, sku="FREE-1"))
    assert not isinstance(ei.value, DuplicateSKUError)
    assert ei.value.status_code == 400
    assert crud.find_all(db) == []


def test_get_by_id_missing_raises_not_found(db):
    with pytest.raises(ProductNotFoundError) as ei:
        service.get_by_id(db, uuid.uuid4())
    assert ei.value.status_code == 404
    assert ei.value.kind == "not_found"


def test_get_by_sku(db):
    created = service.create(db, _dto(sku="FIND-ME"))
    assert service.get_by_sku(db, "FIND-ME").id == created.id
    with pytest.raises(ProductNotFoundError):
        service.get_by_sku(db, "NOPE")


def test_get_all_contains_exactly_created(db):
    created = {service.create(db, _dto()).id for _ in range(4)}
    assert {p.id for p in service.get_all(db)} == created


def test_delete_then_get_is_not_found(db):
    created = service.create(db, _dto())
    assert service.delete(db, created.id) == service.DELETED_MESSAGE
    with pytest.raises(ProductNotFoundError):
        service.get_by_id(db, created.id)


def test_delete_is_tolerant_of_absence(db):
    assert service.delete(db, uuid.uuid4()) == "Product deleted successfully"


def test_to_dto_fills_missing_letter(db):
    dto = service.to_dto(service.create(db, _dto(name="Widget", sku="WID-001")))
    assert dto.missing_letter == "a"
    assert dto.model_dump(by_alias=True)["missingLetter"] == "a"


def test_error_hierarchy_maps_to_http_codes():
    assert issubclass(InvalidProductError, ProductError)
    assert (InvalidProductError().status_code, ProductNotFoundError().status_code, DuplicateSKUError().status_code) == (
        400,
        404,
        409,
    )
    assert str(DuplicateSKUError()) == "SKU already exists."


@pytest.mark.parametrize(
    "payload",
    [
        {"name": "   ", "price": 1.0, "sku": "S-1"},
        {"name": "ok", "price": 0, "sku": "S-1"},
        {"name": "ok", "price": -5.5, "sku": "S-1"},
        {"name": "ok", "price": 1.0, "sku": "  "},
        {"name": "ok", "sku": "S-1"},
    ],
)
def test_dto_validation_rejects_invalid_shapes(payload):
    with pytest.raises(ValidationError):
        ProductDTO(**payload)


def test_dto_strips_whitespace():
    dto = ProductDTO(name="  Widget ", price=1.5, sku=" WID-9 ")
    assert (dto.name, dto.sku) == ("Widget", "WID-9")


def test_save_overwrites_row_with_existing_id(db):
    created = crud.save(db, Product(name="First", price=1.0, sku="OW-1"))
    crud.save(db, Product(id=created.id, name="Second", price=2.0, sku="OW-1"))
    db.expire_all()
    row = crud.find_by_id(db, created.id)
    assert (row.name, row.price) == ("Second", 2.0)
    assert len(crud.find_all(db)) == 1
