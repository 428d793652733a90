# product_api/schemas/product.py
from __future__ import annotations

import uuid
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProductDTO(BaseModel):
    """
    Transfer object pentru produs, folosit atât la input cât și la output.

    - create: `id` trebuie să lipsească (verificat în service → 400).
    - update: `id` din body e ignorat; câștigă cel din path.
    - `missingLetter` e ignorat la input și completat mereu la output.
    """
    id: Optional[uuid.UUID] = None
    name: str = Field(..., min_length=1, max_length=255)
    price: float = Field(..., gt=0, allow_inf_nan=False)
    sku: str = Field(..., min_length=1, max_length=64)
    missing_letter: Optional[str] = Field(None, alias="missingLetter")

    # --- Validators ---
    @field_validator("name")
    @classmethod
    def _name_strip_nonempty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("name must not be blank")
        return v

    @field_validator("sku")
    @classmethod
    def _sku_strip_nonempty(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("sku must not be blank")
        return v

    model_config = ConfigDict(
        populate_by_name=True,
        # oferă exemple utile în OpenAPI
        json_schema_extra={
            "examples": [
                {
                    "name": "Widget",
                    "price": 9.99,
                    "sku": "WID-001",
                }
            ]
        },
    )
