"""Pydantic models for submitted cart forms.

These are external contracts (anti-corruption layer), separate from the
Protean commands that carry them into the domain.
"""

from pydantic import BaseModel, Field

AttributeValue = str | int | float | bool


class CartLineUpdateModel(BaseModel):
    sku: str = Field(min_length=1, max_length=50)
    quantity: int = Field(ge=0, default=1)
    attributes: dict[str, AttributeValue] = Field(default_factory=dict)

    model_config = {
        "str_strip_whitespace": True,
        "json_schema_extra": {
            "examples": [
                {
                    "sku": "TSHIRT-001",
                    "quantity": 2,
                    "attributes": {"size": "M", "color": "blue"},
                }
            ]
        },
    }


class CartUpdateModel(BaseModel):
    lines: list[CartLineUpdateModel] = Field(default_factory=list)
    email: str | None = None
