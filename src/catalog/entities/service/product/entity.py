"""Entity: Product."""

import math

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Product(BaseModel):
    """Product entity managed by the catalog store.

    Products are immutable. Invariants are checked at construction and a
    violation fails with ``pydantic.ValidationError``; values are never
    clamped. "Changing" a field means deriving a new product through one of
    the ``with_*`` helpers, which re-runs validation.
    """

    model_config = ConfigDict(frozen=True)

    id: int | None = Field(
        default=None, description="Store-assigned identity, absent before persistence"
    )
    name: str = Field(description="Display name")
    description: str = Field(default="", description="Free-form description")
    price: float = Field(strict=True, description="Unit price")
    stock: int = Field(default=0, strict=True, description="Units in stock")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Product name must not be blank")
        return value

    @field_validator("price")
    @classmethod
    def _price_non_negative(cls, value: float) -> float:
        if not math.isfinite(value):
            raise ValueError("Price must be a finite number")
        if value < 0:
            raise ValueError("Price must be non-negative")
        return value

    @field_validator("stock")
    @classmethod
    def _stock_non_negative(cls, value: int) -> int:
        if value < 0:
            raise ValueError("Stock must be non-negative")
        return value

    @computed_field
    @property
    def available(self) -> bool:
        """Whether at least one unit is in stock."""
        return self.stock > 0

    def _derive(self, **changes) -> "Product":
        data = self.model_dump(exclude={"available"})
        data.update(changes)
        return Product.model_validate(data)

    def with_id(self, product_id: int | None) -> "Product":
        return self._derive(id=product_id)

    def with_stock(self, stock: int) -> "Product":
        """Return a copy with a new stock level."""
        return self._derive(stock=stock)

    def with_price(self, price: float) -> "Product":
        """Return a copy with a new price."""
        return self._derive(price=price)
