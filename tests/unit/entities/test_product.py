"""Unit tests for the Product entity."""

import pytest
from pydantic import ValidationError

from src.catalog.entities.service.product import Product


class TestProductEntity:
    """Test the Product domain entity."""

    def test_create_valid_product(self):
        """Should create a product with defaults for optional fields."""
        product = Product(name="Widget", price=5.0)

        assert product.id is None
        assert product.name == "Widget"
        assert product.description == ""
        assert product.price == 5.0
        assert product.stock == 0

    def test_blank_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name must not be blank"):
            Product(name="   ", price=1.0, stock=1)

    def test_empty_name_rejected(self):
        with pytest.raises(ValidationError, match="Product name must not be blank"):
            Product(name="", price=1.0, stock=1)

    def test_negative_price_rejected(self):
        with pytest.raises(ValidationError, match="Price must be non-negative"):
            Product(name="Widget", price=-0.01, stock=1)

    def test_negative_stock_rejected(self):
        with pytest.raises(ValidationError, match="Stock must be non-negative"):
            Product(name="Widget", price=1.0, stock=-1)

    @pytest.mark.parametrize("price", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_price_rejected(self, price: float):
        with pytest.raises(ValidationError, match="Price must be a finite number"):
            Product(name="Widget", price=price, stock=1)

    def test_string_price_rejected(self):
        """Should not coerce a numeric string into a price."""
        with pytest.raises(ValidationError):
            Product(name="Widget", price="9.99", stock=1)

    def test_bool_stock_rejected(self):
        with pytest.raises(ValidationError):
            Product(name="Widget", price=1.0, stock=True)

    def test_int_price_accepted(self):
        assert Product(name="Widget", price=3).price == 3.0

    def test_zero_price_and_stock_allowed(self):
        """Should accept the boundary values without clamping."""
        product = Product(name="Freebie", price=0, stock=0)

        assert product.price == 0
        assert product.stock == 0

    def test_available_tracks_stock(self):
        assert Product(name="Widget", price=1.0, stock=0).available is False
        assert Product(name="Widget", price=1.0, stock=1).available is True

    def test_is_immutable(self):
        product = Product(name="Widget", price=1.0, stock=1)

        with pytest.raises(ValidationError):
            product.stock = 10  # type: ignore[misc]

    def test_with_stock_returns_new_product(self):
        """Should derive a new value and leave the original untouched."""
        product = Product(id=1, name="Widget", description="desc", price=5.0, stock=3)

        out_of_stock = product.with_stock(0)

        assert out_of_stock.available is False
        assert out_of_stock.id == 1
        assert out_of_stock.name == "Widget"
        assert product.stock == 3

    def test_with_price_revalidates(self):
        product = Product(name="Widget", price=5.0, stock=3)

        assert product.with_price(7.5).price == 7.5
        with pytest.raises(ValidationError, match="Price must be non-negative"):
            product.with_price(-1)

    def test_with_id(self):
        product = Product(name="Widget", price=5.0)

        assert product.with_id(9).id == 9
        assert product.with_id(9).with_id(None).id is None

    def test_equality_by_fields(self):
        assert Product(id=1, name="A", price=1.0) == Product(id=1, name="A", price=1.0)
        assert Product(id=1, name="A", price=1.0) != Product(id=2, name="A", price=1.0)

    def test_serialization_includes_available(self):
        product = Product(name="Widget", price=2.5, stock=4)

        assert product.model_dump(mode="json") == {
            "id": None,
            "name": "Widget",
            "description": "",
            "price": 2.5,
            "stock": 4,
            "available": True,
        }
