"""Unit tests for the result envelope."""

import dataclasses

import pytest

from src.catalog.core.result import Failure, Success, describe, summarize
from src.catalog.entities.service.product import Product


class TestSuccess:
    """Test the Success variant."""

    def test_default_message(self):
        """Should default the message to OK."""
        result = Success(42)

        assert result.value == 42
        assert result.message == "OK"

    def test_summarize(self):
        assert Success(None, "created").summarize() == "SUCCESS: created"
        assert summarize(Success(None, "created")) == "SUCCESS: created"

    def test_is_immutable(self):
        """Should reject field assignment."""
        result = Success(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            result.message = "changed"  # type: ignore[misc]


class TestFailure:
    """Test the Failure variant."""

    def test_summarize(self):
        failure = Failure(404, "entity with id 7 not found")

        assert failure.summarize() == "ERROR 404: entity with id 7 not found"
        assert summarize(failure) == "ERROR 404: entity with id 7 not found"

    def test_equality(self):
        assert Failure(404, "missing") == Failure(404, "missing")
        assert Failure(404, "missing") != Failure(400, "missing")


class TestDescribe:
    """Test the human-readable description of results."""

    def test_success_without_value(self):
        assert describe(Success(None, "deleted")) == "Operation succeeded with no content"

    def test_success_with_value(self):
        product = Product(id=1, name="item", price=1.0, stock=1)

        assert describe(Success(product)) == "Operation succeeded: OK"

    def test_failure(self):
        assert describe(Failure(404, "not found")) == "Operation failed [404]: not found"

    def test_unknown_variant_is_rejected(self):
        """Anything other than Success or Failure is unreachable."""
        with pytest.raises(AssertionError):
            describe("not a result")  # type: ignore[arg-type]
