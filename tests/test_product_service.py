"""Tests for ProductService over the in-memory store.

These tests verify:
- Create/read/update/delete semantics and id assignment
- Name substring and exact category filters
- Sort direction handling and stability
- Validation failures never reach the store
"""

from decimal import Decimal

import pytest

from product_catalog.exceptions import (
    InvalidSortFieldError,
    ProductNotFoundError,
    ProductValidationError,
)
from product_catalog.models.schemas.product import ProductCreate, ProductUpdate


class TestProductServiceCrud:
    """Create, read, update and delete."""

    def test_add_product_assigns_id(self, service):
        created = service.add_product(
            {"name": "Apple", "description": "Red", "price": 1.5, "category": "Fruits"}
        )

        assert created.id > 0
        assert created.name == "Apple"
        assert created.price == Decimal("1.5")

    def test_added_product_is_retrievable(self, service):
        data = ProductCreate(name="Apple", description="Red", price=Decimal("1.50"), category="Fruits")
        created = service.add_product(data)

        fetched = service.get_product_by_id(created.id)

        assert fetched is not None
        assert fetched.model_dump(exclude={"id"}) == data.model_dump(exclude={"id"})

    def test_client_supplied_id_is_ignored(self, service):
        created = service.add_product({"id": 999, "name": "A", "price": 1, "category": "C"})
        assert created.id == 1

    def test_get_missing_product_returns_none(self, service):
        assert service.get_product_by_id(42) is None

    def test_ids_are_not_reused_after_delete(self, service):
        first = service.add_product({"name": "A", "price": 1, "category": "C"})
        service.delete_product(first.id)
        second = service.add_product({"name": "B", "price": 1, "category": "C"})

        assert second.id > first.id

    def test_get_all_products_in_insertion_order(self, service):
        for name in ["c", "a", "b"]:
            service.add_product({"name": name, "price": 1, "category": "C"})

        assert [p.name for p in service.get_all_products()] == ["c", "a", "b"]

    def test_get_all_products_empty(self, service):
        assert service.get_all_products() == []

    def test_update_product_replaces_record(self, service):
        created = service.add_product({"name": "Old", "description": "d", "price": 20, "category": "C1"})

        updated = service.update_product(
            ProductUpdate(id=created.id, name="New", description=None, price=21, category="C2")
        )

        assert updated.id == created.id
        stored = service.get_product_by_id(created.id)
        assert stored.name == "New"
        assert stored.description is None
        assert stored.price == Decimal("21")
        assert stored.category == "C2"

    def test_update_missing_product_raises(self, service):
        with pytest.raises(ProductNotFoundError):
            service.update_product({"id": 7, "name": "X", "price": 1, "category": "C"})
        assert service.get_total_product_count() == 0

    def test_delete_product(self, service):
        created = service.add_product({"name": "A", "price": 1, "category": "C"})

        assert service.delete_product(created.id) is True
        assert service.get_product_by_id(created.id) is None

    def test_delete_missing_product_is_noop(self, service):
        service.add_product({"name": "A", "price": 1, "category": "C"})

        assert service.delete_product(99) is False
        assert service.get_total_product_count() == 1

    def test_delete_all_products(self, service, seed_products):
        for data in seed_products:
            service.add_product(data)
        assert service.get_total_product_count() == 2

        assert service.delete_all_products() == 2
        assert service.get_all_products() == []
        assert service.get_total_product_count() == 0


class TestProductServiceValidation:
    """Invalid records are rejected before persistence."""

    @pytest.mark.parametrize(
        "data",
        [
            {"price": 1, "category": "C"},
            {"name": "", "price": 1, "category": "C"},
            {"name": "   ", "price": 1, "category": "C"},
            {"name": "A", "category": "C"},
            {"name": "A", "price": -0.01, "category": "C"},
            {"name": "A", "price": 1},
            {"name": "A", "price": 1, "category": ""},
        ],
    )
    def test_invalid_product_is_rejected(self, service, data):
        with pytest.raises(ProductValidationError) as exc_info:
            service.add_product(data)

        assert exc_info.value.errors
        assert service.get_total_product_count() == 0

    def test_none_is_rejected(self, service):
        with pytest.raises(ProductValidationError):
            service.add_product(None)

    def test_zero_price_is_valid(self, service):
        assert service.add_product({"name": "Free", "price": 0, "category": "C"}).price == 0

    def test_invalid_update_leaves_record_unchanged(self, service):
        created = service.add_product({"name": "A", "price": 5, "category": "C"})

        with pytest.raises(ProductValidationError):
            service.update_product({"id": created.id, "name": "A", "price": -1, "category": "C"})

        assert service.get_product_by_id(created.id).price == Decimal("5")


class TestProductServiceQueries:
    """Filtering by name and category."""

    @pytest.fixture(autouse=True)
    def seeded(self, service):
        service.add_product({"name": "Green Apple", "price": 1, "category": "Category1"})
        service.add_product({"name": "Apple Pie", "price": 2, "category": "Category10"})
        service.add_product({"name": "Banana", "price": 3, "category": "Category1"})

    def test_get_products_by_name_substring(self, service):
        names = [p.name for p in service.get_products_by_name("Apple")]
        assert names == ["Green Apple", "Apple Pie"]

    def test_get_products_by_name_no_match(self, service):
        assert service.get_products_by_name("Cherry") == []

    def test_get_products_by_category_is_exact(self, service):
        products = service.get_products_by_category("Category1")

        assert [p.name for p in products] == ["Green Apple", "Banana"]
        assert all(p.category == "Category1" for p in products)

    def test_get_products_by_category_no_match(self, service):
        assert service.get_products_by_category("Category") == []

    def test_total_count(self, service):
        assert service.get_total_product_count() == 3


class TestProductServiceSorting:
    """Sorting loads the catalog and orders it in memory."""

    @pytest.fixture(autouse=True)
    def seeded(self, service):
        service.add_product({"name": "b", "price": 21, "category": "y"})
        service.add_product({"name": "c", "price": 20, "category": "x"})
        service.add_product({"name": "a", "price": 21, "category": "z"})

    def test_sort_by_price_ascending(self, service):
        prices = [p.price for p in service.sort_products_by_price("asc")]
        assert prices == sorted(prices)

    def test_sort_by_price_descending(self, service):
        prices = [p.price for p in service.sort_products_by_price("desc")]
        assert prices == sorted(prices, reverse=True)

    def test_sort_is_stable_for_equal_keys(self, service):
        assert [p.name for p in service.sort_products_by_price("asc")] == ["c", "b", "a"]
        assert [p.name for p in service.sort_products_by_price("desc")] == ["b", "a", "c"]

    def test_sort_by_name(self, service):
        assert [p.name for p in service.sort_products_by_name("asc")] == ["a", "b", "c"]
        assert [p.name for p in service.sort_products_by_name("DESC")] == ["c", "b", "a"]

    def test_sort_by_category(self, service):
        assert [p.category for p in service.sort_products_by_category("desc")] == ["z", "y", "x"]

    @pytest.mark.parametrize("sort_order", [None, "", "asc", "ASC", "descending", "up"])
    def test_anything_but_desc_sorts_ascending(self, service, sort_order):
        assert [p.name for p in service.sort_products_by_name(sort_order)] == ["a", "b", "c"]

    def test_sort_products_dispatches_case_insensitively(self, service):
        assert [p.category for p in service.sort_products("Category", "asc")] == ["x", "y", "z"]

    @pytest.mark.parametrize("sort_by", [None, "", "id", "description"])
    def test_sort_products_rejects_unknown_field(self, service, sort_by):
        with pytest.raises(InvalidSortFieldError):
            service.sort_products(sort_by, "asc")
