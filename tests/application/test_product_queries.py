"""Tests for the product read use cases: list, show, edit and the new-product form."""

from datetime import datetime, timedelta, timezone

import pytest

from catalog.application.edit_product import EditProductHandler
from catalog.application.list_products import PAGE_SIZE, ListProductsHandler
from catalog.application.new_product_form import NewProductFormHandler
from catalog.application.show_product import ShowProductHandler
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.model.category import Category
from catalog.domain.model.product import Product
from catalog.domain.model.user import User
from catalog.domain.model.value_objects import Money
from tests.fakes import FakeCategoryRepository, FakeProductRepository, FakeUserRepository

_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


def _setup(per_category: dict[int, int]):
    """Insert products with increasing timestamps; categories #1 Tools, #2 Garden."""
    users = FakeUserRepository([User(id=None, name="Alice", email="alice@example.com")])
    categories = FakeCategoryRepository([
        Category(id=None, title="Tools"),
        Category(id=None, title="Garden"),
    ])
    products = FakeProductRepository(categories, users)

    n = 0
    for category_id, count in per_category.items():
        for _ in range(count):
            n += 1
            products.insert(Product(
                id=None,
                title=f"Item {n}",
                price=Money.of("1.00"),
                category_id=category_id,
                user_id=1,
                created_at=_START + timedelta(minutes=n),
            ))
    return products, categories


class TestListProducts:

    def test_first_page_is_full_and_newest_first(self):
        products, _ = _setup({1: 13})
        page = ListProductsHandler(products).handle(1)

        assert len(page.items) == PAGE_SIZE == 12
        assert page.items[0].title == "Item 13"
        assert [p.title for p in page.items] == [f"Item {n}" for n in range(13, 1, -1)]
        assert page.total == 13
        assert page.last_page == 2
        assert page.has_more

    def test_second_page_holds_the_rest(self):
        products, _ = _setup({1: 13})
        page = ListProductsHandler(products).handle(2)
        assert [p.title for p in page.items] == ["Item 1"]
        assert not page.has_more

    def test_owner_and_category_are_attached(self):
        products, _ = _setup({2: 1})
        item = ListProductsHandler(products).handle().items[0]
        assert item.owner.name == "Alice"
        assert item.category.title == "Garden"

    def test_empty_catalog_is_a_valid_page(self):
        products, _ = _setup({})
        page = ListProductsHandler(products).handle()
        assert page.items == []
        assert page.total == 0
        assert page.last_page == 1

    def test_page_below_one_is_served_as_first_page(self):
        products, _ = _setup({1: 3})
        page = ListProductsHandler(products).handle(0)
        assert page.page == 1
        assert len(page.items) == 3


class TestShowProduct:

    def test_related_products_share_category_and_exclude_self(self):
        products, _ = _setup({1: 6, 2: 2})
        detail = ShowProductHandler(products).handle(3)

        assert detail.product.id == 3
        assert len(detail.related) == 4
        assert all(r.category_id == 1 for r in detail.related)
        assert all(r.id != 3 for r in detail.related)

    def test_fewer_related_when_category_is_small(self):
        products, _ = _setup({1: 6, 2: 2})
        detail = ShowProductHandler(products).handle(7)
        assert [r.id for r in detail.related] == [8]

    def test_alone_in_category_has_no_related(self):
        products, _ = _setup({1: 1})
        assert ShowProductHandler(products).handle(1).related == []

    def test_owner_and_category_are_attached(self):
        products, _ = _setup({1: 1})
        product = ShowProductHandler(products).handle(1).product
        assert product.owner.email == "alice@example.com"
        assert product.category.title == "Tools"

    def test_unknown_product_rejected(self):
        products, _ = _setup({1: 1})
        with pytest.raises(EntityNotFoundError, match="Product #5 not found"):
            ShowProductHandler(products).handle(5)


class TestEditProduct:

    def test_returns_product_and_categories_by_title(self):
        products, categories = _setup({1: 1})
        form = EditProductHandler(products, categories).handle(1)

        assert form.product.id == 1
        assert [c.title for c in form.categories] == ["Garden", "Tools"]

    def test_unknown_product_rejected(self):
        products, categories = _setup({})
        with pytest.raises(EntityNotFoundError):
            EditProductHandler(products, categories).handle(1)


class TestNewProductForm:

    def test_lists_categories_by_title(self):
        _, categories = _setup({})
        form = NewProductFormHandler(categories).handle()
        assert [c.title for c in form.categories] == ["Garden", "Tools"]
        assert not form.needs_category
        assert form.product is None

    def test_asks_for_a_category_when_there_is_none(self):
        form = NewProductFormHandler(FakeCategoryRepository()).handle()
        assert form.needs_category
