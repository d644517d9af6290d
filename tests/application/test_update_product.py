"""Integration tests for the UpdateProduct use case."""

import pytest

from catalog.application.create_product import CreateProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.category import Category
from catalog.domain.model.user import User
from catalog.domain.model.value_objects import Money
from tests.fakes import (
    FakeCategoryRepository,
    FakeFileStore,
    FakeProductRepository,
    FakeUserRepository,
    png,
)

FIELDS = {"title": "Widget", "price": "9.99", "category_id": 1}


def _setup(with_image: bool = True):
    """Create one product (optionally with an image) and clear the journal."""
    journal: list = []
    users = FakeUserRepository([User(id=None, name="Alice", email="alice@example.com")])
    categories = FakeCategoryRepository([
        Category(id=None, title="Tools"),
        Category(id=None, title="Garden"),
    ])
    products = FakeProductRepository(categories, users, journal)
    store = FakeFileStore(journal)

    create = CreateProductHandler(products, categories, store)
    product = create.handle(FIELDS, actor_id=1, image=png("old.png") if with_image else None)
    journal.clear()

    handler = UpdateProductHandler(products, categories, store)
    return handler, products, store, product


class TestUpdateProductFields:

    def test_fields_are_overwritten(self):
        handler, products, _, product = _setup()
        handler.handle(product.id, {"title": "Gizmo", "price": "19.50", "category_id": 2})

        saved = products.get_by_id(product.id)
        assert saved.title == "Gizmo"
        assert saved.price == Money.of("19.50")
        assert saved.category.title == "Garden"

    def test_owner_is_unchanged(self):
        handler, products, _, product = _setup()
        handler.handle(product.id, FIELDS)
        assert products.get_by_id(product.id).user_id == 1

    def test_without_image_keeps_existing_reference(self):
        handler, products, store, product = _setup()
        handler.handle(product.id, {**FIELDS, "title": "Renamed"})

        assert products.get_by_id(product.id).image == product.image
        assert store.calls == []
        assert store.exists(product.image)


class TestUpdateProductImage:

    def test_old_image_deleted_before_new_one_is_stored(self):
        handler, products, store, product = _setup()
        old_path = product.image

        updated = handler.handle(product.id, FIELDS, image=png("new.png"))

        assert store.calls == [("delete", old_path), ("put", updated.image)]
        assert updated.image != old_path
        assert products.get_by_id(product.id).image == updated.image
        assert not store.exists(old_path)
        assert store.exists(updated.image)

    def test_first_image_is_only_stored(self):
        handler, _, store, product = _setup(with_image=False)
        updated = handler.handle(product.id, FIELDS, image=png())
        assert store.calls == [("put", updated.image)]

    def test_failed_delete_does_not_stop_the_update(self):
        handler, products, store, product = _setup()
        store.fail_deletes = True

        updated = handler.handle(product.id, FIELDS, image=png("new.png"))

        assert store.calls == [("delete", product.image), ("put", updated.image)]
        assert products.get_by_id(product.id).image == updated.image

    def test_missing_old_file_does_not_stop_the_update(self):
        handler, products, store, product = _setup()
        store.files.clear()

        updated = handler.handle(product.id, FIELDS, image=png("new.png"))
        assert products.get_by_id(product.id).image == updated.image


class TestUpdateProductValidation:

    def test_unknown_product_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            handler.handle(999, FIELDS)

    def test_invalid_fields_leave_product_and_files_untouched(self):
        handler, products, store, product = _setup()
        with pytest.raises(ValidationError):
            handler.handle(product.id, {**FIELDS, "price": "1000000.00"}, image=png())

        saved = products.get_by_id(product.id)
        assert saved.price == Money.of("9.99")
        assert saved.image == product.image
        assert store.calls == []
        assert store.exists(product.image)

    def test_unknown_category_rejected(self):
        handler, _, _, product = _setup()
        with pytest.raises(ValidationError, match="selected category is invalid"):
            handler.handle(product.id, {**FIELDS, "category_id": 99})
