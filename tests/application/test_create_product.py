"""Integration tests for the CreateProduct use case.

Uses in-memory fakes: no database, no disk.
"""

import pytest

from catalog.application.create_product import CreateProductHandler
from catalog.application.show_product import ShowProductHandler
from catalog.domain.exceptions import StorageError, ValidationError
from catalog.domain.model.category import Category
from catalog.domain.model.user import User
from catalog.domain.model.value_objects import ImageUpload, Money
from tests.fakes import (
    PNG_BYTES,
    FakeCategoryRepository,
    FakeFileStore,
    FakeProductRepository,
    FakeUserRepository,
    png,
)


def _setup():
    """Build handler with fakes: user #1 Alice, categories #1 Tools and #2 Garden."""
    journal: list = []
    users = FakeUserRepository([User(id=None, name="Alice", email="alice@example.com")])
    categories = FakeCategoryRepository([
        Category(id=None, title="Tools"),
        Category(id=None, title="Garden"),
    ])
    products = FakeProductRepository(categories, users, journal)
    store = FakeFileStore(journal)
    handler = CreateProductHandler(products, categories, store)
    return handler, products, store, journal


def _widget(**overrides):
    fields = {"title": "Widget", "price": "9.99", "category_id": 1}
    fields.update(overrides)
    return fields


class TestCreateProductHappyPath:

    def test_creates_product_without_image(self):
        handler, products, store, _ = _setup()
        product = handler.handle(_widget(), actor_id=1)

        assert product.id == 1
        assert product.image is None
        assert store.calls == []
        assert products.get_by_id(product.id).image is None

    def test_show_returns_the_submitted_fields(self):
        handler, products, _, _ = _setup()
        created = handler.handle(
            _widget(description="A very useful widget", category_id=2), actor_id=1
        )

        shown = ShowProductHandler(products).handle(created.id).product
        assert shown.title == "Widget"
        assert shown.description == "A very useful widget"
        assert shown.price == Money.of("9.99")
        assert shown.category_id == 2
        assert shown.category.title == "Garden"

    def test_owner_is_the_actor(self):
        handler, products, _, _ = _setup()
        product = handler.handle(_widget(), actor_id=1)

        assert product.user_id == 1
        assert products.get_by_id(product.id).owner.name == "Alice"

    def test_image_is_stored_under_products(self):
        handler, _, store, _ = _setup()
        product = handler.handle(_widget(), actor_id=1, image=png())

        assert product.image.startswith("products/")
        assert product.image.endswith(".png")
        assert store.files[product.image] == PNG_BYTES
        assert store.calls == [("put", product.image)]

    def test_image_is_stored_before_the_record_is_inserted(self):
        handler, _, _, journal = _setup()
        product = handler.handle(_widget(), actor_id=1, image=png())
        assert journal == [("put", product.image), ("insert", product.id)]

    def test_fields_are_sanitized(self):
        handler, _, _, _ = _setup()
        product = handler.handle(
            _widget(title="  Widget  ", description="   ", user_id=99), actor_id=1
        )
        assert product.title == "Widget"
        assert product.description is None
        assert product.user_id == 1

    def test_price_bounds_are_inclusive(self):
        handler, _, _, _ = _setup()
        assert handler.handle(_widget(price="0"), actor_id=1).price == Money.of("0")
        top = handler.handle(_widget(price="999999.99"), actor_id=1)
        assert top.price == Money.of("999999.99")

    def test_image_at_size_limit_is_accepted(self):
        handler, _, _, _ = _setup()
        content = PNG_BYTES + b"\x00" * (2048 * 1024 - len(PNG_BYTES))
        image = ImageUpload(filename="big.png", content=content)
        assert handler.handle(_widget(), actor_id=1, image=image).image is not None


class TestCreateProductValidation:

    def test_price_above_maximum_rejected(self):
        handler, _, _, journal = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(price="1000000.00"), actor_id=1)
        assert "less than or equal to 999999.99" in info.value.errors["price"][0]
        assert journal == []

    def test_negative_price_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(price="-0.01"), actor_id=1)
        assert list(info.value.errors) == ["price"]

    def test_non_numeric_price_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(price="cheap"), actor_id=1)
        assert "price" in info.value.errors

    def test_missing_title_rejected(self):
        handler, _, _, _ = _setup()
        fields = _widget()
        del fields["title"]
        with pytest.raises(ValidationError) as info:
            handler.handle(fields, actor_id=1)
        assert "title" in info.value.errors

    def test_title_longer_than_255_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(title="x" * 256), actor_id=1)
        assert "title" in info.value.errors

    def test_description_longer_than_2000_rejected(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(description="x" * 2001), actor_id=1)
        assert "description" in info.value.errors

    def test_unknown_category_rejected(self):
        handler, products, _, _ = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(category_id=42), actor_id=1)
        assert info.value.errors == {"category_id": ["The selected category is invalid."]}
        assert products.find_page(1, 12) == ([], 0)

    def test_all_problems_reported_together(self):
        handler, _, _, _ = _setup()
        with pytest.raises(ValidationError) as info:
            handler.handle({"title": "", "price": "abc", "category_id": 42}, actor_id=1)
        assert {"title", "price", "category_id"} <= set(info.value.errors)

    def test_non_image_file_rejected_without_storing(self):
        handler, _, store, journal = _setup()
        notes = ImageUpload(filename="notes.png", content=b"just some text")
        with pytest.raises(ValidationError) as info:
            handler.handle(_widget(), actor_id=1, image=notes)
        assert info.value.errors["image"] == ["The image field must be an image."]
        assert store.files == {}
        assert journal == []

    def test_unsupported_image_type_rejected(self):
        handler, _, _, _ = _setup()
        bitmap = ImageUpload(filename="old.bmp", content=b"BM" + b"\x00" * 32)
        with pytest.raises(ValidationError, match="must be a file of type: jpeg, png, jpg, gif, webp"):
            handler.handle(_widget(), actor_id=1, image=bitmap)

    def test_image_over_2048_kilobytes_rejected(self):
        handler, _, _, _ = _setup()
        content = PNG_BYTES + b"\x00" * (2048 * 1024)
        with pytest.raises(ValidationError, match="not be greater than 2048 kilobytes"):
            handler.handle(_widget(), actor_id=1, image=ImageUpload("huge.png", content))


class TestCreateProductStorageFailure:

    def test_storage_error_propagates_and_nothing_is_inserted(self):
        handler, products, store, _ = _setup()
        store.fail_puts = True
        with pytest.raises(StorageError):
            handler.handle(_widget(), actor_id=1, image=png())
        assert products.find_page(1, 12) == ([], 0)
