"""Tests for cart reconciliation through the facade."""

import pytest


class TestAddToCart:
    def test_first_add_creates_line_with_quantity_one(self, facade, phone):
        item = facade.add_to_cart(phone)

        assert item.product_id == "1"
        assert item.product_name == "Smartphone Galaxy"
        assert item.product_price == 299.99
        assert item.product_image_url == "file:///images/test1.webp"
        assert item.quantity == 1

    @pytest.mark.parametrize("n", [1, 2, 5])
    def test_repeated_adds_merge_into_one_line(self, facade, phone, n):
        for _ in range(n):
            facade.add_to_cart(phone)

        lines = facade.get_cart_lines().get()
        assert len(lines) == 1
        assert lines[0].quantity == n

    def test_repeat_add_keeps_snapshot_fields(self, facade, phone):
        facade.add_to_cart(phone)
        changed = phone.model_copy(update={"price": 1.0, "name": "Renamed"})
        item = facade.add_to_cart(changed)

        assert item.quantity == 2
        assert item.product_price == 299.99
        assert item.product_name == "Smartphone Galaxy"

    def test_products_get_separate_lines(self, facade, phone, laptop):
        facade.add_to_cart(phone)
        facade.add_to_cart(laptop)
        facade.add_to_cart(laptop)

        lines = {line.product_id: line.quantity for line in facade.get_cart_lines().get()}
        assert lines == {"1": 1, "2": 2}


class TestAddQuantity:
    def test_add_n_sums_units(self, facade, phone):
        facade.add_to_cart(phone)
        item = facade.add_to_cart_quantity(phone, 3)

        assert item.quantity == 4

    def test_add_zero_writes_nothing(self, facade, phone):
        assert facade.add_to_cart_quantity(phone, 0) is None
        assert facade.get_cart_lines().get() == []

    def test_add_n_notifies_once_per_unit(self, facade, phone):
        seen = []
        sub = facade.get_cart_lines().subscribe(
            lambda lines: seen.append([line.quantity for line in lines])
        )
        try:
            facade.add_to_cart_quantity(phone, 3)
        finally:
            sub.close()

        # Initial snapshot + one per unit
        assert seen == [[], [1], [2], [3]]


class TestSetQuantity:
    def test_overwrites_quantity(self, facade, phone):
        facade.add_to_cart(phone)
        item = facade.set_cart_line_quantity("1", 7)

        assert item.quantity == 7
        assert item.product_name == "Smartphone Galaxy"

    @pytest.mark.parametrize("quantity", [0, -1, -50])
    def test_zero_or_negative_deletes_line(self, facade, phone, quantity):
        facade.add_to_cart(phone)

        assert facade.set_cart_line_quantity("1", quantity) is None
        assert facade.get_cart_lines().get() == []

    @pytest.mark.parametrize("quantity", [0, -1, 3])
    def test_missing_line_is_noop(self, facade, quantity):
        assert facade.set_cart_line_quantity("404", quantity) is None
        assert facade.get_cart_lines().get() == []


class TestRemoveAndClear:
    def test_remove_present_line(self, facade, phone, laptop):
        facade.add_to_cart(phone)
        facade.add_to_cart(laptop)

        assert facade.remove_cart_line("1") is True
        assert [line.product_id for line in facade.get_cart_lines().get()] == ["2"]

    def test_remove_missing_line_is_noop(self, facade):
        assert facade.remove_cart_line("404") is False

    def test_clear_deletes_everything(self, facade, phone, laptop):
        facade.add_to_cart(phone)
        facade.add_to_cart(laptop)

        facade.clear_cart()

        assert facade.get_cart_lines().get() == []

    def test_clear_empty_cart(self, facade):
        facade.clear_cart()
        assert facade.get_cart_lines().get() == []


class TestCartSummary:
    def test_totals(self, facade, phone, laptop):
        facade.add_to_cart_quantity(phone, 2)
        facade.add_to_cart(laptop)

        summary = facade.get_cart_summary()

        assert summary.total_quantity == 3
        assert summary.total_price == pytest.approx(1899.97)
        line_totals = {it.product_id: it.line_total for it in summary.items}
        assert line_totals["1"] == pytest.approx(599.98)

    def test_empty_summary(self, facade):
        summary = facade.get_cart_summary()
        assert summary.items == []
        assert summary.total_quantity == 0
        assert summary.total_price == 0.0


def test_full_cart_lifecycle(facade, phone):
    facade.add_to_cart(phone)
    facade.add_to_cart(phone)
    lines = facade.get_cart_lines().get()
    assert [(line.product_id, line.quantity) for line in lines] == [("1", 2)]

    facade.set_cart_line_quantity("1", 1)
    assert facade.get_cart_lines().get()[0].quantity == 1

    facade.remove_cart_line("1")
    assert facade.get_cart_lines().get() == []

    facade.clear_cart()
    assert facade.get_cart_lines().get() == []
