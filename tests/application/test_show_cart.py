"""Tests for the Show Cart query."""

from bevshop.application.show_cart import ShowCartHandler
from bevshop.domain.model.cart import Cart
from tests.fakes import sample_catalog


class TestShowCart:

    def test_empty_cart(self):
        summary = ShowCartHandler(sample_catalog()).handle(Cart.empty(5))
        assert summary.is_empty
        assert summary.lines == []
        assert summary.total == "€0.00"

    def test_only_non_zero_entries_in_catalog_order(self):
        summary = ShowCartHandler(sample_catalog()).handle(Cart((0, 0, 1, 0, 2)))
        assert [line.name for line in summary.lines] == ["Fritz-Kola", "Beer"]

    def test_line_formatting(self):
        summary = ShowCartHandler(sample_catalog()).handle(Cart((0, 2, 0, 0, 0)))
        line = summary.lines[0]
        assert line.quantity == 2
        assert line.unit_price == "€1.00"
        assert line.line_total == "€2.00"

    def test_total_is_sum_of_line_totals(self):
        # 3 x 1.50 = 4.50 and 5 x 0.50 = 2.50
        summary = ShowCartHandler(sample_catalog()).handle(Cart((3, 0, 0, 5, 0)))
        assert [line.line_total for line in summary.lines] == ["€4.50", "€2.50"]
        assert summary.total == "€7.00"
        assert not summary.is_empty
