"""Integration tests for the search and report queries."""

from datetime import date

import pytest

from bizdash.domain.exceptions import ValidationError
from bizdash.domain.model.product import ProductStatus
from tests.fakes import TODAY, make_product, make_sale, make_store


def _store():
    products = [
        make_product(id="1", code="PROD-001", name="Premium A", cost="50", price="100", stock=150),
        make_product(id="2", code="PROD-002", name="Standard B", cost="30", price="60", stock=20),
        make_product(id="3", code="LIP-010", name="Gloss", stock=5, status=ProductStatus.INACTIVE),
    ]
    sales = [
        make_sale(id="2", day=date(2025, 11, 11), product_id="2", product_name="Standard B",
                  quantity=10, unit_price="60", discount="5"),
        make_sale(id="1", day=TODAY, product_id="1", product_name="Premium A", quantity=5),
    ]
    store, _ = make_store(products, sales)
    return store


class TestSearchProducts:

    def test_matches_name_or_code_case_insensitively(self):
        store = _store()
        assert [p.id for p in store.search_products("premium")] == ["1"]
        assert [p.id for p in store.search_products("lip-")] == ["3"]

    def test_status_filter(self):
        store = _store()
        assert [p.id for p in store.search_products(status="inactive")] == ["3"]
        assert [p.id for p in store.search_products(status=ProductStatus.ACTIVE)] == ["1", "2"]

    def test_invalid_status(self):
        with pytest.raises(ValidationError):
            _store().search_products(status="archived")

    def test_low_stock(self):
        store = _store()
        rows = store.search_products(low_stock_only=True)
        assert [p.id for p in rows] == ["2", "3"]
        assert all(p.low_stock for p in rows)

    def test_formats_prices(self):
        row = _store().search_products("Standard")[0]
        assert row.cost_price == "$30.00"
        assert row.sale_price == "$60.00"
        assert row.status == "active"


class TestSearchSales:

    def test_all_sales_with_footer(self):
        listing = _store().search_sales()
        assert [s.id for s in listing.sales] == ["2", "1"]
        assert listing.total_amount == "$1095.00"
        assert listing.items_sold == 15

    def test_filter_by_name_and_date(self):
        store = _store()
        assert [s.id for s in store.search_sales("standard").sales] == ["2"]
        listing = store.search_sales(on=TODAY)
        assert [s.id for s in listing.sales] == ["1"]
        assert listing.total_amount == "$500.00"

    def test_discount_display(self):
        rows = {s.id: s for s in _store().search_sales().sales}
        assert rows["2"].discount == "$5.00"
        assert rows["1"].discount == "-"


class TestReports:

    def test_chart_defaults(self):
        store = _store()
        assert len(store.chart("day")) == 7
        assert len(store.chart("week")) == 4
        assert len(store.chart("month")) == 12
        assert len(store.chart("year")) == 3

    def test_chart_unknown_period(self):
        with pytest.raises(ValidationError, match="Unknown period"):
            _store().chart("decade")

    def test_chart_values(self):
        last_two_days = _store().chart("day", 2)
        assert [b.label for b in last_two_days] == ["2025-11-11", "2025-11-12"]
        assert [b.revenue for b in last_two_days] == ["$595.00", "$500.00"]
        assert [b.profit for b in last_two_days] == ["$295.00", "$250.00"]

    def test_negative_profit_formatting(self):
        store, _ = make_store(
            [make_product(id="1", cost="90")],
            [make_sale(id="1", product_id="1", quantity=1, total="50")],
        )
        assert store.chart("day", 1)[0].profit == "-$40.00"

    def test_product_revenue(self):
        rows = _store().product_revenue()
        assert [(r.name, r.value) for r in rows] == [
            ("Premium A", "$500.00"),
            ("Standard B", "$595.00"),
            ("Gloss", "$0.00"),
        ]

    def test_top_products(self):
        rows = _store().product_revenue(top=2)
        assert [r.name for r in rows] == ["Standard B", "Premium A"]

    def test_summary(self):
        summary = _store().summary()
        assert summary.total_revenue == "$1095.00"
        assert summary.total_profit == "$545.00"
        assert summary.profit_margin == "49.77%"
        assert summary.sales_count == 2
        assert summary.best_product == "Standard B"
        assert summary.best_product_quantity == 10

    def test_summary_with_no_sales(self):
        store, _ = make_store([make_product(id="1")])
        summary = store.summary()
        assert summary.best_product == "N/A"
        assert summary.profit_margin == "0.00%"
