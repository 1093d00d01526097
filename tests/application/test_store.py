"""Behavioural tests for the BusinessStore facade."""

import threading
from datetime import date
from decimal import Decimal

import pytest

from bizdash.domain.exceptions import EntityNotFoundError, InsufficientStockError
from bizdash.domain.model.session import Theme
from bizdash.domain.service.authentication import ADMIN_USER
from tests.fakes import TODAY, make_product, make_sale, make_store


def _sale_args(product_id="1", quantity=5, total=500, discount=0):
    return dict(
        date=TODAY,
        product_id=product_id,
        product_name="Premium A",
        quantity=quantity,
        unit_price=100,
        discount=discount,
        total=total,
    )


class TestStoreProducts:

    def test_add_many_unique_ids(self):
        store, _ = make_store()
        added = [store.add_product(f"C{i}", f"Item {i}", 1, 2, 3) for i in range(50)]
        assert len({p.id for p in added}) == 50
        assert len(store.products) == 50

    def test_products_are_snapshots(self):
        store, _ = make_store([make_product(id="1", stock=150)])
        snapshot = store.products
        snapshot[0].stock = 0
        assert store.get_product("1").stock == 150

    def test_update_product_with_keyword_patch(self):
        store, _ = make_store([make_product(id="1")])
        store.update_product("1", name="Velvet Lipstick", status="inactive")
        product = store.get_product("1")
        assert product.name == "Velvet Lipstick"
        assert not product.is_active

    def test_update_unknown_is_silent_by_default(self):
        store, _ = make_store([make_product(id="1")])
        assert store.update_product("404", stock=1) is None

    def test_strict_mode_raises(self):
        store, _ = make_store([make_product(id="1")], strict=True)
        with pytest.raises(EntityNotFoundError):
            store.update_product("404", stock=1)
        with pytest.raises(EntityNotFoundError):
            store.delete_product("404")
        with pytest.raises(EntityNotFoundError):
            store.delete_document("404")

    def test_delete_keeps_sales(self):
        store, _ = make_store([make_product(id="1")], [make_sale(id="1", product_id="1")])
        assert store.delete_product("1") is True
        assert [s.product_id for s in store.sales] == ["1"]


class TestStoreSales:

    def test_scenario_stock_and_profit(self):
        store, _ = make_store([make_product(id="1", cost="50", price="100", stock=150)])
        sale = store.add_sale(**_sale_args())
        assert store.get_product("1").stock == 145
        assert store.profit_of(sale) == Decimal("250")

    def test_sale_against_deleted_product(self):
        store, _ = make_store([
            make_product(id="1", stock=150),
            make_product(id="2", code="PROD-002", stock=200),
        ])
        store.delete_product("1")
        sale = store.add_sale(**_sale_args(product_id="1"))
        assert store.sales[0] is sale
        assert sale.total == Decimal("500")
        assert store.get_product("2").stock == 200

    def test_sales_newest_first(self):
        store, _ = make_store([make_product(id="1")], [make_sale(id="1")])
        sale = store.add_sale(**_sale_args())
        assert [s.id for s in store.sales] == [sale.id, "1"]
        assert sale.id == "2"

    def test_enforced_stock(self):
        store, _ = make_store([make_product(id="1", stock=3)], enforce_stock=True)
        with pytest.raises(InsufficientStockError):
            store.add_sale(**_sale_args(quantity=4, total=400))
        assert store.sales == []
        assert store.get_product("1").stock == 3

    def test_sell_uses_clock(self):
        store, clock = make_store([make_product(id="1", price="100", stock=10)])
        clock.set(date(2025, 12, 1))
        sale = store.sell("1", 2, discount="20")
        assert sale.date == date(2025, 12, 1)
        assert sale.total == Decimal("180")
        assert store.get_product("1").stock == 8

    def test_discount_above_subtotal_recorded_with_negative_total(self):
        store, _ = make_store([make_product(id="1", cost="50", stock=10)])
        sale = store.add_sale(**_sale_args(quantity=1, discount=110, total=-10))
        assert store.sales == [sale]
        assert sale.total == Decimal("-10")
        assert store.get_product("1").stock == 9
        assert store.profit_of(sale) == Decimal("-60")
        assert store.search_sales().sales[0].total == "-$10.00"

    def test_concurrent_sales_never_lose_stock_updates(self):
        store, _ = make_store([make_product(id="1", stock=1000)])

        def sell_many():
            for _ in range(50):
                store.add_sale(**_sale_args(quantity=1, total=100))

        threads = [threading.Thread(target=sell_many) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert len(store.sales) == 400
        assert store.get_product("1").stock == 600
        assert len({s.id for s in store.sales}) == 400


class TestStoreDocuments:

    def test_add_and_delete(self):
        store, _ = make_store()
        doc = store.add_document("catalogue.pdf", "blob:9", "application/pdf")
        assert doc.date == TODAY
        assert store.documents == [doc]
        assert store.delete_document(doc.id) is True
        assert store.documents == []


class TestStoreSession:

    def test_login_success(self):
        store, _ = make_store()
        assert store.login("admin@empresa.com", "admin123") is True
        assert store.user == ADMIN_USER

    def test_login_failure_leaves_user_unset(self):
        store, _ = make_store()
        assert store.login("x", "y") is False
        assert store.user is None

    def test_logout(self):
        store, _ = make_store()
        store.login("admin@empresa.com", "admin123")
        store.logout()
        assert store.user is None

    def test_settings(self):
        store, _ = make_store()
        assert store.theme == Theme.DARK
        assert store.toggle_theme() == Theme.LIGHT
        assert store.theme == Theme.LIGHT
        store.update_currency("€")
        store.update_company_logo("blob:logo")
        assert store.currency == "€"
        assert store.company_logo == "blob:logo"

    def test_session_is_a_snapshot(self):
        store, _ = make_store()
        session = store.session
        session.currency = "€"
        session.user = ADMIN_USER
        assert store.currency == "$"
        assert store.user is None


class TestStoreReports:

    def test_reports_follow_currency(self):
        store, _ = make_store(
            [make_product(id="1", name="Premium A", cost="50")],
            [make_sale(id="1", product_id="1", quantity=5, total="500")],
        )
        store.update_currency("€")
        summary = store.summary()
        assert summary.total_revenue == "€500.00"
        assert summary.total_profit == "€250.00"
        assert summary.best_product == "Premium A"

    def test_chart_reflects_new_sales(self):
        store, _ = make_store([make_product(id="1", cost="50")])
        assert store.chart("day", 1)[0].revenue == "$0.00"
        store.add_sale(**_sale_args())
        assert store.chart("day", 1)[0].revenue == "$500.00"

    def test_snapshot_cost_profit(self):
        store, _ = make_store([make_product(id="1", cost="50")], use_snapshot_cost=True)
        sale = store.add_sale(**_sale_args())
        store.update_product("1", cost_price="90")
        assert store.profit_of(sale) == Decimal("250")

    def test_live_cost_profit_by_default(self):
        store, _ = make_store([make_product(id="1", cost="50")])
        sale = store.add_sale(**_sale_args())
        store.update_product("1", cost_price="90")
        assert store.profit_of(sale) == Decimal("50")
