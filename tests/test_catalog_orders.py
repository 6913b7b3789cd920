import unittest

from sqlalchemy.orm import sessionmaker

from app.core.errors import DuplicateItem
from app.database import build_engine, init_schema
from app.schemas.inventory import InventoryCreate
from app.schemas.order import OrderCreate, OrderRead
from app.services.catalog_service import add_catalog_item, list_catalog_items
from app.services.dashboard_service import dashboard_stats
from app.services.inventory_service import add_inventory_item
from app.services.order_service import create_order, list_orders


class ServiceTestCase(unittest.TestCase):
    def setUp(self):
        self.engine = build_engine("sqlite:///:memory:")
        init_schema(self.engine)
        self.db = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)()

    def tearDown(self):
        self.db.close()
        self.engine.dispose()


class CatalogServiceTest(ServiceTestCase):
    def test_new_name_appears_in_list(self):
        add_catalog_item(self.db, "Idli")
        add_catalog_item(self.db, "Dosa")

        self.assertEqual([item.name for item in list_catalog_items(self.db)], ["Idli", "Dosa"])

    def test_duplicate_name_is_rejected(self):
        add_catalog_item(self.db, "Idli")

        with self.assertRaises(DuplicateItem) as ctx:
            add_catalog_item(self.db, "Idli")

        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(len(list_catalog_items(self.db)), 1)


class OrderServiceTest(ServiceTestCase):
    def test_create_keeps_line_order_and_defaults_date(self):
        payload = OrderCreate(
            items=[
                {"itemName": "Masala Dosa", "quantity": 2, "price": 80},
                {"itemName": "Filter Coffee", "quantity": 1, "price": 30},
            ],
            totalAmount=190,
        )

        order = create_order(self.db, payload)

        self.assertIsNotNone(order.date)
        self.assertEqual(order.items[0], {"itemName": "Masala Dosa", "quantity": 2.0, "price": 80.0})
        self.assertEqual(order.items[1]["itemName"], "Filter Coffee")

    def test_list_returns_all_orders(self):
        create_order(self.db, OrderCreate(items=[], totalAmount=0))
        create_order(self.db, OrderCreate(items=[{"itemName": "Vada", "quantity": 3, "price": 20}], totalAmount=60))

        orders = [OrderRead.model_validate(order) for order in list_orders(self.db)]

        self.assertEqual([order.total_amount for order in orders], [0, 60])
        self.assertEqual(orders[1].items[0].item_name, "Vada")
        self.assertIsNotNone(orders[1].date.tzinfo)


class DashboardServiceTest(ServiceTestCase):
    def test_counts_inventory_and_orders(self):
        self.assertEqual(dashboard_stats(self.db), {"inventory_count": 0, "order_count": 0})

        add_inventory_item(self.db, InventoryCreate(itemName="Rice", stockTaken=1, totalStock=2))
        add_inventory_item(self.db, InventoryCreate(itemName="Dal", stockTaken=1, totalStock=2))
        create_order(self.db, OrderCreate(items=[], totalAmount=0))

        self.assertEqual(dashboard_stats(self.db), {"inventory_count": 2, "order_count": 1})


if __name__ == "__main__":
    unittest.main()
