import unittest

from sqlalchemy import select
from sqlalchemy.orm import sessionmaker

from app.database import build_engine, init_schema, session_scope
from app.models.catalog_item import CatalogItem


class SessionScopeTest(unittest.TestCase):
    def setUp(self):
        self.engine = build_engine("sqlite:///:memory:")
        init_schema(self.engine)
        self.factory = sessionmaker(bind=self.engine, autoflush=False, expire_on_commit=False)

    def tearDown(self):
        self.engine.dispose()

    def _names(self):
        db = self.factory()
        try:
            return list(db.execute(select(CatalogItem.name)).scalars())
        finally:
            db.close()

    def test_commits_on_success(self):
        with session_scope(self.factory) as db:
            db.add(CatalogItem(name="Idli"))

        self.assertEqual(self._names(), ["Idli"])

    def test_rolls_back_on_error(self):
        with self.assertRaises(RuntimeError):
            with session_scope(self.factory) as db:
                db.add(CatalogItem(name="Idli"))
                db.flush()
                raise RuntimeError("boom")

        self.assertEqual(self._names(), [])


if __name__ == "__main__":
    unittest.main()
