"""HTTP contract tests for provider type and provider routes."""

from __future__ import annotations

import json
import unittest
from unittest.mock import patch

from fastapi.testclient import TestClient
from sqlalchemy import create_engine, delete
from sqlalchemy.exc import OperationalError
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.config import get_settings
from app.db.dependencies import get_db
from app.main import app
from app.models.base import Base
from app.models.provider import Provider
from app.models.provider_type import ProviderType


class ProviderApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.engine = create_engine(
            "sqlite+pysqlite:///:memory:",
            future=True,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
        cls.SessionLocal = sessionmaker(bind=cls.engine, autoflush=False, autocommit=False, future=True)
        Base.metadata.create_all(cls.engine)

        def _override_get_db():
            db = cls.SessionLocal()
            try:
                yield db
            finally:
                db.close()

        app.dependency_overrides[get_db] = _override_get_db
        cls.client = TestClient(app)

    @classmethod
    def tearDownClass(cls) -> None:
        app.dependency_overrides.pop(get_db, None)
        Base.metadata.drop_all(cls.engine)
        cls.engine.dispose()

    def setUp(self) -> None:
        with self.SessionLocal() as db:
            db.execute(delete(Provider))
            db.execute(delete(ProviderType))
            db.commit()

    def test_health(self) -> None:
        response = self.client.get("/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["status"], "ok")

    def test_provider_type_lifecycle(self) -> None:
        created = self._create_hotel_type()
        self.assertEqual(created["name"], "hotel")
        stars = created["attribute_schema"]["stars"]
        self.assertEqual((stars["kind"], stars["min"], stars["max"]), ("number", 1.0, 5.0))

        duplicate = self.client.post("/provider-types", json={"name": "hotel", "label": "Hotel bis"})
        self.assertEqual(duplicate.status_code, 409)

        renamed = self.client.patch(f"/provider-types/{created['id']}", json={"name": "inn"})
        self.assertEqual(renamed.status_code, 422)

        relabeled = self.client.patch(f"/provider-types/{created['id']}", json={"label": "Hotels"})
        self.assertEqual(relabeled.status_code, 200)
        self.assertEqual(relabeled.json()["data"]["label"], "Hotels")

        self.assertEqual(self.client.get("/provider-types/9999").status_code, 404)
        self.assertEqual(len(self.client.get("/provider-types").json()["data"]), 1)

        self._create_provider(created["id"], "Grand Hotel Lumiere", {"stars": 5})
        in_use = self.client.delete(f"/provider-types/{created['id']}")
        self.assertEqual(in_use.status_code, 409)
        self.assertIn("1 associated providers", in_use.json()["detail"])

    def test_provider_crud_and_error_mapping(self) -> None:
        type_id = self._create_hotel_type()["id"]

        unknown_type = self.client.post(
            "/providers",
            json={"name": "Orphan", "email": "orphan@example.com", "provider_type_id": 9999},
        )
        self.assertEqual(unknown_type.status_code, 404)

        invalid = self.client.post(
            "/providers",
            json={
                "name": "Broken",
                "email": "broken@example.com",
                "provider_type_id": type_id,
                "attributes": {"stars": "five"},
            },
        )
        self.assertEqual(invalid.status_code, 422)
        self.assertEqual(invalid.json()["detail"], [{"path": "stars", "message": "must be of type number"}])

        bad_email = self.client.post(
            "/providers",
            json={"name": "Broken", "email": "not-an-email", "provider_type_id": type_id},
        )
        self.assertEqual(bad_email.status_code, 422)

        provider = self._create_provider(type_id, "Hotel du Parc", {"stars": 3})
        fetched = self.client.get(f"/providers/{provider['id']}")
        self.assertEqual(fetched.status_code, 200)
        self.assertEqual(fetched.json()["data"]["provider_type"]["name"], "hotel")

        patched = self.client.patch(f"/providers/{provider['id']}", json={"status": "inactive"})
        self.assertEqual(patched.status_code, 200)
        self.assertEqual(patched.json()["data"]["status"], "inactive")

        self.assertEqual(self.client.delete(f"/providers/{provider['id']}").status_code, 200)
        self.assertEqual(self.client.get(f"/providers/{provider['id']}").status_code, 404)
        self.assertEqual(self.client.delete(f"/providers/{provider['id']}").status_code, 404)

    def test_listing_filters_search_and_pagination(self) -> None:
        type_id = self._create_hotel_type()["id"]
        for index in range(12):
            self._create_provider(
                type_id,
                f"Provider {index:02d}",
                {"stars": 1 + index % 5, "amenities": ["wifi", "parking"], "brand": "Grand Hotel"},
            )

        page_two = self.client.get("/providers", params={"page": 2, "limit": 10, "search": "hotel"})
        self.assertEqual(page_two.status_code, 200)
        body = page_two.json()["data"]
        self.assertEqual((body["total"], body["page"], body["limit"]), (12, 2, 10))
        self.assertEqual(len(body["items"]), 2)

        page_three = self.client.get("/providers", params={"page": 3, "limit": 10})
        self.assertEqual(page_three.json()["data"]["items"], [])
        self.assertEqual(page_three.json()["data"]["total"], 12)

        ranged = self.client.get(
            "/providers",
            params={"attributes": json.dumps({"stars": {"min": 3, "max": 5}, "amenities": "wifi"})},
        )
        self.assertEqual(ranged.json()["data"]["total"], 6)

        nothing = self.client.get("/providers", params={"search": "no such provider"})
        self.assertEqual(nothing.status_code, 200)
        self.assertEqual(nothing.json()["data"]["total"], 0)

    def test_invalid_listing_parameters_are_rejected(self) -> None:
        self.assertEqual(self.client.get("/providers", params={"attributes": "{oops"}).status_code, 422)
        self.assertEqual(self.client.get("/providers", params={"attributes": "[1, 2]"}).status_code, 422)
        max_page_size = get_settings().max_page_size
        self.assertEqual(self.client.get("/providers", params={"limit": max_page_size + 1}).status_code, 422)
        self.assertEqual(self.client.get("/providers", params={"page": 0}).status_code, 422)
        self.assertEqual(self.client.get("/providers", params={"status": "archived"}).status_code, 422)

    def test_listing_page_size_follows_settings(self) -> None:
        settings = get_settings()
        response = self.client.get("/providers")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["limit"], settings.default_page_size)

        at_max = self.client.get("/providers", params={"limit": settings.max_page_size})
        self.assertEqual(at_max.status_code, 200)

    def test_page_far_past_the_end_is_an_empty_page(self) -> None:
        hotel_type = self._create_hotel_type()
        self._create_provider(hotel_type["id"], "Grand Hotel Lumiere", {"stars": 5})

        response = self.client.get("/providers", params={"page": 2**62, "limit": 10})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["data"]["items"], [])
        self.assertEqual(response.json()["data"]["total"], 1)

    def test_store_failure_is_distinct_from_empty_result(self) -> None:
        failure = OperationalError("SELECT providers", {}, Exception("connection refused"))
        with patch("app.routers.providers.list_providers", side_effect=failure):
            with self.assertLogs("app.main", level="ERROR") as logs:
                response = self.client.get("/providers", params={"search": "hotel"})
        self.assertIn("provider_store.failure", logs.output[0])
        self.assertIs(logs.records[0].exc_info[1], failure)
        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json(), {"detail": "Provider store unavailable"})

    def _create_hotel_type(self) -> dict:
        response = self.client.post(
            "/provider-types",
            json={
                "name": "Hotel",
                "label": "Hotel",
                "attribute_schema": {
                    "stars": {"type": "number", "min": 1, "max": 5},
                    "amenities": {"kind": "array", "item_kind": "string"},
                },
            },
        )
        self.assertEqual(response.status_code, 201)
        return response.json()["data"]

    def _create_provider(self, type_id: int, name: str, attributes: dict[str, object]) -> dict:
        response = self.client.post(
            "/providers",
            json={
                "name": name,
                "email": "desk@hotel.fr",
                "provider_type_id": type_id,
                "attributes": attributes,
            },
        )
        self.assertEqual(response.status_code, 201)
        return response.json()["data"]


if __name__ == "__main__":
    unittest.main()
