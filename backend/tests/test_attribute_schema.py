"""Unit tests for provider type schemas and attribute bag validation."""

import unittest

from pydantic import ValidationError

from app.schema.attribute_schema import AttributeIssue, validate_attribute_bag
from app.schema.type_slugs import normalize_type_slug
from app.schemas.provider_type import FieldSpec, ProviderTypeCreate, ProviderTypeUpdate


def _schema(raw: dict[str, dict[str, object]]) -> dict[str, FieldSpec]:
    return {name: FieldSpec.model_validate(spec) for name, spec in raw.items()}


_HOTEL_SCHEMA = _schema(
    {
        "stars": {"kind": "number", "required": True, "min": 1, "max": 5},
        "amenities": {"kind": "array", "item_kind": "string", "max": 3},
        "name_on_sign": {"kind": "string", "min": 2},
        "breakfast_included": {"kind": "boolean"},
        "contact": {
            "kind": "object",
            "properties": {"email": {"kind": "string", "required": True}},
        },
    }
)


class TypeSlugTests(unittest.TestCase):
    def test_names_are_normalized_to_slugs(self) -> None:
        self.assertEqual(normalize_type_slug("Event Venue"), "event-venue")
        self.assertEqual(normalize_type_slug("  audio_visual  "), "audio-visual")
        self.assertEqual(normalize_type_slug("Traiteur!"), "traiteur")
        self.assertEqual(normalize_type_slug(None), "")

    def test_create_payload_normalizes_and_validates_name(self) -> None:
        payload = ProviderTypeCreate(name="Event Venue", label="Event venue")
        self.assertEqual(payload.name, "event-venue")
        with self.assertRaises(ValidationError):
            ProviderTypeCreate(name="!", label="Broken")

    def test_update_payload_cannot_rename(self) -> None:
        with self.assertRaises(ValidationError):
            ProviderTypeUpdate(name="renamed", label="Renamed")
        with self.assertRaises(ValidationError):
            ProviderTypeUpdate()


class FieldSpecTests(unittest.TestCase):
    def test_legacy_keys_are_accepted(self) -> None:
        spec = FieldSpec.model_validate({"type": "array", "items": "string"})
        self.assertEqual(spec.kind, "array")
        self.assertEqual(spec.item_kind, "string")
        self.assertEqual(spec.model_dump(exclude_none=True), {"kind": "array", "item_kind": "string"})

    def test_inverted_bounds_are_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            FieldSpec.model_validate({"kind": "number", "min": 5, "max": 1})


class AttributeBagValidationTests(unittest.TestCase):
    def test_valid_bag_has_no_issues(self) -> None:
        issues = validate_attribute_bag(
            _HOTEL_SCHEMA,
            {
                "stars": 4,
                "amenities": ["wifi", "spa"],
                "breakfast_included": True,
                "contact": {"email": "desk@hotel.fr"},
                "unknown_extra": "kept",
            },
        )
        self.assertEqual(issues, [])

    def test_required_fields_must_be_present(self) -> None:
        self.assertEqual(
            validate_attribute_bag(_HOTEL_SCHEMA, {"stars": None}),
            [AttributeIssue("stars", "is required")],
        )
        self.assertEqual(
            validate_attribute_bag(_HOTEL_SCHEMA, {"stars": 3, "contact": {"email": "  "}}),
            [AttributeIssue("contact.email", "is required")],
        )

    def test_kinds_and_bounds_are_checked(self) -> None:
        issues = validate_attribute_bag(
            _HOTEL_SCHEMA,
            {
                "stars": True,
                "amenities": ["wifi", 2, "spa", "pool"],
                "name_on_sign": "X",
                "breakfast_included": "yes",
                "contact": "desk@hotel.fr",
            },
        )
        self.assertEqual(
            issues,
            [
                AttributeIssue("stars", "must be of type number"),
                AttributeIssue("amenities[1]", "must be of type string"),
                AttributeIssue("amenities", "must be at most 3 items"),
                AttributeIssue("name_on_sign", "must be at least 2 characters"),
                AttributeIssue("breakfast_included", "must be of type boolean"),
                AttributeIssue("contact", "must be an object"),
            ],
        )

    def test_numeric_range(self) -> None:
        self.assertEqual(
            validate_attribute_bag(_HOTEL_SCHEMA, {"stars": 6}),
            [AttributeIssue("stars", "must be at most 5")],
        )
        self.assertEqual(
            validate_attribute_bag(_HOTEL_SCHEMA, {"stars": 0.5}),
            [AttributeIssue("stars", "must be at least 1")],
        )


if __name__ == "__main__":
    unittest.main()
