"""Tests for the pydantic v2 integration of FourCC."""

from __future__ import annotations

import json
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from pydantic import BaseModel, TypeAdapter, ValidationError

from four_cc import FourCC

UUID = FourCC(b"uuid")


class Box(BaseModel):
    kind: FourCC
    size: int = 0


class TestPydanticAdapter(unittest.TestCase):
    def test_validate_from_str(self):
        box = Box(kind="moov")
        self.assertEqual(box.kind, FourCC(b"moov"))
        self.assertIsInstance(box.kind, FourCC)

    def test_validate_instance(self):
        box = Box(kind=UUID)
        self.assertEqual(box.kind, UUID)

    def test_validate_json(self):
        box = Box.model_validate_json('{"kind": "uuid", "size": 24}')
        self.assertEqual(box.kind, UUID)
        self.assertEqual(box.size, 24)

    def test_serialize_json(self):
        self.assertEqual(Box(kind=UUID).model_dump_json(), '{"kind":"uuid","size":0}')

    def test_serialize_python(self):
        self.assertEqual(Box(kind=UUID).model_dump(), {"kind": "uuid", "size": 0})

    def test_serialize_unprintable(self):
        dumped = json.loads(Box(kind=FourCC(b"\x00uid")).model_dump_json())
        self.assertEqual(dumped["kind"], "\\x00uid")

    def test_roundtrip(self):
        box = Box(kind=FourCC(b"ftyp"), size=32)
        self.assertEqual(Box.model_validate_json(box.model_dump_json()), box)

    def test_wrong_length_is_value_error(self):
        with self.assertRaises(ValidationError) as ctx:
            Box.model_validate_json('{"kind": "uuid123"}')
        errors = ctx.exception.errors()
        self.assertEqual(len(errors), 1)
        self.assertEqual(errors[0]["type"], "value_error")
        self.assertEqual(errors[0]["loc"], ("kind",))
        self.assertIn("got 7", errors[0]["msg"])

    def test_non_string_is_type_error(self):
        with self.assertRaises(ValidationError) as ctx:
            Box.model_validate_json('{"kind": 1970628964}')
        errors = ctx.exception.errors()
        self.assertEqual(errors[0]["type"], "string_type")

    def test_python_mode_rejects_int(self):
        with self.assertRaises(ValidationError) as ctx:
            Box(kind=0x75756964)
        types = {e["type"] for e in ctx.exception.errors()}
        self.assertIn("string_type", types)

    def test_python_mode_wrong_length(self):
        with self.assertRaises(ValidationError) as ctx:
            Box(kind="toolong")
        types = {e["type"] for e in ctx.exception.errors()}
        self.assertIn("value_error", types)

    def test_type_adapter(self):
        adapter = TypeAdapter(FourCC)
        self.assertEqual(adapter.validate_python("moof"), FourCC(b"moof"))
        self.assertEqual(adapter.dump_json(FourCC(b"moof")), b'"moof"')

    def test_json_schema_is_plain_string(self):
        self.assertEqual(TypeAdapter(FourCC).json_schema(), {"type": "string"})

    def test_json_schema_is_not_referenced(self):
        schema = Box.model_json_schema()
        self.assertNotIn("$defs", schema)
        self.assertEqual(schema["properties"]["kind"]["type"], "string")
        self.assertNotIn("$ref", schema["properties"]["kind"])

    def test_serialization_schema(self):
        schema = TypeAdapter(FourCC).json_schema(mode="serialization")
        self.assertEqual(schema, {"type": "string"})


if __name__ == "__main__":
    unittest.main()
