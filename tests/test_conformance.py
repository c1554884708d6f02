"""Golden-vector tests: conformance/conformance_vectors.json checked against
conformance/conformance_expected.json, one test method per vector.

Point FOURCC_VECTORS_DIR at another directory to run a different vector set.
"""

from __future__ import annotations

import base64
import json
import os
import sys
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from four_cc import FourCC, FourCCError, jsonutil

VECTORS_DIR = os.environ.get(
    "FOURCC_VECTORS_DIR",
    os.path.join(os.path.dirname(__file__), "..", "conformance"),
)


def _load(name: str) -> dict:
    with open(os.path.join(VECTORS_DIR, name), encoding="utf-8") as f:
        return json.load(f)


def _octets(vec: dict) -> bytes:
    return base64.b64decode(vec["input_b64"])


def _u32(text: str) -> int:
    return int(text, 16)


# mode -> (vector -> observed outcome)
MODES = {
    "octets_display": lambda v: {"display": str(FourCC(_octets(v)))},
    "octets_u32": lambda v: {"u32": FourCC(_octets(v)).to_u32()},
    "octets_repr": lambda v: {"repr": repr(FourCC(_octets(v)))},
    "u32_display": lambda v: {"display": str(FourCC.from_u32(_u32(v["input_u32"])))},
    "u32_roundtrip": lambda v: {
        "equal": FourCC.from_u32(FourCC(_octets(v)).to_u32()) == FourCC(_octets(v))},
    "json_roundtrip": lambda v: {
        "equal": jsonutil.loads_fourcc(
            jsonutil.dumps(FourCC.from_str(v["input_text"])))
        == FourCC.from_str(v["input_text"])},
    "str_parse": lambda v: {"display": str(FourCC.from_str(v["input_text"]))},
    "bytes_parse": lambda v: {"display": str(FourCC.from_bytes(_octets(v)))},
}


def observe(vec: dict) -> dict:
    try:
        return MODES[vec["mode"]](vec)
    except FourCCError as e:
        return {"err": e.code, "length": getattr(e, "length", None)}


def expect(exp: dict) -> dict:
    if "u32" in exp:
        return {"u32": _u32(exp["u32"])}
    return exp


class ConformanceTests(unittest.TestCase):
    def test_every_vector_has_expectation(self):
        self.assertEqual(sorted(v["test_id"] for v in VECTORS), sorted(EXPECTED))

    def test_modes_known(self):
        self.assertLessEqual({v["mode"] for v in VECTORS}, set(MODES))


def _make_test(vec: dict, exp: dict):
    def test(self: unittest.TestCase) -> None:
        self.assertEqual(observe(vec), expect(exp), vec["test_id"])
    return test


VECTORS = _load("conformance_vectors.json")["vectors"]
EXPECTED = _load("conformance_expected.json")["expected"]

for _vec in VECTORS:
    _name = "test_" + _vec["test_id"]
    _fn = _make_test(_vec, EXPECTED.get(_vec["test_id"], {}))
    _fn.__name__ = _name
    _fn.__qualname__ = "ConformanceTests." + _name
    setattr(ConformanceTests, _name, _fn)


if __name__ == "__main__":
    unittest.main()
