"""JSON adapter for FourCC values, built on the stdlib json module.

A FourCC serializes as a JSON string holding its display rendering:

    FourCC(b"moov")     → "moov"
    FourCC(b"\\x00uid") → "\\\\x00uid"   (the escape text, not the octet)

Decoding runs the string through FourCC.from_str(), which requires exactly
four UTF-8 octets.  That makes the round trip lossless only for printable
values; anything that needed escaping renders to more than four octets and
is rejected on the way back in.  Use the integer or byte constructors when
arbitrary values have to survive transport.

Errors use json's own vocabulary: a non-string is a TypeError, a string of
the wrong length is a ValueError (the WrongLength itself), and so is a
string holding a lone surrogate.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Union

from ._core import FourCC
from ._errors import WrongLength

log = logging.getLogger(__name__)


def to_json_value(code: FourCC) -> str:
    """Return the JSON scalar for `code`: its display rendering."""
    if not isinstance(code, FourCC):
        raise TypeError(
            "expected FourCC, got {}".format(type(code).__name__))
    return code.display()


def from_json_value(value: Any) -> FourCC:
    """Build a FourCC from a decoded JSON scalar."""
    if not isinstance(value, str):
        log.debug("rejecting non-string JSON value for FourCC: %r", value)
        raise TypeError(
            "FourCC must be a JSON string, got {}".format(type(value).__name__))
    try:
        return FourCC.from_str(value)
    except WrongLength as exc:
        log.debug("rejecting JSON string %r for FourCC: %s", value, exc)
        raise WrongLength(
            exc.length,
            "invalid FourCC {!r}: expected 4 octets, got {}".format(
                value, exc.length),
        ) from exc
    except UnicodeEncodeError as exc:
        log.debug("rejecting JSON string %r for FourCC: %s", value, exc)
        raise ValueError(
            "invalid FourCC {!r}: not encodable as UTF-8".format(value)
        ) from exc


class FourCCJSONEncoder(json.JSONEncoder):
    """json.JSONEncoder that writes FourCC values as display strings."""

    def default(self, o: Any) -> Any:
        if isinstance(o, FourCC):
            return to_json_value(o)
        return super().default(o)


def dumps(obj: Any, **kwargs: Any) -> str:
    """json.dumps() with FourCC support anywhere in `obj`."""
    kwargs.setdefault("cls", FourCCJSONEncoder)
    return json.dumps(obj, **kwargs)


def loads_fourcc(raw: Union[str, bytes, bytearray]) -> FourCC:
    """Parse a JSON document whose root value is a single FourCC string."""
    return from_json_value(json.loads(raw))
