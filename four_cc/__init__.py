"""four_cc: four-character-code values for binary container formats.

A FourCC is the four-octet tag that names a box, chunk or atom in ISO
BMFF/MP4, RIFF, QuickTime, AIFF and friends.  Passing a FourCC instead of a
bare int or bytes makes the intent of an API obvious from its signature.

Quick start:
    >>> from four_cc import FourCC
    >>> MOOV = FourCC(b"moov")
    >>> FourCC.from_u32(0x6D6F6F76) == MOOV
    True
    >>> hex(MOOV.to_u32())
    '0x6d6f6f76'
    >>> FourCC.from_bytes(b"moofftyp")
    FourCC(moof)

Any four octets are a valid FourCC, including unprintable ones.  Rendering
never fails; unprintable octets are escaped:
    >>> print(FourCC(b"u\\xffi\\x00"))
    u\\xffi\\x00

Named constants work as match arms through dotted value patterns, and the
class supports positional class patterns on its octets:
    >>> match FourCC(b"moov"):
    ...     case FourCC(b"moov"):
    ...         print("movie")
    movie

Optional adapters: `four_cc.jsonutil` (stdlib json), pydantic fields (just
annotate with FourCC; needs the `pydantic` extra), and `four_cc.zerocopy`
(ctypes overlay on raw buffers).
"""

from __future__ import annotations

from ._constants import FOURCC_LEN, U32_MAX
from ._core import FourCC
from ._errors import (
    ERR_INSUFFICIENT_LENGTH,
    ERR_OUT_OF_RANGE,
    ERR_WRONG_LENGTH,
    FourCCError,
    InsufficientLength,
    OutOfRange,
    WrongLength,
)
from . import _json_adapter as jsonutil
from . import _zerocopy as zerocopy

__version__ = "1.0.0"

__all__ = [
    # Value type
    "FourCC",
    "FOURCC_LEN",
    "U32_MAX",
    # Adapters
    "jsonutil",
    "zerocopy",
    # Exceptions
    "FourCCError",
    "WrongLength",
    "InsufficientLength",
    "OutOfRange",
    # Error codes
    "ERR_WRONG_LENGTH",
    "ERR_INSUFFICIENT_LENGTH",
    "ERR_OUT_OF_RANGE",
]
