"""Zero-copy access to FourCC tags inside raw buffers, via ctypes.

RawFourCC is a structure of exactly four contiguous octets: size 4,
alignment 1, no padding and no tag.  view() overlays one on a writable
buffer (a bytearray, an mmap, a ctypes array) at a given offset, so reading
and writing `.value` goes straight to the underlying memory.

    >>> data = bytearray(b"\\x00\\x00\\x00\\x18ftypisom")
    >>> tag = view(data, 4)
    >>> tag.value
    FourCC(ftyp)
    >>> tag.value = FourCC(b"moov")
    >>> bytes(data[4:8])
    b'moov'
"""

from __future__ import annotations

import ctypes
from typing import Any

from ._constants import FOURCC_LEN
from ._core import FourCC
from ._errors import InsufficientLength

u8 = ctypes.c_uint8


class RawFourCC(ctypes.Structure):
    _fields_ = [
        ("octets", u8 * FOURCC_LEN),
    ]

    def __repr__(self) -> str:
        return "{}({})".format(type(self).__name__, self.value)

    @property
    def value(self) -> FourCC:
        return FourCC(bytes(self.octets))

    @value.setter
    def value(self, code: FourCC) -> None:
        if not isinstance(code, FourCC):
            raise TypeError(
                "expected FourCC, got {}".format(type(code).__name__))
        self.octets[:] = tuple(code.octets)


def view(buffer: Any, offset: int = 0) -> RawFourCC:
    """Overlay a RawFourCC on `buffer` at `offset` without copying.

    The buffer must be writable and stays referenced by the returned
    structure.  For read-only data (bytes) use FourCC.from_buffer().
    """
    if offset < 0:
        raise ValueError("offset must be non-negative, got {}".format(offset))
    with memoryview(buffer) as mem:
        available = max(mem.nbytes - offset, 0)
        readonly = mem.readonly
    if available < FOURCC_LEN:
        raise InsufficientLength(available)
    if readonly:
        raise TypeError(
            "view() needs a writable buffer; use FourCC.from_buffer() for "
            "read-only data")
    return RawFourCC.from_buffer(buffer, offset)


def to_raw(code: FourCC) -> RawFourCC:
    """Return a standalone RawFourCC holding the octets of `code`."""
    if not isinstance(code, FourCC):
        raise TypeError("expected FourCC, got {}".format(type(code).__name__))
    return RawFourCC.from_buffer_copy(code.octets)
