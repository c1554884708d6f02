#!/usr/bin/env python3
# tools/invariants_runner.py
#
# FourCC value invariants (seeded property checks).
#
# This runner:
# - generates random FourCC values, biased towards octets that need escaping
# - checks the integer, octet, equality, hash, ordering and rendering laws
# - checks the text constructor length rule on random UTF-8 strings
#
# Configuration (environment):
#   FOURCC_SEED    random seed            (default 1337)
#   FOURCC_TRIALS  number of trials       (default 2000)
#
# Exit code:
#   0 -> all checks passed
#   1 -> invariant violation

import logging
import os
import random
import sys

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, ROOT)

from four_cc import FourCC, WrongLength

log = logging.getLogger("invariants")

SEED = int(os.environ.get("FOURCC_SEED", "1337"))
TRIALS = int(os.environ.get("FOURCC_TRIALS", "2000"))

rng = random.Random(SEED)

# Octets whose display form starts with a backslash, plus the printable
# neighbours they are most easily confused with when sorting.
TRICKY = [0x00, 0x09, 0x0A, 0x0D, 0x1F, 0x20, 0x22, 0x23, 0x5B, 0x5C, 0x5D,
          0x61, 0x78, 0x7E, 0x7F, 0x80, 0xFF]


def rand_octet() -> int:
    r = rng.random()
    if r < 0.40:
        return rng.randint(0x20, 0x7E)
    if r < 0.80:
        return rng.choice(TRICKY)
    return rng.getrandbits(8)


def rand_code() -> FourCC:
    return FourCC(bytes(rand_octet() for _ in range(4)))


def rand_text() -> str:
    out = []
    for _ in range(rng.randint(0, 5)):
        r = rng.random()
        if r < 0.70:
            out.append(chr(rng.randint(0x20, 0x7E)))
        elif r < 0.85:
            out.append(chr(rng.randint(0xA0, 0x7FF)))
        elif r < 0.95:
            out.append(chr(rng.randint(0x0800, 0xD7FF)))  # exclude surrogates
        else:
            out.append(chr(rng.randint(0x10000, 0x10FFFF)))
    return "".join(out)


def fail(what: str, *context) -> int:
    log.error("INVARIANT FAIL: %s %s", what, " ".join(repr(c) for c in context))
    return 1


def main() -> int:
    for _ in range(TRIALS):
        a, b, c = rand_code(), rand_code(), rand_code()
        n = rng.getrandbits(32)

        # (1) integer round trip, (2) octet round trip
        if FourCC.from_u32(n).to_u32() != n:
            return fail("u32 round trip", n)
        if FourCC(a.octets).octets != a.octets or FourCC.from_u32(a.to_u32()) != a:
            return fail("octet round trip", a)

        # (4) equality reflects octets, (5) hash consistency
        if (a == b) != (a.octets == b.octets):
            return fail("equality", a, b)
        if FourCC(a.octets) != a or hash(FourCC(a.octets)) != hash(a):
            return fail("hash consistency", a)

        # (6) trichotomy, agreement with display order, transitivity
        if [a < b, a == b, a > b].count(True) != 1:
            return fail("trichotomy", a, b)
        if (a < b) != (str(a) < str(b)):
            return fail("display order", a, b)
        if a <= b <= c and not a <= c:
            return fail("transitivity", a, b, c)

        # (7) display totality, (8) diagnostic form
        if not str(a):
            return fail("empty display", a.octets)
        if repr(a) != "FourCC(" + str(a) + ")":
            return fail("repr form", a)

        # printable values survive display -> from_str
        if a.is_printable() and FourCC.from_str(str(a)) != a:
            return fail("printable round trip", a)

        # (9) text constructor length rule
        text = rand_text()
        accepted = True
        try:
            FourCC.from_str(text)
        except WrongLength:
            accepted = False
        if accepted != (len(text.encode("utf-8")) == 4):
            return fail("text length rule", text)

    log.info("OK: invariants passed for TRIALS=%d seed=%d", TRIALS, SEED)
    return 0


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    raise SystemExit(main())
