"""pydantic v2 integration: validation, serialization and JSON schema.

FourCC.__get_pydantic_core_schema__ and __get_pydantic_json_schema__
delegate here, so a FourCC can be used directly as a model field:

    >>> from pydantic import BaseModel
    >>> class Box(BaseModel):
    ...     kind: FourCC
    >>> Box(kind="moov").kind
    FourCC(moov)
    >>> Box(kind=FourCC(b"moov")).model_dump_json()
    '{"kind":"moov"}'

Validation accepts a FourCC instance (python mode only) or a string that
FourCC.from_str() accepts.  Anything else fails with pydantic's own
string_type error; a string of the wrong octet length fails as a
value_error.  Serialization writes the display rendering.  In JSON schema a
FourCC is a plain, unnamed string: no title, no $defs entry.
"""

from __future__ import annotations

import logging
from typing import Any

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema

from ._core import FourCC
from ._errors import WrongLength

log = logging.getLogger(__name__)


def _parse(value: str) -> FourCC:
    try:
        return FourCC.from_str(value)
    except WrongLength:
        log.debug("rejecting %r as FourCC: wrong length", value)
        raise


def fourcc_core_schema(cls: type, source_type: Any,
                       handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
    from_str = core_schema.chain_schema([
        core_schema.str_schema(),
        core_schema.no_info_plain_validator_function(_parse),
    ])
    return core_schema.json_or_python_schema(
        json_schema=from_str,
        python_schema=core_schema.union_schema([
            core_schema.is_instance_schema(cls),
            from_str,
        ]),
        serialization=core_schema.to_string_ser_schema(when_used="always"),
    )


def fourcc_json_schema(schema: core_schema.CoreSchema,
                       handler: GetJsonSchemaHandler) -> JsonSchemaValue:
    # Describe the wire form only.  No ref, so generators inline it.
    return handler(core_schema.str_schema())
