# -*- coding: utf-8 -*-
"""
SIDC Composer - Build and read 20-character symbol identification codes.

An APP-6 / MIL-STD-2525 SIDC carries its semantic fields at fixed
character offsets::

    0-1   version              (carried)
    2     context              (standard identity 1)
    3     identity             (standard identity 2)
    4-5   symbol set           (carried)
    6     status
    7     headquarters / task force / dummy
    8-9   echelon / mobility
    10-15 entity / type / subtype (carried)
    16-17 modifier 1
    18-19 modifier 2

Composition overwrites only the editable fields on top of a base
template (normally the code of the icon chosen from the symbol
catalog) and always yields exactly 20 characters.

Author
------
GMTK Contributors

License
-------
MIT License
Copyright (c) 2024 geoint.org
See LICENSE file for full text.

Created
-------
2026-10-19

Modified
--------
2026-10-19
"""

# Standard library
from typing import Any, Mapping, Optional

SIDC_LENGTH = 20
DEFAULT_BASE_SIDC = "0" * SIDC_LENGTH

CONTEXT_OFFSET = 2
IDENTITY_OFFSET = 3
SYMBOL_SET_OFFSET = 4
STATUS_OFFSET = 6
HEADQUARTERS_OFFSET = 7
ECHELON_OFFSET = 8
ENTITY_OFFSET = 10
MODIFIER1_OFFSET = 16
MODIFIER2_OFFSET = 18


class SidcFields:
    """Editable semantic fields of a SIDC.

    Parameters
    ----------
    context : str
        One character.
    identity : str
        One character.
    status : str
        One character.
    headquarters : str
        One character.
    echelon : str
        Two characters.
    modifier1 : str
        Two characters; empty clears offsets 16-17.
    modifier2 : str
        Two characters; empty clears offsets 18-19.
    symbol_set : str
        Offsets 4-5. Read-only context, ignored by ``compose_sidc``.
    entity : str
        Offsets 10-15. Read-only context, ignored by ``compose_sidc``.
    """

    def __init__(
        self,
        context: str = "",
        identity: str = "",
        status: str = "",
        headquarters: str = "",
        echelon: str = "",
        modifier1: str = "",
        modifier2: str = "",
        symbol_set: str = "",
        entity: str = "",
    ) -> None:
        self.context = context
        self.identity = identity
        self.status = status
        self.headquarters = headquarters
        self.echelon = echelon
        self.modifier1 = modifier1
        self.modifier2 = modifier2
        self.symbol_set = symbol_set
        self.entity = entity

    def to_dict(self) -> dict:
        return {
            'context': self.context,
            'identity': self.identity,
            'status': self.status,
            'headquarters': self.headquarters,
            'echelon': self.echelon,
            'modifier1': self.modifier1,
            'modifier2': self.modifier2,
        }

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SidcFields):
            return NotImplemented
        return vars(self) == vars(other)

    def __repr__(self) -> str:
        inner = ", ".join(f"{k}={v!r}" for k, v in self.to_dict().items())
        return f"SidcFields({inner})"


def _get(fields: Any, name: str) -> str:
    """Read a field from an object or mapping; None reads as empty."""
    if isinstance(fields, Mapping):
        value = fields.get(name)
    else:
        value = getattr(fields, name, None)
    return "" if value is None else str(value)


def normalize_sidc(code: Optional[str]) -> str:
    """Pad with '0' or truncate ``code`` to exactly 20 characters."""
    return (code or "").ljust(SIDC_LENGTH, "0")[:SIDC_LENGTH]


def compose_sidc(base_code: Optional[str], fields: Any) -> str:
    """Overlay editable fields onto a base SIDC.

    Parameters
    ----------
    base_code : Optional[str]
        Template code; padded with '0' / truncated to 20 characters.
    fields : SidcFields, mapping, or any object with the field
        attributes (e.g. an annotation symbol item).

    Returns
    -------
    str
        20-character code.

    Notes
    -----
    Empty single-character fields and empty echelon leave the template
    untouched, and each echelon character only replaces its own offset.
    An empty modifier1 / modifier2 resets both of its offsets to '0'.
    """
    chars = list(normalize_sidc(base_code))

    for name, offset in (
        ('context', CONTEXT_OFFSET),
        ('identity', IDENTITY_OFFSET),
        ('status', STATUS_OFFSET),
        ('headquarters', HEADQUARTERS_OFFSET),
    ):
        value = _get(fields, name)
        if value:
            chars[offset] = value[0]

    echelon = _get(fields, 'echelon')
    _overlay_pair(chars, ECHELON_OFFSET, echelon)

    for name, offset in (
        ('modifier1', MODIFIER1_OFFSET),
        ('modifier2', MODIFIER2_OFFSET),
    ):
        value = _get(fields, name)
        if value:
            _overlay_pair(chars, offset, value)
        else:
            chars[offset] = "0"
            chars[offset + 1] = "0"

    return "".join(chars)


def _overlay_pair(chars: list, offset: int, value: str) -> None:
    for i, ch in enumerate(value[:2]):
        chars[offset + i] = ch


def decompose_sidc(code: Optional[str]) -> SidcFields:
    """Read the semantic fields back out of a SIDC.

    Parameters
    ----------
    code : Optional[str]
        Any code; normalized to 20 characters first.

    Returns
    -------
    SidcFields
    """
    c = normalize_sidc(code)
    return SidcFields(
        context=c[CONTEXT_OFFSET],
        identity=c[IDENTITY_OFFSET],
        status=c[STATUS_OFFSET],
        headquarters=c[HEADQUARTERS_OFFSET],
        echelon=c[ECHELON_OFFSET:ECHELON_OFFSET + 2],
        modifier1=c[MODIFIER1_OFFSET:MODIFIER1_OFFSET + 2],
        modifier2=c[MODIFIER2_OFFSET:MODIFIER2_OFFSET + 2],
        symbol_set=c[SYMBOL_SET_OFFSET:SYMBOL_SET_OFFSET + 2],
        entity=c[ENTITY_OFFSET:ENTITY_OFFSET + 6],
    )


def base_sidc(symbol_set: str, icon_code: str) -> str:
    """Catalog template code for a main icon.

    Version '14', reality / friend, the two-digit symbol set, status
    through echelon zeroed, the six-digit entity code and no modifiers.
    """
    return normalize_sidc(f"1403{symbol_set.zfill(2)}0000{icon_code.zfill(6)}0000")
