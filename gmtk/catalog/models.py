# -*- coding: utf-8 -*-
"""
Catalog Models - Data models for symbol catalog entries.

Defines the ModifierOption, MainIcon and SymbolSet models describing
an APP-6 symbol catalog: which main icons exist in each symbol set,
and which sector modifier 1 / modifier 2 options apply to it.

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
from typing import List, Optional


class ModifierOption:
    """A selectable code for one SIDC field.

    Parameters
    ----------
    code : str
        Field code written into the SIDC.
    name : str
        Human-readable name.
    category : Optional[str]
        Grouping used by sector modifier lists.
    """

    def __init__(
        self,
        code: str,
        name: str,
        category: Optional[str] = None,
    ) -> None:
        self.code = code
        self.name = name
        self.category = category

    def to_dict(self) -> dict:
        d = {'code': self.code, 'name': self.name}
        if self.category:
            d['category'] = self.category
        return d

    @classmethod
    def from_dict(cls, data: dict) -> 'ModifierOption':
        return cls(
            code=data.get('code') or '00',
            name=data.get('name') or '',
            category=data.get('category'),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ModifierOption):
            return NotImplemented
        return (self.code, self.name) == (other.code, other.name)

    def __repr__(self) -> str:
        return f"ModifierOption({self.code!r}, {self.name!r})"


class MainIcon:
    """A main icon (entity / type / subtype) of a symbol set.

    Parameters
    ----------
    code : str
        Six-digit entity code.
    name : str
        Display name.
    entity : str
    entity_type : str
    entity_subtype : str
    remarks : Optional[str]
    """

    def __init__(
        self,
        code: str,
        name: str,
        entity: str = "",
        entity_type: str = "",
        entity_subtype: str = "",
        remarks: Optional[str] = None,
    ) -> None:
        self.code = code
        self.name = name
        self.entity = entity
        self.entity_type = entity_type
        self.entity_subtype = entity_subtype
        self.remarks = remarks

    def to_dict(self) -> dict:
        d = {
            'code': self.code,
            'name': self.name,
            'entity': self.entity,
            'entityType': self.entity_type,
            'entitySubtype': self.entity_subtype,
        }
        if self.remarks:
            d['remarks'] = self.remarks
        return d

    @classmethod
    def from_dict(cls, data: dict) -> 'MainIcon':
        return cls(
            code=str(data['code']),
            name=data.get('name', ''),
            entity=data.get('entity', ''),
            entity_type=data.get('entityType', ''),
            entity_subtype=data.get('entitySubtype', ''),
            remarks=data.get('remarks'),
        )

    def __repr__(self) -> str:
        return f"MainIcon({self.code!r}, {self.name!r})"


class SymbolSet:
    """A symbol set with its icons and sector modifiers.

    Parameters
    ----------
    name : str
        Display name (e.g. 'Land Unit').
    symbolset : str
        Two-digit symbol set code (e.g. '10').
    main_icons : List[MainIcon]
    modifier1 : List[ModifierOption]
    modifier2 : List[ModifierOption]
    """

    def __init__(
        self,
        name: str,
        symbolset: str,
        main_icons: Optional[List[MainIcon]] = None,
        modifier1: Optional[List[ModifierOption]] = None,
        modifier2: Optional[List[ModifierOption]] = None,
    ) -> None:
        self.name = name
        self.symbolset = symbolset
        self.main_icons = main_icons or []
        self.modifier1 = modifier1 or []
        self.modifier2 = modifier2 or []

    def icon(self, code: str) -> Optional[MainIcon]:
        """Look up a main icon by entity code."""
        for icon in self.main_icons:
            if icon.code == code:
                return icon
        return None

    def to_dict(self) -> dict:
        return {
            'name': self.name,
            'symbolset': self.symbolset,
            'mainIcon': [i.to_dict() for i in self.main_icons],
            'modifier1': [m.to_dict() for m in self.modifier1],
            'modifier2': [m.to_dict() for m in self.modifier2],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'SymbolSet':
        return cls(
            name=data.get('name', ''),
            symbolset=str(data['symbolset']),
            main_icons=[MainIcon.from_dict(i) for i in data.get('mainIcon') or []],
            modifier1=[ModifierOption.from_dict(m) for m in data.get('modifier1') or []],
            modifier2=[ModifierOption.from_dict(m) for m in data.get('modifier2') or []],
        )

    def __repr__(self) -> str:
        return (
            f"SymbolSet({self.symbolset!r}, {self.name!r}, "
            f"icons={len(self.main_icons)})"
        )
