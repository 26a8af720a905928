# -*- coding: utf-8 -*-
"""
Symbol Catalog - Symbol sets and main icons with text search.

Holds the symbol sets available to the annotation form, derives the
template SIDC of every main icon, and answers free-text searches over
icon names. Catalog data is loaded from a mapping, a YAML file or a
JSON file with a top-level ``symbolSets`` list.

Dependencies
------------
pyyaml

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
import json
import logging
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Union

# Third-party
import yaml

# GMTK internal
from gmtk.catalog.models import MainIcon, SymbolSet
from gmtk.core.sidc import base_sidc

logger = logging.getLogger(__name__)

DEFAULT_SEARCH_LIMIT = 10


class CatalogEntry:
    """One searchable icon of the catalog.

    Parameters
    ----------
    sidc : str
        Template SIDC of the icon.
    icon : MainIcon
    symbol_set : SymbolSet
    """

    def __init__(self, sidc: str, icon: MainIcon, symbol_set: SymbolSet) -> None:
        self.sidc = sidc
        self.icon = icon
        self.symbol_set = symbol_set

    def to_dict(self) -> dict:
        return {
            'sidc': self.sidc,
            'name': self.icon.name,
            'symbolset': self.symbol_set.symbolset,
            'setName': self.symbol_set.name,
        }

    def __repr__(self) -> str:
        return f"CatalogEntry({self.sidc!r}, {self.icon.name!r})"


class SymbolCatalog:
    """Collection of symbol sets keyed by their two-digit code.

    Parameters
    ----------
    symbol_sets : Optional[Iterable[SymbolSet]]
    """

    def __init__(self, symbol_sets: Optional[Iterable[SymbolSet]] = None) -> None:
        self._sets: Dict[str, SymbolSet] = {}
        for s in symbol_sets or []:
            self.add(s)

    def add(self, symbol_set: SymbolSet) -> None:
        """Add or replace a symbol set."""
        self._sets[symbol_set.symbolset.zfill(2)] = symbol_set

    def get(self, symbol_set: str) -> Optional[SymbolSet]:
        """Symbol set by code ('10' or '1'), or None."""
        return self._sets.get(str(symbol_set).zfill(2))

    @property
    def symbol_sets(self) -> List[SymbolSet]:
        return list(self._sets.values())

    def __len__(self) -> int:
        return len(self._sets)

    def entries(self) -> List[CatalogEntry]:
        """Every icon of every set, with its template SIDC."""
        result = []
        for s in self._sets.values():
            for icon in s.main_icons:
                result.append(CatalogEntry(base_sidc(s.symbolset, icon.code), icon, s))
        return result

    def search(self, text: str, limit: int = DEFAULT_SEARCH_LIMIT) -> List[CatalogEntry]:
        """Find icons whose name contains every word of ``text``.

        Matching is case-insensitive and order-independent. Blank
        queries match nothing.

        Parameters
        ----------
        text : str
            Space-separated search words.
        limit : int
            Maximum number of entries returned, in catalog order.

        Returns
        -------
        List[CatalogEntry]
        """
        tokens = text.lower().split()
        if not tokens or limit <= 0:
            return []

        matches = []
        for entry in self.entries():
            name = entry.icon.name.lower()
            if all(t in name for t in tokens):
                matches.append(entry)
                if len(matches) >= limit:
                    break
        logger.debug("Catalog search %r: %d match(es)", text, len(matches))
        return matches

    def to_dict(self) -> dict:
        return {'symbolSets': [s.to_dict() for s in self._sets.values()]}

    @classmethod
    def from_dict(cls, data: dict) -> 'SymbolCatalog':
        return cls(SymbolSet.from_dict(s) for s in data.get('symbolSets') or [])

    @classmethod
    def load(cls, path: Union[str, Path]) -> 'SymbolCatalog':
        """Load a catalog file.

        ``.json`` files are read as JSON, anything else as YAML.

        Parameters
        ----------
        path : str or Path

        Returns
        -------
        SymbolCatalog
        """
        path = Path(path)
        with open(path, 'r', encoding='utf-8') as f:
            if path.suffix.lower() == '.json':
                data = json.load(f)
            else:
                data = yaml.safe_load(f)
        catalog = cls.from_dict(data or {})
        logger.debug("Loaded %d symbol set(s) from %s", len(catalog), path)
        return catalog
