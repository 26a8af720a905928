# -*- coding: utf-8 -*-
"""
GMTK Catalog - Symbol sets, SIDC field lookups, and amplifier tables.

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

from gmtk.catalog.amplifier import AmplifierDefinition, AmplifierTable
from gmtk.catalog.lookups import (
    CONTEXT,
    ECHELON,
    FIELD_LOOKUPS,
    HEADQUARTERS,
    IDENTITY,
    STATUS,
    option_name,
)
from gmtk.catalog.models import MainIcon, ModifierOption, SymbolSet
from gmtk.catalog.symbols import CatalogEntry, SymbolCatalog

__all__ = [
    'AmplifierDefinition',
    'AmplifierTable',
    'CONTEXT',
    'ECHELON',
    'FIELD_LOOKUPS',
    'HEADQUARTERS',
    'IDENTITY',
    'STATUS',
    'option_name',
    'MainIcon',
    'ModifierOption',
    'SymbolSet',
    'CatalogEntry',
    'SymbolCatalog',
]
