# -*- coding: utf-8 -*-
"""
SIDC Field Lookups - Selectable codes for the single-field SIDC entries.

Context, standard identity, status, headquarters / task force / dummy,
and echelon codes with their display names. Sector modifiers are not
listed here; they depend on the symbol set and come from the catalog.

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
from typing import Dict, List, Optional

# GMTK internal
from gmtk.catalog.models import ModifierOption


def _options(*pairs) -> List[ModifierOption]:
    return [ModifierOption(code, name) for code, name in pairs]


# SIDC offset 2, default '0'
CONTEXT = _options(
    ('0', 'Reality'),
    ('1', 'Exercise'),
    ('2', 'Simulation'),
    ('3', 'Restricted Target'),
    ('4', 'No Strike Entity'),
    ('5', 'Restricted Target - Exercise'),
    ('6', 'No Strike Entity - Exercise'),
    ('7', 'Restricted Target - Simulation'),
    ('8', 'No Strike Entity - Simulation'),
)

# SIDC offset 3, default '3'
IDENTITY = _options(
    ('0', 'Pending'),
    ('1', 'Unknown'),
    ('2', 'Assumed Friend'),
    ('3', 'Friend'),
    ('4', 'Neutral'),
    ('5', 'Suspect / Joker'),
    ('6', 'Hostile / Faker'),
)

# SIDC offset 6, default '0'
STATUS = _options(
    ('0', 'Present'),
    ('1', 'Planned / Anticipated / Suspect'),
    ('2', 'Present / Fully Capable'),
    ('3', 'Present / Damaged'),
    ('4', 'Present / Destroyed'),
    ('5', 'Present / Full To Capacity'),
)

# SIDC offset 7, default '0'
HEADQUARTERS = _options(
    ('0', 'Not Applicable'),
    ('1', 'Feint / Dummy'),
    ('2', 'Headquarters'),
    ('3', 'Feint / Dummy Headquarters'),
    ('4', 'Task Force'),
    ('5', 'Feint / Dummy Task Force'),
    ('6', 'Task Force Headquarters'),
    ('7', 'Feint / Dummy Task Force Headquarters'),
)

# SIDC offsets 8-9, default '00'
ECHELON = _options(
    ('00', 'Unknown'),
    ('11', 'Team / Crew'),
    ('12', 'Squad'),
    ('13', 'Section'),
    ('14', 'Platoon / Detachment'),
    ('15', 'Company / Battery / Troop'),
    ('16', 'Battalion / Squadron'),
    ('17', 'Regiment / Group'),
    ('18', 'Brigade'),
    ('21', 'Division'),
    ('22', 'Corps / Marine Expeditionary Force'),
    ('23', 'Army'),
    ('24', 'Army Group / Front'),
    ('25', 'Region / Theatre'),
    ('26', 'Command'),
)

FIELD_LOOKUPS: Dict[str, List[ModifierOption]] = {
    'context': CONTEXT,
    'identity': IDENTITY,
    'status': STATUS,
    'headquarters': HEADQUARTERS,
    'echelon': ECHELON,
}


def option_name(field: str, code: str) -> Optional[str]:
    """Display name of ``code`` for a SIDC field, or None if unknown.

    Raises
    ------
    KeyError
        If ``field`` has no lookup table.
    """
    for option in FIELD_LOOKUPS[field]:
        if option.code == code:
            return option.name
    return None
