# -*- coding: utf-8 -*-
"""
Amplifier Table - Text label fields available per symbol set.

An amplifier is a text field drawn around a symbol (unique designation,
higher formation, date-time group, ...). Which amplifiers apply depends
on the symbol set; the table maps each two-digit symbol set code to the
ordered label keys shown on the annotation form. Symbol sets not in the
table have no label fields.

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
from pathlib import Path
from typing import Dict, List, Mapping, Optional, Sequence, Union

# Third-party
import yaml


class AmplifierDefinition:
    """Description of one label field.

    Parameters
    ----------
    code : str
        Amplifier field code (e.g. 'T').
    field : str
        Label key as stored on an annotation (e.g. 'uniqueDesignation').
    name : str
        Display name.
    desc : str
        Description shown as form help text.
    type : str
        Value type hint for the form ('text' or 'number').
    """

    def __init__(
        self,
        code: str,
        field: str,
        name: str,
        desc: str = "",
        type: str = "text",
    ) -> None:
        self.code = code
        self.field = field
        self.name = name
        self.desc = desc
        self.type = type

    def to_dict(self) -> dict:
        return {
            'code': self.code,
            'field': self.field,
            'type': self.type,
            'name': self.name,
            'desc': self.desc,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AmplifierDefinition':
        return cls(
            code=data.get('code', ''),
            field=data['field'],
            name=data.get('name', data['field']),
            desc=data.get('desc', ''),
            type=data.get('type', 'text'),
        )

    def __repr__(self) -> str:
        return f"AmplifierDefinition({self.code!r}, {self.field!r})"


DEFAULT_DEFINITIONS = [
    AmplifierDefinition('A', 'type', 'Symbol icon', 'Innermost part of the symbol'),
    AmplifierDefinition('B', 'echelon', 'Echelon', 'Command level of the unit'),
    AmplifierDefinition('C', 'quantity', 'Quantity', 'Number of items present', 'number'),
    AmplifierDefinition('D', 'taskForce', 'Task force', 'Task force indicator'),
    AmplifierDefinition('F', 'reinforcedReduced', 'Reinforced or reduced', '(+) reinforced, (-) reduced, (+-) both'),
    AmplifierDefinition('G', 'staffComments', 'Staff comments', 'Free text staff comments'),
    AmplifierDefinition('H', 'additionalInformation', 'Additional information', 'Free text additional information'),
    AmplifierDefinition('J', 'evaluationRating', 'Evaluation rating', 'Reliability and credibility rating'),
    AmplifierDefinition('K', 'combatEffectiveness', 'Combat effectiveness', 'Unit effectiveness or installation capability'),
    AmplifierDefinition('L', 'signatureEquipment', 'Signature equipment', 'Hostile equipment with a detectable signature'),
    AmplifierDefinition('M', 'higherFormation', 'Higher formation', 'Number or title of the higher echelon command'),
    AmplifierDefinition('N', 'hostile', 'Hostile (enemy)', 'ENY for hostile equipment'),
    AmplifierDefinition('P', 'iffSif', 'IFF / SIF', 'Identification mode and code'),
    AmplifierDefinition('Q', 'direction', 'Direction of movement', 'Direction in degrees', 'number'),
    AmplifierDefinition('R', 'mobilityIndicator', 'Mobility indicator', 'Mobility of equipment'),
    AmplifierDefinition('S', 'headquartersElement', 'Headquarters element', 'Headquarters element indicator'),
    AmplifierDefinition('T', 'uniqueDesignation', 'Unique designation', 'Unique alphanumeric designation'),
    AmplifierDefinition('V', 'equipmentType', 'Type', 'Type or model of equipment'),
    AmplifierDefinition('W', 'dtg', 'Date-time group', 'DDHHMMSSZMONYYYY'),
    AmplifierDefinition('X', 'altitudeDepth', 'Altitude / depth', 'Altitude, flight level or depth'),
    AmplifierDefinition('Y', 'location', 'Location', 'Location in degrees, minutes and seconds or grid'),
    AmplifierDefinition('Z', 'speed', 'Speed', 'Velocity in knots or km/h', 'number'),
    AmplifierDefinition('AA', 'specialHeadquarters', 'Special C2 headquarters', 'Name of a special command and control HQ'),
    AmplifierDefinition('AB', 'feintDummy', 'Feint / dummy', 'Feint or dummy indicator'),
    AmplifierDefinition('AD', 'platformType', 'Platform type', 'ELNOT or CENOT'),
    AmplifierDefinition('AE', 'equipmentTeardownTime', 'Equipment teardown time', 'Teardown time in minutes', 'number'),
    AmplifierDefinition('AF', 'commonIdentifier', 'Common identifier', 'Common name of the equipment'),
    AmplifierDefinition('AH', 'engagementBar', 'Engagement bar', 'Engagement status'),
    AmplifierDefinition('AJ', 'speedLeader', 'Speed leader', 'Speed and direction of movement'),
    AmplifierDefinition('AO', 'engagementType', 'Engagement type', 'Target number and engagement type'),
    AmplifierDefinition('AP', 'guardedUnit', 'Guarded unit', 'Unit being guarded'),
    AmplifierDefinition('AQ', 'specialDesignator', 'Special designator', 'Special track designator'),
    AmplifierDefinition('AS', 'country', 'Country', 'Three-letter country code'),
    AmplifierDefinition('AT', 'installationComposition', 'Installation composition', 'Composition of an installation'),
]

# Symbol set code -> ordered label keys
DEFAULT_TABLE: Dict[str, List[str]] = {
    # Air, air missile
    '01': ['uniqueDesignation', 'iffSif', 'type', 'altitudeDepth', 'speed',
           'staffComments', 'additionalInformation', 'dtg', 'location',
           'country', 'speedLeader'],
    '02': ['uniqueDesignation', 'iffSif', 'type', 'altitudeDepth', 'speed',
           'staffComments', 'additionalInformation', 'dtg', 'location',
           'country'],
    # Space, space missile
    '05': ['uniqueDesignation', 'type', 'altitudeDepth', 'speed',
           'staffComments', 'additionalInformation', 'dtg', 'location',
           'country'],
    '06': ['uniqueDesignation', 'type', 'altitudeDepth', 'speed',
           'staffComments', 'additionalInformation', 'dtg', 'location',
           'country'],
    # Land unit
    '10': ['uniqueDesignation', 'higherFormation', 'reinforcedReduced',
           'staffComments', 'additionalInformation', 'evaluationRating',
           'combatEffectiveness', 'signatureEquipment', 'iffSif',
           'direction', 'dtg', 'altitudeDepth', 'location', 'speed',
           'specialHeadquarters', 'headquartersElement', 'country',
           'engagementBar', 'speedLeader'],
    # Land civilian unit / organization
    '11': ['uniqueDesignation', 'higherFormation', 'staffComments',
           'additionalInformation', 'evaluationRating', 'dtg',
           'altitudeDepth', 'location', 'country'],
    # Land equipment
    '15': ['uniqueDesignation', 'quantity', 'staffComments',
           'additionalInformation', 'evaluationRating',
           'combatEffectiveness', 'signatureEquipment', 'hostile',
           'iffSif', 'direction', 'equipmentType', 'dtg', 'altitudeDepth',
           'location', 'speed', 'equipmentTeardownTime',
           'commonIdentifier', 'country', 'engagementBar', 'speedLeader'],
    # Land installation
    '20': ['uniqueDesignation', 'higherFormation', 'staffComments',
           'additionalInformation', 'evaluationRating',
           'combatEffectiveness', 'signatureEquipment', 'dtg',
           'altitudeDepth', 'location', 'country',
           'installationComposition'],
    # Control measure
    '25': ['uniqueDesignation', 'additionalInformation', 'dtg',
           'altitudeDepth', 'location'],
    # Dismounted individual
    '27': ['uniqueDesignation', 'higherFormation', 'staffComments',
           'additionalInformation', 'evaluationRating',
           'combatEffectiveness', 'iffSif', 'direction', 'dtg',
           'altitudeDepth', 'location', 'speed', 'country', 'speedLeader'],
    # Sea surface
    '30': ['uniqueDesignation', 'type', 'staffComments',
           'additionalInformation', 'iffSif', 'direction', 'dtg',
           'location', 'speed', 'country', 'guardedUnit',
           'specialDesignator', 'speedLeader'],
    # Sea subsurface
    '35': ['uniqueDesignation', 'type', 'staffComments',
           'additionalInformation', 'altitudeDepth', 'direction', 'dtg',
           'location', 'speed', 'country', 'guardedUnit',
           'specialDesignator', 'speedLeader'],
    # Mine warfare
    '36': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'dtg', 'altitudeDepth', 'location'],
    # Activities
    '40': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'altitudeDepth', 'location',
           'country'],
    # Signals intelligence
    '50': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'altitudeDepth', 'location',
           'platformType', 'equipmentTeardownTime', 'country'],
    '51': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'altitudeDepth', 'location',
           'platformType', 'equipmentTeardownTime', 'country'],
    '52': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'altitudeDepth', 'location',
           'platformType', 'equipmentTeardownTime', 'country'],
    '53': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'altitudeDepth', 'location',
           'platformType', 'equipmentTeardownTime', 'country'],
    '54': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'altitudeDepth', 'location',
           'platformType', 'equipmentTeardownTime', 'country'],
    # Cyberspace
    '60': ['uniqueDesignation', 'staffComments', 'additionalInformation',
           'evaluationRating', 'dtg', 'country'],
}


class AmplifierTable:
    """Lookup of label fields per symbol set.

    Parameters
    ----------
    table : Optional[Mapping[str, Sequence[str]]]
        Symbol set code -> ordered label keys. Defaults to
        ``DEFAULT_TABLE``.
    definitions : Optional[Sequence[AmplifierDefinition]]
        Field descriptions. Defaults to ``DEFAULT_DEFINITIONS``.
    """

    def __init__(
        self,
        table: Optional[Mapping[str, Sequence[str]]] = None,
        definitions: Optional[Sequence[AmplifierDefinition]] = None,
    ) -> None:
        source = DEFAULT_TABLE if table is None else table
        self._table = {
            str(k).zfill(2): list(v) for k, v in source.items()
        }
        self.definitions = list(
            DEFAULT_DEFINITIONS if definitions is None else definitions
        )

    def fields_for(self, symbol_set: Optional[str]) -> List[str]:
        """Ordered label keys for a symbol set; empty if none apply."""
        if not symbol_set:
            return []
        return list(self._table.get(str(symbol_set).zfill(2), []))

    def definition(self, field: str) -> Optional[AmplifierDefinition]:
        """First definition describing a label key, or None."""
        for d in self.definitions:
            if d.field == field:
                return d
        return None

    @property
    def symbol_sets(self) -> List[str]:
        return sorted(self._table)

    def __contains__(self, symbol_set: object) -> bool:
        return isinstance(symbol_set, str) and symbol_set.zfill(2) in self._table

    def to_dict(self) -> dict:
        return {
            'table': {k: list(v) for k, v in self._table.items()},
            'definitions': [d.to_dict() for d in self.definitions],
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'AmplifierTable':
        """Build from a mapping with 'table' and optional 'definitions'.

        Omitted definitions fall back to the built-in list.
        """
        definitions = data.get('definitions')
        return cls(
            table=data.get('table') or {},
            definitions=(
                [AmplifierDefinition.from_dict(d) for d in definitions]
                if definitions is not None else None
            ),
        )

    @classmethod
    def from_yaml(cls, yaml_path: Union[str, Path]) -> 'AmplifierTable':
        """Load a table from a YAML file.

        Parameters
        ----------
        yaml_path : str or Path

        Returns
        -------
        AmplifierTable
        """
        with open(yaml_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        return cls.from_dict(data or {})

    def to_yaml(self) -> str:
        return yaml.dump(self.to_dict(), default_flow_style=False, sort_keys=False)
