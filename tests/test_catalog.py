# -*- coding: utf-8 -*-
"""
Tests for gmtk.catalog — symbol catalog models, SIDC field lookups,
amplifier tables, and icon search.

Author
------
GMTK Contributors

Created
-------
2026-10-19
"""

import json

import pytest
import yaml

from gmtk.catalog import (
    CONTEXT,
    ECHELON,
    HEADQUARTERS,
    IDENTITY,
    STATUS,
    AmplifierTable,
    MainIcon,
    ModifierOption,
    SymbolCatalog,
    SymbolSet,
    option_name,
)


CATALOG_DATA = {
    'symbolSets': [
        {
            'name': 'Land Unit',
            'symbolset': '10',
            'mainIcon': [
                {'code': '121100', 'name': 'Infantry', 'entity': 'Movement and Maneuver',
                 'entityType': 'Infantry', 'entitySubtype': ''},
                {'code': '121102', 'name': 'Infantry - Mechanized', 'entity': 'Movement and Maneuver',
                 'entityType': 'Infantry', 'entitySubtype': 'Mechanized'},
                {'code': '130100', 'name': 'Air Defense Artillery', 'entity': 'Fires',
                 'entityType': 'Air Defense', 'entitySubtype': ''},
            ],
            'modifier1': [
                {'category': 'Capability', 'code': '01', 'name': 'Air Mobile'},
                {'category': 'Capability', 'code': '', 'name': 'None'},
            ],
            'modifier2': [{'code': '01', 'name': 'Airborne'}],
        },
        {
            'name': 'Air',
            'symbolset': '1',
            'mainIcon': [
                {'code': '110000', 'name': 'Military Fixed Wing'},
                {'code': '110100', 'name': 'Military Fixed Wing - Medical Evacuation'},
            ],
        },
    ],
}


@pytest.fixture
def catalog():
    return SymbolCatalog.from_dict(CATALOG_DATA)


class TestLookups:
    def test_sizes(self):
        assert len(CONTEXT) == 9
        assert len(IDENTITY) == 7
        assert len(STATUS) == 6
        assert len(HEADQUARTERS) == 8
        assert len(ECHELON) == 15

    def test_codes_fit_sidc_offsets(self):
        assert all(len(o.code) == 1 for o in CONTEXT + IDENTITY + STATUS + HEADQUARTERS)
        assert all(len(o.code) == 2 for o in ECHELON)

    def test_option_name(self):
        assert option_name('identity', '3') == 'Friend'
        assert option_name('echelon', '14') == 'Platoon / Detachment'
        assert option_name('echelon', '99') is None
        with pytest.raises(KeyError):
            option_name('modifier1', '01')


class TestModels:
    def test_modifier_empty_code_is_zeroes(self):
        assert ModifierOption.from_dict({'code': '', 'name': 'None'}).code == '00'

    def test_symbol_set_roundtrip(self):
        s = SymbolSet.from_dict(CATALOG_DATA['symbolSets'][0])
        assert s.name == 'Land Unit'
        assert len(s.main_icons) == 3
        assert s.modifier1[0] == ModifierOption('01', 'Air Mobile')
        assert SymbolSet.from_dict(s.to_dict()).to_dict() == s.to_dict()

    def test_icon_lookup(self):
        s = SymbolSet.from_dict(CATALOG_DATA['symbolSets'][0])
        assert s.icon('121102').entity_subtype == 'Mechanized'
        assert s.icon('999999') is None

    def test_main_icon_to_dict(self):
        icon = MainIcon('121100', 'Infantry', remarks='note')
        assert icon.to_dict()['remarks'] == 'note'
        assert 'remarks' not in MainIcon('121100', 'Infantry').to_dict()


class TestSymbolCatalog:
    def test_get(self, catalog):
        assert catalog.get('10').name == 'Land Unit'
        assert catalog.get('01').name == 'Air'
        assert catalog.get('1').name == 'Air'
        assert catalog.get('99') is None
        assert len(catalog) == 2

    def test_entries_sidc(self, catalog):
        sidcs = [e.sidc for e in catalog.entries()]
        assert "14031000001211000000" in sidcs
        assert "14030100001100000000" in sidcs

    def test_search_all_tokens(self, catalog):
        names = [e.icon.name for e in catalog.search('infantry mech')]
        assert names == ['Infantry - Mechanized']

    def test_search_case_insensitive_any_order(self, catalog):
        names = [e.icon.name for e in catalog.search('WING fixed')]
        assert names == ['Military Fixed Wing', 'Military Fixed Wing - Medical Evacuation']

    def test_search_limit(self, catalog):
        assert len(catalog.search('i', limit=2)) == 2

    def test_search_blank(self, catalog):
        assert catalog.search('   ') == []

    def test_search_no_match(self, catalog):
        assert catalog.search('submarine') == []

    def test_load_yaml(self, tmp_path):
        path = tmp_path / "catalog.yaml"
        path.write_text(yaml.dump(CATALOG_DATA), encoding='utf-8')
        loaded = SymbolCatalog.load(path)
        assert loaded.get('10').icon('121100').name == 'Infantry'

    def test_load_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps(CATALOG_DATA), encoding='utf-8')
        loaded = SymbolCatalog.load(path)
        assert len(loaded.entries()) == 5

    def test_to_dict_roundtrip(self, catalog):
        again = SymbolCatalog.from_dict(catalog.to_dict())
        assert [e.sidc for e in again.entries()] == [e.sidc for e in catalog.entries()]


class TestAmplifierTable:
    def test_default_land_unit(self):
        table = AmplifierTable()
        fields = table.fields_for('10')
        assert fields[0] == 'uniqueDesignation'
        assert 'higherFormation' in fields

    def test_unknown_set(self):
        assert AmplifierTable().fields_for('99') == []
        assert AmplifierTable().fields_for('') == []

    def test_zero_padding(self):
        table = AmplifierTable()
        assert table.fields_for('1') == table.fields_for('01')
        assert '1' in table

    def test_fields_for_returns_copy(self):
        table = AmplifierTable()
        table.fields_for('10').append('bogus')
        assert 'bogus' not in table.fields_for('10')

    def test_definition(self):
        d = AmplifierTable().definition('uniqueDesignation')
        assert d.code == 'T'
        assert AmplifierTable().definition('bogus') is None

    def test_definition_fields_are_distinct(self):
        fields = [d.field for d in AmplifierTable().definitions]
        assert len(fields) == len(set(fields))
        assert AmplifierTable().definition('platformType').code == 'AD'
        assert AmplifierTable().definition('engagementType').code == 'AO'

    def test_default_fields_have_definitions(self):
        table = AmplifierTable()
        for symbol_set in table.symbol_sets:
            for field in table.fields_for(symbol_set):
                assert table.definition(field) is not None, field

    def test_from_yaml(self, tmp_path):
        path = tmp_path / "amplifiers.yaml"
        path.write_text(
            "table:\n"
            "  10: [uniqueDesignation, speed]\n"
            "  '30': [type]\n",
            encoding='utf-8',
        )
        table = AmplifierTable.from_yaml(path)
        assert table.fields_for('10') == ['uniqueDesignation', 'speed']
        assert table.fields_for('30') == ['type']
        assert table.definition('speed') is not None

    def test_yaml_roundtrip(self, tmp_path):
        path = tmp_path / "amplifiers.yaml"
        path.write_text(AmplifierTable().to_yaml(), encoding='utf-8')
        table = AmplifierTable.from_yaml(path)
        assert table.symbol_sets == AmplifierTable().symbol_sets
        assert table.fields_for('15') == AmplifierTable().fields_for('15')
