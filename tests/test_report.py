"""
Tests of the translation tables and the plain-text report
"""
from dataclasses import replace
from datetime import datetime

import pytest

from roomload import InputRecord, compute_loads
from roomload.load_calc import BuildingType, EquipmentClass, AirSystemType
from roomload.report import Translator, TRANSLATIONS, render_report

CREATED_AT = datetime(2024, 5, 1, 9, 30)


class TestTranslator:

    def test_english_lookup(self):
        translate = Translator('en')
        assert translate('report.title') == "Thermal Load Calculation Report"

    def test_substitution(self):
        translate = Translator()
        s = translate('loads.people', value=500)
        assert s == "People load: 500 W"

    def test_arabic_lookup(self):
        translate = Translator('ar')
        assert translate('report.title') == TRANSLATIONS['ar']['report']['title']

    def test_missing_key_falls_back_to_english(self):
        translate = Translator('ar')
        assert 'ar' in TRANSLATIONS and 'psychro' not in TRANSLATIONS['ar']
        assert translate('psychro.title') == TRANSLATIONS['en']['psychro']['title']

    def test_unknown_key_is_returned_as_is(self):
        assert Translator('en')('does.not.exist') == 'does.not.exist'

    def test_section_key_is_not_a_string(self):
        # a key that points to a group of strings
        assert Translator('en')('loads') == 'loads'

    def test_unknown_language(self):
        with pytest.raises(ValueError):
            Translator('fr')

    def test_custom_tables(self):
        tables = {'en': {'greeting': "Hello {name}"}, 'nl': {}}
        translate = Translator('nl', translations=tables)
        assert translate('greeting', name='Tom') == "Hello Tom"


class TestTextReport:

    @pytest.fixture
    def simple_report(self, scenario_a_inputs, simple_settings) -> str:
        results = compute_loads(scenario_a_inputs, simple_settings)
        return render_report(scenario_a_inputs, results, created_at=CREATED_AT)

    def test_header(self, simple_report):
        lines = simple_report.splitlines()
        assert lines[0] == "Thermal Load Calculation Report"
        assert "Project name: Scenario A" in lines
        assert "Created: 2024-05-01 09:30" in lines
        assert "Calculation mode: simple" in lines

    def test_loads_section(self, simple_report):
        assert "People load: 500 W" in simple_report
        assert "Windows load: 1269 W" in simple_report
        assert "Walls and ceiling load: 1382 W" in simple_report
        assert "Total load (before safety): 4251 W" in simple_report
        assert "Total load (with 20% safety): 5101 W" in simple_report

    def test_summary_uses_thousands_separator(self, simple_report):
        assert "Total load: 5,101 W (1.45 TR)" in simple_report

    def test_inputs_and_notes(self, simple_report):
        assert "Room dimensions: 6 × 5 × 3 m" in simple_report
        assert "Number of people: 5 (sitting)" in simple_report
        assert "Outdoor temperature: 48 °C" in simple_report
        assert "✓ Material quantities are calculated for 10 m of duct." in simple_report

    def test_building_and_system_types(self, simple_report, scenario_a_inputs, simple_settings):
        assert "Building type: residential" in simple_report
        assert "Equipment class: split" in simple_report
        assert "Air system: constant_volume" in simple_report
        record = replace(
            scenario_a_inputs,
            building_type=BuildingType.COMMERCIAL,
            system=replace(
                scenario_a_inputs.system,
                equipment_class=EquipmentClass.CHILLED_WATER,
                air_system=AirSystemType.VARIABLE_VOLUME
            )
        )
        report = render_report(record, compute_loads(record, simple_settings), created_at=CREATED_AT)
        assert "Building type: commercial" in report
        assert "Equipment class: chilled_water" in report
        assert "Air system: variable_volume" in report

    def test_no_psychrometric_section_in_simple_mode(self, simple_report):
        assert "Psychrometric design" not in simple_report
        # no infiltration or ventilation in scenario A
        assert "Infiltration load" not in simple_report

    def test_psychrometric_report(self, scenario_c_inputs, psychrometric_settings):
        results = compute_loads(scenario_c_inputs, psychrometric_settings)
        report = render_report(scenario_c_inputs, results, created_at=CREATED_AT)
        assert "Calculation mode: psychrometric" in report
        assert "--- Psychrometric design ---" in report
        assert "Apparatus dew point: " in report
        assert "--- Heating design ---" in report
        assert "Ventilation load: " in report

    def test_arabic_report(self, scenario_c_inputs, psychrometric_settings):
        results = compute_loads(scenario_c_inputs, psychrometric_settings)
        translate = Translator('ar').translate
        report = render_report(scenario_c_inputs, results, translate, CREATED_AT)
        assert report.startswith(TRANSLATIONS['ar']['report']['title'])
        assert "حمل الأشخاص:" in report
        # untranslated keys show in English
        assert "--- Psychrometric design ---" in report

    def test_unnamed_project(self, simple_settings):
        record = InputRecord()
        report = render_report(record, compute_loads(record, simple_settings), created_at=CREATED_AT)
        assert "Project name: Unnamed" in report
        assert "Indoor temperature: 24 °C" in report
