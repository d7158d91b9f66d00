"""
Tests of the chart wrappers; figures are saved with the non-interactive Agg
backend (see conftest.py)
"""
import os

import pytest

from roomload import Quantity, compute_loads
from roomload.charts import LineChart, PsychrometricChart, StatePoint, plot_load_breakdown

Q_ = Quantity


class TestCharts:

    def test_line_chart(self, tmp_path):
        chart = LineChart(size=(6, 4))
        chart.add_xy_data('line', [0, 1, 2], [0, 1, 4])
        chart.set_x_axis('x', 0, 2, 1)
        chart.add_legend()
        path = chart.save('line', location=str(tmp_path))
        assert os.path.isfile(path)
        assert chart.datasets['line']['style_props'] == {}

    def test_load_breakdown_chart(self, tmp_path, scenario_c_inputs, psychrometric_settings):
        results = compute_loads(scenario_c_inputs, psychrometric_settings)
        chart = plot_load_breakdown(results.loads)
        assert list(chart.datasets) == ['sensible', 'latent']
        assert len(chart.datasets['sensible']['x_values']) == 8
        path = chart.save('loads', location=str(tmp_path))
        assert os.path.isfile(path)

    def test_psychrometric_chart(self, tmp_path):
        psy_chart = PsychrometricChart(fig_size=(8, 6))
        psy_chart.plot_process(
            'cooling',
            StatePoint(Q_(26, 'degC'), Q_(0.011, 'kg / kg')),
            StatePoint(Q_(14, 'degC'), Q_(0.009, 'kg / kg'))
        )
        path = psy_chart.save('psy', location=str(tmp_path))
        assert path.endswith('psy.png')
        assert os.path.isfile(path)

    @pytest.mark.parametrize('season', ['cooling', 'heating'])
    def test_design_psychrometric_chart(self, tmp_path, scenario_c_inputs, psychrometric_settings, season):
        results = compute_loads(scenario_c_inputs, psychrometric_settings)
        output = getattr(results, season)
        path = output.psychrometric_chart.save(season, location=str(tmp_path))
        assert os.path.isfile(path)
