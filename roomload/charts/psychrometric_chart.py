from __future__ import annotations

from dataclasses import dataclass
from CoolProp.CoolProp import HAPropsSI
import numpy as np
from matplotlib.patches import ConnectionPatch
from matplotlib.ticker import MultipleLocator
from .. import Quantity
from ..fluids import HumidAir, STANDARD_PRESSURE
from .chart_2D import LineChart

Q_ = Quantity


@dataclass
class StatePoint:
    Tdb: Quantity
    W: Quantity


class PsychrometricChart:
    """Psychrometric chart (dry-bulb temperature vs. humidity ratio) on which
    air states and air conditioning processes can be drawn.

    The background lines (relative humidity, saturation curve, specific
    volume) are computed with CoolProp's humid air functions.
    """
    T_RANGE = (-10.0, 50.0)
    W_RANGE = (0.0, 0.030)

    def __init__(
        self,
        fig_size: tuple[int, int] = (12, 8),
        dpi: int = 96,
        P: Quantity = STANDARD_PRESSURE
    ):
        self.P = P
        self.chart = LineChart(size=fig_size, dpi=dpi)
        self._create()

    def _create(self):
        P = self.P.to('Pa').m
        T_db_vec = np.linspace(*self.T_RANGE) + 273.15

        # lines of constant relative humidity
        for RH in np.arange(0.1, 1, 0.1):
            W = HAPropsSI("W", "R", RH, "P", P, "T", T_db_vec)
            self.chart.axes.plot(T_db_vec - 273.15, W, color='k', lw=0.5)

        # saturation curve
        W_sat = HAPropsSI("W", "R", 1, "P", P, "T", T_db_vec)
        self.chart.axes.plot(T_db_vec - 273.15, W_sat, color='k', lw=1.5)

        # lines of constant v_da
        for v_da in np.arange(0.76, 0.931, 0.01):
            R = np.linspace(0, 1)
            W = HAPropsSI("W", "R", R, "P", P, "Vda", v_da)
            T_db = HAPropsSI("Tdb", "R", R, "P", P, "Vda", v_da)
            self.chart.axes.plot(
                T_db - 273.15, W, color='b',
                lw=1.0 if abs(v_da % 0.05) < 0.001 else 0.3
            )

        self.chart.set_x_axis('dry bulb temperature, °C', *self.T_RANGE, step=5)
        self.chart.set_y_axis('humidity ratio, kg_H2O/kg_da', *self.W_RANGE, step=0.005)
        self.chart.axes.xaxis.set_minor_locator(MultipleLocator())
        self.chart.axes.yaxis.set_minor_locator(MultipleLocator(0.001))

    def plot_process(
        self,
        name: str,
        start_point: StatePoint | HumidAir,
        end_point: StatePoint | HumidAir,
        mix_point: StatePoint | HumidAir | None = None,
    ):
        if mix_point is not None:
            points = (start_point, mix_point, end_point)
        else:
            points = (start_point, end_point)
        x_data = [p.Tdb.to('degC').m for p in points]
        y_data = [p.W.to('kg/kg').m for p in points]

        self.chart.add_xy_data(
            label=name,
            x_values=x_data,
            y_values=y_data,
            style_props={'marker': 'o', 'color': 'orange'}
        )

        if mix_point is None:
            # arrow to show the direction of the process
            xyA = (x_data[0], y_data[0])
            xyB = (x_data[-1], y_data[-1])
            con = ConnectionPatch(
                xyA, xyB, "data", "data",
                arrowstyle="-|>", shrinkA=5, shrinkB=5, mutation_scale=20,
                color='orange', lw=2.0
            )
            self.chart.axes.add_artist(con)

    def plot_point(self, name: str, point: StatePoint | HumidAir, color: str = 'orange'):
        self.chart.add_xy_data(
            label=name,
            x_values=[point.Tdb.to('degC').m],
            y_values=[point.W.to('kg/kg').m],
            style_props={'marker': 'o', 'color': color, 'linestyle': 'none'}
        )

    def plot_line(
        self,
        name: str,
        start_point: StatePoint | HumidAir,
        end_point: StatePoint | HumidAir
    ):
        self.chart.add_xy_data(
            label=name,
            x_values=[start_point.Tdb.to('degC').m, end_point.Tdb.to('degC').m],
            y_values=[start_point.W.to('kg/kg').m, end_point.W.to('kg/kg').m],
            style_props={'color': 'orange', 'linestyle': '--'}
        )

    def show(self):
        self.chart.show()

    def save(self, name: str, location: str | None = None, fmt: str = 'png') -> str:
        return self.chart.save(name, location, fmt)

    def close(self):
        self.chart.close()
