from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Iterable
import os
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure
from matplotlib.axes import Axes


@dataclass
class Legend:
    axes: Axes
    anchor: str = 'upper center'
    position: tuple[float, float] = (0.5, -0.1)
    columns: int = 2

    def draw(self):
        handles, labels = self.axes.get_legend_handles_labels()
        self.axes.legend(
            handles, labels,
            loc=self.anchor, ncol=self.columns, bbox_to_anchor=self.position
        )


class Chart(ABC):
    """Thin wrapper around a matplotlib figure with a single pair of axes.
    Data sets are collected first with `add_xy_data` and only drawn when the
    chart is drawn, shown or saved.
    """

    def __init__(
        self,
        size: tuple[float, float] | None = None,
        dpi: int | None = None,
        constructs: tuple[Figure, Axes] | None = None
    ):
        if constructs is not None:
            self.figure, self.axes = constructs
        else:
            self.figure, self.axes = plt.subplots(
                figsize=size,
                dpi=dpi,
                layout='constrained'
            )
        self.datasets: dict[str, dict[str, Any]] = {}
        self.legend: Legend | None = None

    def add_xy_data(
        self,
        label: str,
        x_values: Iterable | np.ndarray,
        y_values: Iterable | np.ndarray,
        style_props: dict[str, Any] | None = None
    ):
        """Add x- and y- data to the chart for drawing.

        `style_props` can be a dictionary with values for properties that
        style the plot (e.g. {'marker': 'o', 'linestyle': 'none'}).
        """
        self.datasets[label] = {
            'x_values': x_values,
            'y_values': y_values,
            'style_props': style_props or {}
        }

    @abstractmethod
    def _draw_xy_data(self):
        pass

    def add_legend(
        self,
        anchor: str = 'upper center',
        position: tuple[float, float] = (0.5, -0.1),
        columns: int = 2
    ):
        """Add legend to chart.

        Parameters
        ----------
        anchor: {'upper left', 'upper center', 'upper right', 'center right',
                 'lower right', 'lower center', 'lower left', 'center left',
                 'center', 'best'}
            Reference point on the border of the legend for positioning the
            legend on the chart.
        position:
            Tuple with x and y coordinates of the anchor position with respect
            to the origin of the axes. By default, the legend is positioned at
            the bottom and at the center of the chart, under the x-axis.
        columns:
            Number of label columns the legend list is to be divided in.
        """
        self.legend = Legend(self.axes, anchor, position, columns)

    def add_title(self, title: str):
        self.axes.set_title(title)

    def set_x_axis(
        self,
        title: str,
        lower_limit: float | None = None,
        upper_limit: float | None = None,
        step: float | None = None
    ):
        self.axes.set_xlabel(title)
        if lower_limit is not None and upper_limit is not None:
            self.axes.set_xlim(lower_limit, upper_limit)
            if step is not None:
                self.axes.set_xticks(np.arange(lower_limit, upper_limit + step, step))

    def set_y_axis(
        self,
        title: str,
        lower_limit: float | None = None,
        upper_limit: float | None = None,
        step: float | None = None
    ):
        self.axes.set_ylabel(title)
        if lower_limit is not None and upper_limit is not None:
            self.axes.set_ylim(lower_limit, upper_limit)
            if step is not None:
                self.axes.set_yticks(np.arange(lower_limit, upper_limit + step, step))

    def draw(self, with_grid: bool = True):
        """Only draw the chart (but don't show it)."""
        self._draw_xy_data()
        if self.legend:
            self.legend.draw()
        self.axes.grid(with_grid)

    def show(self, with_grid: bool = True):
        """Draw and show the chart."""
        self.draw(with_grid)
        plt.show()

    def save(
        self,
        name: str,
        location: str | None = None,
        fmt: str = 'png',
        with_grid: bool = True
    ) -> str:
        """Draw and save the chart on disk. Returns the path of the file."""
        self.draw(with_grid)
        location = location or os.getcwd()
        path = os.path.join(location, f'{name}.{fmt}')
        self.figure.savefig(path, bbox_inches='tight')
        plt.close(self.figure)
        return path

    def close(self):
        plt.close(self.figure)


class LineChart(Chart):

    def _draw_xy_data(self):
        for label, dataset in self.datasets.items():
            self.axes.plot(
                dataset['x_values'],
                dataset['y_values'],
                label=label,
                **dataset['style_props']
            )


class BarChart(Chart):

    def _draw_xy_data(self):
        for label, dataset in self.datasets.items():
            self.axes.bar(
                dataset['x_values'],
                dataset['y_values'],
                label=label,
                **dataset['style_props']
            )
