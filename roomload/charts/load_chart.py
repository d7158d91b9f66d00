from __future__ import annotations

from ..load_calc import LoadBreakdown
from .chart_2D import BarChart


def plot_load_breakdown(
    breakdown: LoadBreakdown,
    unit: str = 'W',
    fig_size: tuple[int, int] = (10, 6),
    dpi: int = 96
) -> BarChart:
    """Returns a bar chart with the sensible and latent cooling load per
    heat source. Call `show()` or `save()` on the returned chart.
    """
    chart = BarChart(size=fig_size, dpi=dpi)
    names = [c.name for c in breakdown.components]
    sensible = [c.sensible.to(unit).m for c in breakdown.components]
    latent = [c.latent.to(unit).m for c in breakdown.components]
    chart.add_xy_data('sensible', names, sensible, {'color': 'tab:orange'})
    chart.add_xy_data('latent', names, latent, {'color': 'tab:blue', 'bottom': sensible})
    chart.set_y_axis(f'cooling load, {unit}')
    chart.add_title(f'cooling load per heat source (total {breakdown.total.to(unit):~P.0f})')
    chart.add_legend(columns=2)
    return chart
