from .chart_2D import LineChart, BarChart
from .psychrometric_chart import PsychrometricChart, StatePoint
from .load_chart import plot_load_breakdown
