"""Chart parameters module

Defines the data structures for chart rendering requests.
"""

from lilygraph.graph_params.params import ChartData, ChartOptions, Margin, ViewBox

__all__ = ["ChartData", "ChartOptions", "Margin", "ViewBox"]
