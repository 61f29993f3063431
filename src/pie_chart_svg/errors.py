class PieChartError(Exception):
    """Base class for errors raised by pie_chart_svg."""


class ChartIOError(PieChartError):
    """An input or output stream could not be opened."""

    def __init__(self, message, path=None):
        super().__init__(message)
        self.path = path


class ChartDataError(PieChartError, ValueError):
    """Decoded chart data does not have the expected shape."""
