"""
Matplotlib adapter for metric charts.
This implements the ChartRenderer port as a PNG time-series line chart.
"""

from pathlib import Path
import logging

import matplotlib.dates as mdates
from matplotlib.figure import Figure
import pandas as pd

from ...core.ports.chart_renderer import ChartRenderer
from ...core.ports.exceptions import RenderError
from ...core.domain.metrics import MetricSeries


class MatplotlibChartRenderer(ChartRenderer):
    """
    Renders one metric series per PNG file named after the metric.
    """

    PADDING_PX = 20

    def __init__(self, dpi: int = 100, width_px: int = 1024, height_px: int = 400):
        self.dpi = dpi
        self.width_px = width_px
        self.height_px = height_px
        self.logger = logging.getLogger(__name__)

    def render(self, series: MetricSeries, output_dir: Path) -> Path:
        path = Path(output_dir) / f"{series.metric}.png"

        try:
            frame = self._series_to_dataframe(series)
        except (ValueError, TypeError) as e:
            self.logger.error(f"Could not parse timestamps for {series.metric}: {e}")
            raise RenderError(str(path), e)

        figure = self._build_figure(series.metric, frame)

        try:
            with open(path, "wb") as fh:
                figure.savefig(
                    fh,
                    format="png",
                    dpi=self.dpi,
                    bbox_inches="tight",
                    pad_inches=self.PADDING_PX / self.dpi
                )
        except OSError as e:
            self.logger.error(f"Could not write chart {path}: {e}")
            raise RenderError(str(path), e)

        self.logger.info(f"Rendered {len(frame)} points to {path}")
        return path

    def _series_to_dataframe(self, series: MetricSeries) -> pd.DataFrame:
        """Convert a series to a time-indexed DataFrame, parsing RFC3339 timestamps."""
        times = pd.to_datetime(pd.Series(series.timestamps, dtype="object"), format="ISO8601", utc=True)
        # matplotlib plots naive datetime64 values natively
        times = times.dt.tz_convert(None)
        return pd.DataFrame({
            "time": times,
            "value": pd.Series(series.values, dtype="float64")
        })

    def _build_figure(self, metric: str, frame: pd.DataFrame) -> Figure:
        figure = Figure(figsize=(self.width_px / self.dpi, self.height_px / self.dpi), dpi=self.dpi)
        axes = figure.add_subplot(1, 1, 1)

        axes.plot(frame["time"], frame["value"], label=metric)
        axes.set_xlabel("Time")
        axes.set_ylabel("Value")

        if not frame.empty:
            axes.xaxis.set_major_formatter(mdates.DateFormatter("%Y-%m-%d"))
            figure.autofmt_xdate()

        return figure
