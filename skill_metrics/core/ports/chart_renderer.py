from abc import ABC, abstractmethod
from pathlib import Path

from ..domain.metrics import MetricSeries


class ChartRenderer(ABC):
    """
    Port (interface) for turning a metric series into an image file.
    """

    @abstractmethod
    def render(self, series: MetricSeries, output_dir: Path) -> Path:
        """
        Write a chart for the series into output_dir.

        Args:
            series: Series to plot
            output_dir: Directory the image is written to

        Returns:
            Path of the written file

        Raises:
            RenderError: If timestamps cannot be parsed or the file cannot be written
        """
        pass
