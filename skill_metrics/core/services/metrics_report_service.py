"""
Metrics report service.
Orchestrates token exchange, metric retrieval, console output and chart rendering for one run.
"""

from pathlib import Path
from typing import Callable, Iterable, List, Optional

from ..ports.token_provider import TokenProvider
from ..ports.metrics_repository import MetricsRepository
from ..ports.chart_renderer import ChartRenderer
from ..ports.logger import Logger
from ..ports.exceptions import InvalidMetricError
from ..domain.credentials import AccessToken, Credentials
from ..domain.metrics import MetricName, MetricSeries


def format_value(value: float) -> str:
    """Render whole numbers without a trailing '.0'."""
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


class MetricsReportService:
    """
    Runs the report sequence: authenticate once, then fetch, print and
    optionally chart each metric in turn. Any error aborts the run.
    """

    def __init__(
        self,
        token_provider: TokenProvider,
        metrics_repository: MetricsRepository,
        chart_renderer: Optional[ChartRenderer] = None,
        output_dir: Optional[Path] = None,
        echo: Callable[[str], None] = print,
        logger: Optional[Logger] = None,
        show_token: bool = True
    ):
        """
        Initialize the report service with its dependencies.

        Args:
            token_provider: Exchanges credentials for an access token
            metrics_repository: Source of metric series
            chart_renderer: Chart renderer, or None to skip charts
            output_dir: Directory for charts, required when a renderer is given
            echo: Console writer for human readable output
            logger: Logger for diagnostics
            show_token: Print the full access token instead of a masked one
        """
        if chart_renderer is not None and output_dir is None:
            raise ValueError("output_dir is required when a chart renderer is configured")

        self.token_provider = token_provider
        self.metrics_repository = metrics_repository
        self.chart_renderer = chart_renderer
        self.output_dir = output_dir
        self.echo = echo
        self.logger = logger
        self.show_token = show_token

    @staticmethod
    def resolve_metrics(names: Optional[Iterable[str]] = None) -> List[MetricName]:
        """
        Turn metric names into MetricName values.
        No names means every supported metric. Repeated names are dropped, keeping first occurrence order.

        Raises:
            InvalidMetricError: If a name is not a supported metric
        """
        if not names:
            return list(MetricName)

        resolved = []
        for name in names:
            try:
                metric = MetricName(name)
            except ValueError:
                raise InvalidMetricError(name, MetricName.supported())
            if metric not in resolved:
                resolved.append(metric)
        return resolved

    def authenticate(self, credentials: Credentials) -> AccessToken:
        self.echo("Get the LWA access token")
        token = self.token_provider.get_access_token(credentials)

        # Full token unless masking was requested
        shown = token.access_token if self.show_token else token.masked()
        self.echo(f"LWA Access Token {shown}")
        return token

    def report_metric(self, skill_id: str, metric: MetricName, access_token: AccessToken) -> MetricSeries:
        """Fetch one metric, print its values and render its chart when enabled."""
        series = self.metrics_repository.get_metric(skill_id, metric, access_token)

        self.echo(f"Number of {series.metric} on each day last week")
        for timestamp, value in series.points:
            self.echo(f"{timestamp} {format_value(value)}")

        if self.chart_renderer is not None:
            path = self.chart_renderer.render(series, self.output_dir)
            self.echo(str(path))

        return series

    def run(self, credentials: Credentials, skill_id: str, metrics: Iterable[MetricName]) -> List[MetricSeries]:
        """
        Execute a full report run.

        Args:
            credentials: LWA credentials
            skill_id: Skill to report on
            metrics: Metrics to fetch, in order

        Returns:
            The fetched series, in request order
        """
        metrics = list(metrics)
        if self.logger:
            self.logger.info("Starting metrics report", skill_id=skill_id, metrics=len(metrics))

        token = self.authenticate(credentials)

        results = []
        for metric in metrics:
            results.append(self.report_metric(skill_id, metric, token))

        if self.logger:
            self.logger.info("Metrics report finished", metrics=len(results))
        return results
