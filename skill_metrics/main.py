"""
Main entry point for the skill metrics reporter.
Builds the adapters once, runs the report and maps failures to an exit code.
"""

from typing import List, Optional

import httpx
import typer

from .core.services.metrics_report_service import MetricsReportService
from .core.ports.exceptions import SkillMetricsError
from .adapters.http.client import create_http_client
from .adapters.auth.lwa_token_client import LwaTokenClient
from .adapters.repositories.smapi_repository import SmapiMetricsRepository
from .adapters.charts.matplotlib_renderer import MatplotlibChartRenderer

# Import configuration
from .core.config.config import Config, configure_logging, logger

# Import error handling
from .core.util.errorhandling import handle_error


app = typer.Typer(
    name="skill-metrics",
    help="Fetch last week's Alexa skill metrics from SMAPI and chart them.",
    add_completion=False,
)


def build_service(
    config: Config,
    http_client: httpx.Client,
    charts: bool = True,
    use_utc: bool = False,
    show_token: bool = True
) -> MetricsReportService:
    """Wire the report service with adapters sharing one HTTP client."""
    return MetricsReportService(
        token_provider=LwaTokenClient(http_client, config.LWA_TOKEN_URL),
        metrics_repository=SmapiMetricsRepository(http_client, config.SMAPI_BASE_URL, use_utc=use_utc),
        chart_renderer=MatplotlibChartRenderer() if charts else None,
        output_dir=config.deploy_path if charts else None,
        echo=typer.echo,
        logger=logger,
        show_token=show_token
    )


@app.command()
def report(
    metric: Optional[List[str]] = typer.Option(
        None,
        "--metric",
        "-m",
        help="Metric to fetch; repeat for several. Defaults to every supported metric.",
    ),
    no_chart: bool = typer.Option(
        False,
        "--no-chart",
        help="Only print values; BITRISE_DEPLOY_DIR is not required.",
    ),
    utc: Optional[bool] = typer.Option(
        None,
        "--utc/--local-time",
        help="Clock used for the query window. Defaults to METRICS_USE_UTC, else local time.",
    ),
    hide_token: bool = typer.Option(
        False,
        "--hide-token",
        help="Mask the access token in console output.",
    ),
) -> None:
    """Print the daily values of each metric for the last 7 days and render PNG charts."""
    try:
        config = Config()
        config.validate(require_deploy_dir=not no_chart)
        configure_logging(config.LOG_LEVEL)
        metrics = MetricsReportService.resolve_metrics(metric)
        use_utc = config.METRICS_USE_UTC if utc is None else utc

        with create_http_client(config.HTTP_TIMEOUT) as http_client:
            service = build_service(
                config,
                http_client,
                charts=not no_chart,
                use_utc=use_utc,
                show_token=not hide_token
            )
            service.run(config.credentials, config.SKILL_ID, metrics)
    except SkillMetricsError as exc:
        raise typer.Exit(code=handle_error(exc, typer.echo, logger))


if __name__ == "__main__":
    app()
