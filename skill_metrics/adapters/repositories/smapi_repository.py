"""
SMAPI adapter for skill metrics access.
This implements the MetricsRepository port against the Alexa Skill Management API.
"""

from typing import Optional
import logging

import httpx
from pydantic import ValidationError

from ...core.ports.metrics_repository import MetricsRepository
from ...core.ports.exceptions import DecodeError, ExternalServiceError, TransportError
from ...core.domain.credentials import AccessToken
from ...core.domain.metrics import MetricName, MetricSeries, TimeWindow
from ..models import MetricsResponseModel


class SmapiMetricsRepository(MetricsRepository):
    """
    SMAPI adapter that implements the MetricsRepository port.
    Queries daily live-stage metrics for a custom skill in the en-US locale.
    """

    SERVICE_NAME = "SMAPI"
    PERIOD = "P1D"
    STAGE = "live"
    SKILL_TYPE = "custom"
    LOCALE = "en-US"
    WINDOW_DAYS = 7

    def __init__(self, http_client: httpx.Client, base_url: str, use_utc: bool = False):
        """
        Initialize the SMAPI repository.

        Args:
            http_client: Shared HTTP client for the run
            base_url: SMAPI host, e.g. 'https://api.amazonalexa.com'
            use_utc: Read the clock in UTC instead of local time when building windows
        """
        self.http_client = http_client
        self.base_url = base_url.rstrip("/")
        self.use_utc = use_utc
        self.logger = logging.getLogger(__name__)

    def get_metric(
        self,
        skill_id: str,
        metric: MetricName,
        access_token: AccessToken,
        window: Optional[TimeWindow] = None
    ) -> MetricSeries:
        # Anchored at call time, so each metric gets its own window
        if window is None:
            window = TimeWindow.trailing(days=self.WINDOW_DAYS, use_utc=self.use_utc)

        url = self.build_metrics_url(skill_id, window, metric)
        self.logger.info(f"Fetching metric {MetricName(metric).value} for skill {skill_id}")
        self.logger.debug(f"SMAPI metrics URL: {url}")

        try:
            response = self.http_client.get(
                url,
                headers={"Authorization": access_token.authorization_header}
            )
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            self.logger.error(f"SMAPI metrics request failed: {e!r}")
            raise TransportError(self.SERVICE_NAME, e)

        if response.is_error:
            self.logger.error(f"SMAPI metrics request returned HTTP {response.status_code}")
            raise ExternalServiceError(self.SERVICE_NAME, response.status_code, response.text)

        try:
            series = MetricsResponseModel.model_validate_json(response.content).to_domain()
        except (ValidationError, ValueError) as e:
            self.logger.error(f"Error decoding SMAPI metrics response: {e}")
            raise DecodeError(self.SERVICE_NAME, e)

        self.logger.info(f"Successfully fetched {len(series)} data points for {series.metric}")
        return series

    def build_metrics_url(self, skill_id: str, window: TimeWindow, metric: MetricName) -> str:
        """Build the metrics query URL. Parameters are embedded verbatim, without URL encoding."""
        return (
            f"{self.base_url}/v1/skills/{skill_id}/metrics"
            f"?startTime={window.start_time}"
            f"&endTime={window.end_time}"
            f"&period={self.PERIOD}"
            f"&metric={MetricName(metric).value}"
            f"&stage={self.STAGE}"
            f"&skillType={self.SKILL_TYPE}"
            f"&locale={self.LOCALE}"
        )
