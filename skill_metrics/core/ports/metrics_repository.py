from abc import ABC, abstractmethod
from typing import Optional

from ..domain.credentials import AccessToken
from ..domain.metrics import MetricName, MetricSeries, TimeWindow


class MetricsRepository(ABC):
    """
    Port (interface) for skill metrics data access.
    """

    @abstractmethod
    def get_metric(
        self,
        skill_id: str,
        metric: MetricName,
        access_token: AccessToken,
        window: Optional[TimeWindow] = None
    ) -> MetricSeries:
        """
        Fetch the daily series for one metric of one skill.

        Args:
            skill_id: Skill identifier
            metric: Metric to query
            access_token: Bearer token for the request
            window: Query window, defaults to the trailing 7 days at call time

        Returns:
            MetricSeries in the order returned by the API

        Raises:
            TransportError: If the request cannot be completed
            ExternalServiceError: If the server answers with an error status
            DecodeError: If the response body is not a metrics document
        """
        pass
