"""
Test configuration and fixtures for unit tests.
"""

import sys
from pathlib import Path

# Add project root directory to Python path so the skill_metrics package can be found
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))

import json
import pytest
from unittest.mock import MagicMock

import httpx

from skill_metrics.core.domain.credentials import AccessToken, Credentials
from skill_metrics.core.domain.metrics import MetricSeries
from skill_metrics.core.ports.token_provider import TokenProvider
from skill_metrics.core.ports.metrics_repository import MetricsRepository
from skill_metrics.core.ports.chart_renderer import ChartRenderer
from skill_metrics.core.ports.logger import Logger


@pytest.fixture
def credentials():
    """Fixture providing LWA credentials."""
    return Credentials(
        client_id="amzn1.application-oa2-client.test",
        client_secret="test-secret",
        refresh_token="Atzr|test-refresh"
    )


@pytest.fixture
def access_token():
    """Fixture providing a decoded access token."""
    return AccessToken(
        access_token="Atza|test-access",
        expires_in=3600,
        token_type="bearer",
        refresh_token="Atzr|rotated"
    )


@pytest.fixture
def sample_series():
    """Fixture providing a two-day metric series."""
    return MetricSeries(
        metric="uniqueCustomers",
        timestamps=["2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"],
        values=[3.0, 5.0]
    )


@pytest.fixture
def token_body():
    """JSON body returned by the LWA token endpoint."""
    return {
        "access_token": "Atza|test-access",
        "expires_in": 3600,
        "token_type": "bearer",
        "refresh_token": "Atzr|rotated"
    }


@pytest.fixture
def metrics_body():
    """JSON body returned by the SMAPI metrics endpoint."""
    return {
        "metric": "uniqueCustomers",
        "timestamps": ["2024-01-01T00:00:00Z", "2024-01-02T00:00:00Z"],
        "values": [3.0, 5.0]
    }


@pytest.fixture
def recorded_requests():
    """List collecting every request seen by the mock transport."""
    return []


@pytest.fixture
def mock_transport(recorded_requests, token_body, metrics_body):
    """
    httpx transport answering the token and metrics endpoints.
    The metrics response echoes the requested metric name.
    """
    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        if request.method == "POST" and request.url.path == "/auth/o2/token":
            return httpx.Response(200, json=token_body)
        if request.method == "GET" and request.url.path.endswith("/metrics"):
            body = dict(metrics_body, metric=request.url.params["metric"])
            return httpx.Response(200, content=json.dumps(body).encode())
        return httpx.Response(404, text="not found")

    return httpx.MockTransport(handler)


@pytest.fixture
def http_client(mock_transport):
    """HTTP client wired to the mock transport."""
    with httpx.Client(transport=mock_transport) as client:
        yield client


@pytest.fixture
def mock_token_provider(access_token):
    """Fixture providing a mock TokenProvider."""
    mock_provider = MagicMock(spec=TokenProvider)
    mock_provider.get_access_token.return_value = access_token
    return mock_provider


@pytest.fixture
def mock_metrics_repository(sample_series):
    """Fixture providing a mock MetricsRepository."""
    mock_repo = MagicMock(spec=MetricsRepository)
    mock_repo.get_metric.return_value = sample_series
    return mock_repo


@pytest.fixture
def mock_chart_renderer():
    """Fixture providing a mock ChartRenderer."""
    mock_renderer = MagicMock(spec=ChartRenderer)
    mock_renderer.render.side_effect = lambda series, output_dir: Path(output_dir) / f"{series.metric}.png"
    return mock_renderer


@pytest.fixture
def mock_logger():
    """Fixture providing a mock Logger."""
    return MagicMock(spec=Logger)


@pytest.fixture
def valid_env(monkeypatch, tmp_path):
    """Populate every environment variable a charted run needs."""
    values = {
        "lwa_client_id": "amzn1.application-oa2-client.test",
        "lwa_client_secret": "test-secret",
        "lwa_refresh_token": "Atzr|test-refresh",
        "custom_skill_id": "amzn1.ask.skill.test",
        "BITRISE_DEPLOY_DIR": str(tmp_path),
    }
    for key in ("LWA_TOKEN_URL", "SMAPI_BASE_URL", "HTTP_TIMEOUT", "METRICS_USE_UTC", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)
    for key, value in values.items():
        monkeypatch.setenv(key, value)
    return values
