"""
Error handling utilities for the skill metrics reporter.
Provides the single top-level mapping from exceptions to console messages and exit codes.
"""

from typing import Callable, Dict, Type

from ..ports.exceptions import (
    SkillMetricsError,
    ConfigurationError,
    InvalidMetricError,
    TransportError,
    ExternalServiceError,
    DecodeError,
    RenderError
)
from ..ports.logger import Logger


EXIT_SUCCESS = 0
EXIT_FAILURE = 1


def configuration_error_message(exc: ConfigurationError) -> str:
    """Configuration problems are shown as the bare message."""
    return exc.message


def invalid_metric_message(exc: InvalidMetricError) -> str:
    return f"Invalid metric: {exc.message}"


def transport_error_message(exc: TransportError) -> str:
    return f"Could not reach '{exc.service_name}': {exc.details or 'unknown transport error'}"


def external_service_message(exc: ExternalServiceError) -> str:
    message = f"Service '{exc.service_name}' returned an error"
    if exc.status_code:
        message += f" (HTTP {exc.status_code})"
    if exc.details:
        message += f": {exc.details}"
    return message


def decode_error_message(exc: DecodeError) -> str:
    return f"Unexpected response from '{exc.service_name}': {exc.details}"


def render_error_message(exc: RenderError) -> str:
    return f"Chart error: {exc.message}: {exc.details}"


def skill_metrics_error_message(exc: SkillMetricsError) -> str:
    if exc.details:
        return f"{exc.message}: {exc.details}"
    return exc.message


# Looked up along the exception's MRO
ERROR_MESSAGES: Dict[Type[SkillMetricsError], Callable[[SkillMetricsError], str]] = {
    ConfigurationError: configuration_error_message,
    InvalidMetricError: invalid_metric_message,
    TransportError: transport_error_message,
    ExternalServiceError: external_service_message,
    DecodeError: decode_error_message,
    RenderError: render_error_message,
    SkillMetricsError: skill_metrics_error_message,
}


def error_message(exc: SkillMetricsError) -> str:
    """Find the message builder registered for the closest class in the exception's MRO."""
    for cls in type(exc).__mro__:
        builder = ERROR_MESSAGES.get(cls)
        if builder is not None:
            return builder(exc)
    return str(exc)


def handle_error(exc: SkillMetricsError, echo: Callable[[str], None], logger: Logger) -> int:
    """
    Report an error that aborted the run.

    Args:
        exc: Exception that ended the run
        echo: Console writer for the user-visible message
        logger: Logger receiving the diagnostic record

    Returns:
        Process exit code
    """
    message = error_message(exc)
    logger.error(message, error=type(exc).__name__)
    echo(message)
    return EXIT_FAILURE
