"""
Custom exceptions for the skill metrics reporter.
Core components raise these; only the top-level handler turns them into an exit code.
"""


class SkillMetricsError(Exception):
    """Base exception for skill metrics errors."""

    def __init__(self, message: str, details: str = None):
        self.message = message
        self.details = details
        super().__init__(message)


class ConfigurationError(SkillMetricsError):
    """Raised when a required configuration value is missing or invalid."""

    def __init__(self, message: str, variable: str = None):
        self.variable = variable
        details = f"environment variable '{variable}'" if variable else None
        super().__init__(message, details)


class InvalidMetricError(SkillMetricsError):
    """Raised when an unsupported metric is requested."""

    def __init__(self, metric_name: str, supported_metrics: list = None):
        self.metric_name = metric_name
        self.supported_metrics = supported_metrics
        message = f"Metric '{metric_name}' is not supported"
        if supported_metrics:
            message += f". Supported metrics: {', '.join(supported_metrics)}"
        super().__init__(message)


class RepositoryError(SkillMetricsError):
    """Raised when a remote data source cannot be read."""

    def __init__(self, message: str, source_error: Exception = None):
        self.source_error = source_error
        details = str(source_error) if source_error else None
        super().__init__(message, details)


class TransportError(RepositoryError):
    """Raised on DNS, connection, timeout or read failures talking to a remote service."""

    def __init__(self, service_name: str, source_error: Exception = None):
        self.service_name = service_name
        super().__init__(f"Request to '{service_name}' failed", source_error)


class ExternalServiceError(RepositoryError):
    """Raised when a remote service answers with a non-success HTTP status."""

    def __init__(self, service_name: str, status_code: int = None, response_body: str = None):
        self.service_name = service_name
        self.status_code = status_code
        self.response_body = response_body

        message = f"External service '{service_name}' error"
        if status_code:
            message += f" (HTTP {status_code})"

        super().__init__(message)
        self.details = response_body if response_body else None


class DecodeError(RepositoryError):
    """Raised when a response body cannot be decoded into the expected shape."""

    def __init__(self, service_name: str, source_error: Exception = None):
        self.service_name = service_name
        super().__init__(f"Could not decode response from '{service_name}'", source_error)


class RenderError(SkillMetricsError):
    """Raised when a chart cannot be built or written."""

    def __init__(self, path: str, source_error: Exception = None):
        self.path = path
        self.source_error = source_error
        details = str(source_error) if source_error else None
        super().__init__(f"Failed to render chart '{path}'", details)
