"""Error taxonomy shared by the project services and their HTTP handlers.

Every error carries the HTTP status it maps to and renders to the JSON error
body ``{"error": ..., "details": ...}`` used across the API.
"""


class ServiceError(Exception):
    status_code = 500
    default_message = 'Internal server error'

    def __init__(self, message=None, details=None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)

    def to_dict(self):
        body = {'error': self.message}
        if self.details:
            body['details'] = self.details
        return body


class ValidationError(ServiceError):
    """Malformed request payload or query parameters."""
    status_code = 400
    default_message = 'Invalid request'


class DuplicateKey(ServiceError):
    status_code = 400
    default_message = 'A project with this PID already exists.'


class NotFound(ServiceError):
    status_code = 404
    default_message = 'Project not found'


class UpstreamError(ServiceError):
    """An export renderer or the chat model failed."""
    status_code = 500
    default_message = 'Upstream service failed'


class ConfigError(ServiceError):
    status_code = 500
    default_message = 'Service is not configured'
