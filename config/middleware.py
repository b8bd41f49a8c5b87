import logging
import time
import uuid

logger = logging.getLogger(__name__)


class RequestLogMiddleware:
    """Tag each request with an X-Request-ID and log one line when it completes."""

    def __init__(self, get_response):
        self.get_response = get_response

    def __call__(self, request):
        request_id = str(request.headers.get('X-Request-ID') or uuid.uuid4().hex[:12])
        request.request_id = request_id
        start = time.perf_counter()
        response = self.get_response(request)
        elapsed_ms = (time.perf_counter() - start) * 1000
        response['X-Request-ID'] = request_id
        logger.info(
            "method=%s path=%s status=%s elapsed_ms=%.1f rid=%s",
            request.method, request.path, response.status_code, elapsed_ms, request_id,
        )
        return response
