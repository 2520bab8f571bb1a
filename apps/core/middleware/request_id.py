import time
import uuid

from django.utils.deprecation import MiddlewareMixin

from apps.core.logging import (
    clear_current_request_id,
    get_logger,
    set_current_request_id,
)

logger = get_logger(__name__)


class RequestIDMiddleware(MiddlewareMixin):
    """
    Tags every request with an id that log records and the response carry
    """

    header_name = 'X-Request-ID'

    def __init__(self, get_response):
        super().__init__(get_response)
        self.skip_paths = [
            '/static/',
            '/media/',
            '/favicon.ico',
        ]

    def process_request(self, request):
        """Add request ID to request object"""
        incoming = request.META.get('HTTP_X_REQUEST_ID', '')
        request.request_id = incoming[:32] if incoming else uuid.uuid4().hex
        request._request_start_time = time.time()
        set_current_request_id(request.request_id)
        return None

    def process_response(self, request, response):
        request_id = getattr(request, 'request_id', None)
        if request_id:
            response[self.header_name] = request_id

        if not any(request.path.startswith(path) for path in self.skip_paths):
            duration_ms = None
            if hasattr(request, '_request_start_time'):
                duration_ms = (time.time() - request._request_start_time) * 1000
            if request.method == 'POST' or response.status_code >= 400:
                logger.info(
                    "%s %s -> %s (%.1f ms)",
                    request.method,
                    request.path,
                    response.status_code,
                    duration_ms or 0.0,
                )

        clear_current_request_id()
        return response

    def process_exception(self, request, exception):
        """Log exceptions separately"""
        logger.error(
            "Unhandled %s on %s %s",
            exception.__class__.__name__,
            request.method,
            request.path,
            exc_info=True,
        )
        return None
