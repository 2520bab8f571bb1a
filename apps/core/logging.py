import logging
import threading


_request_context = threading.local()


def set_current_request_id(request_id):
    _request_context.request_id = request_id


def get_current_request_id():
    return getattr(_request_context, 'request_id', None)


def clear_current_request_id():
    if hasattr(_request_context, 'request_id'):
        del _request_context.request_id


class RequestContextFilter(logging.Filter):
    """
    Logging filter to add request context to log records
    """
    def filter(self, record):
        record.request_id = get_current_request_id() or '-'
        return True


def get_logger(name):
    """
    Get a logger instance with request context
    """
    logger = logging.getLogger(name)

    # Add request context filter if not already present
    if not any(isinstance(f, RequestContextFilter) for f in logger.filters):
        logger.addFilter(RequestContextFilter())

    return logger
