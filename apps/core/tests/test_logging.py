import logging

from django.http import HttpResponse
from django.test import RequestFactory, SimpleTestCase

from apps.core.logging import (
    RequestContextFilter,
    clear_current_request_id,
    get_current_request_id,
    get_logger,
    set_current_request_id,
)
from apps.core.middleware.request_id import RequestIDMiddleware


class RequestContextFilterTests(SimpleTestCase):
    def tearDown(self):
        clear_current_request_id()

    def make_record(self):
        return logging.LogRecord('apps.test', logging.INFO, __file__, 1, 'message', None, None)

    def test_record_without_request(self):
        record = self.make_record()
        self.assertTrue(RequestContextFilter().filter(record))
        self.assertEqual(record.request_id, '-')

    def test_record_inside_request(self):
        set_current_request_id('abc123')
        record = self.make_record()
        RequestContextFilter().filter(record)
        self.assertEqual(record.request_id, 'abc123')

    def test_get_logger_adds_filter_once(self):
        logger = get_logger('apps.test.filter')
        get_logger('apps.test.filter')
        filters = [f for f in logger.filters if isinstance(f, RequestContextFilter)]
        self.assertEqual(len(filters), 1)


class RequestIDMiddlewareTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()
        self.seen_ids = []

        def get_response(request):
            self.seen_ids.append(get_current_request_id())
            return HttpResponse('ok')

        self.middleware = RequestIDMiddleware(get_response)

    def test_generates_request_id(self):
        response = self.middleware(self.factory.get('/'))
        request_id = response['X-Request-ID']
        self.assertEqual(len(request_id), 32)
        self.assertEqual(self.seen_ids, [request_id])
        # Cleared once the response is out
        self.assertIsNone(get_current_request_id())

    def test_keeps_incoming_request_id(self):
        request = self.factory.get('/', HTTP_X_REQUEST_ID='upstream-id')
        response = self.middleware(request)
        self.assertEqual(response['X-Request-ID'], 'upstream-id')

    def test_truncates_long_incoming_id(self):
        request = self.factory.get('/', HTTP_X_REQUEST_ID='x' * 100)
        response = self.middleware(request)
        self.assertEqual(response['X-Request-ID'], 'x' * 32)

    def test_logs_posts(self):
        with self.assertLogs('apps.core.middleware.request_id', level='INFO') as logs:
            self.middleware(self.factory.post('/'))
        self.assertIn('POST / -> 200', logs.output[0])

    def test_skips_static_paths(self):
        with self.assertNoLogs('apps.core.middleware.request_id', level='INFO'):
            self.middleware(self.factory.post('/static/app.css'))
