from django.test import SimpleTestCase, RequestFactory
from django.http import Http404
from django.contrib.auth.models import AnonymousUser
from apps.core.views import (
    custom_page_not_found_view,
    custom_error_view,
    custom_permission_denied_view,
    custom_bad_request_view
)

class ErrorPageTests(SimpleTestCase):
    def setUp(self):
        self.factory = RequestFactory()

    def get_request(self):
        request = self.factory.get('/missing/')
        request.user = AnonymousUser()
        return request

    def test_404_view(self):
        response = custom_page_not_found_view(self.get_request(), exception=Http404("Not Found"))
        self.assertEqual(response.status_code, 404)
        self.assertIn(b"Page Not Found", response.content)
        self.assertIn(b"Go to Admission Form", response.content)

    def test_500_view(self):
        response = custom_error_view(self.get_request())
        self.assertEqual(response.status_code, 500)
        self.assertIn(b"Internal Server Error", response.content)

    def test_403_view(self):
        response = custom_permission_denied_view(self.get_request(), exception=Exception("Forbidden"))
        self.assertEqual(response.status_code, 403)
        self.assertIn(b"Access Denied", response.content)

    def test_400_view(self):
        response = custom_bad_request_view(self.get_request(), exception=Exception("Bad Request"))
        self.assertEqual(response.status_code, 400)
        self.assertIn(b"Bad Request", response.content)
