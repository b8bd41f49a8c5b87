from django.test import Client, TestCase


class CorsTestCase(TestCase):
    """The browser client runs on a different origin than the API"""

    def setUp(self):
        self.client = Client()

    def test_preflight_from_allowed_origin(self):
        response = self.client.options(
            '/projects',
            HTTP_ORIGIN='http://localhost:5173',
            HTTP_ACCESS_CONTROL_REQUEST_METHOD='POST',
            HTTP_ACCESS_CONTROL_REQUEST_HEADERS='content-type',
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:5173')
        self.assertIn('POST', response['Access-Control-Allow-Methods'])
        self.assertIn('content-type', response['Access-Control-Allow-Headers'])

    def test_simple_request_carries_allow_origin(self):
        response = self.client.get('/projects', HTTP_ORIGIN='http://localhost:5173')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response['Access-Control-Allow-Origin'], 'http://localhost:5173')

    def test_unknown_origin_is_not_allowed(self):
        response = self.client.get('/projects', HTTP_ORIGIN='http://evil.example')
        self.assertNotIn('Access-Control-Allow-Origin', response)
