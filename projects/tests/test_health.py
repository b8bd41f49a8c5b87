from unittest import mock

from django.db import OperationalError
from django.test import Client, TestCase


class HealthCheckTestCase(TestCase):

    def setUp(self):
        self.client = Client()

    def test_health_ok(self):
        response = self.client.get('/health')
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['status'], 'ok')
        self.assertEqual(body['database'], 'ok')
        self.assertTrue(body['timestamp'])

    def test_health_degraded_when_database_fails(self):
        with mock.patch('config.views.connection') as conn:
            conn.cursor.side_effect = OperationalError('could not connect')
            response = self.client.get('/health')

        self.assertEqual(response.status_code, 503)
        self.assertEqual(response.json()['status'], 'degraded')

    def test_response_carries_request_id(self):
        response = self.client.get('/health', HTTP_X_REQUEST_ID='abc-123')
        self.assertEqual(response['X-Request-ID'], 'abc-123')

    def test_health_only_allows_get(self):
        self.assertEqual(self.client.post('/health').status_code, 405)
