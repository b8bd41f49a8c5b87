"""
Test suite for the project CRUD endpoints
"""

import json

from django.test import Client, TestCase

from projects.models import Project
from projects.tests.factories import api_payload, make_project


class ProjectApiTestCase(TestCase):
    """Create, read, update and delete through the JSON API"""

    def setUp(self):
        self.client = Client()

    def post_json(self, url, payload):
        return self.client.post(url, data=json.dumps(payload), content_type='application/json')

    def put_json(self, url, payload):
        return self.client.put(url, data=json.dumps(payload), content_type='application/json')

    def test_create_returns_201_with_record(self):
        payload = api_payload(pid=7001)
        response = self.post_json('/projects', payload)

        self.assertEqual(response.status_code, 201)
        body = response.json()
        self.assertEqual(body['pid'], 7001)
        self.assertEqual(body['projectName'], payload['projectName'])
        self.assertEqual(body['startDate'], '2026-03-01')
        self.assertIsNone(body['completionDate'])
        self.assertFalse(body['isDraft'])
        self.assertTrue(body['createdAt'])
        self.assertTrue(Project.objects.filter(pid=7001).exists())

    def test_create_defaults_is_draft_to_false(self):
        payload = api_payload()
        del payload['isDraft']
        response = self.post_json('/projects', payload)
        self.assertEqual(response.status_code, 201)
        self.assertFalse(response.json()['isDraft'])

    def test_create_with_duplicate_pid_is_rejected(self):
        existing = make_project(pid=7002, project_name='Original')
        response = self.post_json('/projects', api_payload(pid=7002, projectName='Copy'))

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {'error': 'A project with this PID already exists.'})
        self.assertEqual(Project.objects.filter(pid=7002).count(), 1)
        existing.refresh_from_db()
        self.assertEqual(existing.project_name, 'Original')

    def test_create_accepts_iso_timestamps_for_dates(self):
        payload = api_payload(startDate='2026-03-01T23:30:00-02:00', completionDate='2026-12-31T00:00:00.000Z')
        response = self.post_json('/projects', payload)

        self.assertEqual(response.status_code, 201)
        body = response.json()
        # 23:30 at UTC-2 is already the next day in UTC
        self.assertEqual(body['startDate'], '2026-03-02')
        self.assertEqual(body['completionDate'], '2026-12-31')

    def test_create_rejects_bad_date(self):
        response = self.post_json('/projects', api_payload(startDate='not a date'))
        self.assertEqual(response.status_code, 400)
        self.assertIn('startDate', response.json()['details'])

    def test_create_with_missing_fields_lists_them(self):
        response = self.post_json('/projects', {'pid': 7003})
        self.assertEqual(response.status_code, 400)
        body = response.json()
        self.assertEqual(body['error'], 'Invalid project data')
        self.assertIsInstance(body['details'], str)
        self.assertIn('projectName: This field is required.', body['details'])
        self.assertIn('fundAvailable', body['details'])
        self.assertFalse(Project.objects.filter(pid=7003).exists())

    def test_create_with_unknown_type_is_rejected(self):
        response = self.post_json('/projects', api_payload(type='ARCHIVED'))
        self.assertEqual(response.status_code, 400)
        self.assertIn('type', response.json()['details'])

    def test_invalid_json_is_400(self):
        response = self.client.post('/projects', data='{not json', content_type='application/json')
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'Invalid JSON')

    def test_non_object_body_is_400(self):
        response = self.client.post('/projects', data='[1, 2]', content_type='application/json')
        self.assertEqual(response.status_code, 400)

    def test_get_by_id(self):
        project = make_project(project_name='Library Digitization')
        response = self.client.get(f'/projects/{project.id}')
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['projectName'], 'Library Digitization')

    def test_get_missing_project_is_404(self):
        response = self.client.get('/projects/999999')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Project not found'})

    def test_partial_update_only_touches_given_fields(self):
        project = make_project(project_name='Highway Expansion', status='Pending approval', is_draft=True)
        response = self.put_json(f'/projects/{project.id}', {'status': 'Approved', 'isDraft': False})

        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body['status'], 'Approved')
        self.assertFalse(body['isDraft'])
        self.assertEqual(body['projectName'], 'Highway Expansion')
        project.refresh_from_db()
        self.assertEqual(project.project_name, 'Highway Expansion')
        self.assertEqual(project.status, 'Approved')

    def test_update_ignores_id_in_body(self):
        project = make_project()
        other = make_project()
        response = self.put_json(f'/projects/{project.id}', {'id': other.id, 'status': 'Moved'})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()['id'], project.id)
        other.refresh_from_db()
        self.assertNotEqual(other.status, 'Moved')

    def test_update_can_keep_its_own_pid(self):
        project = make_project(pid=7010)
        response = self.put_json(f'/projects/{project.id}', {'pid': 7010, 'status': 'Same pid'})
        self.assertEqual(response.status_code, 200)

    def test_update_to_taken_pid_is_rejected(self):
        make_project(pid=7020)
        project = make_project(pid=7021)
        response = self.put_json(f'/projects/{project.id}', {'pid': 7020})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()['error'], 'A project with this PID already exists.')
        project.refresh_from_db()
        self.assertEqual(project.pid, 7021)

    def test_update_missing_project_is_404(self):
        response = self.put_json('/projects/999999', {'status': 'x'})
        self.assertEqual(response.status_code, 404)

    def test_delete_then_get_is_404(self):
        project = make_project()
        response = self.client.delete(f'/projects/{project.id}')
        self.assertEqual(response.status_code, 204)
        self.assertEqual(response.content, b'')

        self.assertEqual(self.client.get(f'/projects/{project.id}').status_code, 404)
        self.assertEqual(self.client.delete(f'/projects/{project.id}').status_code, 404)

    def test_unsupported_method_is_405(self):
        self.assertEqual(self.client.patch('/projects').status_code, 405)
        project = make_project()
        self.assertEqual(self.client.post(f'/projects/{project.id}').status_code, 405)

    def test_unknown_route_is_json_404(self):
        response = self.client.get('/nowhere')
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json(), {'error': 'Not found'})
