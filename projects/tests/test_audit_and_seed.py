"""
Test suite for the project audit trail and the demo seed command
"""

from io import StringIO

from django.core.management import call_command
from django.test import TestCase

from audit.models import AuditLog
from projects.management.commands.seed_projects import DEFAULT_PROJECTS
from projects.models import Project
from projects.tests.factories import make_project


class ProjectAuditTestCase(TestCase):
    """Saving and deleting projects leaves audit entries"""

    def test_create_is_logged(self):
        project = make_project(is_draft=True)
        entry = AuditLog.objects.get(project_id=project.id)
        self.assertEqual(entry.action, 'Project created')
        self.assertEqual(entry.change_description, 'Saved as draft')
        self.assertEqual(entry.object_repr, str(project))

    def test_update_records_changed_fields(self):
        project = make_project(status='Planning')
        project.status = 'Tendering'
        project.save()

        entry = AuditLog.objects.filter(project_id=project.id, action='Project updated').get()
        self.assertIn('status: Planning -> Tendering', entry.change_description)

    def test_publishing_a_draft_is_its_own_action(self):
        project = make_project(is_draft=True)
        project.is_draft = False
        project.save()
        self.assertTrue(AuditLog.objects.filter(project_id=project.id, action='Project published').exists())

    def test_save_without_changes_is_not_logged(self):
        project = make_project()
        project.save()
        self.assertEqual(AuditLog.objects.filter(project_id=project.id).count(), 1)

    def test_delete_is_logged(self):
        project = make_project()
        project_id = project.id
        project.delete()
        self.assertTrue(AuditLog.objects.filter(project_id=project_id, action='Project deleted').exists())


class SeedProjectsCommandTestCase(TestCase):

    def test_seed_creates_demo_projects(self):
        out = StringIO()
        call_command('seed_projects', stdout=out)

        self.assertEqual(Project.objects.count(), len(DEFAULT_PROJECTS))
        self.assertIn(f'Created: {len(DEFAULT_PROJECTS)}', out.getvalue())
        highway = Project.objects.get(pid=1004)
        self.assertEqual(highway.type, Project.ON_HOLD)
        self.assertFalse(highway.is_draft)

    def test_seed_is_idempotent(self):
        call_command('seed_projects', stdout=StringIO())
        Project.objects.filter(pid=1001).update(status='Edited by hand')

        out = StringIO()
        call_command('seed_projects', stdout=out)

        self.assertEqual(Project.objects.count(), len(DEFAULT_PROJECTS))
        self.assertIn('Created: 0', out.getvalue())
        self.assertEqual(Project.objects.get(pid=1001).status, 'Edited by hand')
