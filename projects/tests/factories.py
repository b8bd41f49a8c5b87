"""Helpers for building Project rows in tests."""

import itertools

from projects.models import Project

_pids = itertools.count(5000)


def project_data(**overrides):
    data = {
        'pid': next(_pids),
        'project_name': 'Bridge Rehabilitation',
        'ministry_dept': 'Ministry of Works',
        'lead_programme_manager': 'Alice Johnson',
        'programme_manager': 'Bob Smith',
        'type': Project.NEW,
        'fund_available': Project.FUND_YES,
        'contract_value': '$1,000,000',
        'description': 'Repair of the river crossing.',
        'status': 'Tender evaluation under way.',
        'start_date': None,
        'completion_date': None,
        'is_draft': False,
    }
    data.update(overrides)
    return data


def make_project(**overrides):
    return Project.objects.create(**project_data(**overrides))


def api_payload(**overrides):
    """A complete create payload using the client's JSON keys."""
    payload = {
        'pid': next(_pids),
        'projectName': 'Rural Water Supply Phase II',
        'ministryDept': 'Ministry of Water',
        'leadProgrammeManager': 'Carol White',
        'programmeManager': 'David Brown',
        'type': 'NEW',
        'fundAvailable': 'FUNDED',
        'contractValue': '$1,200,000',
        'description': 'Expanding the water supply network to five villages.',
        'status': 'Initial survey scheduled.',
        'startDate': '2026-03-01',
        'completionDate': None,
        'isDraft': False,
    }
    payload.update(overrides)
    return payload
