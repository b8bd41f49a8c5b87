"""Translation between Project rows and the camelCase JSON the client speaks."""

# JSON key -> model field
FIELD_MAP = {
    'id': 'id',
    'pid': 'pid',
    'projectName': 'project_name',
    'ministryDept': 'ministry_dept',
    'leadProgrammeManager': 'lead_programme_manager',
    'programmeManager': 'programme_manager',
    'type': 'type',
    'fundAvailable': 'fund_available',
    'contractValue': 'contract_value',
    'description': 'description',
    'status': 'status',
    'startDate': 'start_date',
    'completionDate': 'completion_date',
    'isDraft': 'is_draft',
    'createdAt': 'created_at',
    'updatedAt': 'updated_at',
}

# Fields a client may write; id and timestamps are system managed
WRITABLE_KEYS = [
    'pid', 'projectName', 'ministryDept', 'leadProgrammeManager', 'programmeManager',
    'type', 'fundAvailable', 'contractValue', 'description', 'status',
    'startDate', 'completionDate', 'isDraft',
]


def _iso(value):
    return value.isoformat() if value else None


def serialize_project(project):
    return {
        'id': project.id,
        'pid': project.pid,
        'projectName': project.project_name,
        'ministryDept': project.ministry_dept,
        'leadProgrammeManager': project.lead_programme_manager,
        'programmeManager': project.programme_manager,
        'type': project.type,
        'fundAvailable': project.fund_available,
        'contractValue': project.contract_value,
        'description': project.description,
        'status': project.status,
        'startDate': _iso(project.start_date),
        'completionDate': _iso(project.completion_date),
        'isDraft': project.is_draft,
        'createdAt': _iso(project.created_at),
        'updatedAt': _iso(project.updated_at),
    }


def to_form_data(payload):
    """Map a JSON payload onto model field names.

    Unknown keys, ``id`` and the timestamps are dropped so the URL id stays
    authoritative on update.
    """
    return {FIELD_MAP[key]: value for key, value in payload.items() if key in WRITABLE_KEYS}
