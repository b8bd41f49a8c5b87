from datetime import date

from django.core.management.base import BaseCommand
from django.db import transaction

from projects.models import Project

# Demo data, keyed by pid
DEFAULT_PROJECTS = [
    {
        "pid": 1001,
        "project_name": "City Center Renovation",
        "ministry_dept": "Ministry of Infrastructure",
        "type": Project.ONGOING,
        "description": "Major renovation of the city center plaza with new lighting and pavement.",
        "start_date": date(2025, 1, 15),
        "completion_date": None,
        "lead_programme_manager": "Alice Johnson",
        "programme_manager": "Bob Smith",
        "status": "Phase 1 completed. Starting phase 2 next week.",
        "contract_value": "$5,000,000",
        "fund_available": Project.FUND_YES,
    },
    {
        "pid": 1002,
        "project_name": "Rural Water Supply Phase II",
        "ministry_dept": "Ministry of Water",
        "type": Project.NEW,
        "description": "Expanding water supply network to 5 new villages in the northern district.",
        "start_date": date(2026, 3, 1),
        "completion_date": date(2026, 12, 31),
        "lead_programme_manager": "Carol White",
        "programme_manager": "David Brown",
        "status": "Initial survey and planning meeting scheduled.",
        "contract_value": "$1,200,000",
        "fund_available": Project.FUND_FUNDED,
    },
    {
        "pid": 1003,
        "project_name": "Public Library Archive Digitization",
        "ministry_dept": "Ministry of Culture",
        "type": Project.COMPLETED,
        "description": "Digitizing historical archives for public access.",
        "start_date": date(2024, 6, 1),
        "completion_date": date(2025, 1, 1),
        "lead_programme_manager": "Eve Davis",
        "programme_manager": "Frank Wilson",
        "status": "Project fully completed and handed over.",
        "contract_value": "$300,000",
        "fund_available": Project.FUND_YES,
    },
    {
        "pid": 1004,
        "project_name": "Highway X Expansion",
        "ministry_dept": "Ministry of Transport",
        "type": Project.ON_HOLD,
        "description": "Adding two lanes to the main highway connecting the capital to the port.",
        "start_date": date(2025, 2, 1),
        "completion_date": None,
        "lead_programme_manager": "Grace Lee",
        "programme_manager": "Henry Kim",
        "status": "Pending environmental impact assessment approval.",
        "contract_value": "$15,000,000",
        "fund_available": Project.FUND_NO,
    },
]


class Command(BaseCommand):
    help = "Seed demo projects (existing pids are left untouched)"

    @transaction.atomic
    def handle(self, *args, **options):
        created = 0
        for data in DEFAULT_PROJECTS:
            values = dict(data)
            pid = values.pop("pid")
            project, was_created = Project.objects.get_or_create(pid=pid, defaults=values)
            if was_created:
                created += 1
                self.stdout.write(f"Created project with id: {project.id}")
            else:
                self.stdout.write(f"Project {pid} already exists, skipped")

        self.stdout.write(self.style.SUCCESS(f"Seeding finished. Created: {created}"))
