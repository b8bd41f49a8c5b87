"""
Dashboard aggregates over published projects.

Drafts only contribute to ``totalDrafts``. Grouped counts are sparse: a type,
funding status or month with no published projects is left out rather than
reported as zero, and the client defaults missing keys to 0.
"""

import logging

from django.conf import settings
from django.db.models import Count

from projects.models import Project
from projects.serializers import serialize_project
from services.project_listing import snapshot_read

logger = logging.getLogger(__name__)


def _published():
    # order_by() clears Meta.ordering so GROUP BY only covers the grouped field
    return Project.objects.filter(is_draft=False).order_by()


def projects_by_type(qs):
    rows = qs.values('type').annotate(total=Count('id')).order_by('type')
    return [{'type': row['type'], 'count': row['total']} for row in rows if row['total']]


def projects_by_fund(qs):
    rows = qs.values('fund_available').annotate(total=Count('id')).order_by('fund_available')
    return [{'fundAvailable': row['fund_available'], 'count': row['total']} for row in rows if row['total']]


def projects_over_time(qs):
    """Count project starts per ``YYYY-MM`` month, ascending, skipping empty months."""
    rows = (
        qs.filter(start_date__isnull=False)
        .values('start_date__year', 'start_date__month')
        .annotate(total=Count('id'))
        .order_by('start_date__year', 'start_date__month')
    )
    return [
        {'date': f"{row['start_date__year']:04d}-{row['start_date__month']:02d}", 'count': row['total']}
        for row in rows if row['total']
    ]


def recent_projects(qs, limit=None):
    limit = limit or getattr(settings, 'DASHBOARD_RECENT_LIMIT', 5)
    return [serialize_project(p) for p in qs.order_by('-updated_at', '-id')[:limit]]


def collect_dashboard_stats():
    with snapshot_read():
        published = _published()
        stats = {
            'totalProjects': published.count(),
            'totalDrafts': Project.objects.filter(is_draft=True).count(),
            'projectsByType': projects_by_type(published),
            'projectsByFund': projects_by_fund(published),
            'recentProjects': recent_projects(published),
            'projectsOverTime': projects_over_time(published),
        }
    logger.debug("Dashboard stats: %d published, %d drafts", stats['totalProjects'], stats['totalDrafts'])
    return stats
