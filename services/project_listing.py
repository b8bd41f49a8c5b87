"""Paginated, sorted project listing built on top of ``ProjectFilter``."""

import logging
import math
from contextlib import contextmanager

from django.db import connection, transaction

from projects.serializers import FIELD_MAP, serialize_project
from services import errors

logger = logging.getLogger(__name__)

DEFAULT_SORT_BY = 'updatedAt'
DEFAULT_SORT_ORDER = 'desc'

SORTABLE_KEYS = [
    'id', 'pid', 'projectName', 'ministryDept', 'leadProgrammeManager', 'programmeManager',
    'type', 'fundAvailable', 'contractValue', 'status', 'startDate', 'completionDate',
    'isDraft', 'createdAt', 'updatedAt',
]

# The table widget sends 'ascend'/'descend'
SORT_ORDER_ALIASES = {
    'asc': 'asc',
    'desc': 'desc',
    'ascend': 'asc',
    'descend': 'desc',
}


def normalize_sort_order(sort_order):
    try:
        return SORT_ORDER_ALIASES[(sort_order or DEFAULT_SORT_ORDER).lower()]
    except KeyError:
        raise errors.ValidationError(
            'Invalid sort order',
            details=f"'{sort_order}' is not one of {', '.join(SORT_ORDER_ALIASES)}",
        )


def ordering_for(sort_by=DEFAULT_SORT_BY, sort_order=DEFAULT_SORT_ORDER):
    """Return ``order_by`` arguments for a client sort key and direction."""
    sort_by = sort_by or DEFAULT_SORT_BY
    if sort_by not in SORTABLE_KEYS:
        raise errors.ValidationError('Invalid sort field', details=f"Cannot sort by '{sort_by}'")
    field = FIELD_MAP[sort_by]
    prefix = '-' if normalize_sort_order(sort_order) == 'desc' else ''
    ordering = [prefix + field]
    if field != 'id':
        # Stable pages when many rows share the sort value
        ordering.append(prefix + 'id')
    return ordering


def ordered_projects(project_filter, sort_by=DEFAULT_SORT_BY, sort_order=DEFAULT_SORT_ORDER):
    return project_filter.apply().order_by(*ordering_for(sort_by, sort_order))


@contextmanager
def snapshot_read():
    """
    Run the enclosed queries in one transaction that sees a single snapshot.

    PostgreSQL defaults to READ COMMITTED, where every statement gets a fresh
    snapshot, so the outermost block is raised to REPEATABLE READ. SQLite
    transactions are already serializable.
    """
    outermost = not connection.in_atomic_block
    with transaction.atomic():
        if outermost and connection.vendor == 'postgresql':
            with connection.cursor() as cursor:
                cursor.execute('SET TRANSACTION ISOLATION LEVEL REPEATABLE READ')
        yield


def total_pages(total, page_size):
    return math.ceil(total / page_size) if total else 0


def list_projects(project_filter, page=1, page_size=10, sort_by=DEFAULT_SORT_BY, sort_order=DEFAULT_SORT_ORDER):
    """
    Fetch one page of projects matching ``project_filter``.

    Returns the ``{"data": [...], "meta": {...}}`` envelope. ``total`` counts
    every matching row, so a page past the end comes back empty with the same
    total.
    """
    if page < 1 or page_size < 1:
        raise errors.ValidationError('page and pageSize must be positive integers')

    queryset = ordered_projects(project_filter, sort_by, sort_order)
    skip = (page - 1) * page_size

    with snapshot_read():
        total = queryset.count()
        # Offsets past the end may not even fit the database's integer type
        rows = list(queryset[skip:skip + min(page_size, total - skip)]) if skip < total else []

    logger.debug("Listed %d of %d projects (page=%d, page_size=%d)", len(rows), total, page, page_size)
    return {
        'data': [serialize_project(p) for p in rows],
        'meta': {
            'total': total,
            'page': page,
            'pageSize': page_size,
            'totalPages': total_pages(total, page_size),
        },
    }
