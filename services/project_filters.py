"""
Query builder for project listings and exports.

Turns the flat query-string filters the client sends (search, type,
fundAvailable, isDraft) into an explicit ``ProjectFilter`` and from there into
a single ``Q`` predicate over the projects table.
"""

from dataclasses import dataclass
from typing import Optional

from django.db.models import Q

from projects.models import Project
from services import errors

# Text columns covered by the free-text search, OR-ed together
SEARCH_FIELDS = (
    'project_name',
    'ministry_dept',
    'lead_programme_manager',
    'programme_manager',
    'description',
)

DRAFT_FILTER_ALL = 'all'


def parse_draft_flag(value) -> Optional[bool]:
    """
    Interpret the ``isDraft`` query value.

    Missing or exactly ``"all"`` means no constraint. Exactly ``"true"`` selects
    drafts; any other value (``"True"`` and the empty string included) selects
    published projects.
    """
    if value is None:
        return None
    if isinstance(value, bool):
        return value
    if value == DRAFT_FILTER_ALL:
        return None
    return value == 'true'


def _choice_param(params, key, choices):
    value = params.get(key)
    if not value:
        return None
    allowed = [code for code, _label in choices]
    if value not in allowed:
        raise errors.ValidationError(
            f'Invalid {key} filter',
            details=f"'{value}' is not one of {', '.join(allowed)}",
        )
    return value


@dataclass(frozen=True)
class ProjectFilter:
    search: Optional[str] = None
    type: Optional[str] = None
    fund_available: Optional[str] = None
    is_draft: Optional[bool] = None

    @classmethod
    def from_params(cls, params):
        """Build a filter from request query parameters (a dict or QueryDict)."""
        return cls(
            search=params.get('search') or None,
            type=_choice_param(params, 'type', Project.TYPE_CHOICES),
            fund_available=_choice_param(params, 'fundAvailable', Project.FUND_CHOICES),
            is_draft=parse_draft_flag(params.get('isDraft')),
        )

    def to_q(self):
        q = Q()
        if self.search:
            search_q = Q()
            for field in SEARCH_FIELDS:
                search_q |= Q(**{f'{field}__icontains': self.search})
            q &= search_q
        if self.type:
            q &= Q(type=self.type)
        if self.fund_available:
            q &= Q(fund_available=self.fund_available)
        if self.is_draft is not None:
            q &= Q(is_draft=self.is_draft)
        return q

    def apply(self, queryset=None):
        if queryset is None:
            queryset = Project.objects.all()
        return queryset.filter(self.to_q())

    def matches(self, project) -> bool:
        """Evaluate the same predicate against an in-memory project."""
        if self.search:
            needle = self.search.lower()
            if not any(needle in (getattr(project, field) or '').lower() for field in SEARCH_FIELDS):
                return False
        if self.type and project.type != self.type:
            return False
        if self.fund_available and project.fund_available != self.fund_available:
            return False
        if self.is_draft is not None and project.is_draft != self.is_draft:
            return False
        return True
