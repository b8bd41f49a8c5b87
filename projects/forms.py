import datetime

from dateutil import parser as date_parser
from django import forms
from django.conf import settings

from .models import Project
from services.chat import CHAT_ROLES
from services.project_listing import DEFAULT_SORT_BY, DEFAULT_SORT_ORDER, SORTABLE_KEYS, SORT_ORDER_ALIASES


class IsoDateField(forms.DateField):
    """Date field that also takes the full ISO timestamps the date picker sends.

    Aware timestamps are converted to UTC before the date is taken.
    """

    def to_python(self, value):
        if value in self.empty_values:
            return None
        if isinstance(value, datetime.datetime):
            parsed = value
        elif isinstance(value, datetime.date):
            return value
        else:
            try:
                parsed = date_parser.isoparse(str(value).strip())
            except (ValueError, OverflowError):
                raise forms.ValidationError(self.error_messages['invalid'], code='invalid')
        if parsed.tzinfo is not None:
            parsed = parsed.astimezone(datetime.timezone.utc)
        return parsed.date()


class ProjectForm(forms.ModelForm):
    """Validates create and update payloads (already mapped to model field names).

    With ``partial=True`` only the fields present in the payload are validated
    and written, everything else on the instance is left alone.
    """

    start_date = IsoDateField(required=False)
    completion_date = IsoDateField(required=False)

    class Meta:
        model = Project
        fields = [
            'pid', 'project_name', 'ministry_dept', 'lead_programme_manager', 'programme_manager',
            'type', 'fund_available', 'contract_value', 'description', 'status',
            'start_date', 'completion_date', 'is_draft',
        ]

    def __init__(self, *args, partial=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.partial = partial
        if partial:
            for name in list(self.fields):
                if name not in self.data:
                    del self.fields[name]

    def has_duplicate_pid(self):
        return any(error.code == 'unique' for error in self.errors.as_data().get('pid', []))


class ProjectListQueryForm(forms.Form):
    """Paging and sorting parameters shared by the listing and the exports."""

    page = forms.IntegerField(min_value=1, required=False)
    pageSize = forms.IntegerField(min_value=1, required=False)
    sortBy = forms.ChoiceField(choices=[(key, key) for key in SORTABLE_KEYS], required=False)
    sortOrder = forms.ChoiceField(choices=[(key, key) for key in SORT_ORDER_ALIASES], required=False)

    def sort_kwargs(self):
        return {
            'sort_by': self.cleaned_data.get('sortBy') or DEFAULT_SORT_BY,
            'sort_order': self.cleaned_data.get('sortOrder') or DEFAULT_SORT_ORDER,
        }

    def listing_kwargs(self):
        kwargs = self.sort_kwargs()
        kwargs['page'] = self.cleaned_data.get('page') or 1
        kwargs['page_size'] = self.cleaned_data.get('pageSize') or settings.PROJECTS_DEFAULT_PAGE_SIZE
        return kwargs


class ChatRequestForm(forms.Form):
    message = forms.CharField()
    history = forms.JSONField(required=False)

    def clean_history(self):
        history = self.cleaned_data.get('history') or []
        if not isinstance(history, list):
            raise forms.ValidationError('History must be a list of turns.', code='invalid')
        for turn in history:
            if not isinstance(turn, dict) or turn.get('role') not in CHAT_ROLES:
                raise forms.ValidationError(
                    "Each history turn needs a role of 'user' or 'model'.", code='invalid')
            parts = turn.get('parts')
            if not isinstance(parts, list) or not all(
                isinstance(part, dict) and isinstance(part.get('text'), str) for part in parts
            ):
                raise forms.ValidationError('Each history turn needs a list of text parts.', code='invalid')
        return history
