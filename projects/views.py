import logging
from io import BytesIO

from django.db import IntegrityError, transaction
from django.http import HttpResponse, JsonResponse

from .forms import ChatRequestForm, ProjectForm, ProjectListQueryForm
from .http import api_view, form_errors, parse_json_body
from .models import Project
from .serializers import serialize_project, to_form_data
from services import errors, exports, project_listing
from services.chat import ChatRelay
from services.project_filters import ProjectFilter

logger = logging.getLogger(__name__)


def _listing_params(request):
    project_filter = ProjectFilter.from_params(request.GET)
    form = ProjectListQueryForm(request.GET)
    if not form.is_valid():
        raise errors.ValidationError('Invalid query parameters', details=form_errors(form))
    return project_filter, form


def _get_project(pk):
    try:
        return Project.objects.get(pk=pk)
    except Project.DoesNotExist:
        raise errors.NotFound()


def _save_project(form):
    """Validate and save a ProjectForm, mapping pid collisions to DuplicateKey."""
    if not form.is_valid():
        if form.has_duplicate_pid():
            raise errors.DuplicateKey()
        raise errors.ValidationError('Invalid project data', details=form_errors(form))
    try:
        with transaction.atomic():
            return form.save()
    except IntegrityError:
        # Lost a race with a concurrent insert of the same pid
        pid = form.cleaned_data.get('pid')
        if pid is not None and Project.objects.filter(pid=pid).exclude(pk=form.instance.pk).exists():
            raise errors.DuplicateKey()
        raise


@api_view({'GET': 'Failed to fetch projects', 'POST': 'Failed to create project'})
def project_collection(request):
    if request.method == 'POST':
        form = ProjectForm(to_form_data(parse_json_body(request)))
        project = _save_project(form)
        logger.info("Project %s created (id=%s, draft=%s)", project.pid, project.id, project.is_draft)
        return JsonResponse(serialize_project(project), status=201)

    project_filter, form = _listing_params(request)
    return JsonResponse(project_listing.list_projects(project_filter, **form.listing_kwargs()))


@api_view({'GET': 'Failed to fetch project', 'PUT': 'Failed to update project', 'DELETE': 'Failed to delete project'})
def project_detail(request, pk):
    project = _get_project(pk)

    if request.method == 'PUT':
        form = ProjectForm(to_form_data(parse_json_body(request)), instance=project, partial=True)
        project = _save_project(form)
        logger.info("Project %s updated (id=%s, fields=%s)", project.pid, project.id, ', '.join(form.fields))
        return JsonResponse(serialize_project(project))

    if request.method == 'DELETE':
        project.delete()
        logger.info("Project %s deleted (id=%s)", project.pid, pk)
        return HttpResponse(status=204)

    return JsonResponse(serialize_project(project))


def _export_queryset(request):
    project_filter, form = _listing_params(request)
    return project_listing.ordered_projects(project_filter, **form.sort_kwargs())


@api_view({'GET': 'Export failed'})
def export_excel(request):
    projects = _export_queryset(request)
    try:
        wb = exports.build_projects_workbook(projects)
        response = HttpResponse(content_type=exports.XLSX_CONTENT_TYPE)
        response['Content-Disposition'] = 'attachment; filename=projects.xlsx'
        wb.save(response)
    except Exception as exc:
        logger.exception("Excel export failed")
        raise errors.UpstreamError('Export failed', details=str(exc)) from exc
    return response


@api_view({'GET': 'Export failed'})
def export_pdf(request):
    projects = _export_queryset(request)
    try:
        buf = BytesIO()
        exports.render_projects_pdf(projects, buf)
        response = HttpResponse(buf.getvalue(), content_type='application/pdf')
        response['Content-Disposition'] = 'attachment; filename=projects.pdf'
    except Exception as exc:
        logger.exception("PDF export failed")
        raise errors.UpstreamError('Export failed', details=str(exc)) from exc
    return response


@api_view({'POST': 'Failed to get AI response'})
def chat(request):
    form = ChatRequestForm(parse_json_body(request))
    if not form.is_valid():
        raise errors.ValidationError('Invalid chat request', details=form_errors(form))
    relay = ChatRelay.from_settings()
    return JsonResponse(relay.reply(form.cleaned_data['message'], form.cleaned_data['history']))
