"""Request parsing and the error boundary shared by the JSON views."""

import json
import logging
from functools import wraps

from django.http import JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from services import errors
from .serializers import FIELD_MAP

logger = logging.getLogger(__name__)

_JSON_KEYS = {field: key for key, field in FIELD_MAP.items()}


def parse_json_body(request):
    raw = request.body.decode('utf-8') if request.body else ''
    if not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError) as exc:
        raise errors.ValidationError('Invalid JSON', details=str(exc))
    if not isinstance(payload, dict):
        raise errors.ValidationError('JSON body must be an object')
    return payload


def form_errors(form):
    """Field errors as one string, e.g. ``"projectName: This field is required."``."""
    return '; '.join(
        f"{_JSON_KEYS.get(field, field)}: {' '.join(error['message'] for error in field_errors)}"
        for field, field_errors in form.errors.get_json_data().items()
    )


def error_response(exc):
    return JsonResponse(exc.to_dict(), status=exc.status_code)


def api_view(failure_messages):
    """
    Wrap a JSON view with method checking and the error boundary.

    ``failure_messages`` maps each allowed HTTP method to the message reported
    when the handler fails unexpectedly. Service errors are rendered as their
    own status and body.
    """
    def decorator(view):
        @csrf_exempt
        @require_http_methods(list(failure_messages))
        @wraps(view)
        def wrapper(request, *args, **kwargs):
            try:
                return view(request, *args, **kwargs)
            except errors.ServiceError as exc:
                logger.warning("%s %s failed: %s", request.method, request.path, exc.message)
                return error_response(exc)
            except Exception as exc:
                message = failure_messages[request.method]
                logger.exception("%s %s: %s", request.method, request.path, message)
                return JsonResponse({'error': message, 'details': str(exc)}, status=500)
        return wrapper
    return decorator
