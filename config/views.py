import logging

from django.db import DatabaseError, connection
from django.http import JsonResponse
from django.utils import timezone

logger = logging.getLogger(__name__)


def health(request):
    """Liveness check that also confirms the database answers."""
    now = timezone.now().isoformat()
    try:
        with connection.cursor() as cursor:
            cursor.execute('SELECT 1')
            cursor.fetchone()
    except DatabaseError as e:
        logger.error("Health check could not reach the database: %s", e)
        return JsonResponse(
            {'status': 'degraded', 'timestamp': now, 'database': 'unavailable', 'details': str(e)},
            status=503,
        )
    return JsonResponse({'status': 'ok', 'timestamp': now, 'database': 'ok'})


def not_found(request, exception=None):
    return JsonResponse({'error': 'Not found'}, status=404)


def server_error(request):
    return JsonResponse({'error': 'Something went wrong!'}, status=500)
