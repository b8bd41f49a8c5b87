from django.http import JsonResponse

from projects.http import api_view
from services.dashboard_stats import collect_dashboard_stats


@api_view({'GET': 'Failed to get dashboard stats'})
def dashboard_stats(request):
    """Aggregate counts, monthly starts and recent updates for published projects."""
    return JsonResponse(collect_dashboard_stats())
