from django.contrib import admin
from .models import AuditLog


@admin.register(AuditLog)
class AuditLogAdmin(admin.ModelAdmin):
    list_display = ('action', 'object_repr', 'project_id', 'timestamp')
    list_filter = ('action', 'timestamp')
    search_fields = ('object_repr', 'change_description')
    readonly_fields = ('action', 'timestamp', 'object_repr', 'project_id', 'change_description')
    date_hierarchy = 'timestamp'

    def has_add_permission(self, request):
        return False

    def has_change_permission(self, request, obj=None):
        return False
