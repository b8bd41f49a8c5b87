from django.contrib import admin
from import_export import resources
from import_export.admin import ImportExportModelAdmin
from .models import Project


class ProjectResource(resources.ModelResource):
    class Meta:
        model = Project
        import_id_fields = ('pid',)
        skip_unchanged = True
        exclude = ('id', 'created_at', 'updated_at')


@admin.register(Project)
class ProjectAdmin(ImportExportModelAdmin):
    resource_classes = [ProjectResource]

    list_display = ('pid', 'project_name', 'ministry_dept', 'type', 'fund_available', 'contract_value', 'is_draft', 'updated_at')
    list_filter = ('type', 'fund_available', 'is_draft')
    search_fields = ('project_name', 'ministry_dept', 'lead_programme_manager', 'programme_manager', 'description')
    readonly_fields = ('created_at', 'updated_at')
    date_hierarchy = 'start_date'

    fieldsets = (
        ('Project', {
            'fields': ('pid', 'project_name', 'ministry_dept', 'description')
        }),
        ('Management', {
            'fields': ('lead_programme_manager', 'programme_manager')
        }),
        ('Classification', {
            'fields': ('type', 'fund_available', 'contract_value', 'status')
        }),
        ('Schedule', {
            'fields': ('start_date', 'completion_date')
        }),
        ('Publishing', {
            'fields': ('is_draft',)
        }),
        ('Timestamps', {
            'fields': ('created_at', 'updated_at'),
            'classes': ('collapse',)
        }),
    )
