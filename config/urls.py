from django.contrib import admin
from django.urls import path, include
from django.views.decorators.http import require_GET
from projects import views as project_views
from . import views

urlpatterns = [
	path('admin/', admin.site.urls),
	path('health', require_GET(views.health), name='health'),

	path('projects', project_views.project_collection, name='project_collection'),
	path('projects/dashboard', include('dashboards.urls')),
	path('projects/export/excel', project_views.export_excel, name='export_projects_excel'),
	path('projects/export/pdf', project_views.export_pdf, name='export_projects_pdf'),
	path('projects/chat', project_views.chat, name='project_chat'),
	path('projects/<int:pk>', project_views.project_detail, name='project_detail'),
]

handler404 = 'config.views.not_found'
handler500 = 'config.views.server_error'
