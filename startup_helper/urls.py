# startup_helper/urls.py
from django.contrib import admin
from django.urls import path, include
from apps.core import views as core_views


urlpatterns = [
    path('admin/', admin.site.urls),
    path('', core_views.dashboard_view, name='home'), # Pusta ścieżka = Dashboard
    # Tutaj podpinamy nasze aplikacje:
    path('core/', include('apps.core.urls')),
    path('projects/', include('apps.projects.urls')),
    path('finance/', include('apps.finance.urls')),
    path('checklists/', include('apps.checklists.urls')),
    path('hr/', include('apps.hr.urls')),
    path('calendar/', include('apps.calendar_app.urls')),
    path('support/', include('apps.support.urls')),
]
