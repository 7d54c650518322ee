from django.urls import path
from . import views

urlpatterns = [
    path('', views.project_view, name='project'),
    path('report-dates/', views.report_dates_view, name='report_dates'),
    path('report-dates/<int:pk>/', views.report_date_delete_view, name='report_date_delete'),
]
