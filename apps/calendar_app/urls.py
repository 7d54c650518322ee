from django.urls import path
from . import views

urlpatterns = [
    path('', views.month_view, name='calendar_month'),
    path('day/', views.day_view, name='calendar_day'),
    path('upcoming/', views.upcoming_view, name='calendar_upcoming'),
    path('events/', views.event_create_view, name='calendar_event_create'),
    path('events/<int:pk>/', views.event_delete_view, name='calendar_event_delete'),
    path('events/<int:pk>/toggle/', views.event_toggle_view, name='calendar_event_toggle'),
]
