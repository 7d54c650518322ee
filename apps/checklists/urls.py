from django.urls import path
from . import views

urlpatterns = [
    path('', views.checklist_list_view, name='checklist_list'),
    path('<int:pk>/', views.checklist_delete_view, name='checklist_delete'),
    path('<int:checklist_id>/tasks/', views.task_add_view, name='checklist_task_add'),
    path('tasks/<int:pk>/toggle/', views.task_toggle_view, name='checklist_task_toggle'),
    path('tasks/<int:pk>/', views.task_delete_view, name='checklist_task_delete'),
]
