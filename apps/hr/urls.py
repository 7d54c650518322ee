from django.urls import path
from . import views

urlpatterns = [
    path('employees/', views.employee_list_view, name='employee_list'),
    path('employees/<int:pk>/', views.employee_detail_view, name='employee_detail'),
]
