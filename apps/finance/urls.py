from django.urls import path
from . import views

urlpatterns = [
    path('', views.transactions_view, name='transactions'),
    path('<int:pk>/', views.transaction_delete_view, name='transaction_delete'),
    path('analytics/', views.analytics_view, name='finance_analytics'),
]
