from django.urls import path
from . import views

urlpatterns = [
    path('profile/', views.profile_view, name='profile'),
    path('premium/subscribe/', views.premium_subscribe_view, name='premium_subscribe'),
    path('premium/cancel/', views.premium_cancel_view, name='premium_cancel'),
]
