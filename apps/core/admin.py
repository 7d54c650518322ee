from django.contrib import admin
from .models import UserProfile


@admin.register(UserProfile)
class UserProfileAdmin(admin.ModelAdmin):
    list_display = ('user', 'phone', 'inn', 'ogrn', 'is_premium')
    list_filter = ('is_premium',)
    search_fields = ('user__username', 'inn', 'ogrn')
