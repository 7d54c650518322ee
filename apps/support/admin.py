from django.contrib import admin
from .models import SupportMessage


@admin.register(SupportMessage)
class SupportMessageAdmin(admin.ModelAdmin):
    list_display = ('user', 'sender', 'text', 'created_at')
    list_filter = ('sender',)
    search_fields = ('text', 'user__username')
