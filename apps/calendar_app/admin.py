from django.contrib import admin
from .models import CalendarEvent


@admin.register(CalendarEvent)
class CalendarEventAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'date', 'time', 'priority', 'completed')
    list_filter = ('priority', 'completed')
    search_fields = ('title', 'location')
    date_hierarchy = 'date'
