from django.contrib import admin
from .models import Checklist, Task


class TaskInline(admin.TabularInline):
    model = Task
    extra = 1
    fields = ('text', 'deadline', 'completed')


@admin.register(Checklist)
class ChecklistAdmin(admin.ModelAdmin):
    list_display = ('title', 'user', 'category', 'created_at')
    list_filter = ('category',)
    search_fields = ('title',)
    inlines = [TaskInline]
