from django.contrib import admin
from .models import Project, ReportDate


class ReportDateInline(admin.TabularInline):
    model = ReportDate
    extra = 1
    fields = ('title', 'date')


@admin.register(Project)
class ProjectAdmin(admin.ModelAdmin):
    list_display = ('name', 'user', 'grant_amount', 'spent_amount', 'created_at')
    search_fields = ('name', 'user__username')
    readonly_fields = ('spent_amount',)
    inlines = [ReportDateInline]
