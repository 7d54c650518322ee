from django.contrib import admin
from .models import Employee


@admin.register(Employee)
class EmployeeAdmin(admin.ModelAdmin):
    list_display = ('name', 'position', 'user', 'status', 'military_status', 'hire_date')
    list_filter = ('status', 'military_status')
    search_fields = ('name', 'position')
