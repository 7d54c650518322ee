from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods

from apps.core.http import api_login_required, form_errors, json_body, json_error
from .filters import EmployeeFilter
from .forms import EmployeeForm, EmployeeUpdateForm
from .models import Employee
from .services import employee_to_dict


@require_http_methods(["GET", "POST"])
@api_login_required
@json_body
def employee_list_view(request):
    """Lista pracowników (GET, z filtrami) albo przyjęcie nowego pracownika (POST)."""
    if request.method == "POST":
        form = EmployeeForm(data=request.json)
        if not form.is_valid():
            return form_errors(form)

        employee = form.save(commit=False)
        employee.user = request.user
        employee.status = Employee.StatusChoices.ACTIVE
        employee.save()
        return JsonResponse({'employee': employee_to_dict(employee)}, status=201)

    qs = Employee.objects.filter(user=request.user)
    f = EmployeeFilter(request.GET, queryset=qs)
    if not f.is_valid():
        return json_error('Invalid filter', fields=f.errors.get_json_data())

    return JsonResponse({'employees': [employee_to_dict(e) for e in f.qs]})


@require_http_methods(["PUT", "DELETE"])
@api_login_required
@json_body
def employee_detail_view(request, pk):
    # 1. Pobierz pracownika (zabezpieczenie, że należy do usera)
    employee = get_object_or_404(Employee, pk=pk, user=request.user)

    if request.method == "DELETE":
        employee.delete()
        return JsonResponse({'success': True})

    # 2. Częściowa aktualizacja: status i status wojskowy tylko gdy podane,
    #    birth_date także null (czyści datę)
    data = {
        'status': employee.status,
        'military_status': employee.military_status,
        'birth_date': employee.birth_date,
    }
    for key in ('status', 'military_status'):
        if request.json.get(key):
            data[key] = request.json[key]
    if 'birth_date' in request.json:
        data['birth_date'] = request.json['birth_date']

    form = EmployeeUpdateForm(data=data, instance=employee)
    if not form.is_valid():
        return form_errors(form)
    employee = form.save()

    return JsonResponse({'employee': employee_to_dict(employee)})
