from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods

from apps.core.conf import app_setting
from apps.core.http import api_login_required, form_errors, json_body, json_error
from .forms import ProjectForm, ReportDateForm
from .models import Project, ReportDate
from .services.project_service import ProjectService


@require_http_methods(["GET", "POST", "PUT"])
@api_login_required
@json_body
def project_view(request):
    """Projekt grantowy użytkownika: podgląd, utworzenie, edycja."""
    service = ProjectService()
    project = Project.objects.filter(user=request.user).first()

    if request.method == "POST":
        if project:
            return json_error('User already has a project')

        form = ProjectForm(data={
            'name': request.json.get('name'),
            'grant_amount': request.json.get('grant_amount') or app_setting('DEFAULT_GRANT_AMOUNT'),
        })
        if not form.is_valid():
            return form_errors(form)

        project = form.save(commit=False)
        project.user = request.user
        project.save()
        return JsonResponse({'project': service.to_entity(project).to_dict()}, status=201)

    if request.method == "PUT":
        if not project:
            return json_error('Project not found', status=404)

        # Częściowa aktualizacja: brakujące pola bierzemy z istniejącego projektu
        data = {'name': project.name, 'grant_amount': project.grant_amount}
        for key in ('name', 'grant_amount'):
            if request.json.get(key) not in (None, ''):
                data[key] = request.json[key]

        form = ProjectForm(data=data, instance=project)
        if not form.is_valid():
            return form_errors(form)
        project = form.save()
        return JsonResponse({'project': service.to_entity(project).to_dict()})

    # GET
    if not project:
        return JsonResponse({'project': None})
    return JsonResponse({'project': service.to_entity(project).to_dict()})


@require_http_methods(["POST", "PUT"])
@api_login_required
@json_body
def report_dates_view(request):
    """
    POST: dodaje pojedynczy termin raportu.
    PUT: zastępuje całą listę terminów ({"report_dates": [{title, date}, ...]}).
    """
    project = get_object_or_404(Project, user=request.user)
    service = ProjectService()

    if request.method == "POST":
        form = ReportDateForm(data=request.json)
        if not form.is_valid():
            return form_errors(form)
        report_date = form.save(commit=False)
        report_date.project = project
        report_date.save()
        return JsonResponse({'project': service.to_entity(project).to_dict()}, status=201)

    items = request.json.get('report_dates')
    if not isinstance(items, list):
        return json_error('report_dates must be a list')

    cleaned = []
    for index, item in enumerate(items):
        form = ReportDateForm(data=item if isinstance(item, dict) else {})
        if not form.is_valid():
            return json_error('Validation error', fields={str(index): form.errors.get_json_data()})
        cleaned.append(form.cleaned_data)

    service.replace_report_dates(project, cleaned)
    return JsonResponse({'project': service.to_entity(project).to_dict()})


@require_http_methods(["DELETE"])
@api_login_required
def report_date_delete_view(request, pk):
    report_date = get_object_or_404(ReportDate, pk=pk, project__user=request.user)
    report_date.delete()
    return JsonResponse({'success': True})
