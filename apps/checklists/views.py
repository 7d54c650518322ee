from django.http import JsonResponse
from django.shortcuts import get_object_or_404
from django.views.decorators.http import require_http_methods

from apps.core.http import api_login_required, form_errors, json_body, json_error
from .filters import ChecklistFilter
from .forms import ChecklistForm, TaskForm
from .models import Checklist, Task
from .services import ChecklistService, checklist_to_dict, task_to_dict


@require_http_methods(["GET", "POST"])
@api_login_required
@json_body
def checklist_list_view(request):
    if request.method == "POST":
        form = ChecklistForm(data=request.json)
        if not form.is_valid():
            return form_errors(form)

        task_texts = request.json.get('tasks') or []
        if not isinstance(task_texts, list) or not all(isinstance(t, str) for t in task_texts):
            return json_error('tasks must be a list of strings')

        service = ChecklistService()
        checklist = service.create_checklist(
            request.user,
            form.cleaned_data['title'],
            form.cleaned_data.get('category'),
            task_texts,
        )
        return JsonResponse({'checklist': checklist_to_dict(checklist)}, status=201)

    # GET: wszystkie listy użytkownika (opcjonalny filtr kategorii)
    qs = Checklist.objects.filter(user=request.user).prefetch_related('tasks')
    f = ChecklistFilter(request.GET, queryset=qs)
    if not f.is_valid():
        return json_error('Invalid filter', fields=f.errors.get_json_data())

    return JsonResponse({'checklists': [checklist_to_dict(c) for c in f.qs]})


@require_http_methods(["DELETE"])
@api_login_required
def checklist_delete_view(request, pk):
    checklist = get_object_or_404(Checklist, pk=pk, user=request.user)
    checklist.delete()
    return JsonResponse({'success': True})


@require_http_methods(["POST"])
@api_login_required
@json_body
def task_add_view(request, checklist_id):
    checklist = get_object_or_404(Checklist, pk=checklist_id, user=request.user)

    form = TaskForm(data=request.json)
    if not form.is_valid():
        return form_errors(form)

    task = form.save(commit=False)
    task.checklist = checklist
    task.save()

    return JsonResponse({'task': task_to_dict(task), 'progress': checklist.progress}, status=201)


@require_http_methods(["POST"])
@api_login_required
def task_toggle_view(request, pk):
    task = get_object_or_404(Task, pk=pk, checklist__user=request.user)
    ChecklistService().toggle_task(task)

    # Zmiana statusu automatycznie zmienia kalendarz (wykonane zadania znikają z terminów)
    return JsonResponse({'task': task_to_dict(task), 'progress': task.checklist.progress})


@require_http_methods(["DELETE"])
@api_login_required
def task_delete_view(request, pk):
    task = get_object_or_404(Task, pk=pk, checklist__user=request.user)
    checklist = task.checklist
    task.delete()

    return JsonResponse({'success': True, 'progress': checklist.progress})
