from django.http import JsonResponse
from django.views.decorators.http import require_http_methods

from apps.core.conf import app_setting
from apps.core.http import api_login_required, form_errors, json_body, json_error
from .adapters.orm_repositories import DjangoTransactionRepository
from .domain.entities import TransactionEntity
from .filters import TransactionFilter
from .forms import TransactionForm
from .models import Transaction
from .services.ledger_service import LedgerService


@require_http_methods(["GET", "POST"])
@api_login_required
@json_body
def transactions_view(request):
    """Lista wydatków + stan grantu (GET) albo dodanie wydatku (POST)."""
    repo = DjangoTransactionRepository()
    service = LedgerService(repository=repo)

    if request.method == "POST":
        form = TransactionForm(data=request.json)
        if not form.is_valid():
            return form_errors(form)

        data = form.cleaned_data
        created = service.record(request.user.id, TransactionEntity(
            id=None,
            description=data['description'],
            amount=data['amount'],
            category=data['category'],
            date=data['date'],
        ))
        return JsonResponse({'transaction': created.to_dict()}, status=201)

    # GET: lista (opcjonalnie filtrowana), ledger zawsze z pełnego snapshotu
    qs = Transaction.objects.filter(user=request.user).order_by('-date', '-id')
    f = TransactionFilter(request.GET, queryset=qs)
    if not f.is_valid():
        return json_error('Invalid filter', fields=f.errors.get_json_data())

    ledger = service.ledger_for(request.user.id)
    return JsonResponse({
        'transactions': [repo.to_entity(t).to_dict() for t in f.qs],
        'ledger': ledger.summary(),
    })


@require_http_methods(["DELETE"])
@api_login_required
def transaction_delete_view(request, pk):
    service = LedgerService(repository=DjangoTransactionRepository())
    if not service.remove(request.user.id, pk):
        return json_error('Transaction not found', status=404)
    return JsonResponse({'success': True})


@require_http_methods(["GET"])
@api_login_required
def analytics_view(request):
    """Dane do zakładki Analityka (wykres kołowy, słupki miesięczne, ostatnie wydatki)."""
    repo = DjangoTransactionRepository()
    transactions = repo.list_for_user(request.user.id)
    ledger = LedgerService(repository=repo).ledger_for(request.user.id, transactions)

    categories = ledger.category_breakdown()
    return JsonResponse({
        'summary': ledger.summary(),
        'pie': [
            {'name': row['label'], 'value': row['amount'], 'category': row['category'], 'color': row['color']}
            for row in categories
        ],
        'monthly': ledger.monthly_breakdown(last=app_setting('ANALYTICS_MONTHS')),
        'recent_transactions': [t.to_dict() for t in transactions[:5]],
    })
