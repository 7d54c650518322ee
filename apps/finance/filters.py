import django_filters
from .models import Transaction


class TransactionFilter(django_filters.FilterSet):
    search = django_filters.CharFilter(
        field_name='description',
        lookup_expr='icontains',
        label="Описание содержит",
    )
    category = django_filters.ChoiceFilter(
        choices=Transaction.CategoryChoices.choices,
        label="Категория",
    )
    date_from = django_filters.DateFilter(
        field_name='date',
        lookup_expr='gte',
        label="С даты",
    )
    date_to = django_filters.DateFilter(
        field_name='date',
        lookup_expr='lte',
        label="По дату",
    )

    class Meta:
        model = Transaction
        fields = ['category']
