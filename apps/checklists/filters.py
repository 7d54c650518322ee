import django_filters
from .models import Checklist


class ChecklistFilter(django_filters.FilterSet):
    CATEGORY_CHOICES = Checklist.CategoryChoices.choices + [('general', 'Общие')]

    category = django_filters.ChoiceFilter(
        choices=CATEGORY_CHOICES,
        method='filter_category',
        label="Категория",
    )

    class Meta:
        model = Checklist
        fields = ['category']

    def filter_category(self, queryset, name, value):
        # 'general' = listy bez kategorii
        if value == 'general':
            return queryset.filter(category__isnull=True)
        return queryset.filter(category=value)
