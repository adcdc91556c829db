# ============================= SPOTS/FILTERS.PY =============================
import django_filters
from .models import Spot


class SpotFilter(django_filters.FilterSet):
    """Filtering for the public spot directory"""

    neighborhood = django_filters.CharFilter(
        field_name='neighborhood',
        lookup_expr='iexact',
        label='Neighborhood'
    )
    price_min = django_filters.NumberFilter(
        field_name='price_per_day',
        lookup_expr='gte',
        label='Minimum Price Per Day'
    )
    price_max = django_filters.NumberFilter(
        field_name='price_per_day',
        lookup_expr='lte',
        label='Maximum Price Per Day'
    )

    class Meta:
        model = Spot
        fields = ['neighborhood']
