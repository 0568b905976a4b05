import django_filters

from modules.birds.models import Bird


class BirdFilter(django_filters.FilterSet):
    name = django_filters.CharFilter(field_name="name", lookup_expr="icontains")
    species = django_filters.CharFilter(field_name="species", lookup_expr="icontains")
    min_id = django_filters.NumberFilter(field_name="id", lookup_expr="gte")

    class Meta:
        model = Bird
        fields = ["name", "species", "min_id"]
