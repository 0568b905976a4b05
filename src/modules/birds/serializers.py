"""Bird DRF serializers for API output.

``Meta.fields`` is the Bird schema as seen by the API; the field
policies passed at call time only ever remove entries from it.
"""

from __future__ import annotations

from rest_framework import serializers

from modules.birds.models import Bird
from modules.core.serializers import FieldPolicySerializerMixin


class BirdSerializer(FieldPolicySerializerMixin, serializers.ModelSerializer):
    """Read-only serializer for the Bird resource."""

    class Meta:
        model = Bird
        fields = [
            "id",
            "name",
            "species",
            "created_at",
            "updated_at",
        ]
        read_only_fields = fields
