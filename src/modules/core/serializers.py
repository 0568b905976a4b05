"""Shared DRF serializer building blocks.

``FieldPolicySerializerMixin`` trims a serializer's declared fields with
one or two ``FieldPolicy`` objects before any representation is built.
The serializer's ``Meta.fields`` is the explicit schema: output keys
follow its order, and no field outside it can ever appear.
"""

from __future__ import annotations

from typing import Optional

from modules.core.field_policy import FieldPolicy


class FieldPolicySerializerMixin:
    """Drop declared fields that the active field policies do not allow.

    Usage::

        BirdSerializer(bird, policy=FieldPolicy.exclude("created_at"))
        BirdSerializer(birds, many=True, policy=endpoint, requested=client)

    ``policy`` is the endpoint policy.  ``requested`` is an optional
    client policy applied on top of it, so a client can narrow the output
    further but never re-expose a field the endpoint policy hides.
    With ``many=True`` DRF forwards both kwargs to the child serializer.
    """

    def __init__(
        self,
        *args,
        policy: Optional[FieldPolicy] = None,
        requested: Optional[FieldPolicy] = None,
        **kwargs,
    ) -> None:
        super().__init__(*args, **kwargs)
        allowed = list(self.fields)
        for active in (policy, requested):
            if active is not None:
                allowed = active.select(allowed)
        for field_name in set(self.fields) - set(allowed):
            self.fields.pop(field_name)
