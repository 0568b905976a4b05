"""Field-selection policies for API responses.

A ``FieldPolicy`` narrows a serialized record down to a subset of its
fields.  It has exactly two variants:

- ``include``: keep only the named fields (allow-list).
- ``exclude``: keep every field except the named ones (deny-list).

Unknown field names are never an error: an include policy silently
skips names the record lacks, and an exclude policy naming a missing
field is a no-op.  Policies are immutable (``frozen=True``) and carry no
global state, so the same instance can be shared across requests.

Usage::

    policy = FieldPolicy.exclude("created_at", "updated_at")
    policy.select(["id", "name", "created_at"])   # ["id", "name"]
    policy.apply({"id": 1, "created_at": "..."})  # {"id": 1}
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any, Dict, List, Literal, Optional

from django.core.exceptions import ImproperlyConfigured
from pydantic import BaseModel, ConfigDict, field_validator

INCLUDE = "include"
EXCLUDE = "exclude"

# Query parameters a client may use to narrow a response.
INCLUDE_PARAM = "fields"
EXCLUDE_PARAM = "exclude"


class ConflictingFieldPolicy(ValueError):
    """Both (or neither of) include and exclude were requested."""


def _split_names(value: str | Iterable[str]) -> frozenset[str]:
    if isinstance(value, str):
        value = value.split(",")
    return frozenset(name.strip() for name in value if name and name.strip())


class FieldPolicy(BaseModel):
    """Immutable include/exclude field filter."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["include", "exclude"]
    fields: frozenset[str] = frozenset()

    @field_validator("fields", mode="before")
    @classmethod
    def normalise_fields(cls, v: Any) -> frozenset[str]:
        return _split_names(v)

    # ------------------------------------------------------------------
    # Constructors
    # ------------------------------------------------------------------

    @classmethod
    def include(cls, *names: str) -> FieldPolicy:
        return cls(mode=INCLUDE, fields=names)

    @classmethod
    def exclude(cls, *names: str) -> FieldPolicy:
        return cls(mode=EXCLUDE, fields=names)

    @classmethod
    def from_options(
        cls,
        only: Optional[Iterable[str] | str] = None,
        exclude: Optional[Iterable[str] | str] = None,
    ) -> FieldPolicy:
        """Build a policy from keyword-style ``only=`` / ``exclude=`` options.

        The two options are mutually exclusive; there is no combined
        semantics.

        Raises:
            ConflictingFieldPolicy: if both or neither option is given.
        """
        if only is not None and exclude is not None:
            raise ConflictingFieldPolicy(
                "Use either 'only' or 'exclude', not both."
            )
        if only is not None:
            return cls(mode=INCLUDE, fields=only)
        if exclude is not None:
            return cls(mode=EXCLUDE, fields=exclude)
        raise ConflictingFieldPolicy("One of 'only' or 'exclude' is required.")

    @classmethod
    def from_query_params(cls, params: Mapping[str, str]) -> Optional[FieldPolicy]:
        """Build a client policy from ``?fields=`` / ``?exclude=``.

        Returns ``None`` when the client asked for no narrowing.  A
        parameter that names no fields (``?fields=`` or ``?fields=,``)
        counts as absent.

        Raises:
            ConflictingFieldPolicy: if both parameters name fields.
        """
        only = params.get(INCLUDE_PARAM) or ""
        exclude = params.get(EXCLUDE_PARAM) or ""
        if not _split_names(only):
            only = None
        if not _split_names(exclude):
            exclude = None
        if only is None and exclude is None:
            return None
        if only is not None and exclude is not None:
            raise ConflictingFieldPolicy(
                f"Query parameters '{INCLUDE_PARAM}' and '{EXCLUDE_PARAM}' "
                "are mutually exclusive."
            )
        return cls.from_options(only=only, exclude=exclude)

    @classmethod
    def from_settings(cls, config: Mapping[str, Any]) -> FieldPolicy:
        """Build a policy from a ``{"mode": ..., "fields": [...]}`` setting.

        Raises:
            ImproperlyConfigured: if ``mode`` is neither include nor exclude.
        """
        mode = str(config.get("mode", "")).strip().lower()
        if mode not in (INCLUDE, EXCLUDE):
            raise ImproperlyConfigured(
                f"Field policy mode must be '{INCLUDE}' or '{EXCLUDE}', got {mode!r}."
            )
        return cls(mode=mode, fields=config.get("fields") or ())

    # ------------------------------------------------------------------
    # Filtering
    # ------------------------------------------------------------------

    def allows(self, name: str) -> bool:
        if self.mode == INCLUDE:
            return name in self.fields
        return name not in self.fields

    def select(self, names: Iterable[str]) -> List[str]:
        """Return the permitted subset of ``names``, preserving their order."""
        return [name for name in names if self.allows(name)]

    def _filter(self, record: Mapping[str, Any]) -> Dict[str, Any]:
        return {key: value for key, value in record.items() if self.allows(key)}

    def apply(self, data: Any) -> Any:
        """Filter an already-serialized record or collection of records.

        A mapping yields a new ``dict``; an iterable of mappings yields a
        new list with one filtered ``dict`` per item, in input order.  The
        input is never mutated.

        Raises:
            TypeError: if ``data`` is neither a mapping nor an iterable of
                mappings (strings are rejected, not iterated).
        """
        if isinstance(data, Mapping):
            return self._filter(data)
        if isinstance(data, (str, bytes)) or not isinstance(data, Iterable):
            raise TypeError(
                f"Expected a mapping or an iterable of mappings, got {type(data).__name__}."
            )
        records = []
        for item in data:
            if not isinstance(item, Mapping):
                raise TypeError(
                    f"Expected each record to be a mapping, got {type(item).__name__}."
                )
            records.append(self._filter(item))
        return records
