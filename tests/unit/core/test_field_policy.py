"""Unit tests for FieldPolicy.

Covers:
- include / exclude selection against an ordered schema.
- Unknown field names are ignored in both modes.
- ``apply`` on records and collections: order, emptiness, idempotence,
  no mutation of the input.
- Constructors: from_options, from_query_params, from_settings.
"""

from __future__ import annotations

import pytest
from django.core.exceptions import ImproperlyConfigured
from pydantic import ValidationError

from modules.core.field_policy import ConflictingFieldPolicy, FieldPolicy

pytestmark = pytest.mark.unit

SCHEMA = ["id", "name", "species", "created_at", "updated_at"]

STARLING = {
    "id": 3,
    "name": "Common Starling",
    "species": "Sturnus Vulgaris",
    "created_at": "2019-05-09T21:51:41.543Z",
    "updated_at": "2019-05-09T21:51:41.543Z",
}


# ===========================================================================
# select
# ===========================================================================


class TestSelect:
    @pytest.mark.parametrize(
        "names",
        [
            {"id", "name"},
            {"species"},
            {"name", "nickname", "wingspan"},
            set(),
        ],
    )
    def test_include_keeps_intersection(self, names):
        policy = FieldPolicy.include(*names)
        assert set(policy.select(SCHEMA)) == names & set(SCHEMA)

    @pytest.mark.parametrize(
        "names",
        [
            {"created_at", "updated_at"},
            {"id"},
            {"created_at", "colour"},
            set(),
        ],
    )
    def test_exclude_keeps_difference(self, names):
        policy = FieldPolicy.exclude(*names)
        assert set(policy.select(SCHEMA)) == set(SCHEMA) - names

    def test_preserves_schema_order(self):
        policy = FieldPolicy.include("species", "id", "name")
        assert policy.select(SCHEMA) == ["id", "name", "species"]

    def test_unknown_exclusion_is_noop(self):
        policy = FieldPolicy.exclude("does_not_exist")
        assert policy.select(SCHEMA) == SCHEMA


# ===========================================================================
# apply
# ===========================================================================


class TestApply:
    def test_exclude_timestamps_from_record(self):
        policy = FieldPolicy.exclude("created_at", "updated_at")
        assert policy.apply(STARLING) == {
            "id": 3,
            "name": "Common Starling",
            "species": "Sturnus Vulgaris",
        }

    def test_include_on_collection_preserves_order(self):
        records = [dict(STARLING, id=i, name=f"Bird {i}") for i in range(1, 5)]
        policy = FieldPolicy.include("id", "name", "species")

        result = policy.apply(records)

        assert [r["id"] for r in result] == [1, 2, 3, 4]
        assert all(set(r) == {"id", "name", "species"} for r in result)

    def test_empty_collection_yields_empty_list(self):
        assert FieldPolicy.include("id").apply([]) == []
        assert FieldPolicy.exclude("id").apply(()) == []

    def test_idempotent(self):
        policy = FieldPolicy.exclude("created_at", "updated_at")
        once = policy.apply([STARLING])
        assert policy.apply(once) == once

    def test_does_not_mutate_input(self):
        record = dict(STARLING)
        FieldPolicy.include("id").apply(record)
        assert record == STARLING

    def test_key_order_preserved(self):
        policy = FieldPolicy.exclude("created_at")
        assert list(policy.apply(STARLING)) == [
            "id",
            "name",
            "species",
            "updated_at",
        ]

    def test_string_rejected(self):
        with pytest.raises(TypeError, match="str"):
            FieldPolicy.include("id").apply("id")

    def test_collection_of_non_mappings_rejected(self):
        with pytest.raises(TypeError, match="each record"):
            FieldPolicy.include("id").apply(["id", "name"])

    def test_non_iterable_rejected(self):
        with pytest.raises(TypeError, match="int"):
            FieldPolicy.exclude("id").apply(42)


# ===========================================================================
# Construction
# ===========================================================================


class TestConstruction:
    def test_is_frozen(self):
        policy = FieldPolicy.include("id")
        with pytest.raises(ValidationError):
            policy.mode = "exclude"

    def test_names_are_stripped_and_blanks_dropped(self):
        policy = FieldPolicy.include(" id ", "", "  ")
        assert policy.fields == frozenset({"id"})

    def test_comma_separated_string_accepted(self):
        policy = FieldPolicy(mode="include", fields="id, name")
        assert policy.fields == frozenset({"id", "name"})

    def test_invalid_mode_rejected(self):
        with pytest.raises(ValidationError):
            FieldPolicy(mode="only", fields=["id"])


class TestFromOptions:
    def test_only(self):
        policy = FieldPolicy.from_options(only=["id", "name"])
        assert policy.mode == "include"
        assert policy.fields == frozenset({"id", "name"})

    def test_exclude(self):
        policy = FieldPolicy.from_options(exclude=["created_at"])
        assert policy.mode == "exclude"

    def test_both_rejected(self):
        with pytest.raises(ConflictingFieldPolicy, match="not both"):
            FieldPolicy.from_options(only=["id"], exclude=["name"])

    def test_neither_rejected(self):
        with pytest.raises(ConflictingFieldPolicy):
            FieldPolicy.from_options()


class TestFromQueryParams:
    def test_absent_returns_none(self):
        assert FieldPolicy.from_query_params({}) is None

    def test_blank_value_treated_as_absent(self):
        assert FieldPolicy.from_query_params({"fields": ""}) is None

    def test_separators_only_treated_as_absent(self):
        assert FieldPolicy.from_query_params({"fields": ","}) is None
        assert FieldPolicy.from_query_params({"exclude": " , "}) is None

    def test_blank_exclude_does_not_conflict_with_fields(self):
        policy = FieldPolicy.from_query_params({"fields": "id", "exclude": ","})
        assert policy == FieldPolicy.include("id")

    def test_fields_param_is_include(self):
        policy = FieldPolicy.from_query_params({"fields": "id,name"})
        assert policy == FieldPolicy.include("id", "name")

    def test_exclude_param(self):
        policy = FieldPolicy.from_query_params({"exclude": "species"})
        assert policy == FieldPolicy.exclude("species")

    def test_both_params_rejected(self):
        with pytest.raises(ConflictingFieldPolicy, match="mutually exclusive"):
            FieldPolicy.from_query_params({"fields": "id", "exclude": "name"})

    def test_conflict_is_a_value_error(self):
        assert issubclass(ConflictingFieldPolicy, ValueError)


class TestFromSettings:
    def test_exclude_mode(self):
        policy = FieldPolicy.from_settings(
            {"mode": "exclude", "fields": ["created_at", "updated_at"]}
        )
        assert policy == FieldPolicy.exclude("created_at", "updated_at")

    def test_mode_is_case_insensitive(self):
        policy = FieldPolicy.from_settings({"mode": " Include ", "fields": ["id"]})
        assert policy.mode == "include"

    def test_missing_fields_means_empty(self):
        policy = FieldPolicy.from_settings({"mode": "exclude"})
        assert policy.select(SCHEMA) == SCHEMA

    def test_unknown_mode_is_improperly_configured(self):
        with pytest.raises(ImproperlyConfigured):
            FieldPolicy.from_settings({"mode": "except", "fields": ["id"]})
