"""Tests for renderchain.registry — handles, removal, lookup, priority coercion."""

import pytest

from renderchain.errors import UncallableRendererError
from renderchain.registry import Pipeline, RendererEntry, RendererRegistry, coerce_priority


def upper(html: str) -> str:
    return html.upper()


# ── register ───────────────────────────────────────────────────────


class TestRegister:
    def test_returns_distinct_handles(self, registry):
        handles = [registry.register("front", upper) for _ in range(5)]
        assert len(set(handles)) == 5

    def test_handles_are_monotonic(self, registry):
        handles = [registry.register("front", upper) for _ in range(4)]
        assert handles == sorted(handles)

    def test_default_priority_is_10(self, registry):
        h = registry.register("front", upper)
        (entry,) = registry.entries_for("front")
        assert entry.handle == h
        assert entry.priority == 10

    def test_stores_callback_as_is(self, registry):
        registry.register("front", "not.a.real:callback")
        (entry,) = registry.entries_for("front")
        assert entry.callback == "not.a.real:callback"

    def test_accepts_unknown_pipeline(self, registry):
        registry.register("sidebar", upper)
        assert len(registry.entries_for("sidebar")) == 1

    def test_pipeline_enum_stored_as_value(self, registry):
        registry.register(Pipeline.admin, upper)
        (entry,) = registry.entries_for("admin")
        assert entry.pipeline == "admin"
        assert type(entry.pipeline) is str

    def test_priority_coerced(self, registry):
        registry.register("front", upper, "7")
        registry.register("front", upper, 3.9)
        priorities = [e.priority for e in registry.entries_for("front")]
        assert priorities == [7, 3]

    def test_strict_mode_rejects_uncallable(self):
        strict = RendererRegistry(strict=True)
        with pytest.raises(UncallableRendererError) as exc_info:
            strict.register("front", 42)
        assert exc_info.value.callback == 42
        assert len(strict) == 0

    def test_strict_mode_accepts_import_string(self):
        strict = RendererRegistry(strict=True)
        strict.register("front", "string:capwords")
        assert len(strict) == 1


# ── unregister ─────────────────────────────────────────────────────


class TestUnregister:
    def test_removes_live_entry(self, registry):
        h = registry.register("front", upper)
        assert registry.unregister(h) is True
        assert h not in registry
        assert registry.entries_for("front") == []

    def test_second_removal_fails(self, registry):
        h = registry.register("front", upper)
        registry.unregister(h)
        assert registry.unregister(h) is False

    def test_never_issued_handle(self, registry):
        registry.register("front", upper)
        assert registry.unregister(999) is False
        assert len(registry) == 1

    @pytest.mark.parametrize(
        "bogus", ["zero", "0x0", "-0", "", None, 0.0, True, [0], {"h": 0}]
    )
    def test_arbitrary_values_fail_without_change(self, registry, bogus):
        registry.register("front", upper)
        assert registry.unregister(bogus) is False
        assert len(registry) == 1

    def test_removal_leaves_other_handles_valid(self, registry):
        h1 = registry.register("front", upper)
        h2 = registry.register("front", upper)
        h3 = registry.register("front", upper)
        registry.unregister(h2)
        assert h1 in registry
        assert h3 in registry
        assert registry.unregister(h3) is True

    def test_handles_not_reused_after_removal(self, registry):
        h1 = registry.register("front", upper)
        registry.unregister(h1)
        h2 = registry.register("front", upper)
        assert h2 != h1

    @pytest.mark.parametrize("as_text", [str, lambda h: f" {h} "])
    def test_digit_string_handle_removes_entry(self, registry, as_text):
        registry.register("front", upper)
        h = registry.register("front", upper)
        assert as_text(h) in registry
        assert registry.unregister(as_text(h)) is True
        assert h not in registry
        assert len(registry) == 1


# ── entries_for ────────────────────────────────────────────────────


class TestEntriesFor:
    def test_filters_by_pipeline(self, registry):
        registry.register("front", upper)
        registry.register("admin", upper)
        registry.register("front", upper)
        assert len(registry.entries_for("front")) == 2
        assert len(registry.entries_for("admin")) == 1

    def test_preserves_insertion_order(self, registry):
        hs = [registry.register("front", upper, p) for p in (30, 10, 20)]
        assert [e.handle for e in registry.entries_for("front")] == hs

    def test_returns_snapshot(self, registry):
        registry.register("front", upper)
        snapshot = registry.entries_for("front")
        registry.register("front", upper)
        assert len(snapshot) == 1

    def test_entries_are_frozen(self, registry):
        registry.register("front", upper)
        (entry,) = registry.entries_for("front")
        assert isinstance(entry, RendererEntry)
        with pytest.raises(AttributeError):
            entry.priority = 1

    def test_sequence_is_handle(self, registry):
        h = registry.register("front", upper)
        (entry,) = registry.entries_for("front")
        assert entry.sequence == h


# ── entries ────────────────────────────────────────────────────────


class TestEntries:
    def test_lists_every_pipeline_in_insertion_order(self, registry):
        hs = [
            registry.register("front", upper, 30),
            registry.register("admin", upper),
            registry.register("sidebar", upper, 1),
        ]
        assert [e.handle for e in registry.entries()] == hs
        assert [e.pipeline for e in registry.entries()] == ["front", "admin", "sidebar"]

    def test_skips_removed_entries(self, registry):
        h1 = registry.register("front", upper)
        h2 = registry.register("admin", upper)
        registry.unregister(h1)
        assert [e.handle for e in registry.entries()] == [h2]

    def test_empty_registry(self, registry):
        assert registry.entries() == []

    def test_returns_snapshot(self, registry):
        registry.register("front", upper)
        snapshot = registry.entries()
        registry.register("admin", upper)
        assert len(snapshot) == 1


# ── coerce_priority ────────────────────────────────────────────────


class TestCoercePriority:
    @pytest.mark.parametrize(
        "value, expected",
        [
            (5, 5),
            (-3, -3),
            (5.7, 5),
            ("12", 12),
            ("5.7", 5),
            (" 4 ", 4),
            (True, 1),
            ("5abc", 5),
            ("-3px", -3),
            ("1e2", 100),
            ("2.9e1 pts", 29),
        ],
    )
    def test_numeric_values(self, value, expected):
        assert coerce_priority(value) == expected

    @pytest.mark.parametrize("value", ["high", "px5", "", None, object(), float("nan")])
    def test_non_numeric_becomes_zero(self, value):
        assert coerce_priority(value) == 0
