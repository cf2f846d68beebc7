"""
Tests for the process-wide enum registry and the global Enums accessor.
"""
import threading
from concurrent.futures import ThreadPoolExecutor

import pytest

from enumkit import (
    DuplicateEnum,
    EnumKitConfig,
    Enums,
    ImmutabilityError,
    InvalidArgumentType,
    create_enum,
    create_enum_from_mapping,
    create_item,
    get_enum,
    get_enums,
    set_current_config,
)
from enumkit.core.registry import ENUM_REGISTRY, register_enum


class TestEnumIndex:
    """Enums exposes registered enums by name and as a snapshot."""

    def setup_method(self):
        self.shape = create_enum("Shape", [create_item("Shape", "Circle"), create_item("Shape", "Square")])

    def test_round_trip(self):
        assert Enums.GetEnums()["Shape"] == self.shape
        assert Enums.GetEnums()["Shape"] is self.shape

    def test_lookup_by_name(self):
        assert Enums["Shape"] is self.shape
        assert Enums.Shape is self.shape
        assert get_enum("Shape") is self.shape

    def test_unknown_names_are_none(self):
        assert Enums["Missing"] is None
        assert Enums.Missing is None
        assert get_enum("Missing") is None

    def test_snapshot_is_independent(self):
        snapshot = Enums.GetEnums()
        snapshot["Fake"] = self.shape
        del snapshot["Shape"]

        assert "Fake" not in Enums
        assert Enums.Shape is self.shape
        assert get_enums() is not ENUM_REGISTRY

    def test_membership_length_iteration(self):
        create_enum_from_mapping("Size", {"Small": {}})
        assert "Shape" in Enums
        assert "Nope" not in Enums
        assert len(Enums) == 2
        assert sorted(Enums) == ["Shape", "Size"]

    def test_index_is_read_only(self):
        with pytest.raises(ImmutabilityError):
            Enums.Shape = None
        with pytest.raises(ImmutabilityError):
            Enums["Other"] = self.shape
        with pytest.raises(ImmutabilityError):
            del Enums["Shape"]
        with pytest.raises(ImmutabilityError):
            del Enums.Shape
        assert Enums.Shape is self.shape

    def test_repr_lists_names(self):
        assert repr(Enums) == "<EnumIndex ['Shape']>"


class TestRegisterEnum:

    def test_rejects_non_enum(self):
        with pytest.raises(InvalidArgumentType):
            register_enum("Shape")

    def test_write_once(self):
        create_enum("Shape", [])
        with pytest.raises(DuplicateEnum):
            create_enum("Shape", [])
        assert len(Enums) == 1


class TestConcurrentRegistration:
    """Only one of many concurrent registrations of a name succeeds."""

    def _race(self, workers: int = 16):
        barrier = threading.Barrier(workers)

        def attempt(index):
            item = create_item("Race", f"Member{index}")
            barrier.wait()
            try:
                return create_enum("Race", [item])
            except DuplicateEnum:
                return None

        with ThreadPoolExecutor(max_workers=workers) as executor:
            return list(executor.map(attempt, range(workers)))

    def test_single_winner(self):
        results = self._race()
        winners = [enum for enum in results if enum is not None]

        assert len(winners) == 1
        assert Enums.Race is winners[0]

    def test_single_winner_without_lock_in_single_thread(self):
        set_current_config(EnumKitConfig(thread_safe=False))
        create_enum("Solo", [])
        with pytest.raises(DuplicateEnum):
            create_enum("Solo", [])

    def test_identity_tokens_unique_across_threads(self):
        with ThreadPoolExecutor(max_workers=8) as executor:
            items = list(executor.map(lambda i: create_item("T", "A"), range(200)))
        assert len(set(items)) == 200
