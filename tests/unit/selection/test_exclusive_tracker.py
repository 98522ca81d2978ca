"""
Tests for ExclusiveGroupTracker.
"""
import pytest

from search_filters.core.errors import InvariantViolation
from search_filters.selection.exclusive import ExclusiveGroupTracker


@pytest.fixture
def tracker():
    tracker = ExclusiveGroupTracker()
    tracker.register_group(10, is_exclusive=True)
    tracker.register_group(20, is_exclusive=False)
    for item_id in (1, 2, 3):
        tracker.map_item_to_group(item_id, 10)
    for item_id in (4, 5):
        tracker.map_item_to_group(item_id, 20)
    return tracker


class TestQueries:

    def test_is_exclusive(self, tracker):
        assert tracker.is_exclusive(1)
        assert not tracker.is_exclusive(4)

    def test_unknown_id_is_not_exclusive(self, tracker):
        assert not tracker.is_exclusive(99)
        assert not tracker.is_known(99)

    def test_group_of_unknown_id_is_invariant_violation(self, tracker):
        with pytest.raises(InvariantViolation):
            tracker.group_of(99)

    def test_group_of(self, tracker):
        assert tracker.group_of(2) == 10
        assert tracker.group_of(5) == 20


class TestApplyExclusiveSelection:

    def test_non_exclusive_returns_false(self, tracker):
        selection = []
        assert tracker.apply_exclusive_selection(4, selection) is False
        assert selection == []

    def test_first_selection_appends(self, tracker):
        selection = [4]
        assert tracker.apply_exclusive_selection(1, selection) is True
        assert selection == [4, 1]
        assert tracker.active_item(10) == 1

    def test_replaces_previous_member(self, tracker):
        selection = []
        tracker.apply_exclusive_selection(1, selection)
        selection.append(4)
        tracker.apply_exclusive_selection(2, selection)

        assert selection == [4, 2]
        assert tracker.active_item(10) == 2

    def test_reselecting_active_moves_it_to_end(self, tracker):
        selection = []
        tracker.apply_exclusive_selection(1, selection)
        selection.append(4)
        tracker.apply_exclusive_selection(1, selection)

        assert selection == [4, 1]

    def test_active_id_missing_from_list_is_still_appended(self, tracker):
        """Active id recorded but absent from the list: new id still lands in the list."""
        tracker.apply_exclusive_selection(1, [])
        selection = [4]
        tracker.apply_exclusive_selection(3, selection)

        assert selection == [4, 3]
        assert tracker.active_item(10) == 3

    def test_duplicates_are_corrected_by_next_call(self, tracker):
        selection = [1, 2]
        tracker.apply_exclusive_selection(1, [])  # 1 active
        tracker.apply_exclusive_selection(2, selection)

        assert selection == [2]

    def test_at_most_one_member_after_any_sequence(self, tracker):
        selection = []
        for item_id in (1, 2, 3, 2, 1, 3, 3):
            tracker.apply_exclusive_selection(item_id, selection)
            members = [i for i in selection if i in (1, 2, 3)]
            assert members == [item_id]


class TestClear:

    def test_clear_active_keeps_registrations(self, tracker):
        tracker.apply_exclusive_selection(1, [])
        tracker.clear_active()

        assert tracker.active_item(10) is None
        assert tracker.is_exclusive(1)

    def test_clear_forgets_everything(self, tracker):
        tracker.clear()

        assert not tracker.is_known(1)
        assert tracker.known_ids == []
