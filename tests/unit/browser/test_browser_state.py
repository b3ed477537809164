"""Tests for the browser navigation state machine.

Covers selection cycling, descending/ascending with listing rebuilds, and
rollback when a rebuild fails.
"""

from __future__ import annotations

import shutil
import tempfile
import unittest
from pathlib import Path

from dirbrowse.browser import BrowserState, BrowserView, EnterStatus
from dirbrowse.listing import EntryKind, ListingUnavailable


def _select_name(state: BrowserState, name: str) -> None:
    state.deselect()
    for _ in range(len(state.listing)):
        state.move_next()
        entry = state.selected_entry()
        if entry is not None and entry.name == name:
            return
    raise AssertionError(f"{name!r} not in listing")


class BrowserStateTestCase(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name) / "root"
        self.root.mkdir()
        (self.root / "a").mkdir()
        (self.root / "a" / "inner.txt").write_text("inner\n", encoding="utf-8")
        (self.root / "b.txt").write_text("b\n", encoding="utf-8")

    def tearDown(self) -> None:
        self._tmp.cleanup()


class SelectionTests(BrowserStateTestCase):
    def test_initial_selection_is_none(self) -> None:
        state = BrowserState(self.root)
        self.assertIsNone(state.selection)
        self.assertIsNone(state.selected_entry())
        self.assertEqual(state.path, self.root)

    def test_move_next_cycles_back_to_start(self) -> None:
        for name in ("c", "d", "e"):
            (self.root / name).write_text(name, encoding="utf-8")
        state = BrowserState(self.root)
        count = len(state.listing)
        state.move_next()
        start = state.selection
        for _ in range(count):
            state.move_next()
        self.assertEqual(state.selection, start)

    def test_move_previous_cycles_back_to_start(self) -> None:
        state = BrowserState(self.root)
        count = len(state.listing)
        state.move_previous()
        start = state.selection
        for _ in range(count):
            state.move_previous()
        self.assertEqual(state.selection, start)

    def test_next_wraps_from_last_to_first(self) -> None:
        state = BrowserState(self.root)
        state.move_previous()
        self.assertEqual(state.selection, len(state.listing) - 1)
        state.move_next()
        self.assertEqual(state.selection, 0)

    def test_previous_wraps_from_first_to_last(self) -> None:
        state = BrowserState(self.root)
        state.move_next()
        self.assertEqual(state.selection, 0)
        state.move_previous()
        self.assertEqual(state.selection, len(state.listing) - 1)

    def test_moves_on_empty_listing_keep_selection_none(self) -> None:
        empty = self.root / "empty"
        empty.mkdir()
        state = BrowserState(empty)
        state.move_next()
        self.assertIsNone(state.selection)
        state.move_previous()
        self.assertIsNone(state.selection)

    def test_deselect_then_next_selects_first_and_previous_selects_last(self) -> None:
        state = BrowserState(self.root)
        state.move_next()
        state.move_next()
        state.deselect()
        self.assertIsNone(state.selection)
        state.move_next()
        self.assertEqual(state.selection, 0)
        state.deselect()
        state.move_previous()
        self.assertEqual(state.selection, len(state.listing) - 1)

    def test_previous_from_none_with_three_entries_selects_index_two(self) -> None:
        (self.root / "c.txt").write_text("c\n", encoding="utf-8")
        state = BrowserState(self.root)
        self.assertEqual(len(state.listing), 3)
        state.move_previous()
        self.assertEqual(state.selection, 2)

    def test_deselect_when_nothing_selected_is_noop(self) -> None:
        state = BrowserState(self.root)
        state.deselect()
        self.assertIsNone(state.selection)


class NavigationTests(BrowserStateTestCase):
    def test_enter_directory_then_go_up_scenario(self) -> None:
        state = BrowserState(self.root)
        kinds = {entry.name: entry.kind for entry in state.listing.entries}
        self.assertEqual(kinds, {"a": EntryKind.DIRECTORY, "b.txt": EntryKind.FILE})

        _select_name(state, "a")
        outcome = state.enter()

        self.assertEqual(outcome.status, EnterStatus.DESCENDED)
        self.assertTrue(outcome.descended)
        self.assertEqual(state.path, self.root / "a")
        self.assertEqual(state.listing.path, state.path)
        self.assertIsNone(state.selection)
        self.assertEqual([entry.name for entry in state.listing.entries], ["inner.txt"])

        self.assertTrue(state.go_up())
        self.assertEqual(state.path, self.root)
        self.assertEqual(state.listing.path, self.root)
        self.assertIsNone(state.selection)
        kinds = {entry.name: entry.kind for entry in state.listing.entries}
        self.assertEqual(kinds, {"a": EntryKind.DIRECTORY, "b.txt": EntryKind.FILE})

    def test_go_up_then_enter_starting_directory_round_trips(self) -> None:
        start = self.root / "a"
        state = BrowserState(start)
        state.go_up()
        _select_name(state, "a")
        state.enter()
        self.assertEqual(state.path, start)

    def test_enter_without_selection_is_strict_noop(self) -> None:
        state = BrowserState(self.root)
        listing_before = state.listing

        outcome = state.enter()

        self.assertEqual(outcome.status, EnterStatus.NOTHING_SELECTED)
        self.assertIs(state.listing, listing_before)
        self.assertEqual(state.path, self.root)
        self.assertIsNone(state.selection)

    def test_enter_on_file_reports_unsupported_without_changing_state(self) -> None:
        state = BrowserState(self.root)
        _select_name(state, "b.txt")
        selection = state.selection
        listing_before = state.listing

        outcome = state.enter()

        self.assertEqual(outcome.status, EnterStatus.UNSUPPORTED)
        self.assertEqual(outcome.kind, EntryKind.FILE)
        self.assertIs(state.listing, listing_before)
        self.assertEqual(state.selection, selection)

    def test_enter_on_symlinked_directory_is_unsupported(self) -> None:
        (self.root / "link").symlink_to(self.root / "a", target_is_directory=True)
        state = BrowserState(self.root)
        _select_name(state, "link")

        outcome = state.enter()

        self.assertEqual(outcome.status, EnterStatus.UNSUPPORTED)
        self.assertEqual(outcome.kind, EntryKind.SYMLINK)
        self.assertEqual(state.path, self.root)

    def test_enter_rolls_back_when_directory_vanished(self) -> None:
        state = BrowserState(self.root)
        _select_name(state, "a")
        selection = state.selection
        listing_before = state.listing
        shutil.rmtree(self.root / "a")

        with self.assertRaises(ListingUnavailable):
            state.enter()

        self.assertEqual(state.path, self.root)
        self.assertIs(state.listing, listing_before)
        self.assertEqual(state.selection, selection)

    def test_go_up_rolls_back_when_parent_missing(self) -> None:
        state = BrowserState(self.root / "a")
        state.move_next()
        self.root.rename(Path(self._tmp.name) / "moved")

        with self.assertRaises(ListingUnavailable):
            state.go_up()

        self.assertEqual(state.path, self.root / "a")
        self.assertEqual(state.selection, 0)

    def test_go_up_at_filesystem_root_is_noop(self) -> None:
        root = Path(Path(self._tmp.name).anchor)
        state = BrowserState(root)
        listing_before = state.listing
        state.move_next()
        selection = state.selection

        self.assertFalse(state.go_up())

        self.assertEqual(state.path, root)
        self.assertIs(state.listing, listing_before)
        self.assertEqual(state.selection, selection)

    def test_refresh_picks_up_new_entries_and_clears_selection(self) -> None:
        state = BrowserState(self.root)
        state.move_next()
        (self.root / "new.txt").write_text("new\n", encoding="utf-8")

        state.refresh()

        self.assertIsNone(state.selection)
        self.assertIn("new.txt", [entry.name for entry in state.listing.entries])

    def test_construction_fails_for_missing_directory(self) -> None:
        with self.assertRaises(ListingUnavailable):
            BrowserState(self.root / "missing")


class CurrentViewTests(BrowserStateTestCase):
    def test_current_view_projects_rows_and_selection(self) -> None:
        state = BrowserState(self.root)
        state.move_next()

        view = state.current_view()

        self.assertIsInstance(view, BrowserView)
        self.assertEqual(view.path, self.root)
        self.assertEqual(view.selected, 0)
        self.assertEqual(
            view.rows,
            tuple((entry.name, entry.kind) for entry in state.listing.entries),
        )

    def test_current_view_does_not_mutate_state(self) -> None:
        state = BrowserState(self.root)
        listing_before = state.listing
        state.current_view()
        state.current_view()
        self.assertIs(state.listing, listing_before)
        self.assertIsNone(state.selection)


if __name__ == "__main__":
    unittest.main()
