"""Tests for pane composition and screen layout.

Rows must always fill their pane exactly, carry the right style for the
entry kind or selection, and render denied listings as a single notice.
"""

from __future__ import annotations

import unittest
from pathlib import Path

from panewalk.compositor import (
    DENIED_NOTICE,
    PaneGeometry,
    PaneRow,
    compose_header,
    compose_pane,
    compose_screen,
    compute_layout,
    scroll_start,
)
from panewalk.listing import DENIED, EMPTY, Entry, EntryKind, Listing
from panewalk.text import display_width
from panewalk.ui_theme import DEFAULT_THEME, PLAIN_THEME


def _listing(*items: tuple[str, EntryKind]) -> Listing:
    return Listing(entries=tuple(Entry(name=name, kind=kind, path=Path("/x") / name) for name, kind in items))


THEME = DEFAULT_THEME


class ComposePaneTests(unittest.TestCase):
    def test_rows_use_kind_styles_and_highlight_selection(self) -> None:
        listing = _listing(
            ("docs", EntryKind.DIRECTORY),
            ("link", EntryKind.SYMLINK),
            ("notes.txt", EntryKind.REGULAR),
        )
        frame = compose_pane(listing, 1, PaneGeometry(0, 2, 12, 5), THEME)

        self.assertEqual(
            frame.rows,
            (
                PaneRow("docs        ", THEME.directory),
                PaneRow("link        ", THEME.selected),
                PaneRow("notes.txt   ", THEME.regular),
                PaneRow("            ", THEME.reset),
                PaneRow("            ", THEME.reset),
            ),
        )

    def test_long_names_are_truncated_to_pane_width(self) -> None:
        listing = _listing(("a-very-long-file-name.txt", EntryKind.REGULAR))
        frame = compose_pane(listing, None, PaneGeometry(0, 0, 6, 1), THEME)

        self.assertEqual(frame.rows[0].text, "a-very")

    def test_wide_characters_count_two_columns(self) -> None:
        listing = _listing(("日本語.txt", EntryKind.REGULAR))
        frame = compose_pane(listing, None, PaneGeometry(0, 0, 5, 1), THEME)

        self.assertEqual(frame.rows[0].text, "日本 ")
        self.assertEqual(display_width(frame.rows[0].text), 5)

    def test_control_characters_in_names_are_neutralized(self) -> None:
        listing = _listing(("evil\x1b[2Jname", EntryKind.REGULAR))
        frame = compose_pane(listing, None, PaneGeometry(0, 0, 16, 1), THEME)

        self.assertNotIn("\x1b", frame.rows[0].text)
        self.assertEqual(frame.rows[0].text, "evil?[2Jname    ")

    def test_denied_listing_renders_only_the_notice(self) -> None:
        frame = compose_pane(DENIED, 0, PaneGeometry(0, 0, 20, 3), THEME)

        self.assertEqual(frame.rows[0], PaneRow(DENIED_NOTICE.ljust(20), THEME.denied))
        self.assertEqual(frame.rows[1:], (PaneRow(" " * 20, THEME.reset),) * 2)

    def test_empty_listing_highlights_nothing(self) -> None:
        frame = compose_pane(EMPTY, 0, PaneGeometry(0, 0, 4, 2), THEME)

        self.assertTrue(all(row == PaneRow("    ", THEME.reset) for row in frame.rows))

    def test_start_offset_shifts_rows_and_selection(self) -> None:
        listing = _listing(*[(f"f{i}", EntryKind.REGULAR) for i in range(6)])
        frame = compose_pane(listing, 4, PaneGeometry(0, 0, 3, 2), THEME, start=3)

        self.assertEqual(frame.rows, (PaneRow("f3 ", THEME.regular), PaneRow("f4 ", THEME.selected)))

    def test_every_row_spans_exact_width(self) -> None:
        listing = _listing(("x", EntryKind.REGULAR), ("longer-name", EntryKind.DIRECTORY))
        for width in (0, 1, 7, 30):
            frame = compose_pane(listing, 0, PaneGeometry(0, 0, width, 4), PLAIN_THEME)
            self.assertEqual(len(frame.rows), 4)
            for row in frame.rows:
                self.assertEqual(display_width(row.text), width)


class LayoutTests(unittest.TestCase):
    def test_layout_splits_width_into_thirds_below_header_rows(self) -> None:
        layout = compute_layout(100, 30, show_metadata=True)

        self.assertEqual(layout.header, PaneGeometry(0, 0, 100, 1))
        self.assertEqual(layout.metadata, PaneGeometry(0, 1, 100, 1))
        self.assertEqual(layout.parent, PaneGeometry(0, 2, 33, 28))
        self.assertEqual(layout.current, PaneGeometry(33, 2, 33, 28))
        self.assertEqual(layout.child, PaneGeometry(66, 2, 34, 28))

    def test_layout_without_metadata_row(self) -> None:
        layout = compute_layout(90, 10, show_metadata=False)

        self.assertIsNone(layout.metadata)
        self.assertEqual(layout.current, PaneGeometry(30, 1, 30, 9))

    def test_tiny_terminal_keeps_one_pane_row(self) -> None:
        layout = compute_layout(2, 1, show_metadata=True)

        self.assertEqual(layout.current.height, 1)
        self.assertEqual(layout.parent.width, 0)
        self.assertEqual(layout.child.width, 2)


class ScrollStartTests(unittest.TestCase):
    def test_viewport_moves_only_when_selection_leaves_it(self) -> None:
        self.assertEqual(scroll_start(0, 3, 20, 5), 0)
        self.assertEqual(scroll_start(0, 5, 20, 5), 1)
        self.assertEqual(scroll_start(4, 6, 20, 5), 4)
        self.assertEqual(scroll_start(4, 2, 20, 5), 2)

    def test_viewport_never_scrolls_past_last_page(self) -> None:
        self.assertEqual(scroll_start(18, 19, 20, 5), 15)
        self.assertEqual(scroll_start(7, 0, 3, 5), 0)


class ComposeScreenTests(unittest.TestCase):
    def test_screen_contains_header_metadata_and_three_panes(self) -> None:
        layout = compute_layout(30, 6, show_metadata=True)
        current = _listing(("a", EntryKind.DIRECTORY), ("b", EntryKind.REGULAR))
        frames = compose_screen(
            layout,
            THEME,
            path_text="/home/user",
            metadata_text="directory",
            parent=_listing(("user", EntryKind.DIRECTORY)),
            current=current,
            child=DENIED,
            selection_index=0,
        )

        self.assertEqual([frame.geometry for frame in frames], [
            layout.header,
            layout.metadata,
            layout.parent,
            layout.current,
            layout.child,
        ])
        self.assertEqual(frames[0].rows, (PaneRow("/home/user".ljust(30), THEME.header),))
        self.assertEqual(frames[1].rows, (PaneRow("directory".ljust(30), THEME.metadata),))
        self.assertEqual(frames[2].rows[0].style, THEME.directory)
        self.assertEqual(frames[3].rows[0].style, THEME.selected)
        self.assertEqual(frames[4].rows[0].style, THEME.denied)

    def test_header_frame_pads_extra_rows(self) -> None:
        frame = compose_header("path", PaneGeometry(0, 0, 6, 2), THEME.header)

        self.assertEqual(frame.rows, (PaneRow("path  ", THEME.header), PaneRow("      ", THEME.header)))


if __name__ == "__main__":
    unittest.main()
