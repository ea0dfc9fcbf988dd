"""
Unit tests for the Span and TextDocument models.

Tests cover:
- Span validation and helpers
- Cursor and selection handling
- Forward/backward search
- Insert/delete cursor bookkeeping and the modified flag
- Document kind detection from file extension
"""

import re

import pytest

from mdx_authoring.models import Span, TextDocument


class TestSpan:
    """Tests for Span dataclass."""

    @pytest.mark.unit
    def test_span_creation(self):
        span = Span(3, 7)

        assert span.start == 3
        assert span.end == 7
        assert span.length() == 4

    @pytest.mark.unit
    def test_span_rejects_inverted_positions(self):
        with pytest.raises(ValueError):
            Span(5, 2)

    @pytest.mark.unit
    def test_span_rejects_negative_positions(self):
        with pytest.raises(ValueError):
            Span(-1, 2)

    @pytest.mark.unit
    def test_contains_is_inclusive_at_both_ends(self):
        span = Span(10, 20)

        assert span.contains(10)
        assert span.contains(20)
        assert not span.contains(9)
        assert not span.contains(21)

    @pytest.mark.unit
    def test_overlaps(self):
        assert Span(0, 5).overlaps(Span(4, 8))
        assert not Span(0, 5).overlaps(Span(5, 8))  # Adjacent

    @pytest.mark.unit
    def test_span_is_immutable(self):
        span = Span(0, 1)
        with pytest.raises(Exception):
            span.start = 3


class TestTextDocumentCursor:
    """Tests for cursor and selection handling."""

    @pytest.mark.unit
    def test_selection_moves_cursor_to_end(self):
        doc = TextDocument("hello world", selection=Span(0, 5))

        assert doc.has_selection()
        assert doc.cursor == 5

    @pytest.mark.unit
    def test_move_to_drops_selection(self):
        doc = TextDocument("hello world", selection=Span(0, 5))
        doc.move_to(2)

        assert not doc.has_selection()
        assert doc.cursor == 2

    @pytest.mark.unit
    def test_position_out_of_range(self):
        doc = TextDocument("abc")

        with pytest.raises(ValueError):
            doc.move_to(4)
        with pytest.raises(ValueError):
            TextDocument("abc", cursor=-1)

    @pytest.mark.unit
    def test_supports_markup(self):
        assert TextDocument("x").supports_markup()
        assert not TextDocument("x", markup_capable=False).supports_markup()


class TestTextDocumentSearch:
    """Tests for search and read primitives."""

    @pytest.mark.unit
    def test_search_forward_from_offset(self):
        doc = TextDocument("ab ab ab")
        match = doc.search_forward("ab", 1)

        assert match.start() == 3

    @pytest.mark.unit
    def test_search_forward_multiline_anchors(self):
        doc = TextDocument("x\n---\ny")
        match = doc.search_forward(r"^---$")

        assert match is not None
        assert match.start() == 2

    @pytest.mark.unit
    def test_search_forward_accepts_compiled_pattern(self):
        doc = TextDocument("Hello")
        assert doc.search_forward(re.compile("hello", re.IGNORECASE)) is not None

    @pytest.mark.unit
    def test_search_backward_returns_last_match_before_end(self):
        doc = TextDocument("ab ab ab")
        match = doc.search_backward("ab", 6)

        assert match.start() == 3

    @pytest.mark.unit
    def test_search_not_found(self):
        doc = TextDocument("abc")

        assert doc.search_forward("z") is None
        assert doc.search_backward("z") is None

    @pytest.mark.unit
    def test_substring(self):
        doc = TextDocument("hello world")
        assert doc.substring(Span(6, 11)) == "world"


class TestTextDocumentMutation:
    """Tests for insert/delete bookkeeping."""

    @pytest.mark.unit
    def test_insert_at_cursor_advances(self):
        doc = TextDocument("ac", cursor=1)
        doc.insert(1, "b")

        assert doc.text == "abc"
        assert doc.cursor == 2
        assert doc.modified

    @pytest.mark.unit
    def test_insert_at_cursor_without_advance(self):
        doc = TextDocument("ac", cursor=1)
        doc.insert(1, "b", advance=False)

        assert doc.cursor == 1

    @pytest.mark.unit
    def test_insert_after_cursor_keeps_cursor(self):
        doc = TextDocument("abc", cursor=1)
        doc.insert(3, "d")

        assert doc.cursor == 1

    @pytest.mark.unit
    def test_insert_clears_selection(self):
        doc = TextDocument("abc", selection=Span(0, 1))
        doc.insert(3, "d")

        assert not doc.has_selection()

    @pytest.mark.unit
    def test_delete_before_cursor_shifts(self):
        doc = TextDocument("hello world", cursor=8)
        doc.delete(Span(0, 6))

        assert doc.text == "world"
        assert doc.cursor == 2

    @pytest.mark.unit
    def test_delete_around_cursor_clamps(self):
        doc = TextDocument("hello world", cursor=3)
        doc.delete(Span(1, 5))

        assert doc.text == "h world"
        assert doc.cursor == 1

    @pytest.mark.unit
    def test_new_document_is_unmodified(self):
        assert not TextDocument("abc").modified


class TestTextDocumentFromPath:
    """Tests for loading documents from disk."""

    @pytest.mark.unit
    def test_mdx_is_markup_capable(self, tmp_path):
        path = tmp_path / "a.mdx"
        path.write_text("x", encoding="utf-8")

        assert TextDocument.from_path(path).supports_markup()

    @pytest.mark.unit
    def test_txt_is_not_markup_capable(self, tmp_path):
        path = tmp_path / "a.txt"
        path.write_text("x", encoding="utf-8")

        assert not TextDocument.from_path(path).supports_markup()
