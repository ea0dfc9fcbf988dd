"""
Unit tests for the mdx-edit command-line interface (cli/edit.py).

Tests cover:
- Read-only commands (metadata, local-vars, locators)
- Mutating commands writing to stdout, --output and --in-place
- Precondition failures reported without writing anything
"""

import json
import unicodedata

import pytest

from mdx_authoring.cli.edit import build_parser, main
from mdx_authoring.version import ENGINE_VERSION


pytestmark = pytest.mark.cli


def offset_of(path: str, needle: str, extra: int = 0) -> str:
    with open(path, encoding="utf-8") as f:
        return str(f.read().index(needle) + extra)


class TestReadOnlyCommands:
    """Commands that only print."""

    def test_version(self, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["--version"])

        assert exc.value.code == 0
        assert ENGINE_VERSION in capsys.readouterr().out

    def test_metadata(self, article_file, capsys):
        main(["metadata", article_file])
        out = capsys.readouterr().out

        assert out.startswith("---\ntitle: Les villes du Levant")

    def test_metadata_missing(self, text_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["metadata", text_file])

        assert exc.value.code == 1
        assert "No metadata block" in capsys.readouterr().err

    def test_local_vars_json(self, article_file, capsys):
        main(["local-vars", article_file, "--json"])
        variables = json.loads(capsys.readouterr().out)

        assert variables["mode"] == "markdown"

    def test_local_vars_language(self, article_file, capsys):
        main(["local-vars", article_file, "--language"])
        assert capsys.readouterr().out.strip() == "francais"

    def test_locators_listing(self, capsys):
        main(["locators"])
        lines = capsys.readouterr().out.splitlines()

        assert len(lines) == 32
        assert "page\tp." in lines

    def test_locators_json(self, capsys):
        main(["locators", "--json"])
        entries = json.loads(capsys.readouterr().out)

        assert {"full_name": "volume", "abbreviation": "vol."} in entries

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["metadata", str(tmp_path / "nope.mdx")])

        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err


class TestMutatingCommands:
    """Commands that edit the document."""

    def test_cite_to_stdout(self, tmp_path, capsys):
        path = tmp_path / "a.mdx"
        path.write_text("See .", encoding="utf-8")

        main(["cite", str(path), "doe2020", "--short", "--cursor", "4"])

        assert capsys.readouterr().out == 'See <Cite bibKey={"doe2020"} short />.'
        assert path.read_text(encoding="utf-8") == "See ."

    def test_cite_retarget_reports_old_key(self, article_file, capsys):
        cursor = offset_of(article_file, "roe1999")
        main(["cite", article_file, "smith2001", "--cursor", cursor, "--in-place"])

        with open(article_file, encoding="utf-8") as f:
            assert '<Cite bibKey={"smith2001"} short />' in f.read()
        assert "roe1999" in capsys.readouterr().err

    def test_locator_to_output_file(self, article_file, tmp_path):
        output = tmp_path / "out" / "article.mdx"
        cursor = offset_of(article_file, "roe1999")

        main(["locator", article_file, "page", "--cursor", cursor, "-o", str(output)])

        assert '<Cite bibKey={"roe1999, p. "} short />' in output.read_text(encoding="utf-8")

    def test_locator_outside_citation(self, article_file, capsys):
        with open(article_file, encoding="utf-8") as f:
            before = f.read()

        with pytest.raises(SystemExit) as exc:
            main(["locator", article_file, "page", "--in-place"])

        assert exc.value.code == 1
        assert "Not in a citation" in capsys.readouterr().err
        with open(article_file, encoding="utf-8") as f:
            assert f.read() == before

    def test_unknown_locator_name(self, article_file):
        with pytest.raises(SystemExit) as exc:
            main(["locator", article_file, "galaxy"])

        assert exc.value.code == 2

    def test_wrap_selection(self, tmp_path, capsys):
        path = tmp_path / "a.md"
        path.write_text("one two three", encoding="utf-8")

        main(["wrap", str(path), "--open", "<em>", "--close", "</em>", "--selection", "4", "7"])

        assert capsys.readouterr().out == "one <em>two</em> three"

    def test_wrap_rejected_for_plain_text(self, text_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["wrap", text_file, "--open", "<em>", "--close", "</em>"])

        assert exc.value.code == 1
        assert "does not support markup" in capsys.readouterr().err

    def test_sort_related_in_place(self, article_file):
        main(["sort-related", article_file, "--in-place"])

        with open(article_file, encoding="utf-8") as f:
            text = f.read()
        assert unicodedata.normalize("NFD", "alep • Byblos • Damas • Émèse • Tyr") in text

    def test_sort_paragraph_custom_separator(self, tmp_path, capsys):
        path = tmp_path / "a.md"
        path.write_text("c; a; b", encoding="utf-8")

        main(["sort-paragraph", str(path), "--separator", "; "])

        assert capsys.readouterr().out == "a; b; c"

    def test_bad_cursor(self, article_file, capsys):
        with pytest.raises(SystemExit) as exc:
            main(["sort-paragraph", article_file, "--cursor", "100000"])

        assert exc.value.code == 1
        assert "outside document" in capsys.readouterr().err


class TestParser:
    """Tests for build_parser()."""

    def test_output_and_in_place_exclusive(self, article_file):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["sort-related", article_file, "-o", "x", "-i"])
