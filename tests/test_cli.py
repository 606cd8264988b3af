"""Tests for the command-line interface.

WHY: The CLI is the quickest way to inspect what the engine makes of a
real page; it must write the selected outputs and fail clearly.

HOW: Write a small HTML file to tmp_path, run main() with explicit argv,
and inspect the written files and stderr.

RULES:
- All file I/O uses tmp_path for isolation.
"""

import pytest

from conftest import SAMPLE_PAGE
from rich_content.cli import _resolve_output_path, main


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "article.html"
    path.write_text(SAMPLE_PAGE, encoding="utf-8")
    return path


class TestCliOutputs:

    def test_writes_selected_formats(self, page, tmp_path):
        main([str(page), "--selector", ".body", "--formats", "markup,text,json"])
        assert (tmp_path / "article-content.html").read_text(encoding="utf-8") == (
            'Hello <strong>bold</strong> and <a href="/x" title="X">a <em>link</em></a>!'
        )
        assert (tmp_path / "article-content.txt").read_text(encoding="utf-8") == (
            "Hello bold and a link!\n"
        )
        assert (tmp_path / "article-content.json").is_file()

    def test_output_dir(self, page, tmp_path):
        out = tmp_path / "out"
        out.mkdir()
        main([str(page), "--selector", ".other", "--formats", "text", "--output-dir", str(out)])
        assert (out / "article-content.txt").read_text(encoding="utf-8") == "Other\n"

    def test_conflicting_output_gets_numbered(self, page, tmp_path):
        main([str(page), "--selector", ".other", "--formats", "text"])
        main([str(page), "--selector", ".other", "--formats", "text"])
        assert (tmp_path / "article-content-2.txt").is_file()

    def test_unmatched_selector_reports_and_writes_empty(self, page, tmp_path, capsys):
        main([str(page), "--selector", ".missing", "--formats", "text"])
        assert "matched no content" in capsys.readouterr().err
        assert (tmp_path / "article-content.txt").read_text(encoding="utf-8") == ""

    def test_no_coalesce_keeps_markup_identical(self, tmp_path):
        path = tmp_path / "c.html"
        path.write_text("<html><body><p>x<!-- c -->y</p></body></html>", encoding="utf-8")
        main([str(path), "--selector", "p", "--formats", "markup", "--no-coalesce"])
        assert (tmp_path / "c-content.html").read_text(encoding="utf-8") == "xy"


class TestCliEncodings:
    """Files are read as bytes so lxml can honour the declared encoding."""

    def test_xhtml_with_xml_declaration(self, tmp_path):
        path = tmp_path / "x.xhtml"
        path.write_bytes(
            b'<?xml version="1.0" encoding="utf-8"?>\n'
            b'<html xmlns="http://www.w3.org/1999/xhtml"><body>'
            b"<p>Hi <em>there</em></p></body></html>"
        )
        main([str(path), "--selector", "p", "--formats", "text"])
        assert (tmp_path / "x-content.txt").read_text(encoding="utf-8") == "Hi there\n"

    def test_latin1_with_meta_charset(self, tmp_path):
        path = tmp_path / "l.html"
        path.write_bytes(
            b'<html><head><meta http-equiv="Content-Type" content="text/html; charset=iso-8859-1"></head>'
            b"<body><p>caf\xe9</p></body></html>"
        )
        main([str(path), "--selector", "p", "--formats", "text"])
        assert (tmp_path / "l-content.txt").read_text(encoding="utf-8") == "caf\u00e9\n"

    def test_undecodable_bytes_never_crash(self, tmp_path, capsys):
        path = tmp_path / "b.html"
        path.write_bytes(b"<html><body><p>\xff</p></body></html>")
        try:
            main([str(path), "--selector", "p", "--formats", "text"])
        except SystemExit as exc:
            assert exc.code == 1
            assert "Error:" in capsys.readouterr().err
        else:
            assert (tmp_path / "b-content.txt").is_file()


class TestCliErrors:

    def test_missing_file(self, tmp_path, capsys):
        with pytest.raises(SystemExit) as exc:
            main([str(tmp_path / "nope.html")])
        assert exc.value.code == 1
        assert "File not found" in capsys.readouterr().err

    def test_unknown_format(self, page, capsys):
        with pytest.raises(SystemExit):
            main([str(page), "--formats", "pdf"])
        assert "Unknown format(s): pdf" in capsys.readouterr().err

    def test_missing_output_dir(self, page, tmp_path, capsys):
        with pytest.raises(SystemExit):
            main([str(page), "--output-dir", str(tmp_path / "missing")])
        assert "Output directory does not exist" in capsys.readouterr().err

    def test_empty_document(self, tmp_path, capsys):
        path = tmp_path / "empty.html"
        path.write_text("", encoding="utf-8")
        with pytest.raises(SystemExit):
            main([str(path)])
        assert "Could not parse" in capsys.readouterr().err


class TestResolveOutputPath:

    def test_free_name(self, tmp_path):
        assert _resolve_output_path("a", "-content.txt", tmp_path) == tmp_path / "a-content.txt"

    def test_counter_increments(self, tmp_path):
        (tmp_path / "a-content.txt").write_text("")
        (tmp_path / "a-content-2.txt").write_text("")
        assert _resolve_output_path("a", "-content.txt", tmp_path) == tmp_path / "a-content-3.txt"

    def test_suffix_without_extension(self, tmp_path):
        (tmp_path / "a-notes").write_text("")
        assert _resolve_output_path("a", "-notes", tmp_path) == tmp_path / "a-notes-2"
