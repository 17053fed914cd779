"""
Tests for hcl2json.io module.

Tests input gathering and output writing including:
- Glob expansion, ordering, and de-duplication
- Unmatched patterns
- UTF-8 reading
- Output to stdout and files
"""

from __future__ import annotations

import io
from pathlib import Path

import pytest

from hcl2json.exceptions import InputError
from hcl2json.io import expand_patterns, read_documents, read_stdin, write_output


class TestExpandPatterns:
    """Tests for expand_patterns."""

    def test_literal_path(self, create_hcl_file):
        path = create_hcl_file("main.tfvars", "a = 1\n")
        assert expand_patterns([str(path)]) == [path]

    def test_glob_sorted(self, tmp_test_dir, create_hcl_file):
        """Test that matches of one pattern are sorted."""
        create_hcl_file("b.tfvars", "b = 1\n")
        create_hcl_file("a.tfvars", "a = 1\n")
        create_hcl_file("c.tfvars", "c = 1\n")

        paths = expand_patterns([str(tmp_test_dir / "*.tfvars")])

        assert [p.name for p in paths] == ["a.tfvars", "b.tfvars", "c.tfvars"]

    def test_pattern_order_kept(self, create_hcl_file):
        """Test that patterns are expanded in the order given."""
        z = create_hcl_file("z.tfvars", "z = 1\n")
        a = create_hcl_file("a.tfvars", "a = 1\n")

        assert expand_patterns([str(z), str(a)]) == [z, a]

    def test_duplicates_removed(self, tmp_test_dir, create_hcl_file):
        """Test that a file matched twice is read once, at its first position."""
        a = create_hcl_file("a.tfvars", "a = 1\n")
        b = create_hcl_file("b.tfvars", "b = 1\n")

        paths = expand_patterns([str(b), str(tmp_test_dir / "*.tfvars")])

        assert paths == [b, a]

    def test_recursive_glob(self, tmp_test_dir, create_hcl_file):
        create_hcl_file("env/prod/main.tfvars", "a = 1\n")
        paths = expand_patterns([str(tmp_test_dir / "**" / "*.tfvars")])
        assert [p.name for p in paths] == ["main.tfvars"]

    def test_directories_skipped(self, tmp_test_dir, create_hcl_file):
        (tmp_test_dir / "dir.tfvars").mkdir()
        f = create_hcl_file("file.tfvars", "a = 1\n")
        assert expand_patterns([str(tmp_test_dir / "*.tfvars")]) == [f]

    def test_no_match_raises(self, tmp_test_dir):
        """Test that a pattern matching nothing is an error."""
        with pytest.raises(InputError, match="No files match pattern"):
            expand_patterns([str(tmp_test_dir / "missing.tfvars")])


class TestReadDocuments:
    """Tests for read_documents."""

    def test_names_and_text(self, create_hcl_file):
        path = create_hcl_file("main.tfvars", 'city = "Zürich"\n')
        assert read_documents([path]) == [(str(path), 'city = "Zürich"\n')]

    def test_not_utf8_raises(self, tmp_test_dir):
        path = tmp_test_dir / "latin1.tfvars"
        path.write_bytes(b'city = "Z\xfcrich"\n')
        with pytest.raises(InputError, match="not valid UTF-8"):
            read_documents([path])

    def test_unreadable_raises(self, tmp_test_dir):
        with pytest.raises(InputError, match="Failed to read file"):
            read_documents([tmp_test_dir / "gone.tfvars"])


class TestStdinAndOutput:
    """Tests for read_stdin and write_output."""

    def test_read_stdin_stream(self):
        assert read_stdin(io.StringIO("a = 1\n")) == "a = 1\n"

    def test_read_stdin_default(self, monkeypatch):
        monkeypatch.setattr("sys.stdin", io.StringIO("b = 2\n"))
        assert read_stdin() == "b = 2\n"

    def test_write_stdout(self, capsys):
        """Test that stdout output ends with a newline."""
        write_output('{"a":1}')
        assert capsys.readouterr().out == '{"a":1}\n'

    def test_write_file(self, tmp_test_dir):
        """Test that file output is written exactly, creating directories."""
        target = tmp_test_dir / "out" / "result.json"
        write_output('{"a":1}', target)
        assert target.read_text(encoding="utf-8") == '{"a":1}'

    def test_write_file_failure(self, tmp_test_dir):
        blocker = tmp_test_dir / "blocker"
        blocker.write_text("x")
        with pytest.raises(InputError, match="Failed to write output file"):
            write_output("{}", Path(blocker) / "result.json")
