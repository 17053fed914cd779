"""
Tests for hcl2json.cli module.

Tests the command-line interface including:
- Conversion to stdout and to a file
- Reading stdin
- Flags and options files
- Exit codes and error output
"""

from __future__ import annotations

import io
import json

import pytest

from hcl2json import __version__
from hcl2json.cli import build_parser, main


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_test_dir, monkeypatch):
    """Run every CLI test from an empty directory (no options file)."""
    monkeypatch.chdir(tmp_test_dir)


def run_cli(argv: list[str]) -> int:
    with pytest.raises(SystemExit) as exc_info:
        main(argv)
    return exc_info.value.code


class TestParser:
    """Tests for argument parsing."""

    def test_defaults_are_unset(self):
        """Test that option flags default to None so files can supply them."""
        args = build_parser().parse_args([])

        assert args.pretty is None
        assert args.indent is None
        assert args.single_quotes is None
        assert args.deep_merge is None
        assert args.file == []

    def test_repeated_file(self):
        args = build_parser().parse_args(["-f", "a.tfvars", "--file", "b.tfvars"])
        assert args.file == ["a.tfvars", "b.tfvars"]

    def test_version(self, capsys):
        assert run_cli(["--version"]) == 0
        assert "hcl2json" in capsys.readouterr().out


class TestConvertCommand:
    """Tests for conversions through main()."""

    def test_file_to_stdout(self, terraform_tfvars, capsys):
        code = run_cli(["-f", str(terraform_tfvars)])
        captured = capsys.readouterr()

        assert code == 0
        assert captured.out.endswith("\n")
        assert json.loads(captured.out)["region"] == "us-west-2"

    def test_stdin(self, monkeypatch, capsys):
        monkeypatch.setattr("sys.stdin", io.StringIO('region = "eu-west-1"\n'))

        code = run_cli([])

        assert code == 0
        assert capsys.readouterr().out == '{"region":"eu-west-1"}\n'

    def test_output_file(self, terraform_tfvars, tmp_test_dir, capsys):
        target = tmp_test_dir / "out.json"

        code = run_cli(["-f", str(terraform_tfvars), "-o", str(target), "--pretty"])

        assert code == 0
        assert capsys.readouterr().out == ""
        text = target.read_text(encoding="utf-8")
        assert text.startswith("{\n")
        assert not text.endswith("\n")

    def test_deep_merge_and_property(self, layered_tfvars, capsys):
        argv = []
        for path in layered_tfvars:
            argv += ["-f", str(path)]
        argv += ["--deep-merge", "-p", "tags"]

        code = run_cli(argv)

        assert code == 0
        assert json.loads(capsys.readouterr().out) == {
            "Environment": "staging",
            "Team": "backend",
        }

    def test_single_quotes_and_indent(self, terraform_tfvars, capsys):
        code = run_cli(
            ["-f", str(terraform_tfvars), "--pretty", "--indent", "4", "--single-quotes"]
        )

        assert code == 0
        assert "\n    'region': 'us-west-2'," in capsys.readouterr().out

    def test_options_file_applied(self, terraform_tfvars, create_yaml_file, capsys):
        """Test that .hcl2json.yaml in the working directory sets defaults."""
        create_yaml_file(".hcl2json.yaml", {"pretty": True, "indent": 3})

        code = run_cli(["-f", str(terraform_tfvars)])

        assert code == 0
        assert '\n   "region"' in capsys.readouterr().out

    def test_flag_overrides_options_file(
        self, terraform_tfvars, create_yaml_file, capsys
    ):
        create_yaml_file("opts.yaml", {"pretty": True, "indent": 3})

        code = run_cli(
            ["-f", str(terraform_tfvars), "--config", "opts.yaml", "--indent", "1"]
        )

        assert code == 0
        assert '\n "region"' in capsys.readouterr().out


class TestErrors:
    """Tests for error handling and exit codes."""

    def test_invalid_hcl(self, fixtures_dir, capsys):
        code = run_cli(["-f", str(fixtures_dir / "invalid.tfvars")])
        captured = capsys.readouterr()

        assert code == 1
        assert captured.out == ""
        assert captured.err.startswith("Error: Failed to parse HCL content")

    def test_missing_property(self, terraform_tfvars, capsys):
        code = run_cli(["-f", str(terraform_tfvars), "-p", "nonexistent"])

        assert code == 1
        assert "Property 'nonexistent' not found" in capsys.readouterr().err

    def test_unmatched_pattern(self, capsys):
        code = run_cli(["-f", "missing-*.tfvars"])

        assert code == 1
        assert "No files match pattern" in capsys.readouterr().err

    def test_negative_indent(self, terraform_tfvars, capsys):
        code = run_cli(["-f", str(terraform_tfvars), "--indent", "-1"])

        assert code == 1
        assert "indent" in capsys.readouterr().err

    def test_bad_options_file(self, terraform_tfvars, create_yaml_file, capsys):
        create_yaml_file(".hcl2json.yaml", {"colour": "blue"})

        code = run_cli(["-f", str(terraform_tfvars)])

        assert code == 1
        assert "Unknown option" in capsys.readouterr().err

    def test_verbose_prints_traceback(self, fixtures_dir, capsys):
        code = run_cli(["-f", str(fixtures_dir / "invalid.tfvars"), "-v"])

        assert code == 1
        assert "Traceback" in capsys.readouterr().err


class TestValidateCommand:
    """Tests for --validate."""

    def test_all_valid(self, layered_tfvars, capsys):
        first, second = layered_tfvars
        code = run_cli(["--validate", "-f", str(first), "-f", str(second)])
        captured = capsys.readouterr()

        assert code == 0
        assert captured.out == f"VALID: {first}\nVALID: {second}\n"

    def test_one_invalid(self, layered_tfvars, fixtures_dir, capsys):
        first, second = layered_tfvars
        invalid = fixtures_dir / "invalid.tfvars"

        code = run_cli(
            ["--validate", "-f", str(first), "-f", str(invalid), "-f", str(second)]
        )
        captured = capsys.readouterr()

        assert code == 1
        lines = captured.out.splitlines()
        assert lines[0] == f"VALID: {first}"
        assert lines[1].startswith(f"INVALID: {invalid}: ")
        assert lines[2] == f"VALID: {second}"
        assert "1 of 3 input(s) failed validation" in captured.err

    def test_unwritable_report_output(self, fixtures_dir, tmp_test_dir, capsys):
        """Test that a failed report write is an error message, not a traceback."""
        blocker = tmp_test_dir / "blocker"
        blocker.write_text("", encoding="utf-8")
        invalid = fixtures_dir / "invalid.tfvars"

        code = run_cli(
            ["--validate", "-f", str(invalid), "-o", str(blocker / "report.txt")]
        )
        captured = capsys.readouterr()

        assert code == 1
        assert captured.err.startswith("Error: Failed to write output file")
        assert "Traceback" not in captured.err


class TestLogging:
    """Tests for diagnostic output."""

    def test_verbose_goes_to_stderr(self, terraform_tfvars, capsys):
        code = run_cli(["-f", str(terraform_tfvars), "-v"])
        captured = capsys.readouterr()

        assert code == 0
        json.loads(captured.out)
        assert "[INPUT] Reading:" in captured.err
        assert "Shallow merging 1 document(s)" in captured.err

    def test_verbose_prints_numbered_steps(self, terraform_tfvars, capsys):
        code = run_cli(["-f", str(terraform_tfvars), "-p", "tags", "-v"])
        err = capsys.readouterr().err

        assert code == 0
        assert "[1/4] Parsing 1 input(s)" in err
        assert "[2/4] Shallow merging 1 document(s)" in err
        assert "[3/4] Extracting property: tags" in err
        assert "[4/4] Rendering JSON" in err

    def test_quiet_by_default(self, terraform_tfvars, capsys):
        """Test that a plain conversion writes nothing to stderr."""
        code = run_cli(["-f", str(terraform_tfvars)])

        assert code == 0
        assert capsys.readouterr().err == ""

    def test_debug_dumps_yaml(self, terraform_tfvars, capsys):
        code = run_cli(["-f", str(terraform_tfvars), "-d"])
        captured = capsys.readouterr()

        assert code == 0
        assert "--- Merged document ---" in captured.err
        assert "region: us-west-2" in captured.err

    def test_package_version_attribute(self):
        assert isinstance(__version__, str)
