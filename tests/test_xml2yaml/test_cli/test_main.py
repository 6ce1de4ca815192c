"""Tests for the CLI main module."""

import io
import sys
from pathlib import Path
from unittest.mock import patch

import pytest

from xml2yaml import __version__
from xml2yaml.cli.main import create_argument_parser, main


def _fake_stdin(data: bytes) -> io.TextIOWrapper:
    return io.TextIOWrapper(io.BytesIO(data), encoding="utf-8")


class TestArgumentParser:
    """Test command-line argument parsing."""

    def test_create_parser(self) -> None:
        """Test parser creation."""
        parser = create_argument_parser()
        assert parser.prog == "xml2yaml"

    def test_no_arguments(self) -> None:
        """Test both positionals are optional."""
        args = create_argument_parser().parse_args([])
        assert args.input is None
        assert args.output is None

    def test_input_and_output(self) -> None:
        """Test positional arguments."""
        args = create_argument_parser().parse_args(["in.xml", "out.yaml"])
        assert args.input == "in.xml"
        assert args.output == "out.yaml"

    def test_dash_arguments(self) -> None:
        """Test the stdio marker is accepted."""
        args = create_argument_parser().parse_args(["-", "-"])
        assert args.input == "-"
        assert args.output == "-"

    def test_extra_arguments_rejected(self) -> None:
        """Test a third positional is an error."""
        with pytest.raises(SystemExit) as exc_info:
            create_argument_parser().parse_args(["a", "b", "c"])
        assert exc_info.value.code == 2

    def test_version(self, capsys) -> None:
        """Test --version prints the package version."""
        with pytest.raises(SystemExit) as exc_info:
            main(["--version"])
        assert exc_info.value.code == 0
        assert __version__ in capsys.readouterr().out


class TestMainFunction:
    """Test main CLI function."""

    def test_file_to_file(self, tmp_path: Path) -> None:
        """Test converting a file into a file."""
        xml_path = tmp_path / "in.xml"
        yaml_path = tmp_path / "out.yaml"
        xml_path.write_text("<r><a>1</a><b/></r>", encoding="utf-8")

        exit_code = main([str(xml_path), str(yaml_path)])

        assert exit_code == 0
        assert yaml_path.read_text(encoding="utf-8") == "r:\n  a: '1'\n  b: {}\n"

    def test_file_to_stdout(self, tmp_path: Path, capsys) -> None:
        """Test output defaults to stdout."""
        xml_path = tmp_path / "in.xml"
        xml_path.write_text("<root>hello</root>", encoding="utf-8")

        exit_code = main([str(xml_path)])

        assert exit_code == 0
        assert capsys.readouterr().out == "root: hello\n"

    def test_explicit_stdout_marker(self, tmp_path: Path, capsys) -> None:
        """Test - selects stdout."""
        xml_path = tmp_path / "in.xml"
        xml_path.write_text("<root>hello</root>", encoding="utf-8")

        assert main([str(xml_path), "-"]) == 0
        assert capsys.readouterr().out == "root: hello\n"

    def test_stdin_to_stdout(self, monkeypatch, capsys) -> None:
        """Test input defaults to stdin."""
        monkeypatch.setattr(sys, "stdin", _fake_stdin("<r><a>é</a></r>".encode("utf-8")))

        exit_code = main([])

        assert exit_code == 0
        assert capsys.readouterr().out == "r:\n  a: é\n"

    def test_stdin_to_file(self, tmp_path: Path, monkeypatch) -> None:
        """Test - selects stdin."""
        yaml_path = tmp_path / "out.yaml"
        monkeypatch.setattr(sys, "stdin", _fake_stdin(b"<a>x</a>"))

        assert main(["-", str(yaml_path)]) == 0
        assert yaml_path.read_text(encoding="utf-8") == "a: x\n"

    def test_missing_input_file(self, tmp_path: Path, capsys) -> None:
        """Test a missing input reports the path and fails."""
        missing = tmp_path / "missing.xml"

        exit_code = main([str(missing)])

        captured = capsys.readouterr()
        assert exit_code == 1
        assert captured.out == ""
        assert "Failed to open file" in captured.err
        assert str(missing) in captured.err

    def test_malformed_input(self, tmp_path: Path, capsys) -> None:
        """Test a parse error fails without writing output."""
        xml_path = tmp_path / "bad.xml"
        yaml_path = tmp_path / "out.yaml"
        xml_path.write_text("<r><a></r>", encoding="utf-8")

        exit_code = main([str(xml_path), str(yaml_path)])

        assert exit_code == 1
        assert not yaml_path.exists()
        assert "xml2yaml: error:" in capsys.readouterr().err

    def test_unwritable_output(self, tmp_path: Path, capsys) -> None:
        """Test an uncreatable output path fails."""
        xml_path = tmp_path / "in.xml"
        xml_path.write_text("<a/>", encoding="utf-8")
        yaml_path = tmp_path / "missing-dir" / "out.yaml"

        exit_code = main([str(xml_path), str(yaml_path)])

        assert exit_code == 1
        assert "Failed to create file" in capsys.readouterr().err

    def test_undeclared_prefix(self, tmp_path: Path, capsys) -> None:
        """Test a tag with an undeclared namespace prefix converts cleanly."""
        xml_path = tmp_path / "in.xml"
        xml_path.write_text("<x:r>a</x:r>", encoding="utf-8")

        exit_code = main([str(xml_path)])

        assert exit_code == 0
        assert capsys.readouterr().out == "x:r: a\n"

    def test_keyboard_interrupt(self) -> None:
        """Test main function handling keyboard interrupt."""
        with patch("xml2yaml.cli.main.read_and_convert", side_effect=KeyboardInterrupt):
            exit_code = main(["in.xml"])
        assert exit_code == 130  # Standard exit code for SIGINT


@pytest.mark.integration
class TestCLIIntegration:
    """Integration tests for CLI functionality."""

    def test_realistic_document(self, tmp_path: Path) -> None:
        """Test a document with declaration, comments and attributes."""
        xml_path = tmp_path / "catalog.xml"
        yaml_path = tmp_path / "catalog.yaml"
        xml_path.write_text(
            '<?xml version="1.0" encoding="UTF-8"?>\n'
            "<!-- product catalog -->\n"
            "<catalog>\n"
            '  <product id="1">\n'
            "    <name>Widget &amp; Co</name>\n"
            "    <price>9.99</price>\n"
            "  </product>\n"
            "  <empty/>\n"
            "</catalog>\n",
            encoding="utf-8",
        )

        assert main([str(xml_path), str(yaml_path)]) == 0
        assert yaml_path.read_text(encoding="utf-8") == (
            "catalog:\n"
            "  product:\n"
            "    name: Widget & Co\n"
            "    price: '9.99'\n"
            "  empty: {}\n"
        )
