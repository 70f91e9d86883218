"""Tests for the beblia command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from beblia import load
from beblia.__main__ import cli
from beblia.localization import get_default_localization


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def xml_copy(tmp_path, sample_xml_path):
    path = tmp_path / "sample.xml"
    path.write_bytes(sample_xml_path.read_bytes())
    return path


class TestConvert:
    """Tests for `beblia convert`."""

    def test_convert_default_output(self, runner, xml_copy):
        result = runner.invoke(cli, ["convert", str(xml_copy)])
        assert result.exit_code == 0, result.output
        target = xml_copy.with_suffix(".beblia")
        assert target.read_bytes()[:8] == b"\x06BEBLIA\x02"
        assert "1 succeeded, 0 failed" in result.output

    def test_convert_explicit_output(self, runner, xml_copy, tmp_path):
        target = tmp_path / "KJV.beblia"
        result = runner.invoke(cli, ["convert", str(xml_copy), "-o", str(target)])
        assert result.exit_code == 0, result.output
        assert load(target).translation == "Sample English"

    def test_convert_reports_failures(self, runner, xml_copy, tmp_path):
        result = runner.invoke(
            cli, ["convert", str(xml_copy), str(tmp_path / "missing.xml")]
        )
        assert result.exit_code == 1
        assert "1 succeeded, 1 failed" in result.output

    def test_output_requires_single_input(self, runner, xml_copy, tmp_path):
        result = runner.invoke(
            cli, ["convert", str(xml_copy), str(xml_copy), "-o", str(tmp_path / "x")]
        )
        assert result.exit_code == 2


class TestGet:
    """Tests for `beblia get`."""

    def test_get_prints_verses(self, runner, xml_copy):
        result = runner.invoke(cli, ["get", str(xml_copy), "JN 3:16-17"])
        assert result.exit_code == 0, result.output
        assert "For God so loved the world." in result.output
        assert "John 3" in result.output

    def test_get_json_output(self, runner, xml_copy, tmp_path):
        out_path = tmp_path / "out.json"
        result = runner.invoke(
            cli, ["get", str(xml_copy), "JN 3:1,4", "--output", str(out_path)]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(out_path.read_text(encoding="utf-8"))
        assert data["book"] == "John"
        assert data["chapter"] == 3
        assert [v["number"] for v in data["verses"]] == [1, 4]

    def test_get_no_match(self, runner, xml_copy):
        result = runner.invoke(cli, ["get", str(xml_copy), "Nonesuch 1:1"])
        assert result.exit_code == 1
        assert "No verses found" in result.output

    def test_get_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["get", str(tmp_path / "none.xml"), "JN 3:16"])
        assert result.exit_code == 1
        assert "not found" in result.output


class TestBooksAndLocalization:
    """Tests for `beblia books` and `beblia localization`."""

    def test_books_table(self, runner, xml_copy):
        result = runner.invoke(cli, ["books", str(xml_copy), "--testament", "new"])
        assert result.exit_code == 0, result.output
        assert "Matthew" in result.output
        assert "Genesis" not in result.output

    def test_localization_default(self, runner):
        result = runner.invoke(cli, ["localization"])
        assert result.exit_code == 0, result.output
        assert "9 1 Samuel 1 Sam., 1 Sm., 1 Sa." in result.output

    def test_localization_written_to_file(self, runner, tmp_path):
        out_path = tmp_path / "books.txt"
        result = runner.invoke(cli, ["localization", "-o", str(out_path)])
        assert result.exit_code == 0, result.output
        assert "66 books" in result.output
        assert out_path.read_text(encoding="utf-8").startswith("#")

    def test_config_installs_custom_localization(self, runner, tmp_path):
        books = tmp_path / "books.txt"
        books.write_text("43 Jean Jn.\n", encoding="utf-8")
        config = tmp_path / "config.yaml"
        config.write_text(f"localization_path: {books}\n", encoding="utf-8")

        result = runner.invoke(cli, ["--config", str(config), "localization"])
        assert result.exit_code == 0, result.output
        assert "43 Jean Jn." in result.output
        assert get_default_localization().book_name(43) == "Jean"
