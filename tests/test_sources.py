"""Tests for reading dependency coordinates."""
from __future__ import annotations

import io
from pathlib import Path

import pytest

from license_check.exceptions import ConfigurationError, CoordinateError
from license_check.models.coordinate import DependencyCoordinate
from license_check.sources import (
    parse_coordinates,
    read_coordinates,
    unique_coordinates,
)


class TestParseCoordinates:
    """Tests for parse_coordinates."""

    def test_parses_lines_in_order(self) -> None:
        """Test that coordinates keep their input order."""
        result = parse_coordinates(["z:z:1", "a:a:1", "m:m:1"])
        assert [str(c) for c in result] == ["z:z:1", "a:a:1", "m:m:1"]

    def test_skips_blank_lines_and_comments(self) -> None:
        """Test that blank lines and # comments are ignored."""
        result = parse_coordinates(["", "# runtime deps", "  g:a:1  ", "   "])
        assert [str(c) for c in result] == ["g:a:1"]

    def test_drops_repeated_coordinates(self) -> None:
        """Test that the same coordinate is only checked once."""
        result = parse_coordinates(["g:a:1", "g:a:jar:1:compile", "g:a:1"])
        assert [str(c) for c in result] == ["g:a:1"]

    def test_error_names_line_number(self) -> None:
        """Test that parse errors report the offending line."""
        with pytest.raises(CoordinateError) as exc_info:
            parse_coordinates(["g:a:1", "# comment", "broken"])
        assert "line 3" in str(exc_info.value)
        assert "broken" in str(exc_info.value)

    def test_empty_input(self) -> None:
        assert parse_coordinates([]) == []

    def test_skips_dependency_list_header_and_none(self) -> None:
        """Test that a project without dependencies yields no coordinates."""
        result = parse_coordinates(
            ["", "The following files have been resolved:", "   none", ""]
        )
        assert result == []

    def test_strips_module_suffix_and_optional_flag(self) -> None:
        """Test that trailing annotations after the coordinate are ignored."""
        result = parse_coordinates(
            [
                "   junit:junit:jar:4.13.2:test -- module junit",
                "   org.slf4j:slf4j-api:jar:2.0.9:compile -- module org.slf4j [auto]",
                "   com.example:extra:jar:1.0:compile (optional)",
            ]
        )
        assert [str(c) for c in result] == [
            "junit:junit:4.13.2",
            "org.slf4j:slf4j-api:2.0.9",
            "com.example:extra:1.0",
        ]


class TestUniqueCoordinates:
    """Tests for unique_coordinates."""

    def test_keeps_first_occurrence_in_order(self) -> None:
        a, b = DependencyCoordinate.parse("g:a:1"), DependencyCoordinate.parse("g:b:1")
        assert unique_coordinates([b, a, b, a]) == [b, a]


class TestReadCoordinates:
    """Tests for read_coordinates."""

    def test_reads_file(self, tmp_path: Path) -> None:
        """Test reading a dependency:list style file."""
        deps = tmp_path / "deps.txt"
        deps.write_text(
            "# resolved dependencies\n"
            "junit:junit:jar:4.13.2:test\n"
            "org.slf4j:slf4j-api:jar:2.0.9:compile\n"
        )

        result = read_coordinates(str(deps))

        assert [str(c) for c in result] == [
            "junit:junit:4.13.2",
            "org.slf4j:slf4j-api:2.0.9",
        ]

    def test_missing_file_raises_configuration_error(self, tmp_path: Path) -> None:
        """Test that unreadable files raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            read_coordinates(str(tmp_path / "missing.txt"))
        assert "Cannot read dependency file" in str(exc_info.value)

    def test_reads_dependency_list_output_file(self, tmp_path: Path) -> None:
        """Test reading a file written by mvn dependency:list -DoutputFile."""
        deps = tmp_path / "deps.txt"
        deps.write_text(
            "\n"
            "The following files have been resolved:\n"
            "   junit:junit:jar:4.13.2:test -- module junit\n"
            "   org.hamcrest:hamcrest-core:jar:1.3:test -- module org.hamcrest.core [auto]\n"
            "\n"
        )

        result = read_coordinates(str(deps))

        assert [str(c) for c in result] == [
            "junit:junit:4.13.2",
            "org.hamcrest:hamcrest-core:1.3",
        ]

    def test_reads_stdin(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that '-' reads coordinates from stdin."""
        monkeypatch.setattr("sys.stdin", io.StringIO("g:a:1\ng:b:2\n"))

        result = read_coordinates("-")

        assert [str(c) for c in result] == ["g:a:1", "g:b:2"]
