"""
Tests for CLI functionality.

These tests verify the command-line interface logic.
"""

from __future__ import annotations

import argparse
from unittest.mock import patch

import pytest

from distance_matrix.cli import cmd_info, cmd_languages, cmd_lookup, create_parser, main
from distance_matrix.config import Settings
from distance_matrix.errors import TransportError, ValidationError
from distance_matrix.schemas import DistanceResult


def _lookup_args(**overrides: object) -> argparse.Namespace:
    values: dict[str, object] = {
        "o_addr": None,
        "o_latlng": None,
        "d_addr": None,
        "d_latlng": None,
        "mode": None,
        "units": None,
        "avoid": None,
        "language": None,
        "output": None,
        "sensor": None,
    }
    values.update(overrides)
    return argparse.Namespace(**values)


class TestCreateParser:
    """Tests for create_parser function."""

    def test_creates_parser(self) -> None:
        """Parser is created successfully."""
        parser = create_parser()
        assert isinstance(parser, argparse.ArgumentParser)
        assert parser.prog == "distance-matrix"

    def test_parser_has_version(self) -> None:
        """Parser has version argument."""
        parser = create_parser()
        with pytest.raises(SystemExit):
            parser.parse_args(["--version"])

    def test_parser_has_debug_flag(self) -> None:
        """Parser accepts --debug flag."""
        parser = create_parser()
        args = parser.parse_args(["--debug", "info"])
        assert args.debug is True

    def test_lookup_repeatable_locations(self) -> None:
        """Origins and destinations can be given several times."""
        parser = create_parser()
        args = parser.parse_args(
            [
                "lookup",
                "--from", "Vancouver+BC",
                "--from", "Seattle",
                "--from-latlng", "49.28,-123.12",
                "--to", "Victoria+BC",
                "--to-latlng", "37.77,-122.42",
            ]
        )  # fmt: skip
        assert args.command == "lookup"
        assert args.o_addr == ["Vancouver+BC", "Seattle"]
        assert args.o_latlng == ["49.28,-123.12"]
        assert args.d_addr == ["Victoria+BC"]
        assert args.d_latlng == ["37.77,-122.42"]

    def test_lookup_negative_coordinate(self) -> None:
        """Coordinates starting with a minus sign are values, not flags."""
        parser = create_parser()
        args = parser.parse_args(["lookup", "--from-latlng=-33.86,151.21", "--to", "Sydney"])
        assert args.o_latlng == ["-33.86,151.21"]

    def test_lookup_option_defaults_are_unset(self) -> None:
        """Unset option flags fall through to settings."""
        parser = create_parser()
        args = parser.parse_args(["lookup"])
        assert args.mode is None
        assert args.avoid is None
        assert args.sensor is None

    def test_lookup_options(self) -> None:
        """Option flags are parsed as given."""
        parser = create_parser()
        args = parser.parse_args(
            ["lookup", "--mode", "walking", "--units", "imperial", "--avoid", "tolls", "--sensor"]
        )
        assert args.mode == "walking"
        assert args.units == "imperial"
        assert args.avoid == "tolls"
        assert args.sensor is True

    def test_parser_info_and_languages(self) -> None:
        """Parser accepts info and languages commands."""
        parser = create_parser()
        assert parser.parse_args(["info"]).command == "info"
        assert parser.parse_args(["languages"]).command == "languages"


class TestCmdLookup:
    """Tests for cmd_lookup function."""

    def test_prints_results(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Each result is printed as a block."""
        args = _lookup_args(o_addr=["Vancouver+BC"], d_addr=["Victoria+BC"])
        result = DistanceResult(
            origin="Vancouver, BC, Canada",
            destination="Victoria, BC, Canada",
            duration="6 hours 35 mins",
            distance="139 km",
        )

        with patch("distance_matrix.cli.DistanceMatrix") as mock_client:
            mock_client.from_settings.return_value.get_distance.return_value = [result]
            exit_code = cmd_lookup(args)

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "Victoria, BC, Canada" in out
        assert "139 km" in out

    def test_passes_locations(self) -> None:
        """Locations are forwarded unchanged."""
        args = _lookup_args(o_addr=["A"], o_latlng=["1,2"], d_latlng=["3,4"])

        with patch("distance_matrix.cli.DistanceMatrix") as mock_client:
            mock_client.from_settings.return_value.get_distance.return_value = []
            cmd_lookup(args)
            mock_client.from_settings.return_value.get_distance.assert_called_once_with(
                o_addr=["A"], o_latlng=["1,2"], d_addr=None, d_latlng=["3,4"]
            )

    def test_only_given_options_override_settings(self) -> None:
        """Options left unset on the command line are not passed."""
        args = _lookup_args(o_addr=["A"], d_addr=["B"], mode="walking", sensor=True)

        with patch("distance_matrix.cli.DistanceMatrix") as mock_client:
            mock_client.from_settings.return_value.get_distance.return_value = []
            cmd_lookup(args)
            mock_client.from_settings.assert_called_once_with(mode="walking", sensor=True)

    def test_validation_error_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Client errors are reported on stderr with exit code 1."""
        args = _lookup_args(d_addr=["B"])

        with patch("distance_matrix.cli.DistanceMatrix") as mock_client:
            mock_client.from_settings.return_value.get_distance.side_effect = ValidationError(
                "missing mandatory param: origins"
            )
            exit_code = cmd_lookup(args)

        assert exit_code == 1
        assert "missing mandatory param: origins" in capsys.readouterr().err

    def test_transport_error_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Transport failures are reported the same way."""
        args = _lookup_args(o_addr=["A"], d_addr=["B"])

        with patch("distance_matrix.cli.DistanceMatrix") as mock_client:
            mock_client.from_settings.return_value.get_distance.side_effect = TransportError(
                "distance matrix request failed with HTTP 503", status_code=503
            )
            exit_code = cmd_lookup(args)

        assert exit_code == 1
        assert "503" in capsys.readouterr().err

    def test_missing_api_key_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        """A missing API key is a configuration error, not a crash."""
        args = _lookup_args(o_addr=["A"], d_addr=["B"])

        with patch(
            "distance_matrix.client.get_settings",
            return_value=Settings(_env_file=None, api_key=""),
        ):
            exit_code = cmd_lookup(args)

        assert exit_code == 1
        assert "api_key" in capsys.readouterr().err


class TestCmdInfo:
    """Tests for cmd_info function."""

    def test_prints_masked_settings(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Info shows settings without revealing the key."""
        settings = Settings(_env_file=None, api_key="AIzaSySecretValue", mode="walking")

        with patch("distance_matrix.cli.get_settings", return_value=settings):
            exit_code = cmd_info(argparse.Namespace())

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "AIza..." in out
        assert "SecretValue" not in out
        assert "Mode: walking" in out


class TestCmdLanguages:
    """Tests for cmd_languages function."""

    def test_lists_codes(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Every supported language code is listed."""
        assert cmd_languages(argparse.Namespace()) == 0
        codes = capsys.readouterr().out.split()
        assert "en" in codes
        assert "zh-TW" in codes
        assert len(codes) == 56


class TestMain:
    """Tests for main function."""

    def test_no_command_shows_help(self) -> None:
        """No command shows help and exits 0."""
        with patch("sys.argv", ["distance-matrix"]):
            exit_code = main()
            assert exit_code == 0

    def test_lookup_command_executes(self) -> None:
        """Lookup command dispatches to cmd_lookup."""
        with (
            patch("sys.argv", ["distance-matrix", "lookup", "--from", "A", "--to", "B"]),
            patch("distance_matrix.cli.cmd_lookup") as mock_cmd,
        ):
            mock_cmd.return_value = 0
            # main() looks handlers up at call time through the module dict
            exit_code = main()
            assert exit_code == 0
            mock_cmd.assert_called_once()

    def test_languages_command_executes(self) -> None:
        """Languages command runs end to end."""
        with patch("sys.argv", ["distance-matrix", "languages"]):
            assert main() == 0
