# tests/test_cli.py
"""
Tests for the CLI parser and execution logic.

These tests verify correct CLI parsing, config fallback behavior,
flag handling, and main entry point integration.

Modules tested:
- build_arg_parser()
- run_from_args()
- main()
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import TYPE_CHECKING

import pytest
import tomlkit
from PIL import Image

import header_composer.cli as hc_cli
import header_composer.main as hc_main
from header_composer.config import HeaderConfig

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


class TestCLIArgumentParsing:
    """Unit tests for CLI flag parsing."""

    def test_positional_images(self) -> None:
        parser = hc_cli.build_arg_parser()
        args = parser.parse_args(["a.png", "b.png"])
        assert args.images == [Path("a.png"), Path("b.png")]

    def test_unset_options_are_absent(self) -> None:
        """SUPPRESS defaults keep unset flags out of the namespace."""
        args = hc_cli.build_arg_parser().parse_args(["a.png"])
        for name in ("spacing", "margin", "constrain_height", "plus",
                     "plus_length", "plus_stroke_width", "end_with_equals",
                     "output", "filename", "encoding"):
            assert not hasattr(args, name), name
        assert args.config is None
        assert args.validate_config_only is False

    def test_layout_and_glyph_flags(self) -> None:
        args = hc_cli.build_arg_parser().parse_args([
            "a.png",
            "--spacing", "12.5",
            "--margin", "0",
            "--constrain-height",
            "--plus",
            "--plus-length", "8",
            "--plus-stroke-width", "2",
            "--end-with-equals",
            "--encoding", "data-url",
        ])
        assert args.spacing == 12.5  # noqa: PLR2004
        assert args.margin == 0
        assert args.constrain_height is True
        assert args.plus is True
        assert args.plus_length == 8  # noqa: PLR2004
        assert args.plus_stroke_width == 2  # noqa: PLR2004
        assert args.end_with_equals is True
        assert args.encoding == "data-url"

    def test_negated_flags(self) -> None:
        args = hc_cli.build_arg_parser().parse_args(
            ["a.png", "--no-plus", "--no-constrain-height"],
        )
        assert args.plus is False
        assert args.constrain_height is False

    @pytest.mark.parametrize("value", ["-1", "wide", "inf", "nan"])
    def test_rejects_bad_numbers(
        self,
        value: str,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.build_arg_parser().parse_args(["a.png", "--spacing", value])
        assert exc_info.value.code == 2  # noqa: PLR2004
        assert "--spacing" in capsys.readouterr().err

    def test_non_negative_float(self) -> None:
        assert hc_cli.non_negative_float("0") == 0
        assert hc_cli.non_negative_float("3.5") == 3.5  # noqa: PLR2004
        with pytest.raises(argparse.ArgumentTypeError, match="negative"):
            hc_cli.non_negative_float("-0.1")
        with pytest.raises(argparse.ArgumentTypeError, match="finite"):
            hc_cli.non_negative_float("inf")


class TestRunFromArgs:
    """Config merging and delegation to compose_header."""

    def test_delegates_with_merged_config(
        self,
        tmp_path: Path,
        mocker: MockerFixture,
    ) -> None:
        config_path = tmp_path / "config.toml"
        doc = tomlkit.document()
        doc.update({"layout": {"margin": 4, "spacing": 9}})
        config_path.write_text(tomlkit.dumps(doc), encoding="utf-8")

        compose = mocker.patch.object(
            hc_main, "compose_header", return_value=tmp_path / "header.png",
        )
        args = hc_cli.build_arg_parser().parse_args([
            "a.png", "--config", str(config_path), "--margin", "6",
        ])

        assert hc_cli.run_from_args(args) == tmp_path / "header.png"

        paths, cfg = compose.call_args.args
        assert paths == [Path("a.png")]
        assert isinstance(cfg, HeaderConfig)
        assert cfg.layout.margin == 6  # noqa: PLR2004
        assert cfg.layout.spacing == 9  # noqa: PLR2004

    def test_validate_config_only_exits(
        self,
        tmp_path: Path,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text("[layout]\nmargin = 1\n", encoding="utf-8")
        args = hc_cli.build_arg_parser().parse_args([
            "--config", str(config_path), "--validate-config-only",
        ])

        with caplog.at_level("INFO"), pytest.raises(SystemExit) as exc_info:
            hc_cli.run_from_args(args)

        assert exc_info.value.code == 0
        assert any("validated successfully" in rec.message
                   for rec in caplog.records)

    def test_logs_parameters(
        self,
        mocker: MockerFixture,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        mocker.patch.object(hc_main, "compose_header", return_value=None)
        args = hc_cli.build_arg_parser().parse_args(
            ["a.png", "--spacing", "3"],
        )
        with caplog.at_level("INFO"):
            hc_cli.run_from_args(args)
        messages = [rec.message for rec in caplog.records]
        assert "Input image: a.png" in messages
        assert "Spacing: 3" in messages
        assert "Separators: Disabled" in messages


class TestMain:
    """Entry point behaviour."""

    def test_requires_images(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main([])
        assert exc_info.value.code == 2  # noqa: PLR2004
        assert "images" in capsys.readouterr().err

    def test_validate_only_requires_config(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main(["--validate-config-only"])
        assert exc_info.value.code == 2  # noqa: PLR2004

    def test_missing_input_reports_error(
        self,
        tmp_path: Path,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main([str(tmp_path / "nope.png")])
        assert exc_info.value.code == 2  # noqa: PLR2004
        assert "Input image not found" in capsys.readouterr().err

    def test_end_to_end(self, image_files: list[Path], tmp_path: Path) -> None:
        out_dir = tmp_path / "result"
        code = hc_cli.main([
            *map(str, image_files),
            "--spacing", "10",
            "--margin", "20",
            "--plus",
            "--output", str(out_dir),
        ])
        assert code == 0
        with Image.open(out_dir / "header.png") as saved:
            assert saved.size == (210, 90)

    def test_version_flag(
        self,
        mocker: MockerFixture,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        mocker.patch.object(
            hc_cli, "resolve_project_version", return_value="4.5.6",
        )
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main(["--version"])
        assert exc_info.value.code == 0
        assert "4.5.6" in capsys.readouterr().out

    def test_config_value_errors_reported(
        self,
        tmp_path: Path,
        image_files: list[Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text("[layout]\nmargin = -5\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main([str(image_files[0]), "--config", str(config_path)])
        assert exc_info.value.code == 2  # noqa: PLR2004
        assert "margin" in capsys.readouterr().err

    def test_infinite_config_margin_reported(
        self,
        tmp_path: Path,
        image_files: list[Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        config_path = tmp_path / "config.toml"
        config_path.write_text("[layout]\nmargin = inf\n", encoding="utf-8")
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main([*map(str, image_files), "--config", str(config_path)])
        assert exc_info.value.code == 2  # noqa: PLR2004
        assert "margin" in capsys.readouterr().err

    def test_infinite_margin_flag_rejected(
        self,
        image_files: list[Path],
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            hc_cli.main([*map(str, image_files), "--margin", "inf"])
        assert exc_info.value.code == 2  # noqa: PLR2004
        assert "finite" in capsys.readouterr().err
