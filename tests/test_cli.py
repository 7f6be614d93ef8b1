"""Tests for the command-line interface."""

from pathlib import Path

import pytest

from cli import main
from extractor import has_ai_metadata


@pytest.fixture(autouse=True)
def _no_color(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NO_COLOR", "1")


class TestMain:
    """Tests for main entry point."""

    def test_no_arguments_prints_help(self, capsys: pytest.CaptureFixture) -> None:
        assert main([]) == 0
        assert "usage: exif-keeper" in capsys.readouterr().out

    def test_missing_source(self, temp_dir: Path, capsys: pytest.CaptureFixture) -> None:
        assert main([str(temp_dir / "missing.png")]) == 1
        assert "does not exist" in capsys.readouterr().err

    def test_show_with_metadata(
        self, sample_png_with_ai_metadata: Path, capsys: pytest.CaptureFixture
    ) -> None:
        assert main([str(sample_png_with_ai_metadata), "--show"]) == 0

        out = capsys.readouterr().out
        assert "contains AI-generated image metadata" in out
        assert "parameters:" in out

    def test_show_without_metadata(
        self, sample_png: Path, capsys: pytest.CaptureFixture
    ) -> None:
        assert main([str(sample_png)]) == 1
        assert "does not contain" in capsys.readouterr().out

    def test_restore(
        self, sample_png_with_ai_metadata: Path, sample_png: Path, temp_dir: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        output_path = temp_dir / "restored.png"

        code = main([str(sample_png_with_ai_metadata), str(sample_png), "-o", str(output_path)])

        assert code == 0
        assert has_ai_metadata(output_path) is True
        assert "Successfully restored metadata" in capsys.readouterr().out

    def test_restore_verbose(
        self, sample_png_with_ai_metadata: Path, sample_png: Path, temp_dir: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        output_path = temp_dir / "restored.png"

        code = main(
            [str(sample_png_with_ai_metadata), str(sample_png), "-o", str(output_path), "-v"]
        )

        assert code == 0
        assert "AI Image Metadata" in capsys.readouterr().out

    def test_format_mismatch_reports_error(
        self, sample_png_with_ai_metadata: Path, sample_jpg: Path, temp_dir: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        code = main(
            [str(sample_png_with_ai_metadata), str(sample_jpg), "-o", str(temp_dir / "o.jpg")]
        )

        assert code == 1
        assert "Format mismatch" in capsys.readouterr().err

    def test_missing_target(
        self, sample_png_with_ai_metadata: Path, temp_dir: Path,
        capsys: pytest.CaptureFixture,
    ) -> None:
        code = main([str(sample_png_with_ai_metadata), str(temp_dir / "missing.png")])

        assert code == 1
        assert "does not exist" in capsys.readouterr().err

    def test_webp_source_is_unsupported(
        self, sample_webp: Path, capsys: pytest.CaptureFixture
    ) -> None:
        assert main([str(sample_webp), "--show"]) == 1

        err = capsys.readouterr().err
        assert "may not be a supported format" in err
        assert "not supported" in err
