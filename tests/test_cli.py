from __future__ import annotations

from pathlib import Path

import pytest

from app.cli import EXIT_ERROR, EXIT_ISSUES, EXIT_OK, HTML_REPORT_NAME, MARKDOWN_SUMMARY_NAME, build_parser, main


@pytest.fixture
def src(tmp_path: Path) -> Path:
    root = tmp_path / "src"
    root.mkdir()
    (root / "clip.js").write_text("document.execCommand('copy');\n", encoding="utf-8")
    return root


def test_scan_defaults() -> None:
    args = build_parser().parse_args(["scan"])
    assert args.path == "./src"
    assert args.fail_on_issues is False
    assert args.output_dir == "."


def test_issues_do_not_fail_by_default(src: Path) -> None:
    assert main(["scan", str(src)]) == EXIT_OK


def test_fail_on_issues(src: Path) -> None:
    assert main(["scan", str(src), "--fail-on-issues"]) == EXIT_ISSUES


def test_clean_tree_passes(tmp_path: Path) -> None:
    (tmp_path / "ok.js").write_text("requestAnimationFrame(draw);\n", encoding="utf-8")
    assert main(["scan", str(tmp_path), "--fail-on-issues"]) == EXIT_OK


def test_missing_path_scans_nothing(tmp_path: Path) -> None:
    assert main(["scan", str(tmp_path / "nope"), "--fail-on-issues"]) == EXIT_OK


def test_reports_written(src: Path, tmp_path: Path) -> None:
    out = tmp_path / "out"
    code = main(["scan", str(src), "--report", "--ai-suggestions", "--output-dir", str(out)])
    assert code == EXIT_OK
    assert "Clipboard API" in (out / HTML_REPORT_NAME).read_text(encoding="utf-8")
    assert (out / MARKDOWN_SUMMARY_NAME).read_text(encoding="utf-8").startswith("## ⚠️ Baseline Scan Results")


def test_text_report_printed(src: Path, capsys: pytest.CaptureFixture) -> None:
    main(["scan", str(src), "--text"])
    assert "document.execCommand" in capsys.readouterr().out


def test_unexpected_error_exits_2(src: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    def boom(self, path):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr("app.cli.CheckerService.analyze_path", boom)
    assert main(["scan", str(src)]) == EXIT_ERROR
