"""
CLI tests.
"""

import logging
import os

import pytest
import structlog
from typer.testing import CliRunner

from js2ts.cli.main import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    """Keep JS2TS_* variables and stray .env files out of CLI runs"""
    for key in list(os.environ):
        if key.startswith("JS2TS_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)

    yield

    # CliRunner closes the stream the CLI's log handler was bound to
    logging.getLogger().handlers.clear()
    structlog.reset_defaults()


@pytest.fixture
def src_dir(tmp_path):
    src = tmp_path / "src"
    src.mkdir()
    (src / "main.js").write_text("const items = ['a', 'b'];\n", encoding="utf-8")
    return src


def test_convert_directory(src_dir):
    result = runner.invoke(app, ["convert", str(src_dir)])

    assert result.exit_code == 0, result.output
    assert (src_dir / "main.ts").read_text(encoding="utf-8") == "const items: string[] = ['a', 'b'];\n"
    assert "Converted: 1" in result.output


def test_convert_reports_failures(src_dir):
    (src_dir / "bad.js").write_text("const = ;\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(src_dir)])

    assert result.exit_code == 1
    assert (src_dir / "main.ts").exists()
    assert "Failed: 1" in result.output


def test_convert_fail_fast(src_dir):
    (src_dir / "a_bad.js").write_text("const = ;\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(src_dir), "--fail-fast"])

    assert result.exit_code == 1
    assert not (src_dir / "main.ts").exists()


def test_convert_no_overwrite(src_dir):
    (src_dir / "main.ts").write_text("// hand-written\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(src_dir), "--no-overwrite"])

    assert result.exit_code == 0
    assert (src_dir / "main.ts").read_text(encoding="utf-8") == "// hand-written\n"
    assert "Skipped: 1" in result.output


def test_convert_recursive(src_dir):
    nested = src_dir / "lib"
    nested.mkdir()
    (nested / "helper.js").write_text("let n = 1;\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(src_dir), "--recursive"])

    assert result.exit_code == 0
    assert (nested / "helper.ts").read_text(encoding="utf-8") == "let n: number = 1;\n"


def test_convert_custom_suffixes(tmp_path):
    (tmp_path / "App.jsx").write_text("const n = 1;\n", encoding="utf-8")

    result = runner.invoke(app, ["convert", str(tmp_path), "--source-suffix", ".jsx", "--target-suffix", ".tsx"])

    assert result.exit_code == 0
    assert (tmp_path / "App.tsx").exists()


def test_convert_invalid_suffix(src_dir):
    result = runner.invoke(app, ["convert", str(src_dir), "--source-suffix", "js"])

    assert result.exit_code == 2


def test_convert_invalid_env_settings(src_dir, monkeypatch):
    monkeypatch.setenv("JS2TS_LOG_LEVEL", "LOUD")

    result = runner.invoke(app, ["convert", str(src_dir)])

    assert result.exit_code == 2
    assert not (src_dir / "main.ts").exists()


def test_convert_unknown_encoding(src_dir, monkeypatch):
    monkeypatch.setenv("JS2TS_ENCODING", "bogus-codec")

    result = runner.invoke(app, ["convert", str(src_dir)])

    assert result.exit_code == 2
    assert not (src_dir / "main.ts").exists()


def test_convert_invalid_log_level_option(src_dir):
    result = runner.invoke(app, ["convert", str(src_dir), "--log-level", "LOUD"])

    assert result.exit_code == 2
    assert not (src_dir / "main.ts").exists()


def test_convert_invalid_log_format_option(src_dir):
    result = runner.invoke(app, ["convert", str(src_dir), "--log-format", "xml"])

    assert result.exit_code == 2


def test_convert_missing_directory(tmp_path):
    result = runner.invoke(app, ["convert", str(tmp_path / "missing")])

    assert result.exit_code == 1


def test_annotate_prints_typescript(src_dir):
    result = runner.invoke(app, ["annotate", str(src_dir / "main.js")])

    assert result.exit_code == 0
    assert "const items: string[] = ['a', 'b'];" in result.output
    assert not (src_dir / "main.ts").exists()


def test_annotate_missing_file(tmp_path):
    result = runner.invoke(app, ["annotate", str(tmp_path / "nope.js")])

    assert result.exit_code == 1


def test_annotate_undecodable_file(tmp_path):
    path = tmp_path / "latin.js"
    path.write_bytes(b"let s = '\xff';\n")

    result = runner.invoke(app, ["annotate", str(path)])

    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)
