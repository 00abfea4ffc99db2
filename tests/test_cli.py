from pathlib import Path

import pytest

from tocmerge.cli import main, parse_args, resolve_config
from tocmerge.models.configs import UrlType
from tocmerge.settings import Settings, get_settings


@pytest.fixture(autouse=True)
def fresh_settings():
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


def _write(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def test_cli_merges_toc(tmp_path):
    docset = tmp_path / "docs"
    site = tmp_path / "_site"
    _write(docset / "index.md", "# Home\n")
    _write(docset / "toc.yml", "- name: Home\n  href: index.md\n")
    _write(site / "index.html", "<main><p>Home</p></main>")

    exit_code = main(
        [
            "--docset",
            str(docset),
            "--output",
            str(site),
            "--max-workers",
            "2",
            str(docset / "toc.yml"),
        ]
    )

    assert exit_code == 0
    assert "<p>Home</p>" in (site / "toc.pdf.html").read_text(encoding="utf-8")


def test_cli_reports_failures(tmp_path):
    docset = tmp_path / "docs"
    _write(docset / "toc.yml", "- name: Ghost\n  href: ghost.md\n")

    exit_code = main(["--docset", str(docset), "--output", str(tmp_path / "_site"), str(docset / "toc.yml")])

    assert exit_code == 1


def test_cli_requires_tocs(tmp_path):
    assert main(["--docset", str(tmp_path)]) == 1


def test_cli_flags_override_config_file(tmp_path):
    config_path = tmp_path / "tocmerge.yml"
    config_path.write_text("url_type: pretty\nmax_workers: 2\ntocs: [toc.yml]\n", encoding="utf-8")
    settings = Settings(log_level="INFO")

    args = parse_args(["--config", str(config_path), "--max-workers", "5"], settings)
    config = resolve_config(args, settings)

    assert config.url_type is UrlType.PRETTY
    assert config.max_workers == 5
    assert config.tocs == [(tmp_path / "toc.yml").resolve()]


def test_cli_rejects_malformed_config_file(tmp_path):
    config_path = tmp_path / "tocmerge.yml"
    config_path.write_text("tocs: [toc.yml\n", encoding="utf-8")

    assert main(["--config", str(config_path)]) == 1


def test_cli_rejects_invalid_environment(tmp_path, monkeypatch):
    monkeypatch.setenv("TOCMERGE_MAX_WORKERS", "many")

    assert main(["--docset", str(tmp_path), str(tmp_path / "toc.yml")]) == 1


def test_cli_accepts_lowercase_log_level_from_environment(tmp_path, monkeypatch):
    docset = tmp_path / "docs"
    site = tmp_path / "_site"
    _write(docset / "index.md", "# Home\n")
    _write(docset / "toc.yml", "- name: Home\n  href: index.md\n")
    _write(site / "index.html", "<main><p>Home</p></main>")
    monkeypatch.setenv("TOCMERGE_LOG_LEVEL", "debug")

    assert main(["--docset", str(docset), "--output", str(site), str(docset / "toc.yml")]) == 0
