from pathlib import Path

import pytest
import yaml

from paper_insert import main as cli
from paper_insert.core.config import DEFAULT_TEMPLATE
from paper_insert.core.operators.datasource import arxiv as arxiv_datasource


@pytest.fixture
def config_path(tmp_path: Path) -> str:
    path = tmp_path / "config.yaml"
    path.write_text(yaml.safe_dump({"storage": {"base_path": str(tmp_path / "data")}}), encoding="utf-8")
    return str(path)


@pytest.fixture
def fake_transport(monkeypatch, attention_feed, empty_feed):
    def fake_fetcher(timeout_seconds=None):
        async def fetch_text(url: str) -> str:
            return attention_feed if url.endswith("1706.03762") else empty_feed

        return fetch_text

    monkeypatch.setattr(arxiv_datasource, "aiohttp_fetcher", fake_fetcher)


def test_show_default_template(config_path, capsys):
    assert cli.main(["--config", config_path, "show-template"]) == 0
    assert capsys.readouterr().out == DEFAULT_TEMPLATE + "\n"


def test_set_template(config_path, capsys):
    assert cli.main(["--config", config_path, "set-template", "{{title}}\\n{{id}}"]) == 0
    assert cli.main(["--config", config_path, "show-template"]) == 0
    assert capsys.readouterr().out == "{{title}}\n{{id}}\n"


def test_get_prints_text(config_path, fake_transport, capsys):
    assert cli.main(["--config", config_path, "get", "1706.03762"]) == 0
    assert capsys.readouterr().out == "Attention Is All You Need\nAshish Vaswani, Noam Shazeer\n\n"


def test_get_not_found_exit_code(config_path, fake_transport, capsys):
    assert cli.main(["--config", config_path, "get", "nonexistent.0000"]) == 1
    assert capsys.readouterr().out == ""


def test_get_into_document(config_path, fake_transport, tmp_path: Path):
    document = tmp_path / "note.md"
    document.write_text("# Reading\n", encoding="utf-8")
    cli.main(["--config", config_path, "set-template", "- {{title}}\\n"])

    assert cli.main(["--config", config_path, "get", "1706.03762", "--document", str(document)]) == 0
    assert document.read_text(encoding="utf-8") == "# Reading\n- Attention Is All You Need\n"


def test_missing_config_file():
    with pytest.raises(FileNotFoundError):
        cli.main(["--config", "does-not-exist.yaml", "show-template"])


def _settings_file(tmp_path: Path) -> Path:
    path = tmp_path / "data" / "settings.yaml"
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def test_get_cursor_out_of_range(config_path, fake_transport, tmp_path: Path):
    document = tmp_path / "note.md"
    document.write_text("short", encoding="utf-8")

    assert cli.main(["--config", config_path, "get", "1706.03762", "--document", str(document), "--cursor", "99"]) == 1
    assert document.read_text(encoding="utf-8") == "short"


@pytest.mark.parametrize("content", [
    "template: [unclosed\n",
    "- a\n- b\n",
    "template:\n  - 1\n  - 2\n",
])
def test_malformed_settings_file(config_path, fake_transport, tmp_path: Path, capsys, content):
    _settings_file(tmp_path).write_text(content, encoding="utf-8")

    assert cli.main(["--config", config_path, "show-template"]) == 1
    assert cli.main(["--config", config_path, "get", "1706.03762"]) == 1
    assert capsys.readouterr().out == ""
