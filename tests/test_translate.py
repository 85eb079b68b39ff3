import json
from types import SimpleNamespace

import pytest

from localfix import translate
from localfix.scanner import LocalizationFile
from localfix.translate import language_code, translate_batch, translate_file


class FakeCompletions:
    """Stands in for client.chat.completions; prefixes each value."""

    def __init__(self, content=None):
        self.content = content
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        content = self.content
        if content is None:
            payload = kwargs["messages"][1]["content"].split("```json")[1].split("```")[0]
            content = json.dumps({key: f"fr:{key}" for key in json.loads(payload)})
        message = SimpleNamespace(content=content)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def fake_client(content=None):
    return SimpleNamespace(chat=SimpleNamespace(completions=FakeCompletions(content)))


def test_language_code():
    assert language_code("localization-fr") == "fr"
    assert language_code("localization-pt-BR") == "pt-BR"


def test_translate_batch_returns_values():
    client = fake_client()
    result = translate_batch(client, {"login": "Login"}, "en", "fr", model="test-model")

    assert result == {"login": "fr:login"}
    call = client.chat.completions.calls[0]
    assert call["model"] == "test-model"
    assert "French" in call["messages"][0]["content"]


def test_translate_batch_invalid_json(capsys):
    assert translate_batch(fake_client("not json"), {"login": "Login"}, "en", "fr") == {}
    assert "Error during translation" in capsys.readouterr().out


def test_translate_file_fills_only_empty_values(locale_dir, write_locale):
    path = write_locale("localization-fr.txt", '"login" = "Connexion";\n"logout" = "";\n"settings" = "";\n')
    client = fake_client()

    translated, skipped = translate_file(
        client,
        source={"login": "Login", "logout": "Logout", "settings": "Settings"},
        target_file=LocalizationFile("localization-fr", path),
        source_lang="en",
    )

    assert (translated, skipped) == (2, 1)
    assert path.read_text(encoding="utf-8") == (
        '"login" = "Connexion";\n'
        '"logout" = "fr:logout";\n'
        '"settings" = "fr:settings";\n'
    )


def test_translate_file_force(locale_dir, write_locale):
    path = write_locale("localization-fr.txt", '"login" = "Connexion";\n')

    translated, _ = translate_file(
        fake_client(),
        source={"login": "Login"},
        target_file=LocalizationFile("localization-fr", path),
        source_lang="en",
        force=True,
    )

    assert translated == 1
    assert path.read_text(encoding="utf-8") == '"login" = "fr:login";\n'


def test_translate_file_batches(locale_dir, write_locale, monkeypatch):
    monkeypatch.setattr(translate, "BATCH_SIZE", 2)
    path = write_locale("localization-fr.txt", "".join(f'"k{i}" = "";\n' for i in range(5)))
    client = fake_client()

    translated, _ = translate_file(
        client, source={}, target_file=LocalizationFile("localization-fr", path), source_lang="en",
    )

    assert translated == 5
    assert len(client.chat.completions.calls) == 3


def test_translate_file_nothing_to_do(locale_dir, write_locale):
    path = write_locale("localization-fr.txt", '"login" = "Connexion";\n')
    client = fake_client()

    assert translate_file(client, {}, LocalizationFile("localization-fr", path), "en") == (0, 1)
    assert client.chat.completions.calls == []


def test_main_dry_run_without_api_key(locale_dir, write_locale, monkeypatch, capsys):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    write_locale("localization-en.txt", '"login" = "Login";\n')
    fr = write_locale("localization-fr.txt", '"login" = "";\n')

    assert translate.main(["--files", str(locale_dir), "--dry-run"]) == 0

    assert fr.read_text(encoding="utf-8") == '"login" = "";\n'
    assert "Would translate 1 keys" in capsys.readouterr().out


def test_main_requires_api_key(locale_dir, write_locale, monkeypatch, capsys):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    write_locale("localization-en.txt", '"login" = "Login";\n')

    assert translate.main(["--files", str(locale_dir)]) == 1
    assert "OPENAI_API_KEY" in capsys.readouterr().out


@pytest.mark.parametrize("option, name", [("--source", "localization-de"), ("--target", "localization-de")])
def test_main_unknown_file(locale_dir, write_locale, monkeypatch, capsys, option, name):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    write_locale("localization-en.txt", '"login" = "Login";\n')

    assert translate.main(["--files", str(locale_dir), "--dry-run", option, name]) == 1
    assert f"not found: {name}" in capsys.readouterr().out
