import pytest


@pytest.fixture
def locale_dir(tmp_path):
    """Empty directory for localization files."""
    directory = tmp_path / "localization"
    directory.mkdir()
    return directory


@pytest.fixture
def write_locale(locale_dir):
    """Create a localization file; returns its path."""
    def _write(file_name, content):
        path = locale_dir / file_name
        path.write_text(content, encoding="utf-8")
        return path
    return _write


@pytest.fixture(autouse=True)
def no_color(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
