from core.config import Settings


def test_defaults(monkeypatch):
    monkeypatch.delenv("WALL_AREA_CHECK_OPENING_WIDTHS", raising=False)
    settings = Settings(_env_file=None)
    assert settings.api_port == 8000
    assert settings.check_opening_widths is False
    assert settings.origins == ["*"]


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("WALL_AREA_CHECK_OPENING_WIDTHS", "true")
    monkeypatch.setenv("WALL_AREA_ALLOWED_ORIGINS", "http://a.test, http://b.test")
    monkeypatch.setenv("WALL_AREA_API_PORT", "9001")
    settings = Settings(_env_file=None)
    assert settings.check_opening_widths is True
    assert settings.origins == ["http://a.test", "http://b.test"]
    assert settings.api_port == 9001
