from game_catalog.config import Settings


def test_defaults(monkeypatch):
    for name in ("GAME_CATALOG_CORS_ORIGINS", "GAME_CATALOG_LOG_LEVEL", "GAME_CATALOG_SEED"):
        monkeypatch.delenv(name, raising=False)
    settings = Settings.from_env()
    assert settings.cors_origins == ["*"]
    assert settings.log_level == "INFO"
    assert settings.seed_catalog is True


def test_reads_environment(monkeypatch):
    monkeypatch.setenv("GAME_CATALOG_CORS_ORIGINS", "http://a.test, http://b.test,")
    monkeypatch.setenv("GAME_CATALOG_LOG_LEVEL", "debug")
    monkeypatch.setenv("GAME_CATALOG_SEED", "no")
    settings = Settings.from_env()
    assert settings.cors_origins == ["http://a.test", "http://b.test"]
    assert settings.log_level == "DEBUG"
    assert settings.seed_catalog is False


def test_unknown_log_level_falls_back(monkeypatch):
    monkeypatch.setenv("GAME_CATALOG_LOG_LEVEL", "chatty")
    assert Settings.from_env().log_level == "INFO"
