from connections.config import Settings


def test_overrides_and_missing_secrets():
    s = Settings(google_api_key="g", supabase_url="", supabase_key="k", app_env="production")
    assert s.missing_secrets() == ["SUPABASE_URL"]
    assert s.is_production


def test_defaults(monkeypatch):
    for name in ("SUPABASE_TABLE_NAME", "GEMINI_URL", "APP_ENV", "RELAY_TIMEOUT_SECONDS"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert s.SUPABASE_TABLE_NAME == "userData"
    assert s.GEMINI_URL.endswith("/models/gemini-2.0-flash:generateContent")
    assert s.is_production
    assert s.RELAY_TIMEOUT_SECONDS == 30.0


def test_environment_values(monkeypatch):
    monkeypatch.delenv("GOOGLE_API_KEY", raising=False)
    monkeypatch.setenv("GEMINI_API_KEY", "from-alias")
    monkeypatch.setenv("APP_ENV", "Development")
    monkeypatch.setenv("RELAY_TIMEOUT_SECONDS", "2.5")
    s = Settings()
    assert s.GOOGLE_API_KEY == "from-alias"
    assert not s.is_production
    assert s.RELAY_TIMEOUT_SECONDS == 2.5


def test_repr_hides_secrets():
    s = Settings(google_api_key="very-secret", supabase_url="https://x", supabase_key="also-secret")
    text = repr(s)
    assert "very-secret" not in text
    assert "also-secret" not in text
