from app.config.settings import Settings


def make(**values):
    return Settings(_env_file=None, **values)


def test_configured():
    settings = make(supabase_url="https://abc.supabase.co", supabase_publishable_key="sb_publishable_" + "x" * 20)
    assert settings.is_supabase_configured


def test_placeholder_values_are_not_configured():
    settings = make(supabase_url="https://placeholder.supabase.co", supabase_publishable_key="placeholder-key")
    assert not settings.is_supabase_configured


def test_missing_key_is_not_configured():
    assert not make(supabase_url="https://abc.supabase.co", supabase_publishable_key="").is_supabase_configured


def test_frontend_variable_names_are_accepted(monkeypatch):
    for name in ("SUPABASE_URL", "SUPABASE_PUBLISHABLE_KEY", "SUPABASE_KEY"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.setenv("VITE_SUPABASE_URL", "https://abc.supabase.co")
    monkeypatch.setenv("VITE_SUPABASE_PUBLISHABLE_KEY", "k" * 40)
    settings = Settings(_env_file=None)
    assert settings.supabase_url == "https://abc.supabase.co"
    assert settings.is_supabase_configured


def test_env_status_masks_values():
    status = make(supabase_url="https://abcdefghijklmnopqrstuvwxyz.supabase.co", supabase_publishable_key="k" * 40).get_env_status()
    assert status["url"]["value"] == "https://abcdefghijklmnopqrstuv..."
    assert status["url"]["is_valid"] is True
    assert status["key"]["value"] == "k" * 30 + "..."
    assert status["key"]["is_valid"] is True


def test_env_status_empty():
    status = make(supabase_url="", supabase_publishable_key="").get_env_status()
    assert status["url"] == {"exists": False, "value": None, "is_valid": False}
    assert status["key"] == {"exists": False, "value": None, "is_valid": False}


def test_cors_origins_list():
    assert make(cors_origins="http://a.test, http://b.test,").get_cors_origins_list() == ["http://a.test", "http://b.test"]
