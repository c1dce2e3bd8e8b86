from config import Settings


def test_defaults_without_env(monkeypatch):
    for name in (
        "VRA_BASE_URL",
        "VRA_USERNAME",
        "VRA_PASSWORD",
        "VRA_TENANT",
        "VRA_TOKEN",
        "VRA_VERIFY_SSL",
        "VRA_TIMEOUT",
        "VRA_DEFAULT_LIMIT",
        "MCP_HOST",
        "MCP_PORT",
        "LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = Settings.from_env()

    assert settings == Settings()
    assert settings.default_limit == 1000
    assert settings.tenant == "vsphere.local"


def test_from_env_reads_everything(monkeypatch):
    monkeypatch.setenv("VRA_BASE_URL", "https://vra.example.com")
    monkeypatch.setenv("VRA_USERNAME", "admin")
    monkeypatch.setenv("VRA_PASSWORD", "secret")
    monkeypatch.setenv("VRA_TENANT", "ycommerce")
    monkeypatch.setenv("VRA_TOKEN", "tok")
    monkeypatch.setenv("VRA_VERIFY_SSL", "false")
    monkeypatch.setenv("VRA_TIMEOUT", "12.5")
    monkeypatch.setenv("VRA_DEFAULT_LIMIT", "200")
    monkeypatch.setenv("MCP_HOST", "0.0.0.0")
    monkeypatch.setenv("MCP_PORT", "9000")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")

    settings = Settings.from_env()

    assert settings.base_url == "https://vra.example.com"
    assert (settings.username, settings.password, settings.tenant) == ("admin", "secret", "ycommerce")
    assert settings.token == "tok"
    assert settings.verify_ssl is False
    assert settings.timeout == 12.5
    assert settings.default_limit == 200
    assert (settings.host, settings.port) == ("0.0.0.0", 9000)
    assert settings.log_level == "debug"
