from config import Config


def test_allowed_origins_merge_frontend_and_list(monkeypatch):
    monkeypatch.setattr(Config, "FRONTEND_URL", "http://localhost:3000")
    monkeypatch.setattr(Config, "ALLOWED_ORIGINS", "https://a.github.io, https://b.example/ ,,http://localhost:3000")

    assert Config.get_allowed_origins() == [
        "http://localhost:3000",
        "https://a.github.io",
        "https://b.example",
    ]
    assert Config.allow_credentials() is True


def test_wildcard_origin_disables_credentials(monkeypatch):
    monkeypatch.setattr(Config, "FRONTEND_URL", "*")
    monkeypatch.setattr(Config, "ALLOWED_ORIGINS", "")

    assert Config.get_allowed_origins() == ["*"]
    assert Config.allow_credentials() is False


def test_validate_warns_about_missing_keys(monkeypatch, mocker):
    monkeypatch.setattr(Config, "OPENAI_API_KEY", "")
    monkeypatch.setattr(Config, "PUBMED_API_KEY", "")
    warning = mocker.patch("config.app_logger.warning")

    Config.validate()

    logged = " ".join(call.args[0] for call in warning.call_args_list)
    assert "OPENAI_API_KEY" in logged
    assert "PUBMED_API_KEY" in logged


def test_float_settings_fall_back_on_bad_input(monkeypatch):
    from config import _get_float

    monkeypatch.setenv("RELAY_TEST_TIMEOUT", "not-a-number")
    assert _get_float("RELAY_TEST_TIMEOUT", 7.5) == 7.5
    monkeypatch.setenv("RELAY_TEST_TIMEOUT", "12")
    assert _get_float("RELAY_TEST_TIMEOUT", 7.5) == 12.0
