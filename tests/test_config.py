import pytest

from saucescraper.config import MissingCredentialsError, Settings, load_settings


def test_from_env_reads_credentials():
    settings = Settings.from_env({"SAUCE_USERNAME": "standard_user", "SAUCE_PASSWORD": "secret_sauce"})

    assert settings.username == "standard_user"
    assert settings.password == "secret_sauce"
    assert settings.headless is False


@pytest.mark.parametrize(
    "value, expected",
    [("true", True), ("True", False), ("1", False), ("", False), (None, False)],
)
def test_headless_only_for_exact_true(value, expected):
    env = {"SAUCE_USERNAME": "u", "SAUCE_PASSWORD": "p"}
    if value is not None:
        env["HEADLESS"] = value
    assert Settings.from_env(env).headless is expected


@pytest.mark.parametrize(
    "env",
    [
        {},
        {"SAUCE_USERNAME": "u"},
        {"SAUCE_PASSWORD": "p"},
        {"SAUCE_USERNAME": "", "SAUCE_PASSWORD": "p"},
    ],
)
def test_missing_credentials_rejected(env):
    with pytest.raises(MissingCredentialsError):
        load_settings(env)


def test_load_settings_uses_process_environment(monkeypatch):
    monkeypatch.setattr("saucescraper.config.load_dotenv", lambda *args, **kwargs: False)
    monkeypatch.setenv("SAUCE_USERNAME", "standard_user")
    monkeypatch.setenv("SAUCE_PASSWORD", "secret_sauce")
    monkeypatch.setenv("HEADLESS", "true")

    settings = load_settings()

    assert settings.username == "standard_user"
    assert settings.headless is True


def test_load_settings_reads_dotenv_from_working_directory(monkeypatch, tmp_path):
    for name in ("SAUCE_USERNAME", "SAUCE_PASSWORD", "HEADLESS"):
        # setenv first so the variables set by .env are removed afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    (tmp_path / ".env").write_text(
        "SAUCE_USERNAME=standard_user\nSAUCE_PASSWORD=secret_sauce\nHEADLESS=true\n",
        encoding="utf-8",
    )
    monkeypatch.chdir(tmp_path)

    settings = load_settings()

    assert settings.username == "standard_user"
    assert settings.password == "secret_sauce"
    assert settings.headless is True


def test_real_environment_wins_over_dotenv(monkeypatch, tmp_path):
    monkeypatch.setenv("SAUCE_USERNAME", "problem_user")
    monkeypatch.setenv("SAUCE_PASSWORD", "secret_sauce")
    (tmp_path / ".env").write_text("SAUCE_USERNAME=standard_user\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)

    assert load_settings().username == "problem_user"
