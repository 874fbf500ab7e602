# robot_cleaner/tests/test_consts.py

import importlib

from robot_cleaner.utils import consts
from robot_cleaner.utils.consts import get_postgres_settings


def test_password_read_from_secret_file(monkeypatch, tmp_path):
    secret = tmp_path / "postgres_password"
    secret.write_text("from-file\n")
    monkeypatch.setenv("POSTGRES_PASSWORD_FILE", str(secret))
    monkeypatch.setenv("POSTGRES_PASSWORD", "from-env")

    assert get_postgres_settings()["password"] == "from-file"


def test_password_falls_back_to_environment(monkeypatch):
    monkeypatch.delenv("POSTGRES_PASSWORD_FILE", raising=False)
    monkeypatch.setenv("POSTGRES_PASSWORD", "from-env")

    assert get_postgres_settings()["password"] == "from-env"


def test_connection_settings_from_environment(monkeypatch):
    monkeypatch.delenv("POSTGRES_PASSWORD_FILE", raising=False)
    monkeypatch.delenv("POSTGRES_PASSWORD", raising=False)
    monkeypatch.setenv("HOSTNAME", "db.internal")
    monkeypatch.setenv("POSTGRES_USER", "robot")
    monkeypatch.setenv("POSTGRES_DB", "cleaner")

    assert get_postgres_settings() == {
        "host": "db.internal",
        "user": "robot",
        "password": "",
        "dbname": "cleaner",
    }


def test_settings_loaded_from_dotenv_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("CLEANER_STORE_URL=postgres\nPOSTGRES_USER=from-dotenv\n")
    monkeypatch.chdir(tmp_path)
    for name in ("CLEANER_ENV_FILE", "CLEANER_STORE_URL", "POSTGRES_USER"):
        # setenv first so monkeypatch restores the variable afterwards
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)

    try:
        importlib.reload(consts)
        assert consts.STORE_URL == "postgres"
        assert consts.get_postgres_settings()["user"] == "from-dotenv"
    finally:
        monkeypatch.undo()
        importlib.reload(consts)


def test_existing_environment_wins_over_dotenv(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("POSTGRES_USER=from-dotenv\n")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("CLEANER_ENV_FILE", raising=False)
    monkeypatch.setenv("POSTGRES_USER", "from-env")

    try:
        importlib.reload(consts)
        assert consts.get_postgres_settings()["user"] == "from-env"
    finally:
        monkeypatch.undo()
        importlib.reload(consts)
