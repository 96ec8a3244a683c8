import sqlite3
from datetime import datetime, timezone

import jwt
import pytest

from fismed.auth import health_check, token_validate
from fismed.database import Database

NOW = datetime.fromtimestamp(1000, timezone.utc)


def _token(exp):
    return jwt.encode({"exp": exp, "username": "budi"}, "secret", algorithm="HS256")


@pytest.fixture
def path(tmp_path):
    p = tmp_path / "auth.db"
    conn = sqlite3.connect(p)
    conn.execute("CREATE TABLE users (id INTEGER PRIMARY KEY, username TEXT, token TEXT)")
    conn.commit()
    conn.close()
    return p


def _add_user(path, token):
    conn = sqlite3.connect(path)
    conn.execute("INSERT INTO users (id, username, token) VALUES (1, 'budi', ?)", (token,))
    conn.commit()
    conn.close()


def test_unknown_token(path):
    reply = token_validate(Database(lambda: sqlite3.connect(path)), {"token": "token"}, NOW)
    assert reply.status == 400
    assert reply.body == {"message": "User tidak valid !", "status": False}


def test_active_token(path):
    token = _token(2000)
    _add_user(path, token)
    reply = token_validate(Database(lambda: sqlite3.connect(path)), {"token": token}, NOW)
    assert reply.status == 200
    assert reply.body == {"message": "Token Is Active !", "status": True}


def test_expired_token_is_cleared(path):
    token = _token(100)
    _add_user(path, token)
    reply = token_validate(Database(lambda: sqlite3.connect(path)), {"token": token}, NOW)
    assert reply.body == {"message": "Token Is Not Active !", "status": False}
    conn = sqlite3.connect(path)
    assert conn.execute("SELECT token FROM users WHERE id = 1").fetchone() == ("Empty",)
    conn.close()


def test_malformed_token_gives_empty_reply(path):
    _add_user(path, "token")
    reply = token_validate(Database(lambda: sqlite3.connect(path)), {"token": "token"}, NOW)
    assert (reply.status, reply.body) == (200, None)


def test_health_check_ok(path):
    reply = health_check(Database(lambda: sqlite3.connect(path)))
    assert reply.body == {"status": "success", "message": "Database connection is healthy"}


def test_health_check_failure():
    def refuse():
        raise ConnectionError("refused")

    reply = health_check(Database(refuse))
    assert reply.status == 500
    assert reply.body["message"] == "Database connection failed"