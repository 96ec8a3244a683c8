"""Token validation and the database health check."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any

import jwt

from .database import Database
from .models import JsonModel, _s
from .payload import Reply, bind_input

log = logging.getLogger(__name__)


@dataclass
class _TokenRequest(JsonModel):
    token: str = _s("token")


def token_validate(db: Database, payload: Any, now: datetime | None = None) -> Reply:
    """Check a stored token's expiry, clearing it in the database once it has expired."""
    request = bind_input(_TokenRequest, None, payload)
    moment = now if now is not None else datetime.now(timezone.utc)

    with db.transaction() as tx:
        try:
            user_id, _username = tx.query_row(
                "select u.id, u.username from users u where u.token = $1;",
                request.token,
            )
        except Exception as exc:
            log.info("Error parsing token: %s", exc)
            return Reply(400, {"message": "User tidak valid !", "status": False})

        try:
            claims = jwt.decode(
                request.token,
                options={"verify_signature": False, "verify_exp": False},
            )
        except jwt.PyJWTError as exc:
            log.info("Error parsing token: %s", exc)
            return Reply(200)

        expiration = claims.get("exp") if isinstance(claims, dict) else None
        if isinstance(expiration, bool) or not isinstance(expiration, (int, float)):
            log.error("Token carries no numeric expiry")
            return Reply(500)

        if expiration < int(moment.timestamp()):
            log.info("Token telah kedaluwarsa")
            try:
                tx.execute(
                    'UPDATE users SET "token" = $2 WHERE id = $1;', user_id, "Empty"
                )
            except Exception as exc:
                tx.rollback()
                return Reply(500, {"error": str(exc), "status": False})
            try:
                tx.commit()
            except Exception:
                return Reply(
                    500, {"error": "Failed to commit transaction", "status": False}
                )
            return Reply(200, {"message": "Token Is Not Active !", "status": False})

    log.info("Token masih valid")
    return Reply(200, {"message": "Token Is Active !", "status": True})


def health_check(db: Database) -> Reply:
    """Report whether the database answers."""
    try:
        db.ping()
    except Exception:
        return Reply(
            500, {"status": "error", "message": "Database connection failed"}
        )
    log.info("DB Connected !")
    return Reply(
        200, {"status": "success", "message": "Database connection is healthy"}
    )