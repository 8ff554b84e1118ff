"""Password login for wholesaler accounts (``POST /``).

Wholesaler records live in the ``wholesaler`` collection keyed by phone
number, with ``password`` holding the SHA-256 hex digest that the mobile
app writes at registration.  A successful login returns a signed JWT
whose subject is the phone number.

Serve with ``uvicorn vyapar.infrastructure.http.login:create_app --factory``.
"""

from __future__ import annotations

import hashlib
import hmac
import logging
import os
from datetime import datetime, timedelta, timezone

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from jose import jwt
from pydantic import BaseModel

from vyapar.domain.exceptions import StoreUnavailable
from vyapar.infrastructure.bootstrap import document_store
from vyapar.infrastructure.persistence.document_store import WHOLESALERS, JsonDocumentStore

logger = logging.getLogger(__name__)

SECRET_KEY_ENV = "VYAPAR_SECRET_KEY"
TOKEN_TTL_ENV = "VYAPAR_TOKEN_TTL_MINUTES"
ALGORITHM = "HS256"
DEFAULT_TOKEN_TTL_MINUTES = 60 * 8


class LoginBody(BaseModel):
    phone: str | None = None
    password: str | None = None


class Token(BaseModel):
    token: str


def hash_password(password: str) -> str:
    return hashlib.sha256(password.encode("utf-8")).hexdigest()


def create_access_token(phone: str, secret_key: str, expires_delta: timedelta) -> str:
    now = datetime.now(timezone.utc)
    claims = {"sub": phone, "iat": now, "exp": now + expires_delta}
    return jwt.encode(claims, secret_key, algorithm=ALGORITHM)


def create_app(
    store: JsonDocumentStore | None = None,
    secret_key: str | None = None,
    token_ttl: timedelta | None = None,
) -> FastAPI:
    secret_key = secret_key or os.environ.get(SECRET_KEY_ENV)
    if not secret_key:
        raise RuntimeError(f"{SECRET_KEY_ENV} must be set to sign login tokens")
    if token_ttl is None:
        token_ttl = timedelta(
            minutes=int(os.environ.get(TOKEN_TTL_ENV, DEFAULT_TOKEN_TTL_MINUTES))
        )
    accounts = store or document_store()

    app = FastAPI(title="Vyapar login")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["POST"],
        allow_headers=["Content-Type"],
    )

    @app.post("/", response_model=Token)
    def login(body: LoginBody | None = None) -> Token:
        if body is None or not body.phone or not body.password:
            raise HTTPException(status.HTTP_400_BAD_REQUEST, "Missing phone or password")

        try:
            account = accounts.get(WHOLESALERS, body.phone)
        except StoreUnavailable:
            logger.exception("login lookup failed for %s", body.phone)
            raise HTTPException(status.HTTP_500_INTERNAL_SERVER_ERROR, "Server error")

        if account is None:
            logger.warning("login rejected: unknown phone %s", body.phone)
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "User not found")

        stored_hash = str(account.get("password") or "")
        if not hmac.compare_digest(hash_password(body.password), stored_hash):
            logger.warning("login rejected: wrong password for %s", body.phone)
            raise HTTPException(status.HTTP_401_UNAUTHORIZED, "Incorrect password")

        return Token(token=create_access_token(body.phone, secret_key, token_ttl))

    return app
