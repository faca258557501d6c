import time
from dataclasses import dataclass
from typing import Callable
from uuid import uuid4
from fastapi import Header, HTTPException

from board_service.config import TOKEN_TTL_SECONDS
from board_service.errors import InvalidTokenError


@dataclass
class Identity:
    token: str
    user_pk: str
    name: str
    expiry: float


TokenVerifier = Callable[[str], Identity]

_tokens: dict[str, Identity] = {}  # token → Identity


def issue_token(user_pk: str, name: str) -> str:
    token = str(uuid4())
    _tokens[token] = Identity(
        token=token,
        user_pk=user_pk,
        name=name,
        expiry=time.time() + TOKEN_TTL_SECONDS,
    )
    return token


def revoke_token(token: str) -> None:
    _tokens.pop(token, None)


def verify_token(token: str) -> Identity:
    identity = _tokens.get(token)
    if identity is None or time.time() > identity.expiry:
        _tokens.pop(token, None)
        raise InvalidTokenError()
    return identity


def get_token_verifier() -> TokenVerifier:
    return verify_token


async def require_auth(authorization: str | None = Header(default=None)) -> Identity:
    if not authorization or not authorization.startswith("Bearer "):
        raise HTTPException(status_code=401, detail="Unauthorized")
    try:
        return verify_token(authorization.removeprefix("Bearer "))
    except InvalidTokenError:
        raise HTTPException(status_code=401, detail="Unauthorized")
