import logging
from fastapi import APIRouter, Depends, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from board_service.auth.permissions import issue_token, require_auth, revoke_token, Identity
from board_service.database import get_session
from board_service.models.board import User

logger = logging.getLogger(__name__)

router = APIRouter()


class LoginRequest(BaseModel):
    name: str
    password: str


class TokenResponse(BaseModel):
    token: str
    user_pk: str
    name: str


@router.post("/auth/login", response_model=TokenResponse)
async def login(body: LoginRequest, session: AsyncSession = Depends(get_session)):
    result = await session.execute(select(User).where(User.name == body.name))
    user = result.scalar_one_or_none()
    if user is None or user.password != body.password:
        logger.info("Rejected login for %r", body.name)
        raise HTTPException(status_code=401, detail="Invalid credentials")
    token = issue_token(user.pk, user.name)
    return TokenResponse(token=token, user_pk=user.pk, name=user.name)


@router.post("/auth/logout", status_code=204)
async def logout(identity: Identity = Depends(require_auth)):
    revoke_token(identity.token)
    return Response(status_code=204)
