from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession
from strawberry.fastapi import BaseContext

from board_service.auth.permissions import TokenVerifier, get_token_verifier
from board_service.database import get_session


class BoardContext(BaseContext):
    """Per-request collaborators handed to every resolver."""

    def __init__(self, session: AsyncSession, verify_token: TokenVerifier):
        super().__init__()
        self.session = session
        self.verify_token = verify_token


async def get_context(
    session: AsyncSession = Depends(get_session),
    verify_token: TokenVerifier = Depends(get_token_verifier),
) -> BoardContext:
    return BoardContext(session=session, verify_token=verify_token)
