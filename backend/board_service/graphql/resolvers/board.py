import logging

import strawberry
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload, selectinload

from board_service.config import RECENT_BOARDS_LIMIT
from board_service.errors import ForbiddenError, NotFoundError, catch_db_error
from board_service.graphql.types import Board
from board_service.models import board as models

logger = logging.getLogger(__name__)


async def _get_user_or_404(session: AsyncSession, user_pk: str) -> models.User:
    async with catch_db_error(session):
        user = await session.get(models.User, user_pk)
    if user is None:
        raise NotFoundError("Not Found User")
    return user


async def _get_board_or_404(session: AsyncSession, board_pk: int) -> models.Board:
    async with catch_db_error(session):
        board = await session.get(models.Board, board_pk)
    if board is None:
        raise NotFoundError("Not Found Board")
    return board


async def _require_owner(session: AsyncSession, board_pk: int, user_pk: str) -> models.Board:
    board = await _get_board_or_404(session, board_pk)
    if board.user_pk != user_pk:
        logger.warning("User %s denied write access to board %s", user_pk, board_pk)
        raise ForbiddenError()
    return board


# Query resolvers
async def resolve_board(info: strawberry.Info, board_pk: int, token: str | None = None) -> Board:
    """
    Resolve one board with its owner and comments.

    ``isWrite`` is true only when ``token`` belongs to the board's owner.
    """
    session = info.context.session
    user_pk = info.context.verify_token(token).user_pk if token else None

    async with catch_db_error(session):
        result = await session.execute(
            select(models.Board)
            .where(models.Board.pk == board_pk)
            .options(joinedload(models.Board.user), selectinload(models.Board.comment))
        )
        board = result.scalar_one_or_none()

    if board is None:
        raise NotFoundError("Not Found Board")

    return Board.from_model(board, is_write=board.user_pk == user_pk, with_comments=True)


async def resolve_my_boards(info: strawberry.Info, token: str) -> list[Board | None]:
    """Resolve every board owned by the token's user."""
    session = info.context.session
    identity = info.context.verify_token(token)
    user = await _get_user_or_404(session, identity.user_pk)

    async with catch_db_error(session):
        result = await session.execute(
            select(models.Board)
            .where(models.Board.user_pk == user.pk)
            .options(joinedload(models.Board.user))
            .order_by(models.Board.pk)
        )
        boards = result.scalars().all()

    if not boards:
        raise NotFoundError("Not Found Boards")

    return [Board.from_model(board) for board in boards]


async def resolve_all_boards(info: strawberry.Info) -> list[Board | None]:
    """Resolve the most recently created boards, newest first."""
    session = info.context.session

    async with catch_db_error(session):
        result = await session.execute(
            select(models.Board)
            .options(joinedload(models.Board.user))
            .order_by(models.Board.created_at.desc(), models.Board.pk.desc())
            .limit(RECENT_BOARDS_LIMIT)
        )
        boards = result.scalars().all()

    if not boards:
        raise NotFoundError("Not Found Boards")

    return [Board.from_model(board) for board in boards]


async def resolve_create_board(info: strawberry.Info, token: str, title: str, content: str) -> bool:
    session = info.context.session
    identity = info.context.verify_token(token)
    user = await _get_user_or_404(session, identity.user_pk)

    async with catch_db_error(session):
        board = models.Board(user_pk=user.pk, title=title, content=content)
        session.add(board)
        await session.commit()

    logger.info("User %s created board %s", user.pk, board.pk)
    return True


# Mutation resolvers
async def resolve_update_board(
    info: strawberry.Info,
    board_pk: int,
    token: str,
    title: str | None = None,
    content: str | None = None,
) -> bool:
    """
    Update a board's title and/or content. Owner only.

    Omitted arguments keep their stored value.
    """
    session = info.context.session
    identity = info.context.verify_token(token)
    board = await _require_owner(session, board_pk, identity.user_pk)

    if title is not None:
        board.title = title
    if content is not None:
        board.content = content

    async with catch_db_error(session):
        await session.commit()

    logger.info("User %s updated board %s", identity.user_pk, board_pk)
    return True


async def resolve_delete_board(info: strawberry.Info, board_pk: int, token: str) -> bool:
    session = info.context.session
    identity = info.context.verify_token(token)
    board = await _require_owner(session, board_pk, identity.user_pk)

    async with catch_db_error(session):
        await session.delete(board)
        await session.commit()

    logger.info("User %s deleted board %s", identity.user_pk, board_pk)
    return True
