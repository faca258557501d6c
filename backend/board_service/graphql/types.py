"""
Board GraphQL type definitions
"""

from datetime import datetime
from typing import NewType

import strawberry

from board_service.models import board as models

Date = strawberry.scalar(
    NewType("Date", datetime),
    serialize=lambda value: value.isoformat(),
    parse_value=datetime.fromisoformat,
    description="ISO-8601 date-time",
)


@strawberry.type
class Comment:
    """Comment attached to a board. Read-only from the board operations."""

    pk: int
    board_pk: int
    user_pk: str
    content: str
    created_at: Date = strawberry.field(name="createdAt")
    updated_at: Date = strawberry.field(name="updatedAt")

    @classmethod
    def from_model(cls, comment: models.Comment) -> "Comment":
        return cls(
            pk=comment.pk,
            board_pk=comment.board_pk,
            user_pk=comment.user_pk,
            content=comment.content,
            created_at=comment.created_at,
            updated_at=comment.updated_at,
        )


@strawberry.type
class Board:
    """Forum post with its owner's display name."""

    pk: int
    user_pk: str
    user_name: str
    title: str
    content: str
    created_at: Date = strawberry.field(name="createdAt")
    updated_at: Date = strawberry.field(name="updatedAt")
    is_write: bool | None = strawberry.field(name="isWrite", default=None)
    comment: list[Comment | None] | None = None

    @classmethod
    def from_model(
        cls,
        board: models.Board,
        is_write: bool | None = None,
        with_comments: bool = False,
    ) -> "Board":
        """
        Convert an ORM board into the GraphQL type.

        ``board.user`` must already be loaded; ``board.comment`` is only read
        when ``with_comments`` is set.
        """
        return cls(
            pk=board.pk,
            user_pk=board.user_pk,
            user_name=board.user.name,
            title=board.title,
            content=board.content,
            created_at=board.created_at,
            updated_at=board.updated_at,
            is_write=is_write,
            comment=[Comment.from_model(c) for c in board.comment] if with_comments else None,
        )
