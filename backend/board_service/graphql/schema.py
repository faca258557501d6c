import logging

import strawberry
from strawberry.extensions import SchemaExtension
from strawberry.fastapi import GraphQLRouter
from strawberry.schema.config import StrawberryConfig

from board_service.errors import BoardServiceError
from board_service.graphql.context import get_context
from board_service.graphql.resolvers.board import (
    resolve_all_boards,
    resolve_board,
    resolve_create_board,
    resolve_delete_board,
    resolve_my_boards,
    resolve_update_board,
)
from board_service.graphql.types import Board

logger = logging.getLogger(__name__)


@strawberry.type
class Query:
    board: Board = strawberry.field(resolver=resolve_board)
    my_boards: list[Board | None] = strawberry.field(name="myBoards", resolver=resolve_my_boards)
    all_boards: list[Board | None] = strawberry.field(name="allBoards", resolver=resolve_all_boards)
    create_board: bool = strawberry.field(name="createBoard", resolver=resolve_create_board)


@strawberry.type
class Mutation:
    update_board: bool = strawberry.mutation(name="updateBoard", resolver=resolve_update_board)
    delete_board: bool = strawberry.mutation(name="deleteBoard", resolver=resolve_delete_board)


class ErrorCodeExtension(SchemaExtension):
    """Expose ``BoardServiceError.code`` as ``extensions.code`` on GraphQL errors."""

    def on_operation(self):
        yield
        result = self.execution_context.result
        if result is None or not result.errors:
            return
        for error in result.errors:
            original = error.original_error
            if isinstance(original, BoardServiceError):
                error.extensions = {**(error.extensions or {}), "code": original.code}


class BoardSchema(strawberry.Schema):
    def process_errors(self, errors, execution_context=None):
        # Expected failures are part of the API contract; only log the rest with tracebacks
        unexpected = []
        for error in errors:
            if isinstance(error.original_error, BoardServiceError):
                logger.info("%s: %s", error.original_error.code, error.message)
            else:
                unexpected.append(error)
        if unexpected:
            super().process_errors(unexpected, execution_context)


schema = BoardSchema(
    query=Query,
    mutation=Mutation,
    config=StrawberryConfig(auto_camel_case=False),
    extensions=[ErrorCodeExtension],
)

graphql_router = GraphQLRouter(schema, context_getter=get_context)
