from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.orm import declarative_base

from board_service.config import DATABASE_URL

engine = create_async_engine(DATABASE_URL, echo=False)
async_session_maker = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@event.listens_for(engine.sync_engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    if not DATABASE_URL.startswith("sqlite"):
        return
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()

Base = declarative_base()


async def get_session():
    async with async_session_maker() as session:
        yield session


async def init_db():
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    async with async_session_maker() as session:
        from sqlalchemy import select, func
        from board_service.models.board import User
        result = await session.execute(select(func.count()).select_from(User))
        if result.scalar() == 0:
            await seed_db(session)


async def seed_db(session: AsyncSession):
    import logging
    from datetime import datetime, timedelta, timezone
    _logger = logging.getLogger(__name__)

    from board_service.models.board import User, Board, Comment

    user = User(pk="user-1", name="user", password="password")
    alice = User(pk="user-2", name="alice", password="password")
    bob = User(pk="user-3", name="bob", password="password")
    for u in [user, alice, bob]:
        session.add(u)

    # Fixed, strictly increasing timestamps so "recent" ordering is stable
    base = datetime(2024, 1, 1, 9, 0, tzinfo=timezone.utc)
    posts = [
        ("user-1", "Welcome to the board", "Introduce yourself and say hello."),
        ("user-1", "House rules", "Be kind, stay on topic, no spam."),
        ("user-2", "Weekend hiking trip", "Anyone up for the ridge trail on Saturday?"),
        ("user-1", "Release notes 1.2", "Comments now load with each post."),
        ("user-2", "Looking for a study group", "Database systems, Tuesday evenings."),
        ("user-2", "Lost umbrella", "Black, left in the library on Friday."),
    ]
    for pk, (owner, title, content) in enumerate(posts, start=1):
        created = base + timedelta(days=pk)
        session.add(Board(
            pk=pk,
            user_pk=owner,
            title=title,
            content=content,
            created_at=created,
            updated_at=created,
        ))

    comments = [
        Comment(board_pk=1, user_pk="user-2", content="Hi everyone!", created_at=base + timedelta(days=1, hours=1)),
        Comment(board_pk=1, user_pk="user-3", content="Glad to be here.", created_at=base + timedelta(days=1, hours=2)),
        Comment(board_pk=3, user_pk="user-1", content="Count me in.", created_at=base + timedelta(days=3, hours=5)),
    ]
    for comment in comments:
        comment.updated_at = comment.created_at
        session.add(comment)

    try:
        await session.commit()
    except Exception as exc:
        _logger.error("Failed to seed database: %s", exc)
        await session.rollback()
        raise
