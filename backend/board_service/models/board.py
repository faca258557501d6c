from datetime import datetime, timezone
from sqlalchemy import Column as SAColumn, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import relationship

from board_service.database import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class User(Base):
    __tablename__ = "users"

    pk = SAColumn(String, primary_key=True)
    name = SAColumn(String, nullable=False, unique=True)
    password = SAColumn(String, nullable=False)

    boards = relationship("Board", back_populates="user", cascade="all, delete-orphan")


class Board(Base):
    __tablename__ = "boards"

    pk = SAColumn(Integer, primary_key=True, autoincrement=True)
    user_pk = SAColumn(String, ForeignKey("users.pk", ondelete="CASCADE"), nullable=False, index=True)
    title = SAColumn(String, nullable=False)
    content = SAColumn(Text, nullable=False)
    created_at = SAColumn(DateTime(timezone=True), nullable=False, default=_utcnow, index=True)
    updated_at = SAColumn(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    user = relationship("User", back_populates="boards")
    comment = relationship(
        "Comment",
        back_populates="board",
        cascade="all, delete-orphan",
        order_by="Comment.created_at",
    )


class Comment(Base):
    __tablename__ = "comments"

    pk = SAColumn(Integer, primary_key=True, autoincrement=True)
    board_pk = SAColumn(Integer, ForeignKey("boards.pk", ondelete="CASCADE"), nullable=False, index=True)
    user_pk = SAColumn(String, ForeignKey("users.pk", ondelete="CASCADE"), nullable=False)
    content = SAColumn(Text, nullable=False)
    created_at = SAColumn(DateTime(timezone=True), nullable=False, default=_utcnow)
    updated_at = SAColumn(DateTime(timezone=True), nullable=False, default=_utcnow, onupdate=_utcnow)

    board = relationship("Board", back_populates="comment")
