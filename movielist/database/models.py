"""
SQLAlchemy ORM models for the movie list database.

This module defines the User and MovieListEntry tables with their
relationships and constraints.
"""

from datetime import datetime
from typing import List
from sqlalchemy import (
    Integer, String, Text, Boolean, ForeignKey,
    UniqueConstraint, Index, TIMESTAMP
)
from sqlalchemy.orm import DeclarativeBase, relationship, Mapped, mapped_column
from sqlalchemy.sql import func


class Base(DeclarativeBase):
    """Base class for all ORM models."""
    pass


class User(Base):
    """
    User table storing account information.

    Attributes:
        username: Primary key, immutable once created
        password: Salted password hash (never returned by the API)
        first_name: User's first name
        last_name: User's last name
        email: User's email address
        is_admin: Whether the user has admin privileges
        created_at: Timestamp when record was created
        updated_at: Timestamp when record was last updated
    """
    __tablename__ = 'users'

    username: Mapped[str] = mapped_column(String(30), primary_key=True)
    password: Mapped[str] = mapped_column(Text, nullable=False)
    first_name: Mapped[str] = mapped_column(String(30), nullable=False)
    last_name: Mapped[str] = mapped_column(String(30), nullable=False)
    email: Mapped[str] = mapped_column(String(60), nullable=False)
    is_admin: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )
    updated_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp(),
        onupdate=func.current_timestamp()
    )

    # Relationships
    movie_list: Mapped[List["MovieListEntry"]] = relationship(
        "MovieListEntry",
        back_populates="user",
        cascade="all, delete-orphan",
        order_by="MovieListEntry.entry_id"
    )

    def __repr__(self) -> str:
        return f"<User(username='{self.username}', email='{self.email}', is_admin={self.is_admin})>"


class MovieListEntry(Base):
    """
    Movie list table storing the movies a user has saved.

    Attributes:
        entry_id: Primary key, auto-incremented
        username: Foreign key to users table
        movie_id: External movie identifier
        movie_name: Movie name as supplied when it was added
        created_at: Timestamp when the entry was added
    """
    __tablename__ = 'movie_list'

    entry_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    username: Mapped[str] = mapped_column(
        String(30),
        ForeignKey('users.username', ondelete='CASCADE'),
        nullable=False
    )
    movie_id: Mapped[str] = mapped_column(String(50), nullable=False)
    movie_name: Mapped[str] = mapped_column(Text, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        TIMESTAMP,
        nullable=False,
        server_default=func.current_timestamp()
    )

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="movie_list")

    # Constraints and indexes
    __table_args__ = (
        UniqueConstraint('username', 'movie_id', name='unique_user_movie'),
        Index('idx_movie_list_user', 'username'),
    )

    def __repr__(self) -> str:
        return f"<MovieListEntry(username='{self.username}', movie_id='{self.movie_id}', movie_name='{self.movie_name}')>"
