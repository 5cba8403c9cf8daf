"""SQLAlchemy models for users and movies.

Both tables use an auto-incrementing integer primary key, so ids are
assigned atomically by the database on insert.
"""

from __future__ import annotations

from sqlalchemy import Column, Integer, String

from database import Base


class User(Base):
    """ORM model representing an application user.

    Attributes
    ----------
    id:
        Integer primary key assigned by the database.
    email:
        Login identifier. Indexed, not unique.
    password:
        Argon2 hash of the user's password; never serialized.
    gender, role:
        Free-form profile strings.
    """

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    email = Column(String(255), index=True, nullable=False)
    password = Column(String(255), nullable=False)
    gender = Column(String(50), nullable=False)
    role = Column(String(50), nullable=False)

    def __repr__(self) -> str:
        return f"<User id={self.id!r} email={self.email!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "email": self.email,
            "gender": self.gender,
            "role": self.role,
        }


class Movie(Base):
    """ORM model representing a movie."""

    __tablename__ = "movies"

    id = Column(Integer, primary_key=True, index=True, autoincrement=True)
    title = Column(String(255), nullable=False)
    genres = Column(String(255), nullable=False)
    year = Column(String(10), nullable=False)

    def __repr__(self) -> str:
        return f"<Movie id={self.id!r} title={self.title!r}>"

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "title": self.title,
            "genres": self.genres,
            "year": self.year,
        }
