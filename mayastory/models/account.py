"""ORM model for player accounts."""

from sqlalchemy import Column, Date, DateTime, Integer, String, func

from mayastory.models.base import Base


class Account(Base):
    """
    Game account created by registration and read by login.

    banned and loggedin are stored as 0/1 integers. loggedin is never updated
    by this service; it is kept for schema compatibility with the game server.
    """

    __tablename__ = "accounts"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(13), nullable=False, unique=True, index=True)
    # bcrypt hash; column name kept as "password" for the existing table.
    password_hash = Column("password", String(128), nullable=False)
    email = Column(String(255), nullable=True)
    birthday = Column(Date, nullable=False)
    gender = Column(Integer, nullable=False, default=0)
    creation = Column(
        DateTime(timezone=True),
        nullable=False,
        server_default=func.now(),
    )
    banned = Column(Integer, nullable=False, default=0)
    loggedin = Column(Integer, nullable=False, default=0)
    tos = Column(Integer, nullable=False, default=1)
