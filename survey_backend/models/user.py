"""User model definitions."""

from sqlalchemy import Column, Integer, String
from survey_backend.database import Base

DEFAULT_USER_TYPE = "Regular"


class User(Base):
    """Represents a registered account."""
    __tablename__ = "usersform"

    id = Column(Integer, primary_key=True, autoincrement=True)
    name = Column(String(255), nullable=False)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password = Column(String(255), nullable=False)  # bcrypt hash
    user_type = Column(
        "userType",
        String(255),
        nullable=False,
        default=DEFAULT_USER_TYPE,
        server_default=DEFAULT_USER_TYPE,
    )
