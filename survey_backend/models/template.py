"""Template model definitions."""

from sqlalchemy import Boolean, Column, Integer, String, Text
from survey_backend.database import Base


class Template(Base):
    """Represents a published question template.

    ``labels`` and ``questions`` hold JSON text and are never inspected.
    """
    __tablename__ = "templates"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String(255))
    description = Column(Text)
    topic = Column(String(255))
    is_public = Column("isPublic", Boolean)
    labels = Column(Text)
    questions = Column(Text)
    author_name = Column("authorName", String(255))
