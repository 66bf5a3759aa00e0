"""Response model definitions."""

from sqlalchemy import Column, ForeignKey, Index, Integer, Text
from survey_backend.database import Base


class Response(Base):
    """Represents one user's answers to a template.

    Several rows may share a (user_id, template_id) pair; lookups use the
    earliest one.
    """
    __tablename__ = "responses"

    id = Column(Integer, primary_key=True, autoincrement=True)
    user_id = Column("userId", Integer, ForeignKey("usersform.id"))
    template_id = Column("templateId", Integer, ForeignKey("templates.id"))
    answers = Column(Text)


user_template_index = Index(
    "idx_responses_user_template",
    Response.__table__.c.userId,
    Response.__table__.c.templateId,
)
