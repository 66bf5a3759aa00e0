import logging
from typing import Any

from fastapi import APIRouter, Depends, status
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from survey_backend.core.errors import NotFoundError, StorageError, ValidationError, describe_storage_failure
from survey_backend.core.json_fields import encode_json, is_missing, safe_parse
from survey_backend.database import get_db
from survey_backend.models.template import Template

router = APIRouter(tags=['templates'])

logger = logging.getLogger(__name__)

INCOMPLETE_TEMPLATE_DETAIL = 'The template information is not complete'


class CreateTemplateRequest(BaseModel):
    title: str | None = None
    description: str | None = None
    topic: str | None = None
    # Checked by hand so that "true" or 1 are rejected instead of coerced.
    isPublic: Any = None
    labels: Any = None
    questions: Any = None
    authorName: str | None = None


class TemplateResponse(BaseModel):
    id: int
    title: str | None = None
    description: str | None = None
    topic: str | None = None
    isPublic: bool | None = None
    labels: Any = None
    questions: Any = None
    authorName: str | None = None


class MessageResponse(BaseModel):
    message: str


def validate_template_request(data: CreateTemplateRequest) -> None:
    if (
        not data.title
        or not data.description
        or not data.topic
        or not isinstance(data.isPublic, bool)
        or is_missing(data.labels)
        or is_missing(data.questions)
        or not data.authorName
    ):
        raise ValidationError(INCOMPLETE_TEMPLATE_DETAIL)


def serialize_template(template: Template) -> TemplateResponse:
    return TemplateResponse(
        id=template.id,
        title=template.title,
        description=template.description,
        topic=template.topic,
        isPublic=None if template.is_public is None else bool(template.is_public),
        labels=safe_parse(template.labels).value,
        questions=safe_parse(template.questions).value,
        authorName=template.author_name,
    )


@router.post('/registerTemplate', response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_template(data: CreateTemplateRequest, db: Session = Depends(get_db)):
    validate_template_request(data)

    template = Template(
        title=data.title,
        description=data.description,
        topic=data.topic,
        is_public=data.isPublic,
        labels=encode_json(data.labels),
        questions=encode_json(data.questions),
        author_name=data.authorName,
    )

    try:
        db.add(template)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Saving template failed.')
        raise StorageError(describe_storage_failure(exc)) from exc

    return MessageResponse(message='Template saved successfully')


@router.get('/getTemplates', response_model=list[TemplateResponse])
def list_templates(db: Session = Depends(get_db)):
    try:
        templates = db.query(Template).order_by(Template.id.asc()).all()
    except SQLAlchemyError as exc:
        logger.exception('Listing templates failed.')
        raise StorageError(describe_storage_failure(exc)) from exc

    if not templates:
        raise NotFoundError('No templates found')

    return [serialize_template(template) for template in templates]


@router.get('/templates/{template_id}', response_model=TemplateResponse)
def get_template(template_id: str, db: Session = Depends(get_db)):
    try:
        lookup_id = int(template_id)
    except ValueError as exc:
        raise NotFoundError('No template data found') from exc

    try:
        template = db.query(Template).filter(Template.id == lookup_id).first()
    except SQLAlchemyError as exc:
        logger.exception('Fetching template %s failed.', template_id)
        raise StorageError(describe_storage_failure(exc)) from exc

    if template is None:
        raise NotFoundError('No template data found')

    return serialize_template(template)
