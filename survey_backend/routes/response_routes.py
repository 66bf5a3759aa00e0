import logging
from typing import Any

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import Response
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from survey_backend.core.errors import NotFoundError, StorageError, ValidationError, describe_storage_failure
from survey_backend.core.json_fields import encode_json, is_missing, merge_answers, safe_parse
from survey_backend.database import get_db
from survey_backend.models.response import Response as StoredResponse

router = APIRouter(tags=['responses'])

logger = logging.getLogger(__name__)


class AnswersRequest(BaseModel):
    userId: int | None = None
    templateId: int | None = None
    answers: Any = None


class MessageResponse(BaseModel):
    message: str


def is_valid_id(value: int | None) -> bool:
    # Identities are auto-increment values, so 0 is never a real row.
    return value is not None and value > 0


def is_complete(data: AnswersRequest) -> bool:
    return (
        is_valid_id(data.userId)
        and is_valid_id(data.templateId)
        and not is_missing(data.answers)
    )


def find_response(db: Session, user_id: int, template_id: int) -> StoredResponse | None:
    """Return the earliest answer set stored for the pair, if any."""
    return (
        db.query(StoredResponse)
        .filter(
            StoredResponse.user_id == user_id,
            StoredResponse.template_id == template_id,
        )
        .order_by(StoredResponse.id.asc())
        .first()
    )


@router.post('/registerAnswers', response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
def register_answers(data: AnswersRequest, db: Session = Depends(get_db)):
    if not is_complete(data):
        raise ValidationError('The answer information is not complete')
    if not isinstance(data.answers, dict):
        raise ValidationError('Answers must be a JSON object')

    stored = StoredResponse(
        user_id=data.userId,
        template_id=data.templateId,
        answers=encode_json(data.answers),
    )

    try:
        db.add(stored)
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Saving answers for user %s failed.', data.userId)
        raise StorageError(describe_storage_failure(exc)) from exc

    return MessageResponse(message='Answers saved successfully')


@router.get('/userResponse')
def get_user_response(
    userId: int | None = Query(default=None),
    templateId: int | None = Query(default=None),
    db: Session = Depends(get_db),
):
    if not is_valid_id(userId) or not is_valid_id(templateId):
        raise ValidationError('Missing parameters')

    try:
        stored = find_response(db, userId, templateId)
    except SQLAlchemyError as exc:
        logger.exception('Fetching answers failed.')
        raise StorageError(describe_storage_failure(exc)) from exc

    if stored is None:
        return Response(status_code=status.HTTP_204_NO_CONTENT)

    return safe_parse(stored.answers).value


@router.post('/editAnswers', response_model=MessageResponse)
def edit_answers(data: AnswersRequest, db: Session = Depends(get_db)):
    if not is_complete(data):
        raise ValidationError('Incomplete request body')
    if not isinstance(data.answers, dict):
        raise ValidationError('Answers must be a JSON object')

    try:
        stored = find_response(db, data.userId, data.templateId)
        if stored is None:
            raise NotFoundError('Response not found')

        current = safe_parse(stored.answers)
        if current.is_raw or not isinstance(current.value, dict):
            logger.warning('Stored answers for response %s are not an object; replacing them.', stored.id)

        # Read and write are separate statements; a concurrent edit can be lost.
        stored.answers = encode_json(merge_answers(current.value, data.answers))
        db.commit()
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Updating answers failed.')
        raise StorageError(describe_storage_failure(exc)) from exc

    return MessageResponse(message='Answers updated successfully')
