import logging

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from survey_backend.auth.passwords import PasswordHasher, get_password_hasher
from survey_backend.core.errors import (
    AuthError,
    ConflictError,
    StorageError,
    ValidationError,
    describe_storage_failure,
)
from survey_backend.database import get_db
from survey_backend.models.user import User

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)


class SignupRequest(BaseModel):
    name: str | None = None
    email: str | None = None
    password: str | None = None


class LoginRequest(BaseModel):
    email: str | None = None
    password: str | None = None


class SignupResponse(BaseModel):
    message: str
    userId: int
    userType: str
    name: str


class LoginResponse(BaseModel):
    message: str
    userId: int
    name: str
    userType: str


@router.post('/signup', response_model=SignupResponse)
def signup(
    data: SignupRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    if not data.name or not data.email or not data.password:
        raise ValidationError('Name, email and password are required.')

    user = User(name=data.name, email=data.email, password=hasher.hash(data.password))

    try:
        db.add(user)
        db.commit()
        db.refresh(user)
    except IntegrityError as exc:
        db.rollback()
        logger.warning('Signup rejected for %s: %s', data.email, describe_storage_failure(exc))
        raise ConflictError(describe_storage_failure(exc)) from exc
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Signup failed.')
        raise StorageError(describe_storage_failure(exc)) from exc

    return SignupResponse(
        message='User registered successfully!',
        userId=user.id,
        userType=user.user_type,
        name=data.name,
    )


@router.post('/login', response_model=LoginResponse)
def login(
    data: LoginRequest,
    db: Session = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
):
    if not data.email or not data.password:
        raise ValidationError('Email and password are required.')

    try:
        user = db.query(User).filter(User.email == data.email).first()
    except SQLAlchemyError as exc:
        logger.exception('Login lookup failed.')
        raise StorageError(describe_storage_failure(exc)) from exc

    if user is None:
        raise AuthError('User not found')

    if not hasher.verify(data.password, user.password):
        raise AuthError('Invalid password')

    return LoginResponse(
        message='Login successful!',
        userId=user.id,
        name=user.name,
        userType=user.user_type,
    )
