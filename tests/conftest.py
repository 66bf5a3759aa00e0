import os

import pytest

os.environ.setdefault('DATABASE_URL', 'sqlite:///:memory:')

from survey_backend.auth.passwords import PasswordHasher  # noqa: E402
from survey_backend.database import Database  # noqa: E402
from survey_backend.models.template import Template  # noqa: E402
from survey_backend.models.user import User  # noqa: E402


@pytest.fixture
def database():
    storage = Database('sqlite:///:memory:')
    storage.create_schema()
    try:
        yield storage
    finally:
        storage.close()


@pytest.fixture
def db_session(database):
    db = database.session()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def hasher() -> PasswordHasher:
    # Lowest cost bcrypt accepts keeps the suite fast.
    return PasswordHasher(rounds=4)


@pytest.fixture
def stored_user(db_session, hasher) -> User:
    user = User(name='Ada', email='ada@example.com', password=hasher.hash('secret'))
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def stored_template(db_session) -> Template:
    template = Template(
        title='Onboarding',
        description='First week check-in',
        topic='HR',
        is_public=True,
        labels='["hr", "weekly"]',
        questions='[{"q": "How was your week?"}]',
        author_name='Grace',
    )
    db_session.add(template)
    db_session.commit()
    db_session.refresh(template)
    return template
