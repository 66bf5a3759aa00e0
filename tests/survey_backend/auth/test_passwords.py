import pytest

from survey_backend.auth.passwords import PasswordHasher


def test_hash_differs_from_plaintext_and_verifies(hasher: PasswordHasher) -> None:
    hashed = hasher.hash('secret')

    assert hashed != 'secret'
    assert hasher.verify('secret', hashed)


def test_hashes_of_same_password_are_salted_differently(hasher: PasswordHasher) -> None:
    first = hasher.hash('secret')
    second = hasher.hash('secret')

    assert first != second
    assert hasher.verify('secret', first)
    assert hasher.verify('secret', second)


def test_verify_rejects_wrong_password(hasher: PasswordHasher) -> None:
    assert hasher.verify('wrong', hasher.hash('secret')) is False


@pytest.mark.parametrize('malformed', ['', 'not-a-bcrypt-hash', '$2b$10$short', None])
def test_verify_returns_false_for_malformed_hash(hasher: PasswordHasher, malformed) -> None:
    assert hasher.verify('secret', malformed) is False


def test_default_cost_factor_is_ten() -> None:
    hashed = PasswordHasher().hash('secret')

    assert hashed.startswith('$2b$10$')


def test_password_over_bcrypt_limit_hashes_and_verifies(hasher: PasswordHasher) -> None:
    long_password = 'é' * 37

    hashed = hasher.hash(long_password)

    assert hasher.verify(long_password, hashed)
    assert hasher.verify('p' * 80, hasher.hash('p' * 80))
