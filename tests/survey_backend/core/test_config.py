import pytest

from survey_backend.core import config


def test_get_bool_parses_common_truthy_values() -> None:
    assert config._get_bool(' Yes ') is True
    assert config._get_bool('off') is False
    assert config._get_bool(None, default=True) is True


def test_get_list_splits_and_strips_origins() -> None:
    assert config._get_list('http://a.test, http://b.test ,', default=['*']) == ['http://a.test', 'http://b.test']
    assert config._get_list('', default=['*']) == ['*']


def test_validate_runtime_config_requires_database_url(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'DATABASE_URL', '')

    with pytest.raises(RuntimeError, match='DATABASE_URL'):
        config.validate_runtime_config()


def test_validate_runtime_config_rejects_out_of_range_hash_rounds(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(config, 'DATABASE_URL', 'sqlite:///:memory:')
    monkeypatch.setattr(config, 'PASSWORD_HASH_ROUNDS', 3)

    with pytest.raises(RuntimeError, match='PASSWORD_HASH_ROUNDS'):
        config.validate_runtime_config()
