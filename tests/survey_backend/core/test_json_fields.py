import pytest

from survey_backend.core.json_fields import ParsedJson, encode_json, is_missing, merge_answers, safe_parse


def test_safe_parse_decodes_stored_json_text() -> None:
    assert safe_parse('{"q1": [1, 2.5, true, null]}') == ParsedJson(value={'q1': [1, 2.5, True, None]})


def test_safe_parse_falls_back_to_raw_text() -> None:
    result = safe_parse('not json')

    assert result.is_raw is True
    assert result.value == 'not json'


def test_safe_parse_passes_native_values_through() -> None:
    native = {'q1': 'x'}

    result = safe_parse(native)

    assert result.is_raw is False
    assert result.value is native


def test_encode_json_keeps_key_order() -> None:
    assert encode_json({'b': 1, 'a': 2}) == '{"b": 1, "a": 2}'


def test_merge_answers_overrides_adds_and_preserves_keys() -> None:
    merged = merge_answers({'q1': 'x', 'q2': 'y'}, {'q2': 'z', 'q3': 'w'})

    assert merged == {'q1': 'x', 'q2': 'z', 'q3': 'w'}


def test_merge_answers_is_shallow() -> None:
    merged = merge_answers({'q1': {'a': 1, 'b': 2}}, {'q1': {'a': 3}})

    assert merged == {'q1': {'a': 3}}


def test_merge_answers_ignores_non_mapping_stored_value() -> None:
    assert merge_answers('raw text', {'q1': 'x'}) == {'q1': 'x'}


@pytest.mark.parametrize('value', [None, '', False, 0, 0.0])
def test_is_missing_treats_falsy_scalars_as_absent(value) -> None:
    assert is_missing(value) is True


@pytest.mark.parametrize('value', [[], {}, True, 1, 'x', [0], {'q1': None}])
def test_is_missing_keeps_empty_containers_and_truthy_values(value) -> None:
    assert is_missing(value) is False
