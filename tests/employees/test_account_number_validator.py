import pytest

from employees_app.core.exceptions import AccountNumberFormatError
from employees_app.employees.validation import AccountNumberValidator


@pytest.fixture
def validator():
    return AccountNumberValidator()


def test_valid_account_number_returns_true(validator):
    assert validator.is_valid("123-4543234576-23") is True
    assert validator.is_valid("214-5874986532-21") is True


@pytest.mark.parametrize("account_number", ["1234-3454565676-23", "12-3454565676-23"])
def test_first_part_wrong_length_returns_false(validator, account_number):
    assert validator.is_valid(account_number) is False


@pytest.mark.parametrize("account_number", ["123-345456567-23", "123-345456567633-23", "123-34545656761-23"])
def test_middle_part_wrong_length_returns_false(validator, account_number):
    assert validator.is_valid(account_number) is False


@pytest.mark.parametrize("account_number", ["123-3434545656-2", "123-3454565676-233"])
def test_last_part_wrong_length_returns_false(validator, account_number):
    assert validator.is_valid(account_number) is False


def test_extra_delimiter_lands_in_last_part(validator):
    assert validator.is_valid("123-4543234576-2-3") is False


@pytest.mark.parametrize(
    "account_number",
    ["123-345456567633=23", "123+345456567633-23", "123+345456567633=23", "123-4543234576=23"],
)
def test_invalid_delimiters_raise(validator, account_number):
    with pytest.raises(AccountNumberFormatError):
        validator.is_valid(account_number)


@pytest.mark.parametrize("account_number", ["", "123454323457623"])
def test_missing_delimiters_raise(validator, account_number):
    with pytest.raises(ValueError):
        validator.is_valid(account_number)


def test_non_string_raises_type_error(validator):
    with pytest.raises(TypeError):
        validator.is_valid(None)


def test_custom_segment_lengths():
    validator = AccountNumberValidator(segment_lengths=(2, 2))

    assert validator.is_valid("AB-CD") is True
    assert validator.is_valid("ABC-D") is False
