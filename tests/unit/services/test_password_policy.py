import pytest

from src.app.services.password_policy import SPECIAL_CHARACTERS, PasswordPolicy

policy = PasswordPolicy(min_length=8)


@pytest.mark.parametrize(
    "password,reason",
    [
        ("123", "The password must have at least 8 characters."),
        ("Ab!", "The password must have at least 8 characters."),
        ("123456789", "The password must contain at least one uppercase letter."),
        ("123456789a", "The password must contain at least one uppercase letter."),
        ("123456789A!", "The password must contain at least one lowercase letter."),
        ("123456789aA", "The password must contain at least one special character."),
    ],
)
def test_first_violated_rule_is_reported(password, reason):
    error = policy.validate(password)

    assert error.code == "WEAK_PASSWORD"
    assert error.message == reason


def test_strong_password_passes():
    assert policy.validate("123Soleil!") is None


@pytest.mark.parametrize("special", list(SPECIAL_CHARACTERS))
def test_every_special_character_is_accepted(special):
    assert policy.validate(f"Password1{special}") is None


def test_characters_outside_special_set_do_not_count():
    assert policy.validate("Password1-~`=") is not None


def test_disabled_rules_are_skipped():
    relaxed = PasswordPolicy(
        min_length=4,
        require_uppercase=False,
        require_lowercase=False,
        require_special_char=False,
    )

    assert relaxed.validate("1234") is None


def test_custom_min_length_in_reason():
    error = PasswordPolicy(min_length=12).validate("Short1!abc")

    assert "at least 12 characters" in error.message
