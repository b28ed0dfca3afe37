import pytest

from shop_api.exceptions.catalog import CATALOGS, friendly_message, resolve_locale


@pytest.mark.parametrize(
    "header, expected",
    [
        (None, "vi"),
        ("", "vi"),
        ("en-US,en;q=0.9", "en"),
        ("fr-FR, en;q=0.5", "en"),
        ("vi-VN,vi;q=0.9,en;q=0.8", "vi"),
        ("de", "vi"),
    ],
)
def test_resolve_locale(header, expected):
    assert resolve_locale(header) == expected


def test_resolve_locale_uses_given_default():
    assert resolve_locale("ja", default="en") == "en"
    assert resolve_locale("ja", default="xx") == "vi"


def test_friendly_message_known_code():
    assert friendly_message("PHONE_ALREADY_IN_USE", locale="en").startswith("This phone number")


def test_friendly_message_is_case_insensitive():
    assert friendly_message("user_info_not_found", locale="en") == "User profile not found."


def test_friendly_message_falls_back_to_generic_error():
    assert friendly_message("CART_EMPTY", locale="en") == CATALOGS["en"]["ERROR"]
    assert friendly_message(None) == CATALOGS["vi"]["ERROR"]
    assert friendly_message("CART_EMPTY", fallback="Cart is empty") == "Cart is empty"


def test_catalogs_cover_the_same_codes():
    assert set(CATALOGS["vi"]) == set(CATALOGS["en"])
