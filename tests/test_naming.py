from __future__ import annotations

import pytest

from flutter_scaffold.naming import camel_case, pascal_case


@pytest.mark.parametrize(
    "value, expected",
    [
        ("forgot_password", "ForgotPassword"),
        ("x", "X"),
        ("", ""),
        ("home", "Home"),
        ("user__profile", "UserProfile"),
        ("_private", "Private"),
        ("trailing_", "Trailing"),
        ("v2_api", "V2Api"),
        ("mixedCase_name", "MixedCaseName"),
    ],
)
def test_pascal_case(value, expected):
    assert pascal_case(value) == expected


def test_pascal_case_leaves_non_ascii_untouched():
    assert pascal_case("été_ñandú") == "étéñandú"


@pytest.mark.parametrize("value", ["Home", "ForgotPassword", "X", "Already9"])
def test_pascal_case_is_idempotent_without_underscores(value):
    assert pascal_case(value) == value
    assert pascal_case(pascal_case(value)) == value


@pytest.mark.parametrize(
    "value, expected",
    [
        ("forgot_password", "forgotPassword"),
        ("home", "home"),
        ("", ""),
        ("Settings", "settings"),
    ],
)
def test_camel_case(value, expected):
    assert camel_case(value) == expected
