import pytest
from werkzeug.datastructures import Headers

from utils.credentials import get_api_key, get_bearer_token
from utils.exceptions import CredentialError


def test_bearer_token():
    assert get_bearer_token({"Authorization": "Bearer abc"}) == "abc"


def test_bearer_token_is_trimmed():
    assert get_bearer_token({"Authorization": "Bearer    abc  "}) == "abc"


def test_api_key():
    assert get_api_key({"Authorization": "ApiKey k1"}) == "k1"


def test_werkzeug_headers():
    headers = Headers([("Authorization", "Bearer abc")])
    assert get_bearer_token(headers) == "abc"


def test_schemes_do_not_cross():
    with pytest.raises(CredentialError) as exc:
        get_bearer_token({"Authorization": "ApiKey k1"})
    assert exc.value.reason == "wrong_scheme"
    with pytest.raises(CredentialError):
        get_api_key({"Authorization": "Bearer abc"})


@pytest.mark.parametrize("parser", [get_bearer_token, get_api_key])
@pytest.mark.parametrize(
    "headers, reason",
    [
        ({"Authorization": "Basic xyz"}, "wrong_scheme"),
        ({"Authorization": ""}, "missing"),
        ({}, "missing"),
    ],
)
def test_rejected_headers(parser, headers, reason):
    with pytest.raises(CredentialError) as exc:
        parser(headers)
    assert exc.value.reason == reason


def test_prefix_without_value():
    with pytest.raises(CredentialError) as exc:
        get_bearer_token({"Authorization": "Bearer   "})
    assert exc.value.reason == "empty"


def test_leading_whitespace_before_scheme_rejected():
    with pytest.raises(CredentialError) as exc:
        get_bearer_token({"Authorization": "  Bearer abc"})
    assert exc.value.reason == "wrong_scheme"


def test_scheme_without_value():
    with pytest.raises(CredentialError) as exc:
        get_api_key({"Authorization": "ApiKey"})
    assert exc.value.reason == "empty"
