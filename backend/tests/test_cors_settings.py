from contact_relay.core.cors import cors_headers
from contact_relay.core.settings import DEFAULT_ORIGINS, Settings


def test_cors_echoes_allowed_origin():
    headers = cors_headers("https://www.cybersoft.az", DEFAULT_ORIGINS)
    assert headers["Access-Control-Allow-Origin"] == "https://www.cybersoft.az"


def test_cors_falls_back_to_first_origin():
    assert cors_headers("https://evil.example", DEFAULT_ORIGINS)["Access-Control-Allow-Origin"] == (
        "https://cybersoft.az"
    )
    assert cors_headers(None, ["https://only.test"])["Access-Control-Allow-Origin"] == "https://only.test"


def test_allow_list_parsing():
    assert Settings(ALLOWED_ORIGINS=None).origin_allow_list() == DEFAULT_ORIGINS
    assert Settings(ALLOWED_ORIGINS=" https://a.test ,https://b.test,").origin_allow_list() == [
        "https://a.test",
        "https://b.test",
    ]
    assert Settings(ALLOWED_ORIGINS=" , ").origin_allow_list() == DEFAULT_ORIGINS


def test_credential_is_not_echoed_in_repr():
    s = Settings(RESEND_API_KEY="super-secret")
    assert s.resend_api_key.get_secret_value() == "super-secret"
    assert "super-secret" not in repr(s)
