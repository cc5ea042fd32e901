import pytest

from helpers.contact_helper import build_submission, parse_request_body
from helpers.exceptions import ClientRequestError


def test_json_body_is_parsed_when_declared() -> None:
    payload = parse_request_body(b'{"firstName": "Jordan"}', "application/json; charset=utf-8")

    assert payload == {"firstName": "Jordan"}


def test_empty_json_body_is_rejected() -> None:
    with pytest.raises(ClientRequestError) as excinfo:
        parse_request_body(b"", "application/json")

    assert excinfo.value.to_body() == {"error": "Invalid request body"}


def test_undeclared_body_is_parsed_as_form_data() -> None:
    payload = parse_request_body(b"firstName=Jordan&company=Studio+%26+Co&message=", "")

    assert payload == {"firstName": "Jordan", "company": "Studio & Co", "message": ""}


def test_json_text_without_json_content_type_is_treated_as_form() -> None:
    payload = parse_request_body(b'{"firstName": "Jordan"}', "text/plain")

    assert "firstName" not in payload


@pytest.mark.parametrize("body", [b"{not json", b'"just a string"', b"\xff\xfe"])
def test_unusable_json_bodies_are_rejected(body) -> None:
    with pytest.raises(ClientRequestError) as excinfo:
        parse_request_body(body, "application/json")

    assert excinfo.value.status_code == 400
    assert excinfo.value.to_body() == {"error": "Invalid request body"}


def test_optional_fields_default_to_empty() -> None:
    submission = build_submission({"firstName": "Jordan", "lastName": "Rivera", "email": "j@studio.co"})

    assert submission.company == ""
    assert submission.revenue == ""
    assert submission.message == ""


def test_non_string_values_are_coerced() -> None:
    submission = build_submission({"firstName": "Jordan", "lastName": "Rivera", "email": "j@studio.co", "company": 42})

    assert submission.company == "42"
