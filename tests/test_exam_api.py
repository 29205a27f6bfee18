from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from exam_app.core.errors import QuestionFetchError, TransientNetworkError
from exam_app.core.models import Question
from exam_app.core.services.exam_api import ExamApiClient


def _response(status: int = 200, payload=None, json_error: Exception | None = None) -> Mock:
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.ok = 200 <= status < 300
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


def _client(response: Mock | None = None, error: Exception | None = None) -> tuple[ExamApiClient, Mock]:
    http = Mock(spec=requests.Session)
    for method in (http.post, http.get):
        if error is not None:
            method.side_effect = error
        else:
            method.return_value = response
    return ExamApiClient("https://exam.test/", session=http, timeout=7), http


def test_verify_posts_trimmed_credentials() -> None:
    client, http = _client(_response(payload={"access": True, "role": "student"}))

    assert client.verify(" Ali ", " CODE ") is True
    http.post.assert_called_once_with(
        "https://exam.test/verify",
        json={"name": "Ali", "code": "CODE"},
        timeout=7,
    )


@pytest.mark.parametrize(
    "payload, expected",
    [
        ({"access": False}, False),
        ({}, False),
        ({"access": 1}, True),
        ({"access": None}, False),
        (["access"], False),
    ],
)
def test_verify_reads_access_flag(payload, expected) -> None:
    client, _ = _client(_response(payload=payload))

    assert client.verify("Ali", "CODE") is expected


def test_verify_transport_failure_raises_transient_error() -> None:
    client, _ = _client(error=requests.ConnectionError("refused"))

    with pytest.raises(TransientNetworkError):
        client.verify("Ali", "CODE")


def test_verify_undecodable_body_raises_transient_error() -> None:
    client, _ = _client(_response(json_error=ValueError("not json")))

    with pytest.raises(TransientNetworkError):
        client.verify("Ali", "CODE")


def test_fetch_questions_maps_payload_in_order() -> None:
    payload = [
        {"id": 7, "question": "2+2?", "options": ["3", "4"], "answer": "4", "topic": "math"},
        {"id": "b", "question": "Sky?", "options": ["blue", "green"], "answer": "blue"},
    ]
    client, http = _client(_response(payload=payload))

    questions = client.fetch_questions(25)

    http.get.assert_called_once_with("https://exam.test/tests", params={"limit": 25}, timeout=7)
    assert questions == (
        Question(id=7, prompt="2+2?", options=("3", "4"), correct_option="4"),
        Question(id="b", prompt="Sky?", options=("blue", "green"), correct_option="blue"),
    )


def test_fetch_questions_non_list_body_is_empty() -> None:
    client, _ = _client(_response(payload={"detail": "nothing here"}))

    assert client.fetch_questions(25) == ()


def test_fetch_questions_error_status() -> None:
    client, _ = _client(_response(status=503))

    with pytest.raises(QuestionFetchError) as excinfo:
        client.fetch_questions(25)
    assert excinfo.value.status == 503


def test_fetch_questions_transport_failure() -> None:
    client, _ = _client(error=requests.Timeout("slow"))

    with pytest.raises(TransientNetworkError):
        client.fetch_questions(25)


@pytest.mark.parametrize(
    "payload",
    [
        [{"id": 1, "question": "?", "options": ["a"], "answer": "b"}],
        [{"id": 1, "question": "?", "options": [], "answer": "a"}],
        [{"id": 1, "options": ["a"], "answer": "a"}],
        [
            {"id": 1, "question": "?", "options": ["a"], "answer": "a"},
            {"id": 1, "question": "!", "options": ["a"], "answer": "a"},
        ],
    ],
)
def test_fetch_questions_rejects_invalid_payloads(payload) -> None:
    client, _ = _client(_response(payload=payload))

    with pytest.raises(QuestionFetchError):
        client.fetch_questions(25)


def test_fetch_questions_invalid_json() -> None:
    client, _ = _client(_response(json_error=ValueError("garbage")))

    with pytest.raises(QuestionFetchError):
        client.fetch_questions(25)


def test_fetch_questions_accepts_numeric_options() -> None:
    payload = [{"id": 1, "question": "2+2?", "options": [3, 4, 5], "answer": 4}]
    client, _ = _client(_response(payload=payload))

    (question,) = client.fetch_questions(25)

    assert question.options == ("3", "4", "5")
    assert question.correct_option == "4"
