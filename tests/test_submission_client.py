from __future__ import annotations

from unittest.mock import Mock

import pytest
import requests

from exam_app.core.errors import SubmissionFailedError, SubmissionNetworkError
from exam_app.core.models import SubmissionMeta
from exam_app.core.services.submission_client import SubmissionClient, build_form_fields

META = SubmissionMeta(
    participant_name="Ali Vali",
    started_at="2025-05-06T07:00:00.000Z",
    finished_at="2025-05-06T07:02:05.000Z",
    duration="2m 5s",
    total=2,
    correct=1,
)


def _session(status: int = 200, text: str = "ok", error: Exception | None = None) -> Mock:
    http = Mock(spec=requests.Session)
    if error is not None:
        http.post.side_effect = error
        return http
    response = Mock(spec=requests.Response)
    response.status_code = status
    response.ok = 200 <= status < 300
    response.text = text
    http.post.return_value = response
    return http


def test_form_fields_are_strings() -> None:
    assert build_form_fields(META) == {
        "name": "Ali Vali",
        "startedAt": "2025-05-06T07:00:00.000Z",
        "finishedAt": "2025-05-06T07:02:05.000Z",
        "duration": "2m 5s",
        "total": "2",
        "correct": "1",
    }


def test_submit_sends_one_multipart_post() -> None:
    http = _session()
    client = SubmissionClient("https://exam.test", session=http, timeout=9)

    client.submit(b"%PDF-1.4", "Ali_Vali_20250506-0702.pdf", META)

    http.post.assert_called_once_with(
        "https://exam.test/submit",
        data=build_form_fields(META),
        files={"file": ("Ali_Vali_20250506-0702.pdf", b"%PDF-1.4", "application/pdf")},
        timeout=9,
    )


def test_submit_error_status_raises_with_body(caplog) -> None:
    client = SubmissionClient("https://exam.test", session=_session(status=413, text="too large"))

    with caplog.at_level("ERROR"):
        with pytest.raises(SubmissionFailedError) as excinfo:
            client.submit(b"%PDF", "report.pdf", META)

    assert excinfo.value.status == 413
    assert excinfo.value.body == "too large"
    assert "413" in str(excinfo.value)
    assert "Submit failed" in caplog.text


def test_submit_transport_failure_raises_network_error() -> None:
    http = _session(error=requests.ConnectionError("offline"))
    client = SubmissionClient("https://exam.test", session=http)

    with pytest.raises(SubmissionNetworkError):
        client.submit(b"%PDF", "report.pdf", META)
    assert http.post.call_count == 1
