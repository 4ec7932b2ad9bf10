from __future__ import annotations

import json

import httpx
import pytest

from quiz_player.core.errors import NoActiveAttempt, QuizServiceError
from quiz_player.core.services.http_quiz_service import HttpQuizService

BASE_URL = "http://quiz.test/api"

QUESTION_JSON = {
    "id": "q1",
    "quizId": "quiz1",
    "pregunta": "What is 2 + 2?",
    "opciones": ["3", "4", "5"],
    "respuestaCorrecta": 1,
}


def _service(handler) -> tuple[HttpQuizService, list[httpx.Request]]:
    requests: list[httpx.Request] = []

    def recording_handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return handler(request)

    client = httpx.Client(base_url=BASE_URL, transport=httpx.MockTransport(recording_handler))
    return HttpQuizService(client=client), requests


def test_begin_attempt_posts_participant_and_maps_question():
    service, requests = _service(lambda request: httpx.Response(200, json=QUESTION_JSON))

    question = service.begin_attempt("quiz1", "alice")

    assert requests[0].method == "POST"
    assert requests[0].url.path == "/api/quizzes/quiz1/start"
    assert json.loads(requests[0].content) == {"userName": "alice"}
    assert question.id == "q1"
    assert question.quiz_id == "quiz1"
    assert question.prompt == "What is 2 + 2?"
    assert question.options == ("3", "4", "5")
    assert question.correct_option_index == 1


def test_numeric_ids_and_missing_quiz_id_are_normalised():
    payload = {key: value for key, value in QUESTION_JSON.items() if key != "quizId"}
    payload["id"] = 7
    service, _ = _service(lambda request: httpx.Response(200, json=payload))

    question = service.begin_attempt("quiz9", "alice")

    assert question.id == "7"
    assert question.quiz_id == "quiz9"


def test_submit_answer_maps_verdict_and_next_question():
    body = {"esCorrecta": True, "siguientePregunta": {**QUESTION_JSON, "id": "q2"}}
    service, requests = _service(lambda request: httpx.Response(200, json=body))

    result = service.submit_answer("quiz1", "alice", -1)

    assert requests[0].url.path == "/api/quizzes/quiz1/answer"
    assert json.loads(requests[0].content) == {"userName": "alice", "answerIndex": -1}
    assert result.is_correct is True
    assert result.next_question is not None
    assert result.next_question.id == "q2"


def test_submit_answer_without_next_question():
    service, _ = _service(lambda request: httpx.Response(200, json={"esCorrecta": False, "siguientePregunta": None}))

    result = service.submit_answer("quiz1", "alice", 0)

    assert result.is_correct is False
    assert result.next_question is None


@pytest.mark.parametrize(
    "body",
    [
        {"code": "NO_ACTIVE_ATTEMPT", "message": "attempt closed"},
        {"message": "No hay un quiz activo para este usuario"},
    ],
)
def test_no_active_attempt_is_typed(body):
    service, _ = _service(lambda request: httpx.Response(400, json=body))

    with pytest.raises(NoActiveAttempt) as excinfo:
        service.submit_answer("quiz1", "alice", 0)
    assert excinfo.value.status_code == 400


def test_other_server_errors_are_generic():
    service, _ = _service(lambda request: httpx.Response(500, json={"message": "boom"}))

    with pytest.raises(QuizServiceError) as excinfo:
        service.submit_answer("quiz1", "alice", 0)

    assert not isinstance(excinfo.value, NoActiveAttempt)
    assert excinfo.value.status_code == 500
    assert "boom" in str(excinfo.value)


def test_non_json_error_body_is_generic():
    service, _ = _service(lambda request: httpx.Response(502, text="<html>bad gateway</html>"))

    with pytest.raises(QuizServiceError) as excinfo:
        service.begin_attempt("quiz1", "alice")
    assert excinfo.value.status_code == 502


def test_transport_failure_is_wrapped():
    def refuse(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("Connection refused", request=request)

    service, _ = _service(refuse)

    with pytest.raises(QuizServiceError) as excinfo:
        service.begin_attempt("quiz1", "alice")
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


def test_malformed_payload_is_wrapped():
    service, _ = _service(lambda request: httpx.Response(200, json={"pregunta": "missing fields"}))

    with pytest.raises(QuizServiceError):
        service.begin_attempt("quiz1", "alice")
