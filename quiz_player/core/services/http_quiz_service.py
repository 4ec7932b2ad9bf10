"""HTTP implementation of the quiz service backed by httpx.

Wire payloads are validated with pydantic models and converted into the
domain dataclasses before they leave this module, so the controller never
sees backend field names. The backend speaks Spanish field names
(``pregunta``, ``opciones``, ``esCorrecta``...), which the models map through
aliases.
"""

from __future__ import annotations

import logging
from urllib.parse import quote

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from quiz_player.constants.network_constants import (
    DEFAULT_API_URL,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    LEGACY_NO_ACTIVE_ATTEMPT_MESSAGE,
    NO_ACTIVE_ATTEMPT_CODE,
)
from quiz_player.core.errors import NoActiveAttempt, QuizServiceError
from quiz_player.core.models import AnswerResult, Question

logger = logging.getLogger(__name__)


class QuestionPayload(BaseModel):
    """Question as sent by the backend."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    quiz_id: str | None = Field(default=None, alias="quizId")
    prompt: str = Field(alias="pregunta")
    options: list[str] = Field(alias="opciones")
    correct_option_index: int = Field(alias="respuestaCorrecta")

    @field_validator("id", "quiz_id", mode="before")
    @classmethod
    def _stringify_identifier(cls, value: object) -> object:
        if isinstance(value, int):
            return str(value)
        return value

    def to_domain(self, fallback_quiz_id: str) -> Question:
        return Question(
            id=self.id,
            quiz_id=self.quiz_id or fallback_quiz_id,
            prompt=self.prompt,
            options=tuple(self.options),
            correct_option_index=self.correct_option_index,
        )


class AnswerResponsePayload(BaseModel):
    """Verdict for a submitted answer plus the following question, if any."""

    model_config = ConfigDict(populate_by_name=True)

    is_correct: bool = Field(alias="esCorrecta")
    next_question: QuestionPayload | None = Field(default=None, alias="siguientePregunta")


class ErrorPayload(BaseModel):
    """Error body returned with non-2xx responses."""

    code: str | None = None
    message: str | None = None
    detail: str | None = None

    @property
    def text(self) -> str | None:
        return self.message or self.detail

    def signals_no_active_attempt(self) -> bool:
        if self.code == NO_ACTIVE_ATTEMPT_CODE:
            return True
        text = self.text
        return bool(text) and LEGACY_NO_ACTIVE_ATTEMPT_MESSAGE in text


class StartPayload(BaseModel):
    user_name: str = Field(serialization_alias="userName")


class AnswerPayload(BaseModel):
    user_name: str = Field(serialization_alias="userName")
    answer_index: int = Field(serialization_alias="answerIndex")


class HttpQuizService:
    """Quiz service talking JSON over HTTP to the quiz backend."""

    def __init__(
        self,
        base_url: str = DEFAULT_API_URL,
        *,
        timeout: float | None = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        client: httpx.Client | None = None,
    ) -> None:
        self._owns_client = client is None
        self._client = client or httpx.Client(base_url=base_url, timeout=timeout)

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> HttpQuizService:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def begin_attempt(self, quiz_id: str, participant: str) -> Question:
        body = StartPayload(user_name=participant)
        data = self._post(f"/quizzes/{quote(quiz_id, safe='')}/start", body)
        try:
            payload = QuestionPayload.model_validate(data)
        except ValidationError as exc:
            raise QuizServiceError(f"Malformed question payload: {exc}") from exc
        return payload.to_domain(quiz_id)

    def submit_answer(self, quiz_id: str, participant: str, answer_index: int) -> AnswerResult:
        body = AnswerPayload(user_name=participant, answer_index=answer_index)
        data = self._post(f"/quizzes/{quote(quiz_id, safe='')}/answer", body)
        try:
            payload = AnswerResponsePayload.model_validate(data)
        except ValidationError as exc:
            raise QuizServiceError(f"Malformed answer payload: {exc}") from exc
        next_question = None
        if payload.next_question is not None:
            next_question = payload.next_question.to_domain(quiz_id)
        return AnswerResult(is_correct=payload.is_correct, next_question=next_question)

    def _post(self, path: str, body: BaseModel) -> object:
        logger.debug("POST %s", path)
        try:
            response = self._client.post(path, json=body.model_dump(by_alias=True))
        except httpx.HTTPError as exc:
            raise QuizServiceError(f"Request to {path} failed: {exc}") from exc

        if response.is_error:
            raise _error_from_response(response)

        try:
            return response.json()
        except ValueError as exc:
            raise QuizServiceError(
                f"Response from {path} is not valid JSON.", status_code=response.status_code
            ) from exc


def _error_from_response(response: httpx.Response) -> QuizServiceError:
    status = response.status_code
    try:
        error = ErrorPayload.model_validate(response.json())
    except (ValueError, ValidationError):
        error = ErrorPayload()

    if error.signals_no_active_attempt():
        return NoActiveAttempt(error.text or "No active attempt.", status_code=status)
    reason = error.text or response.reason_phrase
    return QuizServiceError(f"Server responded with {status}: {reason}", status_code=status)
