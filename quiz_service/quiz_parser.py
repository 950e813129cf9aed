# quiz_service/quiz_parser.py
"""Turn a raw model reply into validated quiz questions.

The model is asked for bare JSON but regularly wraps it in prose or markdown
fences, so the reply is handled in stages: cut out a JSON-looking span,
decode it, check the top-level shape, then keep only the questions that pass
``CandidateQuestion``. Bad questions are dropped rather than failing the
whole batch; three usable questions out of five requested is still a quiz.
"""

import json
import logging
from typing import Any, List, NamedTuple, Optional

from pydantic import ValidationError

from quiz_service.errors import InvalidShape, MalformedJson, NoJsonFound, NoValidQuestions
from quiz_service.schemas import CandidateQuestion, GeneratedQuestion, QuizRequest

logger = logging.getLogger(__name__)


class FilterResult(NamedTuple):
    accepted: List[CandidateQuestion]
    dropped: int


def extract_json_span(text: str) -> Optional[str]:
    """Return the widest ``{...}`` span in ``text``, or None if there is no ``{``.

    Best effort only: braces are not matched, so prose containing stray braces
    around the object will produce a span the decoder rejects. When the reply
    was cut off before its closing brace the span runs to the end of the text.
    """
    start = text.find("{")
    if start == -1:
        return None
    end = text.rfind("}")
    if end < start:
        return text[start:]
    return text[start:end + 1]


def decode_payload(span: str) -> Any:
    try:
        return json.loads(span)
    # oversized integers and deep nesting fail outside JSONDecodeError
    except (ValueError, RecursionError) as exc:
        raise MalformedJson(f"Invalid JSON in model response: {exc}") from exc


def validate_candidate(item: Any) -> Optional[CandidateQuestion]:
    try:
        return CandidateQuestion.model_validate(item)
    except ValidationError as exc:
        logger.debug("Dropping invalid question: %s", exc.errors(include_url=False))
        return None


def filter_candidates(items: List[Any]) -> FilterResult:
    """Keep the items that are complete questions, in their original order."""
    accepted = []
    for item in items:
        candidate = validate_candidate(item)
        if candidate is not None:
            accepted.append(candidate)
    return FilterResult(accepted=accepted, dropped=len(items) - len(accepted))


def annotate(candidate: CandidateQuestion, request: QuizRequest) -> GeneratedQuestion:
    return GeneratedQuestion(
        question=candidate.question,
        options=list(candidate.options),
        answer=candidate.answer,
        explanation=candidate.explanation,
        is_ai=True,
        grade=request.grade,
        unit=request.unit,
        topic=request.topic,
    )


def parse_and_validate(raw_text: str, request: QuizRequest) -> List[GeneratedQuestion]:
    """Extract, decode and validate a model reply.

    Raises one of the ``ParseError`` subclasses when nothing usable is found.
    """
    span = extract_json_span(raw_text)
    if span is None:
        raise NoJsonFound("No JSON object found in model response")

    payload = decode_payload(span)
    if not isinstance(payload, dict) or not isinstance(payload.get("questions"), list):
        raise InvalidShape("Model response has no 'questions' list")

    result = filter_candidates(payload["questions"])
    if result.dropped:
        logger.info("Dropped %d of %d generated questions", result.dropped, len(payload["questions"]))
    if not result.accepted:
        raise NoValidQuestions("No valid questions in model response")

    return [annotate(candidate, request) for candidate in result.accepted]
