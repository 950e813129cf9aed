# quiz_service/quiz_manager.py
import logging
from typing import List, Protocol

from quiz_service.errors import ParseError
from quiz_service.prompts import build_prompt
from quiz_service.quiz_parser import parse_and_validate
from quiz_service.schemas import GeneratedQuestion, QuizRequest

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    async def generate(self, prompt: str) -> str: ...


class QuizManager:
    """
    Runs one generation request: prompt, model call, parse.
    Holds no per-request state, so a single instance serves concurrent requests.
    """

    def __init__(self, generator: TextGenerator):
        self.generator = generator

    async def generate(self, request: QuizRequest) -> List[GeneratedQuestion]:
        prompt = build_prompt(request.grade, request.unit, request.topic, request.question_count)

        # ModelServiceError propagates to the 503 handler untouched
        raw_text = await self.generator.generate(prompt)
        logger.debug("Raw model reply: %s", raw_text)

        try:
            questions = parse_and_validate(raw_text, request)
        except ParseError as exc:
            logger.warning("Could not parse model reply: %s", exc.message)
            raise

        logger.info(
            "Generated %d questions for %s / %s / %s",
            len(questions), request.grade, request.unit, request.topic,
        )
        return questions
