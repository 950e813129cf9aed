# quiz_service/api/quiz_routes.py
import logging

from fastapi import APIRouter, Depends, Request

from quiz_service.errors import ClientInputError
from quiz_service.quiz_manager import QuizManager
from quiz_service.schemas import QuizRequest, QuizResponse

logger = logging.getLogger(__name__)

router = APIRouter()


def get_quiz_manager(request: Request) -> QuizManager:
    return request.app.state.quiz_manager


@router.post("/generate-questions", response_model=QuizResponse)
async def generate_questions(payload: QuizRequest, manager: QuizManager = Depends(get_quiz_manager)):
    missing = payload.missing_fields()
    if missing:
        raise ClientInputError("missing fields", details=missing)

    logger.info(
        "AI question request: %s - %s - %s (%d questions)",
        payload.grade, payload.unit, payload.topic, payload.question_count,
    )
    questions = await manager.generate(payload)
    return QuizResponse(
        questions=questions,
        count=len(questions),
        message=f"{len(questions)} AI questions generated",
    )
