import json
import logging
import re
import time
from typing import List, Optional, Sequence

from openai import OpenAI

from ignitai.core.config import settings
from ignitai.core.errors import AIServiceError
from ignitai.core.session_store import ConversationTurn
from ignitai.schemas.quiz import CodeMatchRequest, CodeMatchResponse, QuizGenerateRequest, QuizQuestion
from ignitai.services.question_bank import ROUND_NAMES

logger = logging.getLogger(__name__)

MIN_REPLY_LENGTH = 10
_ECHO_PREFIX = re.compile(r"^\s*(interviewer|ai|assistant)\s*:\s*", re.IGNORECASE)


class OpenAIService:
    def __init__(self):
        if not settings.openai_api_key:
            raise RuntimeError("OPENAI_API_KEY is not configured. Set it in deployment environment variables.")
        self.client = OpenAI(
            api_key=settings.openai_api_key,
            timeout=settings.openai_timeout_seconds,
            max_retries=0,
        )

    @staticmethod
    def _strip_json_fences(text: str) -> str:
        stripped = text.strip()
        if stripped.startswith("```"):
            lines = stripped.splitlines()
            if len(lines) >= 3 and lines[-1].strip() == "```":
                return "\n".join(lines[1:-1]).strip()
        return stripped

    @staticmethod
    def clean_reply(text: str, prompt: str = "") -> str:
        cleaned = text.strip()
        if prompt and cleaned.startswith(prompt):
            cleaned = cleaned[len(prompt):]
        cleaned = _ECHO_PREFIX.sub("", cleaned).strip()
        if len(cleaned) >= 2 and cleaned[0] == cleaned[-1] and cleaned[0] in "\"'":
            cleaned = cleaned[1:-1].strip()
        return cleaned

    def _interview_models(self) -> List[str]:
        models = [settings.openai_model]
        if settings.openai_fallback_model and settings.openai_fallback_model != settings.openai_model:
            models.append(settings.openai_fallback_model)
        return models

    def build_interview_reply(
        self,
        recent_turns: Sequence[ConversationTurn],
        user_answer: str,
        tech: str,
        round_no: int,
    ) -> Optional[str]:
        context = "\n".join(f"{turn.speaker}: {turn.message}" for turn in recent_turns) or "NONE"
        user_prompt = (
            f"You are a friendly technical interviewer running round {round_no} "
            f"({ROUND_NAMES.get(round_no, 'Interview')}) of a {tech} interview. "
            "Respond to the candidate's latest answer in one or two sentences: acknowledge it, "
            "and add a brief follow-up thought or encouragement. Do not ask the next scripted question.\n\n"
            f"Recent conversation:\n{context}\n\n"
            f"Candidate answer: {user_answer}"
        )

        # both models share one budget so a submit never waits longer than openai_timeout_seconds
        deadline = time.monotonic() + settings.openai_timeout_seconds
        for model in self._interview_models():
            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.warning("[openai] interview reply budget exhausted before %s", model)
                break
            try:
                response = self.client.chat.completions.create(
                    model=model,
                    timeout=remaining,
                    temperature=0.7,
                    max_tokens=120,
                    messages=[
                        {
                            "role": "system",
                            "content": "Human, concise, professional interviewer style. No bullets.",
                        },
                        {"role": "user", "content": user_prompt},
                    ],
                )
            except Exception as exc:
                logger.warning("[openai] interview reply via %s failed: %s", model, exc)
                continue

            reply = self.clean_reply(response.choices[0].message.content or "", prompt=user_prompt)
            if len(reply) > MIN_REPLY_LENGTH:
                return reply
            logger.warning("[openai] interview reply via %s rejected as too short", model)

        return None

    def _json_completion(self, prompt: str, temperature: float) -> dict:
        try:
            response = self.client.chat.completions.create(
                model=settings.openai_model,
                temperature=temperature,
                messages=[
                    {"role": "system", "content": "You return valid JSON only."},
                    {"role": "user", "content": prompt},
                ],
            )
        except Exception as exc:
            raise AIServiceError(f"OpenAI request failed: {exc}") from exc

        raw = response.choices[0].message.content or "{}"
        try:
            data = json.loads(self._strip_json_fences(raw))
        except json.JSONDecodeError as exc:
            raise AIServiceError("OpenAI returned invalid JSON.") from exc
        if not isinstance(data, dict):
            raise AIServiceError("OpenAI returned an unexpected payload.")
        return data

    def generate_quiz(self, payload: QuizGenerateRequest) -> List[QuizQuestion]:
        prompt = (
            "You are an instructor writing a multiple-choice quiz.\n"
            f"Topics: {', '.join(payload.topics)}\n"
            f"Difficulty: {payload.difficulty}\n"
            f"Amount: {payload.amount}\n\n"
            "Rules:\n"
            "1) Return exactly the requested number of questions.\n"
            "2) Each question has exactly 4 options.\n"
            "3) The answer must be the exact text of one option.\n"
            "4) Add a one-sentence explanation.\n"
            'Return JSON only in this format: {"questions": [{"question": "...", "options": ["..."], '
            '"answer": "...", "explanation": "..."}]}.'
        )
        data = self._json_completion(prompt, temperature=0.5)
        items = data.get("questions", [])
        if not isinstance(items, list) or len(items) != payload.amount:
            raise AIServiceError("OpenAI returned invalid quiz payload.")

        questions = []
        for item in items:
            try:
                question = QuizQuestion.model_validate(item)
            except ValueError as exc:
                raise AIServiceError("OpenAI returned a malformed quiz question.") from exc
            if question.answer not in question.options:
                raise AIServiceError("Quiz answer does not match any option.")
            questions.append(question)
        return questions

    def match_code(self, payload: CodeMatchRequest) -> CodeMatchResponse:
        prompt = (
            "You are grading a student's HTML/CSS solution to a challenge.\n"
            f"Challenge: {payload.challenge}\n\n"
            f"HTML:\n{payload.html}\n\n"
            f"CSS:\n{payload.css or 'NONE'}\n\n"
            "Score from 0 to 100 how closely the solution satisfies the challenge. "
            'Return JSON only in this format: {"score": 0, "feedback": "...", "suggestions": ["..."]}.'
        )
        data = self._json_completion(prompt, temperature=0.2)
        try:
            score = int(data["score"])
        except (KeyError, TypeError, ValueError) as exc:
            raise AIServiceError("OpenAI returned an invalid score.") from exc

        score = max(0, min(100, score))
        suggestions = data.get("suggestions") or []
        if not isinstance(suggestions, list):
            suggestions = [str(suggestions)]
        return CodeMatchResponse(
            score=score,
            matched=score >= CodeMatchResponse.MATCH_THRESHOLD,
            feedback=str(data.get("feedback", "")).strip(),
            suggestions=[str(item).strip() for item in suggestions if str(item).strip()],
        )
