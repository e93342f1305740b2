from dataclasses import dataclass
from typing import Dict, Iterable, List

from ignitai.services.question_bank import (
    ENTHUSIASM_WORDS,
    ROUND_BASELINES,
    ROUND_KEYWORDS,
    ROUND_NAMES,
    TrackProfile,
)

BASIC_BASELINE = 50
BASIC_MIN_SCORE = 20
MAX_SCORE = 100

STRONG_TIER = 80
MIDDLE_TIER = 60


@dataclass
class AnswerAnalysis:
    length: int
    word_count: int


@dataclass
class BasicReport:
    score: int
    strengths: List[str]
    improvements: List[str]
    feedback: str
    recommended_course: str


@dataclass
class RoundScore:
    round: int
    name: str
    score: int
    feedback: str


@dataclass
class AdvancedReport:
    overall_score: int
    round_scores: List[RoundScore]
    strengths: List[str]
    improvements: List[str]
    recommendation: str
    next_steps: List[str]


def _tier(score: int) -> str:
    if score >= STRONG_TIER:
        return "strong"
    if score >= MIDDLE_TIER:
        return "middle"
    return "weak"


BASIC_TIERS = {
    "strong": {
        "strengths": [
            "Clear and detailed answers",
            "Good grasp of the core concepts for the track",
            "Strong motivation to learn",
        ],
        "improvements": [
            "Back your answers with concrete project examples",
            "Explore advanced topics to stand out further",
        ],
        "feedback": (
            "Excellent interview! You show a strong foundation and real enthusiasm for {track}. "
            "You are well prepared to get the most out of the program."
        ),
    },
    "middle": {
        "strengths": [
            "Reasonable understanding of the basics",
            "Shows interest in the field",
        ],
        "improvements": [
            "Give longer answers that explain your reasoning",
            "Use more of the technical vocabulary of {track}",
            "Share specific examples from projects or coursework",
        ],
        "feedback": (
            "Good effort! You have a solid starting point for {track}. "
            "With some focused practice you will progress quickly in the program."
        ),
    },
    "weak": {
        "strengths": [
            "Willingness to take the first step",
        ],
        "improvements": [
            "Spend time on the fundamentals of {track}",
            "Answer in complete sentences with more detail",
            "Build a small practice project before the program starts",
        ],
        "feedback": (
            "Thanks for completing the interview. {track} rewards steady practice, "
            "and our beginner-friendly path will help you build the fundamentals."
        ),
    },
}

ROUND_FEEDBACK = {
    1: {
        "strong": "Strong command of the technical fundamentals.",
        "middle": "Good understanding of the basics with room to go deeper.",
        "weak": "Review the core concepts and practise explaining them.",
    },
    2: {
        "strong": "Excellent problem-solving with attention to performance and scale.",
        "middle": "Reasonable approaches; consider trade-offs and optimisation more explicitly.",
        "weak": "Work on breaking problems down and reasoning about efficiency.",
    },
    3: {
        "strong": "Great communication and teamwork examples.",
        "middle": "Good soft skills; use more specific situations in your stories.",
        "weak": "Prepare concrete stories about teamwork, challenges and learning.",
    },
}

ADVANCED_TIERS = {
    "strong": {
        "strengths": [
            "Solid technical knowledge",
            "Structured approach to problem solving",
            "Clear communication",
        ],
        "improvements": [
            "Go deeper into system design topics",
            "Quantify the impact of your past work",
        ],
        "recommendation": "Strong candidate. Ready for advanced projects and technical interviews.",
        "next_steps": [
            "Take on an advanced capstone project",
            "Practise system design interviews",
            "Start applying for internships or junior roles",
        ],
    },
    "middle": {
        "strengths": [
            "Good grasp of the fundamentals",
            "Willingness to reason through problems",
        ],
        "improvements": [
            "Practise more algorithmic problems",
            "Explain trade-offs when proposing solutions",
            "Use the STAR format for behavioral answers",
        ],
        "recommendation": "Promising candidate. A few weeks of focused practice will make a big difference.",
        "next_steps": [
            "Complete the intermediate track modules",
            "Solve two coding problems a day",
            "Schedule another mock interview in two weeks",
        ],
    },
    "weak": {
        "strengths": [
            "Completed all three interview rounds",
        ],
        "improvements": [
            "Strengthen core language fundamentals",
            "Practise talking through your solutions out loud",
            "Prepare examples of teamwork and learning",
        ],
        "recommendation": "Keep building your foundation before attempting technical interviews.",
        "next_steps": [
            "Start with the fundamentals course",
            "Build a small personal project end to end",
            "Retake the mock interview after completing the basics",
        ],
    },
}


class ScoringService:
    @staticmethod
    def analyze_answer(answer: str) -> AnswerAnalysis:
        return AnswerAnalysis(length=len(answer), word_count=len(answer.split()))

    @staticmethod
    def _length_points(answer: str, long_threshold: int) -> int:
        points = 0
        if len(answer) > 50:
            points += 5
        if len(answer) > long_threshold:
            points += 5
        return points

    @staticmethod
    def _matches(answer: str, words: Iterable[str]) -> int:
        text = answer.lower()
        return sum(1 for word in set(words) if word in text)

    @staticmethod
    def score_basic(answers: Iterable[str], track: TrackProfile) -> int:
        score = BASIC_BASELINE
        for answer in answers:
            score += ScoringService._length_points(answer, long_threshold=100)
            score += 3 * ScoringService._matches(answer, track.keywords)
            score += 2 * ScoringService._matches(answer, ENTHUSIASM_WORDS)
        return max(BASIC_MIN_SCORE, min(MAX_SCORE, score))

    @staticmethod
    def basic_report(answers: Iterable[str], track: TrackProfile) -> BasicReport:
        score = ScoringService.score_basic(answers, track)
        tier = BASIC_TIERS[_tier(score)]
        return BasicReport(
            score=score,
            strengths=list(tier["strengths"]),
            improvements=[item.format(track=track.display_name) for item in tier["improvements"]],
            feedback=tier["feedback"].format(track=track.display_name),
            recommended_course=track.recommended_course,
        )

    @staticmethod
    def score_round(round_no: int, answers: Iterable[str]) -> int:
        score = ROUND_BASELINES[round_no]
        for answer in answers:
            score += ScoringService._length_points(answer, long_threshold=150)
            score += 3 * ScoringService._matches(answer, ROUND_KEYWORDS[round_no])
        return min(MAX_SCORE, score)

    @staticmethod
    def overall_score(round_scores: Iterable[int]) -> int:
        scores = list(round_scores)
        return round(sum(scores) / len(scores))

    @staticmethod
    def advanced_report(answers_by_round: Dict[int, List[str]]) -> AdvancedReport:
        round_scores = []
        for round_no in sorted(ROUND_NAMES):
            score = ScoringService.score_round(round_no, answers_by_round.get(round_no, []))
            round_scores.append(
                RoundScore(
                    round=round_no,
                    name=ROUND_NAMES[round_no],
                    score=score,
                    feedback=ROUND_FEEDBACK[round_no][_tier(score)],
                )
            )

        overall = ScoringService.overall_score(item.score for item in round_scores)
        tier = ADVANCED_TIERS[_tier(overall)]
        return AdvancedReport(
            overall_score=overall,
            round_scores=round_scores,
            strengths=list(tier["strengths"]),
            improvements=list(tier["improvements"]),
            recommendation=tier["recommendation"],
            next_steps=list(tier["next_steps"]),
        )
