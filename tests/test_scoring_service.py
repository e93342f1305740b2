import pytest

from ignitai.services.question_bank import TRACKS
from ignitai.services.scoring_service import ScoringService

FRONTEND = TRACKS["frontend"]


def test_analyze_answer_counts_length_and_words():
    analysis = ScoringService.analyze_answer("  I build  web apps ")

    assert analysis.length == 20
    assert analysis.word_count == 4


def test_basic_score_without_answers_is_baseline():
    assert ScoringService.score_basic([], FRONTEND) == 50


def test_basic_score_for_enthusiastic_frontend_answer():
    answer = "I love react and enjoy building UI interfaces for users"

    # 50 + 5 (length 55) + 4 keywords * 3 + 2 enthusiasm words * 2
    assert ScoringService.score_basic([answer], FRONTEND) == 71


def test_basic_score_counts_each_keyword_once():
    once = ScoringService.score_basic(["react"], FRONTEND)
    twice = ScoringService.score_basic(["react react react"], FRONTEND)

    assert once == twice == 53


def test_basic_score_is_monotonic_in_length():
    short = "a" * 40
    medium = "a" * 60
    long = "a" * 120

    scores = [ScoringService.score_basic([text], FRONTEND) for text in (short, medium, long)]

    assert scores == [50, 55, 60]


def test_basic_score_is_capped_at_100():
    answer = " ".join(FRONTEND.keywords) + " excited passionate love enjoy interested motivated " + "x" * 100

    assert ScoringService.score_basic([answer] * 5, FRONTEND) == 100


def test_empty_positional_placeholders_score_nothing():
    assert ScoringService.score_basic(["", "", ""], FRONTEND) == 50


@pytest.mark.parametrize(
    "answers, strengths, improvements",
    [
        (["react " * 20 + " ui interface user design component html css javascript love enjoy"], 3, 2),
        (["react ui interface user html css " + "x" * 60], 2, 3),
        ([], 1, 3),
    ],
)
def test_basic_report_tiers(answers, strengths, improvements):
    report = ScoringService.basic_report(answers, FRONTEND)

    assert len(report.strengths) == strengths
    assert len(report.improvements) == improvements
    assert FRONTEND.display_name in report.feedback
    assert report.recommended_course == FRONTEND.recommended_course


def test_round_baselines_without_answers():
    report = ScoringService.advanced_report({})

    assert [item.score for item in report.round_scores] == [50, 50, 60]
    assert report.overall_score == 53


def test_round_score_is_capped_at_100():
    answer = "team communication collaborate learn feedback deadline challenge " + "x" * 200

    assert ScoringService.score_round(3, [answer, answer]) == 100


def test_overall_score_is_rounded_mean():
    assert ScoringService.overall_score([70, 80, 90]) == 80
    assert ScoringService.overall_score([50, 50, 61]) == 54


def test_round_keywords_only_count_in_their_round():
    answer = "I would optimize the algorithm and cache results"

    assert ScoringService.score_round(2, [answer]) == 50 + 3 * 3
    assert ScoringService.score_round(1, [answer]) == 50


def test_advanced_report_feedback_follows_each_round_tier():
    strong_round_one = "function variable object class array async promise closure " + "x" * 160
    report = ScoringService.advanced_report({1: [strong_round_one]})

    round_one, round_two, round_three = report.round_scores
    assert round_one.score == 84
    assert round_one.feedback.startswith("Strong command")
    assert round_two.feedback.startswith("Work on")
    assert round_three.feedback.startswith("Good soft skills")
    # (84 + 50 + 60) / 3 = 64.67
    assert report.overall_score == 65
    assert report.recommendation.startswith("Promising")
