import math
from dataclasses import dataclass
from typing import Iterable, Optional


@dataclass(frozen=True)
class ScoringRules:
    """Constants of the points formula.

    points = round((base_points + speed_bonus) * (1 + streak * streak_step))
    where speed_bonus = round(time_left / duration * speed_bonus_max).
    """
    base_points: int = 100
    speed_bonus_max: int = 100
    streak_step: float = 0.25

    @classmethod
    def from_config(cls, config) -> 'ScoringRules':
        return cls(
            base_points=int(config.get('SCORE_BASE_POINTS', 100)),
            speed_bonus_max=int(config.get('SCORE_SPEED_BONUS', 100)),
            streak_step=float(config.get('SCORE_STREAK_STEP', 0.25)),
        )


DEFAULT_RULES = ScoringRules()


def round_half_up(value: float) -> int:
    # Python's round() is banker's rounding; 262.5 must become 263.
    return int(math.floor(value + 0.5))


def clamp_time_left(time_left: float, duration: float) -> float:
    return max(0.0, min(float(time_left), float(duration)))


def is_correct(user_answer: Optional[bool], actual_is_ai: bool) -> bool:
    """A missing answer (timeout) is never correct."""
    if user_answer is None:
        return False
    return bool(user_answer) == bool(actual_is_ai)


def compute_points(correct: bool, time_left: float, duration: float, streak_before: int,
                   rules: ScoringRules = DEFAULT_RULES) -> int:
    if not correct:
        return 0
    if duration <= 0:
        speed_ratio = 0.0
    else:
        speed_ratio = clamp_time_left(time_left, duration) / duration
    speed_bonus = round_half_up(speed_ratio * rules.speed_bonus_max)
    multiplier = 1 + max(0, int(streak_before)) * rules.streak_step
    return max(0, round_half_up((rules.base_points + speed_bonus) * multiplier))


def next_streak(correct: bool, streak_before: int) -> int:
    return streak_before + 1 if correct else 0


def grade_for(accuracy: float) -> str:
    whole = round_half_up(accuracy)
    if whole >= 90:
        return 'S'
    if whole >= 75:
        return 'A'
    if whole >= 60:
        return 'B'
    if whole >= 40:
        return 'C'
    return 'D'


def summarize(results: Iterable, duration: float) -> dict:
    """Aggregate per-round results into the stats submitted at game over.

    ``results`` holds objects with ``correct``, ``user_answer`` and
    ``time_left`` attributes. ``avg_time`` only counts rounds the player
    actually answered; it is None when every round timed out.
    """
    results = list(results)
    total = len(results)
    correct_count = sum(1 for r in results if r.correct)
    accuracy = (correct_count / total * 100) if total else 0.0
    answered = [duration - clamp_time_left(r.time_left, duration) for r in results if r.user_answer is not None]
    avg_time = round(sum(answered) / len(answered), 2) if answered else None
    return {
        'correct_count': correct_count,
        'total_images': total,
        'accuracy': round(accuracy, 2),
        'avg_time': avg_time,
        'grade': grade_for(accuracy),
    }
