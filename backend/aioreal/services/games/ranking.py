from typing import List, Optional

from flask import current_app

from aioreal import db
from aioreal.models import Player, Score
from aioreal.services.cache import get_cache
from aioreal.services.flags import FLAGS


class InvalidSubmissionError(ValueError):
    pass


def _as_int(value, name: str, default: Optional[int] = None) -> int:
    if value is None:
        if default is None:
            raise InvalidSubmissionError(f'{name} is required')
        return default
    if isinstance(value, bool):
        raise InvalidSubmissionError(f'{name} must be an integer')
    try:
        number = int(value)
    except (TypeError, ValueError):
        raise InvalidSubmissionError(f'{name} must be an integer')
    if number != value and not isinstance(value, str):
        raise InvalidSubmissionError(f'{name} must be an integer')
    if number < 0:
        raise InvalidSubmissionError(f'{name} must not be negative')
    return number


def _as_float(value, name: str) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool):
        raise InvalidSubmissionError(f'{name} must be a number')
    try:
        return float(value)
    except (TypeError, ValueError):
        raise InvalidSubmissionError(f'{name} must be a number')


def validate_submission(data: dict, username_max_length: int = 50) -> dict:
    data = data or {}
    if not isinstance(data, dict):
        raise InvalidSubmissionError('Expected a JSON object')
    username = data.get('username')
    if not isinstance(username, str) or not username.strip():
        raise InvalidSubmissionError('username is required')
    country = data.get('country')
    if country is not None and not isinstance(country, str):
        raise InvalidSubmissionError('country must be a string')
    return {
        'username': username.strip()[:username_max_length],
        'country': (country or '').strip()[:100] or None,
        'total_score': _as_int(data.get('total_score'), 'total_score'),
        'correct_count': _as_int(data.get('correct_count'), 'correct_count', default=0),
        'total_images': _as_int(data.get('total_images'), 'total_images', default=0),
        'accuracy': _as_float(data.get('accuracy'), 'accuracy') or 0.0,
        'avg_time': _as_float(data.get('avg_time'), 'avg_time'),
    }


def resolve_rank(total_score: int) -> int:
    """1 + number of persisted scores strictly greater than ``total_score``."""
    higher = Score.query.filter(Score.total_score > total_score).count()
    return higher + 1


def submit_score(data: dict) -> dict:
    """Persist a finished session and return its point-in-time rank."""
    max_len = int(current_app.config.get('USERNAME_MAX_LENGTH', 50))
    payload = validate_submission(data, username_max_length=max_len)
    try:
        player = Player(username=payload['username'], country=payload['country'])
        db.session.add(player)
        db.session.flush()
        score = Score(
            player_id=player.id,
            total_score=payload['total_score'],
            correct_count=payload['correct_count'],
            total_images=payload['total_images'],
            accuracy=payload['accuracy'],
            avg_time=payload['avg_time'],
        )
        db.session.add(score)
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise
    rank = resolve_rank(payload['total_score'])
    get_cache('leaderboard').invalidate()
    current_app.logger.info(
        f"[submit] player={player.id} username={payload['username']!r} score={payload['total_score']} rank={rank}"
    )
    return {
        'player_id': player.id,
        'score_id': score.id,
        'rank': rank,
    }


def load_leaderboard(limit: int = 50) -> List[dict]:
    rows = (
        Score.query.join(Player)
        .order_by(Score.total_score.desc(), Score.created_at.asc())
        .limit(limit)
        .all()
    )
    board = []
    for position, s in enumerate(rows, start=1):
        board.append({
            'rank': position,
            'username': s.player.username,
            'country': s.player.country,
            'flag': FLAGS.resolve(s.player.country).emoji if s.player.country else '',
            'score': s.total_score,
            'accuracy': s.accuracy,
            'correct_count': s.correct_count,
            'total_images': s.total_images,
            'avg_time': s.avg_time,
            'created_at': s.created_at.isoformat() if s.created_at else None,
        })
    return board
