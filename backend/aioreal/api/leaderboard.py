from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from aioreal.services.cache import get_cache
from aioreal.services.games.ranking import load_leaderboard


leaderboard = Blueprint('leaderboard', __name__)


@leaderboard.route('', methods=['GET'])
def get_leaderboard():
    limit = int(current_app.config.get('LEADERBOARD_SIZE', 50))
    ttl = int(current_app.config.get('LEADERBOARD_CACHE_TTL_SEC', 3))
    try:
        board = get_cache('leaderboard').get(lambda: load_leaderboard(limit))
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[leaderboard] failed to fetch leaderboard: {exc}")
        return jsonify({'error': 'Failed to fetch leaderboard'}), 500
    response = jsonify({'leaderboard': board})
    response.headers['Cache-Control'] = f'public, max-age={ttl}, stale-while-revalidate={ttl + 2}'
    return response
