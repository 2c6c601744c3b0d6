from flask import Blueprint, jsonify, request, current_app
from sqlalchemy.exc import SQLAlchemyError

from aioreal.services.games.image_pool import session_images
from aioreal.services.games.ranking import InvalidSubmissionError, submit_score


game = Blueprint('game', __name__)


@game.route('/images', methods=['GET'])
def get_session_images():
    """Balanced, shuffled image set for one session."""
    try:
        images = session_images()
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[images] failed to fetch images: {exc}")
        return jsonify({'error': 'Failed to fetch images'}), 500
    return jsonify({'images': [img.to_dict() for img in images]})


@game.route('/game/submit', methods=['POST'])
def submit_game():
    data = request.get_json(silent=True) or {}
    try:
        result = submit_score(data)
    except InvalidSubmissionError as exc:
        return jsonify({'error': str(exc)}), 400
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[submit] failed to submit score: {exc}")
        return jsonify({'error': 'Failed to submit score'}), 500
    return jsonify(result), 201
