from flask import current_app, request
from flask_socketio import emit

from aioreal.services.games.errors import SessionError
from aioreal.services.games.hub import WS_NAMESPACE


def _get_sid() -> str:
    # type: ignore: request.sid exists in Socket.IO context
    return request.sid  # type: ignore


def _hub():
    return current_app.extensions['aioreal_hub']


def _payload(data):
    """Event data as a dict, or None after telling the client it was malformed."""
    if data is None:
        return {}
    if not isinstance(data, dict):
        emit('error', {'message': 'Expected an object payload'})
        return None
    return data


def handle_connect():
    seq = _hub().get_or_create(_get_sid())
    emit('connected', {'message': f'Connected to {WS_NAMESPACE}'})
    emit('state', seq.snapshot())


def handle_disconnect(*args):
    _hub().discard(_get_sid())


def handle_register(data):
    data = _payload(data)
    if data is None:
        return
    seq = _hub().get_or_create(_get_sid())
    try:
        seq.register(data.get('username'), data.get('country'))
    except SessionError as exc:
        current_app.logger.info(f"[session] register rejected sid={_get_sid()}: {exc}")
        emit('error', {'message': str(exc)})
        emit('state', seq.snapshot())


def handle_asset_loaded(data):
    data = _payload(data)
    if data is None:
        return
    seq = _hub().get(_get_sid())
    if not seq:
        emit('error', {'message': 'No active session'})
        return
    seq.mark_asset_loaded(data.get('image_id'), ok=bool(data.get('ok', True)))


def handle_answer(data):
    data = _payload(data)
    if data is None:
        return
    seq = _hub().get(_get_sid())
    if not seq:
        emit('error', {'message': 'No active session'})
        return
    if 'is_ai' not in data or not isinstance(data.get('is_ai'), bool):
        emit('error', {'message': 'is_ai must be true or false'})
        return
    # None when the round was already resolved (timeout won the race)
    seq.answer(data['is_ai'])


def handle_play_again(data=None):
    seq = _hub().get(_get_sid())
    if not seq:
        emit('error', {'message': 'No active session'})
        return
    seq.play_again()


def handle_state(data=None):
    seq = _hub().get_or_create(_get_sid())
    emit('state', seq.snapshot())


def handle_ping(data):
    emit('pong', data or {})


def register_socketio_handlers() -> None:
    """Register Socket.IO event handlers on the '/ws' namespace."""
    from aioreal import socketio

    socketio.on_event('connect', handle_connect, namespace=WS_NAMESPACE)
    socketio.on_event('disconnect', handle_disconnect, namespace=WS_NAMESPACE)
    socketio.on_event('register', handle_register, namespace=WS_NAMESPACE)
    socketio.on_event('asset_loaded', handle_asset_loaded, namespace=WS_NAMESPACE)
    socketio.on_event('answer', handle_answer, namespace=WS_NAMESPACE)
    socketio.on_event('play_again', handle_play_again, namespace=WS_NAMESPACE)
    socketio.on_event('state', handle_state, namespace=WS_NAMESPACE)
    socketio.on_event('ping', handle_ping, namespace=WS_NAMESPACE)
