import threading
from typing import Callable, Dict, Optional, Set, Tuple

from aioreal import socketio
from aioreal.services.games.image_pool import session_images
from aioreal.services.games.music import MusicCues
from aioreal.services.games.ranking import submit_score
from aioreal.services.games.scoring import ScoringRules
from aioreal.services.games.sequencer import RoundSequencer
from aioreal.services.games import scheduler

WS_NAMESPACE = '/ws'


def _socket_emit(event: str, payload: dict, sid: str) -> None:
    socketio.emit(event, payload, to=sid, namespace=WS_NAMESPACE)


class GameHub:
    """Owns the live sessions of connected players.

    Created once per Flask app (``app.extensions['aioreal_hub']``) and shut
    down with it. Each session gets its own sequencer and music cues; the
    hub wires sequencer events to the socket and to the stage scheduler.
    """

    def __init__(self, app, emit: Callable[[str, dict, str], None] = _socket_emit):
        self._app = app
        self._emit = emit
        self._lock = threading.Lock()
        self._sessions: Dict[str, RoundSequencer] = {}
        self._music: Dict[str, MusicCues] = {}
        self._scheduled: Set[Tuple] = set()

    def emit(self, event: str, payload: dict, sid: str) -> None:
        self._emit(event, payload, sid)

    # ---- session lifecycle ----

    def get(self, sid: str) -> Optional[RoundSequencer]:
        with self._lock:
            return self._sessions.get(sid)

    def get_or_create(self, sid: str) -> RoundSequencer:
        with self._lock:
            seq = self._sessions.get(sid)
            if seq is not None:
                return seq
            cfg = self._app.config
            seq = RoundSequencer(
                image_source=self._image_source,
                rank_resolver=self._rank_resolver,
                rules=ScoringRules.from_config(cfg),
                round_duration=float(cfg.get('ROUND_DURATION_SEC', 5.0)),
                countdown_from=int(cfg.get('COUNTDOWN_FROM', 3)),
                username_max_length=int(cfg.get('USERNAME_MAX_LENGTH', 50)),
                listener=self._listener_for(sid),
                logger=self._app.logger,
            )
            self._sessions[sid] = seq
            self._music[sid] = MusicCues(lambda track, _sid=sid: self._emit('music', {'track': track}, _sid))
        self._app.logger.info(f"[session] created sid={sid}")
        return seq

    def discard(self, sid: str) -> None:
        with self._lock:
            seq = self._sessions.pop(sid, None)
            music = self._music.pop(sid, None)
        if seq is not None:
            seq.close()
            self._app.logger.info(f"[session] closed sid={sid} phase={seq.phase.value}")
        if music is not None:
            music.dispose()

    def shutdown(self) -> None:
        with self._lock:
            sids = list(self._sessions)
        for sid in sids:
            self.discard(sid)

    def __len__(self) -> int:
        with self._lock:
            return len(self._sessions)

    # ---- scheduler bookkeeping ----

    def claim(self, key: Tuple) -> bool:
        with self._lock:
            if key in self._scheduled:
                return False
            self._scheduled.add(key)
            return True

    def release(self, key: Tuple) -> None:
        with self._lock:
            self._scheduled.discard(key)

    # ---- collaborators handed to each sequencer ----

    def _image_source(self):
        with self._app.app_context():
            return session_images()

    def _rank_resolver(self, submission: dict) -> Optional[int]:
        with self._app.app_context():
            return submit_score(submission)['rank']

    def _listener_for(self, sid: str):
        def _on_event(event: str, payload: dict) -> None:
            if event == 'phase':
                self._emit('state', payload, sid)
                music = self._music.get(sid)
                if music is not None:
                    music.on_phase(payload['phase'])
                if payload['phase'] == 'countdown':
                    scheduler.schedule_countdown(self._app, self, sid)
                elif payload['phase'] == 'feedback':
                    scheduler.schedule_advance(self._app, self, sid)
                return
            self._emit(event, payload, sid)
            if event == 'round_started':
                scheduler.start_round_ticker(self._app, self, sid, payload['generation'])
        return _on_event
