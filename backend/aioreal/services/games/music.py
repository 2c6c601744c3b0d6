from typing import Callable, Optional

GAME_TRACK = 'game'
VICTORY_TRACK = 'victory'

# Phases missing from the table keep whatever track is playing.
PHASE_TRACKS = {
    'register': None,
    'countdown': GAME_TRACK,
    'playing': GAME_TRACK,
    'feedback': GAME_TRACK,
    'gameover': VICTORY_TRACK,
}


class MusicCues:
    """Background music state for one player session.

    Created with the session and disposed with it. Only track changes are
    forwarded to ``emit``, so repeated playing/feedback transitions do not
    restart the music.
    """

    def __init__(self, emit: Callable[[Optional[str]], None]):
        self._emit = emit
        self.current_track: Optional[str] = None
        self._disposed = False

    def on_phase(self, phase: str) -> Optional[str]:
        if self._disposed or phase not in PHASE_TRACKS:
            return self.current_track
        track = PHASE_TRACKS[phase]
        if track != self.current_track:
            self.current_track = track
            self._emit(track)
        return self.current_track

    def dispose(self) -> None:
        if self._disposed:
            return
        if self.current_track is not None:
            self.current_track = None
            self._emit(None)
        self._disposed = True
