"""Round sequencer: the state machine of one play-through.

    register -> loading -> countdown -> (playing -> feedback)* -> gameover

The sequencer is transport-agnostic. It reports everything that happens
through a ``listener(event, payload)`` callable; the socket layer forwards
those events to the player and schedules the timed transitions (countdown
steps, round ticks, feedback delay). All public operations take the session
lock, so a player answer and a timer expiry for the same round serialize and
only the first one resolves it.
"""

import logging
import threading
import time
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Iterable, List, Optional

from .errors import ImagePoolError, InvalidUsernameError, PhaseError
from .scoring import DEFAULT_RULES, ScoringRules, compute_points, is_correct, next_streak, round_half_up, summarize
from .timer import RoundTimer


class Phase(str, Enum):
    REGISTERING = 'register'
    PRELOADING = 'loading'
    COUNTDOWN = 'countdown'
    PLAYING = 'playing'
    FEEDBACK = 'feedback'
    GAME_OVER = 'gameover'


@dataclass(frozen=True)
class GameImage:
    id: Any
    url: str
    is_ai: bool

    @classmethod
    def from_value(cls, value) -> 'GameImage':
        if isinstance(value, cls):
            return value
        if isinstance(value, dict):
            return cls(id=value['id'], url=value['url'], is_ai=bool(value['is_ai']))
        # ORM rows and anything else exposing the same attributes
        return cls(id=value.id, url=value.url, is_ai=bool(value.is_ai))

    def to_dict(self, include_label: bool = True) -> dict:
        payload = {'id': self.id, 'url': self.url}
        if include_label:
            payload['is_ai'] = self.is_ai
        return payload


@dataclass(frozen=True)
class RoundResult:
    image_id: Any
    url: str
    is_ai: bool
    user_answer: Optional[bool]
    correct: bool
    time_left: float
    points: int = 0

    def to_dict(self) -> dict:
        return {
            'image_id': self.image_id,
            'url': self.url,
            'is_ai': self.is_ai,
            'user_answer': self.user_answer,
            'correct': self.correct,
            'time_left': round(self.time_left, 3),
            'points': self.points,
        }


Listener = Callable[[str, Dict[str, Any]], None]


class RoundSequencer:

    def __init__(self,
                 image_source: Callable[[], Iterable],
                 rank_resolver: Optional[Callable[[dict], Optional[int]]] = None,
                 rules: ScoringRules = DEFAULT_RULES,
                 round_duration: float = 5.0,
                 countdown_from: int = 3,
                 username_max_length: int = 50,
                 clock: Callable[[], float] = time.monotonic,
                 listener: Optional[Listener] = None,
                 logger: Optional[logging.Logger] = None):
        self._image_source = image_source
        self._rank_resolver = rank_resolver
        self.rules = rules
        self.round_duration = float(round_duration)
        self.countdown_from = int(countdown_from)
        self.username_max_length = int(username_max_length)
        self._clock = clock
        self._listener = listener
        self._logger = logger or logging.getLogger(__name__)
        self._lock = threading.RLock()
        self.timer = RoundTimer(on_expire=self._on_timer_expired, clock=clock)
        self.epoch = 0
        self.username: Optional[str] = None
        self.country: Optional[str] = None
        self._reset_counters()

    def _reset_counters(self) -> None:
        self.phase = Phase.REGISTERING
        self.images: List[GameImage] = []
        self.current_index = 0
        self.score = 0
        self.streak = 0
        self.results: List[RoundResult] = []
        self.feedback: Optional[dict] = None
        self.rank: Optional[int] = None
        self.summary: Optional[dict] = None
        self.countdown_value = 0
        self.load_progress = 0
        self.started_at: Optional[float] = None
        self._loaded: set = set()
        self._round_generation: Optional[int] = None

    # ---- listener plumbing ----

    def _emit(self, event: str, payload: Optional[dict] = None) -> None:
        if self._listener is None:
            return
        self._listener(event, payload if payload is not None else {})

    def _set_phase(self, phase: Phase) -> None:
        self.phase = phase
        self._emit('phase', self.snapshot())

    def matches(self, epoch: int, phase: Phase, round_index: int) -> bool:
        """True while the session is still where a scheduled worker expects it."""
        return self.epoch == epoch and self.phase == phase and self.current_index == round_index

    # ---- registering -> loading ----

    def register(self, username: Optional[str], country: Optional[str] = None) -> List[GameImage]:
        with self._lock:
            if self.phase != Phase.REGISTERING:
                raise PhaseError(f'Cannot register while {self.phase.value}')
            name = (username or '').strip()
            if not name:
                raise InvalidUsernameError('A display name is required')
            # Fetch before touching session state so a failed pool leaves
            # the player exactly where they were.
            try:
                images = [GameImage.from_value(item) for item in self._image_source()]
            except ImagePoolError:
                raise
            except Exception as exc:
                raise ImagePoolError('Failed to load images') from exc
            if not images:
                raise ImagePoolError('No images available')
            self.username = name[:self.username_max_length]
            self.country = (country or '').strip() or None
            self.epoch += 1
            self._reset_counters()
            self.images = images
            self._set_phase(Phase.PRELOADING)
            self._emit('preload', {'images': [img.to_dict(include_label=False) for img in images]})
            return list(images)

    def mark_asset_loaded(self, image_id=None, ok: bool = True) -> Optional[int]:
        """Record one preloaded asset and return the load progress percentage.

        Failed loads still count, so a single broken URL cannot stall the
        session. Once every image has reported the countdown begins.
        """
        with self._lock:
            if self.phase != Phase.PRELOADING:
                return None
            pending = [str(img.id) for img in self.images if str(img.id) not in self._loaded]
            if image_id is None:
                key = pending[0] if pending else None
            else:
                key = str(image_id) if str(image_id) in pending else None
            if key is None:
                return self.load_progress
            if not ok:
                self._logger.warning(f"[preload] asset {key} failed to load; counting it as loaded")
            self._loaded.add(key)
            expected = len({str(img.id) for img in self.images})
            self.load_progress = round_half_up(len(self._loaded) / expected * 100)
            self._emit('load_progress', {'progress': self.load_progress})
            if len(self._loaded) >= expected:
                self.countdown_value = self.countdown_from
                self._set_phase(Phase.COUNTDOWN)
                if self.phase == Phase.COUNTDOWN and self.countdown_value <= 0:
                    self._begin_playing()
            return self.load_progress

    # ---- countdown -> playing ----

    def countdown_tick(self) -> Optional[int]:
        with self._lock:
            if self.phase != Phase.COUNTDOWN:
                return None
            self.countdown_value = max(0, self.countdown_value - 1)
            self._emit('countdown', {'value': self.countdown_value})
            if self.countdown_value <= 0:
                self._begin_playing()
            return self.countdown_value

    def _begin_playing(self) -> None:
        self.started_at = self._clock()
        self.current_index = 0
        self._start_round()

    def _start_round(self) -> None:
        image = self.images[self.current_index]
        self.feedback = None
        self._round_generation = self.timer.start(self.round_duration)
        self._set_phase(Phase.PLAYING)
        self._emit('round_started', {
            'round': self.current_index,
            'total': len(self.images),
            'image': image.to_dict(include_label=False),
            'duration': self.round_duration,
            'generation': self._round_generation,
        })

    # ---- playing -> feedback ----

    def answer(self, is_ai: bool) -> Optional[RoundResult]:
        with self._lock:
            if self.phase != Phase.PLAYING:
                return None
            # Past the deadline the round is a timeout, even when the expiry
            # callback has not yet acquired the lock.
            if not self.timer.running or self.timer.remaining() <= 0:
                return self._resolve(None, time_left=0.0)
            return self._resolve(bool(is_ai))

    def poll_timer(self) -> Optional[float]:
        """Tick the active round timer once; expiry resolves the round."""
        return self.timer.poll(self._round_generation)

    def _on_timer_expired(self, generation: int) -> None:
        with self._lock:
            if self.phase != Phase.PLAYING or generation != self._round_generation:
                self._logger.info(f"[timer-abort] stale expiry generation={generation} phase={self.phase.value}")
                return
            self._resolve(None, time_left=0.0)

    def _resolve(self, user_answer: Optional[bool], time_left: Optional[float] = None) -> RoundResult:
        # Read the clock and cancel in the same locked step; a tick that
        # arrives afterwards carries a stale generation and is dropped.
        if time_left is None:
            time_left = self.timer.remaining()
        self.timer.cancel()
        self._round_generation = None

        image = self.images[self.current_index]
        correct = is_correct(user_answer, image.is_ai)
        points = compute_points(correct, time_left, self.round_duration, self.streak, self.rules)
        self.score += points
        self.streak = next_streak(correct, self.streak)
        result = RoundResult(
            image_id=image.id,
            url=image.url,
            is_ai=image.is_ai,
            user_answer=user_answer,
            correct=correct,
            time_left=time_left,
            points=points,
        )
        self.results.append(result)
        self.feedback = {
            'round': self.current_index,
            'correct': correct,
            'actual_answer': image.is_ai,
            'user_answer': user_answer,
            'points': points,
            'score': self.score,
            'streak': self.streak,
        }
        self._emit('feedback', dict(self.feedback))
        self._set_phase(Phase.FEEDBACK)
        return result

    # ---- feedback -> playing | gameover ----

    def advance(self) -> Optional[Phase]:
        with self._lock:
            if self.phase != Phase.FEEDBACK:
                return None
            if self.current_index + 1 < len(self.images):
                self.current_index += 1
                self._start_round()
            else:
                self._finish()
            return self.phase

    def submission(self) -> dict:
        stats = summarize(self.results, self.round_duration)
        return {
            'username': self.username,
            'country': self.country,
            'total_score': self.score,
            'correct_count': stats['correct_count'],
            'total_images': stats['total_images'],
            'accuracy': stats['accuracy'],
            'avg_time': stats['avg_time'],
        }

    def _finish(self) -> None:
        self.summary = summarize(self.results, self.round_duration)
        self.summary['total_score'] = self.score
        self._set_phase(Phase.GAME_OVER)
        rank = None
        if self._rank_resolver is not None:
            try:
                rank = self._rank_resolver(self.submission())
            except Exception as exc:
                # Best effort: the final card is shown without a rank.
                self._logger.warning(f"[submit] score submission failed for {self.username!r}: {exc}")
                rank = None
        self.rank = rank
        self._emit('game_over', {
            'summary': dict(self.summary),
            'rank': rank,
            'results': [r.to_dict() for r in self.results],
        })

    # ---- teardown ----

    def play_again(self) -> None:
        with self._lock:
            self.timer.cancel()
            self.epoch += 1
            self._reset_counters()
            self._set_phase(Phase.REGISTERING)

    def close(self) -> None:
        with self._lock:
            self.timer.cancel()
            self._round_generation = None
            self.epoch += 1

    def snapshot(self) -> dict:
        time_left = None
        if self.phase == Phase.PLAYING:
            time_left = round(self.timer.remaining(), 3)
        current = None
        if self.phase in (Phase.PLAYING, Phase.FEEDBACK) and self.images:
            current = self.images[self.current_index].to_dict(include_label=False)
        return {
            'phase': self.phase.value,
            'epoch': self.epoch,
            'username': self.username,
            'country': self.country,
            'current_index': self.current_index,
            'total_images': len(self.images),
            'current_image': current,
            'score': self.score,
            'streak': self.streak,
            'time_left': time_left,
            'duration': self.round_duration,
            'countdown': self.countdown_value,
            'load_progress': self.load_progress,
            'feedback': self.feedback,
            'rank': self.rank,
            'summary': self.summary,
        }
