import time

from aioreal import socketio
from .sequencer import Phase


def _scheduler_disabled(app) -> bool:
    return bool(app.config.get('TESTING') and not app.config.get('ENABLE_SCHEDULER_IN_TESTS'))


def _sleep(seconds: float) -> None:
    if seconds > 0:
        socketio.sleep(seconds)


def _run(app, worker) -> None:
    # Inline in tests so the whole pipeline is deterministic
    if app.config.get('TESTING'):
        worker()
    else:
        socketio.start_background_task(worker)


def schedule_countdown(app, hub, sid: str) -> None:
    """Step the pre-game countdown until the first round starts.

    - No-ops in TESTING mode unless ENABLE_SCHEDULER_IN_TESTS is set
    - Ensures a single worker per (sid, epoch, stage, round)
    - Aborts when the session moved on (answered, restarted, disconnected)
    """
    if _scheduler_disabled(app):
        return
    seq = hub.get(sid)
    if not seq or seq.phase != Phase.COUNTDOWN:
        return
    epoch = seq.epoch
    key = (sid, epoch, Phase.COUNTDOWN.value, 0)
    if not hub.claim(key):
        app.logger.info(f"[timer-skip] sid={sid} stage=countdown already scheduled")
        return
    step = int(app.config.get('COUNTDOWN_STEP_MS', 1000)) / 1000.0
    app.logger.info(f"[timer-set] sid={sid} stage=countdown from={seq.countdown_value} step={step}s")

    def _worker():
        try:
            while True:
                _sleep(step)
                with app.app_context():
                    s = hub.get(sid)
                    if not s or not s.matches(epoch, Phase.COUNTDOWN, 0):
                        app.logger.info(f"[timer-abort] sid={sid} stage=countdown mismatch epoch/stage")
                        return
                    s.countdown_tick()
                    if s.phase != Phase.COUNTDOWN:
                        return
        finally:
            hub.release(key)

    _run(app, _worker)


def schedule_advance(app, hub, sid: str) -> None:
    """Hold the feedback screen, then move to the next round or game over."""
    if _scheduler_disabled(app):
        return
    seq = hub.get(sid)
    if not seq or seq.phase != Phase.FEEDBACK:
        return
    epoch = seq.epoch
    round_idx = seq.current_index
    key = (sid, epoch, Phase.FEEDBACK.value, round_idx)
    if not hub.claim(key):
        app.logger.info(f"[timer-skip] sid={sid} stage=feedback round={round_idx} already scheduled")
        return
    delay = int(app.config.get('FEEDBACK_DELAY_MS', 1200)) / 1000.0
    app.logger.info(f"[timer-set] sid={sid} stage=feedback round={round_idx} duration={delay}s")

    def _worker():
        try:
            _sleep(delay)
            with app.app_context():
                s = hub.get(sid)
                if not s:
                    return
                app.logger.info(
                    f"[timer-fire] sid={sid} expected_stage=feedback expected_round={round_idx} "
                    f"actual_stage={s.phase.value} actual_round={s.current_index}"
                )
                if not s.matches(epoch, Phase.FEEDBACK, round_idx):
                    app.logger.info(f"[timer-abort] sid={sid} mismatch epoch/stage/round")
                    return
                s.advance()
        finally:
            hub.release(key)

    _run(app, _worker)


def start_round_ticker(app, hub, sid: str, generation: int) -> None:
    """Poll the round timer on a fixed interval and stream the time left.

    The loop ends as soon as the timer reports a stale generation, which
    happens once the player answers. Reaching zero resolves the round as a
    timeout through the sequencer's expiry callback.
    """
    if app.config.get('TESTING'):
        return
    seq = hub.get(sid)
    if not seq or seq.phase != Phase.PLAYING:
        return
    epoch = seq.epoch
    round_idx = seq.current_index
    key = (sid, epoch, Phase.PLAYING.value, round_idx)
    if not hub.claim(key):
        app.logger.info(f"[timer-skip] sid={sid} stage=playing round={round_idx} already scheduled")
        return
    interval = max(1, int(app.config.get('TIMER_TICK_MS', 50))) / 1000.0
    app.logger.info(
        f"[timer-set] sid={sid} stage=playing round={round_idx} duration={seq.round_duration}s deadline={time.time() + seq.round_duration}"
    )

    def _worker():
        try:
            while True:
                with app.app_context():
                    s = hub.get(sid)
                    if not s:
                        return
                    left = s.timer.poll(generation)
                    if left is None:
                        return
                    hub.emit('tick', {'round': round_idx, 'time_left': round(left, 3), 'duration': s.round_duration}, sid)
                    if left <= 0:
                        app.logger.info(f"[timer-fire] sid={sid} stage=playing round={round_idx} expired")
                        return
                _sleep(interval)
        finally:
            hub.release(key)

    socketio.start_background_task(_worker)
