import random
from typing import Dict, List, Sequence

from flask import current_app

from aioreal.models import GameImage as GameImageRow
from aioreal.services.cache import get_cache
from .sequencer import GameImage


def load_pools() -> Dict[str, List[GameImage]]:
    """Read the full AI and real pools from the database."""
    ai = GameImageRow.query.filter_by(is_ai=True).order_by(GameImageRow.id).all()
    real = GameImageRow.query.filter_by(is_ai=False).order_by(GameImageRow.id).all()
    return {
        'ai': [GameImage.from_value(row) for row in ai],
        'real': [GameImage.from_value(row) for row in real],
    }


def draw_session_images(ai_pool: Sequence[GameImage], real_pool: Sequence[GameImage],
                        ai_count: int, real_count: int, rng=random) -> List[GameImage]:
    """Balanced draw without replacement, then shuffle the union.

    A pool smaller than its quota contributes everything it has.
    """
    picked = rng.sample(list(ai_pool), min(ai_count, len(ai_pool)))
    picked += rng.sample(list(real_pool), min(real_count, len(real_pool)))
    rng.shuffle(picked)
    return picked


def session_images(rng=random) -> List[GameImage]:
    cfg = current_app.config
    pools = get_cache('images').get(load_pools)
    images = draw_session_images(
        pools['ai'],
        pools['real'],
        int(cfg.get('SESSION_AI_IMAGES', 6)),
        int(cfg.get('SESSION_REAL_IMAGES', 6)),
        rng=rng,
    )
    current_app.logger.info(
        f"[image-pool] drew {len(images)} images from ai={len(pools['ai'])} real={len(pools['real'])}"
    )
    return images
