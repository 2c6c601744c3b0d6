from aioreal import db
from aioreal.models import Country, GameImage
from aioreal.seed_data import AI_IMAGES, COUNTRIES, REAL_IMAGES
from aioreal.services.flags import FLAGS


def seed_reference_data() -> dict:
    """Replace images and countries with the bundled reference data."""
    GameImage.query.delete()
    Country.query.delete()

    for url, category, description in AI_IMAGES:
        db.session.add(GameImage(url=url, is_ai=True, category=category, description=description))
    for url, category, source in REAL_IMAGES:
        db.session.add(GameImage(url=url, is_ai=False, category=category, source=source))
    for name, code in COUNTRIES:
        db.session.add(Country(name=name, code=code, flag=FLAGS.resolve(code).emoji))
    db.session.commit()

    return {
        'ai': len(AI_IMAGES),
        'real': len(REAL_IMAGES),
        'countries': len(COUNTRIES),
    }
