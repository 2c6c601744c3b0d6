from flask import Blueprint, jsonify, current_app
from sqlalchemy.exc import SQLAlchemyError

from aioreal.models import Country, GalleryItem
from aioreal.services.cache import get_cache
from aioreal.services.flags import FLAGS


catalog = Blueprint('catalog', __name__)


def _load_countries():
    rows = Country.query.order_by(Country.name.asc()).all()
    countries = []
    for c in rows:
        entry = c.to_dict()
        if not entry['flag']:
            entry['flag'] = FLAGS.resolve(c.code).label
        countries.append(entry)
    return countries


@catalog.route('/countries', methods=['GET'])
def get_countries():
    try:
        countries = get_cache('countries').get(_load_countries)
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[countries] failed to fetch countries: {exc}")
        return jsonify([]), 500
    response = jsonify(countries)
    response.headers['Cache-Control'] = 'public, max-age=3600, stale-while-revalidate=7200'
    return response


@catalog.route('/gallery', methods=['GET'])
def get_gallery():
    limit = int(current_app.config.get('GALLERY_SIZE', 100))
    try:
        items = GalleryItem.query.order_by(GalleryItem.created_at.desc(), GalleryItem.id.desc()).limit(limit).all()
    except SQLAlchemyError as exc:
        current_app.logger.error(f"[gallery] failed to fetch gallery: {exc}")
        return jsonify([]), 500
    return jsonify([item.to_dict() for item in items])
