from datetime import datetime, timezone

from aioreal import db


def _utcnow():
    return datetime.now(timezone.utc)


def _isoformat(value):
    return value.isoformat() if value else None


class Country(db.Model):
    __tablename__ = 'country'
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), unique=True, nullable=False, index=True)
    code = db.Column(db.String(2), unique=True, nullable=False)
    flag = db.Column(db.String(16), nullable=False, default='')

    def to_dict(self):
        return {
            'name': self.name,
            'code': self.code,
            'flag': self.flag,
        }


class GameImage(db.Model):
    __tablename__ = 'game_image'
    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(512), unique=True, nullable=False)
    is_ai = db.Column(db.Boolean, nullable=False, index=True)
    category = db.Column(db.String(64), nullable=True)
    description = db.Column(db.String(256), nullable=True)
    source = db.Column(db.String(256), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)

    def to_dict(self):
        return {
            'id': self.id,
            'url': self.url,
            'is_ai': self.is_ai,
        }


class Player(db.Model):
    __tablename__ = 'player'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(64), nullable=False)
    country = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    scores = db.relationship('Score', back_populates='player', lazy='dynamic')

    def to_dict(self):
        return {
            'id': self.id,
            'username': self.username,
            'country': self.country,
        }


class Score(db.Model):
    __tablename__ = 'score'
    id = db.Column(db.Integer, primary_key=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False)
    total_score = db.Column(db.Integer, nullable=False, index=True)
    correct_count = db.Column(db.Integer, nullable=False, default=0)
    total_images = db.Column(db.Integer, nullable=False, default=0)
    accuracy = db.Column(db.Float, nullable=False, default=0.0)
    avg_time = db.Column(db.Float, nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False)
    player = db.relationship('Player', back_populates='scores')

    def to_dict(self):
        return {
            'id': self.id,
            'player_id': self.player_id,
            'total_score': self.total_score,
            'correct_count': self.correct_count,
            'total_images': self.total_images,
            'accuracy': self.accuracy,
            'avg_time': self.avg_time,
            'created_at': _isoformat(self.created_at),
        }


class GalleryItem(db.Model):
    __tablename__ = 'gallery_item'
    id = db.Column(db.Integer, primary_key=True)
    url = db.Column(db.String(512), nullable=False)
    username = db.Column(db.String(64), nullable=False)
    score = db.Column(db.Integer, nullable=False, default=0)
    country = db.Column(db.String(100), nullable=True)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow, nullable=False, index=True)

    def to_dict(self):
        return {
            'id': self.id,
            'url': self.url,
            'username': self.username,
            'score': self.score,
            'country': self.country,
            'created_at': _isoformat(self.created_at),
        }
