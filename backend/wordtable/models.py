from wordtable import db
from wordtable.services.games.state import (
    CODENAMES, STATUS_ABANDONED, STATUS_COMPLETED, STATUS_WAITING, GameSnapshot,
)
from datetime import datetime, timezone
import json
import string
import random

PIN_LENGTH = 6


def _utcnow():
    return datetime.now(timezone.utc)


def _dumps(value):
    return json.dumps(value) if value is not None else None


def _loads(value):
    return json.loads(value) if value else None


class Player(db.Model):
    __tablename__ = 'player'
    __table_args__ = (db.UniqueConstraint('game_id', 'seat', name='uq_player_game_seat'),)
    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(64), nullable=False)
    seat = db.Column(db.Integer, nullable=False)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False)
    joined_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    game = db.relationship('Game', back_populates='players')

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.name,
            'seat': self.seat,
        }


def generate_pin(length=PIN_LENGTH):
    """Generate a unique join code."""
    while True:
        code = ''.join(random.choices(string.ascii_uppercase + string.digits, k=length))
        if not Game.query.filter_by(pin=code).first():
            return code


class Game(db.Model):
    __tablename__ = 'game'
    id = db.Column(db.Integer, primary_key=True)
    pin = db.Column(db.String(PIN_LENGTH), unique=True, index=True, nullable=False)
    game_type = db.Column(db.String(32), nullable=False)
    status = db.Column(db.String(32), default=STATUS_WAITING, nullable=False)  # waiting, playing, completed, abandoned
    current_phase = db.Column(db.String(32), nullable=True)
    current_turn = db.Column(db.Integer, default=0, nullable=False)
    min_players = db.Column(db.Integer, default=2, nullable=False)
    max_players = db.Column(db.Integer, default=2, nullable=False)
    board_state = db.Column(db.Text, nullable=True)  # JSON, one variant per game_type
    # Codenames only
    words = db.Column(db.Text, nullable=True)  # JSON-encoded list of 25 words
    key_card = db.Column(db.Text, nullable=True)  # JSON-encoded pair of key sides
    timer_tokens = db.Column(db.Integer, nullable=True)
    clue_strictness = db.Column(db.String(16), nullable=True)
    sudden_death = db.Column(db.Boolean, default=False, nullable=False)

    result = db.Column(db.String(16), nullable=True)
    version = db.Column(db.Integer, default=0, nullable=False)
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)
    ended_at = db.Column(db.DateTime(timezone=True), nullable=True)

    players = db.relationship('Player', back_populates='game', order_by='Player.seat')
    moves = db.relationship('Move', backref='game', lazy='dynamic', order_by='Move.id')

    def __init__(self, **kwargs):
        super(Game, self).__init__(**kwargs)
        if not self.pin:
            self.pin = generate_pin()

    @property
    def seat_count(self):
        return len(self.players)

    def to_snapshot(self) -> GameSnapshot:
        data = {
            'id': self.id,
            'game_type': self.game_type,
            'status': self.status,
            'current_phase': self.current_phase,
            'current_turn': self.current_turn,
            'board_state': _loads(self.board_state) or {},
            'result': self.result,
            'version': self.version,
            'words': _loads(self.words),
            'key_card': _loads(self.key_card),
            'timer_tokens': self.timer_tokens,
            'sudden_death': self.sudden_death,
            'clue_strictness': self.clue_strictness,
        }
        # Boards are dealt for every seat while waiting, then for the real table.
        player_count = self.max_players if self.status == STATUS_WAITING else self.seat_count
        return GameSnapshot.from_dict(data, player_count=player_count)

    def snapshot_columns(self, snapshot: GameSnapshot) -> dict:
        """Column values that store ``snapshot`` on this row."""
        doc = snapshot.to_dict()
        values = {
            'status': snapshot.status,
            'current_phase': snapshot.phase,
            'current_turn': snapshot.current_turn,
            'board_state': _dumps(doc['board_state']),
            'result': snapshot.result,
        }
        if snapshot.game_type == CODENAMES:
            values.update({
                'words': _dumps(doc['words']),
                'key_card': _dumps(doc['key_card']),
                'timer_tokens': doc['timer_tokens'],
                'sudden_death': doc['sudden_death'],
                'clue_strictness': doc['clue_strictness'],
            })
        if snapshot.status in (STATUS_COMPLETED, STATUS_ABANDONED) and self.ended_at is None:
            values['ended_at'] = _utcnow()
        return values

    def apply_snapshot(self, snapshot: GameSnapshot) -> None:
        for column, value in self.snapshot_columns(snapshot).items():
            setattr(self, column, value)

    def to_dict(self):
        payload = self.to_snapshot().to_dict()
        payload.update({
            'pin': self.pin,
            'min_players': self.min_players,
            'max_players': self.max_players,
            'players': [p.to_dict() for p in self.players],
            'created_at': self.created_at.isoformat() if self.created_at else None,
            'ended_at': self.ended_at.isoformat() if self.ended_at else None,
        })
        return payload


class Move(db.Model):
    __tablename__ = 'move'
    id = db.Column(db.Integer, primary_key=True)
    game_id = db.Column(db.Integer, db.ForeignKey('game.id'), nullable=False, index=True)
    player_id = db.Column(db.Integer, db.ForeignKey('player.id'), nullable=False)
    seat = db.Column(db.Integer, nullable=False)
    move_type = db.Column(db.String(32), nullable=False)
    move_data = db.Column(db.Text, nullable=True)  # JSON-encoded
    created_at = db.Column(db.DateTime(timezone=True), default=_utcnow)

    player = db.relationship('Player')

    def to_dict(self):
        return {
            'id': self.id,
            'game_id': self.game_id,
            'player_id': self.player_id,
            'seat': self.seat,
            'move_type': self.move_type,
            'move_data': _loads(self.move_data) or {},
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }
