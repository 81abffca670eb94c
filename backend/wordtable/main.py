from flask import Blueprint, jsonify
from wordtable.services.games.session import SEAT_LIMITS

main = Blueprint('main', __name__)

@main.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})

@main.route('/api/game-types', methods=['GET'])
def game_types():
    return jsonify([
        {'game_type': game_type, 'min_players': low, 'max_players': high}
        for game_type, (low, high) in SEAT_LIMITS.items()
    ])
