from flask import Blueprint, jsonify
from monopoly.api.helpers import data_or_404
from monopoly.services import games as game_service


games = Blueprint('games', __name__)


@games.route('', methods=['GET'])
def read_games():
    return jsonify(game_service.list_games())


@games.route('/<game_id>', methods=['GET'])
def read_game_players(game_id):
    # Unknown games are not distinguished from games without players
    return jsonify(game_service.get_game_players(game_id))


@games.route('/<game_id>', methods=['DELETE'])
def delete_game(game_id):
    return data_or_404(game_service.delete_game(game_id))
