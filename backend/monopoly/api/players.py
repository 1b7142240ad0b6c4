from flask import Blueprint, jsonify, request
from monopoly.api.helpers import data_or_404
from monopoly.services import players as player_service


players = Blueprint('players', __name__)


@players.route('', methods=['GET'])
def read_players():
    return jsonify(player_service.list_players())


@players.route('/<player_id>', methods=['GET'])
def read_player(player_id):
    return data_or_404(player_service.get_player(player_id))


@players.route('/<player_id>', methods=['PUT'])
def update_player(player_id):
    data = request.get_json(silent=True) or {}
    return data_or_404(player_service.update_player(player_id, data.get('name'), data.get('email')))


@players.route('', methods=['POST'])
def create_player():
    data = request.get_json(silent=True) or {}
    return jsonify(player_service.create_player(data.get('name'), data.get('email')))


@players.route('/<player_id>', methods=['DELETE'])
def delete_player(player_id):
    return data_or_404(player_service.delete_player(player_id))
