from flask import Blueprint, request, jsonify
from services import (login_required, get_current_user, create_board, update_board, delete_board,
                      list_user_boards, accept_invite)
from .serializers import board_json

boards_bp = Blueprint('boards', __name__, url_prefix='/boards')

BOARD_SETTINGS = ('name', 'is_editable', 'editable_until', 'max_squares_per_email')

@boards_bp.route('', methods=['GET'])
@login_required
def my_boards():
    """Boards the signed-in user belongs to"""
    memberships = list_user_boards(get_current_user())
    return jsonify({'boards': [
        {'board': board_json(m['board']), 'role': m['role']} for m in memberships
    ]})

@boards_bp.route('', methods=['POST'])
@login_required
def create():
    """Any signed-in user can create a board and becomes its owner"""
    data = request.get_json(silent=True) or {}
    board = create_board(data.get('name'), get_current_user(), data.get('type', 'SQUARES'))
    return jsonify({'board': board_json(board)}), 201

@boards_bp.route('/<int:board_id>', methods=['PUT'])
@login_required
def update(board_id):
    data = request.get_json(silent=True) or {}
    changes = {key: data[key] for key in BOARD_SETTINGS if key in data}
    board = update_board(board_id, get_current_user(), changes)
    return jsonify({'board': board_json(board)})

@boards_bp.route('/<int:board_id>', methods=['DELETE'])
@login_required
def delete(board_id):
    delete_board(board_id, get_current_user())
    return jsonify({'ok': True})

@boards_bp.route('/join', methods=['POST'])
@login_required
def join():
    """Accept an invite token for the signed-in user's email"""
    data = request.get_json(silent=True) or {}
    board_id = accept_invite(data.get('token'), get_current_user())
    return jsonify({'ok': True, 'board_id': board_id})
