from flask import Blueprint, request, jsonify
from services import (login_required, get_current_user, get_board_or_404, list_squares,
                      claim_square, release_square, reset_board, winning_square)
from .serializers import board_json, square_json

squares_bp = Blueprint('squares', __name__, url_prefix='/boards/<int:board_id>/squares')

@squares_bp.route('', methods=['GET'])
def grid(board_id):
    """The full 10x10 grid, created on first view"""
    squares = list_squares(board_id)
    return jsonify({
        'board': board_json(get_board_or_404(board_id)),
        'squares': [square_json(s) for s in squares],
    })

@squares_bp.route('', methods=['POST'])
@login_required
def claim(board_id):
    data = request.get_json(silent=True) or {}
    square = claim_square(board_id, data.get('row'), data.get('col'), get_current_user())
    return jsonify({'square': square_json(square)})

@squares_bp.route('', methods=['DELETE'])
@login_required
def release(board_id):
    data = request.get_json(silent=True) or {}
    release_square(board_id, data.get('row'), data.get('col'), get_current_user())
    return jsonify({'ok': True})

@squares_bp.route('/reset', methods=['POST'])
@login_required
def reset(board_id):
    """Clear every claim on the board (global admins only)"""
    cleared = reset_board(board_id, get_current_user())
    return jsonify({'ok': True, 'cleared': cleared})

@squares_bp.route('/winner', methods=['POST'])
def winner(board_id):
    """Find the winning square for a score given the drawn axis numbers"""
    data = request.get_json(silent=True) or {}
    square = winning_square(board_id, data.get('home_axis'), data.get('away_axis'),
                            data.get('home_score'), data.get('away_score'))
    return jsonify({'square': square_json(square)})
