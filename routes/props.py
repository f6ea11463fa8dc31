from flask import Blueprint, request, jsonify
from services import login_required, get_current_user, list_props, set_pick, clear_pick
from .serializers import board_json, prop_json, pick_json, member_json, invite_json

props_bp = Blueprint('props', __name__, url_prefix='/boards/<int:board_id>')

@props_bp.route('/props', methods=['GET'])
def props_page(board_id):
    """Props for anyone; picks, roster and invites depending on who is asking"""
    data = list_props(board_id, get_current_user())

    def listed(items, serialize):
        return None if items is None else [serialize(item) for item in items]

    return jsonify({
        'board': board_json(data['board']),
        'props': [prop_json(p) for p in data['props']],
        'my_picks': listed(data['my_picks'], pick_json),
        'picks': listed(data['picks'], lambda p: pick_json(p, include_user=True)),
        'members': listed(data['members'], member_json),
        'invites': listed(data['invites'], invite_json),
    })

@props_bp.route('/picks', methods=['POST'])
@login_required
def pick(board_id):
    data = request.get_json(silent=True) or {}
    prop_pick = set_pick(board_id, data.get('prop_id'), data.get('option_id'), get_current_user())
    return jsonify({'pick': pick_json(prop_pick)})

@props_bp.route('/picks', methods=['DELETE'])
@login_required
def unpick(board_id):
    data = request.get_json(silent=True) or {}
    clear_pick(board_id, data.get('prop_id'), get_current_user())
    return jsonify({'ok': True})
