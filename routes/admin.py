from urllib.parse import quote
from flask import Blueprint, request, jsonify, current_app
from services import (login_required, get_current_user, create_invite, list_pending_invites,
                      revoke_invite, list_members, remove_member, create_prop, update_prop,
                      delete_prop)
from .serializers import invite_json, member_json, prop_json

admin_bp = Blueprint('admin', __name__, url_prefix='/admin/boards/<int:board_id>')

def build_join_url(token):
    base_url = current_app.config.get('BASE_URL', 'http://localhost:5000')
    return f"{base_url}/join?token={quote(token)}"

@admin_bp.route('/invites', methods=['POST'])
@login_required
def invite(board_id):
    """Issue an email-bound invite (board admins only)"""
    data = request.get_json(silent=True) or {}
    board_invite = create_invite(board_id, data.get('email'), get_current_user())
    join_url = build_join_url(board_invite.token)
    print(f"[Invites] Join link for {board_invite.email}: {join_url}")
    return jsonify({'invite': invite_json(board_invite, join_url=join_url)}), 201

@admin_bp.route('/invites', methods=['GET'])
@login_required
def pending_invites(board_id):
    invites = list_pending_invites(board_id, get_current_user())
    return jsonify({'invites': [invite_json(i) for i in invites]})

@admin_bp.route('/invites/<int:invite_id>', methods=['DELETE'])
@login_required
def revoke(board_id, invite_id):
    revoke_invite(invite_id, board_id, get_current_user())
    return jsonify({'ok': True})

@admin_bp.route('/members', methods=['GET'])
@login_required
def members(board_id):
    roster = list_members(board_id, get_current_user())
    return jsonify({'members': [member_json(m) for m in roster]})

@admin_bp.route('/members/<int:user_id>', methods=['DELETE'])
@login_required
def remove(board_id, user_id):
    """Remove a member and release their squares"""
    released = remove_member(board_id, user_id, get_current_user())
    return jsonify({'ok': True, 'released': released})

@admin_bp.route('/props', methods=['POST'])
@login_required
def new_prop(board_id):
    data = request.get_json(silent=True) or {}
    prop = create_prop(board_id, data.get('question'), data.get('options'), get_current_user())
    return jsonify({'prop': prop_json(prop)}), 201

@admin_bp.route('/props/<int:prop_id>', methods=['PUT'])
@login_required
def edit_prop(board_id, prop_id):
    """Change the question and/or replace the options (only before any picks)"""
    data = request.get_json(silent=True) or {}
    prop = update_prop(board_id, prop_id, get_current_user(),
                       question=data.get('question'), options=data.get('options'))
    return jsonify({'prop': prop_json(prop)})

@admin_bp.route('/props/<int:prop_id>', methods=['DELETE'])
@login_required
def remove_prop(board_id, prop_id):
    delete_prop(board_id, prop_id, get_current_user())
    return jsonify({'ok': True})
