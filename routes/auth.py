from flask import Blueprint, request, jsonify, session
from services import login_required, get_current_user, register_user, authenticate
from .serializers import user_json

auth_bp = Blueprint('auth', __name__, url_prefix='/auth')

@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an account and sign in"""
    data = request.get_json(silent=True) or {}
    user = register_user(data.get('email'), data.get('password'),
                         data.get('first_name'), data.get('last_name'))
    session['user_id'] = user.id
    return jsonify({'user': user_json(user)}), 201

@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    user = authenticate(data.get('email'), data.get('password'))
    session['user_id'] = user.id
    return jsonify({'user': user_json(user)})

@auth_bp.route('/logout', methods=['POST'])
def logout():
    session.pop('user_id', None)
    return jsonify({'ok': True})

@auth_bp.route('/me')
@login_required
def me():
    user = get_current_user()
    return jsonify({'user': user_json(user), 'is_admin': user.is_admin})
