"""JSON projections of models returned by the API."""
from services.edit_lock import can_edit_now


def iso(value):
    return value.isoformat() + 'Z' if value else None


def user_json(user):
    if user is None:
        return None
    return {
        'id': user.id,
        'email': user.email,
        'first_name': user.first_name,
        'last_name': user.last_name,
    }


def board_json(board):
    return {
        'id': board.id,
        'name': board.name,
        'type': board.board_type,
        'is_editable': board.is_editable,
        'editable_until': iso(board.editable_until),
        'max_squares_per_email': board.max_squares_per_email,
        'can_edit': can_edit_now(board.is_editable, board.editable_until),
        'created_at': iso(board.created_at),
    }


def square_json(square):
    return {
        'row': square.row,
        'col': square.col,
        'user': user_json(square.user),
    }


def prop_json(prop):
    return {
        'id': prop.id,
        'question': prop.question,
        'options': [{'id': o.id, 'label': o.label} for o in prop.options],
        'created_at': iso(prop.created_at),
    }


def pick_json(pick, include_user=False):
    data = {
        'prop_id': pick.prop_id,
        'option_id': pick.option_id,
        'updated_at': iso(pick.updated_at),
    }
    if include_user:
        data['user'] = user_json(pick.user)
    return data


def member_json(member):
    return {
        'role': member.role,
        'user': user_json(member.user),
        'created_at': iso(member.created_at),
    }


def invite_json(invite, join_url=None):
    data = {
        'id': invite.id,
        'email': invite.email,
        'expires_at': iso(invite.expires_at),
        'created_at': iso(invite.created_at),
    }
    if join_url:
        data['token'] = invite.token
        data['join_url'] = join_url
    return data
