from models import db, dialect_insert, Prop, PropOption, PropPick, MAX_PROP_OPTIONS
from utils.helpers import utcnow, parse_int_param
from .access import require_board_admin, require_board_member, is_board_admin
from .boards import get_board_or_404, list_members
from .edit_lock import require_board_editable
from .errors import InvalidInput, NotFound, Conflict
from .invites import list_pending_invites


def normalize_options(value):
    """Trim labels, drop blanks and keep at most 50"""
    if not isinstance(value, (list, tuple)):
        return []
    labels = [v.strip() for v in value if isinstance(v, str)]
    return [label for label in labels if label][:MAX_PROP_OPTIONS]


def get_props_board(board_id):
    board = get_board_or_404(board_id)
    if board.board_type != 'PROPS':
        raise InvalidInput('board_not_props')
    return board


def get_board_prop(board, prop_id):
    prop = Prop.query.filter_by(id=prop_id, board_id=board.id).first()
    if not prop:
        raise NotFound('prop_not_found')
    return prop


def create_prop(board_id, question, options, user):
    board = get_props_board(board_id)
    require_board_admin(user, board)
    require_board_editable(board, user)

    question = question.strip() if isinstance(question, str) else ''
    labels = normalize_options(options)
    if not question:
        raise InvalidInput('question_required')
    if len(labels) < 2:
        raise InvalidInput('options_too_few')

    prop = Prop(board_id=board.id, question=question,
                options=[PropOption(label=label) for label in labels])
    db.session.add(prop)
    db.session.commit()

    print(f"[Props] Prop {prop.id} with {len(labels)} options created on board {board.id}")
    return prop


def update_prop(board_id, prop_id, user, question=None, options=None):
    """
    Change a prop's question and/or replace its option set.

    Options cannot be replaced once anyone has picked. The prop row is
    locked against set_pick on PostgreSQL; on SQLite picks are counted
    again after the old options are deleted, inside the same write.
    """
    board = get_props_board(board_id)
    require_board_admin(user, board)
    require_board_editable(board, user)
    prop = get_board_prop(board, prop_id)

    try:
        prop = Prop.query.filter_by(id=prop.id).with_for_update().one()

        if question is not None:
            question = question.strip() if isinstance(question, str) else ''
            if not question:
                raise InvalidInput('question_empty')
            prop.question = question

        if options is not None:
            labels = normalize_options(options)
            if len(labels) < 2:
                raise InvalidInput('options_too_few')

            if PropPick.query.filter_by(prop_id=prop.id).count() > 0:
                raise Conflict('options_locked_by_picks')

            PropOption.query.filter_by(prop_id=prop.id).delete(synchronize_session=False)
            if PropPick.query.filter_by(prop_id=prop.id).count() > 0:
                raise Conflict('options_locked_by_picks')

            db.session.expire(prop, ['options'])
            db.session.add_all([PropOption(prop_id=prop.id, label=label) for label in labels])

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    print(f"[Props] Prop {prop.id} on board {board.id} updated by user {user.id}")
    return prop


def delete_prop(board_id, prop_id, user):
    """Delete a prop together with its options and picks"""
    board = get_props_board(board_id)
    require_board_admin(user, board)
    require_board_editable(board, user)
    prop = get_board_prop(board, prop_id)

    db.session.delete(prop)
    db.session.commit()
    print(f"[Props] Prop {prop_id} deleted from board {board.id} by user {user.id}")


def set_pick(board_id, prop_id, option_id, user):
    """
    Record the user's pick, replacing any earlier one for the same prop.

    The option has to belong to the prop and the prop to the board, so ids
    from another board cannot be smuggled in.
    """
    prop_id = parse_int_param(prop_id)
    option_id = parse_int_param(option_id)
    if prop_id is None:
        raise InvalidInput('prop_id_required')
    if option_id is None:
        raise InvalidInput('option_id_required')

    board = get_props_board(board_id)
    require_board_member(user, board)
    require_board_editable(board, user)

    try:
        # FOR SHARE on PostgreSQL blocks a concurrent option replacement
        prop = (
            Prop.query.filter_by(id=prop_id, board_id=board.id)
            .with_for_update(read=True)
            .first()
        )
        option = PropOption.query.filter_by(id=option_id, prop_id=prop_id).first() if prop else None
        if not option:
            raise InvalidInput('invalid_option')

        now = utcnow()
        stmt = dialect_insert(PropPick).values(
            board_id=board.id, prop_id=prop.id, option_id=option.id,
            user_id=user.id, created_at=now, updated_at=now,
        )
        stmt = stmt.on_conflict_do_update(
            index_elements=['prop_id', 'user_id'],
            set_={'option_id': stmt.excluded.option_id, 'updated_at': stmt.excluded.updated_at},
        )
        db.session.execute(stmt)

        # On SQLite the upsert is what waits out a concurrent replacement;
        # replaced options can reuse ids, so created_at must match as well
        still_offered = PropOption.query.filter_by(
            id=option.id, prop_id=prop.id, created_at=option.created_at
        ).count()
        if not still_offered:
            raise InvalidInput('invalid_option')
        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    print(f"[Props] User {user.id} picked option {option_id} on prop {prop_id}")
    return PropPick.query.filter_by(prop_id=prop_id, user_id=user.id).one()


def clear_pick(board_id, prop_id, user):
    prop_id = parse_int_param(prop_id)
    if prop_id is None:
        raise InvalidInput('prop_id_required')

    board = get_props_board(board_id)
    require_board_member(user, board)
    require_board_editable(board, user)

    deleted = PropPick.query.filter_by(
        board_id=board.id, prop_id=prop_id, user_id=user.id
    ).delete(synchronize_session=False)
    db.session.commit()
    return deleted


def list_props(board_id, viewer=None):
    """
    Everything a props page needs.

    Signed-out viewers only see questions. Signed-in viewers also get their
    own picks, and board admins get every pick plus the roster and pending
    invites.
    """
    board = get_props_board(board_id)
    props = Prop.query.filter_by(board_id=board.id).order_by(Prop.created_at.asc(), Prop.id.asc()).all()

    data = {'board': board, 'props': props, 'my_picks': None, 'picks': None,
            'members': None, 'invites': None}
    if viewer is None:
        return data

    data['my_picks'] = PropPick.query.filter_by(board_id=board.id, user_id=viewer.id).all()

    if is_board_admin(viewer, board):
        data['picks'] = (
            PropPick.query.filter_by(board_id=board.id)
            .order_by(PropPick.updated_at.desc())
            .all()
        )
        data['members'] = list_members(board.id, viewer)
        data['invites'] = list_pending_invites(board.id, viewer)
    return data
