from sqlalchemy import update

from models import db, Square, GRID_SIZE
from utils.helpers import parse_int_param
from utils.scoring import get_winning_indexes
from .access import require_board_member
from .boards import get_board_or_404
from .edit_lock import require_board_editable
from .errors import InvalidInput, Forbidden, NotFound, Conflict
from .grid import ensure_grid


def validate_cell(row, col):
    row = parse_int_param(row)
    col = parse_int_param(col)
    if row is None or col is None or not 0 <= row < GRID_SIZE or not 0 <= col < GRID_SIZE:
        raise InvalidInput('invalid_row_col')
    return row, col


def get_squares_board(board_id):
    board = get_board_or_404(board_id)
    if board.board_type != 'SQUARES':
        raise InvalidInput('board_not_squares')
    return board


def get_square(board_id, row, col):
    return Square.query.filter_by(board_id=board_id, row=row, col=col).one()


def list_squares(board_id):
    """All 100 squares of a board ordered by row then column"""
    board = get_squares_board(board_id)
    ensure_grid(board.id)
    return (
        Square.query.filter_by(board_id=board.id)
        .order_by(Square.row.asc(), Square.col.asc())
        .all()
    )


def claim_square(board_id, row, col, user):
    """
    Claim an open square for user.

    The claim itself is a conditional UPDATE guarded by user_id IS NULL:
    of several racing claimants exactly one sees a row affected. The per
    user limit is a plain count beforehand and can be overshot by a user
    racing themselves.
    """
    row, col = validate_cell(row, col)
    board = get_squares_board(board_id)
    require_board_member(user, board)
    require_board_editable(board, user)
    ensure_grid(board.id)

    limit = board.max_squares_per_email
    if limit is not None and not user.is_admin:
        owned = Square.query.filter_by(board_id=board.id, user_id=user.id).count()
        if owned >= limit:
            raise Conflict('square_limit_reached', limit=limit)

    claimed = db.session.execute(
        update(Square)
        .where(Square.board_id == board.id, Square.row == row, Square.col == col,
               Square.user_id.is_(None))
        .values(user_id=user.id)
        .execution_options(synchronize_session=False)
    ).rowcount
    if claimed == 0:
        db.session.rollback()
        raise Conflict('square_already_claimed')

    db.session.commit()
    print(f"[Squares] User {user.id} claimed ({row},{col}) on board {board.id}")
    return get_square(board.id, row, col)


def release_square(board_id, row, col, user):
    """
    Give a square back.

    Players can only release their own squares. Global admins release any
    square regardless of owner.
    """
    row, col = validate_cell(row, col)
    board = get_squares_board(board_id)
    require_board_member(user, board)
    require_board_editable(board, user)

    conditions = [Square.board_id == board.id, Square.row == row, Square.col == col]
    if not user.is_admin:
        conditions.append(Square.user_id == user.id)

    released = db.session.execute(
        update(Square)
        .where(*conditions)
        .values(user_id=None)
        .execution_options(synchronize_session=False)
    ).rowcount
    if released == 0:
        db.session.rollback()
        if user.is_admin:
            raise NotFound('square_not_found')
        raise Conflict('square_not_claimed_by_you')

    db.session.commit()
    print(f"[Squares] User {user.id} released ({row},{col}) on board {board.id}")


def reset_board(board_id, user):
    """Commissioner override: clear every owner on the board, locked or not"""
    if not user.is_admin:
        raise Forbidden('not_authorized')
    board = get_squares_board(board_id)

    cleared = db.session.execute(
        update(Square)
        .where(Square.board_id == board.id, Square.user_id.isnot(None))
        .values(user_id=None)
        .execution_options(synchronize_session=False)
    ).rowcount
    db.session.commit()

    print(f"[Squares] Board {board.id} reset by admin {user.id}, {cleared} squares cleared")
    return cleared


def winning_square(board_id, home_axis, away_axis, home_score, away_score):
    """Look up the square that wins for a final score"""
    board = get_squares_board(board_id)

    home_score = parse_int_param(home_score)
    away_score = parse_int_param(away_score)
    if home_score is None or away_score is None:
        raise InvalidInput('invalid_score')

    try:
        row, col = get_winning_indexes(home_axis, away_axis, home_score, away_score)
    except ValueError:
        raise InvalidInput('invalid_axis')

    ensure_grid(board.id)
    return get_square(board.id, row, col)
