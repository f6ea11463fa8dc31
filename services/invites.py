import secrets
from datetime import timedelta

from sqlalchemy import update

from models import db, dialect_insert, BoardInvite, BoardMember
from utils.helpers import utcnow, normalize_email, is_valid_email
from .access import require_board_admin
from .boards import get_board_or_404
from .errors import InvalidInput, Forbidden, NotFound
from .grid import ensure_grid

INVITE_TOKEN_BYTES = 32  # 64 hex chars
INVITE_EXPIRY_DAYS = 7
MIN_TOKEN_LENGTH = 20


def generate_invite_token():
    """Generate a secure invitation token"""
    return secrets.token_hex(INVITE_TOKEN_BYTES)


def create_invite(board_id, email, user):
    """Issue an invite bound to email, valid for 7 days"""
    board = get_board_or_404(board_id)
    require_board_admin(user, board)

    email = normalize_email(email) if isinstance(email, str) else ''
    if not email or not is_valid_email(email):
        raise InvalidInput('invalid_email')

    invite = BoardInvite(
        board_id=board.id,
        email=email,
        token=generate_invite_token(),
        expires_at=utcnow() + timedelta(days=INVITE_EXPIRY_DAYS),
    )
    db.session.add(invite)
    db.session.commit()

    print(f"[Invites] Invite {invite.id} for {email} on board {board.id} expires {invite.expires_at}")
    return invite


def find_valid_invite(token):
    """Return the invite for token if it is unused and unexpired, else None"""
    if not isinstance(token, str) or len(token) < MIN_TOKEN_LENGTH:
        return None

    invite = BoardInvite.query.filter_by(token=token).first()
    if not invite:
        return None
    if invite.used_at is not None:
        return None
    if invite.expires_at <= utcnow():
        return None
    return invite


def accept_invite(token, user):
    """
    Consume an invite and join its board.

    Marking the invite used, creating the membership and materializing the
    grid happen in one transaction. The used_at IS NULL guard makes the
    consumption a compare-and-set, so only one acceptance can win.
    """
    invite = find_valid_invite(token)
    if not invite:
        raise NotFound('invite_invalid')

    if invite.email.lower() != user.email.lower():
        raise Forbidden('invite_email_mismatch')

    board_id = invite.board_id
    try:
        consumed = db.session.execute(
            update(BoardInvite)
            .where(BoardInvite.id == invite.id, BoardInvite.used_at.is_(None))
            .values(used_at=utcnow())
            .execution_options(synchronize_session=False)
        ).rowcount
        if consumed == 0:
            raise NotFound('invite_invalid')

        # Existing members keep their role
        db.session.execute(
            dialect_insert(BoardMember)
            .values(board_id=board_id, user_id=user.id, role='MEMBER', created_at=utcnow())
            .on_conflict_do_nothing(index_elements=['board_id', 'user_id'])
        )

        if invite.board.board_type == 'SQUARES':
            ensure_grid(board_id, commit=False)

        db.session.commit()
    except Exception:
        db.session.rollback()
        raise

    print(f"[Invites] User {user.id} joined board {board_id} via invite {invite.id}")
    return board_id


def revoke_invite(invite_id, board_id, user):
    """
    Delete an unused invite of the board.

    Missing, foreign and used invites all produce the same NotFound so the
    response does not reveal token state.
    """
    board = get_board_or_404(board_id)
    require_board_admin(user, board)

    deleted = BoardInvite.query.filter(
        BoardInvite.id == invite_id,
        BoardInvite.board_id == board.id,
        BoardInvite.used_at.is_(None),
    ).delete(synchronize_session=False)
    if deleted == 0:
        db.session.rollback()
        raise NotFound('invite_not_found_or_used')

    db.session.commit()
    print(f"[Invites] Invite {invite_id} on board {board.id} revoked by user {user.id}")


def list_pending_invites(board_id, user):
    board = get_board_or_404(board_id)
    require_board_admin(user, board)
    return (
        BoardInvite.query.filter(
            BoardInvite.board_id == board.id,
            BoardInvite.used_at.is_(None),
            BoardInvite.expires_at > utcnow(),
        )
        .order_by(BoardInvite.created_at.desc(), BoardInvite.id.desc())
        .all()
    )
