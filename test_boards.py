from datetime import datetime

import pytest

from models import db, User, Board, BoardInvite, BoardMember, Square
from services import (create_board, update_board, delete_board, list_user_boards, list_members,
                      remove_member, claim_square, create_invite)
from services.errors import Conflict, Forbidden, InvalidInput, NotAMember, NotFound


def test_creator_becomes_owner(make_user):
    creator = make_user()

    board = create_board('  Office pool  ', creator)

    assert board.name == 'Office pool'
    assert board.board_type == 'SQUARES'
    assert board.is_editable is True
    membership = BoardMember.query.filter_by(board_id=board.id).one()
    assert (membership.user_id, membership.role) == (creator.id, 'OWNER')


@pytest.mark.parametrize('name, board_type', [('', 'SQUARES'), ('   ', 'PROPS'), (None, 'SQUARES'), ('Pool', 'BINGO')])
def test_create_board_validation(make_user, name, board_type):
    with pytest.raises(InvalidInput):
        create_board(name, make_user(), board_type)


def test_last_owner_cannot_be_removed(make_board, make_user, join_board):
    board = make_board()
    co_admin = make_user()
    join_board(board, co_admin, role='ADMIN')

    with pytest.raises(Conflict) as exc:
        remove_member(board.id, board.created_by_id, co_admin)

    assert exc.value.key == 'last_owner'
    assert BoardMember.query.filter_by(board_id=board.id, role='OWNER').count() == 1


def test_non_last_owner_can_be_removed(make_board, make_user, join_board):
    board = make_board()
    second_owner = make_user()
    join_board(board, second_owner, role='OWNER')

    remove_member(board.id, second_owner.id, board.created_by)

    assert BoardMember.query.filter_by(board_id=board.id, role='OWNER').count() == 1


def test_owners_removing_each_other_leave_one_owner(make_board, make_user, join_board, run_concurrently):
    board = make_board()
    second_owner = make_user()
    join_board(board, second_owner, role='OWNER')
    board_id, owner_ids = board.id, [board.created_by_id, second_owner.id]

    def remove_the_other(i):
        actor = db.session.get(User, owner_ids[i])
        return remove_member(board_id, owner_ids[1 - i], actor)

    results, errors = run_concurrently(2, remove_the_other)

    assert len(results) == 1
    assert len(errors) == 1
    assert isinstance(errors[0], (Conflict, NotAMember))
    assert BoardMember.query.filter_by(board_id=board_id, role='OWNER').count() == 1


@pytest.mark.parametrize('role', ['ADMIN', 'MEMBER'])
def test_admins_and_members_can_be_removed(make_board, make_user, join_board, role):
    board = make_board()
    member = make_user()
    join_board(board, member, role=role)

    remove_member(board.id, member.id, board.created_by)

    assert BoardMember.query.filter_by(board_id=board.id, user_id=member.id).count() == 0


def test_removed_member_loses_squares(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)
    claim_square(board.id, 0, 0, player)
    claim_square(board.id, 5, 5, player)

    assert remove_member(board.id, player.id, board.created_by) == 2
    assert Square.query.filter_by(board_id=board.id, user_id=player.id).count() == 0


def test_cannot_remove_yourself(make_board):
    board = make_board()
    with pytest.raises(Conflict) as exc:
        remove_member(board.id, board.created_by_id, board.created_by)
    assert exc.value.key == 'cannot_remove_self'


def test_remove_unknown_member_is_not_found(make_board, make_user):
    board = make_board()
    with pytest.raises(NotFound):
        remove_member(board.id, make_user().id, board.created_by)


def test_members_cannot_remove_others(make_board, make_user, join_board):
    board = make_board()
    member, other = make_user(), make_user()
    join_board(board, member)
    join_board(board, other)

    with pytest.raises(Forbidden):
        remove_member(board.id, other.id, member)


def test_member_roster_lists_owners_first(make_board, make_user, join_board):
    board = make_board()
    join_board(board, make_user(), role='MEMBER')
    join_board(board, make_user(), role='ADMIN')

    roles = [m.role for m in list_members(board.id, board.created_by)]

    assert roles == ['OWNER', 'ADMIN', 'MEMBER']


def test_update_board_settings(make_board):
    board = make_board()

    update_board(board.id, board.created_by, {
        'name': 'Renamed',
        'is_editable': True,
        'editable_until': '2027-02-14T23:30:00Z',
        'max_squares_per_email': 10,
    })

    board = db.session.get(Board, board.id)
    assert board.name == 'Renamed'
    assert board.editable_until == datetime(2027, 2, 14, 23, 30)
    assert board.max_squares_per_email == 10

    update_board(board.id, board.created_by, {'editable_until': None, 'max_squares_per_email': None})
    assert board.editable_until is None
    assert board.max_squares_per_email is None


def test_editable_until_offsets_are_stored_as_utc(make_board):
    board = make_board()
    update_board(board.id, board.created_by, {'editable_until': '2027-02-14T18:30:00-05:00'})
    assert board.editable_until == datetime(2027, 2, 14, 23, 30)


@pytest.mark.parametrize('changes', [
    {'name': ''},
    {'is_editable': 'yes'},
    {'editable_until': 'next sunday'},
    {'max_squares_per_email': 0},
    {'max_squares_per_email': 101},
    {'max_squares_per_email': '5'},
])
def test_update_board_validation(make_board, changes):
    board = make_board()
    with pytest.raises(InvalidInput):
        update_board(board.id, board.created_by, changes)


def test_members_cannot_update_board(make_board, make_user, join_board):
    board = make_board()
    member = make_user()
    join_board(board, member)

    with pytest.raises(Forbidden):
        update_board(board.id, member, {'name': 'Mine now'})


def test_delete_board_cascades(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)
    claim_square(board.id, 3, 3, player)
    create_invite(board.id, 'friend@example.com', board.created_by)
    board_id = board.id

    delete_board(board_id, board.created_by)

    assert db.session.get(Board, board_id) is None
    assert Square.query.filter_by(board_id=board_id).count() == 0
    assert BoardMember.query.filter_by(board_id=board_id).count() == 0
    assert BoardInvite.query.filter_by(board_id=board_id).count() == 0


def test_only_owner_or_global_admin_deletes(make_board, make_user, join_board):
    board = make_board()
    co_admin = make_user()
    join_board(board, co_admin, role='ADMIN')

    with pytest.raises(Forbidden):
        delete_board(board.id, co_admin)

    delete_board(board.id, make_user(is_admin=True))
    assert Board.query.count() == 0


def test_list_user_boards_reports_lock_state(make_board, make_user, join_board):
    player = make_user()
    open_board = make_board()
    locked_board = make_board(is_editable=False)
    join_board(open_board, player)
    join_board(locked_board, player, role='ADMIN')

    boards = {entry['board'].id: entry for entry in list_user_boards(player)}

    assert boards[open_board.id]['can_edit'] is True
    assert boards[locked_board.id]['can_edit'] is False
    assert boards[locked_board.id]['role'] == 'ADMIN'


def test_board_endpoints(client, login, make_user):
    creator = make_user()
    login(creator)

    response = client.post('/boards', json={'name': 'Family pool', 'type': 'PROPS'})
    assert response.status_code == 201
    board = response.get_json()['board']
    assert board['type'] == 'PROPS'
    assert board['can_edit'] is True

    response = client.put(f"/boards/{board['id']}", json={'is_editable': False})
    assert response.status_code == 200
    assert response.get_json()['board']['can_edit'] is False

    response = client.get('/boards')
    assert [entry['role'] for entry in response.get_json()['boards']] == ['OWNER']

    response = client.delete(f"/boards/{board['id']}")
    assert response.status_code == 200
    assert client.delete(f"/boards/{board['id']}").status_code == 404
