import pytest

from models import db, User, Square
from services import ensure_grid, claim_square, release_square, reset_board, list_squares, winning_square
from services.errors import Conflict, InvalidInput, Forbidden, NotFound, NotAMember


def owner_of(board_id, row, col):
    return Square.query.filter_by(board_id=board_id, row=row, col=col).one().user_id


def test_ensure_grid_creates_exactly_100_squares(make_board):
    board = make_board()

    ensure_grid(board.id)
    assert ensure_grid(board.id) == 0
    ensure_grid(board.id)

    squares = Square.query.filter_by(board_id=board.id).all()
    assert len(squares) == 100
    assert {(s.row, s.col) for s in squares} == {(r, c) for r in range(10) for c in range(10)}


def test_ensure_grid_fills_in_a_partial_grid(make_board):
    board = make_board()
    db.session.add(Square(board_id=board.id, row=3, col=7))
    db.session.commit()

    ensure_grid(board.id)
    assert Square.query.filter_by(board_id=board.id).count() == 100


def test_concurrent_materialization_never_duplicates(make_board, run_concurrently):
    board_id = make_board().id

    results, errors = run_concurrently(8, lambda i: ensure_grid(board_id))

    assert errors == []
    assert len(results) == 8
    assert Square.query.filter_by(board_id=board_id).count() == 100


def test_claim_open_square(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)

    square = claim_square(board.id, 2, 5, player)

    assert (square.row, square.col, square.user_id) == (2, 5, player.id)
    assert Square.query.filter_by(board_id=board.id).count() == 100


def test_claimed_square_is_never_overwritten(make_board, make_user, join_board):
    board = make_board()
    first, second = make_user(), make_user()
    join_board(board, first)
    join_board(board, second)

    claim_square(board.id, 0, 0, first)
    with pytest.raises(Conflict) as exc:
        claim_square(board.id, 0, 0, second)

    assert exc.value.key == 'square_already_claimed'
    assert owner_of(board.id, 0, 0) == first.id


def test_only_one_of_many_concurrent_claims_wins(make_board, make_user, join_board, run_concurrently):
    board = make_board()
    ensure_grid(board.id)
    user_ids = []
    for _ in range(8):
        player = make_user()
        join_board(board, player)
        user_ids.append(player.id)
    board_id = board.id

    def claim(i):
        return claim_square(board_id, 4, 4, db.session.get(User, user_ids[i])).user_id

    results, errors = run_concurrently(8, claim)

    assert len(results) == 1
    assert len(errors) == 7
    assert all(isinstance(e, Conflict) for e in errors)
    assert owner_of(board_id, 4, 4) == results[0]


@pytest.mark.parametrize('row, col', [(10, 0), (0, 10), (-1, 3), ('1', 2), (1.0, 2), (True, 0), (None, 1)])
def test_claim_rejects_bad_coordinates(make_board, row, col):
    board = make_board()
    with pytest.raises(InvalidInput):
        claim_square(board.id, row, col, board.created_by)


def test_claim_requires_membership(make_board, make_user):
    board = make_board()
    with pytest.raises(NotAMember):
        claim_square(board.id, 0, 0, make_user())


def test_claim_on_props_board_is_rejected(make_board):
    board = make_board(board_type='PROPS')
    with pytest.raises(InvalidInput) as exc:
        claim_square(board.id, 0, 0, board.created_by)
    assert exc.value.key == 'board_not_squares'


def test_claim_limit_and_admin_reset(make_board, make_user, join_board):
    board = make_board(is_editable=True, editable_until=None, max_squares_per_email=2)
    player = make_user()
    join_board(board, player)
    commissioner = make_user(is_admin=True)

    claim_square(board.id, 0, 0, player)
    claim_square(board.id, 0, 1, player)
    with pytest.raises(Conflict) as exc:
        claim_square(board.id, 0, 2, player)
    assert exc.value.key == 'square_limit_reached'
    assert owner_of(board.id, 0, 2) is None

    board.is_editable = False
    db.session.commit()

    assert reset_board(board.id, commissioner) == 2
    assert Square.query.filter_by(board_id=board.id, user_id=player.id).count() == 0


def test_global_admin_ignores_square_limit_and_lock(make_board, make_user):
    board = make_board(max_squares_per_email=1, is_editable=False)
    commissioner = make_user(is_admin=True)

    claim_square(board.id, 1, 1, commissioner)
    claim_square(board.id, 1, 2, commissioner)

    assert Square.query.filter_by(board_id=board.id, user_id=commissioner.id).count() == 2


def test_release_own_square(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)
    claim_square(board.id, 6, 6, player)

    release_square(board.id, 6, 6, player)

    assert owner_of(board.id, 6, 6) is None


def test_release_someone_elses_square_is_a_conflict(make_board, make_user, join_board):
    board = make_board()
    first, second = make_user(), make_user()
    join_board(board, first)
    join_board(board, second)
    claim_square(board.id, 6, 6, first)

    with pytest.raises(Conflict) as exc:
        release_square(board.id, 6, 6, second)

    assert exc.value.key == 'square_not_claimed_by_you'
    assert owner_of(board.id, 6, 6) == first.id


def test_release_on_locked_board_is_rejected_for_players(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)
    claim_square(board.id, 6, 6, player)
    board.is_editable = False
    db.session.commit()

    with pytest.raises(Conflict) as exc:
        release_square(board.id, 6, 6, player)
    assert exc.value.key == 'board_locked'


def test_admin_releases_any_square_on_locked_board(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)
    claim_square(board.id, 6, 6, player)
    board.is_editable = False
    db.session.commit()

    release_square(board.id, 6, 6, make_user(is_admin=True))

    assert owner_of(board.id, 6, 6) is None


def test_admin_release_without_grid_is_not_found(make_board, make_user):
    board = make_board()
    with pytest.raises(NotFound):
        release_square(board.id, 0, 0, make_user(is_admin=True))


def test_only_global_admins_reset(make_board):
    board = make_board()
    with pytest.raises(Forbidden):
        reset_board(board.id, board.created_by)


def test_list_squares_materializes_in_order(make_board):
    board = make_board()

    squares = list_squares(board.id)

    assert len(squares) == 100
    assert [(s.row, s.col) for s in squares[:3]] == [(0, 0), (0, 1), (0, 2)]
    assert (squares[-1].row, squares[-1].col) == (9, 9)


def test_winning_square_follows_axes(make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)
    home_axis = [3, 8, 1, 0, 5, 2, 9, 6, 4, 7]
    away_axis = list(range(10))
    claim_square(board.id, 9, 4, player)

    square = winning_square(board.id, home_axis, away_axis, 27, 24)

    assert (square.row, square.col, square.user_id) == (9, 4, player.id)


def test_winning_square_rejects_bad_axis(make_board):
    board = make_board()
    with pytest.raises(InvalidInput) as exc:
        winning_square(board.id, [0] * 10, list(range(10)), 7, 3)
    assert exc.value.key == 'invalid_axis'


def test_grid_endpoint_is_public(client, make_board):
    board = make_board()

    response = client.get(f'/boards/{board.id}/squares')

    assert response.status_code == 200
    data = response.get_json()
    assert data['board']['id'] == board.id
    assert len(data['squares']) == 100
    assert data['squares'][0] == {'row': 0, 'col': 0, 'user': None}


def test_claim_endpoint(client, login, make_board, make_user, join_board):
    board = make_board()
    player = make_user()
    join_board(board, player)

    response = client.post(f'/boards/{board.id}/squares', json={'row': 1, 'col': 2})
    assert response.status_code == 401
    assert response.get_json() == {'error': 'Not authenticated'}

    login(player)
    response = client.post(f'/boards/{board.id}/squares', json={'row': 1, 'col': 2})
    assert response.status_code == 200
    assert response.get_json()['square']['user']['id'] == player.id

    response = client.post(f'/boards/{board.id}/squares', json={'row': 1, 'col': 2})
    assert response.status_code == 409
    assert response.get_json() == {'error': 'Square already claimed'}

    response = client.delete(f'/boards/{board.id}/squares', json={'row': 1, 'col': 2})
    assert response.status_code == 200


def test_claim_endpoint_rejects_bad_cell(client, login, make_board):
    board = make_board()
    login(board.created_by)

    response = client.post(f'/boards/{board.id}/squares', json={'row': 'a', 'col': 2})

    assert response.status_code == 400
    assert response.get_json() == {'error': 'Invalid row/col'}
