import itertools
import threading

import pytest
from werkzeug.security import generate_password_hash

from app import create_app
from models import db, User, BoardMember
from services import create_board


@pytest.fixture
def app(tmp_path):
    """App on a throwaway SQLite file; the app context stays pushed for the test"""
    app = create_app({
        'TESTING': True,
        'SECRET_KEY': 'test-secret',
        'SQLALCHEMY_DATABASE_URI': f"sqlite:///{tmp_path / 'pool_boards_test.db'}",
        'SQLALCHEMY_ENGINE_OPTIONS': {'connect_args': {'check_same_thread': False, 'timeout': 30}},
        'BASE_URL': 'http://pools.test',
    })
    with app.app_context():
        db.create_all()
        yield app
        db.session.remove()
        db.drop_all()


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def make_user(app):
    counter = itertools.count(1)

    def _make_user(email=None, is_admin=False):
        n = next(counter)
        user = User(
            email=email or f'player{n}@example.com',
            password_hash=generate_password_hash('password123'),
            first_name=f'Player{n}',
            is_admin=is_admin,
        )
        db.session.add(user)
        db.session.commit()
        return user

    return _make_user


@pytest.fixture
def make_board(make_user):
    def _make_board(owner=None, board_type='SQUARES', **settings):
        owner = owner or make_user()
        board = create_board('Super Bowl LXI', owner, board_type)
        for key, value in settings.items():
            setattr(board, key, value)
        db.session.commit()
        return board

    return _make_board


@pytest.fixture
def join_board():
    def _join_board(board, user, role='MEMBER'):
        member = BoardMember(board_id=board.id, user_id=user.id, role=role)
        db.session.add(member)
        db.session.commit()
        return member

    return _join_board


@pytest.fixture
def login(client):
    def _login(user):
        with client.session_transaction() as sess:
            sess['user_id'] = user.id

    return _login


@pytest.fixture
def run_concurrently(app):
    """Run target(i) for i in range(count) on threads released together.

    Each thread gets its own app context and therefore its own database
    session. Returns (results, errors).
    """
    def _run(count, target):
        barrier = threading.Barrier(count)
        lock = threading.Lock()
        results, errors = [], []

        def worker(i):
            with app.app_context():
                barrier.wait()
                try:
                    outcome = target(i)
                except Exception as e:
                    db.session.rollback()
                    with lock:
                        errors.append(e)
                else:
                    with lock:
                        results.append(outcome)

        # Nothing from the test's own session may hold the database open
        db.session.commit()
        threads = [threading.Thread(target=worker, args=(i,)) for i in range(count)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()
        db.session.expire_all()
        return results, errors

    return _run
