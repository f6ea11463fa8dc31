from sqlalchemy import func

from models import db, dialect_insert, Square, GRID_SIZE, TOTAL_SQUARES


def ensure_grid(board_id, commit=True):
    """
    Make sure the board has its 100 squares.

    Rows that already exist are skipped by ON CONFLICT DO NOTHING on the
    (board_id, row, col) constraint, so concurrent callers can both insert
    without duplicates or errors. Returns the number of rows inserted.
    """
    existing = db.session.query(func.count(Square.id)).filter(Square.board_id == board_id).scalar()
    if existing >= TOTAL_SQUARES:
        return 0

    rows = [
        {'board_id': board_id, 'row': row, 'col': col}
        for row in range(GRID_SIZE)
        for col in range(GRID_SIZE)
    ]
    stmt = dialect_insert(Square).on_conflict_do_nothing(index_elements=['board_id', 'row', 'col'])
    result = db.session.execute(stmt, rows)

    if commit:
        db.session.commit()

    inserted = max(result.rowcount or 0, 0)
    print(f"[Grid] Materialized board {board_id}: {existing} existing, {inserted} inserted")
    return inserted
