from flask import jsonify
from sqlalchemy.exc import SQLAlchemyError
from models import db
from services.errors import BoardError
from utils import t
from .auth import auth_bp
from .boards import boards_bp
from .squares import squares_bp
from .props import props_bp
from .admin import admin_bp

def register_blueprints(app):
    """Register all blueprints with the Flask app"""
    app.register_blueprint(auth_bp)
    app.register_blueprint(boards_bp)
    app.register_blueprint(squares_bp)
    app.register_blueprint(props_bp)
    app.register_blueprint(admin_bp)

def register_error_handlers(app):
    """Render engine failures as {"error": message} with their status"""

    @app.errorhandler(BoardError)
    def handle_board_error(error):
        return jsonify({'error': t(error.key, **error.params)}), error.status

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(error):
        db.session.rollback()
        print(f"[Database] Unexpected error: {error}")
        return jsonify({'error': t('internal_error')}), 500
