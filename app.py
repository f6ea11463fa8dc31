#!/usr/bin/env python3
"""
Pool Boards - Super Bowl squares and prop-bet pools
A Flask JSON API for running pool games with boards, invites, memberships and edit locks.
"""

import os
from dotenv import load_dotenv
from flask import Flask
from flask_migrate import Migrate

from models import db
from utils.banner import print_startup_banner
from routes import register_blueprints, register_error_handlers

# Load environment variables from .env file
load_dotenv()

def create_app(test_config=None):
    """Application factory pattern"""
    app = Flask(__name__)

    # Configuration
    app.config['SECRET_KEY'] = os.environ.get('SECRET_KEY', 'dev-secret-key-change-in-production')
    app.config['SQLALCHEMY_DATABASE_URI'] = os.environ.get('DATABASE_URL', 'sqlite:///pool_boards.db')
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False
    app.config['BASE_URL'] = os.environ.get('BASE_URL', 'http://localhost:5000')
    app.json.sort_keys = False

    if test_config:
        app.config.update(test_config)

    # Handle PostgreSQL URL format for SQLAlchemy 2.0+
    if app.config['SQLALCHEMY_DATABASE_URI'].startswith('postgres://'):
        app.config['SQLALCHEMY_DATABASE_URI'] = (
            app.config['SQLALCHEMY_DATABASE_URI'].replace('postgres://', 'postgresql://', 1)
        )

    print_startup_banner(app)

    # Initialize extensions
    db.init_app(app)
    Migrate(app, db)

    register_blueprints(app)
    register_error_handlers(app)

    # Database migrations are handled by Flask-Migrate
    # Run: flask db upgrade (in production)

    return app

if __name__ == '__main__':
    create_app().run(debug=True, host='0.0.0.0', port=5000)
