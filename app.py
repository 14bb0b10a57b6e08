import logging
import os
from types import SimpleNamespace

from flask import Flask, jsonify, request
from flask_migrate import Migrate
from werkzeug.exceptions import HTTPException

from config import get_config
from models import db, TABLES, User
from services import (
    TripError,
    StoreClient,
    IdentityProvider,
    MealCatalog,
    IngredientLedger,
    LinenLedger,
    ArrivalLedger,
)

migrate = Migrate()


def _configure_logging(app):
    """Simple, consistent logging for the app and the services."""
    level = logging.DEBUG if app.debug else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s %(levelname)s [%(name)s] %(message)s',
    )
    app.logger.setLevel(level)


def _init_services(app):
    """Wire the store, identity provider and ledgers for this app."""
    store = StoreClient(db, TABLES)
    identity = IdentityProvider(store, User)
    catalog = MealCatalog(store)
    app.extensions['trip'] = SimpleNamespace(
        store=store,
        identity=identity,
        catalog=catalog,
        ingredients=IngredientLedger(store, catalog, identity),
        linens=LinenLedger(store, identity, unit_price=app.config['LINEN_UNIT_PRICE']),
        arrivals=ArrivalLedger(store, identity),
    )


def _register_error_handlers(app):

    @app.errorhandler(TripError)
    def _trip_error(err):
        payload = {'error_code': err.error_code, 'message': err.message}
        field = getattr(err, 'field', None)
        if field:
            payload['field'] = field
        return jsonify(payload), err.status_code

    @app.errorhandler(HTTPException)
    def _http_error(err):
        # API callers get JSON; anything else keeps the default page
        if request.path.startswith(('/api/', '/auth/')):
            return jsonify(error_code='http_error', message=err.description), err.code
        return err


def create_app(env=None):
    """Application factory."""
    app = Flask(__name__)
    app.config.from_object(get_config(env))

    db.init_app(app)
    migrate.init_app(app, db)

    _configure_logging(app)
    _init_services(app)
    _register_error_handlers(app)

    from routes.auth import auth_bp
    from routes.api import api_bp
    app.register_blueprint(auth_bp)
    app.register_blueprint(api_bp)

    from commands import trip_group
    app.cli.add_command(trip_group)

    @app.get('/healthz')
    def healthz():
        return {'status': 'ok'}, 200

    return app


def init_db(app):
    with app.app_context():
        # Enable SQLite foreign key enforcement
        from sqlalchemy import event
        from sqlalchemy.engine import Engine
        import sqlite3

        @event.listens_for(Engine, 'connect')
        def set_sqlite_pragma(dbapi_connection, connection_record):
            if isinstance(dbapi_connection, sqlite3.Connection):
                cursor = dbapi_connection.cursor()
                cursor.execute('PRAGMA foreign_keys=ON')
                cursor.close()

        db.create_all()


if __name__ == '__main__':
    app = create_app()
    init_db(app)
    # host='0.0.0.0' allows access from other devices on the network
    app.run(debug=app.debug, host='0.0.0.0', port=int(os.environ.get('PORT', 5000)), use_reloader=False)
