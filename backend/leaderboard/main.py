from flask import Blueprint, current_app, jsonify, request
from leaderboard import STORE_EXTENSION_KEY
from leaderboard.errors import ServiceUnavailable

main = Blueprint('main', __name__)


def get_store():
    store = current_app.extensions.get(STORE_EXTENSION_KEY)
    if store is None:
        raise ServiceUnavailable('Database binding not configured')
    return store


@main.before_app_request
def short_circuit():
    # Preflight: Flask-CORS decorates the empty response on the way out
    if request.method == 'OPTIONS':
        return current_app.response_class(status=200)
    # Liveness probe on any path
    if request.method == 'HEAD':
        return current_app.response_class(status=200)
    if current_app.extensions.get(STORE_EXTENSION_KEY) is None:
        current_app.logger.error('[startup] score store binding not found')
        raise ServiceUnavailable('Database binding not configured')


@main.route('/')
def index():
    return jsonify({'success': True, 'message': 'Leaderboard API is up. Try /api/leaderboard'})
