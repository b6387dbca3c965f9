from flask import jsonify, request
from werkzeug.exceptions import HTTPException

API_PREFIX = '/api/'


class LeaderboardError(Exception):
    """Base error rendered as ``{"success": false, "error": message}``."""
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInput(LeaderboardError):
    status_code = 400


class UnsupportedMediaType(LeaderboardError):
    status_code = 415


class MalformedBody(LeaderboardError):
    status_code = 400


class NotFound(LeaderboardError):
    status_code = 404

    @classmethod
    def for_request(cls, method: str, path: str) -> 'NotFound':
        if path.startswith(API_PREFIX):
            return cls(f'API Endpoint Not Found: {method} {path}')
        return cls('Not Found')


class ServiceUnavailable(LeaderboardError):
    status_code = 500


class StorageError(LeaderboardError):
    status_code = 500

    def __init__(self, detail: str):
        super().__init__(f'Database error: {detail}')
        self.detail = detail


def error_response(message: str, status_code: int):
    return jsonify({'success': False, 'error': message}), status_code


def register_error_handlers(app) -> None:
    @app.errorhandler(LeaderboardError)
    def handle_leaderboard_error(exc: LeaderboardError):
        if exc.status_code >= 500:
            app.logger.error(f"[error] {request.method} {request.path} -> {exc.status_code}: {exc.message}")
        else:
            app.logger.warning(f"[rejected] {request.method} {request.path} -> {exc.status_code}: {exc.message}")
        return error_response(exc.message, exc.status_code)

    @app.errorhandler(HTTPException)
    def handle_http_exception(exc: HTTPException):
        # Unknown routes and wrong methods on known routes are both "not found"
        if exc.code in (404, 405):
            return handle_leaderboard_error(NotFound.for_request(request.method, request.path))
        return error_response(exc.description or exc.name, exc.code or 500)

    @app.errorhandler(Exception)
    def handle_unexpected(exc: Exception):
        app.logger.exception(f"[error] unhandled failure on {request.method} {request.path}")
        return error_response(f'Internal Server Error: {exc}', 500)
