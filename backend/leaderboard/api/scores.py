from flask import Blueprint, current_app, jsonify, request
from werkzeug.exceptions import BadRequest

from leaderboard.errors import MalformedBody, UnsupportedMediaType
from leaderboard.main import get_store
from leaderboard.services.scores.reconcile import submit_score as svc_submit_score
from leaderboard.services.scores.validation import validate_submission


scores = Blueprint('scores', __name__)


@scores.route('/leaderboard', methods=['GET'])
def get_leaderboard():
    current_app.logger.info('[leaderboard] fetching all scores')
    records = get_store().leaderboard()
    current_app.logger.info(f"[leaderboard] fetched {len(records)} scores")
    return jsonify({'success': True, 'results': [r.to_dict() for r in records]})


@scores.route('/scores', methods=['POST'])
def submit_score():
    content_type = request.headers.get('Content-Type') or ''
    if 'application/json' not in content_type:
        raise UnsupportedMediaType('Request body must be JSON')
    try:
        payload = request.get_json(force=True)
    except BadRequest:
        raise MalformedBody('Invalid JSON body')

    submission = validate_submission(payload)
    current_app.logger.info(
        f"[score] processing name={submission.name} score={submission.score_value} time={submission.time_score}"
    )

    result = svc_submit_score(get_store(), submission)
    previous = result.previous
    current_app.logger.info(
        f"[score] name={submission.name} outcome={result.outcome.name} "
        f"from=({previous.score_value if previous else None}, {previous.time_score if previous else None}) "
        f"to=({result.record.score_value}, {result.record.time_score})"
    )
    return jsonify({'success': True, 'message': result.outcome.message})
