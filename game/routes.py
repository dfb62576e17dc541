"""
REST API routes for Ecclesia.
Session identity and end-of-session reports; gameplay runs over Socket.IO.
"""

import logging
from flask import Blueprint, current_app, request, jsonify

from session_store import SessionStore, StudentSession, get_default_session_store

logger = logging.getLogger(__name__)

api = Blueprint('api', __name__, url_prefix='/api')


def get_store() -> SessionStore:
    """The app's configured store, created on first use."""
    store = current_app.config.get('SESSION_STORE')
    if store is None:
        store = get_default_session_store()
        current_app.config['SESSION_STORE'] = store
    return store


# ==================== Health Check ====================

@api.route('/health', methods=['GET'])
def health():
    return jsonify({'status': 'ok'})


# ==================== Sessions ====================

@api.route('/sessions', methods=['POST'])
def create_session():
    data = request.get_json(silent=True) or {}
    full_name = (data.get('fullName') or '').strip()
    email = (data.get('email') or '').strip()

    if not full_name or not email:
        return jsonify({'error': 'Missing required fields'}), 400

    try:
        session = get_store().save(StudentSession.create(full_name, email))
        return jsonify(session.to_dict()), 201
    except Exception as e:
        logger.error(f"Create session error: {e}")
        return jsonify({'error': 'Failed to create session'}), 500


@api.route('/sessions/<session_id>', methods=['GET'])
def load_session(session_id):
    try:
        session = get_store().load(session_id)
        if not session:
            return jsonify({'error': 'Session not found'}), 404
        return jsonify(session.to_dict())
    except Exception as e:
        logger.error(f"Load session error: {e}")
        return jsonify({'error': 'Failed to load session'}), 500


@api.route('/sessions/<session_id>/complete', methods=['POST'])
def complete_session(session_id):
    try:
        if not get_store().mark_completed(session_id):
            return jsonify({'error': 'Session not found'}), 404
        return jsonify({'success': True})
    except Exception as e:
        logger.error(f"Complete session error: {e}")
        return jsonify({'error': 'Failed to complete session'}), 500


# ==================== Reports ====================

@api.route('/sessions/<session_id>/report', methods=['POST'])
def save_report(session_id):
    report = request.get_json(silent=True)
    if not report:
        return jsonify({'error': 'Missing report'}), 400

    try:
        if not get_store().save_report(session_id, report):
            return jsonify({'error': 'Session not found'}), 404
        return jsonify({'success': True})
    except Exception as e:
        logger.error(f"Save report error: {e}")
        return jsonify({'error': 'Failed to save report'}), 500


@api.route('/sessions/<session_id>/report', methods=['GET'])
def load_report(session_id):
    try:
        report = get_store().load_report(session_id)
        if report is None:
            return jsonify({'error': 'Report not found'}), 404
        return jsonify(report)
    except Exception as e:
        logger.error(f"Load report error: {e}")
        return jsonify({'error': 'Failed to load report'}), 500
