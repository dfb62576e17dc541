#!/usr/bin/env python3
"""
Ecclesia Game Server

Unified Python server that handles:
- Static file serving (frontend build)
- REST API endpoints (session identity, reports)
- Socket.IO for real-time gameplay, one engine per connection
"""

# Gevent monkey patching must happen first
from gevent import monkey
monkey.patch_all()

import os
import logging
from flask import Flask, request, send_from_directory
from flask_socketio import SocketIO, emit

from config import get_session_configuration
from game_api import GameSession, MessageType, emit as make_message

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


# Determine static files directory
STATIC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), 'static')

app = Flask(__name__, static_folder=STATIC_DIR, static_url_path='')
app.config['SECRET_KEY'] = os.environ.get('SESSION_SECRET') or os.urandom(24).hex()

# Register REST API routes
from routes import api, get_store
app.register_blueprint(api)

socketio = SocketIO(
    app,
    cors_allowed_origins="*",
    async_mode='gevent',
    ping_timeout=60,
    ping_interval=25
)


# ==================== Static File Serving ====================

@app.route('/')
def serve_index():
    """Serve the frontend's index.html."""
    return send_from_directory(STATIC_DIR, 'index.html')


@app.route('/<path:path>')
def serve_static(path):
    """Serve static files, falling back to index.html for SPA routing."""
    file_path = os.path.join(STATIC_DIR, path)
    if os.path.isfile(file_path):
        return send_from_directory(STATIC_DIR, path)
    return send_from_directory(STATIC_DIR, 'index.html')


# ==================== Gameplay ====================

sessions = {}


def send_all(messages):
    for msg in messages:
        emit('message', msg)


def get_session(sid):
    """Get session or emit error"""
    if sid not in sessions:
        emit('message', make_message(MessageType.ERROR, {'message': 'Session not found'}))
        return None
    return sessions[sid]


def make_pusher(sid):
    """Timer callbacks run outside the request context, so address the client's room directly."""
    def push(message):
        socketio.emit('message', message, to=sid)
    return push


@socketio.on('connect')
def handle_connect():
    """Handle new client connection - wait for init event"""
    logger.info(f"Client connected: {request.sid}")


@socketio.on('init')
def handle_init(data=None):
    """Create an engine for this connection and present the first event"""
    sid = request.sid
    session_id = (data or {}).get('session_id')
    logger.info(f"Initializing game for {sid} (session: {session_id or 'anonymous'})")

    if sid in sessions:
        sessions[sid].close()

    with app.app_context():
        store = get_store()

    game = GameSession(
        session_id=session_id,
        store=store,
        config=get_session_configuration(),
        push=make_pusher(sid),
    )
    sessions[sid] = game
    send_all(game.start())


@socketio.on('select_choice')
def handle_select_choice(data):
    game = get_session(request.sid)
    if not game:
        return
    send_all(game.select_choice((data or {}).get('choice_id', '')))


@socketio.on('set_reflection_answer')
def handle_set_reflection_answer(data):
    game = get_session(request.sid)
    if not game:
        return
    try:
        index = int((data or {}).get('index'))
    except (TypeError, ValueError):
        emit('message', make_message(MessageType.ERROR, {'message': 'Invalid answer index'}))
        return
    send_all(game.set_reflection_answer(index))


@socketio.on('confirm')
def handle_confirm():
    game = get_session(request.sid)
    if not game:
        return
    send_all(game.confirm())


@socketio.on('get_state')
def handle_get_state():
    game = get_session(request.sid)
    if not game:
        return
    emit('message', make_message(MessageType.STATE, {'state': game.get_state()}))


@socketio.on('restart')
def handle_restart():
    game = get_session(request.sid)
    if not game:
        return
    logger.info(f"Restart requested for {request.sid}")
    send_all(game.restart())


@socketio.on('disconnect')
def handle_disconnect():
    """Handle client disconnection"""
    sid = request.sid
    logger.info(f"Client disconnected: {sid}")

    game = sessions.pop(sid, None)
    if game:
        game.close()


if __name__ == '__main__':
    port = int(os.environ.get('PORT', 5000))
    logger.info(f"Starting Ecclesia server on port {port}")
    logger.info(f"Static files directory: {STATIC_DIR}")

    socketio.run(app, host='0.0.0.0', port=port, debug=False, allow_unsafe_werkzeug=True)
