"""Main routes - health check, static images and the frontend build."""
import os

from flask import Blueprint, abort, current_app, jsonify, send_from_directory

main_bp = Blueprint('main', __name__)


@main_bp.route('/api/health')
def health():
    return jsonify({'status': 'ok'})


@main_bp.route('/images/<path:filename>')
def images(filename):
    return send_from_directory(current_app.config['IMAGES_DIR'], filename)


@main_bp.route('/', defaults={'path': ''})
@main_bp.route('/<path:path>')
def frontend(path):
    """Serve the single-page app; unknown client routes get index.html."""
    build_dir = current_app.config['FRONTEND_BUILD_DIR']
    if not current_app.config['SERVE_FRONTEND'] or path.startswith('api/'):
        abort(404)
    if path and os.path.isfile(os.path.join(build_dir, path)):
        return send_from_directory(build_dir, path)
    return send_from_directory(build_dir, 'index.html')
