"""
citebot/app.py

Flask application for CiteBot.

Routes:
    GET  /              - Citation form page
    POST /api/citation  - {"identifier": "..."} -> {"citation": "..."} or {"error": "..."}
    GET  /health        - Health check
"""

import logging

from flask import Flask, jsonify, render_template, request

from citebot import __version__
from citebot.config import FLASK_DEBUG, LOG_LEVEL, PORT, SECRET_KEY
from citebot.routers import resolve_identifier

logger = logging.getLogger(__name__)


def create_app() -> Flask:
    logging.basicConfig(
        level=LOG_LEVEL,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    app = Flask(__name__)
    app.config['SECRET_KEY'] = SECRET_KEY

    # =========================================================================
    # ROUTES
    # =========================================================================

    @app.route('/')
    def index():
        """Render the citation form."""
        return render_template('index.html')

    @app.route('/api/citation', methods=['POST'])
    def citation():
        """
        Single identifier lookup.

        Request JSON:
        {
            "identifier": "10.1038/s41586-020-2649-2"
        }

        Response JSON:
        {
            "citation": "{{cite journal | ... }}",
            "type": "doi"
        }
        """
        data = request.get_json(silent=True)
        identifier = data.get('identifier') if isinstance(data, dict) else None

        if not isinstance(identifier, str) or not identifier.strip():
            return jsonify({'error': 'Missing identifier parameter'}), 400

        body, status = resolve_identifier(identifier)
        return jsonify(body), status

    @app.route('/health')
    def health():
        """Health check endpoint."""
        return jsonify({
            'status': 'healthy',
            'version': __version__,
        })

    return app


app = create_app()


# =============================================================================
# MAIN
# =============================================================================

if __name__ == '__main__':
    app.run(host='0.0.0.0', port=PORT, debug=FLASK_DEBUG)
