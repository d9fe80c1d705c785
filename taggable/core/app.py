"""
Core application module
"""
from flask import Flask, jsonify
from flask_cors import CORS

def create_app():
    """Initialize the Flask application"""
    app = Flask(__name__)
    CORS(app)

    # Register blueprints
    from taggable.notes.routes import notes_bp

    app.register_blueprint(notes_bp)

    @app.route('/health')
    def health():
        return jsonify({'status': 'ok'})

    return app
