"""
Main application entry point
"""
from taggable.core.app import create_app
from taggable.config.config import DEBUG

app = create_app()

if __name__ == '__main__':
    app.run(debug=DEBUG)
