from flask import Flask
from .businesses import businesses_bp

def register_blueprints(app: Flask):
    """Register all API blueprints."""
    app.register_blueprint(businesses_bp)
