from .home_routes import home_bp
from .diet_routes import diet_bp

def register_routes(app):
    app.register_blueprint(home_bp)
    app.register_blueprint(diet_bp)
