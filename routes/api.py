from routes.pages import pages_bp

ALL_BLUEPRINTS = [pages_bp]
