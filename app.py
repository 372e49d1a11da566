import os
import logging

from flask import Flask, render_template, request
from flask_compress import Compress

from catalog import build_catalog
from routes.api import ALL_BLUEPRINTS
from seeds import seed_entries

logger = logging.getLogger(__name__)

ENTRY_IMG_DIRS = {
    'development': '/hike-images',
    'production': 'http://assets.hike.io/hike-images',
}


def _default_config(app):
    env = os.environ.get('APP_ENV', 'development')
    return {
        'APP_ENV': env,
        'ENTRY_IMG_DIR': os.environ.get(
            'ENTRY_IMG_DIR', ENTRY_IMG_DIRS.get(env, ENTRY_IMG_DIRS['production'])),
        'IMG_DIR': '/images',
        'ICON_ROOT': app.static_folder,
        'ICON_URL_PREFIX': app.static_url_path,
        # Static asset cache headers (24 hours)
        'SEND_FILE_MAX_AGE_DEFAULT': 86400,
        'COMPRESS_ALGORITHM': ['br', 'gzip'],
        'COMPRESS_MIMETYPES': [
            'text/html', 'text/css', 'text/javascript', 'application/javascript',
            'image/svg+xml',
        ],
    }


def create_app(config=None, catalog=None):
    """Build the site. The catalog is loaded once here and shared read-only."""
    app = Flask(__name__)
    app.config.update(_default_config(app))
    if config:
        app.config.update(config)

    # Gzip/Brotli compression for all responses
    Compress(app)

    # An empty catalog raises CatalogError and aborts startup
    app.extensions['catalog'] = catalog if catalog is not None else build_catalog(seed_entries())

    for bp in ALL_BLUEPRINTS:
        app.register_blueprint(bp)

    @app.after_request
    def add_headers(response):
        """Cache headers for static assets, Vary for UA-dependent pages."""
        if request.path.startswith(app.static_url_path + '/'):
            response.headers['Cache-Control'] = 'public, max-age=86400'
        elif response.mimetype == 'text/html':
            response.vary.add('User-Agent')
        # Security headers
        response.headers['X-Content-Type-Options'] = 'nosniff'
        response.headers['X-Frame-Options'] = 'SAMEORIGIN'
        return response

    @app.errorhandler(404)
    def not_found(e):
        return render_template('404.html', title='Not Found',
                               img_dir=app.config['IMG_DIR']), 404

    logger.info('App created (env=%s)', app.config['APP_ENV'])
    return app


app = create_app()

if __name__ == '__main__':
    logging.basicConfig(level=logging.INFO)
    app.run(host=os.environ.get('HOST', '0.0.0.0'),
            port=int(os.environ.get('PORT', '8095')),
            debug=app.config['APP_ENV'] == 'development', threaded=True)
