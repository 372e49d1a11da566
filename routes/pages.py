from flask import Blueprint, abort, current_app, render_template, request

from services.icons import IconRenderer
from services.pages import entry_view, home_view
from services.useragent import is_iphone, supports_vector_icons

pages_bp = Blueprint('pages', __name__)


def _icon_renderer():
    cfg = current_app.config
    return IconRenderer(
        cfg['ICON_ROOT'],
        url_prefix=cfg['ICON_URL_PREFIX'],
        vector=supports_vector_icons(request.user_agent.string),
    )


def _page_context():
    cfg = current_app.config
    return {
        'entry_img_dir': cfg['ENTRY_IMG_DIR'],
        'img_dir': cfg['IMG_DIR'],
        'is_iphone': is_iphone(request.user_agent.string),
    }


@pages_bp.route('/')
def index():
    view = home_view(current_app.extensions['catalog'], _icon_renderer(),
                     current_app.config['ENTRY_IMG_DIR'])
    return render_template('index.html', **_page_context(), **view)


@pages_bp.route('/<entry_id>')
def entry_detail(entry_id):
    # HTML only; anything else falls through to the 404 page. No Accept
    # header means anything goes.
    accept = request.accept_mimetypes
    if accept and not accept.accept_html:
        abort(404)
    view = entry_view(current_app.extensions['catalog'], entry_id, _icon_renderer(),
                      current_app.config['ENTRY_IMG_DIR'])
    if view is None:
        abort(404)
    return render_template('entry.html', **_page_context(), **view)
