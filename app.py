"""Flask app for the Dadgan Law Firm website.

Two routes:
  GET /          the index page, rendered from templates/index.html
  GET /static/*  files from static/, with a listing for bare directories

Run it with `python -m main serve` (or `python serve.py`).
"""
from flask import Flask, Response, render_template
from werkzeug.exceptions import InternalServerError

from config import ServerConfig
from static_files import create_blueprint

HTML_CONTENT_TYPE = 'text/html; charset=utf-8'

# not a template: also served when the templates fail to render
ERROR_PAGE = (
    '<!doctype html>\n'
    '<html><head><meta charset="utf-8"><title>500 Internal Server Error</title></head>'
    '<body><h1>Internal Server Error</h1>'
    '<p>The server could not complete your request.</p></body></html>\n'
)


def create_app(config: ServerConfig | None = None) -> Flask:
    config = config or ServerConfig()
    # the built-in static route is replaced by the blueprint, which adds listings
    app = Flask(__name__, static_folder=None, template_folder=str(config.template_dir))
    app.config['SERVER_CONFIG'] = config
    app.register_blueprint(create_blueprint(config))

    @app.route('/')
    def index():
        # the template takes no variables, so every response is identical
        html = render_template('index.html')
        return Response(html, status=200, content_type=HTML_CONTENT_TYPE)

    @app.errorhandler(InternalServerError)
    def internal_error(e):
        # Flask has already logged the original exception on app.logger
        return Response(ERROR_PAGE, status=500, content_type=HTML_CONTENT_TYPE)

    return app


def check_templates(app: Flask):
    """Render every template once; raises if any of them is broken."""
    with app.app_context():
        render_template('index.html')
        render_template('listing.html', title='/', parent=None, entries=[])


app = create_app()


if __name__ == '__main__':
    from serve import serve
    serve(app.config['SERVER_CONFIG'])
