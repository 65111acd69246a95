"""Start the website server.

Run from the project root:
  python serve.py

Then open http://localhost:8081 in your browser. Ctrl-C or SIGTERM stops it.
"""
import signal
import sys
import threading

from werkzeug.serving import make_server

from app import check_templates, create_app
from config import ServerConfig


def _stop(signum, frame):
    # same exit path as Ctrl-C
    raise KeyboardInterrupt


def serve(config: ServerConfig | None = None):
    config = config or ServerConfig()
    app = create_app(config)
    try:
        check_templates(app)
    except Exception as e:
        print(f"Template check failed: {e}", file=sys.stderr)
        raise SystemExit(1)

    # one thread per request; handlers share no mutable state.
    # On bind failure werkzeug prints the OS error and exits with status 1.
    httpd = make_server(config.host, config.port, app, threaded=True)

    previous = None
    if threading.current_thread() is threading.main_thread():
        previous = signal.signal(signal.SIGTERM, _stop)

    print(f"Starting {config.site_name} website on {config.public_url}", flush=True)
    try:
        httpd.serve_forever()
    except KeyboardInterrupt:
        print('\nServer stopped', flush=True)
    finally:
        httpd.server_close()
        if previous is not None:
            signal.signal(signal.SIGTERM, previous)


if __name__ == '__main__':
    serve()
