"""Static asset serving under a URL prefix, with directory listings.

Files are served read-only from the configured static directory. A directory
without an index.html gets a generated listing of its immediate entries.
Dotfiles are neither served nor listed.
"""
from collections import namedtuple
import os
import posixpath
from urllib.parse import quote

from flask import Blueprint, abort, render_template, send_from_directory
from werkzeug.security import safe_join

INDEX_FILE = 'index.html'

ListingEntry = namedtuple('ListingEntry', ['name', 'href', 'is_dir'])


def is_hidden(path: str) -> bool:
    return any(part.startswith('.') for part in path.split('/') if part)


def display_name(name: str) -> str:
    return os.fsencode(name).decode('utf-8', 'replace')


def list_directory(local_dir, rel_path: str, prefix: str) -> list:
    """Return the entries of `local_dir`, directories first, each group sorted by name."""
    rel_path = rel_path.strip('/')
    base = posixpath.join(prefix, rel_path) if rel_path else prefix
    dirs = []
    files = []
    with os.scandir(local_dir) as it:
        for entry in it:
            if entry.name.startswith('.'):
                continue
            # names that are not valid UTF-8 come back with surrogate escapes
            href = posixpath.join(base, quote(os.fsencode(entry.name)))
            name = display_name(entry.name)
            if entry.is_dir():
                dirs.append(ListingEntry(name + '/', href + '/', True))
            else:
                files.append(ListingEntry(name, href, False))
    dirs.sort(key=lambda e: e.name)
    files.sort(key=lambda e: e.name)
    return dirs + files


def parent_href(rel_path: str, prefix: str):
    """Link to the enclosing directory, or None at the mount root."""
    rel_path = rel_path.strip('/')
    if not rel_path:
        return None
    parent = posixpath.dirname(rel_path)
    return posixpath.join(prefix, parent, '') if parent else prefix + '/'


def render_listing(prefix: str, rel_path: str, local_dir):
    rel_path = rel_path.strip('/')
    title = posixpath.join(prefix, rel_path, '') if rel_path else prefix + '/'
    return render_template(
        'listing.html',
        title=title,
        parent=parent_href(rel_path, prefix),
        entries=list_directory(local_dir, rel_path, prefix),
    )


def create_blueprint(config) -> Blueprint:
    """Blueprint serving `config.static_dir` at `config.static_url_path`."""
    prefix = '/' + config.static_url_path.strip('/')
    root = str(config.static_dir)
    bp = Blueprint('assets', __name__, url_prefix=prefix)

    @bp.route('/', defaults={'filename': ''})
    @bp.route('/<path:filename>')
    def serve_asset(filename):
        if is_hidden(filename):
            abort(404)
        local_path = safe_join(root, filename) if filename.strip('/') else root
        # safe_join returns None for anything outside the root
        if local_path is None or not os.path.exists(local_path):
            abort(404)

        if os.path.isdir(local_path):
            if os.path.isfile(os.path.join(local_path, INDEX_FILE)):
                return send_from_directory(root, posixpath.join(filename, INDEX_FILE))
            if not config.show_listing:
                abort(404)
            return render_listing(prefix, filename, local_path)

        return send_from_directory(root, filename)

    return bp
