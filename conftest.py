import pytest

from app import create_app
from config import ServerConfig


@pytest.fixture
def static_root(tmp_path):
    root = tmp_path / 'static'
    root.mkdir()
    (root / 'foo.txt').write_text('bar')
    (root / 'style.css').write_text('body { color: black; }')
    (root / '.secret').write_text('hidden')
    (root / 'docs').mkdir()
    (root / 'docs' / 'brochure.txt').write_text('brochure')
    (root / 'site').mkdir()
    (root / 'site' / 'index.html').write_text('<p>site index</p>')
    return root


@pytest.fixture
def config(static_root):
    return ServerConfig(static_dir=static_root)


@pytest.fixture
def app(config):
    return create_app(config)


@pytest.fixture
def client(app):
    return app.test_client()
