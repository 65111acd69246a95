"""Startup settings for the website.

Everything is a constant. `ServerConfig` bundles them so the app and the
server receive them as one value.
"""
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).parent

SITE_NAME = 'Dadgan Law Firm'
HOST = '127.0.0.1'
PORT = 8081
STATIC_DIR = BASE_DIR / 'static'
STATIC_URL_PATH = '/static'
TEMPLATE_DIR = BASE_DIR / 'templates'


@dataclass(frozen=True)
class ServerConfig:
    host: str = HOST
    port: int = PORT
    static_dir: Path = STATIC_DIR
    static_url_path: str = STATIC_URL_PATH
    show_listing: bool = True
    template_dir: Path = TEMPLATE_DIR
    site_name: str = SITE_NAME

    @property
    def public_url(self) -> str:
        # loopback is announced as localhost
        host = 'localhost' if self.host in ('127.0.0.1', '::1') else self.host
        return f"http://{host}:{self.port}"
