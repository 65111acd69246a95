"""CLI entrypoint for the website.

Usage:
    python -m main serve
    python -m main check
"""
import argparse

from app import check_templates, create_app
from config import ServerConfig
from serve import serve


def cmd_serve(args):
    serve(ServerConfig())


def cmd_check(args):
    config = ServerConfig()
    check_templates(create_app(config))
    print(f"Templates in {config.template_dir} render correctly.")


def main():
    parser = argparse.ArgumentParser(prog="dadgan-site", description="Dadgan Law Firm website")
    sub = parser.add_subparsers(dest="cmd")

    p_serve = sub.add_parser("serve", help="Run the web server")
    p_serve.set_defaults(func=cmd_serve)

    p_check = sub.add_parser("check", help="Render every template once and exit")
    p_check.set_defaults(func=cmd_check)

    args = parser.parse_args()
    if not hasattr(args, "func"):
        parser.print_help()
        return
    try:
        args.func(args)
    except Exception as e:
        print(f"Error: {e}")
        raise SystemExit(1)


if __name__ == "__main__":
    main()
