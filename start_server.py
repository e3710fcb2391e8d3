"""Gunicorn entry point for running the publication service in containers."""

import os
import sys

from gunicorn.app.wsgiapp import run


def build_argv() -> list[str]:
    """Gunicorn command line, tunable through the environment.

    Worker timeout is generous because ingestion may render a PDF and notify
    subscribers inline when asynchronous processing is disabled.
    """
    return [
        "gunicorn",
        "publication_service.wsgi:application",
        "--bind",
        f"0.0.0.0:{os.getenv('PORT', '8000')}",
        "--workers",
        os.getenv("GUNICORN_WORKERS", "4"),
        "--threads",
        os.getenv("GUNICORN_THREADS", "2"),
        "--timeout",
        os.getenv("GUNICORN_TIMEOUT", "120"),
        "--access-logfile",
        "-",
        "--error-logfile",
        "-",
    ]


def main():
    sys.argv = build_argv()
    run()


if __name__ == "__main__":
    main()
