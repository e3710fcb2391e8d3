#!/usr/bin/env python
"""Run the publication service on Django's development server."""

import os
import sys

from django.core.management import execute_from_command_line


def main():
    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "publication_service.settings")
    execute_from_command_line([sys.argv[0], "runlocal", *sys.argv[1:]])


if __name__ == "__main__":
    main()
