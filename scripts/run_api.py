#!/usr/bin/env python
"""Run the API with uvicorn, logging to the console and logs/api.log."""

import sys
import argparse
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parents[1]))

import uvicorn

from movielist.config import get_api_host, get_api_port, get_log_level
from movielist.utils.logging_config import configure_api_logging


def main():
    parser = argparse.ArgumentParser(description="Run the movie list API")
    parser.add_argument("--debug", action="store_true")
    args = parser.parse_args()

    from movielist.api.main import app

    configure_api_logging(debug=args.debug, level=get_log_level())
    uvicorn.run(app, host=get_api_host(), port=get_api_port(), log_config=None)


if __name__ == "__main__":
    main()
