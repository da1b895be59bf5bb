"""Server options read from the command line and the environment."""

from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from typing import Mapping, Sequence

DEFAULT_DB_PATH = "./data.ms"
DEFAULT_HTTP_ADDR = "127.0.0.1:7700"


@dataclass
class Options:
    """Settings of the HTTP server."""

    db_path: str = DEFAULT_DB_PATH
    http_addr: str = DEFAULT_HTTP_ADDR
    api_key: str | None = None
    no_analytics: bool = False


def _parser(environ: Mapping[str, str]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="meili")
    parser.add_argument(
        "--db-path",
        default=environ.get("MEILI_DB_PATH", DEFAULT_DB_PATH),
        help="The destination where the database must be created.",
    )
    parser.add_argument(
        "--http-addr",
        default=environ.get("MEILI_HTTP_ADDR", DEFAULT_HTTP_ADDR),
        help="The address on which the http server will listen.",
    )
    parser.add_argument(
        "--api-key",
        default=environ.get("MEILI_API_KEY"),
        help="The master key allowing you to do everything on the server.",
    )
    parser.add_argument(
        "--no-analytics",
        action="store_true",
        default="MEILI_NO_ANALYTICS" in environ,
        help="Do not send analytics.",
    )
    return parser


def parse_options(
    argv: Sequence[str] | None = None, environ: Mapping[str, str] | None = None
) -> Options:
    """Build the options; command-line arguments take precedence over the environment."""
    if argv is None:
        argv = sys.argv[1:]
    if environ is None:
        environ = os.environ
    namespace = _parser(environ).parse_args(list(argv))
    return Options(
        db_path=namespace.db_path,
        http_addr=namespace.http_addr,
        api_key=namespace.api_key,
        no_analytics=namespace.no_analytics,
    )