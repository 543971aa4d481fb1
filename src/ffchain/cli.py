"""Command-line interface entry point."""

import sys

from cyclopts import App

from .backend import concat, info

app = App(name="ffchain", help="Build and run FFmpeg commands.")
app.command(concat)
app.command(info)


def main(argv: list[str] | None = None) -> int:
    """Run the ffchain CLI."""
    argv = sys.argv[1:] if argv is None else argv
    return app(argv)


if __name__ == "__main__":
    raise SystemExit(main())
