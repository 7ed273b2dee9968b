"""simple-log-parser — run from the repository root with `python main.py`."""

from log_parser.cli import entry_point

if __name__ == "__main__":
    entry_point()
