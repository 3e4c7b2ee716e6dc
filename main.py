"""Application entry point: the triage window, or a terminal REPL with --cli."""

import argparse
import logging
import sys

from triage.commands import CommandInterpreter
from triage.config import LOG_FORMAT, LOG_LEVEL
from triage.queue import TriageQueue


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Hospital triage priority queue")
    parser.add_argument("--cli", action="store_true", help="use the terminal interpreter instead of the window")
    parser.add_argument("--load", metavar="FILE", help="replay a saved command file before starting")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="-v for INFO, -vv for DEBUG")
    return parser.parse_args(argv)


def _configure_logging(verbosity: int):
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = getattr(logging, LOG_LEVEL, logging.WARNING)
    logging.basicConfig(level=level, format=LOG_FORMAT)


def _run_cli(queue: TriageQueue, load_file=None) -> int:
    interpreter = CommandInterpreter(queue)
    if load_file:
        interpreter.process_line(f"load {load_file}")
    interpreter.run(sys.stdin, interactive=sys.stdin.isatty())
    return 0


def _run_gui(queue: TriageQueue, load_file=None) -> int:
    from PyQt6.QtWidgets import QApplication

    from ui.main_window import MainWindow

    app = QApplication(sys.argv)
    window = MainWindow(queue)
    if load_file:
        window.submit_command(f"load {load_file}")
    window.show()
    return app.exec()


def main(argv=None):
    args = _parse_args(argv)
    _configure_logging(args.verbose)
    queue = TriageQueue()
    if args.cli:
        return _run_cli(queue, args.load)
    return _run_gui(queue, args.load)


if __name__ == "__main__":
    sys.exit(main())
