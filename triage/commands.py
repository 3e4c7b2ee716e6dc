"""Line-oriented command interpreter driving a :class:`TriageQueue`.

Each line is ``<verb> <arguments>``; the verb is case-insensitive. Every
problem with the input is reported through ``output`` as an ``Error: ...``
message and the interpreter keeps accepting commands.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO, Tuple

from .config import GOODBYE, HELP_TEXT, LIST_HEADER, PROMPT, WELCOME
from .entry import Entry
from .priority import Priority
from .queue import TriageQueue

logger = logging.getLogger(__name__)


def split_command(line: str) -> Tuple[str, str]:
    """Split *line* into a lowercased verb and the remaining text."""
    verb, _, rest = line.strip().partition(" ")
    return verb.lower(), rest.strip()


def parse_priority(text: str) -> Optional[Priority]:
    try:
        return Priority.from_name(text)
    except ValueError:
        return None


class CommandInterpreter:
    def __init__(self, queue: TriageQueue, output: Callable[[str], None] = print):
        self.queue = queue
        self.output = output
        self._loading: List[Path] = []
        self._handlers: Dict[str, Callable[[str], None]] = {
            "help": self._help,
            "add": self._add,
            "change": self._change,
            "peek": self._peek,
            "next": self._next,
            "list": self._list,
            "load": self._load,
            "save": self._save,
        }

    # ---- public API ----

    def process_line(self, line: str) -> bool:
        """Execute one command line; ``False`` means the session should end."""
        verb, rest = split_command(line)
        if not verb:
            self.output("Error: no command given.")
            return True
        if verb == "quit":
            return False

        handler = self._handlers.get(verb)
        if handler is None:
            self.output(f"Error: unrecognized command: {verb}")
            return True
        handler(rest)
        return True

    def run(self, stream: TextIO, interactive: bool = True):
        """Read commands from *stream* until ``quit`` or end of input."""
        self.output(WELCOME)
        while True:
            if interactive:
                print(f"\n{PROMPT}", end="", flush=True)
            line = stream.readline()
            if not line:
                break
            if not self.process_line(line):
                break
        self.output(GOODBYE)

    # ---- commands ----

    def _help(self, _rest: str):
        self.output(HELP_TEXT)

    def _add(self, rest: str):
        token, _, name = rest.partition(" ")
        if not token:
            self.output("Error: no priority code given.")
            return
        name = name.strip()
        if not name:
            self.output("Error: no patient name given.")
            return
        priority = parse_priority(token)
        if priority is None:
            self.output("Error: invalid priority code.")
            return

        self.queue.add(Entry(name, priority, self.queue.size() + 1))
        self.output(f"Patient {name} added to the priority system")

    def _change(self, rest: str):
        token, _, priority_name = rest.partition(" ")
        if not token:
            self.output("Error: no patient id given.")
            return
        try:
            arrival = int(token)
        except ValueError:
            self.output("Error: invalid patient id.")
            return
        priority = parse_priority(priority_name)
        if priority is None:
            self.output("Error: invalid priority code.")
            return

        self.output(self.queue.change_priority(arrival, priority))

    def _peek(self, _rest: str):
        if self.queue.is_empty():
            self.output("Queue is empty.")
            return
        self.output(f"Highest priority patient to be called next: {self.queue.peek()}")

    def _next(self, _rest: str):
        if self.queue.is_empty():
            self.output("Queue is empty.")
            return
        self.output(f"This patient will now be seen: {self.queue.peek()}")
        self.queue.remove_top()

    def _list(self, _rest: str):
        self.output(f"# patients waiting: {self.queue.size()}")
        self.output(LIST_HEADER)
        self.output(self.queue.to_text().rstrip("\n"))

    def _load(self, rest: str):
        if not rest:
            self.output("Error: could not open file.")
            return
        path = Path(rest).resolve()
        if path in self._loading:
            self.output(f"Error: recursive load of {rest}.")
            return
        try:
            with open(path, encoding="utf-8") as infile:
                lines = infile.read().splitlines()
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("could not read %s: %s", path, exc)
            self.output("Error: could not open file.")
            return

        logger.info("replaying %d lines from %s", len(lines), path)
        self._loading.append(path)
        try:
            for line in lines:
                if not line.strip():
                    continue
                self.output(f"\n{PROMPT}{line}")
                self.process_line(line)
        finally:
            self._loading.pop()

    def _save(self, rest: str):
        if not rest:
            self.output("Error: no file name given.")
            return
        try:
            with open(rest, "w", encoding="utf-8") as outfile:
                outfile.write(self.queue.export_commands())
        except OSError as exc:
            logger.warning("could not write %s: %s", rest, exc)
            self.output("Error: Unable to open the file.")
            return
        logger.info("saved %d patients to %s", self.queue.size(), rest)
        self.output("File saved successfully.")
