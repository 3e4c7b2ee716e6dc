"""Centralised configuration for the triage queue and its front-ends."""

import os
from typing import Dict, Tuple

# ── Priority classes (index + 1 = numeric code) ──────────────────────────
PRIORITY_NAMES: Tuple[str, ...] = ("immediate", "emergency", "urgent", "minimal")

# ── Listing layout ───────────────────────────────────────────────────────
ARRIVAL_WIDTH = 7
PRIORITY_WIDTH = 13
NAME_WIDTH = 16

LIST_HEADER = (
    "  Arrival #   Priority Code   Patient Name\n"
    "+-----------+---------------+--------------+"
)

# ── Interpreter ──────────────────────────────────────────────────────────
PROMPT = "triage> "

WELCOME = (
    "Welcome to the hospital triage system. \n"
    "Enter your commands below to use the priority queueing system.\n"
    'Use command "help" for a list of commands'
)
GOODBYE = "Exiting..."

HELP_TEXT = """\
add <priority-code> <patient-name>
            Adds the patient to the triage system.
            <priority-code> must be one of the 4 accepted priority codes:
                1. immediate 2. emergency 3. urgent 4. minimal
            <patient-name>: patient's full legal name (may contain spaces)
change <arrival-number> <priority-code>
            Changes the patients priority code within the queue, but not
            their arrival number.
next        Announces the patient to be seen next. Takes into account the
            type of emergency and the patient's arrival order.
peek        Displays the patient that is next in line, but keeps in queue
list        Displays the list of all patients that are still waiting
            in the order that they are kept in the queue.
save <file> Saves the queue as one add command per patient
load <file> Reads the file and executes the command on each line
help        Displays this menu
quit        Exits the program"""

NOT_FOUND_MESSAGE = "Patient with given id was not found."

# ── GUI ──────────────────────────────────────────────────────────────────
HISTORY_LIMIT = 500  # points kept by the queue-length plot

PRIORITY_COLORS: Dict[str, str] = {
    "immediate": "#ef476f",
    "emergency": "#f78c6b",
    "urgent": "#ffd166",
    "minimal": "#06d6a0",
}

# ── Logging ──────────────────────────────────────────────────────────────
LOG_LEVEL = os.getenv("TRIAGE_LOG_LEVEL", "WARNING").upper()
LOG_FORMAT = "%(asctime)s  %(levelname)-8s  %(name)s: %(message)s"
