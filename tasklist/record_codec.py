#!/usr/bin/env python
"""
Encodes tasks to single-line records and decodes them back.

A record has four comma-separated fields:

    id,completed,title,notes

A literal comma inside title or notes is written as a backslash followed by
the comma. Line breaks cannot be represented and are written as spaces.
"""
import re
import typing as _t
from dataclasses import dataclass, asdict

DELIMITER = ","
ESCAPE = "\\"
FIELD_COUNT = 4

_INT_RE = re.compile(r"[+-]?\d+")

# ───────────────────────────────────────── Error Classes ────
class RecordError(ValueError):
    """Base class for a line that cannot be decoded into a task."""
    pass

class MalformedRecordError(RecordError):
    """Raised when a line has fewer than four fields."""
    pass

class InvalidIdError(RecordError):
    """Raised when the id field is not an integer."""
    pass

class InvalidCompletedFlagError(RecordError):
    """Raised when the completed field is neither '0' nor '1'."""
    pass

# ───────────────────────────────────────── Task Class Definition ────
@dataclass
class Task:
    """
    A single to-do item.
    """
    id: int
    title: str
    notes: str = ""
    completed: bool = False

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

# ───────────────────────────────────────── Encoding ────
def escape_field(text: str) -> str:
    """Escape delimiters and flatten line breaks so the text fits in one field."""
    out = []
    for ch in text:
        if ch == DELIMITER:
            out.append(ESCAPE + DELIMITER)
        elif ch in "\r\n":
            out.append(" ")
        else:
            out.append(ch)
    return "".join(out)

def encode_record(task: Task) -> str:
    """Encode a task as one record line, without the trailing newline."""
    return DELIMITER.join([
        str(task.id),
        "1" if task.completed else "0",
        escape_field(task.title),
        escape_field(task.notes),
    ])

# ───────────────────────────────────────── Decoding ────
def split_fields(line: str) -> _t.List[str]:
    """
    Split a record line on unescaped delimiters.

    An escape marker directly before a delimiter yields a literal delimiter.
    Any other escape marker is kept as-is.
    """
    fields = []
    current = []
    i = 0
    while i < len(line):
        ch = line[i]
        if ch == ESCAPE and i + 1 < len(line) and line[i + 1] == DELIMITER:
            current.append(DELIMITER)
            i += 2
            continue
        if ch == DELIMITER:
            fields.append("".join(current))
            current = []
        else:
            current.append(ch)
        i += 1
    fields.append("".join(current))
    return fields

def decode_record(line: str) -> Task:
    """
    Decode one record line into a Task.

    Args:
        line: A record without its trailing newline.

    Returns:
        The decoded Task.

    Raises:
        MalformedRecordError: fewer than four fields.
        InvalidIdError: the id field is not an integer.
        InvalidCompletedFlagError: the completed field is not '0' or '1'.
    """
    fields = split_fields(line)
    if len(fields) < FIELD_COUNT:
        raise MalformedRecordError(f"Expected {FIELD_COUNT} fields, got {len(fields)}: {line!r}")

    # Fields past the fourth can only come from hand edits and are dropped
    raw_id, raw_completed, title, notes = fields[:FIELD_COUNT]

    if not _INT_RE.fullmatch(raw_id):
        raise InvalidIdError(f"Invalid task id {raw_id!r}")
    if raw_completed not in ("0", "1"):
        raise InvalidCompletedFlagError(f"Invalid completed flag {raw_completed!r}")

    return Task(id=int(raw_id), title=title, notes=notes, completed=raw_completed == "1")
