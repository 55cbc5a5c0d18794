# src/taskbot/core/parser.py

"""
Turns one raw input line into exactly one Command.

Parsing is split into two stages so every failure keeps its own message:
- shape: the argument string has the expected form (ParseSyntaxError)
- value: a sub-value converts (date, task number) (ParseValueError)

Both are caught in parse_command() and become an Incorrect command;
nothing raised here reaches the console loop.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable
from datetime import date

from ..errors import ParseSyntaxError, ParseValueError
from .commands import (
    MESSAGE_INVALID_COMMAND_FORMAT,
    MESSAGE_INVALID_DATE,
    MESSAGE_INVALID_TASK_DISPLAYED_INDEX,
    AddDeadline,
    AddEvent,
    AddTodo,
    Command,
    Delete,
    Exit,
    Help,
    Incorrect,
    List,
    Mark,
    Unmark,
)

logger = logging.getLogger(__name__)

ARG_SEPARATOR = "/"
ISO_DATE_RE = re.compile(r"\d{4}-\d{2}-\d{2}")


def split_command_word(line: str) -> tuple[str, str]:
    """
    Split a line into (command word, remainder).

    The remainder keeps its leading whitespace; it is "" when the line has
    only a command word. An empty/blank line gives ("", "").
    """
    stripped = line.strip()
    if not stripped:
        return "", ""
    parts = stripped.split(maxsplit=1)
    word = parts[0]
    return word, stripped[len(word):]


def _usage_error(usage: str) -> ParseSyntaxError:
    return ParseSyntaxError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))


def parse_description(args: str, usage: str) -> str:
    """A description is non-empty and contains no argument separator."""
    description = args.strip()
    if not description or ARG_SEPARATOR in description:
        raise _usage_error(usage)
    return description


def parse_iso_date(text: str, usage: str) -> date:
    # date.fromisoformat() also accepts forms like 20240301; only YYYY-MM-DD is valid input.
    if not ISO_DATE_RE.fullmatch(text):
        raise ParseValueError(MESSAGE_INVALID_DATE.format(text=text, usage=usage))
    try:
        return date.fromisoformat(text)
    except ValueError as e:
        raise ParseValueError(MESSAGE_INVALID_DATE.format(text=text, usage=usage)) from e


def parse_dated_args(args: str, keyword: str, usage: str) -> tuple[str, date]:
    """
    Parse "<description> /<keyword> <date>".

    The separator must be surrounded by the description and the date;
    neither side may contain another "/".
    """
    head, sep, tail = args.strip().partition(f" {ARG_SEPARATOR}{keyword} ")
    if not sep:
        raise _usage_error(usage)
    description = parse_description(head, usage)
    date_text = tail.strip()
    if not date_text or ARG_SEPARATOR in date_text:
        raise _usage_error(usage)
    return description, parse_iso_date(date_text, usage)


def parse_displayed_index(args: str, usage: str) -> int:
    """
    Parse a single one-based task number and return the zero-based index.

    Missing or extra tokens are a shape error; a token that is not a
    positive base-10 integer is a value error with its own message.
    """
    tokens = args.split()
    if len(tokens) != 1:
        raise _usage_error(usage)
    token = tokens[0]
    if not (token.isascii() and token.isdigit()):
        raise ParseValueError(MESSAGE_INVALID_TASK_DISPLAYED_INDEX)
    number = int(token, 10)
    if number < 1:
        raise ParseValueError(MESSAGE_INVALID_TASK_DISPLAYED_INDEX)
    return number - 1


def _prepare_todo(args: str) -> Command:
    return AddTodo(parse_description(args, AddTodo.MESSAGE_USAGE))


def _prepare_deadline(args: str) -> Command:
    description, by = parse_dated_args(args, "by", AddDeadline.MESSAGE_USAGE)
    return AddDeadline(description, by)


def _prepare_event(args: str) -> Command:
    description, at = parse_dated_args(args, "at", AddEvent.MESSAGE_USAGE)
    return AddEvent(description, at)


def _prepare_mark(args: str) -> Command:
    return Mark(parse_displayed_index(args, Mark.MESSAGE_USAGE))


def _prepare_unmark(args: str) -> Command:
    return Unmark(parse_displayed_index(args, Unmark.MESSAGE_USAGE))


def _prepare_delete(args: str) -> Command:
    return Delete(parse_displayed_index(args, Delete.MESSAGE_USAGE))


_PREPARERS: dict[str, Callable[[str], Command]] = {
    AddTodo.COMMAND_WORD: _prepare_todo,
    AddDeadline.COMMAND_WORD: _prepare_deadline,
    AddEvent.COMMAND_WORD: _prepare_event,
    Mark.COMMAND_WORD: _prepare_mark,
    Unmark.COMMAND_WORD: _prepare_unmark,
    Delete.COMMAND_WORD: _prepare_delete,
    # Trailing text after these words is ignored.
    List.COMMAND_WORD: lambda _args: List(),
    Exit.COMMAND_WORD: lambda _args: Exit(),
    Help.COMMAND_WORD: lambda _args: Help(),
}


def parse_command(line: str) -> Command:
    """
    Parse one input line. Never raises: every failure is an Incorrect command.

    Command words match exactly (case-sensitive); unknown words give Help.
    """
    word, args = split_command_word(line)
    if not word:
        return Incorrect(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=Help.MESSAGE_USAGE))

    prepare = _PREPARERS.get(word)
    if prepare is None:
        logger.debug("Unknown command word %r", word)
        return Help()

    try:
        return prepare(args)
    except (ParseSyntaxError, ParseValueError) as e:
        logger.debug("Rejected %r: %s", word, e.__class__.__name__)
        return Incorrect(str(e))
