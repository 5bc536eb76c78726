"""Tabular logger that lines up description / value / ending triples."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from types import TracebackType
from typing import Optional, TextIO

_DEFAULT_PRECISION = 6
_DESCRIPTION_PADDING = 6
_ORDER_ERROR = "Wrong input order.\nError in function: Logger.__lshift__"


class _ManipKind(Enum):
    WIDTH = "width"
    PRECISION = "precision"


@dataclass(frozen=True)
class _Manipulator:
    kind: _ManipKind
    param: int


def setw(new_width: int) -> _Manipulator:
    """Manipulator setting the field width of the next formatted value."""
    return _Manipulator(_ManipKind.WIDTH, new_width)


def setprecision(new_precision: int) -> _Manipulator:
    """Manipulator setting the precision of the next formatted number."""
    return _Manipulator(_ManipKind.PRECISION, new_precision)


class Logger:
    """Collects rows of (description, value, ending) and writes them aligned.

    Items are pushed with ``<<``: a string description, then a value of any
    kind, then a string ending. Non-string values are formatted with the
    current width and precision, which apply to that value only.
    """

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        self._stream = stream
        self._descriptions: list[str] = []
        self._values: list[str] = []
        self._endings: list[str] = []
        self._turn = 0
        self._width = 0
        self._precision = _DEFAULT_PRECISION

    def open(self, stream: TextIO) -> None:
        """Set the stream the rows are written to."""
        self._stream = stream

    def flush(self) -> None:
        """Write all collected rows to the stream, completing an unfinished row."""
        if self._stream is None:
            raise ValueError("Logger has no stream to write to")
        if self._turn != 0:
            if self._turn == 1:
                self._values.append("")
            self._endings.append("")
            self._turn = 0

        max_len = max((len(d) for d in self._descriptions), default=0)
        field = max_len + _DESCRIPTION_PADDING
        for description, value, ending in zip(self._descriptions, self._values, self._endings):
            dots = "." * (field - len(description))
            self._stream.write(f">>  {description}{dots}>>  {value} {ending}\n")

    def clear(self) -> None:
        """Forget all collected rows."""
        self._descriptions.clear()
        self._values.clear()
        self._endings.clear()
        self._turn = 0

    def _format(self, value: object) -> str:
        if isinstance(value, bool):
            text = "1" if value else "0"
        elif isinstance(value, int):
            text = "%d" % value
        elif isinstance(value, float):
            text = "%.*g" % (self._precision, value)
        else:
            text = str(value)
        text = text.rjust(self._width)
        self._width = 0
        self._precision = _DEFAULT_PRECISION
        return text

    def __lshift__(self, item: object) -> Logger:
        if isinstance(item, _Manipulator):
            if item.kind is _ManipKind.WIDTH:
                self._width = item.param
            else:
                self._precision = item.param
            return self

        if isinstance(item, str):
            if self._turn == 0:
                self._descriptions.append(item)
                self._turn = 1
            elif self._turn == 1:
                self._values.append(item)
                self._turn = 2
            else:
                self._endings.append(item)
                self._turn = 0
            return self

        if self._turn != 1:
            raise ValueError(_ORDER_ERROR)
        self._values.append(self._format(item))
        self._turn = 2
        return self

    def __enter__(self) -> Logger:
        return self

    def __exit__(
        self,
        exc_type: Optional[type[BaseException]],
        exc: Optional[BaseException],
        tb: Optional[TracebackType],
    ) -> None:
        if self._stream is not None:
            self.flush()