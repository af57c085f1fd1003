"""Line collector that demo objects write to instead of printing."""

from typing import Iterator, List


class Trace:
    """
    Append-only sequence of output lines.

    Demo objects that would print in a console example receive a Trace and
    emit into it, so a demo run yields its output as data.
    """

    def __init__(self) -> None:
        self._lines: List[str] = []

    def emit(self, line: str = "") -> None:
        """Append one line. Embedded newlines split into several lines."""
        self._lines.extend(str(line).split("\n"))

    def blank(self) -> None:
        self._lines.append("")

    @property
    def lines(self) -> List[str]:
        return list(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __len__(self) -> int:
        return len(self._lines)
