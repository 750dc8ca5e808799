"""Copy-on-write output assembly.

Engines never build output themselves. They scan their input and report each
transformation to an assembler through :meth:`OutputAssembler.replace`. The
assembler copies the verbatim span between two transformations in one piece
and only starts producing output once the first transformation is reported.
"""

from typing import Any, List, Optional, Sequence

from .window import text_span


class OutputAssembler:
    """Base class for the two output shapes.

    Attributes:
        text: Input sequence being transformed
        start: Start of the input window
        end: Exclusive end of the input window
        read_offset: Start of the next verbatim span not yet emitted
        changed: Whether any transformation has been reported
    """

    def __init__(
        self,
        text: Sequence[str],
        start: int,
        end: int,
        prefix: str = "",
        suffix: str = "",
    ) -> None:
        self.text = text
        self.start = start
        self.end = end
        self.read_offset = start
        self.changed = False
        self.prefix = prefix
        self.suffix = suffix

    def replace(self, index: int, consumed: int, token: str) -> None:
        """Replace ``consumed`` units at ``index`` with ``token``.

        Everything between the read offset and ``index`` is copied verbatim
        first. ``index`` must not be lower than the read offset.
        """
        if not self.changed:
            self.touch()
        if index > self.read_offset:
            self._emit(text_span(self.text, self.read_offset, index))
        if token:
            self._emit(token)
        self.read_offset = index + consumed

    def touch(self) -> None:
        """Mark the output as changed without replacing anything."""
        if self.changed:
            return
        self.changed = True
        self._begin()
        if self.prefix:
            self._emit(self.prefix)

    def finish(self) -> Any:
        """Flush the remaining verbatim span and return the shape's result."""
        if not self.changed:
            return self._unchanged()
        if self.read_offset < self.end:
            self._emit(text_span(self.text, self.read_offset, self.end))
            self.read_offset = self.end
        if self.suffix:
            self._emit(self.suffix)
        return self._result()

    def _begin(self) -> None:
        pass

    def _emit(self, chunk: str) -> None:
        raise NotImplementedError

    def _unchanged(self) -> Any:
        raise NotImplementedError

    def _result(self) -> Any:
        return None


class StringAssembler(OutputAssembler):
    """Builds a new string, or hands back the input object when nothing changed."""

    def __init__(self, text: str, prefix: str = "", suffix: str = "") -> None:
        super().__init__(text, 0, len(text), prefix, suffix)
        self._parts: Optional[List[str]] = None

    def _begin(self) -> None:
        self._parts = []

    def _emit(self, chunk: str) -> None:
        assert self._parts is not None
        self._parts.append(chunk)

    def _unchanged(self) -> str:
        return self.text  # type: ignore[return-value]

    def _result(self) -> str:
        assert self._parts is not None
        return "".join(self._parts)


class WriterAssembler(OutputAssembler):
    """Writes straight to a caller-supplied writer, in input order."""

    def __init__(
        self,
        writer: Any,
        buffer: Sequence[str],
        start: int,
        end: int,
        prefix: str = "",
        suffix: str = "",
    ) -> None:
        super().__init__(buffer, start, end, prefix, suffix)
        self.writer = writer

    def _emit(self, chunk: str) -> None:
        self.writer.write(chunk)

    def _unchanged(self) -> None:
        if self.start < self.end:
            self.writer.write(text_span(self.text, self.start, self.end))
