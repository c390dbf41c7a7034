"""Inline span parser for bold, italic and inline-code runs."""

from tube2notion.formatting.ir import SpanStyle, StyledRun


class SpanParser:
    """Split a single line of text into styled runs.

    Recognised forms, tried longest-first at each delimiter position:
    - **bold**
    - *italic*
    - `code`

    Each form closes at the nearest matching delimiter. Content inside a
    delimited run is never re-scanned, so nesting is not supported. A pair
    of delimiters with nothing between them is kept as literal text.
    Neighbouring runs never share a style: touching runs of the same
    style are merged into one.
    """

    # Ordered longest-first: ** must be tried before *
    DELIMITERS: tuple[tuple[str, SpanStyle], ...] = (
        ("**", SpanStyle.BOLD),
        ("*", SpanStyle.ITALIC),
        ("`", SpanStyle.CODE),
    )
    MARKER_CHARS = frozenset("*`")

    def parse(self, line: str) -> list[StyledRun]:
        """Parse a line into styled runs.

        Args:
            line: Text with any block-level prefix already removed

        Returns:
            Ordered runs; empty for an empty line
        """
        runs: list[StyledRun] = []
        plain: list[str] = []
        pos = 0

        while pos < len(line):
            if line[pos] not in self.MARKER_CHARS:
                end = self._next_marker(line, pos)
                plain.append(line[pos:end])
                pos = end
                continue

            token = self._match_delimited(line, pos)
            if token is None:
                # Unclosed delimiter, keep it literally
                plain.append(line[pos])
                pos += 1
                continue

            content, style, end = token
            if content:
                self._flush_plain(plain, runs)
                self._append_styled(runs, content, style)
            else:
                plain.append(line[pos:end])
            pos = end

        self._flush_plain(plain, runs)
        return runs

    def _match_delimited(
        self, line: str, pos: int
    ) -> tuple[str, SpanStyle, int] | None:
        """Try each delimiter form at pos.

        Returns:
            (payload, style, end_position) for the first form that closes,
            or None when no form closes on this line.
        """
        for marker, style in self.DELIMITERS:
            if not line.startswith(marker, pos):
                continue
            start = pos + len(marker)
            close = line.find(marker, start)
            if close == -1:
                continue
            return line[start:close], style, close + len(marker)
        return None

    def _next_marker(self, line: str, pos: int) -> int:
        """Return the index of the next delimiter character at or after pos."""
        for index in range(pos, len(line)):
            if line[index] in self.MARKER_CHARS:
                return index
        return len(line)

    @staticmethod
    def _append_styled(runs: list[StyledRun], text: str, style: SpanStyle) -> None:
        """Append a run, extending the previous one when the style repeats."""
        if runs and runs[-1].style is style:
            runs[-1] = StyledRun(text=runs[-1].text + text, style=style)
        else:
            runs.append(StyledRun(text=text, style=style))

    @staticmethod
    def _flush_plain(plain: list[str], runs: list[StyledRun]) -> None:
        """Emit buffered plain text as a single run."""
        if plain:
            text = "".join(plain)
            plain.clear()
            if text:
                runs.append(StyledRun(text=text, style=SpanStyle.PLAIN))


_default_parser = SpanParser()


def parse_spans(line: str) -> list[StyledRun]:
    """Parse a line into styled runs with the default parser."""
    return _default_parser.parse(line)
