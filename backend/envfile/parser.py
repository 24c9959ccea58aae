# Line parsing for .env style KEY=VALUE files.
import logging
from typing import Iterable, Iterator, List, NamedTuple, Optional

logger = logging.getLogger(__name__)


class ParsedPair(NamedTuple):
    key: str
    value: str


# Parse one line into a (key, value) pair, or None for blank, comment and
# malformed lines.
def parse_line(line: str) -> Optional[ParsedPair]:
    stripped = line.strip()
    if not stripped or stripped.startswith("#"):
        return None

    equals = stripped.find("=")
    if equals == -1:
        logger.debug("Skipping line without '=': %r", stripped)
        return None

    comment = stripped.find("#")
    if comment != -1 and comment < equals:
        # The comment starts inside what would be the key.
        return None

    key = stripped[:equals].strip()
    if not key:
        logger.debug("Skipping line with empty key: %r", stripped)
        return None

    end = comment if comment != -1 else len(stripped)
    return ParsedPair(key, stripped[equals + 1 : end].strip())


# Lazily parse an iterable of lines, dropping lines that produce nothing.
def iter_pairs(lines: Iterable[str]) -> Iterator[ParsedPair]:
    for line in lines:
        pair = parse_line(line)
        if pair is not None:
            yield pair


# Parse a whole buffer into its pairs, in order of appearance. Only "\n"
# ends a line; trimming drops the "\r" of CRLF endings.
def parse_lines(text: str) -> List[ParsedPair]:
    return list(iter_pairs(text.split("\n")))


def only_keys(pairs: Iterable[ParsedPair]) -> List[str]:
    return [key for key, _ in pairs]
