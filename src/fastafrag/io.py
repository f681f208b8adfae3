"""FASTA reading and writing for the fastafrag package.

This module groups input lines into SequenceRecord values and writes
fragments back out as 60-column FASTA records.

Example:
    >>> from fastafrag.io import read_fasta, write_fasta_record
    >>> for record in read_fasta(Path("genome.fasta")):
    ...     print(record.header, len(record))
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Iterator, List, Optional

from fastafrag.logging_config import get_logger
from fastafrag.utils import FASTA_LINE_WIDTH, wrap_sequence

logger = get_logger("io")

HEADER_PATTERN = re.compile(r"^>(.+)$")
WHITESPACE_PATTERN = re.compile(r"\s+")


@dataclass(frozen=True)
class SequenceRecord:
    """A FASTA record.

    Attributes:
        header: Header text without the leading '>'.
        sequence: Concatenated sequence with all whitespace removed.
    """

    header: str
    sequence: str

    def __len__(self) -> int:
        return len(self.sequence)


def _finalize(header: str, lines: List[str]) -> SequenceRecord:
    sequence = WHITESPACE_PATTERN.sub("", "".join(lines))
    return SequenceRecord(header=header, sequence=sequence)


def iter_fasta_records(lines: Iterable[str]) -> Iterator[SequenceRecord]:
    """Group FASTA lines into records.

    A line of the form ``>label`` closes the open record (if any) and starts
    a new one. Other non-empty lines belong to the open record. The last
    record is always yielded, even without a following header.

    Args:
        lines: Input lines, with or without line terminators.

    Yields:
        SequenceRecord values in input order. Nothing is yielded when the
        input has no header line.

    Example:
        >>> records = list(iter_fasta_records([">a", "AC GT", ">b", "TT"]))
        >>> [(r.header, r.sequence) for r in records]
        [('a', 'ACGT'), ('b', 'TT')]
    """
    header: Optional[str] = None
    buffer: List[str] = []

    for line_number, line in enumerate(lines, start=1):
        line = line.rstrip("\r\n")
        match = HEADER_PATTERN.match(line)
        if match:
            if header is not None:
                yield _finalize(header, buffer)
            header = match.group(1)
            buffer = []
        elif not line:
            continue
        elif header is None:
            logger.debug("Ignoring line %d found before the first header", line_number)
        else:
            buffer.append(line)

    if header is not None:
        yield _finalize(header, buffer)


def read_fasta(path: Path) -> Iterator[SequenceRecord]:
    """Yield the records of a FASTA file one at a time.

    Args:
        path: Input file path.

    Yields:
        SequenceRecord values. The file is closed once the generator is
        exhausted or closed.

    Raises:
        FileNotFoundError: If the file doesn't exist.
    """
    path = Path(path)
    with open(path, "r", encoding="utf-8") as f:
        yield from iter_fasta_records(f)


def write_fasta_record(
    handle: IO[str],
    header: str,
    sequence: str,
    width: int = FASTA_LINE_WIDTH,
) -> None:
    """Write one FASTA record with the sequence wrapped at ``width``.

    Args:
        handle: Writable text stream.
        header: Header text without the leading '>'.
        sequence: Sequence text, written unchanged.
        width: Characters per sequence line. Defaults to 60.
    """
    handle.write(f">{header}\n")
    for chunk in wrap_sequence(sequence, width):
        handle.write(f"{chunk}\n")


def write_skip_note(handle: IO[str], header: str, reason: str) -> None:
    """Write the plain-text line noting that a sequence was skipped."""
    handle.write(f"{header} was skipped because it is {reason}\n")
