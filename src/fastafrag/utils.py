"""Utility functions for the fastafrag package.

This module provides small helpers shared by the reader, the writer and the
option validator: FASTA extension detection, line wrapping and header
formatting.

Example:
    >>> from fastafrag.utils import has_fasta_extension, wrap_sequence
    >>> has_fasta_extension("genome.fna")
    True
    >>> wrap_sequence("ACGTACGT", width=3)
    ['ACG', 'TAC', 'GT']
"""

from pathlib import Path
from typing import List, Union

FASTA_EXTENSIONS = ("fasta", "fas", "fa", "fsa", "fna", "ffn", "faa", "frn")

FASTA_LINE_WIDTH = 60


def has_fasta_extension(path: Union[str, Path]) -> bool:
    """Return True if ``path`` ends with a conventional FASTA extension.

    The comparison is case-insensitive, so ``reads.FASTA`` is accepted.

    Args:
        path: File name or path to inspect.

    Returns:
        Whether the final suffix is one of FASTA_EXTENSIONS.
    """
    suffix = Path(path).suffix.lower().lstrip(".")
    return suffix in FASTA_EXTENSIONS


def wrap_sequence(sequence: str, width: int = FASTA_LINE_WIDTH) -> List[str]:
    """Split a sequence into lines of at most ``width`` characters.

    Args:
        sequence: Raw sequence text. Content is not modified.
        width: Maximum characters per line. Defaults to 60.

    Returns:
        List of lines; empty when the sequence is empty.

    Raises:
        ValueError: If width is not positive.
    """
    if width <= 0:
        raise ValueError(f"Line width must be positive, got {width}")
    return [sequence[i : i + width] for i in range(0, len(sequence), width)]


def format_fragment_header(
    header: str,
    index: int,
    base_location: int,
    length: int,
    overlap_distance: int,
    fragmentation_factor: int,
) -> str:
    """Build the label of a fragment record (without the leading '>').

    Example:
        >>> format_fragment_header("chr1", 1, 201, 200, 10, 5)
        'chr1, fragment: 1, starts_at_base: 201, length: 200, overlap_distance: 10, fragment_factor: 5'
    """
    return (
        f"{header}, fragment: {index}, starts_at_base: {base_location}, "
        f"length: {length}, overlap_distance: {overlap_distance}, "
        f"fragment_factor: {fragmentation_factor}"
    )
