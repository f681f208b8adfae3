"""Fragmentation engine.

Each sequence is cut by two nested sweeps. The base sweep advances a nominal
start along the sequence in steps of the fragment length
(``len(sequence) // fragmentation_factor``). For every base position the
overlap sweep walks the overlap distances from ``min_overlap`` to
``max_overlap`` and emits one fragment per distance:

    overlap distance <= 0 (gap)      start = base + frag_length + |distance|
    overlap distance  > 0 (overlap)  start = base + frag_length - distance

A negative overlap start is clamped to 0 with the fragment keeping its end
position, and fragments running past the end of the sequence are truncated.

Example:
    >>> from fastafrag.config import FragmentationParameters
    >>> from fastafrag.fragment import fragment_record
    >>> from fastafrag.io import SequenceRecord
    >>> record = SequenceRecord("chr1", "ACGT" * 250)
    >>> params = FragmentationParameters(min_overlap=10, max_overlap=100)
    >>> result = fragment_record(record, params)
    >>> [f.overlap_distance for f in result.fragments[:3]]
    [10, 28, 46]
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from fastafrag.config import FragmentationParameters
from fastafrag.io import SequenceRecord
from fastafrag.logging_config import get_logger
from fastafrag.utils import format_fragment_header

logger = get_logger("fragment")

SHORTER_THAN_MIN = "shorter than min_overlap_distance"
SHORTER_THAN_MAX = "shorter than max_overlap_distance"


@dataclass(frozen=True)
class Fragment:
    """A fragment cut from a sequence.

    Attributes:
        index: 1-based ordinal of the fragment within its sequence's output.
        start: 0-based offset of the fragment in the sequence, after clamping.
        length: Nominal fragment length for the sequence. The extracted text
            is shorter when clamped at either end of the sequence.
        overlap_distance: Overlap sweep value that produced the fragment.
        fragmentation_factor: Factor used for the run.
        base_location: 1-based base marker reported in the header.
        sequence: Extracted fragment text.
    """

    index: int
    start: int
    length: int
    overlap_distance: int
    fragmentation_factor: int
    base_location: int
    sequence: str

    def header(self, label: str) -> str:
        """Header for this fragment, derived from the source record's label."""
        return format_fragment_header(
            label,
            self.index,
            self.base_location,
            self.length,
            self.overlap_distance,
            self.fragmentation_factor,
        )


@dataclass(frozen=True)
class SkipDecision:
    """Records that a whole sequence produced no fragments by design."""

    header: str
    reason: str


@dataclass
class FragmentationResult:
    """Outcome of fragmenting one record."""

    record: SequenceRecord
    fragments: List[Fragment] = field(default_factory=list)
    skipped: Optional[SkipDecision] = None


def check_eligibility(length: int, params: FragmentationParameters) -> Optional[str]:
    """Return the reason a sequence of ``length`` must be skipped, or None.

    Example:
        >>> check_eligibility(50, FragmentationParameters(10, 100))
        'shorter than max_overlap_distance'
    """
    if length < abs(params.min_overlap):
        return SHORTER_THAN_MIN
    if length < params.max_overlap:
        return SHORTER_THAN_MAX
    return None


def fragment_length(length: int, fragmentation_factor: int) -> int:
    """Nominal fragment length; a higher factor gives shorter fragments."""
    return length // fragmentation_factor


def iter_fragments(sequence: str, params: FragmentationParameters) -> Iterator[Fragment]:
    """Run the base and overlap sweeps over ``sequence``.

    The eligibility gate is not applied here; see fragment_record().

    Args:
        sequence: Sequence text to cut.
        params: Sweep parameters.

    Yields:
        Fragment values in emission order, indexed from 1.
    """
    seq_length = len(sequence)
    frag_length = fragment_length(seq_length, params.fragmentation_factor)
    if frag_length <= 0:
        logger.warning(
            "Fragment length is 0 for a sequence of %d bases with fragmentation factor %d; "
            "no fragments produced",
            seq_length,
            params.fragmentation_factor,
        )
        return

    if params.overlap_range_length // params.fragmentation_factor <= 0:
        logger.debug(
            "Overlap range %d..%d is narrower than fragmentation factor %d; stepping by 1",
            params.min_overlap,
            params.max_overlap,
            params.fragmentation_factor,
        )

    index = 0
    for base_start in range(0, seq_length, frag_length):
        base_location = base_start + frag_length + 1
        if base_location >= seq_length:
            continue

        for overlap in params.overlap_distances():
            if overlap <= 0:
                start = base_start + frag_length + abs(overlap)
                if start >= seq_length:
                    continue
                end = start + frag_length
            else:
                end = base_start + 2 * frag_length - overlap
                start = max(0, base_start + frag_length - overlap)
                if end <= start:
                    continue

            index += 1
            yield Fragment(
                index=index,
                start=start,
                length=frag_length,
                overlap_distance=overlap,
                fragmentation_factor=params.fragmentation_factor,
                base_location=base_location,
                sequence=sequence[start:end],
            )


def fragment_record(record: SequenceRecord, params: FragmentationParameters) -> FragmentationResult:
    """Fragment one record, or decide to skip it.

    Args:
        record: The record to cut.
        params: Sweep parameters shared by the run.

    Returns:
        A FragmentationResult whose ``skipped`` is set when the sequence is
        shorter than the overlap distances allow. An eligible sequence can
        still produce an empty fragment list.
    """
    reason = check_eligibility(len(record), params)
    if reason is not None:
        logger.debug("Skipping %s (%d bases): %s", record.header, len(record), reason)
        return FragmentationResult(record=record, skipped=SkipDecision(record.header, reason))

    fragments = list(iter_fragments(record.sequence, params))
    logger.debug("%s (%d bases): %d fragments", record.header, len(record), len(fragments))
    return FragmentationResult(record=record, fragments=fragments)
