"""Run orchestration: read, fragment and write a whole FASTA file.

Example:
    >>> from fastafrag.config import validate_options
    >>> from fastafrag.pipeline import fragment_fasta
    >>> config = validate_options({...})
    >>> summary = fragment_fasta(
    ...     config.input_file, config.output_file, config.parameters, config.log_file
    ... )
"""

from dataclasses import dataclass
from pathlib import Path
from typing import IO, Iterable, Optional

from fastafrag.config import FragmentationParameters
from fastafrag.fragment import fragment_record
from fastafrag.io import SequenceRecord, iter_fasta_records, write_fasta_record, write_skip_note
from fastafrag.logging_config import diagnostic_log, get_diagnostic_logger, get_logger

logger = get_logger("pipeline")


@dataclass
class FragmentationSummary:
    """Counters collected over a run."""

    records: int = 0
    fragments: int = 0
    skipped: int = 0


def fragment_stream(
    records: Iterable[SequenceRecord],
    output: IO[str],
    params: FragmentationParameters,
) -> FragmentationSummary:
    """Fragment every record and write the results to ``output``.

    Skipped sequences get a plain-text note in ``output`` and an entry in
    the diagnostic log.

    Args:
        records: Records to process, consumed one at a time.
        output: Writable text stream for the FASTA output.
        params: Sweep parameters shared by all records.

    Returns:
        A FragmentationSummary for the processed records.
    """
    diagnostics = get_diagnostic_logger()
    summary = FragmentationSummary()

    for record in records:
        summary.records += 1
        result = fragment_record(record, params)

        if result.skipped is not None:
            summary.skipped += 1
            write_skip_note(output, result.skipped.header, result.skipped.reason)
            diagnostics.info(
                ">%s\nSkipped because sequence is %s\n",
                result.skipped.header,
                result.skipped.reason,
            )
            continue

        for fragment in result.fragments:
            write_fasta_record(output, fragment.header(record.header), fragment.sequence)
        summary.fragments += len(result.fragments)

    return summary


def fragment_fasta(
    input_path: Path,
    output_path: Path,
    params: FragmentationParameters,
    log_path: Optional[Path] = None,
) -> FragmentationSummary:
    """Fragment a FASTA file into a new FASTA file.

    The input, log and output files are opened once for the whole run and
    closed on every exit path.

    Args:
        input_path: FASTA file to read.
        output_path: FASTA file to create (overwritten if present).
        params: Sweep parameters.
        log_path: Optional diagnostic log for skipped sequences.

    Returns:
        A FragmentationSummary for the run.

    Raises:
        OSError: If the input cannot be opened or an output cannot be created.
    """
    with open(input_path, "r", encoding="utf-8") as in_fh:
        with diagnostic_log(log_path):
            with open(output_path, "w", encoding="utf-8") as out_fh:
                logger.debug("Reading %s", input_path)
                summary = fragment_stream(iter_fasta_records(in_fh), out_fh, params)

    logger.debug(
        "Processed %d records: %d fragments, %d skipped",
        summary.records,
        summary.fragments,
        summary.skipped,
    )
    return summary
