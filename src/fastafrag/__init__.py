"""FASTA sequence fragmentation.

This package cuts the sequences of a FASTA file into fragments that overlap
or are separated by gaps, sweeping a range of overlap distances for each
base position, and writes them out as a new FASTA file.

Example:
    >>> from fastafrag import FragmentationParameters, fragment_fasta
    >>> params = FragmentationParameters(min_overlap=10, max_overlap=100)
    >>> summary = fragment_fasta(Path("genome.fasta"), Path("fragments.fasta"), params)
"""

from fastafrag.config import (
    ConfigurationError,
    FragmentationParameters,
    InvalidFragmentationFactor,
    InvalidOverlapDistance,
    MissingRequiredOption,
    RunConfig,
    load_config,
    validate_options,
)
from fastafrag.fragment import (
    Fragment,
    FragmentationResult,
    SkipDecision,
    fragment_record,
    iter_fragments,
)
from fastafrag.io import SequenceRecord, iter_fasta_records, read_fasta, write_fasta_record
from fastafrag.logging_config import get_logger, setup_logging
from fastafrag.pipeline import FragmentationSummary, fragment_fasta, fragment_stream

__version__ = "0.1.0"

__all__ = [
    # Configuration
    "FragmentationParameters",
    "RunConfig",
    "load_config",
    "validate_options",
    "ConfigurationError",
    "MissingRequiredOption",
    "InvalidFragmentationFactor",
    "InvalidOverlapDistance",
    # FASTA I/O
    "SequenceRecord",
    "iter_fasta_records",
    "read_fasta",
    "write_fasta_record",
    # Fragmentation
    "Fragment",
    "FragmentationResult",
    "SkipDecision",
    "fragment_record",
    "iter_fragments",
    # Pipeline
    "FragmentationSummary",
    "fragment_fasta",
    "fragment_stream",
    # Logging
    "setup_logging",
    "get_logger",
]
