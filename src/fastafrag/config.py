"""Configuration loading and validation for fastafrag runs.

This module turns raw option values into a validated RunConfig holding the
input and output paths, the optional diagnostic log path and the immutable
FragmentationParameters shared by every sequence of the run.

Option values can be provided through:
    - Explicit values (usually parsed from the command line)
    - A YAML options file whose keys are the long option names
    - Environment variables (FASTAFRAG_FRAGMENTATION_FACTOR)
    - A .env file in the current directory

Example:
    >>> from fastafrag.config import validate_options
    >>> config = validate_options({
    ...     "input_file": "genome.fasta",
    ...     "output_file": "fragments.fasta",
    ...     "min_overlap_distance": 10,
    ...     "max_overlap_distance": 100,
    ... })
    >>> config.parameters.fragmentation_factor
    5
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Mapping, Optional

import yaml
from dotenv import load_dotenv

from fastafrag.logging_config import get_logger
from fastafrag.utils import FASTA_EXTENSIONS, has_fasta_extension

logger = get_logger("config")

REQUIRED_OPTIONS = (
    "input_file",
    "output_file",
    "min_overlap_distance",
    "max_overlap_distance",
)
OPTION_NAMES = REQUIRED_OPTIONS + ("fragmentation_factor", "log")

DEFAULT_FRAGMENTATION_FACTOR = 5
MIN_FRAGMENTATION_FACTOR = 2

FRAGMENTATION_FACTOR_ENV = "FASTAFRAG_FRAGMENTATION_FACTOR"


class ConfigurationError(ValueError):
    """Raised when run options are missing or invalid."""


class MissingRequiredOption(ConfigurationError):
    """Raised when a required option was not supplied."""

    def __init__(self, option: str):
        self.option = option
        super().__init__(f"--{option} is a required option")


class InvalidFragmentationFactor(ConfigurationError):
    """Raised when the fragmentation factor is negative or below 2."""


class InvalidOverlapDistance(ConfigurationError):
    """Raised when the max overlap distance is negative."""


@dataclass(frozen=True)
class FragmentationParameters:
    """Numeric parameters driving the fragmentation sweeps.

    Attributes:
        min_overlap: First overlap distance of the sweep. Negative values
            produce gaps between fragments, positive values overlaps.
        max_overlap: Last overlap distance of the sweep (inclusive).
        fragmentation_factor: Divisor applied to the sequence length to get
            the fragment length, and to the overlap range to get its step.
    """

    min_overlap: int
    max_overlap: int
    fragmentation_factor: int = DEFAULT_FRAGMENTATION_FACTOR

    @property
    def overlap_range_length(self) -> int:
        """Number of integers from min_overlap through max_overlap."""
        return max(0, self.max_overlap - self.min_overlap + 1)

    @property
    def overlap_increment(self) -> int:
        """Step of the overlap sweep, never smaller than 1."""
        return max(1, self.overlap_range_length // self.fragmentation_factor)

    def overlap_distances(self) -> range:
        """Overlap distances visited for every base position."""
        return range(self.min_overlap, self.max_overlap + 1, self.overlap_increment)


@dataclass(frozen=True)
class RunConfig:
    """Validated options for a single fragmentation run."""

    input_file: Path
    output_file: Path
    parameters: FragmentationParameters
    log_file: Optional[Path] = None


def _coerce_int(option: str, value: Any) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"--{option} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ConfigurationError(f"--{option} must be an integer, got {value!r}") from None


def validate_fragmentation_factor(value: Any) -> int:
    """Validate a fragmentation factor, applying the default when omitted.

    Args:
        value: Raw factor value or None.

    Returns:
        The factor as an int (5 when value is None).

    Raises:
        InvalidFragmentationFactor: If the factor is negative or below 2.
        ConfigurationError: If the value is not an integer.
    """
    if value is None:
        return DEFAULT_FRAGMENTATION_FACTOR

    factor = _coerce_int("fragmentation_factor", value)
    if factor < 0:
        raise InvalidFragmentationFactor(
            "--fragmentation_factor cannot be negative number."
        )
    if factor < MIN_FRAGMENTATION_FACTOR:
        raise InvalidFragmentationFactor(
            "If you want fragments, --fragmentation_factor should be at least "
            f"{MIN_FRAGMENTATION_FACTOR}."
        )
    return factor


def validate_options(options: Mapping[str, Any]) -> RunConfig:
    """Check raw option values and build a RunConfig.

    Args:
        options: Mapping keyed by long option names (input_file, output_file,
            min_overlap_distance, max_overlap_distance, fragmentation_factor,
            log). Missing keys and None values are treated as absent.

    Returns:
        A RunConfig with resolved paths and parameters.

    Raises:
        MissingRequiredOption: If a required option is absent.
        InvalidFragmentationFactor: If the factor is negative or below 2.
        InvalidOverlapDistance: If max_overlap_distance is negative.
        ConfigurationError: If a numeric option is not an integer, or the
            output or log path is the input file.
    """
    for option in REQUIRED_OPTIONS:
        if options.get(option) is None:
            raise MissingRequiredOption(option)

    input_file = Path(options["input_file"])
    output_file = Path(options["output_file"])
    log_file = options.get("log")
    log_file = Path(log_file) if log_file is not None else None

    for option, path in (("output_file", output_file), ("log", log_file)):
        if path is not None and path.resolve() == input_file.resolve():
            raise ConfigurationError(
                f"--{option} {path} is the same file as --input_file; it would be overwritten"
            )

    if not has_fasta_extension(input_file):
        logger.warning(
            "--input_file %s does not have a FASTA extension (%s); reading it anyway",
            input_file,
            ", ".join(FASTA_EXTENSIONS),
        )

    min_overlap = _coerce_int("min_overlap_distance", options["min_overlap_distance"])
    max_overlap = _coerce_int("max_overlap_distance", options["max_overlap_distance"])
    if max_overlap < 0:
        raise InvalidOverlapDistance("--max_overlap_distance must be positive.")
    if min_overlap > max_overlap:
        logger.warning(
            "--min_overlap_distance %d is greater than --max_overlap_distance %d; "
            "no fragments will be produced",
            min_overlap,
            max_overlap,
        )

    factor = validate_fragmentation_factor(options.get("fragmentation_factor"))

    return RunConfig(
        input_file=input_file,
        output_file=output_file,
        parameters=FragmentationParameters(
            min_overlap=min_overlap,
            max_overlap=max_overlap,
            fragmentation_factor=factor,
        ),
        log_file=log_file,
    )


def load_options_from_yaml(yaml_path: Path) -> Dict[str, Any]:
    """Load option values from a YAML file.

    Args:
        yaml_path: Path to a YAML mapping keyed by long option names.

    Returns:
        Dictionary of option values. Unknown keys are dropped with a warning.

    Raises:
        ConfigurationError: If the file is not valid YAML or its root is not
            a mapping.
        OSError: If the file cannot be read.
    """
    yaml_path = Path(yaml_path)
    with open(yaml_path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigurationError(f"Invalid YAML in {yaml_path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{yaml_path} must contain a mapping at the root level")

    options = {}
    for key, value in data.items():
        if key in OPTION_NAMES:
            options[key] = value
        else:
            logger.warning("Ignoring unknown option %r in %s", key, yaml_path)
    return options


def load_config(
    options: Optional[Mapping[str, Any]] = None,
    config_path: Optional[Path] = None,
    env_path: Optional[Path] = None,
) -> RunConfig:
    """Resolve option values from every source and validate them.

    Precedence, highest first:
        1. Explicit values in ``options`` (None means not given)
        2. Values from the YAML file at ``config_path``
        3. FASTAFRAG_FRAGMENTATION_FACTOR from the environment or .env file
        4. Built-in defaults

    Args:
        options: Explicit option values, usually from the command line.
        config_path: Optional YAML options file.
        env_path: Path to a .env file. If not provided, searches for .env
            in the current directory and parent directories.

    Returns:
        A validated RunConfig.

    Raises:
        ConfigurationError: If the merged options are missing or invalid.
    """
    if env_path:
        load_dotenv(env_path)
    else:
        load_dotenv()

    merged: Dict[str, Any] = {}

    env_factor = os.getenv(FRAGMENTATION_FACTOR_ENV)
    if env_factor:
        merged["fragmentation_factor"] = env_factor

    if config_path:
        merged.update(load_options_from_yaml(config_path))

    for key, value in (options or {}).items():
        if value is not None:
            merged[key] = value

    return validate_options(merged)
