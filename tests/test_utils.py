"""Tests for fastafrag.utils module."""

from pathlib import Path

import pytest

from fastafrag.utils import format_fragment_header, has_fasta_extension, wrap_sequence


class TestHasFastaExtension:
    @pytest.mark.parametrize(
        "name",
        ["a.fasta", "a.fas", "a.fa", "a.fsa", "a.fna", "a.ffn", "a.faa", "a.frn"],
    )
    def test_known_extensions(self, name):
        assert has_fasta_extension(name)

    def test_case_insensitive(self):
        assert has_fasta_extension("reads.FASTA")

    def test_path_object(self):
        assert has_fasta_extension(Path("data") / "genome.fna")

    def test_other_extensions(self):
        assert not has_fasta_extension("reads.txt")
        assert not has_fasta_extension("reads.fastq")
        assert not has_fasta_extension("reads")

    def test_only_final_suffix_counts(self):
        assert not has_fasta_extension("genome.fasta.gz")


class TestWrapSequence:
    def test_basic(self):
        assert wrap_sequence("ACGTACGT", width=3) == ["ACG", "TAC", "GT"]

    def test_default_width(self):
        lines = wrap_sequence("A" * 61)
        assert [len(line) for line in lines] == [60, 1]

    def test_empty(self):
        assert wrap_sequence("") == []

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            wrap_sequence("ACGT", width=0)


class TestFormatFragmentHeader:
    def test_negative_overlap(self):
        assert format_fragment_header("chr2", 3, 41, 20, -8, 5) == (
            "chr2, fragment: 3, starts_at_base: 41, length: 20, "
            "overlap_distance: -8, fragment_factor: 5"
        )
