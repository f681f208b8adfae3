"""Tests for fastafrag.cli module."""

import pytest

from fastafrag.cli import build_parser, main
from fastafrag.config import FRAGMENTATION_FACTOR_ENV


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    monkeypatch.delenv(FRAGMENTATION_FACTOR_ENV, raising=False)


@pytest.fixture
def input_fasta(tmp_path):
    path = tmp_path / "input.fasta"
    path.write_text(
        ">seq1\n" + "ACGT" * 250 + "\n>seq2\n" + "ACGT" * 10 + "\n",
        encoding="utf-8",
    )
    return path


class TestBuildParser:
    def test_short_options(self):
        args = build_parser().parse_args(
            ["-i", "in.fa", "-o", "out.fa", "-m", "-200", "-n", "100", "-f", "8", "-l", "x.log"]
        )
        assert str(args.input_file) == "in.fa"
        assert str(args.output_file) == "out.fa"
        assert args.min_overlap_distance == -200
        assert args.max_overlap_distance == 100
        assert args.fragmentation_factor == 8
        assert str(args.log) == "x.log"

    def test_long_options(self):
        args = build_parser().parse_args(
            [
                "--input_file", "in.fa",
                "--output_file", "out.fa",
                "--min_overlap_distance", "10",
                "--max_overlap_distance", "100",
            ]
        )
        assert args.min_overlap_distance == 10
        assert args.fragmentation_factor is None
        assert args.log is None


class TestMain:
    def test_success(self, tmp_path, input_fasta):
        output = tmp_path / "out.fasta"
        log = tmp_path / "skipped.log"

        main(["-i", str(input_fasta), "-o", str(output), "-m", "10", "-n", "100", "-l", str(log)])

        text = output.read_text(encoding="utf-8")
        assert text.count(">seq1, fragment: ") == 24
        assert "seq2 was skipped because it is shorter than max_overlap_distance" in text
        assert log.read_text(encoding="utf-8").startswith(">seq2\n")

    def test_help_exits_zero(self, capsys):
        with pytest.raises(SystemExit) as excinfo:
            main(["--help"])
        assert excinfo.value.code == 0
        assert "--fragmentation_factor" in capsys.readouterr().out

    def test_missing_required_option(self, tmp_path, input_fasta):
        output = tmp_path / "out.fasta"
        with pytest.raises(SystemExit) as excinfo:
            main(["-i", str(input_fasta), "-o", str(output), "-m", "10"])
        assert excinfo.value.code == 1
        assert not output.exists()

    def test_fragmentation_factor_one_rejected(self, tmp_path, input_fasta):
        output = tmp_path / "out.fasta"
        with pytest.raises(SystemExit) as excinfo:
            main(["-i", str(input_fasta), "-o", str(output), "-m", "10", "-n", "100", "-f", "1"])
        assert excinfo.value.code == 1
        assert not output.exists()

    def test_missing_input_file(self, tmp_path):
        output = tmp_path / "out.fasta"
        log = tmp_path / "skipped.log"
        with pytest.raises(SystemExit) as excinfo:
            main(
                [
                    "-i", str(tmp_path / "missing.fasta"),
                    "-o", str(output),
                    "-m", "10",
                    "-n", "100",
                    "-l", str(log),
                ]
            )
        assert excinfo.value.code == 1
        assert not output.exists()
        assert not log.exists()

    def test_output_same_as_input_rejected(self, input_fasta):
        original = input_fasta.read_text(encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main(["-i", str(input_fasta), "-o", str(input_fasta), "-m", "10", "-n", "100"])
        assert excinfo.value.code == 1
        assert input_fasta.read_text(encoding="utf-8") == original

    def test_log_same_as_input_rejected(self, tmp_path, input_fasta):
        original = input_fasta.read_text(encoding="utf-8")
        with pytest.raises(SystemExit) as excinfo:
            main(
                [
                    "-i", str(input_fasta),
                    "-o", str(tmp_path / "out.fasta"),
                    "-m", "10",
                    "-n", "100",
                    "-l", str(input_fasta),
                ]
            )
        assert excinfo.value.code == 1
        assert input_fasta.read_text(encoding="utf-8") == original
        assert not (tmp_path / "out.fasta").exists()

    def test_uncreatable_log_file(self, tmp_path, input_fasta):
        with pytest.raises(SystemExit) as excinfo:
            main(
                [
                    "-i", str(input_fasta),
                    "-o", str(tmp_path / "out.fasta"),
                    "-m", "10",
                    "-n", "100",
                    "-l", str(tmp_path / "no_such_dir" / "skipped.log"),
                ]
            )
        assert excinfo.value.code == 1

    def test_options_from_yaml(self, tmp_path, input_fasta):
        output = tmp_path / "out.fasta"
        config = tmp_path / "run.yaml"
        config.write_text(
            f"input_file: {input_fasta}\n"
            f"output_file: {tmp_path / 'ignored.fasta'}\n"
            "min_overlap_distance: 10\n"
            "max_overlap_distance: 100\n",
            encoding="utf-8",
        )

        main(["-c", str(config), "-o", str(output)])

        assert output.exists()
        assert not (tmp_path / "ignored.fasta").exists()

    def test_missing_yaml_file(self, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["-c", str(tmp_path / "missing.yaml")])
        assert excinfo.value.code == 1

    def test_non_integer_argument_rejected_by_parser(self, input_fasta, tmp_path):
        with pytest.raises(SystemExit) as excinfo:
            main(["-i", str(input_fasta), "-o", str(tmp_path / "o.fa"), "-m", "ten", "-n", "100"])
        assert excinfo.value.code == 2
