"""Integration tests for the command line report (main.py)."""

import re

import pytest
from typer.testing import CliRunner

from config.settings import Config, ReportConfig, save_config
from main import app
from utils.logging import setup_logging

runner = CliRunner()

SAMPLE_LINE = re.compile(r"^[ \dAJQK]{2}\d?_[PHCT](,[ \dAJQK]{2}\d?_[PHCT]){2}: (\d+ ){2,4}$")
PERCENTILE_LINE = re.compile(r"^[ \d.]{5}: [ \d]{6} .{14}$")


@pytest.fixture(scope="module")
def default_output():
    result = runner.invoke(app, [])
    assert result.exit_code == 0, result.output
    return result.stdout.splitlines()


class TestDefaultReport:
    """Bare invocation prints the fixed report."""

    def test_line_count(self, default_output):
        assert len(default_output) == 1 + 10 + 15

    def test_population_line(self, default_output):
        assert default_output[0] == "132600"

    def test_sample_lines(self, default_output):
        samples = default_output[1:11]
        assert samples[0] == " A_P, A_H, A_C: 5 14 "
        for line in samples:
            assert SAMPLE_LINE.match(line), line

    def test_percentile_lines(self, default_output):
        percentiles = default_output[11:]
        for line in percentiles:
            assert PERCENTILE_LINE.match(line), line
        assert percentiles[0].startswith("0.999: 132466 ")
        assert percentiles[7].startswith("  0.5:  66300 ")
        assert percentiles[-1].startswith("0.001:    133 ")
        # lowest high card: 5-3-2 of mixed suits
        assert all(f"{r}_" in percentiles[-1] for r in ("2", "3", "5"))

    def test_report_command_matches_default(self, default_output):
        result = runner.invoke(app, ["report"])
        assert result.exit_code == 0
        assert result.stdout.splitlines() == default_output


class TestReportOptions:
    def test_config_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        save_config(Config(report=ReportConfig(sample_count=2, probabilities=(0.5, 0.001))), path)
        result = runner.invoke(app, ["report", "--config", str(path)])
        assert result.exit_code == 0, result.output
        lines = result.stdout.splitlines()
        assert len(lines) == 1 + 2 + 2
        assert lines[3].startswith("  0.5:  66300 ")

    def test_missing_config(self, tmp_path):
        result = runner.invoke(app, ["report", "--config", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 1
        assert "Config file not found" in result.output

    def test_malformed_yaml(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("report: [unclosed\n")
        result = runner.invoke(app, ["report", "--config", str(path)])
        assert result.exit_code == 1
        assert "Invalid config" in result.output

    def test_bad_card_width(self, tmp_path):
        path = tmp_path / "config.yaml"
        path.write_text("report:\n  card_width: -3\n")
        result = runner.invoke(app, ["report", "--config", str(path)])
        assert result.exit_code == 1
        assert "card_width" in result.output

    def test_log_file(self, tmp_path):
        path = tmp_path / "config.yaml"
        log_path = tmp_path / "logs" / "run.log"
        config = Config(report=ReportConfig(sample_count=1, probabilities=(0.5,)))
        config.logging.level = "INFO"
        save_config(config, path)
        try:
            result = runner.invoke(app, ["report", "--config", str(path), "--log-file", str(log_path)])
        finally:
            setup_logging("WARNING")
        assert result.exit_code == 0, result.output
        assert "Built report over 132600 hands" in log_path.read_text()
        assert "132600" in result.stdout.splitlines()


class TestClassifyCommand:
    @pytest.mark.parametrize(
        "labels,expected_type,expected_score",
        [
            (["A_P", "A_H", "A_C"], "Bomb", "5 14"),
            (["K_P", "K_H", "2_C"], "Pair", "1 13 2"),
            (["2_P", "5_P", "9_P"], "Flush", "2 9 5 2"),
            (["3_C", "A_P", "2_H"], "Straight", "3 14"),
        ],
    )
    def test_classify(self, labels, expected_type, expected_score):
        result = runner.invoke(app, ["classify", *labels])
        assert result.exit_code == 0, result.output
        assert expected_type in result.output
        assert expected_score in result.output

    @pytest.mark.parametrize("labels", [["A_P", "A_P", "2_H"], ["A_P", "2_H"], ["A_P", "2_H", "X_Y"]])
    def test_classify_invalid(self, labels):
        result = runner.invoke(app, ["classify", *labels])
        assert result.exit_code == 1


class TestCompareCommand:
    def test_compare(self):
        result = runner.invoke(app, ["compare", "K_P,K_H,2_C", "2_P,5_P,9_P"])
        assert result.exit_code == 0, result.output
        assert "loses to" in result.output

    def test_compare_tie(self):
        result = runner.invoke(app, ["compare", "2_P,5_P,9_P", "2_H,5_H,9_H"])
        assert result.exit_code == 0
        assert "ties" in result.output

    def test_compare_invalid(self):
        result = runner.invoke(app, ["compare", "K_P,K_H", "2_P,5_P,9_P"])
        assert result.exit_code == 1


class TestOtherCommands:
    def test_distribution(self, tmp_path):
        plot_path = tmp_path / "types.png"
        result = runner.invoke(app, ["distribution", "--plot", str(plot_path)])
        assert result.exit_code == 0, result.output
        assert "Bomb" in result.output
        assert "98,640" in result.output
        assert plot_path.exists()

    def test_info(self):
        result = runner.invoke(app, ["info"])
        assert result.exit_code == 0
        assert "1000000007" in result.output
