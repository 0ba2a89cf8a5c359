"""Unit tests for cli.py."""

import json
import tempfile
from pathlib import Path
from unittest.mock import patch

import pytest

from salesanalyzer.cli import load_config, main

CSV_CONTENT = """Receipt Type,Profit,Date Created,Customer Name
Retail Sale,$10.00,01/05/2024,
Club Visit/Sale,$5.50,01/05/2024,
Retail Sale,$3.00,02/01/2024,
Retail Sale,N/A,02/03/2024,
"""


def write_csv(tmpdir: str, content: str = CSV_CONTENT, name: str = "sales.csv") -> Path:
    csv_file = Path(tmpdir) / name
    with open(csv_file, "w", encoding="utf-8") as f:
        f.write(content)
    return csv_file


def run_main(argv: list[str]) -> str:
    """Run main() with argv and return what was logged at INFO level."""
    with (
        patch("sys.argv", ["cli.py", *argv]),
        patch("salesanalyzer.cli.logger") as mock_logger,
    ):
        main()
    return "\n".join(str(call.args[0]) for call in mock_logger.info.call_args_list)


class TestLoadConfig:
    """Tests for load_config function."""

    def test_load_config_existing_file(self):
        """Test loading config from existing file."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "config.json"
            config_data = {"language": "es", "output_format": "daily"}

            with open(config_file, "w", encoding="utf-8") as f:
                json.dump(config_data, f)

            assert load_config(str(config_file)) == config_data

    def test_load_config_none(self):
        """Test that no config path gives an empty config."""
        assert load_config(None) == {}

    def test_load_config_nonexistent_file(self):
        """Test loading config from non-existent file."""
        assert load_config("/nonexistent/path/config.json") == {}

    def test_load_config_invalid_json(self):
        """Test loading config with invalid JSON."""
        with tempfile.TemporaryDirectory() as tmpdir:
            config_file = Path(tmpdir) / "config.json"

            with open(config_file, "w", encoding="utf-8") as f:
                f.write("invalid json {")

            with patch("salesanalyzer.cli.logger") as mock_logger:
                result = load_config(str(config_file))

            assert result == {}
            mock_logger.warning.assert_called_once()


class TestCLIMain:
    """Tests for main() function."""

    def test_main_default_summary(self):
        """Test that the most recent month is summarized by default."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            output = run_main([str(csv_file)])

        assert "File: sales.csv" in output
        assert "Month: February" in output
        assert "Total Profit: $3.00" in output
        assert "Months: [February], January, All months" in output
        assert "Skipped rows" not in output

    def test_main_all_months_spanish(self):
        """Test --month all with Spanish month labels."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            output = run_main([str(csv_file), "--month", "all", "--language", "es"])

        assert "Retail Sales: $13.00" in output
        assert "Club Visit/Sale: $5.50" in output
        assert "Total Profit: $18.50" in output
        assert "Months: Febrero, Enero, [All months]" in output

    def test_main_month_by_spanish_name(self):
        """Test selecting a month by its Spanish name."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            output = run_main([str(csv_file), "--month", "enero"])

        assert "Month: January" in output
        assert "Total Profit: $15.50" in output

    def test_main_daily_and_excel(self):
        """Test the 'all' output format."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            output = run_main([str(csv_file), "--format", "all", "--month", "all"])

        assert "01/05/2024 | $10.00 | $5.50 | $15.50" in output
        assert "02/01/2024\t3.00\t0.00\t3.00" in output
        assert "Total\t13.00\t5.50\t18.50" in output

    def test_main_diagnostics(self):
        """Test that --diagnostics reports skipped rows."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            output = run_main([str(csv_file), "--diagnostics"])

        assert "Skipped rows: 1" in output
        assert "invalid_amount: 1" in output

    def test_main_config_defaults(self):
        """Test that config values are used when flags are absent."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(
                tmpdir,
                "Receipt Type;Profit;Date Created\nRetail Sale;$1,000.00;03/01/2024\n",
            )
            config_file = Path(tmpdir) / "config.json"
            with open(config_file, "w", encoding="utf-8") as f:
                json.dump(
                    {"language": "es", "output_format": "excel", "csv_delimiter": ";"},
                    f,
                )

            output = run_main(["--config", str(config_file), str(csv_file)])

        assert "03/01/2024\t1000.00\t0.00\t1000.00" in output

    def test_main_flags_override_config(self):
        """Test that command-line flags win over config values."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            config_file = Path(tmpdir) / "config.json"
            with open(config_file, "w", encoding="utf-8") as f:
                json.dump({"output_format": "excel", "month": "all"}, f)

            output = run_main(
                ["--config", str(config_file), str(csv_file), "--format", "summary"],
            )

        assert "Month: All months" in output
        assert "\t" not in output

    def test_main_unknown_month(self):
        """Test that an unknown month exits with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            with (
                patch("sys.argv", ["cli.py", str(csv_file), "--month", "Smarch"]),
                patch("salesanalyzer.cli.logger") as mock_logger,
                pytest.raises(SystemExit) as exc_info,
            ):
                main()

        assert exc_info.value.code == 1
        mock_logger.error.assert_called_once()

    def test_main_unsupported_file_type(self):
        """Test that an unsupported file exits with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            txt_file = write_csv(tmpdir, name="sales.txt")
            with (
                patch("sys.argv", ["cli.py", str(txt_file)]),
                patch("salesanalyzer.cli.logger") as mock_logger,
                pytest.raises(SystemExit) as exc_info,
            ):
                main()

        assert exc_info.value.code == 1
        assert ".xlsx or .csv" in mock_logger.error.call_args.args[0]
        mock_logger.info.assert_not_called()

    def test_main_decode_error(self):
        """Test that an undecodable file exits with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            bad_file = write_csv(tmpdir, "not a workbook", name="sales.xlsx")
            with (
                patch("sys.argv", ["cli.py", str(bad_file)]),
                patch("salesanalyzer.cli.logger") as mock_logger,
                pytest.raises(SystemExit) as exc_info,
            ):
                main()

        assert exc_info.value.code == 1
        assert "Error parsing Excel file" in mock_logger.error.call_args.args[0]

    def test_main_invalid_config_language(self):
        """Test that an unsupported language in config exits with an error."""
        with tempfile.TemporaryDirectory() as tmpdir:
            csv_file = write_csv(tmpdir)
            config_file = Path(tmpdir) / "config.json"
            with open(config_file, "w", encoding="utf-8") as f:
                json.dump({"language": "fr"}, f)

            with (
                patch("sys.argv", ["cli.py", "--config", str(config_file), str(csv_file)]),
                patch("salesanalyzer.cli.logger"),
                pytest.raises(SystemExit) as exc_info,
            ):
                main()

        assert exc_info.value.code == 1
