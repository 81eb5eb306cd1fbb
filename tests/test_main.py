import os
import sys

# Add parent directory to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import runpy
import unittest
from unittest.mock import patch

from src import main as entry
from src.coreutils.result import OperationResult

FULL_ENV = {
    "CLIENT_ID": "client-id",
    "CLIENT_SECRET": "s3cret",
    "TENANT_ID": "tenant-id",
    "SUBSCRIPTION_ID": "sub-1234",
}


class TestRun(unittest.TestCase):
    @patch.dict(os.environ, {}, clear=True)
    def test_missing_credentials_are_logged_not_raised(self):
        with self.assertLogs("src.main", level="ERROR") as logs:
            summary = entry.run()

        self.assertIn("CLIENT_ID", summary["error"])
        self.assertTrue(any("Sample failed" in line for line in logs.output))

    @patch.dict(os.environ, FULL_ENV, clear=True)
    @patch("src.main.run_sample")
    @patch("src.main.AzureClient")
    def test_authenticates_and_runs_sample(self, mock_client, mock_run_sample):
        mock_run_sample.return_value = OperationResult(
            description="SQL elastic pool sample", ok=True, value={"server": "srv1"}
        )

        summary = entry.run(region="westus2")

        creds = mock_client.from_credentials.call_args[0][0]
        self.assertEqual(creds.subscription_id, "sub-1234")
        mock_run_sample.assert_called_once_with(
            mock_client.from_credentials.return_value, region="westus2"
        )
        self.assertEqual(summary, {"server": "srv1"})

    @patch.dict(os.environ, FULL_ENV, clear=True)
    @patch("src.main.run_sample")
    @patch("src.main.AzureClient")
    def test_failed_sample_reports_error(self, mock_client, mock_run_sample):
        mock_run_sample.return_value = OperationResult(
            description="SQL elastic pool sample",
            ok=False,
            value={"resource_group": "rg1"},
            error=RuntimeError("server quota exceeded"),
        )

        summary = entry.run()

        self.assertEqual(summary["error"], "server quota exceeded")
        self.assertEqual(summary["resource_group"], "rg1")

    @patch.dict(os.environ, FULL_ENV, clear=True)
    @patch("src.main.AzureClient")
    def test_client_construction_failure_is_caught(self, mock_client):
        mock_client.from_credentials.side_effect = ValueError("bad tenant")

        summary = entry.run()

        self.assertEqual(summary, {"error": "bad tenant"})


class TestMain(unittest.TestCase):
    @patch("src.main.setup_logging")
    @patch("src.main.run", return_value={"error": "boom"})
    def test_exit_code_is_zero_even_on_failure(self, mock_run, mock_setup_logging):
        with patch.object(sys, "argv", ["main.py", "--region", "northeurope", "-v"]):
            self.assertEqual(entry.main(), 0)

        mock_run.assert_called_once_with("northeurope")
        self.assertEqual(mock_setup_logging.call_args.kwargs["level"], 10)

    @patch("src.main.setup_logging")
    @patch("src.main.run", return_value={"server": "srv1"})
    def test_log_dir_can_be_disabled(self, mock_run, mock_setup_logging):
        with patch.object(sys, "argv", ["main.py", "--log-dir", ""]):
            entry.main()

        self.assertIsNone(mock_setup_logging.call_args.kwargs["log_dir"])

    @patch.dict(os.environ, {}, clear=True)
    def test_script_exits_with_status_zero_on_failure(self):
        """Running the module as a script exits cleanly even without credentials"""
        with patch.object(sys, "argv", ["main.py", "--log-dir", ""]):
            with self.assertRaises(SystemExit) as ctx:
                runpy.run_module("src.main", run_name="__main__")

        self.assertEqual(ctx.exception.code, 0)


if __name__ == "__main__":
    unittest.main()
