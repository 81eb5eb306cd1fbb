"""
Main Entry Point - SQL Elastic Pool Sample

Authenticates with a service principal from the environment and runs the
elastic pool sample. Every failure is logged; the process always exits 0.

Environment:
    CLIENT_ID, CLIENT_SECRET, TENANT_ID  - service principal (required)
    SUBSCRIPTION_ID                      - subscription to use (optional)
    SAMPLE_REGION                        - region for all resources (default eastus)
    LOG_LEVEL                            - logging level (default INFO)
"""

import sys
import os
import logging

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from src.coreutils.client import AzureClient
from src.coreutils.env import env_get, load_credentials, resolve_region
from src.coreutils.logging import setup_logging
from src.orchestration.sample import run_sample

logger = logging.getLogger(__name__)


def run(region: str | None = None) -> dict:
    """
    Authenticate and run the sample

    Returns:
        dict: Run summary, with an "error" entry when the sample failed
    """
    try:
        # =================================================================
        # Authenticate
        credentials = load_credentials()
        client = AzureClient.from_credentials(credentials)

        result = run_sample(client, region=resolve_region(region))
        summary = result.value or {}
        if not result.ok:
            summary["error"] = result.reason
        return summary

    except Exception as e:
        logger.error(f"❌ Sample failed: {e}", exc_info=True)
        return {"error": str(e)}


def main():
    """Main entry point"""
    import argparse

    parser = argparse.ArgumentParser(description="Azure SQL elastic pool sample")
    parser.add_argument("--region", help="Azure region (default: SAMPLE_REGION or eastus)")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable verbose logging"
    )
    parser.add_argument(
        "--log-dir",
        default="logs",
        help="Directory for the dated log file ('' disables file logging)",
    )

    args = parser.parse_args()

    if args.verbose:
        log_level = logging.DEBUG
    else:
        log_level = getattr(logging, (env_get("LOG_LEVEL") or "INFO").upper(), logging.INFO)
    setup_logging(level=log_level, log_dir=args.log_dir or None)

    summary = run(args.region)
    if "error" in summary:
        print(f"❌ Sample finished with errors: {summary}")
    else:
        print(f"✅ Sample completed: {summary}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
