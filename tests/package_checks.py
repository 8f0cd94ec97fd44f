from __future__ import annotations

import asyncio
import logging
import sys

import httpx

import aretrier

logger: logging.Logger = logging.getLogger(__name__)

# Use httpbin.org for real HTTP testing
HTTPBIN_URL = "https://httpbin.org"


def check_fetch() -> None:
    logger.info("Checking fetch...")
    with httpx.Client() as client:
        response = aretrier.fetch(f"{HTTPBIN_URL}/get", client=client)
    assert response.status_code == 200


def check_fetch_async() -> None:
    logger.info("Checking fetch_async...")
    response = asyncio.run(aretrier.fetch_async(f"{HTTPBIN_URL}/get"))
    assert response.status_code == 200


def check_fetch_not_found() -> None:
    logger.info("Checking fetch with a non-retriable status...")
    try:
        aretrier.fetch(f"{HTTPBIN_URL}/status/404")
    except aretrier.NonRetriableHttpError as exc:
        assert exc.status_code == 404
    else:
        msg = "expected NonRetriableHttpError"
        raise AssertionError(msg)


def main() -> None:
    r"""Run all package checks to validate installation and
    functionality."""
    try:
        check_fetch()
        check_fetch_async()
        check_fetch_not_found()

        logger.info("✅ All package checks passed successfully!")
    except Exception:
        logger.exception("❌ Package check failed")
        sys.exit(1)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    main()
