"""
Pattern catalog loading.

This module builds the pattern catalog with the following priority:
1. S3 override (optional, merged over the built-in definitions so locales
   can be added or fixed without redeploy)
2. Built-in definitions (domain/patterns.py, packaged with Lambda)

The built catalog is cached in memory for warm Lambda invocations with TTL.
A reload always builds a new catalog; a published catalog is never mutated.
"""

import json
import logging
import os
import time
from typing import Any, Dict, Tuple

import boto3
from botocore.config import Config
from botocore.exceptions import ClientError

from ..domain.catalog import PatternCatalog, build_catalog, default_catalog, merge_definitions
from ..domain.patterns import DEFAULT_DEFINITIONS

logger = logging.getLogger(__name__)

# Cache TTL in seconds (default: 5 minutes)
# After this time, the override will be re-read from S3 on next request
CACHE_TTL_SECONDS = int(os.environ.get('CATALOG_CACHE_TTL', '300'))

# Module-level cache: {cache_key: (catalog, timestamp)}
_catalog_cache: Dict[str, Tuple[PatternCatalog, float]] = {}

# Configure S3 client with timeouts to prevent infinite hangs
s3_config = Config(
    retries={
        'max_attempts': 1,  # 1 attempt total (no retries)
        'mode': 'standard'
    },
    connect_timeout=10,  # 10 seconds to establish connection
    read_timeout=30      # 30 seconds max for reading the override
)

# Initialize S3 client at module level (thread-safe, reused)
s3_client = boto3.client('s3', config=s3_config)
logger.info("Catalog S3 client initialized with timeouts: connect=10s, read=30s, max_attempts=1")

# Configuration from environment variables
CATALOG_BUCKET = os.environ.get('CATALOG_BUCKET')
CATALOG_KEY = os.environ.get('CATALOG_KEY', 'catalog/patterns.json')


def _load_from_s3() -> Dict[str, Any]:
    """
    Load the catalog override document from S3.

    Returns:
        Dict: Parsed override document

    Raises:
        ValueError: If CATALOG_BUCKET not set or the document is not valid JSON
        ClientError: If the object cannot be read
    """
    if not CATALOG_BUCKET:
        raise ValueError("CATALOG_BUCKET environment variable not set")

    logger.info(f"Loading catalog override from S3: s3://{CATALOG_BUCKET}/{CATALOG_KEY}")

    response = s3_client.get_object(
        Bucket=CATALOG_BUCKET,
        Key=CATALOG_KEY
    )

    content = response['Body'].read().decode('utf-8')
    document = json.loads(content)  # JSONDecodeError is a ValueError

    logger.info(f"Loaded catalog override from S3: {len(document)} categories")
    return document


def load_catalog(use_cache: bool = True) -> PatternCatalog:
    """
    Load the pattern catalog with caching and fallback.

    Priority: Cache -> S3 override merged over built-in -> Built-in

    Args:
        use_cache: Use cached catalog if available (default: True)

    Returns:
        PatternCatalog: Immutable catalog

    Raises:
        CatalogError: If the S3 override was read but is malformed
    """
    cache_key = f"catalog:{CATALOG_BUCKET}/{CATALOG_KEY}"
    current_time = time.time()

    # Check cache
    if use_cache and cache_key in _catalog_cache:
        cached_catalog, cached_time = _catalog_cache[cache_key]
        age_seconds = current_time - cached_time

        # Check if cache is still valid (within TTL)
        if age_seconds < CACHE_TTL_SECONDS:
            logger.debug(
                f"Using cached catalog (age: {int(age_seconds)}s, TTL: {CACHE_TTL_SECONDS}s)"
            )
            return cached_catalog
        else:
            logger.info(
                f"Cache expired for catalog "
                f"(age: {int(age_seconds)}s > TTL: {CACHE_TTL_SECONDS}s), reloading..."
            )

    catalog = None

    # Try S3 override
    if CATALOG_BUCKET:
        try:
            override = _load_from_s3()
        except (ClientError, ValueError) as e:
            logger.warning(
                f"S3 catalog override not available ({e.__class__.__name__}), "
                f"falling back to built-in catalog"
            )
        else:
            # Malformed override data must fail loudly, not fall back
            catalog = build_catalog(merge_definitions(DEFAULT_DEFINITIONS, override))
            logger.info(f"Using S3 catalog override: {len(catalog)} categories")

    # Fall back to built-in definitions
    if catalog is None:
        catalog = default_catalog()
        logger.info(f"Using built-in catalog: {len(catalog)} categories")

    # Cache for future invocations with timestamp
    _catalog_cache[cache_key] = (catalog, current_time)

    return catalog


def clear_cache() -> None:
    """Drop every cached catalog (next load_catalog() call rebuilds)."""
    _catalog_cache.clear()
    logger.info("Catalog cache cleared")
