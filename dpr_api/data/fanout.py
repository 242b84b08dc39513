"""
dpr_api/data/fanout.py

Concurrent execution of independent read queries with per-key failure isolation.
"""

import asyncio
import logging
from typing import Any, Callable, Dict, Mapping

logger = logging.getLogger(__name__)


async def gather_isolated(
    queries: Mapping[str, Callable[[], Any]],
    default_factory: Callable[[], Any] = list
) -> Dict[str, Any]:
    """
    Run every query on a worker thread and wait for all of them.

    A query that raises is logged and replaced by ``default_factory()``; the
    other results are unaffected. The returned dict keeps the input key order.

    Args:
        queries: Mapping of result key to a zero-argument callable
        default_factory: Produces the value used for a failed query

    Returns:
        Dict[str, Any]: Result per key
    """
    keys = list(queries.keys())
    tasks = [asyncio.to_thread(queries[key]) for key in keys]

    # Execute all tasks and gather results
    results = await asyncio.gather(*tasks, return_exceptions=True)

    bundle: Dict[str, Any] = {}
    for key, result in zip(keys, results):
        if isinstance(result, Exception):
            logger.error("Error in %s query: %s", key, result, exc_info=result)
            bundle[key] = default_factory()
        else:
            bundle[key] = result
    return bundle
