#!/usr/bin/env python3
"""
Example: dispatching requests through the shared load balancer.

Four callers ask for the balancer concurrently and all receive the same
instance; fifteen requests are then dispatched to the configured servers.
Set SHARED_REGISTRY_SELECTION_POLICY=round_robin to change the policy.
"""
from concurrent.futures import ThreadPoolExecutor

from shared_registry import get_shared_registry
from shared_registry.config import load_config
from shared_registry.infrastructure.logging import get_logger, setup_logging

logger = get_logger(__name__)


def main() -> None:
    setup_logging(load_config().logging)

    with ThreadPoolExecutor(max_workers=4) as executor:
        b1, b2, b3, b4 = executor.map(lambda _: get_shared_registry(), range(4))

    if b1 is b2 is b3 is b4:
        logger.info("Same instance", registry=repr(b1))

    balancer = get_shared_registry()
    for request_number in range(15):
        server = balancer.select_resource()
        logger.info("Dispatch request", request=request_number + 1, server=str(server))

    logger.info("Dispatch summary", counts=balancer.stats.snapshot())


if __name__ == "__main__":
    main()
