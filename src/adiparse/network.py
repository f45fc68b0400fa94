"""Selected Accumulate network (mainnet, kermit, fozzie, ...)."""

from __future__ import annotations

import structlog

logger = structlog.get_logger()

MAINNET = "mainnet"


class NetworkContext:
    """Holds the currently selected network name.

    Any string is accepted so non-mainnet networks can route to their own
    partner endpoints. Shared explicitly by whoever builds partner URLs.
    """

    def __init__(self, name: str = MAINNET) -> None:
        self._current = name

    def current(self) -> str:
        return self._current

    def switch_to(self, name: str) -> None:
        if name != self._current:
            logger.info("network_switched", previous=self._current, network=name)
        self._current = name

    @property
    def is_mainnet(self) -> bool:
        return self._current == MAINNET

    @property
    def server_name(self) -> str:
        """Server label for the network; empty on mainnet."""
        return "" if self.is_mainnet else self._current
