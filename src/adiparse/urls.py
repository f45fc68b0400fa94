"""
Partner site URL generation.

Builds ``https://<root>.<partner-domain>/<sub-path>?current-network=<network>``
links for the BankOnLedger and Qoboto partner sites.
"""

from __future__ import annotations

from adiparse.identity.models import ParsedIdentity
from adiparse.network import NetworkContext

BANK_ON_LEDGER_DOMAIN = "BankOnLedger.com"
QOBOTO_DOMAIN = "Qoboto.com"


class PartnerUrlBuilder:
    """Combines a parsed identity with the current network into partner URLs."""

    def __init__(self, network: NetworkContext) -> None:
        self._network = network

    @property
    def network(self) -> NetworkContext:
        return self._network

    def build_url(self, parsed: ParsedIdentity, partner_domain: str) -> str:
        """
        Build a partner URL for an identity.

        The network name is read on every call, so switching networks
        between two calls changes the ``current-network`` value.

        Examples:
            (sunstream, "BankOnLedger.com", mainnet)
                → https://sunstream.BankOnLedger.com/?current-network=mainnet
        """
        network_name = self._network.current()
        return (
            f"https://{parsed.root_name}.{partner_domain}/{parsed.sub_path}"
            f"?current-network={network_name}"
        )

    def bank_on_ledger_url(self, parsed: ParsedIdentity) -> str:
        return self.build_url(parsed, BANK_ON_LEDGER_DOMAIN)

    def qoboto_url(self, parsed: ParsedIdentity) -> str:
        return self.build_url(parsed, QOBOTO_DOMAIN)
