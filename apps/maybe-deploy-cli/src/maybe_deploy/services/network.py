"""Public address lookup and DNS resolution for the preflight DNS check."""

from __future__ import annotations

import ipaddress
import socket
from typing import NamedTuple, Optional, Sequence

import httpx

from maybe_common.constants import PUBLIC_IP_LOOKUPS


class DnsCheck(NamedTuple):
    server_ip: str
    domain_ips: list[str]

    @property
    def matches(self) -> bool:
        return self.server_ip in self.domain_ips


def public_ip(lookups: Sequence[str] = PUBLIC_IP_LOOKUPS, timeout: float = 10.0) -> Optional[str]:
    """Return this host's public address, or None if every lookup fails."""
    for url in lookups:
        try:
            response = httpx.get(url, timeout=timeout, follow_redirects=True)
            response.raise_for_status()
        except httpx.HTTPError:
            continue
        candidate = response.text.strip()
        try:
            ipaddress.ip_address(candidate)
        except ValueError:
            continue
        return candidate
    return None


def resolve(domain: str) -> list[str]:
    """Return the IPv4 addresses the domain resolves to (empty if none)."""
    try:
        _, _, addresses = socket.gethostbyname_ex(domain)
    except (socket.gaierror, socket.herror, UnicodeError):
        return []
    return addresses


def check_dns(domain: str) -> Optional[DnsCheck]:
    """Compare the domain's A records with this host's public address.

    Returns None when the public address cannot be determined.
    """
    server_ip = public_ip()
    if server_ip is None:
        return None
    return DnsCheck(server_ip=server_ip, domain_ips=resolve(domain))
