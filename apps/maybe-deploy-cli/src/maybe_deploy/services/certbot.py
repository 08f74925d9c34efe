"""Certbot certificate issuance and renewal via the NGINX plugin."""

from __future__ import annotations

from maybe_common.constants import CERTBOT_RENEW_CRON, CERTBOT_RENEW_MARKER
from maybe_deploy.errors import CertbotError
from maybe_deploy.services import system


def issue_command(domain: str, email: str) -> list[str]:
    return [
        "certbot", "--nginx",
        "-d", domain,
        "--non-interactive", "--agree-tos",
        "--email", email,
        "--redirect",
    ]


def manual_command(domain: str) -> str:
    return f"sudo certbot --nginx -d {domain}"


def issue_cert(domain: str, email: str) -> None:
    """Issue a Let's Encrypt certificate and let certbot add the HTTPS redirect."""
    result = system.run(issue_command(domain, email), sudo=True, check=False)
    if result.returncode != 0:
        raise CertbotError(f"Certbot failed for {domain}:\n{result.stderr}")


def ensure_renewal_cron() -> bool:
    """Add the twice-daily renewal entry to root's crontab.

    Returns False when a renewal entry already exists.
    """
    result = system.run(["crontab", "-l"], sudo=True, check=False)
    existing = result.stdout if result.returncode == 0 else ""
    if CERTBOT_RENEW_MARKER in existing:
        return False

    lines = existing.splitlines() + [CERTBOT_RENEW_CRON]
    system.run(["crontab", "-"], sudo=True, input="\n".join(lines) + "\n")
    return True


def list_certs() -> str:
    result = system.run(["certbot", "certificates"], sudo=True, check=False)
    return result.stdout


def has_certificate(domain: str) -> bool:
    return domain in list_certs()


def renew() -> str:
    """Run certbot renew for all certificates."""
    result = system.run(["certbot", "renew"], sudo=True, check=False)
    return result.stdout + result.stderr
