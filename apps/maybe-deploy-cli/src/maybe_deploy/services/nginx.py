"""NGINX site installation, validation and restart."""

from __future__ import annotations

from maybe_common import DeployConfig
from maybe_common.constants import NGINX_DEFAULT_SITE, PROXY_PACKAGES
from maybe_deploy.errors import NginxConfigError
from maybe_deploy.services import apt, system


def install_packages() -> None:
    """Install NGINX together with certbot and its NGINX plugin."""
    apt.install(*PROXY_PACKAGES)


def write_site(cfg: DeployConfig, domain: str, content: str) -> None:
    system.write_root_file(cfg.site_available_path(domain), content)


def enable_site(cfg: DeployConfig, domain: str) -> None:
    """Link the site into sites-enabled and drop the stock default site."""
    system.run(
        ["ln", "-sf", str(cfg.site_available_path(domain)), str(cfg.sites_enabled_dir) + "/"],
        sudo=True,
    )
    system.run(["rm", "-f", str(cfg.site_enabled_path(NGINX_DEFAULT_SITE))], sudo=True)


def validate_config() -> None:
    """Run nginx -t. Raises NginxConfigError on failure."""
    result = system.run(["nginx", "-t"], sudo=True, check=False)
    if result.returncode != 0:
        raise NginxConfigError(f"NGINX config test failed:\n{result.stderr}")


def restart() -> None:
    """Restart NGINX and enable it at boot. Call validate_config() first."""
    system.systemctl("restart", "nginx")
    system.systemctl("enable", "nginx")


def reload() -> None:
    """Validate config, then reload NGINX."""
    validate_config()
    system.systemctl("reload", "nginx")


def is_running() -> bool:
    return system.service_active("nginx")


def site_has_ssl(cfg: DeployConfig, domain: str) -> bool:
    """True when certbot has added an ssl_certificate directive to the site."""
    site_file = cfg.site_available_path(domain)
    try:
        return "ssl_certificate" in site_file.read_text()
    except OSError:
        return False
