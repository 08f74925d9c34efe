"""Final status checks and the post-install summary."""

from __future__ import annotations

from pathlib import Path
from typing import NamedTuple

from rich.console import Console
from rich.markup import escape

from maybe_common import APP_NAME, APP_PORT, DeployConfig, InstallConfig
from maybe_deploy import output
from maybe_deploy.services import certbot, docker, nginx, system

console = Console()


class Check(NamedTuple):
    passed: str
    failed: str
    ok: bool
    soft: bool = False


def run_checks(project_dir: Path, domain: str, *, check_ssl: bool) -> list[Check]:
    """Re-query each subsystem's running state."""
    checks = [
        Check("Nginx is running", "Nginx is not running", nginx.is_running()),
        Check(
            f"{APP_NAME} is running",
            f"{APP_NAME} is not running",
            docker.compose_running(project_dir),
        ),
    ]
    if check_ssl:
        checks.append(
            Check(
                "SSL certificate is installed",
                "SSL certificate not found",
                certbot.has_certificate(domain),
                soft=True,
            )
        )
    return checks


def print_checks(checks: list[Check]) -> None:
    for check in checks:
        if check.ok:
            output.success(f"✓ {check.passed}")
        elif check.soft:
            output.warning(f"✗ {check.failed}")
        else:
            output.error(f"✗ {check.failed}")


def _section(title: str, lines: list[str]) -> None:
    console.print(f"\n[bold]{escape(title)}[/bold]")
    for line in lines:
        console.print(f"   {escape(line)}")


def access_lines(config: InstallConfig) -> list[str]:
    if config.install_ssl:
        return [
            f"Primary URL: {config.primary_url}",
            f"HTTP URL: http://{config.domain} (redirects to HTTPS)",
        ]
    return [f"URL: {config.primary_url}"]


def print_summary(cfg: DeployConfig, config: InstallConfig) -> None:
    """Print access details, file locations and management commands."""
    install_dir = config.install_dir
    output.rule("INSTALLATION COMPLETED SUCCESSFULLY!")
    output.success(f"{APP_NAME} is now running on your domain!")

    _section("Access Information:", access_lines(config))
    _section("First Time Setup:", [
        "1. Visit your domain in a web browser",
        "2. Click 'Create your account'",
        "3. Register your first user account",
    ])
    _section("Installation Details:", [
        f"Installation Directory: {install_dir}",
        f"Environment File: {config.env_file}",
        f"Nginx Configuration: {cfg.site_available_path(config.domain)}",
        f"PostgreSQL User: {config.db_user}",
        f"PostgreSQL Database: {config.db_name}",
    ])
    _section("Management Commands:", [
        f"cd {install_dir}",
        "sudo docker compose stop      # Stop application",
        "sudo docker compose start     # Start application",
        "sudo docker compose restart   # Restart application",
        "sudo docker compose logs      # View logs",
        "sudo docker compose pull      # Update to latest version",
        f"maybe-deploy stack ps --dir {install_dir}",
    ])
    _section("Nginx Commands:", [
        "sudo systemctl status nginx   # Check Nginx status",
        "sudo nginx -t                 # Test configuration",
        "sudo systemctl reload nginx   # Reload configuration",
    ])
    if config.install_ssl:
        _section("SSL Certificate Commands:", [
            "sudo certbot certificates     # List certificates",
            "sudo certbot renew            # Renew certificates",
        ])
    _section("Server Security Group Requirements:", [
        "✓ Port 80 (HTTP) - Required",
        "✓ Port 443 (HTTPS) - Required for SSL",
        "✓ Port 22 (SSH) - For server management",
        f"✗ Port {APP_PORT} - No longer needed (secured by Nginx)",
    ])
    _section("Database Information (securely stored in .env):", [
        f"Username: {config.db_user}",
        f"Database: {config.db_name}",
        "Password: [Hidden for security - check .env file]",
    ])
    _section("Troubleshooting:", [
        "- Check logs: sudo docker compose logs",
        "- Check Nginx: sudo nginx -t",
        "- Check services: sudo systemctl status nginx docker",
        f"- View environment: cat {config.env_file}",
    ])
    console.print()
    output.rule()
    output.success(f"Installation completed! {APP_NAME} is ready to use.")
    output.warning("IMPORTANT: Please reboot the system or run 'newgrp docker' to apply Docker group changes.")


def offer_reboot(answer: bool) -> None:
    if answer:
        output.info("Rebooting system...")
        system.reboot()
    else:
        output.info("System reboot skipped. Consider rebooting manually: sudo reboot")
        output.info("Or run: newgrp docker")
