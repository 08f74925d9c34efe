"""Single-host install: Docker, NGINX, Maybe Finance, optional SSL and UFW."""

from __future__ import annotations

import getpass
import os
import time

import typer

from maybe_common import APP_NAME, DeployConfig, InstallConfig
from maybe_common.constants import DOCKER_PACKAGES, PREREQUISITE_PACKAGES
from maybe_deploy import output
from maybe_deploy.audit import audit
from maybe_deploy.config import get_config
from maybe_deploy.errors import CertbotError, DeployError, DeploymentError, DockerError
from maybe_deploy.services import (
    apt,
    certbot,
    credentials,
    docker,
    firewall,
    manifest,
    network,
    nginx,
    preflight,
    prompts,
    renderer,
    report,
    system,
)

TOTAL_STEPS = 7


def run_preflight(config: InstallConfig) -> None:
    output.step(1, TOTAL_STEPS, "Performing system checks")
    with audit("install.preflight", target=config.domain):
        preflight.check_privileges()

        dns = network.check_dns(config.domain)
        if dns is None:
            return
        if dns.matches:
            output.success("Domain DNS is correctly configured")
        else:
            current = ", ".join(dns.domain_ips) or "not found"
            output.warning(f"Domain {config.domain} does not resolve to this server IP ({dns.server_ip})")
            output.warning(f"Current domain IP: {current}")
            output.warning("SSL certificate installation may fail if DNS is not configured correctly")


def provision_runtime(config: InstallConfig) -> None:
    output.step(2, TOTAL_STEPS, "Installing system packages and Docker")
    with audit("install.runtime", target=config.domain):
        output.info("Updating system packages...")
        apt.update()
        apt.upgrade()

        output.info("Installing required packages...")
        apt.install(*PREREQUISITE_PACKAGES)

        output.info("Adding Docker GPG key and repository...")
        apt.add_docker_repository()
        apt.update()

        output.info("Installing Docker Engine...")
        apt.install(*DOCKER_PACKAGES)

        output.info("Starting Docker service...")
        system.systemctl("start", "docker")
        system.systemctl("enable", "docker")

        output.info("Adding user to Docker group...")
        docker.add_user_to_group(os.environ.get("USER") or getpass.getuser())

        output.info("Testing Docker installation...")
        if not docker.smoke_test():
            raise DockerError("Docker installation failed!")
        output.success("Docker successfully installed and running!")


def configure_proxy(cfg: DeployConfig, config: InstallConfig) -> None:
    output.step(3, TOTAL_STEPS, "Installing and configuring Nginx")
    with audit("install.proxy", target=config.domain):
        output.info("Installing Nginx and Certbot...")
        nginx.install_packages()

        output.info("Creating Nginx configuration...")
        nginx.write_site(cfg, config.domain, renderer.render_site_config(config))
        output.success("Nginx configuration created!")

        output.info("Enabling site...")
        nginx.enable_site(cfg, config.domain)

        output.info("Testing Nginx configuration...")
        nginx.validate_config()
        output.success("Nginx configuration is valid!")

        output.info("Restarting Nginx...")
        nginx.restart()
        output.success("Nginx successfully configured!")


def deploy_application(cfg: DeployConfig, config: InstallConfig) -> None:
    output.step(4, TOTAL_STEPS, f"Deploying {APP_NAME}")
    install_dir = config.install_dir
    with audit("install.deploy", target=config.domain, install_dir=str(install_dir)):
        output.info(f"Creating {APP_NAME} directory...")
        install_dir.mkdir(parents=True, exist_ok=True)
        output.success(f"Directory created: {install_dir}")

        output.info("Downloading Docker Compose file...")
        manifest.download(cfg.compose_url, config.compose_file)
        output.success("Docker Compose file downloaded successfully!")

        output.info("Creating environment configuration file...")
        env = renderer.render_env_file(config, credentials.generate_secret_key_base())
        renderer.write_env_file(config.env_file, env)
        output.success("Environment file created with secure passwords!")

        if manifest.bind_loopback(config.compose_file):
            output.info("Docker port mapping bound to localhost for security")

        output.info("Downloading Docker images...")
        docker.compose_pull(install_dir)
        output.success("Docker images downloaded successfully!")

        output.info(f"Starting {APP_NAME} application...")
        docker.compose_up(install_dir)

        output.info("Waiting for containers to start...")
        time.sleep(cfg.settle_seconds)

        if not docker.compose_running(install_dir):
            output.info("Checking logs:")
            docker.compose_logs(install_dir)
            raise DeploymentError(f"Failed to start {APP_NAME} containers!")
        output.success(f"{APP_NAME} successfully started!")


def install_certificate(config: InstallConfig) -> bool:
    """Issue the certificate. Failure is reported but does not stop the install."""
    output.step(5, TOTAL_STEPS, "Installing SSL certificate")
    with audit("install.ssl", target=config.domain) as event:
        try:
            certbot.issue_cert(config.domain, config.email)
        except CertbotError as exc:
            event.result = "degraded"
            event.error = str(exc)
            output.error("SSL certificate installation failed!")
            output.warning("You can install it manually later with:")
            output.console.print(certbot.manual_command(config.domain))
            return False
        output.success("SSL certificate successfully installed!")

        output.info("Setting up automatic SSL renewal...")
        if certbot.ensure_renewal_cron():
            output.success("Automatic SSL renewal configured!")
        return True


def configure_firewall(config: InstallConfig) -> bool:
    output.step(6, TOTAL_STEPS, "Configuring UFW firewall")
    with audit("install.firewall", target=config.domain) as event:
        if not firewall.available():
            event.result = "degraded"
            output.warning("UFW not installed, skipping firewall configuration")
            return False
        firewall.configure()
        output.success("Firewall rules configured!")
        return True


def report_status(cfg: DeployConfig, config: InstallConfig) -> None:
    output.step(7, TOTAL_STEPS, "Performing final system checks")
    checks = report.run_checks(config.install_dir, config.domain, check_ssl=config.install_ssl)
    report.print_checks(checks)
    report.print_summary(cfg, config)
    report.offer_reboot(prompts.ask_yes_no("Would you like to reboot the system now to apply all changes?"))


def install() -> None:
    """Interactively install Maybe Finance on this host behind Nginx."""
    cfg = get_config()
    output.rule(f"{APP_NAME} Installation: Docker + Nginx + SSL + Domain Setup")

    config = prompts.collect()
    if not prompts.confirm(config):
        output.error("Installation cancelled by user")
        raise typer.Exit(1)

    try:
        run_preflight(config)
        provision_runtime(config)
        configure_proxy(cfg, config)
        deploy_application(cfg, config)
        if config.install_ssl:
            install_certificate(config)
        if config.configure_firewall:
            configure_firewall(config)
    except DeployError as exc:
        output.error(str(exc))
        raise typer.Exit(exc.exit_code) from exc

    report_status(cfg, config)
