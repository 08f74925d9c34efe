"""Shared constants for maybe-deploy."""

from pathlib import Path

# Application
APP_NAME = "Maybe Finance"
APP_PORT = 3000
COMPOSE_URL = "https://raw.githubusercontent.com/maybe-finance/maybe/main/compose.example.yml"
COMPOSE_FILENAME = "compose.yml"
ENV_FILENAME = ".env"

# Install defaults
DEFAULT_DB_USER = "maybe_user"
DEFAULT_DB_NAME = "maybe_production"
DEFAULT_INSTALL_DIR = "~/docker-apps/maybe"
MIN_PASSWORD_LENGTH = 8
GENERATED_PASSWORD_LENGTH = 25

# Containers
SETTLE_SECONDS = 30
SMOKE_TEST_IMAGE = "hello-world"
DOCKER_GROUP = "docker"

# APT
PREREQUISITE_PACKAGES = (
    "apt-transport-https",
    "ca-certificates",
    "curl",
    "gnupg",
    "lsb-release",
    "software-properties-common",
    "wget",
    "unzip",
    "openssl",
    "dnsutils",
)
DOCKER_PACKAGES = (
    "docker-ce",
    "docker-ce-cli",
    "containerd.io",
    "docker-buildx-plugin",
    "docker-compose-plugin",
)
PROXY_PACKAGES = ("nginx", "certbot", "python3-certbot-nginx")
DOCKER_GPG_URL = "https://download.docker.com/linux/ubuntu/gpg"
DOCKER_REPO_URL = "https://download.docker.com/linux/ubuntu"
APT_KEYRINGS_DIR = Path("/etc/apt/keyrings")
DOCKER_KEYRING = APT_KEYRINGS_DIR / "docker.gpg"
DOCKER_APT_SOURCE = Path("/etc/apt/sources.list.d/docker.list")

# NGINX
NGINX_DIR = Path("/etc/nginx")
NGINX_DEFAULT_SITE = "default"
PROXY_READ_TIMEOUT = 86400
PROXY_HEADERS = (
    ("Upgrade", "$http_upgrade"),
    ("Connection", "'upgrade'"),
    ("Host", "$host"),
    ("X-Real-IP", "$remote_addr"),
    ("X-Forwarded-For", "$proxy_add_x_forwarded_for"),
    ("X-Forwarded-Proto", "$scheme"),
)
GZIP_TYPES = (
    "text/plain",
    "text/css",
    "text/xml",
    "text/javascript",
    "application/json",
    "application/javascript",
    "application/xml+rss",
    "application/atom+xml",
    "image/svg+xml",
)
SECURITY_HEADERS = (
    ("X-Content-Type-Options", "nosniff"),
    ("X-Frame-Options", "DENY"),
    ("X-XSS-Protection", '"1; mode=block"'),
)

# Certbot
CERTBOT_RENEW_CRON = "0 0,12 * * * /usr/bin/certbot renew --quiet"
CERTBOT_RENEW_MARKER = "certbot renew"

# Firewall
UFW_RULES = ("ssh", "Nginx Full")

# DNS check
PUBLIC_IP_LOOKUPS = ("https://ifconfig.me", "https://ipinfo.io/ip")

# Audit / logging
LOG_DIR = Path("~/.local/state/maybe-deploy")
AUDIT_JSONL_NAME = "audit.jsonl"
AUDIT_DB_NAME = "audit.db"
