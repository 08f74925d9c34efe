"""Shared test fixtures."""

from __future__ import annotations

import subprocess
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import httpx
import pytest

from maybe_common import DeployConfig
from maybe_deploy.config import get_config

COMPOSE_URL = "https://example.invalid/compose.example.yml"

SAMPLE_COMPOSE = """\
services:
  web:
    image: ghcr.io/maybe-finance/maybe:latest
    ports:
      - 3000:3000
    env_file: .env
  db:
    image: postgres:16
"""


@pytest.fixture
def tmp_config(tmp_path: Path) -> DeployConfig:
    """Return a DeployConfig pointing at temp directories."""
    return DeployConfig(
        host_id="test-host",
        compose_url=COMPOSE_URL,
        nginx_dir=tmp_path / "nginx",
        settle_seconds=0,
        log_dir=tmp_path / "log",
    )


@dataclass
class Call:
    cmd: list[str]
    cwd: Optional[str]
    input: Optional[str]


def _contains(cmd: list[str], needle: tuple[str, ...]) -> bool:
    n = len(needle)
    return any(tuple(cmd[i:i + n]) == needle for i in range(len(cmd) - n + 1))


class FakeRunner:
    """Stands in for subprocess.run; every command succeeds unless told otherwise."""

    def __init__(self) -> None:
        self.calls: list[Call] = []
        self._responses: list[tuple[tuple[str, ...], int, str, str]] = []

    def respond(self, *needle: str, returncode: int = 0, stdout: str = "", stderr: str = "") -> None:
        self._responses.append((needle, returncode, stdout, stderr))

    def __call__(self, cmd, *, check=False, capture_output=False, text=False, cwd=None, input=None, **kwargs):
        cmd = list(cmd)
        self.calls.append(Call(cmd=cmd, cwd=cwd, input=input))
        returncode, stdout, stderr = 0, "", ""
        for needle, rc, out, err in reversed(self._responses):
            if _contains(cmd, needle):
                returncode, stdout, stderr = rc, out, err
                break
        if check and returncode != 0:
            raise subprocess.CalledProcessError(returncode, cmd, stdout, stderr)
        return subprocess.CompletedProcess(cmd, returncode, stdout, stderr)

    def ran(self, *needle: str) -> bool:
        return any(_contains(c.cmd, needle) for c in self.calls)

    def find(self, *needle: str) -> list[Call]:
        return [c for c in self.calls if _contains(c.cmd, needle)]


@pytest.fixture
def fake_run(monkeypatch) -> FakeRunner:
    runner = FakeRunner()
    monkeypatch.setattr("maybe_deploy.services.system.subprocess.run", runner)
    return runner


class FakeHttp:
    """Stands in for httpx.get with per-URL bodies or errors."""

    def __init__(self) -> None:
        self.routes: dict[str, object] = {}
        self.requested: list[str] = []

    def __call__(self, url: str, **kwargs) -> httpx.Response:
        self.requested.append(url)
        request = httpx.Request("GET", url)
        route = self.routes.get(url)
        if route is None:
            raise httpx.ConnectError("no route", request=request)
        if isinstance(route, Exception):
            raise route
        if isinstance(route, int):
            return httpx.Response(route, request=request)
        return httpx.Response(200, text=str(route), request=request)


@pytest.fixture
def fake_http(monkeypatch) -> FakeHttp:
    http = FakeHttp()
    monkeypatch.setattr(httpx, "get", http)
    return http


@pytest.fixture
def host(tmp_path: Path, monkeypatch, fake_run: FakeRunner, fake_http: FakeHttp) -> FakeRunner:
    """A fake Ubuntu host: HOME in tmp, non-root user, sudo and Docker working."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.setenv("USER", "deployer")
    monkeypatch.setenv("MAYBE_DEPLOY_HOST_ID", "test-host")
    monkeypatch.setenv("MAYBE_DEPLOY_COMPOSE_URL", COMPOSE_URL)
    monkeypatch.setenv("MAYBE_DEPLOY_NGINX_DIR", str(tmp_path / "nginx"))
    monkeypatch.setenv("MAYBE_DEPLOY_SETTLE_SECONDS", "0")
    monkeypatch.setenv("MAYBE_DEPLOY_LOG_DIR", str(tmp_path / "log"))
    monkeypatch.setattr("maybe_deploy.services.preflight.os.geteuid", lambda: 1000)
    get_config.cache_clear()

    fake_http.routes[COMPOSE_URL] = SAMPLE_COMPOSE
    fake_http.routes["https://download.docker.com/linux/ubuntu/gpg"] = "-----BEGIN PGP PUBLIC KEY BLOCK-----"
    fake_run.respond("dpkg", "--print-architecture", stdout="amd64\n")
    fake_run.respond("lsb_release", "-cs", stdout="noble\n")
    fake_run.respond("docker", "compose", "ps", stdout="NAME         STATUS\nmaybe-web-1  Up 30 seconds\n")
    fake_run.respond("crontab", "-l", returncode=1, stderr="no crontab for root")
    yield fake_run
    get_config.cache_clear()
