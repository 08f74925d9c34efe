"""Tests for the interactive input collector."""

from __future__ import annotations

from pathlib import Path

import pytest

from maybe_deploy.services import prompts


class ScriptedPrompt:
    def __init__(self, answers: list[str]) -> None:
        self.answers = list(answers)
        self.asked: list[tuple[str, bool]] = []

    def __call__(self, text: str, default: str = "", show_default: bool = True, hide_input: bool = False) -> str:
        self.asked.append((text, hide_input))
        if not self.answers:
            pytest.fail(f"unexpected prompt: {text}")
        return self.answers.pop(0)


@pytest.fixture
def script(monkeypatch):
    def install(*answers: str) -> ScriptedPrompt:
        fake = ScriptedPrompt(list(answers))
        monkeypatch.setattr(prompts.typer, "prompt", fake)
        return fake

    return install


class TestYesNo:
    @pytest.mark.parametrize("answer", ["y", "Y", " y ", "yes", "Yes"])
    def test_yes(self, answer: str):
        assert prompts.is_yes(answer)

    @pytest.mark.parametrize("answer", ["", "n", "N", "no", "x", "1"])
    def test_no(self, answer: str):
        assert not prompts.is_yes(answer)


class TestDomainPrompt:
    def test_reprompts_until_valid(self, script, capsys):
        fake = script("", "not a domain", "localhost", "app.example.com")
        assert prompts.ask_domain() == "app.example.com"
        assert len(fake.asked) == 4
        assert capsys.readouterr().out.count("Please enter a valid domain name!") == 3


class TestEmailPrompt:
    def test_reprompts_until_valid(self, script):
        fake = script("admin", "admin@example", "admin@example.com")
        assert prompts.ask_email() == "admin@example.com"
        assert len(fake.asked) == 3


class TestPasswordPrompt:
    def test_hidden_input(self, script):
        fake = script("longenough")
        assert prompts.ask_password() == "longenough"
        assert fake.asked[0][1] is True

    def test_short_rejected(self, script, capsys):
        fake = script("short", "1234567", "12345678")
        assert prompts.ask_password() == "12345678"
        assert len(fake.asked) == 3
        assert "at least 8 characters" in capsys.readouterr().out

    def test_empty_generates(self, script):
        script("")
        password = prompts.ask_password()
        assert len(password) == 25
        assert password.isalnum()


class TestCollect:
    def test_defaults(self, script, tmp_path: Path, monkeypatch):
        monkeypatch.setenv("HOME", str(tmp_path))
        script("app.example.com", "admin@example.com", "", "", "", "", "", "y", "")
        config = prompts.collect()

        assert config.domain == "app.example.com"
        assert config.email == "admin@example.com"
        assert len(config.db_password) == 25
        assert config.db_user == "maybe_user"
        assert config.db_name == "maybe_production"
        assert config.openai_api_key == ""
        assert config.install_dir == tmp_path / "docker-apps" / "maybe"
        assert config.install_ssl is True
        assert config.configure_firewall is False

    def test_custom_values(self, script, tmp_path: Path):
        script(
            "finance.example.org", "ops@example.org", "supersecret", "fin", "fin_db",
            str(tmp_path / "maybe"), "sk-123", "n", "Y",
        )
        config = prompts.collect()

        assert config.db_password == "supersecret"
        assert config.db_user == "fin"
        assert config.db_name == "fin_db"
        assert config.openai_api_key == "sk-123"
        assert config.install_dir == tmp_path / "maybe"
        assert config.install_ssl is False
        assert config.configure_firewall is True

    def test_prompt_order_and_hidden_secrets(self, script, tmp_path: Path):
        fake = script(
            "app.example.com", "admin@example.com", "", "", "",
            str(tmp_path / "maybe"), "sk-123", "", "",
        )
        prompts.collect()

        asked = [text for text, _ in fake.asked]
        assert asked.index("Enter installation directory (default: ~/docker-apps/maybe)") < next(
            i for i, text in enumerate(asked) if text.startswith("Enter OpenAI API key")
        )
        hidden = [text for text, hide in fake.asked if hide]
        assert len(hidden) == 2
        assert hidden[0].startswith("Enter PostgreSQL password")
        assert hidden[1].startswith("Enter OpenAI API key")

    def test_summary_hides_password(self, script, tmp_path: Path, capsys):
        script("app.example.com", "admin@example.com", "visible-pass-123", "", "", str(tmp_path), "sk-hidden", "n", "n")
        config = prompts.collect()
        capsys.readouterr()

        script("y")
        assert prompts.confirm(config) is True
        out = capsys.readouterr().out
        assert "visible-pass-123" not in out
        assert "sk-hidden" not in out
        assert "Provided" in out
        assert "app.example.com" in out

    def test_confirm_declined(self, script, tmp_path: Path):
        script("app.example.com", "admin@example.com", "", "", "", str(tmp_path), "", "", "")
        config = prompts.collect()
        script("")
        assert prompts.confirm(config) is False
