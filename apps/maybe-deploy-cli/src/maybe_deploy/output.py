"""Categorised console lines: [INFO], [SUCCESS], [WARNING], [ERROR]."""

from __future__ import annotations

from rich.console import Console
from rich.markup import escape

console = Console()


def info(message: str) -> None:
    console.print(f"[blue]\\[INFO][/blue] {escape(message)}")


def success(message: str) -> None:
    console.print(f"[green]\\[SUCCESS][/green] {escape(message)}")


def warning(message: str) -> None:
    console.print(f"[yellow]\\[WARNING][/yellow] {escape(message)}")


def error(message: str) -> None:
    console.print(f"[red]\\[ERROR][/red] {escape(message)}")


def step(index: int, total: int, title: str) -> None:
    console.print(f"\n[bold]\\[{index}/{total}][/bold] {escape(title)}")


def rule(title: str = "") -> None:
    console.rule(title)
