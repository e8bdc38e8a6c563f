#!/usr/bin/env python3
"""
Command line entry point for sessionkit.
"""

import asyncio
import sys

import click

from sessionkit import __version__
from sessionkit.auth.factory import create_session_adapter
from sessionkit.auth.password import PASSWORD_POLICY_MESSAGE, meets_password_policy
from sessionkit.auth.results import OperationResult
from sessionkit.config import Settings
from sessionkit.generators.base import GeneratorError
from sessionkit.generators.text import generate_text
from sessionkit.logging import configure_logging, get_logger

logger = get_logger(__name__)


@click.group()
@click.version_option(version=__version__, prog_name="sessionkit")
@click.option("--debug", is_flag=True, default=False, help="Human-readable debug logging")
def cli(debug: bool) -> None:
    """sessionkit CLI - exercise the auth adapter and text generation."""
    configure_logging(debug=debug)


@cli.command("check-password")
@click.argument("password")
def check_password(password: str) -> None:
    """Check a password against the sign-up complexity policy."""
    if meets_password_policy(password):
        click.echo("✓ Password meets complexity requirements")
    else:
        click.echo(f"✗ {PASSWORD_POLICY_MESSAGE}", err=True)
        sys.exit(1)


async def _run_auth(operation: str, email: str, password: str) -> OperationResult:
    settings = Settings()
    adapter = create_session_adapter(settings)
    try:
        async with adapter:
            if operation == "signup":
                return await adapter.sign_up(email, password)
            return await adapter.sign_in(email, password)
    finally:
        await adapter.provider.close()


def _report(result: OperationResult, success_message: str) -> None:
    if result.success:
        click.echo(f"✓ {success_message}")
    else:
        click.echo(f"✗ {result.error}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--email", required=True, help="Account email address")
@click.password_option(help="Account password")
def signup(email: str, password: str) -> None:
    """Register a new account with the configured identity provider."""
    result = asyncio.run(_run_auth("signup", email, password))
    _report(result, f"Signed up {email.lower()}")


@cli.command()
@click.option("--email", required=True, help="Account email address")
@click.option("--password", prompt=True, hide_input=True, help="Account password")
def signin(email: str, password: str) -> None:
    """Sign in to the configured identity provider."""
    result = asyncio.run(_run_auth("signin", email, password))
    _report(result, f"Signed in {email.lower()}")


@cli.command()
@click.argument("prompt")
@click.option("--model", default=None, help="Gemini model (default: configured gemini_model)")
def generate(prompt: str, model: str | None) -> None:
    """Generate text for PROMPT with Gemini."""
    try:
        text = asyncio.run(generate_text(prompt, model=model))
    except GeneratorError as e:
        logger.error("Text generation failed", error=str(e))
        click.echo(f"✗ Error generating text: {e}", err=True)
        sys.exit(1)
    click.echo(text)


def main():
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    cli()
