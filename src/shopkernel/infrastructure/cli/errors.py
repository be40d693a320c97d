"""Translate kernel exceptions into click errors."""

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator

import click

from shopkernel.domain.exceptions import DomainException, PersistenceError


@contextmanager
def handle_errors() -> Iterator[None]:
    """Domain errors are the user's to fix; storage errors are ours."""
    try:
        yield
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except PersistenceError as exc:
        raise click.ClickException(f"Storage error: {exc}")
