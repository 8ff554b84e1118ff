"""Shared plumbing for the CLI commands."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass, field

import click

from vyapar.application.dto import TierSpec
from vyapar.domain.exceptions import DomainException, StoreUnavailable
from vyapar.domain.model.actor import Actor, Role
from vyapar.domain.repository.unit_of_work import UnitOfWork
from vyapar.infrastructure.bootstrap import unit_of_work


@dataclass
class CliContext:
    """Carries the ``--data-dir`` choice; the store is opened on first use."""

    data_dir: str | None = None
    _uow: UnitOfWork | None = field(default=None, repr=False)

    @property
    def uow(self) -> UnitOfWork:
        if self._uow is None:
            with reported_errors():
                self._uow = unit_of_work(self.data_dir)
        return self._uow


pass_cli = click.make_pass_decorator(CliContext, ensure=True)


@contextmanager
def reported_errors() -> Iterator[None]:
    """Turn core failures into short, user-facing CLI errors."""
    try:
        yield
    except DomainException as exc:
        raise click.ClickException(str(exc))
    except StoreUnavailable:
        raise click.ClickException("The marketplace store is unavailable. Please retry.")


class ActorType(click.ParamType):
    """Parses ``role:user_id``, e.g. ``admin:ops`` or ``wholesaler:W001``."""

    name = "actor"

    def convert(self, value, param, ctx) -> Actor:
        if isinstance(value, Actor):
            return value
        role, sep, user_id = value.partition(":")
        if not sep or not user_id.strip():
            self.fail(f"Invalid actor '{value}'. Expected 'role:user_id'.", param, ctx)
        try:
            return Actor(user_id=user_id.strip(), role=Role(role.strip().lower()))
        except ValueError:
            roles = ", ".join(r.value for r in Role)
            self.fail(f"Unknown role '{role}'. Expected one of: {roles}.", param, ctx)


class TierType(click.ParamType):
    """Parses ``MIN-MAX:PRICE`` or ``MIN+:PRICE`` (``MIN:PRICE`` is open-ended too)."""

    name = "tier"

    def convert(self, value, param, ctx) -> TierSpec:
        if isinstance(value, TierSpec):
            return value
        band, sep, price = value.rpartition(":")
        if not sep or not band:
            self.fail(f"Invalid tier '{value}'. Expected 'MIN-MAX:PRICE'.", param, ctx)
        band = band.strip().rstrip("+")
        low, dash, high = band.partition("-")
        try:
            min_qty = int(low)
            max_qty = int(high) if dash else None
        except ValueError:
            self.fail(f"Invalid quantities in tier '{value}'.", param, ctx)
        return TierSpec(min_qty=min_qty, max_qty=max_qty, price=price.strip())


ACTOR = ActorType()
TIER = TierType()
