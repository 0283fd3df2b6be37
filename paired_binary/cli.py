"""
Command line interface for the paired binary hierarchy.

Every command prints one JSON document on stdout. Failures print the tagged
error record and exit with status 1.

    paired-binary --base 0,1,2 --bits 3 member 10 6
    paired-binary --config pattern.yml random 64 --count 3
    paired-binary pair 12 4
"""

import dataclasses
import functools
import json
import sys

import click

from .api import PropagatorSession, create_paired_entity, parse_decimal_list
from .digits import to_decimal
from .config import PropagatorConfig
from .errors import HierarchyError, NotConfigured
from .logging_setup import setup_logging


def _emit(payload) -> None:
    click.echo(json.dumps(payload))


def handle_errors(func):
    """Report HierarchyError as a JSON record and exit 1."""
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except HierarchyError as e:
            _emit({"ok": False, "error": e.to_dict()})
            sys.exit(1)
    return wrapper


def _session(ctx: click.Context) -> PropagatorSession:
    """Build the session lazily so commands that need no setup skip it."""
    obj = ctx.obj
    if obj.get("session") is not None:
        return obj["session"]

    session = PropagatorSession()
    if obj["config_path"]:
        config = PropagatorConfig.load_from_file(obj["config_path"])
        if obj["canonical_halves"]:
            config = dataclasses.replace(config, canonical_halves=True)
        session.setup_from_config(config)
    elif obj["base"] is not None and obj["bits"] is not None:
        session.setup_propagator(obj["base"], obj["bits"],
                                 canonical_halves=obj["canonical_halves"])
    else:
        raise NotConfigured("this command (pass --config or --base with --bits)")

    obj["session"] = session
    return session


@click.group(name="paired-binary")
@click.option("--base", help="Comma-separated decimal base values, e.g. 0,1,2")
@click.option("--bits", type=int, help="Base bit-width")
@click.option("--config", "config_path", type=click.Path(exists=True, dir_okay=False),
              help="YAML propagator configuration")
@click.option("--canonical-halves", is_flag=True, default=False,
              help="Match either member of a base pair at the leaves")
@click.option("--log-level", default="WARNING",
              type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False))
@click.option("--json-logs", is_flag=True, default=False, help="Emit logs as JSON lines")
@click.pass_context
def main(ctx, base, bits, config_path, canonical_halves, log_level, json_logs):
    """Explore self-similar hierarchies of complementary bit patterns."""
    setup_logging(level=log_level, json_format=json_logs)
    ctx.ensure_object(dict)
    ctx.obj.update({
        "base": base,
        "bits": bits,
        "config_path": config_path,
        "canonical_halves": canonical_halves,
        "session": None,
    })


@main.command()
@click.argument("x")
@click.argument("n_bits", type=int)
@click.pass_context
@handle_errors
def member(ctx, x, n_bits):
    """Test whether X is a member of S_N."""
    _emit({"ok": True, "x": x, "n_bits": n_bits,
           "member": _session(ctx).is_member(x, n_bits)})


@main.command()
@click.argument("x")
@click.argument("n_bits", type=int)
@click.pass_context
@handle_errors
def decompose(ctx, x, n_bits):
    """Decompose member X of S_N into base components."""
    _emit({"ok": True, "components": _session(ctx).decompose_to_base(x, n_bits)})


@main.command()
@click.argument("components", nargs=-1, required=True)
@click.pass_context
@handle_errors
def compose(ctx, components):
    """Compose a member from base COMPONENTS (most significant first)."""
    result = _session(ctx).compose_from_base(list(components))
    _emit({"ok": True, **result})


@main.command()
@click.argument("n_bits", type=int)
@click.option("--seed-offset", default=0, type=int, show_default=True)
@click.option("--count", default=1, type=click.IntRange(min=1), show_default=True,
              help="Number of members (consecutive seed offsets)")
@click.pass_context
@handle_errors
def random(ctx, n_bits, seed_offset, count):
    """Generate random members of S_N."""
    session = _session(ctx)
    values = [session.generate_random_member(n_bits, seed_offset + i) for i in range(count)]
    _emit({"ok": True, "n_bits": n_bits, "values": values})


@main.command()
@click.argument("x")
@click.argument("n_bits", type=int)
@handle_errors
def pair(x, n_bits):
    """Show the canonical paired entity of X at N bits."""
    _emit({"ok": True, **create_paired_entity(x, n_bits)})


@main.command()
@click.argument("max_n_bits", type=int)
@click.pass_context
@handle_errors
def levels(ctx, max_n_bits):
    """List valid widths up to MAX_N_BITS with their member counts."""
    propagator = _session(ctx).propagator
    _emit({
        "ok": True,
        "levels": [
            {"n_bits": n, "level": propagator.level_of(n),
             "members": to_decimal(propagator.count_members(n))}
            for n in propagator.levels(max_n_bits)
        ],
    })


@main.command()
@click.argument("values")
@click.argument("n_bits", type=int)
@click.pass_context
@handle_errors
def check(ctx, values, n_bits):
    """Test several comma-separated VALUES against S_N."""
    session = _session(ctx)
    parsed = parse_decimal_list(values, "values")
    _emit({
        "ok": True,
        "n_bits": n_bits,
        "results": {to_decimal(v): session.is_member(to_decimal(v), n_bits) for v in parsed},
    })


__all__ = ["main"]
