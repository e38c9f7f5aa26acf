"""CLI commands: cssbuild selector / cssbuild combine."""

from __future__ import annotations

import sys

import click

from cssbuild.errors import SelectorError
from cssbuild.selector import Combination, FragmentKind, SelectorBuilder

_KINDS = {
    "element": FragmentKind.ELEMENT,
    "id": FragmentKind.ID,
    "class": FragmentKind.CLASS,
    "attr": FragmentKind.ATTRIBUTE,
    "pseudo-class": FragmentKind.PSEUDO_CLASS,
    "pseudo-element": FragmentKind.PSEUDO_ELEMENT,
}


def _parse_fragment(raw: str) -> tuple[FragmentKind, str]:
    kind_name, sep, value = raw.partition("=")
    kind = _KINDS.get(kind_name.strip().lower())
    if not sep or kind is None:
        raise click.BadParameter(
            f"expected KIND=VALUE with KIND one of {', '.join(_KINDS)}, got {raw!r}",
            param_hint="FRAGMENTS",
        )
    return kind, value


@click.command()
@click.argument("fragments", nargs=-1, required=True)
def selector(fragments: tuple[str, ...]) -> None:
    """Build a compound selector from KIND=VALUE fragments, applied in order.

    Example: cssbuild selector element=a 'attr=href$=".png"' pseudo-class=focus
    """
    builder = SelectorBuilder()
    try:
        for raw in fragments:
            kind, value = _parse_fragment(raw)
            builder.add(kind, value)
    except SelectorError as exc:
        click.echo(f"Selector error: {exc}", err=True)
        sys.exit(1)
    click.echo(builder.render())


@click.command()
@click.argument("left")
@click.argument("token")
@click.argument("right")
def combine(left: str, token: str, right: str) -> None:
    """Join two rendered selectors with a combinator TOKEN (' ', '>', '+', '~')."""
    click.echo(Combination(left=left, token=token, right=right).render())
