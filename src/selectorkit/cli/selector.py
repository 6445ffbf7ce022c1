"""CLI commands: selectorkit selector / combine -- render CSS selectors."""

from __future__ import annotations

import click

from selectorkit.selector import SelectorBuilder, facade


@click.command()
@click.option("--element", "-e", default=None, help="Type selector, e.g. div")
@click.option("--id", "id_", default=None, help="Id without the leading #")
@click.option("--class", "-c", "classes", multiple=True, help="Class name (repeatable)")
@click.option("--attr", "-a", "attrs", multiple=True, help="Attribute test (repeatable)")
@click.option("--pseudo-class", "-p", "pseudo_classes", multiple=True, help="Pseudo-class (repeatable)")
@click.option("--pseudo-element", default=None, help="Pseudo-element, e.g. after")
def selector(
    element: str | None,
    id_: str | None,
    classes: tuple[str, ...],
    attrs: tuple[str, ...],
    pseudo_classes: tuple[str, ...],
    pseudo_element: str | None,
) -> None:
    """Build a compound selector from its parts.

    Parts are always emitted in CSS order: element, id, classes,
    attributes, pseudo-classes, pseudo-element. Empty values are kept.
    """
    singles = (element, id_, pseudo_element)
    if all(part is None for part in singles) and not (classes or attrs or pseudo_classes):
        raise click.UsageError("At least one selector part is required.")

    # Options are applied in canonical order and each singleton is
    # single-valued, so the builder cannot reject any of these calls.
    builder = SelectorBuilder()
    if element is not None:
        builder.element(element)
    if id_ is not None:
        builder.id(id_)
    for name in classes:
        builder.class_(name)
    for test in attrs:
        builder.attribute(test)
    for name in pseudo_classes:
        builder.pseudo_class(name)
    if pseudo_element is not None:
        builder.pseudo_element(pseudo_element)

    click.echo(builder.stringify())


class _Rendered:
    """Already-rendered selector text standing in for a builder."""

    def __init__(self, text: str) -> None:
        self._text = text

    def stringify(self) -> str:
        return self._text


@click.command()
@click.argument("left")
@click.argument("combinator")
@click.argument("right")
def combine(left: str, combinator: str, right: str) -> None:
    """Join two selectors with a combinator, e.g. `div + table`."""
    result = facade.combine(_Rendered(left), combinator, _Rendered(right))
    click.echo(result.stringify())
