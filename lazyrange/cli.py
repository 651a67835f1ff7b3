from typing import Annotated, Optional

import typer
from typer import Argument, Option

from lazyrange.errors import RangeError
from lazyrange.rangeiter import RangeIterator, range

app = typer.Typer(pretty_exceptions_enable=False, add_completion=False)


@app.command()
def main(
    start: Annotated[
        int,
        Argument(help="First value of the range"),
    ] = 0,
    end: Annotated[
        Optional[int],
        Argument(help="End of the range, excluded unless --inclusive. "
                      "If omitted, the range is unbounded"),
    ] = None,
    inclusive: Annotated[
        bool,
        Option("--inclusive", "-i", help="Include END in the range"),
    ] = False,
    rev: Annotated[
        bool,
        Option("--rev", "-r", help="Produce the values in reverse order"),
    ] = False,
    step: Annotated[
        int,
        Option("--step", "-s", min=1, help="Distance between two values"),
    ] = 1,
    limit: Annotated[
        Optional[int],
        Option("--limit", "-n", min=0, metavar="N",
               help="Produce at most N values"),
    ] = None,
    sep: Annotated[
        str,
        Option("--sep", help="Separator between values"),
    ] = "\n",
    length: Annotated[
        bool,
        Option("--len", help="Print len() instead of the values"),
    ] = False,
    contains: Annotated[
        Optional[int],
        Option("--contains", metavar="X",
               help="Print whether X is in the range, instead of the values"),
    ] = None,
    count: Annotated[
        bool,
        Option("--count", help="Print the number of produced values on stderr"),
    ] = False,
) -> None:
    """
    Print the integers between START and END.
    """
    try:
        it = range(start, end, inclusive)
    except RangeError as e:
        typer.echo(e.format(use_colors=True), err=True)
        raise typer.Exit(1)

    if end is None:
        if rev:
            raise typer.BadParameter("cannot reverse an unbounded range",
                                     param_hint="'--rev'")
        if limit is None and not (length or contains is not None):
            raise typer.BadParameter("an unbounded range needs a limit",
                                     param_hint="'--limit'")

    it = it.step(step)
    if rev:
        it = it.rev()

    if length:
        typer.echo(it.len())
        return
    if contains is not None:
        typer.echo(it.contains(contains))
        return

    dump_values(it, limit, sep)
    if count:
        typer.echo(f"count: {it.count}", err=True)


def dump_values(it: RangeIterator, limit: Optional[int], sep: str) -> None:
    produced = 0
    while limit is None or produced < limit:
        res = it.advance()
        if res.done:
            break
        if produced > 0:
            typer.echo(sep, nl=False)
        typer.echo(res.value, nl=False)
        produced += 1
    if produced > 0:
        typer.echo()
