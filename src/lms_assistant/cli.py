import json
from typing import Optional

import pendulum
import typer
from rich import print
from rich.table import Table

from lms_assistant.intent.analyzer import IntentAnalyzer

app = typer.Typer(help="Classify LMS administration commands.")


@app.command()
def analyze(
    message: str = typer.Argument(..., help="Free-form command to classify"),
    today: Optional[str] = typer.Option(
        None, "--today", help="Reference date (YYYY-MM-DD) for relative session dates"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print the raw result as JSON"),
):
    if today is not None:
        try:
            reference = pendulum.parse(today, exact=True)
        except ValueError:
            print(f"[red]Invalid --today value: {today}[/red]")
            raise typer.Exit(code=2)
        if not isinstance(reference, pendulum.Date):
            print(f"[red]--today must be a calendar date, got: {today}[/red]")
            raise typer.Exit(code=2)
        if isinstance(reference, pendulum.DateTime):
            reference = reference.date()
    else:
        reference = pendulum.today().date()

    result = IntentAnalyzer().analyze(message, reference_date=reference)
    if as_json:
        typer.echo(json.dumps(result.to_dict(), ensure_ascii=False))
        return

    colour = "red" if result.is_unknown else "green"
    print(f"[{colour}]{result.intent}[/{colour}] (confidence {result.confidence:.2f})")
    entities = result.entities.as_dict()
    if not entities:
        return
    table = Table("entity", "value")
    for key, value in entities.items():
        table.add_row(key, str(value))
    print(table)


@app.command()
def rules():
    """List the intent rules in priority order."""
    table = Table("#", "intent", "confidence")
    for idx, rule in enumerate(IntentAnalyzer().rules, start=1):
        table.add_row(str(idx), rule.name, f"{rule.confidence:.2f}")
    print(table)


if __name__ == "__main__":
    app()
