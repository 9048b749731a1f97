import typer

from swagger_annotator.cli.annotate import annotate, check

app = typer.Typer(
    name="swagger-annotator",
    help="Keep swag @name directives on Go request and response types in sync.",
    no_args_is_help=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)

app.command("annotate")(annotate)
app.command("check")(check)


def main() -> None:
    app()
