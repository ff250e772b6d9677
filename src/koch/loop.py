import os

os.environ["PYGAME_HIDE_SUPPORT_PROMPT"] = "1"

import typer

from koch.cli.commands.run import run_command

app = typer.Typer(help="Explore the Koch snowflake.")

app.command(name="run")(run_command)


@app.callback()
def callback() -> None:
    """Keep ``run`` as an explicit subcommand."""


def main() -> None:
    app()


if __name__ == "__main__":
    main()
