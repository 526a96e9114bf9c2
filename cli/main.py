# cli/main.py


import typer
from cli.tokens.commands import app as tokens_app

app = typer.Typer()
app.add_typer(tokens_app, name="tokens")

if __name__ == "__main__":
    app()
