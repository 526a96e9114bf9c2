# cli/tokens/commands.py
import typer
from cli.core.api import ApiError, api_create_token, api_list_tokens

app = typer.Typer(help="Access token commands (create/list).")


def parse_scopes(raw: str) -> list[str]:
    """Comma-separated scopes, trimmed, blanks dropped."""
    return [s.strip() for s in raw.split(",") if s.strip()]


@app.command("create")
def create_token(
    user_id: str = typer.Argument(..., help="User the token is issued for"),
    scopes: str = typer.Option(..., "--scopes", "-s", help="Comma-separated scopes, e.g. 'read, write'"),
    expires_in: int = typer.Option(60, "--expires-in", "-e", help="Minutes until the token expires"),
):
    """
    Issue a new access token.
    """
    user_id = user_id.strip()
    scope_list = parse_scopes(scopes)

    if not user_id:
        typer.echo("userId is required")
        raise typer.Exit(code=1)
    if not scope_list:
        typer.echo("At least one scope is required")
        raise typer.Exit(code=1)
    if expires_in <= 0:
        typer.echo("expiresInMinutes must be > 0")
        raise typer.Exit(code=1)

    try:
        token = api_create_token(user_id, scope_list, expires_in)
    except ApiError as e:
        typer.echo(str(e))
        raise typer.Exit(code=1)

    typer.echo("Token created ✅")
    typer.echo(f"ID:         {token.get('id')}")
    typer.echo(f"User:       {token.get('userId')}")
    typer.echo(f"Scopes:     {', '.join(token.get('scopes', []))}")
    typer.echo(f"Token:      {token.get('token')}")
    typer.echo(f"Expires at: {token.get('expiresAt')}")


@app.command("list")
def list_tokens(
    user_id: str = typer.Argument(..., help="User to list active tokens for"),
):
    """
    List the active tokens of a user.
    """
    user_id = user_id.strip()
    if not user_id:
        typer.echo("userId is required to list tokens")
        raise typer.Exit(code=1)

    try:
        tokens = api_list_tokens(user_id)
    except ApiError as e:
        typer.echo(str(e))
        raise typer.Exit(code=1)

    if not tokens:
        typer.echo("No active tokens found for this user.")
        return

    typer.echo(f"{'ID':32}  {'Scopes':20}  {'Created':24}  {'Expires':24}  Token")
    typer.echo("-" * 150)
    for t in tokens:
        tid = str(t.get("id", ""))[:32]
        scopes = ", ".join(t.get("scopes", []))[:20]
        created = str(t.get("createdAt", ""))[:24]
        expires = str(t.get("expiresAt", ""))[:24]
        typer.echo(f"{tid:32}  {scopes:20}  {created:24}  {expires:24}  {t.get('token', '')}")
