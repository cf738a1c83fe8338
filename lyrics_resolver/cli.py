from __future__ import annotations

import json

import typer
from colorama import Fore, Style, just_fix_windows_console

from lyrics_resolver.config import load_config, save_config_providers
from lyrics_resolver.errors import NotFoundAfterExhaustion, ValidationError
from lyrics_resolver.logging_setup import setup_logging
from lyrics_resolver.query.candidates import generate
from lyrics_resolver.query.title import parse_video_title
from lyrics_resolver.sources.base import Found, NotFound
from lyrics_resolver.sources.service import Attempt, Failure, LyricsService


app = typer.Typer(no_args_is_help=True, add_completion=False)


def _attempt_line(a: Attempt) -> str:
    if isinstance(a.result, Found):
        mark, color, note = "✓", Fore.GREEN, "found"
    elif isinstance(a.result, NotFound):
        mark, color, note = "✗", Fore.YELLOW, "not found"
    else:
        mark, color, note = "!", Fore.RED, a.result.reason
    return f"{color}{mark}{Style.RESET_ALL} {a.provider:<15} #{a.candidate.rank} {a.candidate.display}  ({note})"


def _run(track: str, artist: str, *, json_output: bool, trace: bool, budget: float | None) -> None:
    cfg = load_config()
    if budget is not None:
        cfg = cfg.__class__(**{**cfg.__dict__, "total_budget_s": budget})
    service = LyricsService(cfg)

    try:
        outcome = service.resolve(track, artist)
    except ValidationError as e:
        typer.echo(json.dumps(e.to_dict()) if json_output else f"Error: {e}", err=True)
        raise typer.Exit(code=2)

    if trace:
        for a in outcome.attempts:
            typer.echo(_attempt_line(a), err=True)

    if isinstance(outcome, Failure):
        err = NotFoundAfterExhaustion(outcome)
        if json_output:
            typer.echo(json.dumps(err.to_dict(), indent=2, ensure_ascii=False))
        else:
            typer.echo(f"{Fore.RED}{err}{Style.RESET_ALL}", err=True)
            for label, q in err.to_dict()["tried"].items():
                typer.echo(f"  {label}: {q['artist']} - {q['track']}", err=True)
        raise typer.Exit(code=1)

    if json_output:
        payload = {
            "lyrics": outcome.lyrics,
            "copyright": outcome.copyright,
            "trackName": outcome.matched_track,
            "artistName": outcome.matched_artist,
            "provider": outcome.provider_used,
        }
        typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
        return

    typer.echo(f"{Style.BRIGHT}{outcome.matched_artist} - {outcome.matched_track}{Style.RESET_ALL} [{outcome.provider_used}]")
    typer.echo()
    typer.echo(outcome.lyrics.rstrip())
    if outcome.copyright:
        typer.echo()
        typer.echo(outcome.copyright)


@app.command()
def resolve(
    track: str,
    artist: str,
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    trace: bool = typer.Option(False, "--trace", help="Print every provider attempt"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    budget: float | None = typer.Option(None, "--budget", help="Total seconds for the whole cascade (0 = unlimited)"),
):
    """Find lyrics for TRACK by ARTIST."""
    setup_logging(debug)
    _run(track, artist, json_output=json_output, trace=trace, budget=budget)


@app.command("from-title")
def from_title(
    title: str,
    channel: str = typer.Option("", "--channel", "-c", help="Uploader channel name"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    trace: bool = typer.Option(False, "--trace", help="Print every provider attempt"),
    debug: bool = typer.Option(False, "--debug", help="Enable debug logging"),
    budget: float | None = typer.Option(None, "--budget", help="Total seconds for the whole cascade (0 = unlimited)"),
):
    """
    Guess track/artist from a video title, then find lyrics.
    """
    setup_logging(debug)
    raw = parse_video_title(title, channel)
    if not json_output:
        typer.echo(f"Parsed: {raw.display}", err=True)
    _run(raw.track, raw.artist, json_output=json_output, trace=trace, budget=budget)


@app.command()
def candidates(track: str, artist: str):
    """Show the query variations the resolver will try, in order."""
    for c in generate(track, artist):
        typer.echo(f"{c.rank}. {c.display}")


@app.command()
def providers():
    """List enabled providers in priority order."""
    service = LyricsService(load_config())
    for i, src in enumerate(service.sources, 1):
        suffix = " (last resort)" if src.last_resort else ""
        typer.echo(f"{i}. {src.name}{suffix}")


@app.command()
def config(
    providers_opt: str | None = typer.Option(None, "--providers", help="Comma-separated provider order to save"),
):
    """Show or save provider order."""
    if providers_opt is None:
        cfg = load_config()
        typer.echo(f"providers={','.join(cfg.providers)}")
        typer.echo(f"timeout_s={cfg.request_timeout_s}")
        typer.echo(f"total_budget_s={cfg.total_budget_s}")
        typer.echo(f"musixmatch_api_key={'set' if cfg.musixmatch_api_key else 'unset'}")
        return
    names = [p.strip() for p in providers_opt.split(",") if p.strip()]
    if not names:
        raise typer.BadParameter("at least one provider is required", param_hint="--providers")
    path = save_config_providers(names)
    typer.echo(f"Saved provider order to {path}")


def main() -> None:
    just_fix_windows_console()
    app()


if __name__ == "__main__":
    main()
