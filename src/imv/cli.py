"""Typer CLI — ``imv`` commands for extracting, exporting and rewriting voice profiles."""

from __future__ import annotations

import asyncio
import json
import logging
from pathlib import Path

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from imv.config import load_config
from imv.parsing.extractor import extract_sections
from imv.parsing.preview import extract_voice_summary, get_prompt_preview
from imv.parsing.rules import add_rule as add_rule_to_profile
from imv.platforms.renderers import export_profile
from imv.prompts.modifications import MODIFY_OPTIONS, UnknownModificationTypeError, instruction_for
from imv.schemas.config import ImvConfig
from imv.schemas.exports import PLATFORM_INFO, PlatformId

# Load .env file from project root (if it exists)
load_dotenv()

app = typer.Typer(
    name="imv",
    help="In My Voice — turn writing samples into a portable voice profile for AI assistants.",
    no_args_is_help=True,
)
console = Console()


def _setup_logging(verbose: bool) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%H:%M:%S",
    )
    # httpx logs every HTTP request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def _read_profile(path: Path) -> str:
    if not path.exists():
        console.print(f"[red]Profile not found:[/] {path}")
        raise typer.Exit(code=1)
    return path.read_text(encoding="utf-8")


def _load_config_or_default(config: Path | None) -> ImvConfig:
    if config is None:
        return ImvConfig()
    try:
        return load_config(config)
    except Exception as exc:
        console.print(f"[red]Config validation failed:[/] {exc}")
        raise typer.Exit(code=1)


def _make_client(cfg: ImvConfig, dry_run: bool):
    if dry_run:
        from imv.shared.openai_client import DryRunClient
        console.print("[yellow]DRY-RUN mode — no API calls will be made.[/]\n")
        return DryRunClient()
    from imv.shared.openai_client import CompletionClient
    return CompletionClient(model=cfg.model, max_tokens=cfg.max_tokens)


def _run_agent(coro) -> str:
    """Run an agent coroutine, turning agent errors into a red message and exit 1."""
    try:
        return asyncio.run(coro)
    except (ValueError, RuntimeError) as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=1)


@app.command()
def validate(
    config: Path = typer.Option(..., "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Validate a configuration file."""
    _setup_logging(verbose)
    cfg = _load_config_or_default(config)

    console.print("[green]Config is valid![/]\n")
    console.print(f"  Model:       {cfg.model}")
    console.print(f"  Max tokens:  {cfg.max_tokens}")
    console.print(f"  Temperature: {cfg.temperature}")
    console.print(f"  History:     {cfg.history_limit} turns")
    console.print(f"  Platforms:   {', '.join(p.value for p in cfg.platforms)}")
    console.print(f"  Output dir:  {cfg.output_directory}")


@app.command()
def extract(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    as_json: bool = typer.Option(False, "--json", help="Print the sections as JSON."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Show the sections extracted from a voice profile."""
    _setup_logging(verbose)
    sections = extract_sections(_read_profile(profile))

    if as_json:
        # Plain print: rich would wrap long lines and break the JSON
        typer.echo(sections.model_dump_json(indent=2))
        return

    table = Table(title=f"Voice profile — {sections.user_name}", show_lines=True)
    table.add_column("Section", style="bold cyan")
    table.add_column("Value")
    for field in (
        "voice_identity", "core_voice", "tone_analysis", "vocabulary_signatures",
        "anti_patterns", "sentence_mechanics",
    ):
        table.add_row(field, getattr(sections, field) or "[dim](not found)[/]")
    table.add_row("signature_patterns", "\n".join(sections.signature_patterns) or "[dim](none)[/]")
    table.add_row("avoidance_patterns", "\n".join(sections.avoidance_patterns) or "[dim](none)[/]")
    for label, mode in sections.modes():
        table.add_row(label, mode.text or "[dim](not found)[/]")
    console.print(table)


@app.command()
def export(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    platform: str = typer.Option(None, "--platform", "-p", help="Render a single platform."),
    output: Path = typer.Option(None, "--output", "-o", help="Directory to write <platform>.txt files into."),
    save: bool = typer.Option(False, "--save", help="Write files into the configured output_directory."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Render platform-specific instructions for a voice profile."""
    _setup_logging(verbose)
    cfg = _load_config_or_default(config)
    exports = export_profile(_read_profile(profile))

    if platform:
        try:
            platforms = [PlatformId(platform.lower())]
        except ValueError:
            valid = ", ".join(p.value for p in PlatformId)
            console.print(f"[red]Unknown platform:[/] {platform} (valid: {valid})")
            raise typer.Exit(code=1)
    else:
        platforms = cfg.platforms

    if output is None and save:
        output = Path(cfg.output_directory)

    if output is None:
        for p in platforms:
            info = PLATFORM_INFO[p]
            if len(platforms) > 1:
                console.print(f"\n[bold]{info.icon} {info.name}[/] — {info.description}\n")
            typer.echo(exports.get(p))
        return

    output.mkdir(parents=True, exist_ok=True)
    for p in platforms:
        path = output / f"{p.value}.txt"
        path.write_text(exports.get(p), encoding="utf-8")
        console.print(f"[green]{PLATFORM_INFO[p].name} export written to:[/] {path}")


@app.command()
def instruction(
    modification_type: str = typer.Argument(None, help="Modification type, e.g. shorter or rewrite."),
) -> None:
    """Print the instruction for a modification type (or list all types)."""
    if modification_type is None:
        for mod_type, label, icon in MODIFY_OPTIONS:
            console.print(f"{icon} [bold]{mod_type.value}[/] — {label}")
        return
    try:
        typer.echo(instruction_for(modification_type))
    except UnknownModificationTypeError as exc:
        console.print(f"[red]Error:[/] {exc.args[0]}")
        raise typer.Exit(code=1)


@app.command("add-rule")
def add_rule(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    phrase: str = typer.Option(..., "--phrase", help="Phrase to add."),
    rule_type: str = typer.Option(..., "--type", "-t", help="avoid or prefer"),
    in_place: bool = typer.Option(False, "--in-place", help="Overwrite the profile file."),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
) -> None:
    """Add an avoid/prefer phrase to a voice profile."""
    _setup_logging(verbose)
    text = _read_profile(profile)
    try:
        result = add_rule_to_profile(text, phrase, rule_type)
    except ValueError as exc:
        console.print(f"[red]Error:[/] {exc}")
        raise typer.Exit(code=1)

    if result.already_exists:
        console.print(f"[yellow]{result.message}[/]")
        return
    if in_place:
        profile.write_text(result.prompt_text, encoding="utf-8")
        console.print(f"[green]{result.message}[/] ({profile})")
    else:
        typer.echo(result.prompt_text)


@app.command()
def preview(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    length: int = typer.Option(200, "--length", "-n", min=1, help="Maximum preview length."),
) -> None:
    """Show a one-line preview and the voice summary of a profile."""
    text = _read_profile(profile)
    console.print(f"[bold]Preview:[/] {get_prompt_preview(text, length)}\n")
    console.print(f"[bold]Summary:[/] {extract_voice_summary(text)}")


@app.command()
def generate(
    samples: list[Path] = typer.Argument(..., help="Writing sample files."),
    output: Path = typer.Option(None, "--output", "-o", help="File to write the generated profile to."),
    save: bool = typer.Option(False, "--save", help="Write profile.md into the configured output_directory."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned responses (no API calls)."),
) -> None:
    """Build a voice profile from writing samples."""
    from imv.agents.profile_builder.agent import ProfileBuilderAgent

    _setup_logging(verbose)
    cfg = _load_config_or_default(config)
    texts = [_read_profile(path) for path in samples]
    total_words = sum(len(t.split()) for t in texts)
    console.print(f"[bold]Analyzing {len(texts)} samples ({total_words} words)…[/]\n")

    agent = ProfileBuilderAgent(_make_client(cfg, dry_run))
    profile = _run_agent(agent.run(texts, total_words))

    if output is None and save:
        output = Path(cfg.output_directory) / "profile.md"

    if output:
        output.parent.mkdir(parents=True, exist_ok=True)
        output.write_text(profile, encoding="utf-8")
        console.print(f"[green]Profile written to:[/] {output}")
    else:
        typer.echo(profile)


@app.command()
def refine(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    feedback: str = typer.Option(..., "--feedback", "-f", help="What to change."),
    in_place: bool = typer.Option(False, "--in-place", help="Overwrite the profile file."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned responses (no API calls)."),
) -> None:
    """Refine a voice profile with free-text feedback."""
    from imv.agents.refiner.agent import RefinerAgent

    _setup_logging(verbose)
    cfg = _load_config_or_default(config)
    text = _read_profile(profile)

    agent = RefinerAgent(_make_client(cfg, dry_run))
    refined = _run_agent(agent.run(feedback, text))

    if in_place:
        profile.write_text(refined, encoding="utf-8")
        console.print(f"[green]Refined profile written to:[/] {profile}")
    else:
        typer.echo(refined)


@app.command("test-voice")
def test_voice(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    mode: str = typer.Option("B", "--mode", "-m", help="A (casual), B (professional) or C (formal)."),
    request: str = typer.Option(..., "--request", "-r", help="What to write."),
    config: Path = typer.Option(None, "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned responses (no API calls)."),
) -> None:
    """Write one sample in a chosen mode to try a profile out."""
    from imv.agents.voice_tester.agent import VoiceTesterAgent

    _setup_logging(verbose)
    cfg = _load_config_or_default(config)
    text = _read_profile(profile)

    agent = VoiceTesterAgent(_make_client(cfg, dry_run))
    typer.echo(_run_agent(agent.run(mode, request, text)))


@app.command()
def modify(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    content: str = typer.Option(..., "--content", help="Text to modify."),
    modification_type: str = typer.Option(..., "--type", "-t", help="Modification type, e.g. shorter."),
    temperature: float = typer.Option(None, "--temperature", min=0.0, max=1.0),
    config: Path = typer.Option(None, "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned responses (no API calls)."),
) -> None:
    """Apply a canned modification to a piece of text in the profile's voice."""
    from imv.agents.modifier.agent import ModifierAgent

    _setup_logging(verbose)
    cfg = _load_config_or_default(config)
    text = _read_profile(profile)
    try:
        instruction_for(modification_type)
    except UnknownModificationTypeError as exc:
        console.print(f"[red]Error:[/] {exc.args[0]}")
        raise typer.Exit(code=1)

    agent = ModifierAgent(_make_client(cfg, dry_run))
    temp = cfg.temperature if temperature is None else temperature
    typer.echo(_run_agent(agent.run(content, modification_type, text, temp)))


@app.command()
def chat(
    profile: Path = typer.Argument(..., help="Voice profile text file."),
    message: str = typer.Option(..., "--message", "-m", help="What to write."),
    writing_mode: str = typer.Option("general", "--writing-mode", "-w", help="general, email, linkedin, twitter, slack or formal_letter"),
    history_file: Path = typer.Option(None, "--history", help="JSON list of prior {role, content} turns."),
    temperature: float = typer.Option(None, "--temperature"),
    config: Path = typer.Option(None, "--config", "-c", help="Path to imv-config.yml"),
    verbose: bool = typer.Option(False, "--verbose", "-v"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Use canned responses (no API calls)."),
) -> None:
    """Write one chat reply in the profile's voice."""
    from imv.agents.chat_writer.agent import ChatWriterAgent
    from imv.schemas.chat import ChatMessage

    _setup_logging(verbose)
    cfg = _load_config_or_default(config)
    text = _read_profile(profile)
    history = []
    if history_file:
        try:
            turns = json.loads(history_file.read_text(encoding="utf-8"))
            history = [ChatMessage.model_validate(turn) for turn in turns]
        except (OSError, ValueError, TypeError) as exc:
            console.print(f"[red]Invalid history file:[/] {escape(str(exc))}")
            raise typer.Exit(code=1)

    agent = ChatWriterAgent(_make_client(cfg, dry_run), history_limit=cfg.history_limit)
    temp = cfg.temperature if temperature is None else temperature
    typer.echo(_run_agent(agent.run(message, text, history, writing_mode, temp)))
