"""Command line entry point for youtube-summary."""

import logging
import sys
from pathlib import Path

import click
from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from youtube_summary import __version__
from youtube_summary.config import ConfigOverrides, resolve_config
from youtube_summary.errors import TranscriptFetchError, YoutubeSummaryError
from youtube_summary.format_summary import print_models, print_summary
from youtube_summary.log import configure_logging
from youtube_summary.summarizer import Summarizer
from youtube_summary.transcript import fetch_transcript
from youtube_summary.video_id import extract_video_id

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)


def write_output(path: Path, text: str):
    try:
        path.write_text(text + '\n', encoding='utf-8')
    except OSError as e:
        raise click.ClickException(f"Could not write output file {path}: {e}")
    err_console.print(f"[green]✓ Saved to {path}[/green]")


def list_models_command(overrides: ConfigOverrides, search, display_format):
    config = resolve_config(overrides)
    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"),
                  console=err_console, transient=True) as progress:
        progress.add_task("Fetching models...", total=None)
        models = Summarizer.for_config(config).list_models(search)

    if display_format == 'plain':
        for model in models:
            click.echo(f"{model.id}\t{model.name}")
        return
    print_models(models, search, console=console)


def summarize_command(video_url, overrides: ConfigOverrides, languages, output, transcript_only, display_format):
    logger.debug("URL: %s", video_url)
    video_id = extract_video_id(video_url)
    logger.debug("Video ID: %s (%s link)", video_id, video_id.shape.value)

    # Resolve before any network call so a missing key fails fast
    config = None if transcript_only else resolve_config(overrides)

    with Progress(SpinnerColumn(), TextColumn("[progress.description]{task.description}"),
                  console=err_console, transient=True) as progress:
        task = progress.add_task("Fetching transcript...", total=None)
        transcript = fetch_transcript(video_id, languages=languages)
        if not transcript.strip():
            raise TranscriptFetchError("Transcript is empty")

        if transcript_only:
            result = transcript
        else:
            progress.update(task, description=f"Summarizing with {config.model}...")
            result = Summarizer.for_config(config).summarize(config, transcript)

    if transcript_only:
        click.echo(result)
    else:
        print_summary(result, title=f"Summary: {video_id}", display_format=display_format, console=console)

    if output:
        write_output(output, result)


@click.command()
@click.argument('video_url', required=False)
@click.option('--prompt', '-p', help='Custom prompt for the summary')
@click.option('--model', '-m', help='OpenRouter model ID (e.g. openai/gpt-4o)')
@click.option('--api-key', '-k', help='OpenRouter API key (overrides env and config files)')
@click.option('--config', '-c', 'config_path', type=click.Path(dir_okay=False, path_type=Path),
              help='Path to config file')
@click.option('--language', '-l', 'languages', multiple=True, default=('en',), show_default=True,
              help='Transcript language code, in order of preference (repeatable)')
@click.option('--output', '-o', type=click.Path(dir_okay=False, path_type=Path),
              help='Also write the result to this file')
@click.option('--transcript-only', is_flag=True, help='Print the transcript without summarizing')
@click.option('--list-models', 'list_models', is_flag=True, help='List available models and exit')
@click.option('--search', '-s', help='Filter --list-models by ID or name (case-insensitive)')
@click.option('--display-format', type=click.Choice(['plain', 'markdown']), default='markdown',
              show_default=True, help='How to print the result')
@click.option('--verbose', '-v', is_flag=True, help='Show verbose output')
@click.version_option(version=__version__)
def main(video_url, prompt, model, api_key, config_path, languages, output, transcript_only,
         list_models, search, display_format, verbose):
    """Summarize a YouTube video from its transcript.

    VIDEO_URL may be a watch, youtu.be, embed, shorts or live link, or a bare video ID.
    """
    configure_logging(verbose, console=err_console)
    load_dotenv()

    if search and not list_models:
        raise click.UsageError("--search can only be used with --list-models")
    if not list_models and not video_url:
        raise click.UsageError("VIDEO_URL is required (except when using --list-models)")

    overrides = ConfigOverrides(api_key=api_key, model=model, prompt=prompt, settings_path=config_path)

    try:
        if list_models:
            list_models_command(overrides, search, display_format)
        else:
            summarize_command(video_url, overrides, languages, output, transcript_only, display_format)
    except YoutubeSummaryError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]", highlight=False)
        sys.exit(1)
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Interrupted.[/yellow]")
        sys.exit(130)


if __name__ == '__main__':
    main()
