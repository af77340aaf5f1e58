"""
CLI integration for code generation functionality.

Provides the ``generate``, ``init-project`` and ``blocks`` subcommands and
the language listing used by the main entry point.
"""

import argparse
import sys
from dataclasses import replace
from pathlib import Path
from rich.console import Console
from rich.table import Table
from rich.panel import Panel
from rich.syntax import Syntax
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich import box

from . import (
    generate_from_project,
    list_supported_languages,
    get_language_info,
    is_language_supported,
    list_all_language_info,
    GeneratorConfig,
    load_config,
    ConfigError,
)
from .core.schema import BlockKind
from ..logging_config import configure_logging, get_logger
from ..project import (
    BLOCK_PALETTE,
    PALETTE_CATEGORIES,
    ProjectError,
    load_project,
    save_project,
    starter_project,
)

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich consoles; status goes to stderr while code is piped to stdout
console = Console()
err_console = Console(stderr=True)


def create_generate_subparser(subparsers) -> argparse.ArgumentParser:
    """
    Create the ``generate`` subcommand parser.

    Args:
        subparsers: Subparser group from main parser

    Returns:
        Configured subparser for the generate command
    """
    parser = subparsers.add_parser(
        "generate",
        help="Generate chaincode from a project file",
        description="Generate Go chaincode from a block project",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  chaincode-builder generate project.json
  chaincode-builder generate project.json -o chaincode.go
  chaincode-builder generate --url https://example.com/project.json --verbose
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group(required=True)
    input_group.add_argument("project", nargs="?", help="Project JSON file")
    input_group.add_argument("--url", help="URL to fetch the project from")

    parser.add_argument(
        "--language", "-l", default="go", help="Target language (default: go)"
    )
    parser.add_argument("--output", "-o", help="Output file (default: stdout)")
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument("--name", help="Override the chaincode name")
    parser.add_argument("--version", dest="chaincode_version", help="Override the chaincode version")
    parser.add_argument(
        "--asset-type", help="Asset type used when no asset block names one"
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Show generation result metadata",
    )

    parser.set_defaults(func=handle_generate_command)
    return parser


def create_init_project_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``init-project`` subcommand parser."""
    parser = subparsers.add_parser(
        "init-project",
        help="Write a starter project file",
        description="Write a project with the default schema and one block of each kind",
    )
    parser.add_argument("file", help="Project file to create")
    parser.add_argument("--name", default="MyChaincode", help="Chaincode name")
    parser.add_argument(
        "--version", dest="chaincode_version", default="1.0", help="Chaincode version"
    )
    parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing file"
    )
    parser.set_defaults(func=handle_init_project_command)
    return parser


def create_blocks_subparser(subparsers) -> argparse.ArgumentParser:
    """Create the ``blocks`` subcommand parser."""
    parser = subparsers.add_parser(
        "blocks",
        help="List the block palette",
        description="List the blocks a project can place",
    )
    parser.set_defaults(func=handle_blocks_command)
    return parser


def handle_generate_command(args: argparse.Namespace) -> int:
    """
    Handle code generation from parsed CLI arguments.

    Args:
        args: Parsed command line arguments

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    try:
        if not _validate_language(args.language):
            return 1

        config = _build_config(args)
        if getattr(args, "log_level", None) is None:
            configure_logging(config.log_level)
        project = _load_input_project(args)

        if args.name:
            project = replace(project, name=args.name)
        if args.chaincode_version:
            project = replace(project, version=args.chaincode_version)

        return _generate_and_output(project, args.language, config, args)

    except CLIError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def handle_init_project_command(args: argparse.Namespace) -> int:
    """Write a starter project to ``args.file``."""
    path = Path(args.file)
    if path.exists() and not args.force:
        console.print(
            f"[red]✗ Error:[/red] {path} already exists (use --force to overwrite)"
        )
        return 1

    project = starter_project(args.name, args.chaincode_version)
    try:
        save_project(project, path)
    except ProjectError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    console.print(
        f"[green]✓[/green] Starter project with {len(project.blocks)} blocks "
        f"written to [cyan]{path}[/cyan]"
    )
    return 0


def handle_blocks_command(args: argparse.Namespace) -> int:
    """Show the block palette grouped by category."""
    table = Table(title="🧱 Block Palette", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Block", style="bold green", no_wrap=True)
    table.add_column("Name")
    table.add_column("Category", style="cyan")
    table.add_column("Generated", style="blue")

    for category in PALETTE_CATEGORIES:
        for entry in BLOCK_PALETTE:
            if entry.category != category:
                continue
            generated = BlockKind.from_tag(entry.block_id) != BlockKind.UNKNOWN
            table.add_row(
                entry.block_id,
                entry.name,
                PALETTE_CATEGORIES[category],
                "yes" if generated else "[dim]placeholder[/dim]",
            )

    console.print()
    console.print(table)
    console.print()
    return 0


def list_languages() -> int:
    """List supported languages with details."""
    language_info = list_all_language_info()

    if not language_info:
        console.print("[yellow]⚠️ No code generators available[/yellow]")
        return 0

    table = Table(
        title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for lang_name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {lang_name}", info["file_extension"], info["class"], aliases)

    console.print()
    console.print(table)
    console.print()

    console.print(
        Panel(
            "[bold]Usage:[/bold] chaincode-builder generate [dim]project.json[/dim] "
            "--language [cyan]LANGUAGE[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def show_language_info(language: str) -> int:
    """Show detailed information about a specific language."""
    if not _validate_language(language, silent=True):
        console.print(f"[red]✗ Language '{language}' is not supported[/red]")
        console.print("[dim]Use --list-languages to see available options[/dim]")
        return 1

    info = get_language_info(language)

    info_text = f"""[bold]Language:[/bold] {info['name']}
[bold]File Extension:[/bold] {info['file_extension']}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    console.print()
    console.print(
        Panel(info_text, title=f"🔧 {info['name'].title()} Generator", border_style="green")
    )

    config = load_config()
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Default Asset Type", config.default_asset_type)
    config_table.add_row("Init Message", config.default_init_message)
    config_table.add_row("Sample Records", str(config.sample_record_count))
    config_table.add_row("Max Blank Lines", str(config.max_blank_lines))

    console.print()
    console.print(config_table)
    return 0


def _validate_language(language: str, silent: bool = False) -> bool:
    """Validate that a language (or alias) is supported."""
    if not is_language_supported(language):
        if not silent:
            supported = list_supported_languages()
            console.print(f"[red]✗ Unsupported language '{language}'[/red]")
            console.print(f"[dim]Supported languages: {', '.join(supported)}[/dim]")
        return False
    return True


def _load_input_project(args: argparse.Namespace):
    """Load the project named by the file argument or ``--url``."""
    try:
        if args.project:
            return load_project(file_path=args.project)
        return load_project(url=args.url)
    except ProjectError as e:
        raise CLIError(f"Failed to load project: {e}") from e


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    overrides = {}

    if args.asset_type:
        overrides["default_asset_type"] = args.asset_type

    if args.output:
        overrides["output_file"] = args.output

    try:
        return load_config(custom_config=overrides, config_file=args.config)
    except ConfigError as e:
        raise CLIError(f"Configuration error: {e}") from e


def _generate_and_output(
    project, language: str, config: GeneratorConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    # Piped stdout receives the generated source and nothing else
    piped = not config.output_file and not console.is_terminal
    status = err_console if piped else console

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=status,
        transient=True,
    ) as progress:
        gen_task = progress.add_task(
            f"[green]Generating {language} chaincode...", total=None
        )
        result = generate_from_project(project, language, config)
        progress.remove_task(gen_task)

    if not result.success:
        status.print(f"[red]✗ Code generation failed:[/red] {result.error_message}")
        if result.exception:
            status.print(f"[dim]Details: {result.exception!r}[/dim]")
        return 1

    output_file = config.output_file
    if output_file:
        output_path = Path(output_file)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        logger.info("Wrote %d bytes of %s code to %s", len(result.code), language, output_path)
        console.print(
            f"[green]✓[/green] Generated {language} chaincode saved to [cyan]{output_path}[/cyan]"
        )
    elif piped:
        sys.stdout.write(result.code)
        sys.stdout.flush()
    else:
        top_border = "═" * 30
        console.print(
            f"[green]{top_border} 📄 {project.name} v{project.version} {top_border}[/green]\n"
        )
        console.print(Syntax(result.code, result.metadata.get("language", language), theme="monokai"))
        console.print(f"\n[green]{top_border}{top_border}[/green]")

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )

        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        status.print()
        status.print(metadata_table)

    if result.warnings:
        status.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            status.print(f"  [yellow]•[/yellow] {warning}")
        status.print()

    return 0
