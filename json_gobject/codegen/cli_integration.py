"""
CLI integration for code generation functionality.

Provides the generator subcommands and the variant information commands.
"""

import argparse
from pathlib import Path
from typing import List

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.markup import escape
from rich.table import Table

from . import get_generator, generate_code
from .core.config import ConfigError, GeneratorConfig, get_config_manager, load_config
from .core.generator import CodeGenerator, GenerationResult
from .core.naming import NamingCase
from .core.schema import SchemaDecodeError
from .registry import RegistryError, get_language_info, list_all_language_info
from ..logging_config import get_logger
from ..utils import JSONLoaderError, load_schema

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Status output goes to stderr, generated code to stdout
console = Console(stderr=True)
output_console = Console()


def _add_common_args(parser: argparse.ArgumentParser):
    """Add options shared by every generator subcommand."""
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")

    parser.add_argument(
        "--sort-properties",
        action="store_true",
        help="Emit properties sorted by key instead of in schema order",
    )

    parser.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add comments to generated code",
    )

    parser.add_argument(
        "--class-case",
        choices=[case.value for case in NamingCase],
        help="Case style for generated class names",
    )

    parser.add_argument(
        "--show-warnings",
        action="store_true",
        help="Print translation warnings (duplicate classes, C keywords, ...)",
    )


def create_codegen_subparsers(subparsers):
    """
    Register the generator and information subcommands.

    Args:
        subparsers: Subparser group from main parser
    """
    gobject_parser = subparsers.add_parser(
        "gobject",
        aliases=["gobj", "property-binding"],
        help="Generate GObject classes (.h and .c files)",
        description="Generate final GObject classes with typed properties",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  json-gobject gobject my widget widget.schema.json
  json-gobject gobject --output-dir src/ my widget widget.schema.json
        """.strip(),
    )
    gobject_parser.add_argument("namespace", help="Namespace of the generated types")
    gobject_parser.add_argument("class_name", help="Name of the top-level class")
    gobject_parser.add_argument("schema", help="JSON Schema file path or URL")
    gobject_parser.add_argument(
        "--output-dir",
        "-d",
        metavar="DIR",
        help="Directory for the generated files (default: current directory)",
    )
    _add_common_args(gobject_parser)
    gobject_parser.set_defaults(func=_handle_generate, language="gobject")

    for language, aliases, summary in (
        ("json-glib", ["json", "json-object"], "functions building a JsonObject"),
        ("json-builder", ["builder"], "functions driving a JsonBuilder"),
    ):
        serializer_parser = subparsers.add_parser(
            language,
            aliases=aliases,
            help=f"Generate {summary}",
            description=f"Generate {summary}, one per schema class",
        )
        serializer_parser.add_argument("schema", help="JSON Schema file path or URL")
        serializer_parser.add_argument(
            "--output", "-o", metavar="FILE", help="Output file (default: stdout)"
        )
        serializer_parser.add_argument(
            "--highlight",
            action="store_true",
            help="Show the code with syntax highlighting",
        )
        _add_common_args(serializer_parser)
        serializer_parser.set_defaults(func=_handle_generate, language=language)

    list_parser = subparsers.add_parser("list", help="List generator variants")
    list_parser.set_defaults(func=_handle_list)

    info_parser = subparsers.add_parser(
        "info", help="Show detailed information about a variant"
    )
    info_parser.add_argument("variant", help="Variant name or alias")
    info_parser.set_defaults(func=_handle_info)


def _handle_generate(args: argparse.Namespace) -> int:
    """Handle the generator subcommands."""
    language = args.language

    try:
        config = _build_config(args, language)
        generator = get_generator(language, config)
    except (ConfigError, RegistryError) as e:
        console.print(f"[red]✗ Configuration error:[/red] {escape(str(e))}")
        return 1

    for warning in get_config_manager().validate_config(config, language):
        console.print(f"[yellow]⚠️  {escape(warning)}[/yellow]")

    try:
        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            load_task = progress.add_task(
                f"[cyan]Loading {args.schema}...", total=None
            )
            document = load_schema(args.schema)
            progress.remove_task(load_task)

            gen_task = progress.add_task(
                f"[green]Generating {language} code...", total=None
            )
            result = generate_code(
                generator,
                document,
                namespace=config.namespace,
                class_name=getattr(args, "class_name", None),
            )
            progress.remove_task(gen_task)
    except (JSONLoaderError, SchemaDecodeError) as e:
        console.print(f"[red]✗ Failed to load schema:[/red] {escape(str(e))}")
        return 1

    if not result.success:
        console.print(f"[red]✗ {escape(result.error_message)}[/red]")
        return 1

    if args.show_warnings:
        _print_warnings(result.warnings)
    else:
        for warning in result.warnings:
            logger.info("%s", warning)

    try:
        if generator.writes_files:
            _write_files(generator, result, args)
        else:
            _output_code(result, args)
    except CLIError as e:
        console.print(f"[red]✗[/red] {escape(str(e))}")
        return 1

    return 0


def _build_config(args: argparse.Namespace, language: str) -> GeneratorConfig:
    """Build configuration from the config file and CLI arguments."""
    config_dict = {}

    if getattr(args, "namespace", None):
        config_dict["namespace"] = args.namespace

    if getattr(args, "output_dir", None):
        config_dict["output_dir"] = args.output_dir

    if args.sort_properties:
        config_dict["sort_properties"] = True

    if args.no_comments:
        config_dict["add_comments"] = False

    if args.class_case:
        config_dict["class_case"] = args.class_case

    return load_config(language, custom_config=config_dict, config_file=args.config)


def _write_files(
    generator: CodeGenerator, result: GenerationResult, args: argparse.Namespace
):
    """Write each artifact next to its siblings and print the class summary."""
    output_dir = Path(generator.config.output_dir or ".")
    basename = generator.output_basename(generator.config.namespace, args.class_name)

    # All artifacts are staged before any of them is moved into place
    staged = []
    moved = []
    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        for extension, code in result.files.items():
            path = output_dir / f"{basename}{extension}"
            temp_path = path.with_name(f"{path.name}.tmp")
            staged.append((temp_path, path))
            temp_path.write_text(code, encoding="utf-8")

        for temp_path, path in staged:
            temp_path.replace(path)
            moved.append(path)
    except OSError as e:
        for temp_path, path in staged:
            temp_path.unlink(missing_ok=True)
        for path in moved:
            path.unlink(missing_ok=True)
        raise CLIError(f"Failed to write output files: {e}") from e

    for _, path in staged:
        console.print(f"[green]✓[/green] Wrote [cyan]{path}[/cyan]")

    for name, count in _class_summary(result):
        print(f"OBJ:{name} {count}")


def _class_summary(result: GenerationResult) -> List[tuple]:
    return list(
        zip(result.metadata.get("classes", []), result.metadata.get("property_counts", []))
    )


def _output_code(result: GenerationResult, args: argparse.Namespace):
    """Send serializer functions to a file or stdout."""
    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(result.code, encoding="utf-8")
        except OSError as e:
            raise CLIError(f"Failed to write to {output_path}: {e}") from e
        console.print(
            f"[green]✓[/green] Generated code saved to [cyan]{output_path}[/cyan]"
        )
    elif args.highlight:
        output_console.print(Syntax(result.code, "c", theme="monokai"))
    else:
        print(result.code, end="")


def _print_warnings(warnings: List[str]):
    if not warnings:
        return

    console.print("\n[yellow]⚠️  Warnings:[/yellow]")
    for warning in warnings:
        console.print(f"  [yellow]•[/yellow] {escape(warning)}")
    console.print()


def _handle_list(args: argparse.Namespace) -> int:
    """List generator variants with details."""
    language_info = list_all_language_info()

    table = Table(
        title="📋 Generator Variants", box=box.ROUNDED, title_style="bold cyan"
    )

    table.add_column("Variant", style="bold green", no_wrap=True)
    table.add_column("Output", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(language_info.items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        target = "files" if info["writes_files"] else "stdout"
        table.add_row(
            f"🔧 {name}",
            f"{', '.join(info['file_extensions'])} ({target})",
            info["class"],
            aliases,
        )

    output_console.print(table)
    output_console.print(
        Panel(
            "[bold]GObject:[/bold] json-gobject gobject [cyan]NAMESPACE CLASS[/cyan] [dim]schema.json[/dim]\n"
            "[bold]Serializer:[/bold] json-gobject json-glib [dim]schema.json[/dim]\n"
            "[bold]Info:[/bold] json-gobject info [cyan]VARIANT[/cyan]",
            title="💡 Quick Start",
            border_style="blue",
        )
    )
    return 0


def _handle_info(args: argparse.Namespace) -> int:
    """Show detailed information about a specific variant."""
    try:
        info = get_language_info(args.variant)
    except RegistryError as e:
        console.print(f"[red]✗ {escape(str(e))}[/red]")
        console.print("[dim]Use 'json-gobject list' to see available variants[/dim]")
        return 1

    info_text = f"""[bold]Variant:[/bold] {info['name']}
[bold]Description:[/bold] {info['description']}
[bold]File Extensions:[/bold] {', '.join(info['file_extensions'])}
[bold]Generator Class:[/bold] {info['class']}
[bold]Module:[/bold] {info['module']}"""

    if info["aliases"]:
        info_text += f"\n[bold]Aliases:[/bold] {', '.join(info['aliases'])}"

    output_console.print(
        Panel(info_text, title=f"🔧 {info['name']} Generator", border_style="green")
    )

    config: GeneratorConfig = info["config"]
    config_table = Table(
        title="⚙️  Default Configuration",
        box=box.SIMPLE,
        show_header=True,
        header_style="bold cyan",
    )
    config_table.add_column("Setting", style="bold")
    config_table.add_column("Value", style="green")

    config_table.add_row("Class Case", config.class_case)
    config_table.add_row("Sort Properties", str(config.sort_properties))
    config_table.add_row("Add Comments", str(config.add_comments))
    config_table.add_row("Function Prefix", repr(config.function_prefix))
    config_table.add_row("Date-time Formatter", config.datetime_formatter)

    output_console.print(config_table)
    return 0
