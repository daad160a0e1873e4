import click

from .config import library_search_paths, read_config, resolve_rules, resolve_verbose
from .errors import PathError
from .path import Path
from .runtime import (
    reset_default_rules,
    reset_verbose_logging,
    set_default_rules,
    set_verbose_logging,
)


def _kind(path: Path) -> str:
    if path.is_directory():
        return "directory"
    if path.is_file():
        return "file"
    return "empty"


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Config file (default: $XDG_CONFIG_HOME/sysloc/config.yaml)",
)
@click.option(
    "--rules",
    type=click.Choice(["win32", "posix"]),
    default=None,
    help="Path legality rules to apply",
)
@click.option("-v", "--verbose", is_flag=True, help="Log probe and search steps")
@click.pass_context
def cli(ctx, config_path, rules, verbose):
    """Validate, probe and resolve filesystem paths."""
    try:
        config = read_config(config_path)
    except ValueError as exc:
        raise click.ClickException(str(exc)) from exc
    try:
        rule_set = resolve_rules(config, rules)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc

    rules_token = set_default_rules(rule_set)
    verbose_token = set_verbose_logging(resolve_verbose(config, verbose))
    ctx.call_on_close(lambda: reset_default_rules(rules_token))
    ctx.call_on_close(lambda: reset_verbose_logging(verbose_token))
    ctx.obj = {"config": config}


@cli.command("check")
@click.argument("paths", nargs=-1, required=True)
@click.pass_context
def check_cmd(ctx, paths):
    """Report whether each PATH is legal, and as what."""
    failed = False
    for raw in paths:
        try:
            path = Path(raw)
        except PathError as exc:
            click.echo(f"invalid\t{raw}\t{exc}")
            failed = True
            continue
        click.echo(f"{_kind(path)}\t{path}")
    if failed:
        ctx.exit(1)


@cli.command("probe")
@click.argument("raw_path")
def probe_cmd(raw_path):
    """Show what the filesystem says about RAW_PATH."""
    try:
        path = Path(raw_path)
    except PathError as exc:
        raise click.ClickException(str(exc)) from exc

    records = [
        ("exists", path.exists()),
        ("readable", path.readable()),
        ("writable", path.writable()),
        ("executable", path.executable()),
        ("archive", path.is_file() and path.is_archive()),
    ]
    for name, value in records:
        click.echo(f"{name}: {'yes' if value else 'no'}")


@cli.command("find-library")
@click.argument("name")
@click.option(
    "-L",
    "--library-dir",
    "library_dirs",
    multiple=True,
    help="Directory to search before configured and system ones",
)
@click.pass_context
def find_library_cmd(ctx, name, library_dirs):
    """Locate library NAME (lib<NAME>.<suffix> or <NAME>.<suffix>)."""
    from .library import get_library_path

    candidates = [*library_dirs, *library_search_paths(ctx.obj["config"])]
    result = get_library_path(name, candidates)
    if result.is_empty():
        raise click.ClickException(f"library {name!r} not found")
    click.echo(str(result))


@cli.command("tempdir")
def tempdir_cmd():
    """Print (creating it if needed) this process's scratch directory."""
    from .locations import get_temporary_directory

    try:
        click.echo(str(get_temporary_directory()))
    except PathError as exc:
        raise click.ClickException(str(exc)) from exc


def main():
    cli()


if __name__ == "__main__":
    main()
