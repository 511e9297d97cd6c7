"""grind -- glTF validator build tasks.

Thin command-line wrapper over the build task graph.  Each task command
runs its dependencies first.

Usage:
    grind [--root PATH] [--log-level LEVEL] TASK
"""

from __future__ import annotations

import logging
import sys

import click

from validator_build import __version__
from validator_build.config import BuildConfig
from validator_build.engine import BuildContext
from validator_build.lib.toolchain import ToolError
from validator_build.pipeline import TASKS

LOG_FORMAT = "%(asctime)s %(name)-24s %(levelname)-5s %(message)s"


class BuildFailed(click.ClickException):
    """A build task failed; exits with the failing tool's code."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def setup_logging(config: BuildConfig) -> None:
    """Configure Python logging."""
    level = getattr(logging, config.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        handlers=[logging.StreamHandler(sys.stderr)],
        force=True,
    )


def exit_code_for(returncode: int) -> int:
    """Map a tool return code to a process exit status.

    Negative codes (killed by signal N) become 128 + N, as a shell reports them.
    """
    if returncode < 0:
        return 128 + (-returncode)
    return returncode or 1


def run_tasks(config: BuildConfig, *names: str) -> list[str]:
    """Load the build context and run ``names`` with their dependencies.

    Raises:
        BuildFailed: On any tool, I/O or configuration failure.
    """
    try:
        ctx = BuildContext.load(config)
        return TASKS.run(names, ctx)
    except ToolError as e:
        raise BuildFailed(str(e), exit_code_for(e.returncode)) from e
    except KeyError as e:
        raise BuildFailed(e.args[0] if e.args else str(e)) from e
    except (OSError, ValueError) as e:
        raise BuildFailed(str(e)) from e


@click.group()
@click.option(
    "--root",
    type=click.Path(exists=True, file_okay=False),
    default=None,
    envvar="VALIDATOR_BUILD_ROOT",
    help="Project root directory (default: current directory).",
)
@click.option(
    "--log-level",
    default=None,
    envvar="VALIDATOR_BUILD_LOG_LEVEL",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level.",
)
@click.version_option(__version__, prog_name="grind")
@click.pass_context
def cli(ctx: click.Context, root: str | None, log_level: str | None) -> None:
    """grind -- glTF validator build tasks."""
    config = BuildConfig()
    if root:
        config.root = root
    if log_level:
        config.log_level = log_level
    setup_logging(config)
    ctx.obj = config


pass_config = click.make_pass_decorator(BuildConfig)


# ── tasks ─────────────────────────────────────────────────────────────────


@cli.command("tasks")
def list_tasks() -> None:
    """List available tasks."""
    for task in TASKS:
        deps = f"  (depends: {', '.join(task.depends)})" if task.depends else ""
        click.echo(f"{task.name:<12s} {task.description}{deps}")


@cli.command("run")
@click.argument("names", nargs=-1, required=True)
@pass_config
def run(config: BuildConfig, names: tuple[str, ...]) -> None:
    """Run one or more tasks by name."""
    run_tasks(config, *names)


# ── task commands ─────────────────────────────────────────────────────────


@cli.command("issues")
@pass_config
def issues(config: BuildConfig) -> None:
    """Generate ISSUES.md."""
    run_tasks(config, "issues")


@cli.command("snapshot")
@pass_config
def snapshot(config: BuildConfig) -> None:
    """Build Dart snapshot."""
    run_tasks(config, "snapshot")


@cli.command("web")
@pass_config
def web(config: BuildConfig) -> None:
    """Build web drag-n-drop version."""
    run_tasks(config, "web")


@cli.command("npmDebug")
@pass_config
def npm_debug(config: BuildConfig) -> None:
    """Build non-minified npm package."""
    run_tasks(config, "npmDebug")


@cli.command("npmRelease")
@pass_config
def npm_release(config: BuildConfig) -> None:
    """Build minified npm package."""
    run_tasks(config, "npmRelease")


@cli.command("npm")
@pass_config
def npm(config: BuildConfig) -> None:
    """Build an npm package (runs issues and npmRelease first)."""
    run_tasks(config, "npm")


@cli.command("npmPublish")
@pass_config
def npm_publish(config: BuildConfig) -> None:
    """Publish package to npm (runs npm first)."""
    run_tasks(config, "npmPublish")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
