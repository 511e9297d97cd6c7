"""The validator's build tasks and their dependencies."""

from __future__ import annotations

from validator_build.engine import BuildContext, TaskGraph
from validator_build.stages import (
    BundleMode,
    assemble_npm_package,
    build_npm_bundle,
    build_snapshot,
    build_web,
    generate_issues,
    publish_npm_package,
)

TASKS = TaskGraph()


@TASKS.task("issues", "Generate ISSUES.md")
def issues(ctx: BuildContext) -> None:
    generate_issues(ctx)


@TASKS.task("snapshot", "Build Dart snapshot.")
def snapshot(ctx: BuildContext) -> None:
    build_snapshot(ctx)


@TASKS.task("web", "Build web drag-n-drop version.")
def web(ctx: BuildContext) -> None:
    build_web(ctx)


@TASKS.task("npmDebug", "Build non-minified npm package with source map.")
def npm_debug(ctx: BuildContext) -> None:
    build_npm_bundle(ctx, BundleMode.DEBUG)


@TASKS.task("npmRelease", "Build minified npm package.")
def npm_release(ctx: BuildContext) -> None:
    build_npm_bundle(ctx, BundleMode.RELEASE)


@TASKS.task("npm", "Build an npm package.", depends=("issues", "npmRelease"))
def npm(ctx: BuildContext) -> None:
    assemble_npm_package(ctx)


@TASKS.task("npmPublish", "Publish package to npm.", depends=("npm",))
def npm_publish(ctx: BuildContext) -> None:
    publish_npm_package(ctx)
