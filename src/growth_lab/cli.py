"""CLI for Growth Lab topic recommendations.

Commands:
- recommend: Rank topics for a user and list the linked content
- topics: Rank topics for a user (scores only)
- explain: Show the per-signal score breakdown for one topic
- assistant-context: Print the chat assistant's recommendation context
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Annotated, Protocol

import typer
from rich import print as rprint
from rich.markup import escape
from rich.table import Table

from . import __version__
from .application.assistant_context import build_assistant_context, render_assistant_context
from .application.recommendations import recommend_for_user
from .application.topic_match import explain_topic_for_user, match_topics_for_user
from .config import LogLevelEnvVarError, PositiveIntegerEnvVarError, RecommenderConfig
from .config_file import load_recommender_config_file
from .domain.scoring import TopicRecommender
from .exceptions import DependencyMissingError, GrowthLabError
from .observability import set_log_level
from .protocols import ContentStore, FileSystem


class DependenciesBuilder(Protocol):
    """Protocol for constructing CLI dependencies."""

    def __call__(self, *, config: RecommenderConfig, build_store: bool) -> CliDependencies:
        """Build dependencies for CLI commands."""
        ...


@dataclass(frozen=True)
class CliDependencies:
    """Concrete dependencies required by the CLI."""

    fs: FileSystem
    store: ContentStore | None


@dataclass(frozen=True)
class CliContext:
    """Runtime CLI context for a single command invocation."""

    config: RecommenderConfig
    deps_builder: DependenciesBuilder

    def build_dependencies(
        self,
        *,
        build_store: bool,
        config: RecommenderConfig | None = None,
    ) -> CliDependencies:
        """Return dependencies using the configured builder."""
        return self.deps_builder(config=config or self.config, build_store=build_store)


class CliContextNotInitialisedError(typer.BadParameter):
    """Raised when CLI context is missing."""

    def __init__(self) -> None:
        super().__init__("CLI context is not initialised. Use the growth-lab entry point.")


UserOption = Annotated[str, typer.Option("--user", "-u", help="User id whose profile is ranked")]
LimitOption = Annotated[
    int | None,
    typer.Option("--limit", "-n", min=1, help="Number of topics to keep (default: 5)"),
]
TopicListLimitOption = Annotated[
    int | None,
    typer.Option(
        "--limit", "-n", min=1, help="Number of topics to list (default: all active topics)"
    ),
]
CatalogOption = Annotated[
    Path | None,
    typer.Option("--catalog", "-c", help="Content catalogue JSON (overrides config)"),
]
ConfigFileOption = Annotated[
    Path | None,
    typer.Option("--config", help="TOML config file (overrides environment)"),
]


def _get_context(ctx: typer.Context) -> CliContext:
    if not isinstance(ctx.obj, CliContext):
        raise CliContextNotInitialisedError()
    return ctx.obj


def _resolve(
    state: CliContext,
    *,
    config_path: Path | None,
    catalog: Path | None,
    limit: int | None,
) -> tuple[RecommenderConfig, ContentStore, FileSystem]:
    """Apply config file and CLI overrides, then build the store."""
    config = state.config
    if config_path is not None:
        fs = state.build_dependencies(build_store=False).fs
        config = config.with_file_overrides(load_recommender_config_file(path=config_path, fs=fs))
    config = config.with_overrides(
        catalog_path=str(catalog) if catalog is not None else None,
        limit=limit,
    )
    set_log_level(config.log_level)

    deps = state.build_dependencies(build_store=True, config=config)
    if deps.store is None:
        raise DependencyMissingError("ContentStore", reason="The CLI builder returned none.")
    return config, deps.store, deps.fs


def _version_callback(value: bool) -> None:
    if value:
        rprint(f"growth-lab {__version__}")
        raise typer.Exit()


def _fail(exc: Exception) -> typer.Exit:
    rprint(f"[red]✗ {escape(str(exc))}[/red]")
    return typer.Exit(code=1)


def _joined(values: list[str]) -> str:
    return escape(", ".join(values)) or "-"


def create_app(deps_builder: DependenciesBuilder) -> typer.Typer:
    """Create a Typer app wired with the provided dependencies builder."""
    app = typer.Typer(
        add_completion=False,
        help="Growth Lab topic recommendations: profile → ranked topics → linked content",
    )

    @app.callback()
    def main(
        ctx: typer.Context,
        version: Annotated[
            bool,
            typer.Option(
                "--version",
                callback=_version_callback,
                is_eager=True,
                help="Show the installed version and exit",
            ),
        ] = False,
    ) -> None:
        """Initialise CLI context."""
        _ = version
        try:
            config = RecommenderConfig.from_env()
        except (LogLevelEnvVarError, PositiveIntegerEnvVarError) as exc:
            raise _fail(exc) from exc
        ctx.obj = CliContext(config=config, deps_builder=deps_builder)

    @app.command()
    def recommend(
        ctx: typer.Context,
        user: UserOption,
        limit: LimitOption = None,
        catalog: CatalogOption = None,
        config_path: ConfigFileOption = None,
        output: Annotated[
            Path | None,
            typer.Option("--output", "-o", help="Write recommendations as JSON to this path"),
        ] = None,
    ) -> None:
        """Rank topics for a user and list the models, resources and vendors linked to them."""
        state = _get_context(ctx)
        try:
            config, store, fs = _resolve(
                state, config_path=config_path, catalog=catalog, limit=limit
            )
            result = recommend_for_user(
                user,
                store=store,
                recommender=TopicRecommender(config.weights),
                limit=config.limit,
                fallback_limit=config.fallback_limit,
            )
        except GrowthLabError as exc:
            raise _fail(exc) from exc

        rprint(f"[green]✓ Recommendations for {escape(user)}:[/green]")
        for position, scored in enumerate(result.topics, start=1):
            rprint(f"  {position}. {escape(scored.name)} (score {scored.score})")
        if result.used_fallback:
            rprint("[yellow]No linked content; showing featured content instead[/yellow]")
        rprint(f"  Models: {_joined([m.name for m in result.models])}")
        rprint(f"  Resources: {_joined([r.title for r in result.resources])}")
        rprint(f"  Vendors: {_joined([v.name for v in result.vendors])}")
        rprint(f"  Research: {_joined([s.title for s in result.research_studies])}")

        if output is not None:
            fs.write_json(result.as_dict(), output)
            rprint(f"[green]✓ Written:[/green] {escape(str(output))}")

    @app.command()
    def topics(
        ctx: typer.Context,
        user: UserOption,
        limit: TopicListLimitOption = None,
        catalog: CatalogOption = None,
        config_path: ConfigFileOption = None,
    ) -> None:
        """Rank active topics for a user, showing which signals matched."""
        state = _get_context(ctx)
        try:
            config, store, _ = _resolve(
                state, config_path=config_path, catalog=catalog, limit=None
            )
            # The configured limit sizes recommendations; the listing shows every topic.
            matches = match_topics_for_user(
                user,
                store=store,
                recommender=TopicRecommender(config.weights),
                limit=limit,
            )
        except GrowthLabError as exc:
            raise _fail(exc) from exc

        table = Table(title=f"Topics for {escape(user)}")
        table.add_column("#", justify="right")
        table.add_column("Topic")
        table.add_column("Score", justify="right")
        table.add_column("Matched signals")
        for position, match in enumerate(matches, start=1):
            table.add_row(
                str(position),
                escape(match.topic.name),
                str(match.score),
                _joined(list(match.matched_signals)),
            )
        rprint(table)

    @app.command()
    def explain(
        ctx: typer.Context,
        user: UserOption,
        topic: Annotated[str, typer.Option("--topic", "-t", help="Topic id to explain")],
        catalog: CatalogOption = None,
        config_path: ConfigFileOption = None,
    ) -> None:
        """Show how each signal contributes to one topic's score for a user."""
        state = _get_context(ctx)
        try:
            config, store, _ = _resolve(
                state, config_path=config_path, catalog=catalog, limit=None
            )
            match = explain_topic_for_user(
                user,
                topic,
                store=store,
                recommender=TopicRecommender(config.weights),
            )
        except GrowthLabError as exc:
            raise _fail(exc) from exc

        status = "" if match.topic.active else " [yellow](inactive)[/yellow]"
        rprint(f"[bold]{escape(match.topic.name)}[/bold]{status}: score {match.score}")
        for signal, points in match.breakdown.as_dict().items():
            rprint(f"  {signal}: +{points}")
        if match.breakdown.matched_interests:
            rprint(f"  Matched interests: {_joined(list(match.breakdown.matched_interests))}")

    @app.command(name="assistant-context")
    def assistant_context(
        ctx: typer.Context,
        user: UserOption,
        limit: LimitOption = None,
        catalog: CatalogOption = None,
        config_path: ConfigFileOption = None,
    ) -> None:
        """Print the recommendation context passed to the chat assistant."""
        state = _get_context(ctx)
        try:
            config, store, _ = _resolve(
                state, config_path=config_path, catalog=catalog, limit=limit
            )
            context = build_assistant_context(
                user,
                store=store,
                recommender=TopicRecommender(config.weights),
                limit=config.limit,
            )
        except GrowthLabError as exc:
            raise _fail(exc) from exc

        if context is None:
            rprint(
                f"[yellow]No profile for {escape(user)}; "
                "the assistant runs without context[/yellow]"
            )
            return
        typer.echo(render_assistant_context(context))

    _ = (main, recommend, topics, explain, assistant_context)

    return app
