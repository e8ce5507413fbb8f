"""Chat CLI application using Typer.

Command-line utilities for the chat backend: seeding a backend with
synthetic data and inspecting the seeding configuration.
"""

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from chat.application.store import NAME_POOL, DataStore, SeedConfig
from chat.domain.shared.exceptions import DomainException
from chat.infrastructure.persistence import (
    InMemoryPersistenceSink,
    create_persistence_sink,
)
from chat.presentation.logging_config import configure_logging
from chat_auth import PasswordHashingService
from chat_config import get_settings

app = typer.Typer(
    name="chat",
    help="Chat data store utilities",
    no_args_is_help=True,
)
console = Console()


@app.command("seed")
def seed(
    users: Annotated[
        Optional[int],
        typer.Option("--users", "-u", min=0, help="Number of users to create"),
    ] = None,
    conversations: Annotated[
        Optional[int],
        typer.Option("--conversations", "-c", min=0, help="Number of conversations"),
    ] = None,
    messages: Annotated[
        Optional[int],
        typer.Option("--messages", "-m", min=0, help="Number of messages"),
    ] = None,
    memory: Annotated[
        bool,
        typer.Option("--memory", help="Write to an in-memory sink (dry run)"),
    ] = False,
) -> None:
    """Generate synthetic users, conversations and messages.

    Counts default to the SEED_* settings.
    """
    configure_logging()
    settings = get_settings()
    defaults = SeedConfig.from_settings(settings)

    config = SeedConfig(
        enabled=True,
        user_count=defaults.user_count if users is None else users,
        conversation_count=(
            defaults.conversation_count if conversations is None else conversations
        ),
        message_count=defaults.message_count if messages is None else messages,
        user_password=defaults.user_password,
        random_seed=defaults.random_seed,
    )
    sink = InMemoryPersistenceSink() if memory else create_persistence_sink(settings)
    store = DataStore(
        sink=sink,
        password_service=PasswordHashingService(rounds=settings.password_hash_rounds),
        config=config,
    )

    try:
        stats = store.initialize()
    except DomainException as e:
        console.print(f"[bold red]Seeding failed:[/bold red] {e.message}")
        raise typer.Exit(code=1) from e

    table = Table(title="Seeded entities")
    table.add_column("Entity", style="cyan")
    table.add_column("Created", justify="right")
    table.add_row("Users", str(stats.users_created))
    table.add_row("Conversations", str(stats.conversations_created))
    table.add_row("Messages", str(stats.messages_created))
    console.print(table)

    names = ", ".join(sorted(store.get_all_users_by_name()))
    console.print(f"Users: {names or '-'}")
    if stats.total == 0 and not sink.is_empty():
        console.print("[yellow]Backend already holds data; nothing was seeded.[/yellow]")
    if memory:
        console.print("[yellow]In-memory sink used; nothing was persisted.[/yellow]")


@app.command("config")
def show_config() -> None:
    """Show the effective seeding configuration."""
    settings = get_settings()
    config = SeedConfig.from_settings(settings)

    table = Table(title="Seeding configuration")
    table.add_column("Setting", style="cyan")
    table.add_column("Value")
    table.add_row("seed_enabled", str(config.enabled))
    table.add_row("seed_user_count", f"{config.user_count} (max {len(NAME_POOL)})")
    table.add_row("seed_conversation_count", str(config.conversation_count))
    table.add_row("seed_message_count", str(config.message_count))
    table.add_row("seed_random_seed", str(config.random_seed))
    table.add_row("persistence_backend", settings.persistence_backend)
    table.add_row("database_url", settings.database_url.split("@")[-1])
    console.print(table)


if __name__ == "__main__":
    app()
