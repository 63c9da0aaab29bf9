"""CLI commands for the mediator."""

from __future__ import annotations

from typing import List, Optional

import typer
import yaml
from rich.console import Console

from mediator.channels import create_notifier, create_sender
from mediator.registry import ChannelRegistry
from mediator.services import ConfigService, configure_logging
from mediator.subscriptions import merge_subscriptions

registry = ChannelRegistry()
console = Console()

app = typer.Typer(help="Mediator - in-process publish/subscribe playground")


@app.callback()
def configure(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(
        None,
        "--config",
        envvar="MEDIATOR_CONFIG",
        help="YAML configuration file (defaults are used when omitted)",
    ),
) -> None:
    """Load configuration and set up logging before running a command."""
    cfg = ConfigService(config).load_config()
    configure_logging(cfg.logging)
    registry.log_failures = cfg.notifier.log_failures
    ctx.obj = cfg


@app.command()
def parse(value: str) -> None:
    """Publish VALUE on the unicast 'parse' channel answered by int()."""
    sender = create_sender("parse", registry)
    unsubscribe = sender.subscribe(int)
    try:
        result = sender.publish(value)
    except ValueError as e:
        console.print(f"[red][ERROR] parse: {e}[/red]")
        raise typer.Exit(1)
    finally:
        unsubscribe()

    console.print(f"[green][RESULT] {value!r} -> {result!r}[/green]")
    console.print(
        f"[yellow][INFO] After unsubscribe -> {sender.publish(value)!r}[/yellow]"
    )


@app.command()
def broadcast(
    value: str,
    with_failure: bool = typer.Option(
        False, help="Also subscribe a handler that always raises"
    ),
) -> None:
    """Publish VALUE on the multicast 'broadcast' channel to two collectors."""
    notifier = create_notifier("broadcast", registry)
    raw: List[str] = []
    lengths: List[int] = []

    subscriptions = [
        notifier.subscribe(raw.append),
        notifier.subscribe(lambda payload: lengths.append(len(payload))),
    ]
    if with_failure:

        def failing(payload: str) -> None:
            raise RuntimeError(f"refusing {payload!r}")

        subscriptions.append(notifier.subscribe(failing))

    unsubscribe = merge_subscriptions(*subscriptions)
    console.print(
        f"[blue]Notifying {notifier.subscriber_count} subscriber(s)...[/blue]"
    )
    # handlers are synchronous, nothing left to await
    notifier.publish(value)
    unsubscribe()
    notifier.publish(value)

    console.print(f"[green][RESULT] raw: {raw}[/green]")
    console.print(f"[green][RESULT] lengths: {lengths}[/green]")


@app.command("config")
def show_config(
    ctx: typer.Context,
    write: Optional[str] = typer.Option(
        None, help="Also save the effective configuration to this YAML file"
    ),
) -> None:
    """Print the effective configuration, optionally saving it."""
    cfg = ctx.obj
    console.print(yaml.safe_dump(cfg.model_dump(), sort_keys=False), end="")
    if write:
        target = ConfigService(write)
        target.save_config(cfg)
        console.print(f"[green][INFO] Saved to {target.get_config_path()}[/green]")


if __name__ == "__main__":  # pragma: no cover
    app()
