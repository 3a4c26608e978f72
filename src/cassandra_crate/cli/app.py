# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

# src/cassandra_crate/cli/app.py
from pathlib import Path
from typing import Optional

import typer
import yaml

from cassandra_crate.config.loader import load_config
from cassandra_crate.deploy.models import NodePlan
from cassandra_crate.deploy.planner import plan_group, plan_node
from cassandra_crate.errors import CrateError
from cassandra_crate.inventory import load_inventory
from cassandra_crate.logging.log import init_logging
from cassandra_crate.observers.console import ConsoleObserver
from cassandra_crate.observers.dispatcher import EventBus
from cassandra_crate.observers.events import new_ctx
from cassandra_crate.observers.logger import LoggerObserver
from cassandra_crate.repair import build_repair_cron_expression
from cassandra_crate.topology.tokens import compute_tokens


app = typer.Typer(help="Cassandra crate: plan Cassandra cluster nodes")


def _write_plan(node_plan: NodePlan, output_dir: Path) -> Path:
    """Lay the rendered files out under <output_dir>/<node id>/ as on the node."""
    root = output_dir / node_plan.member.id
    for f in node_plan.files:
        target = root / f.path.lstrip("/")
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(f.content)
    (root / "settings.yaml").write_text(
        yaml.safe_dump(node_plan.settings, default_flow_style=False, sort_keys=False)
    )
    return root


@app.command()
def plan(
    config: Path = typer.Argument(..., help="Crate settings YAML"),
    inventory: Path = typer.Argument(..., help="Node inventory YAML"),
    group: str = typer.Option("cassandra", "--group", "-g", help="Inventory group to plan"),
    node: Optional[str] = typer.Option(
        None, "--node", "-n", help="Plan a single member (default: the whole group)"
    ),
    output_dir: Optional[Path] = typer.Option(
        None, "--output-dir", "-o", help="Write rendered files under <dir>/<node>/"
    ),
    debug: bool = typer.Option(False, "--debug", "-d", help="Debug output on the console"),
    log_dir: Optional[Path] = typer.Option(None, "--log-dir", help="Where run logs are written"),
):
    """
    Compute settings and render config files for Cassandra nodes.
    """
    logger, run_id, log_path = init_logging(
        base_dir=log_dir,
        verbose=debug,
        group=group,
        context={"config": config, "inventory": inventory, "node": node or "*"},
    )
    bus = EventBus([ConsoleObserver(), LoggerObserver(logger)] if debug else [LoggerObserver(logger)])
    run_ctx = new_ctx(group, run_id=run_id)

    try:
        cfg = load_config(config)
        inv = load_inventory(inventory)
        if node:
            plans = [plan_node(cfg, inv, group, node, bus=bus, run_ctx=run_ctx)]
        else:
            plans = plan_group(cfg, inv, group, bus=bus, run_ctx=run_ctx)
    except CrateError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)

    for p in plans:
        server = p.settings["server"]
        typer.echo(
            f"{p.member.id}: token={server['initial_token']} "
            f"snitch={server['endpoint_snitch']} heap={p.settings['service']['max_heap']}"
        )
        if output_dir:
            root = _write_plan(p, output_dir)
            typer.echo(f"  files written to {root}")
    typer.echo(f"log: {log_path}")


@app.command()
def tokens(count: int = typer.Argument(..., help="Number of nodes in the ring")):
    """Print evenly spaced initial tokens for a ring of COUNT nodes."""
    try:
        for t in compute_tokens(count):
            typer.echo(str(t))
    except CrateError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)


@app.command()
def cron(
    index: int = typer.Argument(..., help="Position of the node in its group"),
    count: int = typer.Argument(..., help="Number of nodes in the group"),
    day: int = typer.Option(0, "--day", help="Day of week (0 = Sunday)"),
    keyspace: str = typer.Option("", "--keyspace", help="Keyspace to repair (default: all)"),
):
    """Print the staggered nodetool repair cron line for one node."""
    try:
        typer.echo(build_repair_cron_expression(index, count, day, keyspace))
    except CrateError as e:
        typer.echo(f"error: {e}", err=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
