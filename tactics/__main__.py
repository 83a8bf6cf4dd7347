"""Entry point: ``python -m tactics``.

Supports two modes:
  - ``python -m tactics serve``  → FastAPI debug/visualization server
  - ``python -m tactics cli``    → Headless demo encounter
"""

from __future__ import annotations

import argparse
import logging

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Companion tactics simulation core")
    sub = parser.add_subparsers(dest="command")

    # --- Server mode (default) ---
    srv = sub.add_parser("serve", help="Start the FastAPI debug server (default)")
    srv.add_argument("--host", type=str, default="127.0.0.1")
    srv.add_argument("--port", type=int, default=8000)
    srv.add_argument("--seed", type=int, default=42)
    srv.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    # --- Headless CLI mode ---
    cli = sub.add_parser("cli", help="Run the demo encounter headless")
    cli.add_argument("--seed", type=int, default=42)
    cli.add_argument("--ticks", type=int, default=40)
    cli.add_argument("--dt", type=float, default=0.25)
    cli.add_argument("--log-level", type=str, default="INFO", choices=["DEBUG", "INFO", "WARNING"])

    return parser


def _run_server(args: argparse.Namespace) -> None:
    import uvicorn

    from tactics.api.app import create_app
    from tactics.config import SimulationConfig

    config = SimulationConfig(world_seed=args.seed, log_level=args.log_level)
    app = create_app(config)
    uvicorn.run(app, host=args.host, port=args.port, log_level=args.log_level.lower())


def _run_cli(args: argparse.Namespace) -> None:
    from tactics.config import SimulationConfig
    from tactics.engine.session import build_demo_session
    from tactics.utils.logging import setup_logging

    config = SimulationConfig(world_seed=args.seed, dt=args.dt, log_level=args.log_level)
    setup_logging(config.log_level)

    session = build_demo_session(config)
    logger.info("Demo encounter: %d ticks, dt=%.2f, seed=%d", args.ticks, config.dt, config.world_seed)

    for _ in range(args.ticks):
        report = session.step()
        status = "ok" if report.ok else f"stopped ({report.error.kind} at step {report.error.step_index})"
        logger.info(
            "t=%6.2f plan=%-10s %-32s phase=%s ops=%d",
            report.t, report.plan.plan_id if report.plan else "-", status,
            report.phase_name, len(report.applied_ops),
        )
        for line in report.telegraphs:
            logger.info("    >> %s", line)

    boss = session.enemies[0]
    health = session.world.health(boss)
    b = session.budget
    logger.info(
        "Done. Boss hp=%s, budget traps=%d terrain_edits=%d spawns=%d, events=%d",
        health.hp if health else "?", b.traps, b.terrain_edits, b.spawns, len(session.event_log),
    )


def main() -> None:
    parser = _build_parser()
    args = parser.parse_args()

    if args.command == "cli":
        _run_cli(args)
    else:
        if args.command is None:
            args = parser.parse_args(["serve"])
        _run_server(args)


if __name__ == "__main__":
    main()
