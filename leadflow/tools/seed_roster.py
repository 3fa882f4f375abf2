"""Seed the roster from a JSON file.

Usage:
    python -m leadflow.tools.seed_roster data/roster.json
    python -m leadflow.tools.seed_roster data/roster.json --keep-counts
    python -m leadflow.tools.seed_roster --create-tables data/roster.json
    python -m leadflow.tools.seed_roster --verify-only

The file holds either a list of agent records or ``{"agents": [...]}`` using
the wire field names (id, name, isAvailable, qualification,
distributionPercentage, score, leadCount).

Run it while the service is stopped. The tool writes the roster without the
service's roster lock, so leads assigned during a run can lose their
increment (with ``--keep-counts`` the stored counts are read, then written back).
"""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import sys
from dataclasses import replace
from pathlib import Path

from leadflow.adapters.persistence.database import Base, async_session_factory, engine
from leadflow.adapters.persistence.models import (  # noqa: F401 — ensure models are registered
    AgentModel,
    SettingModel,
    WebhookEventModel,
)
from leadflow.adapters.persistence.repositories import SqlRosterStore
from leadflow.application.use_cases.manage_roster import summarize_roster
from leadflow.domain.entities.agent import Agent

logging.basicConfig(level=logging.INFO, format="%(levelname)s | %(message)s")
logger = logging.getLogger(__name__)


def load_roster_file(path: Path) -> list[Agent]:
    """Parse a roster JSON file into agents, rejecting duplicate ids."""
    data = json.loads(path.read_text(encoding="utf-8"))
    records = data.get("agents", []) if isinstance(data, dict) else data
    if not isinstance(records, list):
        raise ValueError(f"{path}: expected a list of agent records")

    agents = [Agent.from_dict(r) for r in records]
    seen: set[str] = set()
    for agent in agents:
        if agent.id in seen:
            raise ValueError(f"{path}: duplicate agent id '{agent.id}'")
        seen.add(agent.id)
    return agents


async def seed(path: Path, keep_counts: bool = False, create_tables: bool = False) -> int:
    """Replace the stored roster with the file content. Returns the agent count."""
    if create_tables:
        async with engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        logger.info("Tables created")

    agents = load_roster_file(path)
    store = SqlRosterStore(async_session_factory)

    if keep_counts:
        existing = {a.id: a.lead_count for a in await store.load()}
        agents = [
            replace(a, lead_count=existing[a.id]) if a.id in existing else a
            for a in agents
        ]

    await store.save(agents)
    logger.info("Seeded %d agents from %s", len(agents), path)
    return len(agents)


async def _verify_data() -> None:
    store = SqlRosterStore(async_session_factory)
    agents = await store.load()
    summary = summarize_roster(agents)
    settings = await store.get_settings()

    print(f"\n{'='*50}")
    print(f"Agents:              {summary.total_agents}")
    print(f"Available:           {summary.available_agents}")
    print(f"Total leads:         {summary.total_leads}")
    print(f"Percentage sum:      {summary.available_percentage_sum}"
          f"{'  (warning: not 100)' if summary.percentage_warning else ''}")
    print(f"Distribution:        {'enabled' if settings.is_distribution_enabled else 'disabled'}")
    for agent in agents:
        print(f"  - {agent.name} ({agent.id}): {agent.lead_count} leads")
    print(f"{'='*50}\n")


def main():
    parser = argparse.ArgumentParser(description="Seed the Leadflow roster from a JSON file")
    parser.add_argument("roster_file", nargs="?", help="Path to the roster JSON file")
    parser.add_argument(
        "--keep-counts", action="store_true",
        help="Keep stored lead counts for agents already in the roster (service must be stopped)",
    )
    parser.add_argument(
        "--create-tables", action="store_true",
        help="Create tables before seeding (development databases without Alembic)",
    )
    parser.add_argument(
        "--verify-only", action="store_true",
        help="Only print the stored roster, don't seed",
    )
    args = parser.parse_args()

    if args.verify_only:
        asyncio.run(_verify_data())
        return

    if not args.roster_file:
        parser.error("roster_file is required unless --verify-only is given")
    path = Path(args.roster_file)
    if not path.exists():
        logger.error("Roster file not found: %s", path)
        sys.exit(1)

    async def run_all():
        await seed(path, keep_counts=args.keep_counts, create_tables=args.create_tables)
        await _verify_data()

    asyncio.run(run_all())


if __name__ == "__main__":
    main()
