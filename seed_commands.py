"""
Seed the catalog with a few sample commands.
Does nothing when the catalog already holds at least one command.
"""
import asyncio

from sqlalchemy import func, select

from commander.db.models import Command
from commander.infrastructure.database.session import dispose_engine, get_session, init_db
from commander.modules.commands import CommandCreateInput, CommandService

SAMPLES = [
    CommandCreateInput(
        title="Flush DNS",
        command_text="ipconfig /flushdns",
        platform="windows",
        tags=["dns", "cache"],
        notes="Clears the resolver cache",
    ),
    CommandCreateInput(
        title="List listening ports",
        command_text="Get-NetTCPConnection -State Listen | Sort-Object LocalPort",
        platform="powershell",
        tags=["network", "ports"],
    ),
    CommandCreateInput(
        title="Disk usage by directory",
        command_text="du -h --max-depth=1 | sort -h",
        platform="linux",
        tags=["disk"],
    ),
    CommandCreateInput(
        title="Flush DNS (macOS)",
        command_text="sudo dscacheutil -flushcache; sudo killall -HUP mDNSResponder",
        platform="mac",
        tags=["dns", "cache"],
    ),
    CommandCreateInput(
        title="Show interface status",
        command_text="show ip interface brief",
        platform="network",
        tags=["cisco", "interfaces"],
    ),
]


async def seed_commands():
    """Insert the sample commands into an empty catalog."""
    await init_db()

    async for db in get_session():
        existing = await db.scalar(select(func.count()).select_from(Command))
        if existing:
            print(f"Catalog already holds {existing} command(s), nothing to seed")
            continue

        service = CommandService.with_session(db)
        for sample in SAMPLES:
            await service.create_command(sample)
        await db.commit()

        print("=" * 50)
        print(f"Seeded {len(SAMPLES)} sample commands")
        print("=" * 50)

    await dispose_engine()


if __name__ == "__main__":
    asyncio.run(seed_commands())
