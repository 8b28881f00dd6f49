"""Table listing command for the tabledoc CLI."""

import asyncio

from ...core.config import Config
from ...store.document import DocumentStore


def handle_tables(args, config: Config) -> bool:
    """Print the tables held in the document."""
    return asyncio.run(_run(config))


async def _run(config: Config) -> bool:
    async with DocumentStore(
        config.store.path, create_if_missing=config.store.create_if_missing
    ) as store:
        await store.load()
        names = store.tables()

    if not names:
        print("No tables.")
    for name in names:
        print(name)
    return True
