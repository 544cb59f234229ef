"""Terminal client entry point: `python -m quicknotes.client`."""

import asyncio
import logging
import os
import sys

from quicknotes.client.api import DEFAULT_API_URL, NotesApiClient
from quicknotes.client.console import ConsoleView
from quicknotes.client.controller import NotesApp


async def _run(base_url: str) -> None:
    async with NotesApiClient(base_url) as api:
        await ConsoleView(NotesApp(api)).run()


def main() -> None:
    # Client diagnostics go to stderr so they never mix with the screen
    logging.basicConfig(
        level=logging.WARNING,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )
    asyncio.run(_run(os.environ.get("QUICKNOTES_API_URL", DEFAULT_API_URL)))


if __name__ == "__main__":
    main()
