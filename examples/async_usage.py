"""Cooperative mode: load configuration from asyncio code.

Concurrent loads share the same in-flight filesystem work, so several
tasks asking for configuration at once only read each file once.
"""

import asyncio

from configseek import create_explorer


async def main() -> None:
    explorer = create_explorer("mytool")

    results = await asyncio.gather(
        explorer.load("src"),
        explorer.load("tests"),
    )
    for result in results:
        print(result.filepath if result else "not found")


asyncio.run(main())
