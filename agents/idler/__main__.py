"""Entry point: python -m agents.idler"""

import asyncio
import logging
import signal

from agents.idler.agent import IdlerScript
from agents.idler.world import demo_client


async def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(name)s] %(levelname)s: %(message)s",
    )

    script = IdlerScript(demo_client())
    stop = asyncio.Event()

    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        loop.add_signal_handler(sig, stop.set)

    await script.start()
    logging.info("Idler script running — press Ctrl+C to stop")

    await stop.wait()
    await script.stop()


if __name__ == "__main__":
    asyncio.run(main())
