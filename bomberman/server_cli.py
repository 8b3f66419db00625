"""Command that runs the game server until it is interrupted."""

from __future__ import annotations

import argparse
import asyncio
import logging
import signal

from .config import DEFAULT_ENV_FILE, ConfigError, load_server_config
from .server import Server

log = logging.getLogger(__name__)


async def _serve(config) -> None:
    server = Server(config.addr, config.port)
    await server.listen()
    stop = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, stop.set)
        except (NotImplementedError, RuntimeError):
            pass
    try:
        await stop.wait()
    finally:
        await server.stop()


def main(argv=None) -> int:
    """Serve until SIGINT or SIGTERM; return the exit status."""
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="bomberman-server")
    parser.add_argument("--env-file", default=DEFAULT_ENV_FILE)
    args = parser.parse_args(argv)
    try:
        asyncio.run(_serve(load_server_config(args.env_file)))
    except (ConfigError, OSError, ValueError) as exc:
        log.error("%s", exc)
        return 1
    except KeyboardInterrupt:
        pass
    return 0


if __name__ == "__main__":
    raise SystemExit(main())