"""Line-based terminal client: sends typed lines, prints what the server says."""

from __future__ import annotations

import argparse
import logging
import socket
import sys
import threading

from .config import DEFAULT_ENV_FILE, ConfigError, load_client_config

log = logging.getLogger(__name__)


def _receive(sock: socket.socket, done: threading.Event) -> None:
    try:
        with sock.makefile("r", encoding="utf-8", errors="replace", newline="") as stream:
            for line in stream:
                if not line.endswith("\n"):
                    break
                print("Server: " + line, end="", flush=True)
    except OSError:
        pass
    log.info("Disconnected from server.")
    done.set()


def _send(sock: socket.socket, done: threading.Event) -> None:
    while not done.is_set():
        print("> ", end="", flush=True)
        line = sys.stdin.readline()
        if not line:
            return
        try:
            sock.sendall((line.rstrip("\r\n") + "\n").encode("utf-8"))
        except OSError as exc:
            log.error("send error: %s", exc)
            done.set()
            return


def main(argv=None) -> int:
    """Connect to the server and relay lines until it hangs up; return the exit status."""
    logging.basicConfig(level=logging.INFO)
    parser = argparse.ArgumentParser(prog="bomberman-client")
    parser.add_argument("--env-file", default=DEFAULT_ENV_FILE)
    args = parser.parse_args(argv)
    try:
        config = load_client_config(args.env_file)
        sock = socket.create_connection((config.host, int(config.port)))
    except ConfigError as exc:
        log.error("%s", exc)
        return 1
    except (OSError, ValueError) as exc:
        log.error("unable to connect to server: %s", exc)
        return 1

    with sock:
        print("connected to Bomberman server!", flush=True)
        done = threading.Event()
        threading.Thread(target=_receive, args=(sock, done), daemon=True).start()
        threading.Thread(target=_send, args=(sock, done), daemon=True).start()
        done.wait()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())