from __future__ import annotations

import argparse
import os
import time

from .runtime.server import run
from .sdk.client import PatternkitClient


def main() -> None:
    p = argparse.ArgumentParser(prog="patternkit", description="patternkit: design pattern playground")
    p.add_argument("--host", default="127.0.0.1")
    p.add_argument("--port", type=int, default=8000)
    p.add_argument("--log-level", default=os.getenv("PATTERNKIT_LOG_LEVEL", "info"))
    args = p.parse_args()

    srv = run(host=args.host, port=args.port, log_level=args.log_level)
    if isinstance(srv, PatternkitClient):
        print(f"Already running at {srv.base_url}")
        return
    print(srv.url)

    # Block forever (so it behaves like a normal CLI server)
    while True:
        time.sleep(3600)


if __name__ == "__main__":
    main()
