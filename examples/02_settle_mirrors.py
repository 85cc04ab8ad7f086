from __future__ import annotations

import asyncio

from _infra import FakeMirror, banner, run

from lazysettle import after_settled, all_settled_iterable, timed_or_resolve
from kungfu import Error, LazyCoroResult, Ok


async def main() -> None:
    banner("02_settle_mirrors: completion order → all-or-nothing → timed fallback")

    mirrors = [
        FakeMirror(name="eu", delay_seconds=0.03),
        FakeMirror(name="us", delay_seconds=0.01, healthy=False),
        FakeMirror(name="ap", delay_seconds=0.02),
    ]
    fetches = [LazyCoroResult(lambda m=m: m.fetch("/index.html")) for m in mirrors]

    async for settlement in all_settled_iterable(fetches):
        print(f"mirror #{settlement.index} settled: {settlement.state}")

    match await after_settled(fetches):
        case Ok(pages):
            print(f"all mirrors ok: {pages}")
        case Error(reasons):
            print(f"{len(reasons)} mirror(s) failed: {[str(r) for r in reasons]}")

    def ping(resolve, reject):
        asyncio.get_running_loop().call_later(0.05, resolve, "pong")

    print(await timed_or_resolve(ping, seconds=0.02, value="no answer"))


if __name__ == "__main__":
    run(main)
