from __future__ import annotations

from _infra import banner, run

from lazysettle import default, reiterable, reverse, skip


async def main() -> None:
    banner("01_quickstart: restartable sequences with an exhausted flag")

    lines = ["header", "alpha", "beta", "gamma"]

    body = skip(lines, 1)
    print(list(body))
    # Restartable: the same sequence can be iterated again
    print(list(reverse(body)))
    print("".join(reiterable("ab", 3)))

    cursor = iter(default("hi"))
    while not cursor.exhausted:
        value = next(cursor, None)
        print(f"pulled={value!r} exhausted={cursor.exhausted}")


if __name__ == "__main__":
    run(main)
