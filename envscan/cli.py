import argparse
import sys

from envscan.errors import EnvScanError
from envscan.loader import deinit, get, get_with_default, load_auto
from envscan.values import IntegerValue


DEFAULT_DB_PORT = IntegerValue(8080)


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="envscan",
        description="Find a .env file under the working directory (up to 2 levels deep) and print DB_HOST/DB_PORT.",
    )


def main(argv: list[str] | None = None) -> int:
    build_parser().parse_args(argv)

    try:
        env_map = load_auto()
    except (EnvScanError, OSError) as exc:
        kind = getattr(exc, "kind", type(exc).__name__)
        print(f"Failed to load .env: {kind}: {exc}", file=sys.stderr)
        return 1

    try:
        host = get(env_map, "DB_HOST")
        if host is not None:
            print(f"DB_HOST: {host}")
        print(f"DB_PORT: {get_with_default(env_map, 'DB_PORT', DEFAULT_DB_PORT)}")
    finally:
        deinit(env_map)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
