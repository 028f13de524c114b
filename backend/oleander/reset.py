import argparse
import logging
import sys

from oleander.core.config import settings
from oleander.core.errors import ResetNotConfirmed
from oleander.db.schema import reset_schema
from oleander.db.session import make_engine


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m oleander.reset",
        description="Drop and recreate the oleander schema. All user rows are lost.",
    )
    p.add_argument("--database-url", default=None, help="defaults to DATABASE_URL")
    p.add_argument("--yes", action="store_true", help="confirm the destructive reset")
    return p


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=settings.log_level.upper(), format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    engine = make_engine(args.database_url)
    try:
        reset_schema(engine, confirm=args.yes or settings.reset_confirm)
    except ResetNotConfirmed as e:
        print(f"{e}; pass --yes or set RESET_CONFIRM=1", file=sys.stderr)
        return 2
    finally:
        engine.dispose()
    return 0


if __name__ == "__main__":
    sys.exit(main())
