#!/usr/bin/env python3
"""Quick live check of the Random User API connector and full pipeline.

Run:
  poetry run python scripts/check_randomuser_live.py          # 10 users
  poetry run python scripts/check_randomuser_live.py 100      # 100 users
"""

import sys

from mini_etl.connectors.randomuser import RandomUserConnector
from mini_etl.pipeline import describe_run, run_pipeline
from mini_etl.settings import Settings


def main() -> None:
    results = int(sys.argv[1]) if len(sys.argv) > 1 else 10
    settings = Settings.from_env().model_copy(update={"results": results})
    connector = RandomUserConnector(settings=settings)
    print(f"Fetching {results} users from {connector.source_url} ...")
    try:
        run = run_pipeline(connector=connector, settings=settings)
    finally:
        connector.close()

    if run.result.fallback_used:
        print("Live fetch failed; fallback dataset was used.")
    for line in describe_run(run):
        print(line)
    for user in run.users[:5]:
        flag = "valid" if user.valid else "INVALID"
        print(f"  [{flag}] {user.name} <{user.email}> {user.location.country if user.location else ''}")


if __name__ == "__main__":
    main()
