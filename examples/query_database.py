#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import logging

from saabel.notion import NotionClient, PaginationConfig, RetryConfig, config_from_env


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List every row of a Notion database")
    p.add_argument("database_id")
    p.add_argument("--page-size", type=int, default=100)
    p.add_argument("--max-pages", type=int, default=None)
    p.add_argument("--retry", default="BALANCED", choices=["CONSERVATIVE", "BALANCED", "AGGRESSIVE", "DISABLED"])
    p.add_argument("-v", "--verbose", action="store_true")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    async with NotionClient(
        config_from_env(),
        retry_config=getattr(RetryConfig, args.retry),
        pagination_config=PaginationConfig(page_size=args.page_size, max_pages=args.max_pages),
    ) as client:
        count = 0
        print("=" * 65)
        async for row in client.iter_database(args.database_id):
            count += 1
            print(f"{row['id']:38} | {row.get('last_edited_time', '')}")
        print("=" * 65)
        print(f"Rows: {count}")


if __name__ == "__main__":
    asyncio.run(main())
