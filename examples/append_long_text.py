#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio
import sys

from saabel.notion import (
    AppendBlockChildrenRequest,
    BlockRequest,
    NotionClient,
    RequestValidator,
    ValidationConfig,
    ValidationError,
    config_from_env,
)


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Append a text file to a page as one paragraph")
    p.add_argument("block_id")
    p.add_argument("path")
    p.add_argument("--strict", action="store_true", help="Fail instead of splitting oversize text")
    p.add_argument("--dry-run", action="store_true", help="Only print the validation report")
    return p.parse_args()


async def main() -> None:
    args = parse_args()
    with open(args.path, encoding="utf-8") as f:
        text = f.read()

    validation = ValidationConfig.without_auto_split() if args.strict else ValidationConfig.with_auto_split()
    request = AppendBlockChildrenRequest(children=[BlockRequest.paragraph(text)])

    if args.dry_run:
        validator = RequestValidator(validation)
        result = validator.validate(request)
        print(result.summary())
        if result.has_errors:
            fix = validator.auto_fix(request, result)
            print("\n".join(fix.changes_summary) or "No automatic fix available")
        return

    async with NotionClient(config_from_env(), validation_config=validation) as client:
        try:
            response = await client.append_block_children(args.block_id, request)
        except ValidationError as e:
            print(e, file=sys.stderr)
            sys.exit(1)
        print(f"Appended {len(response.get('results', []))} block(s)")


if __name__ == "__main__":
    asyncio.run(main())
