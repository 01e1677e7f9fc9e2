#!/usr/bin/env python3
from __future__ import annotations

import argparse
import asyncio

from relaykit.im import ClientConfig, IMClient


def parse_args() -> argparse.Namespace:
    p = argparse.ArgumentParser(description="List chat groups page by page or all at once")
    p.add_argument("limit", nargs="?", type=int, default=20)
    p.add_argument("--pages", type=int, default=0, help="Fetch at most N pages manually (0 = all)")
    p.add_argument("--members", action="store_true", help="Also list members of each group")
    return p.parse_args()


async def main() -> None:
    args = parse_args()

    async with IMClient(ClientConfig.from_env()) as client:
        print("=" * 65)
        if args.pages:
            page = await client.groups.list_groups(args.limit)
            for n in range(1, args.pages + 1):
                print(f"Page {n}: {len(page.items)} groups, last={page.is_last}")
                for g in page.items:
                    print(f"  {g.group_id:20} | {g.name or '-':25} | {g.owner or '-'}")
                if page.is_last:
                    break
                page = await client.groups.list_groups(args.limit, page.next_cursor)
        else:
            count = 0
            async for g in client.groups.list_all_groups(args.limit):
                count += 1
                print(f"{g.group_id:20} | {g.name or '-':25} | {g.affiliations:>5}")
                if args.members:
                    async for m in client.groups.list_all_group_members(g.group_id, args.limit):
                        print(f"    {m.role.value:7} {m.username}")
            print("-" * 65)
            print(f"Total groups: {count}")
        print("=" * 65)


if __name__ == "__main__":
    asyncio.run(main())
