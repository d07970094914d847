#!/usr/bin/env python3
"""Validate Glitchtip MCP configuration and test connectivity.

Usage: python scripts/health_check.py [ISSUE_ID]

With an issue ID, also runs the shaped get_issue pipeline against it and
prints a short summary of what the tool would return.
"""

import asyncio
import json
import sys

from glitchtip_mcp.glitchtip.client import GlitchtipClient
from glitchtip_mcp.settings import GlitchtipSettings
from glitchtip_mcp.tools.issues import issue_details


async def main(issue_id: str | None = None) -> int:
    print("Loading settings...")
    try:
        settings = GlitchtipSettings()
    except Exception as e:
        print(f"FAIL: Could not load settings: {e}")
        print("Ensure GLITCHTIP_API_TOKEN and GLITCHTIP_ORGANIZATION_SLUG are set.")
        return 1

    print(f"  GLITCHTIP_API_ENDPOINT: {settings.api_endpoint}")
    print(f"  GLITCHTIP_ORGANIZATION_SLUG: {settings.organization_slug}")
    print(f"  GLITCHTIP_API_TOKEN: {'*' * 8}...{settings.api_token[-4:]}")

    print("\nTesting connectivity...")
    client = GlitchtipClient(settings)

    try:
        organization = await client.get_organization()
        print(f"  OK: Organization {organization.get('name')!r}")
        projects = await client.list_projects()
        print(f"  OK: Found {len(projects)} accessible projects")
        for p in projects[:5]:
            print(f"    - {p.get('slug')}: {p.get('name')}")
        if len(projects) > 5:
            print(f"    ... and {len(projects) - 5} more")

        if issue_id:
            print(f"\nFetching issue {issue_id} through get_issue...")
            text = await issue_details(client, issue_id)
            if not text.startswith("{"):
                print(f"  FAIL: {text}")
                return 1
            result = json.loads(text)
            event = result["latestEvent"]
            print(f"  Title: {result['issue'].get('title')}")
            print(f"  Latest event: {event.get('eventID') if event else 'unavailable'}")
            print(f"  Comments: {len(result['comments'])}")
            print(f"  Payload size: {len(text)} characters")
        return 0
    except Exception as e:
        print(f"  FAIL: {e}")
        return 1
    finally:
        await client.close()


if __name__ == "__main__":
    sys.exit(asyncio.run(main(sys.argv[1] if len(sys.argv) > 1 else None)))
