"""
Print issues matching a JQL query.

Reads JIRA_HOST, JIRA_USER and JIRA_PASS from the environment.

    python examples/search.py "assignee=doug" --verbose
"""

import argparse
import asyncio
import logging
import sys

from goji import Jira, JiraConfig, JiraError


async def search_example(jql: str) -> int:
    config = JiraConfig.from_env()
    errors = config.validate()
    if errors:
        for error in errors:
            print(error, file=sys.stderr)
        return 1

    async with Jira.from_config(config) as jira:
        try:
            results = await jira.search().list(jql)
        except JiraError as e:
            print(f"Search failed: {e}", file=sys.stderr)
            return 1

        for issue in results.issues:
            status = issue.status
            reporter = issue.reporter
            assignee = issue.assignee
            print(
                f"{issue.key} {issue.summary or '???'} "
                f"({status.name if status else '???'}): "
                f"reporter {reporter.display_name if reporter else '???'} "
                f"assignee {assignee.display_name if assignee else '???'}"
            )
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="Search Jira issues with JQL")
    parser.add_argument("jql", nargs="?", default="assignee=doug")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return asyncio.run(search_example(args.jql))


if __name__ == "__main__":
    sys.exit(main())
