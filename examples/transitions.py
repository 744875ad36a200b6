"""
Show an issue and its available transitions, optionally triggering one.

Reads JIRA_HOST, JIRA_USER, JIRA_PASS and JIRA_KEY from the environment.
Set JIRA_TRANSITION_ID to trigger that transition.
"""

import argparse
import asyncio
import logging
import os
import sys

from goji import Jira, JiraConfig, JiraError, TransitionTriggerOptions


async def transitions_example(key: str, transition_id: str | None) -> int:
    config = JiraConfig.from_env()
    if not config.is_valid():
        print("\n".join(config.validate()), file=sys.stderr)
        return 1

    async with Jira.from_config(config) as jira:
        try:
            issue = await jira.issues().get(key)
            print(f"{issue.key}: {issue.summary}")

            transitions = jira.transitions(key)
            for option in await transitions.list():
                print(f"  {option.id} {option.name} -> {option.to.name}")

            if transition_id:
                await transitions.trigger(TransitionTriggerOptions.new(transition_id))
                print(f"Triggered transition {transition_id}")
        except JiraError as e:
            print(f"Request failed: {e}", file=sys.stderr)
            return 1
    return 0


def main() -> int:
    parser = argparse.ArgumentParser(description="List and trigger issue transitions")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    key = os.environ.get("JIRA_KEY")
    if not key:
        print("Missing issue key (JIRA_KEY)", file=sys.stderr)
        return 1
    return asyncio.run(transitions_example(key, os.environ.get("JIRA_TRANSITION_ID")))


if __name__ == "__main__":
    sys.exit(main())
