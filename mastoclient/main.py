"""mastoclient - query the Mastodon accounts API from the command line."""
import argparse
import asyncio
import json
import logging
import sys
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any

from mastoclient.api.errors import MastodonError
from mastoclient.api.mastodon import Mastodon
from mastoclient.api.response import MastodonResponse
from mastoclient.argparser import parse_arguments
from mastoclient.helpers.helpers import setup_logging, to_json

Command = Callable[[Mastodon, argparse.Namespace], Awaitable[MastodonResponse[Any]]]

COMMANDS: dict[str, Command] = {
    "verify-credentials": lambda m, a: m.verify_account_credentials(
        m.client, bearer_token=a.bearer_token),
    "account": lambda m, a: m.lookup_by_id(m.client, a.account_id),
    "lookup": lambda m, a: m.lookup_account_from_webfinger_address(
        m.client, a.acct, skip_webfinger=a.skip_webfinger),
    "statuses": lambda m, a: m.lookup_statuses(
        m.client, a.account_id, tagged=a.tagged, limit=a.limit,
        exclude_reblogs=a.exclude_reblogs),
    "relationships": lambda m, a: m.lookup_relationships(m.client, a.account_ids),
    "familiar-followers": lambda m, a: m.lookup_familiar_followers(
        m.client, a.account_ids),
    "search": lambda m, a: m.search_accounts(
        m.client, a.query, limit=a.limit, resolve_with_webfinger=a.resolve,
        only_followings=a.following),
    "preferences": lambda m, a: m.lookup_preferences(m.client),
    "followed-tags": lambda m, a: m.lookup_followed_tags(m.client, limit=a.limit),
}


def load_config(arguments: argparse.Namespace) -> bool:
    """Merge the JSON config file, if one was given, into the arguments."""
    if not arguments.config:
        return True
    if not Path(arguments.config).exists():
        logging.critical(f"Config file {arguments.config} doesn't exist")
        return False
    with Path(arguments.config).open(encoding="utf-8") as file:
        config = json.load(file)
    for key in config:
        setattr(arguments, key.lower().replace("-", "_"), config[key])
    return True


async def main(arguments: argparse.Namespace) -> int:
    """Run one command and print its result as JSON."""
    if not load_config(arguments):
        return 1

    setup_logging(arguments.log_level)

    if arguments.server is None:
        logging.critical("You must supply at least a server name")
        return 1

    async with Mastodon(
        arguments.server,
        arguments.access_token,
        timeout=arguments.http_timeout,
    ) as mastodon:
        try:
            response = await COMMANDS[arguments.command](mastodon, arguments)
        except MastodonError as ex:
            logging.critical(f"{arguments.command} failed: {ex}")
            return 1

    logging.info(f"{response.method} {response.url} returned {response.status_code}")
    print(to_json(response.data))  # noqa: T201
    return 0


def run() -> None:
    """Entry point for the console script."""
    sys.exit(asyncio.run(main(parse_arguments())))
