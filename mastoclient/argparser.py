"""argparser.py - Parses command line arguments."""
import argparse

argparser = argparse.ArgumentParser(
    prog="mastoclient",
    description="Query the Mastodon accounts API from the command line.",
)

argparser.add_argument("-c", "--config", required=False, type=str, help="Optionally \
    provide a path to a JSON file containing configuration options. If not provided, \
    options must be supplied using command line flags.")
argparser.add_argument("--server", required=False, help="Required: The name of \
    your server (e.g. `mastodon.social`)")
argparser.add_argument("--access-token", required=False, help="The access token \
    can be generated at https://<server>/settings/applications. Commands that only \
    read public data work without one.")
argparser.add_argument("--http-timeout", required=False, type=float, default=None,
    help="The timeout in seconds for HTTP requests. Defaults to the HTTP client's \
    own default.")
argparser.add_argument("--log-level", required=False, type=int, default=30,
    help="Set the log level. 10=DEBUG, 20=INFO, 30=WARNING, 40=ERROR, 50=CRITICAL")

commands = argparser.add_subparsers(dest="command", required=True)

verify_credentials = commands.add_parser("verify-credentials",
    help="Show the account the access token belongs to.")
verify_credentials.add_argument("--bearer-token", required=False, default=None,
    help="Check this token instead of --access-token.")

account = commands.add_parser("account", help="Show an account by id.")
account.add_argument("account_id")

lookup = commands.add_parser("lookup",
    help="Resolve a username or WebFinger address to an account.")
lookup.add_argument("acct")
lookup.add_argument("--skip-webfinger", action="store_true", default=None,
    help="Use the locally cached result instead of a full WebFinger resolution.")

statuses = commands.add_parser("statuses", help="List an account's statuses.")
statuses.add_argument("account_id")
statuses.add_argument("--limit", type=int, default=None)
statuses.add_argument("--tagged", default=None)
statuses.add_argument("--exclude-reblogs", action="store_true", default=None)

relationships = commands.add_parser("relationships",
    help="Show your relationship to one or more accounts.")
relationships.add_argument("account_ids", nargs="+")

familiar_followers = commands.add_parser("familiar-followers",
    help="Show accounts you follow that follow the given accounts.")
familiar_followers.add_argument("account_ids", nargs="+")

search = commands.add_parser("search", help="Search accounts.")
search.add_argument("query")
search.add_argument("--limit", type=int, default=None)
search.add_argument("--resolve", action="store_true", default=None,
    help="Attempt a WebFinger lookup; use when the query is an exact address.")
search.add_argument("--following", action="store_true", default=None,
    help="Only include accounts you follow.")

commands.add_parser("preferences", help="Show your account preferences.")

followed_tags = commands.add_parser("followed-tags", help="List hashtags you follow.")
followed_tags.add_argument("--limit", type=int, default=None)


def parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse the command line."""
    return argparser.parse_args(argv)
