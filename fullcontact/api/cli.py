"""
Command-line adapter for the FullContact contact operations.

Architectural role:
- Exposes every `ContactClient` operation as a subcommand.
- Delegates all request shaping to `fullcontact.client.contact`.

Request lifecycle (per invocation):
1. Parse arguments and configure logging.
2. Build the client from environment configuration (`.env` supported).
3. Run the selected operation.
4. Print the decoded JSON response to stdout.

Input validation behavior:
- Contact payloads for `update` must be valid JSON objects (`--data` or `--file`).
- Ids, eTags and action types are passed through unchecked.

Error handling strategy:
- Malformed payload input and invalid configuration exit with status 2 via `argparse`.
- Request failures are logged and exit with status 1.
"""

import argparse
import json
import logging
import sys

import requests

from fullcontact import __version__
from fullcontact.client.contact import ContactClient
from fullcontact.client.types import ActionType

logger = logging.getLogger(__name__)


# =========================================================
# ARGUMENTS
# =========================================================

def build_parser():
    """Return the argument parser with one subcommand per operation."""
    parser = argparse.ArgumentParser(
        prog="fullcontact-contacts",
        description="Manage contacts in FullContact contact lists.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="log requests at debug level"
    )

    commands = parser.add_subparsers(dest="command", required=True)

    update = commands.add_parser("update", help="create or modify a contact")
    update.add_argument("list_id")
    source = update.add_mutually_exclusive_group(required=True)
    source.add_argument("--data", help="contact payload as a JSON string")
    source.add_argument("--file", help="path to a JSON contact payload, '-' for stdin")
    update.add_argument("--generate-ids", type=int, choices=(0, 1))
    update.add_argument("--queue", action=argparse.BooleanOptionalAction)

    for name, help_text in (
        ("get", "fetch a contact"),
        ("has-updates", "check for new enrichment updates"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("list_id")
        cmd.add_argument("contact_id")
        cmd.add_argument("--etag")

    for name, help_text in (
        ("delete", "delete a contact"),
        ("updates", "fetch pending updates"),
        ("enriched", "fetch the enriched contact"),
        ("save-enriched", "save the enriched contact"),
    ):
        cmd = commands.add_parser(name, help=help_text)
        cmd.add_argument("list_id")
        cmd.add_argument("contact_id")

    history = commands.add_parser("history", help="list contact eTag history")
    history.add_argument("list_id")
    history.add_argument("contact_id")
    history.add_argument(
        "--action-type",
        help="filter: " + ", ".join(action.value for action in ActionType),
    )

    return parser


def read_payload(parser, args):
    """Return the `update` payload, exiting through `parser.error` when invalid."""
    if args.data is not None:
        raw = args.data
    elif args.file == "-":
        raw = sys.stdin.read()
    else:
        try:
            with open(args.file, "r", encoding="utf-8") as f:
                raw = f.read()
        except OSError as e:
            parser.error(f"cannot read {args.file}: {e}")

    try:
        payload = json.loads(raw)
    except ValueError as e:
        parser.error(f"contact payload is not valid JSON: {e}")

    if not isinstance(payload, dict):
        parser.error("contact payload must be a JSON object")
    return payload


# =========================================================
# DISPATCH
# =========================================================

def run_command(client, args, payload=None):
    """Invoke the operation selected by `args.command` and return its result."""
    command = args.command

    if command == "update":
        return client.create_or_update_contact(
            args.list_id,
            payload,
            generate_ids=args.generate_ids,
            queue=args.queue,
        )
    if command == "get":
        return client.get_contact(args.list_id, args.contact_id, etag=args.etag)
    if command == "has-updates":
        return client.has_enriched_updates(args.list_id, args.contact_id, etag=args.etag)
    if command == "delete":
        return client.delete_contact(args.list_id, args.contact_id)
    if command == "updates":
        return client.get_updates(args.list_id, args.contact_id)
    if command == "enriched":
        return client.get_enriched_contact(args.list_id, args.contact_id)
    if command == "save-enriched":
        return client.save_enriched_contact(args.list_id, args.contact_id)
    if command == "history":
        return client.get_contact_history(
            args.list_id, args.contact_id, action_type=args.action_type
        )

    raise ValueError(f"Unknown command: {command}")


# =========================================================
# MAIN
# =========================================================

def main(argv=None, client=None):
    """Run one CLI invocation and return the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    payload = read_payload(parser, args) if args.command == "update" else None

    owns_client = client is None
    if owns_client:
        try:
            client = ContactClient()
        except ValueError as e:
            parser.error(f"invalid configuration: {e}")

    try:
        result = run_command(client, args, payload)
    except requests.RequestException as e:
        status = getattr(getattr(e, "response", None), "status_code", None)
        if status:
            logger.error("FullContact request failed (%s): %s", status, e)
        else:
            logger.error("FullContact request failed: %s", e)
        return 1
    finally:
        if owns_client:
            client.close()

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
