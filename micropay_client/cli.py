#!/usr/bin/env python3
"""Command-line front end for the micropay client.

Examples::

    micropay login alice@example.com --password secret
    micropay credit 50.00
    micropay pay 7f0c... 12.50 --description "Lunch"
    micropay transactions
"""

from __future__ import annotations

import argparse
import getpass
import json
import logging
import sys
from dataclasses import is_dataclass
from typing import Any, Sequence

from micropay_client.client import MicropayClient
from micropay_client.config import ClientConfig
from micropay_client.exceptions import ConfigurationError
from micropay_client.flows import Outcome, OutcomeStatus
from micropay_client.logging import setup_logging
from micropay_client.models.auth import AuthResponse
from micropay_client.models.enums import PaymentType
from micropay_client.serialization import to_dict

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_LOGIN_REQUIRED = 2


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="micropay", description="Micropay wallet and payments client")
    parser.add_argument("--base-url", type=str, default=None, help="API base URL (default: $MICROPAY_API_BASE_URL)")
    parser.add_argument("--log-level", type=str, default=None, help="Log level (default: $LOG_LEVEL or INFO)")
    parser.add_argument("--compact", action="store_true", help="Print compact JSON")

    sub = parser.add_subparsers(dest="command", required=True)

    login = sub.add_parser("login", help="Log in and store the session")
    login.add_argument("email")
    login.add_argument("--password", default=None, help="Password (prompted when omitted)")

    register = sub.add_parser("register", help="Create an account and log in")
    register.add_argument("email")
    register.add_argument("--first-name", required=True)
    register.add_argument("--last-name", required=True)
    register.add_argument("--password", default=None, help="Password (prompted when omitted)")

    sub.add_parser("logout", help="Forget the stored session")
    sub.add_parser("whoami", help="Show the logged-in user")
    sub.add_parser("wallet", help="Show the wallet balance")
    sub.add_parser("dashboard", help="Wallet and recent transactions")

    for name in ("credit", "debit"):
        change = sub.add_parser(name, help=f"{name.capitalize()} the wallet")
        change.add_argument("amount")
        change.add_argument("--description", default=None)

    pay = sub.add_parser("pay", help="Send a payment")
    pay.add_argument("payee")
    pay.add_argument("amount")
    pay.add_argument("--currency", default="USD")
    pay.add_argument("--type", dest="payment_type", choices=[t.value for t in PaymentType], default="PAYMENT")
    pay.add_argument("--description", default=None)
    pay.add_argument("--reference", default=None)
    pay.add_argument("--retries", type=int, default=0, help="Resend with the same key after network failures")

    payment = sub.add_parser("payment", help="Show a payment")
    payment.add_argument("payment_id")

    sub.add_parser("transactions", help="List transactions, newest first")

    transaction = sub.add_parser("transaction", help="Show a transaction")
    transaction.add_argument("transaction_id")

    notifications = sub.add_parser("notifications", help="List notifications")
    notifications.add_argument("--page", type=int, default=0)
    notifications.add_argument("--size", type=int, default=None)

    return parser


def _password(value: str | None) -> str:
    return value if value is not None else getpass.getpass("Password: ")


def run_command(client: MicropayClient, args: argparse.Namespace) -> Outcome:
    """Dispatch one parsed command to the matching flow."""
    flows = client.flows
    command = args.command

    if command == "login":
        return flows.auth.login(args.email, _password(args.password))
    if command == "register":
        return flows.auth.register(args.email, _password(args.password), args.first_name, args.last_name)
    if command == "logout":
        return flows.auth.logout()
    if command == "whoami":
        user_id = client.session.current_user
        if user_id is None:
            return Outcome(
                status=OutcomeStatus.UNAUTHENTICATED,
                message="Not logged in",
                redirect_to=client.config.login_path,
            )
        return Outcome.success({"user_id": user_id})
    if command == "wallet":
        return flows.wallet.load()
    if command == "dashboard":
        return flows.dashboard.load()
    if command == "credit":
        return flows.wallet.credit(args.amount, **_description(args))
    if command == "debit":
        return flows.wallet.debit(args.amount, **_description(args))
    if command == "pay":
        outcome = flows.payments.submit(
            args.payee,
            args.amount,
            currency=args.currency,
            payment_type=PaymentType(args.payment_type),
            description=args.description,
            reference=args.reference,
        )
        for _ in range(max(args.retries, 0)):
            if not outcome.retryable:
                break
            logger.info("Retrying payment after network failure")
            outcome = flows.payments.retry(outcome.context)
        return outcome
    if command == "payment":
        return flows.payments.status(args.payment_id)
    if command == "transactions":
        return flows.transactions.history()
    if command == "transaction":
        return flows.transactions.detail(args.transaction_id)
    if command == "notifications":
        return flows.notifications.load(page=args.page, size=args.size)

    raise ValueError(f"Unknown command: {command}")


def _description(args: argparse.Namespace) -> dict[str, str]:
    return {"description": args.description} if args.description else {}


def _render(value: Any) -> Any:
    if isinstance(value, list):
        return [_render(item) for item in value]
    if isinstance(value, AuthResponse):
        # never echo the token
        return {"user_id": value.user_id, "email": value.email}
    if isinstance(value, dict) or is_dataclass(value):
        return to_dict(value)
    return value


def print_outcome(outcome: Outcome, pretty: bool = True) -> int:
    """Print an outcome and return the process exit code."""
    if outcome.ok:
        if outcome.message:
            print(outcome.message, file=sys.stderr)
        if outcome.value is not None:
            print(json.dumps(_render(outcome.value), indent=2 if pretty else None, ensure_ascii=False, default=str))
        return EXIT_OK

    print(f"Error: {outcome.message}", file=sys.stderr)
    for field, message in sorted(outcome.field_errors.items()):
        print(f"  {field}: {message}", file=sys.stderr)
    if outcome.needs_login:
        print("Run `micropay login <email>` to sign in.", file=sys.stderr)
        return EXIT_LOGIN_REQUIRED
    if outcome.retryable:
        print("The request may be retried with --retries.", file=sys.stderr)
    return EXIT_FAILED


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = ClientConfig.from_env()
    except ConfigurationError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILED
    if args.base_url:
        config.http.base_url = args.base_url
    setup_logging(args.log_level or config.log_level, config.log_format)

    with MicropayClient(config) as client:
        outcome = run_command(client, args)
    return print_outcome(outcome, pretty=not args.compact)


if __name__ == "__main__":
    sys.exit(main())
