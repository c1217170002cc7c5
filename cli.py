#!/usr/bin/env python3
"""Simple CLI for checking private payment plans and swap status locally"""

import argparse
import asyncio

from paylink.config import settings
from paylink.core.privacy import FeeCalculationError, WithdrawalPlan, plan_withdrawal, round_up_decimals
from paylink.core.swap_status import NormalizedExecutionStatus, is_terminal_status, normalize_execution_status
from paylink.providers.one_click import OneClickProvider, StatusFetchFailed


def print_plan(plan: WithdrawalPlan):
    """Pretty print a withdrawal plan"""
    print("\n🔒 Private Payment Plan")
    print("=" * 50)
    print(f"Mode:               {plan.mode.value}")
    print(f"Requested:          ${plan.requested_amount}")
    print(f"Deposit / withdraw: ${plan.gross_amount} ({plan.gross_base_units} base units)")
    print(f"Pool fee:           ${plan.implied_fee}")
    print(f"Recipient receives: ${plan.expected_recipient_amount}")
    print(f"Shown to payer:     ${round_up_decimals(plan.gross_amount, 2)}")


def print_status(status: NormalizedExecutionStatus):
    """Pretty print a normalized swap status"""
    details = status.swap_details
    marker = "✅" if is_terminal_status(status.status) else "⏳"

    print(f"\n{marker} Swap Status: {status.status}")
    print("=" * 50)
    print(f"Updated:     {status.updated_at}")
    print(f"Route:       {status.origin_asset or '?'} → {status.destination_asset or '?'}")
    print(f"Amount in:   {details.amount_in_formatted or '—'} (${details.amount_in_usd or '—'})")
    print(f"Amount out:  {details.amount_out_formatted or '—'} (${details.amount_out_usd or '—'})")
    print(f"Refunded:    {details.refunded_amount_formatted}")
    for label, hashes in (
        ("Origin txs", details.origin_chain_tx_hashes),
        ("Destination txs", details.destination_chain_tx_hashes),
    ):
        if hashes:
            print(f"{label}:")
            for tx_hash in hashes:
                print(f"  - {tx_hash}")


def cli_plan(amount: str, recipient_pays_fees: bool):
    """CLI command to compute a private payment plan"""
    try:
        plan = plan_withdrawal(
            amount,
            settings.fee_schedule,
            recipient_pays_fees=recipient_pays_fees,
            decimals=settings.usdc_decimals,
        )
    except FeeCalculationError as e:
        print(f"❌ {e}")
        return
    print_plan(plan)


async def cli_status(deposit_address: str):
    """CLI command to fetch and normalize a swap status"""
    print(f"🔍 Fetching status for {deposit_address}...")
    try:
        raw = await OneClickProvider().get_execution_status(deposit_address)
    except StatusFetchFailed as e:
        print(f"❌ Error: {e}")
        return
    print_status(normalize_execution_status(raw))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Paylink CLI")
    subparsers = parser.add_subparsers(dest="command")

    plan_parser = subparsers.add_parser("plan", help="Compute private payment deposit/withdraw amounts")
    plan_parser.add_argument("amount", help="Amount in USDC")
    plan_parser.add_argument(
        "--recipient-pays-fees",
        action="store_true",
        help="Move the amount as-is and let the recipient absorb the pool fee",
    )

    status_parser = subparsers.add_parser("status", help="Fetch swap execution status")
    status_parser.add_argument("deposit_address", help="Swap deposit address")

    return parser


async def main():
    parser = build_parser()
    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        return

    command = args.command.lower()

    if command == "plan":
        cli_plan(args.amount, args.recipient_pays_fees)

    elif command == "status":
        await cli_status(args.deposit_address)

    else:
        print(f"❌ Unknown command: {command}")
        parser.print_help()


if __name__ == "__main__":
    asyncio.run(main())
