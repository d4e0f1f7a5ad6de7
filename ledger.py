"""Command-line entry point: open accounts, optionally transfer, print a statement.

    python ledger.py rperez=2500 "John Doe=1500.9997" --transfer "John Doe" rperez 500
"""
import argparse
import logging
import sys

from config.logging_config import setup_logging
from config.settings import Settings
from src.models import Account, Bank, BankError

logger = logging.getLogger(__name__)


def parse_account(arg: str) -> Account:
    owner, sep, balance = arg.rpartition('=')
    if not sep or not owner:
        raise argparse.ArgumentTypeError(f"expected OWNER=BALANCE, got {arg!r}")
    try:
        return Account(owner, balance)
    except BankError as err:
        raise argparse.ArgumentTypeError(str(err))


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='In-memory bank ledger')
    parser.add_argument('accounts', nargs='+', type=parse_account, metavar='OWNER=BALANCE')
    parser.add_argument('--transfer', nargs=3, metavar=('FROM', 'TO', 'AMOUNT'))
    parser.add_argument('--memo', default='')
    parser.add_argument('--bank', help='bank name (defaults to LEDGER_BANK_NAME)')
    parser.add_argument('--env-file', help='path of a .env file')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = Settings.load(args.env_file)
    setup_logging(settings)

    bank = Bank(args.bank or settings.bank_name)
    try:
        for account in args.accounts:
            bank.add_account(account)

        if args.transfer:
            source_owner, target_owner, amount = args.transfer
            source = bank.find_account(source_owner)
            target = bank.find_account(target_owner)
            missing = [o for o, a in ((source_owner, source), (target_owner, target)) if a is None]
            if missing:
                print(f"Error: unknown account {missing[0]!r}", file=sys.stderr)
                return 1
            bank.transfer(source, target, amount, args.memo)
    except BankError as err:
        logger.error("%s", err)
        print(f"Error: {err}", file=sys.stderr)
        return 1

    print(bank.name)
    print(bank.statement())
    return 0


if __name__ == '__main__':
    sys.exit(main())
