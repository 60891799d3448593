import argparse
import logging
import sys

from commitment.commitments import EntropyUnavailableError, format_commitment, make_commitment
from commitment.config import load_config, parse_choice

def main(argv=None) -> int:
    try:
        cfg = load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    p = argparse.ArgumentParser(description="Generate a keccak256 commit hash for a commit-reveal bet or vote")
    p.add_argument("--account_id", default=cfg.account_id, help="Account address that will reveal (env COMMIT_ACCOUNT_ID)")
    p.add_argument("--choice", default=cfg.choice, type=parse_choice, help="0=HEADS, 1=TAILS (env COMMIT_CHOICE)")
    p.add_argument("--verbose", "-v", action="store_true", help="Log encoding details to stderr")
    args = p.parse_args(argv)

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        c = make_commitment(args.account_id, args.choice)
    except (EntropyUnavailableError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(format_commitment(c))
    return 0

if __name__ == "__main__":
    sys.exit(main())
