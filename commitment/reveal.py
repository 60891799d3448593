import argparse
import sys

from commitment.commitments import verify_reveal
from commitment.config import load_config, parse_choice

def main(argv=None) -> int:
    try:
        cfg = load_config()
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    p = argparse.ArgumentParser(description="Check a revealed (choice, nonce) against a published commit hash")
    p.add_argument("--commit_hash", required=True)
    p.add_argument("--choice", required=True, type=parse_choice)
    p.add_argument("--nonce", required=True, help="0x-prefixed 32-byte hex")
    p.add_argument("--account_id", default=cfg.account_id)
    args = p.parse_args(argv)

    try:
        ok = verify_reveal(args.commit_hash, args.account_id, args.choice, args.nonce)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print("Commitment valid:", ok)
    return 0 if ok else 1

if __name__ == "__main__":
    sys.exit(main())
