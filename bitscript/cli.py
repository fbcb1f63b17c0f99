#!/usr/bin/env python3
"""
Command line tool for decoding locking scripts and transactions

    bitscript <script_hex>          | print the ASM of a locking script
    bitscript --type <script_hex>   | print the script type
    bitscript --tx <tx_hex>         | print the decoded transaction as JSON
"""
import sys

from bitscript.core import DecoderConfig, ScriptDecodeError, StreamError, get_logger
from bitscript.script import classify_script, parse_script
from bitscript.tx import Transaction

logger = get_logger(__name__)

USAGE = """Locking Script Decoder
Usage:
  # Decode a locking script to ASM
  bitscript 76a914<pubkeyhash>88ac

  # Print the script type
  bitscript --type 76a914<pubkeyhash>88ac

  # Decode a raw transaction and the ASM of every output
  bitscript --tx <raw_tx_hex>
"""


def _hex_arg(value: str) -> bytes:
    try:
        return bytes.fromhex(value)
    except ValueError as e:
        raise ScriptDecodeError(f"Argument is not valid hex: {e}") from e


def run(args: list[str]) -> int:
    if not args:
        print(USAGE)
        return 0

    config = DecoderConfig.from_env()
    try:
        if args[0] == "--tx":
            if len(args) < 2:
                print("Error: Missing transaction hex")
                return 1
            tx = Transaction.from_hex(args[1])
            print(tx.to_json())
        elif args[0] == "--type":
            if len(args) < 2:
                print("Error: Missing script hex")
                return 1
            print(classify_script(_hex_arg(args[1])).value)
        else:
            print(parse_script(_hex_arg(args[0]), config))
    except (ScriptDecodeError, StreamError) as e:
        logger.debug(f"Decode failed for arguments {args}: {e}")
        print(f"Error: {e}")
        return 1
    return 0


def main():
    sys.exit(run(sys.argv[1:]))


if __name__ == "__main__":
    main()
