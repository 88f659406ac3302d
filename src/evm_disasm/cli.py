"""Command-line disassembler for hex-encoded EVM bytecode.

Usage:
    evm-disasm contract.hex
    cat contract.hex | evm-disasm -
    evm-disasm --address 0x4200000000000000000000000000000000000006
    evm-disasm --address 0x4200000000000000000000000000000000000006 --block 1000000

Environment:
    RPC_URL          - JSON-RPC endpoint used with --address
    LOG_LEVEL        - Logging level for diagnostics on stderr
    READ_CHUNK_SIZE  - Read-ahead buffer size in bytes
"""

from __future__ import annotations

import argparse
import io
import logging
import re
import sys
from typing import IO

from evm_disasm.analysis.disassembler import disassemble_stream
from evm_disasm.analysis.instruction import render
from evm_disasm.analysis.reader import DecodeError
from evm_disasm.chain.rpc import RPCError, block_id, get_code
from evm_disasm.config import ConfigError, load_config

logger = logging.getLogger(__name__)

# Ethereum address pattern: 0x followed by 40 hex chars
ADDRESS_RE = re.compile(r"^0x[0-9a-fA-F]{40}$")


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="evm-disasm",
        description="Disassemble hex-encoded EVM bytecode",
    )
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        metavar="FILE",
        help="File containing hex-encoded bytecode ('-' or omitted for stdin)",
    )
    parser.add_argument(
        "--address",
        help="Disassemble the code deployed at this address instead of FILE",
    )
    parser.add_argument(
        "--rpc-url",
        help="JSON-RPC endpoint for --address (default: $RPC_URL)",
    )
    parser.add_argument(
        "--block",
        type=block_id,
        default="latest",
        help="Block tag or number for --address (default: latest)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log decoder diagnostics to stderr",
    )
    return parser


def write_instructions(source: IO[bytes], out: IO[str], chunk_size: int) -> int:
    """Write one rendered instruction per line. Returns the instruction count."""
    count = 0
    for instruction in disassemble_stream(source, chunk_size):
        out.write(render(instruction) + "\n")
        count += 1
    return count


def _fetch_source(address: str, rpc_url: str, block: str) -> IO[bytes] | None:
    code = get_code(address, rpc_url, block)
    if not code:
        logger.warning("No bytecode at %s (EOA or empty account)", address)
        return None
    return io.BytesIO(code.encode("utf-8"))


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    try:
        config = load_config()
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else config.log_level,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        if args.address is not None:
            if not ADDRESS_RE.match(args.address):
                print(f"error: invalid address: {args.address}", file=sys.stderr)
                return 1
            source = _fetch_source(
                args.address, args.rpc_url or config.rpc_url, args.block
            )
            if source is None:
                return 0
            count = write_instructions(source, sys.stdout, config.read_chunk_size)
        elif args.file == "-":
            stdin = getattr(sys.stdin, "buffer", sys.stdin)
            count = write_instructions(stdin, sys.stdout, config.read_chunk_size)
        else:
            with open(args.file, "rb") as f:
                count = write_instructions(f, sys.stdout, config.read_chunk_size)
    except (DecodeError, RPCError, OSError) as e:
        sys.stdout.flush()
        print(f"error: {e}", file=sys.stderr)
        return 1

    logger.info("Disassembled %d instructions", count)
    return 0


if __name__ == "__main__":
    sys.exit(main())
