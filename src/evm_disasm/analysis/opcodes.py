"""EVM opcode decode table: int → payload-free Op, plus the computed-payload ranges."""

from __future__ import annotations

from evm_disasm.analysis.instruction import Op

JUMPDEST = 0x5B

# Inclusive ranges whose payload is computed from the opcode byte
PUSH_RANGE = range(0x60, 0x7F + 1)  # push1..push32, size = opcode - 0x5f
DUP_RANGE = range(0x80, 0x8F + 1)  # dup1..dup16, n = opcode - 0x7f
SWAP_RANGE = range(0x90, 0x9F + 1)  # swap1..swap16, n = opcode - 0x8f
LOG_RANGE = range(0xA0, 0xA4 + 1)  # log0..log4, n = opcode - 0xa0

OPCODES: dict[int, Op] = {
    # Stop & arithmetic
    0x00: Op.STOP,
    0x01: Op.ADD,
    0x02: Op.MUL,
    0x03: Op.SUB,
    0x04: Op.DIV,
    0x05: Op.SDIV,
    0x06: Op.MOD,
    0x07: Op.SMOD,
    0x08: Op.ADDMOD,
    0x09: Op.MULMOD,
    0x0A: Op.EXP,
    0x0B: Op.SIGNEXTEND,
    # Comparison & bitwise
    0x10: Op.LT,
    0x11: Op.GT,
    0x12: Op.SLT,
    0x13: Op.SGT,
    0x14: Op.EQ,
    0x15: Op.ISZERO,
    0x16: Op.AND,
    0x17: Op.OR,
    0x18: Op.XOR,
    0x19: Op.NOT,
    0x1A: Op.BYTE,
    0x1B: Op.SHL,
    0x1C: Op.SHR,
    0x1D: Op.SAR,
    # Hashing
    0x20: Op.KECCAK256,
    # Environmental
    0x30: Op.ADDRESS,
    0x31: Op.BALANCE,
    0x32: Op.ORIGIN,
    0x33: Op.CALLER,
    0x34: Op.CALLVALUE,
    0x35: Op.CALLDATALOAD,
    0x36: Op.CALLDATASIZE,
    0x37: Op.CALLDATACOPY,
    0x38: Op.CODESIZE,
    0x39: Op.CODECOPY,
    0x3A: Op.GASPRICE,
    0x3B: Op.EXTCODESIZE,
    0x3C: Op.EXTCODECOPY,
    0x3D: Op.RETURNDATASIZE,
    0x3E: Op.RETURNDATACOPY,
    0x3F: Op.EXTCODEHASH,
    # Block
    0x40: Op.BLOCKHASH,
    0x41: Op.COINBASE,
    0x42: Op.TIMESTAMP,
    0x43: Op.NUMBER,
    0x44: Op.DIFFICULTY,
    0x45: Op.GASLIMIT,
    0x46: Op.CHAINID,
    # Stack / memory / storage / control
    0x50: Op.POP,
    0x51: Op.MLOAD,
    0x52: Op.MSTORE,
    0x53: Op.MSTORE8,
    0x54: Op.SLOAD,
    0x55: Op.SSTORE,
    0x56: Op.JUMP,
    0x57: Op.JUMPI,
    0x58: Op.GETPC,
    0x59: Op.MSIZE,
    0x5A: Op.GAS,
    # System
    0xF0: Op.CREATE,
    0xF1: Op.CALL,
    0xF2: Op.CALLCODE,
    0xF3: Op.RETURN,
    0xF4: Op.DELEGATECALL,
    0xF5: Op.CREATE2,
    0xFA: Op.STATICCALL,
    0xFD: Op.REVERT,
    0xFE: Op.INVALID,
    0xFF: Op.SELFDESTRUCT,
}


def is_known(opcode: int) -> bool:
    """True if the decoder recognizes the opcode (payload-free or computed)."""
    return (
        opcode in OPCODES
        or opcode == JUMPDEST
        or opcode in PUSH_RANGE
        or opcode in DUP_RANGE
        or opcode in SWAP_RANGE
        or opcode in LOG_RANGE
    )
