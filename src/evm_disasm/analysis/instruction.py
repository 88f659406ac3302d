"""EVM instruction model: one closed set of variants + canonical text rendering."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

MAX_PUSH_SIZE = 32
MAX_STACK_SLOT = 16
MAX_LOG_TOPICS = 4


class Op(str, Enum):
    """Payload-free mnemonics. The value is the rendered text."""

    STOP = "stop"
    ADD = "add"
    MUL = "mul"
    SUB = "sub"
    DIV = "div"
    SDIV = "sdiv"
    MOD = "mod"
    SMOD = "smod"
    ADDMOD = "addmod"
    MULMOD = "mulmod"
    EXP = "exp"
    SIGNEXTEND = "signextend"
    LT = "lt"
    GT = "gt"
    SLT = "slt"
    SGT = "sgt"
    EQ = "eq"
    ISZERO = "iszero"
    AND = "and"
    OR = "or"
    XOR = "xor"
    NOT = "not"
    BYTE = "byte"
    SHL = "shl"
    SHR = "shr"
    SAR = "sar"
    KECCAK256 = "keccak256"
    ADDRESS = "address"
    BALANCE = "balance"
    ORIGIN = "origin"
    CALLER = "caller"
    CALLVALUE = "callvalue"
    CALLDATALOAD = "calldataload"
    CALLDATASIZE = "calldatasize"
    CALLDATACOPY = "calldatacopy"
    CODESIZE = "codesize"
    CODECOPY = "codecopy"
    GASPRICE = "gasprice"
    EXTCODESIZE = "extcodesize"
    EXTCODECOPY = "extcodecopy"
    RETURNDATASIZE = "returndatasize"
    RETURNDATACOPY = "returndatacopy"
    EXTCODEHASH = "extcodehash"
    BLOCKHASH = "blockhash"
    COINBASE = "coinbase"
    TIMESTAMP = "timestamp"
    NUMBER = "number"
    DIFFICULTY = "difficulty"
    GASLIMIT = "gaslimit"
    CHAINID = "chainid"
    POP = "pop"
    MLOAD = "mload"
    MSTORE = "mstore"
    MSTORE8 = "mstore8"
    SLOAD = "sload"
    SSTORE = "sstore"
    JUMP = "jump"
    JUMPI = "jumpi"
    GETPC = "getpc"
    MSIZE = "msize"
    GAS = "gas"
    CREATE = "create"
    CALL = "call"
    CALLCODE = "callcode"
    RETURN = "return"
    DELEGATECALL = "delegatecall"
    CREATE2 = "create2"
    STATICCALL = "staticcall"
    REVERT = "revert"
    INVALID = "invalid"
    SELFDESTRUCT = "selfdestruct"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class JumpDest:
    offset: int  # decoded-byte position of the 0x5b opcode

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError(f"jumpdest offset must be non-negative, got {self.offset}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Push:
    size: int
    value: int  # big-endian operand, always fits in size bytes (<= 256 bits)

    def __post_init__(self) -> None:
        if not 1 <= self.size <= MAX_PUSH_SIZE:
            raise ValueError(f"push size must be 1..{MAX_PUSH_SIZE}, got {self.size}")
        if not 0 <= self.value < 1 << (8 * self.size):
            raise ValueError(f"push value does not fit in {self.size} bytes")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Dup:
    n: int

    def __post_init__(self) -> None:
        if not 1 <= self.n <= MAX_STACK_SLOT:
            raise ValueError(f"dup slot must be 1..{MAX_STACK_SLOT}, got {self.n}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Swap:
    n: int

    def __post_init__(self) -> None:
        if not 1 <= self.n <= MAX_STACK_SLOT:
            raise ValueError(f"swap slot must be 1..{MAX_STACK_SLOT}, got {self.n}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Log:
    n: int  # topic count

    def __post_init__(self) -> None:
        if not 0 <= self.n <= MAX_LOG_TOPICS:
            raise ValueError(f"log topics must be 0..{MAX_LOG_TOPICS}, got {self.n}")

    def __str__(self) -> str:
        return render(self)


@dataclass(frozen=True, slots=True)
class Unknown:
    """Opaque byte: an unrecognized opcode or anything that follows one."""

    byte: int

    def __post_init__(self) -> None:
        if not 0 <= self.byte <= 0xFF:
            raise ValueError(f"unknown byte must be 0..255, got {self.byte}")

    def __str__(self) -> str:
        return render(self)


Instruction = Op | JumpDest | Push | Dup | Swap | Log | Unknown


def render(instruction: Instruction) -> str:
    """Return the canonical single-line lowercase text of an instruction."""
    match instruction:
        case Op():
            return instruction.value
        case JumpDest(offset=offset):
            return f"jumpdest :{offset:x}"
        case Push(size=size, value=value):
            return f"push{size} {value:0{size * 2}x}"
        case Dup(n=n):
            return f"dup{n}"
        case Swap(n=n):
            return f"swap{n}"
        case Log(n=n):
            return f"log{n}"
        case Unknown(byte=byte):
            return f"?{byte:02x}?"
    raise TypeError(f"not an instruction: {instruction!r}")
