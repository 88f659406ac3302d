"""EVM bytecode disassembler: hex stream → lazy sequence of Instruction."""

from __future__ import annotations

import io
import logging
from typing import IO, Iterator

from evm_disasm.analysis.instruction import (
    Dup,
    Instruction,
    JumpDest,
    Log,
    Push,
    Swap,
    Unknown,
)
from evm_disasm.analysis.opcodes import (
    DUP_RANGE,
    JUMPDEST,
    LOG_RANGE,
    OPCODES,
    PUSH_RANGE,
    SWAP_RANGE,
    is_known,
)
from evm_disasm.analysis.reader import DEFAULT_CHUNK_SIZE, HexReader

logger = logging.getLogger(__name__)


class Disassembler:
    """Decodes one instruction per step from a hex-encoded bytecode stream.

    Iterating yields instructions until the input is exhausted. Decode
    errors propagate to the caller. After exhaustion or an error the
    disassembler is finished; create a new one to decode again.

    Once an unrecognized opcode is seen, every following byte is reported
    as Unknown: past that point there is no telling instructions from data.
    """

    def __init__(self, source: IO[bytes], chunk_size: int = DEFAULT_CHUNK_SIZE):
        self._reader = HexReader(source, chunk_size)
        self._degraded = False
        self._finished = False

    @property
    def offset(self) -> int:
        """Bytes consumed so far, opcodes and push operands alike."""
        return self._reader.position

    @property
    def degraded(self) -> bool:
        return self._degraded

    def __iter__(self) -> Iterator[Instruction]:
        return self

    def __next__(self) -> Instruction:
        instruction = self.next_instruction()
        if instruction is None:
            raise StopIteration
        return instruction

    def next_instruction(self) -> Instruction | None:
        """Decode the next instruction, or return None at end of input."""
        if self._finished:
            return None
        try:
            instruction = self._decode()
        except Exception:
            self._finished = True
            raise
        if instruction is None:
            self._finished = True
            logger.debug("End of input after %d bytes", self.offset)
        return instruction

    def _decode(self) -> Instruction | None:
        op = self._reader.read_one_byte()
        if op is None:
            return None
        # position of the opcode byte itself
        start = self._reader.position - 1

        if self._degraded:
            return Unknown(op)

        if not is_known(op):
            logger.debug(
                "Unknown opcode 0x%02x at offset %d; remaining bytes treated as data",
                op,
                start,
            )
            self._degraded = True
            return Unknown(op)

        if op in PUSH_RANGE:
            size = op - 0x5F
            operand = self._reader.read_bytes(size)
            return Push(size, int.from_bytes(operand, "big"))
        if op in DUP_RANGE:
            return Dup(op - 0x7F)
        if op in SWAP_RANGE:
            return Swap(op - 0x8F)
        if op in LOG_RANGE:
            return Log(op - 0xA0)
        if op == JUMPDEST:
            return JumpDest(start)
        return OPCODES[op]


def disassemble_stream(
    source: IO[bytes], chunk_size: int = DEFAULT_CHUNK_SIZE
) -> Iterator[Instruction]:
    """Lazily disassemble a hex-encoded bytecode stream."""
    return iter(Disassembler(source, chunk_size))


def disassemble(bytecode_hex: str) -> list[Instruction]:
    """Disassemble an EVM bytecode hex string into instructions.

    Accepts a 0x prefix and embedded whitespace. Raises DecodeError on
    malformed hex or a truncated push operand.
    """
    hex_str = bytecode_hex.strip()
    if hex_str.startswith(("0x", "0X")):
        hex_str = hex_str[2:]

    return list(Disassembler(io.BytesIO(hex_str.encode("utf-8"))))
