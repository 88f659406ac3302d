"""Hardcoded bytecode fixtures for testing.

Short hand-assembled samples, not full bytecodes of real contracts.
"""

# PUSH1 0x80 PUSH1 0x40 MSTORE: the standard Solidity prologue
PROLOGUE = "6080604052"

# Minimal ERC-20 dispatcher fragment with a jump destination
DISPATCHER = (
    "6080604052"          # PUSH1 0x80 PUSH1 0x40 MSTORE
    "600436"              # PUSH1 0x04 CALLDATASIZE
    "10"                  # LT
    "61001957"            # PUSH2 0x0019 JUMPI
    "6000"                # PUSH1 0x00
    "35"                  # CALLDATALOAD
    "60e0"                # PUSH1 0xe0
    "1c"                  # SHR
    "63a9059cbb"          # PUSH4 transfer
    "14"                  # EQ
    "5b"                  # JUMPDEST (offset 0x19)
    "00"                  # STOP
)

DISPATCHER_LISTING = [
    "push1 80",
    "push1 40",
    "mstore",
    "push1 04",
    "calldatasize",
    "lt",
    "push2 0019",
    "jumpi",
    "push1 00",
    "calldataload",
    "push1 e0",
    "shr",
    "push4 a9059cbb",
    "eq",
    "jumpdest :19",
    "stop",
]

# Runtime code followed by Solidity CBOR metadata: 0xa2 is log2, 0x63 push4,
# then 'ipfs' and GETPC; the unassigned 0x22 degrades everything after it.
WITH_METADATA = (
    "6080604052"          # PUSH1 0x80 PUSH1 0x40 MSTORE
    "fe"                  # INVALID (separates code from metadata)
    "a2"                  # LOG2
    "6369706673"          # PUSH4 'ipfs'
    "5822"                # GETPC, then unknown 0x22
    "1220"                # would be SLT KECCAK256 if decoded normally
)

# PUSH32 of the EIP-1967 implementation slot, SLOAD, DELEGATECALL
PROXY = (
    "7f"
    "360894a13ba1a3210667c828492db98dca3e2076cc3735a920a3ca505d382bbc"
    "54"
    "f4"
)
