"""
Program-derived addresses for Sealevel (Solana) programs.

A program-derived address (PDA) is derived from seeds and a program ID and is
accepted only if it is NOT a valid ed25519 point, so that no private key can
exist for it. `find_program_address` appends a one-byte "bump" seed, counting
down from 255 to 1, until such an address is found. The hashing and curve
check are done by `solders`.

Example:
    >>> pda, bump = find_program_address(
    ...     ["hyperlane", "-", "outbox"],
    ...     "E588QtVUvresuXq2KoNEwAmoifCzYGpRBdHByN9KQMbi",
    ... )
"""

from typing import Sequence

from solders.pubkey import Pubkey

from .types import AddressDerivationError

MAX_SEED_LENGTH = 32
MAX_SEEDS = 16

Seed = str | bytes


def to_seed_bytes(seed: Seed) -> bytes:
    """Encode a seed (str seeds are UTF-8 encoded)."""
    if isinstance(seed, str):
        return seed.encode()
    return bytes(seed)


def to_pubkey(key: str | Pubkey) -> Pubkey:
    """Parse a base58 address into a Pubkey."""
    if isinstance(key, Pubkey):
        return key
    try:
        return Pubkey.from_string(key)
    except ValueError as e:
        raise AddressDerivationError(f"Invalid program id: {key}") from e


def _check_seeds(seeds: list[bytes], reserved: int = 0) -> None:
    if len(seeds) + reserved > MAX_SEEDS:
        raise AddressDerivationError(
            f"Too many seeds: {len(seeds)} (max {MAX_SEEDS - reserved})"
        )
    for index, seed in enumerate(seeds):
        if len(seed) > MAX_SEED_LENGTH:
            raise AddressDerivationError(
                f"Seed {index} is {len(seed)} bytes (max {MAX_SEED_LENGTH})"
            )


def create_program_address(seeds: Sequence[Seed], program_id: str | Pubkey) -> Pubkey:
    """Derive the address for exact seeds; fails if it lands on the curve."""
    seed_bytes = [to_seed_bytes(seed) for seed in seeds]
    _check_seeds(seed_bytes)
    program = to_pubkey(program_id)

    try:
        return Pubkey.create_program_address(seed_bytes, program)
    except Exception as e:
        raise AddressDerivationError(
            f"Seeds do not give a valid program address: {e}"
        ) from e


def find_program_address(
    seeds: Sequence[Seed], program_id: str | Pubkey
) -> tuple[Pubkey, int]:
    """Find the first off-curve address, searching bumps from 255 down to 1."""
    seed_bytes = [to_seed_bytes(seed) for seed in seeds]
    _check_seeds(seed_bytes, reserved=1)
    program = to_pubkey(program_id)

    # Pubkey.find_program_address panics on exhaustion; bump by bump, a miss
    # is an AddressDerivationError instead.
    for bump in range(255, 0, -1):
        try:
            return create_program_address(seed_bytes + [bytes([bump])], program), bump
        except AddressDerivationError:
            continue

    raise AddressDerivationError("Unable to find a viable program address bump seed")
