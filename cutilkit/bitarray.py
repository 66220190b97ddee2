"""A fixed-size array of bits."""

from __future__ import annotations


class BitArray:
    """A fixed number of bits, all cleared at creation.

    Bit ``k`` lives in byte ``k // 8`` at position ``k % 8``, least
    significant bit first.
    """

    def __init__(self, bits: int) -> None:
        if bits < 0:
            raise ValueError("number of bits must be non-negative")
        self._bits = bits
        self._arr = bytearray(-(-bits // 8))

    def __len__(self) -> int:
        return self._bits

    def __str__(self) -> str:
        return "".join("1" if self._get(bit) else "0" for bit in range(self._bits))

    def __repr__(self) -> str:
        return f"BitArray({self._bits})"

    def array_size(self) -> int:
        """Number of bytes used to hold the bits."""
        return len(self._arr)

    def to_bytes(self) -> bytes:
        """The underlying bytes, read-only."""
        return bytes(self._arr)

    def _check_index(self, bit: int) -> None:
        if not 0 <= bit < self._bits:
            raise IndexError(f"bit {bit} out of range for {self._bits} bits")

    def _get(self, bit: int) -> bool:
        return bool(self._arr[bit // 8] & (1 << (bit % 8)))

    def set_bit(self, bit: int) -> bool:
        """Set ``bit`` to 1; returns True."""
        self._check_index(bit)
        self._arr[bit // 8] |= 1 << (bit % 8)
        return True

    def check_bit(self, bit: int) -> bool:
        """Return whether ``bit`` is set."""
        self._check_index(bit)
        return self._get(bit)

    def check_and_set_bit(self, bit: int) -> bool:
        """Set ``bit`` and return whether it was set before."""
        self._check_index(bit)
        previous = self._get(bit)
        self._arr[bit // 8] |= 1 << (bit % 8)
        return previous

    def toggle_bit(self, bit: int) -> bool:
        """Flip ``bit`` and return its new value."""
        self._check_index(bit)
        self._arr[bit // 8] ^= 1 << (bit % 8)
        return self._get(bit)

    def clear_bit(self, bit: int) -> bool:
        """Set ``bit`` to 0; returns False."""
        self._check_index(bit)
        self._arr[bit // 8] &= ~(1 << (bit % 8)) & 0xFF
        return False

    def reset(self) -> bool:
        """Clear every bit; returns False."""
        self._arr[:] = bytes(len(self._arr))
        return False

    def number_bits_set(self) -> int:
        """Count the bits that are set."""
        return sum(byte.bit_count() for byte in self._arr)