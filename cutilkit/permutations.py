"""Step through every string of a fixed length over an alphabet."""

from __future__ import annotations


class Permutations:
    """An odometer over strings of ``input_len`` characters from ``alphabet``.

    The state starts with every position on the first character of the
    alphabet. Incrementing past the last state wraps to the first;
    decrementing stops at the first state.
    """

    def __init__(self, input_len: int, alphabet: str) -> None:
        if input_len < 1:
            raise ValueError("input length must be at least 1")
        if not alphabet:
            raise ValueError("alphabet must not be empty")
        self._alphabet = alphabet
        self._digits = [0] * input_len

    def __str__(self) -> str:
        return "".join(self._alphabet[d] for d in self._digits)

    def __repr__(self) -> str:
        return f"Permutations({len(self._digits)}, {self._alphabet!r}) at {str(self)!r}"

    def current(self) -> tuple[int, ...]:
        """The current state as alphabet indices, one per position."""
        return tuple(self._digits)

    def alphabet(self) -> str:
        """The alphabet the strings are made of."""
        return self._alphabet

    def alphabet_length(self) -> int:
        """Number of characters in the alphabet."""
        return len(self._alphabet)

    def input_size(self) -> int:
        """Length of each generated string."""
        return len(self._digits)

    def inc(self) -> None:
        """Advance to the next state."""
        self.add(1)

    def add(self, num: int) -> None:
        """Advance by ``num`` states, wrapping past the last one."""
        if num < 0:
            raise ValueError("num must be non-negative")
        base = len(self._alphabet)
        for _ in range(num):
            pos = len(self._digits) - 1
            while pos >= 0:
                self._digits[pos] += 1
                if self._digits[pos] < base:
                    break
                self._digits[pos] = 0
                pos -= 1

    def dec(self) -> None:
        """Step back to the previous state."""
        self.sub(1)

    def sub(self, num: int) -> None:
        """Step back by ``num`` states, stopping at the first state."""
        if num < 0:
            raise ValueError("num must be non-negative")
        top = len(self._alphabet) - 1
        for _ in range(num):
            pos = len(self._digits) - 1
            while pos > 0 and self._digits[pos] == 0:
                pos -= 1
            if self._digits[pos] == 0:
                return
            self._digits[pos] -= 1
            for j in range(pos + 1, len(self._digits)):
                self._digits[j] = top