"""Small deterministic xorshift pseudo-random generator."""

_MASK32 = 0xFFFF_FFFF


class XorShiftRng:
    """Marsaglia xorshift generator with 32 bits of state.

    A seed of zero yields a generator that only ever produces zero.
    """

    __slots__ = ("_state",)

    def __init__(self, seed):
        self._state = seed & _MASK32

    def next_u32(self):
        """Advance the state and return it as an unsigned 32-bit integer."""
        state = self._state
        state ^= (state << 13) & _MASK32
        state ^= state >> 17
        state ^= (state << 5) & _MASK32
        self._state = state
        return state

    def next_u16(self):
        """Return the low 16 bits of the next 32-bit value."""
        return self.next_u32() & 0xFFFF

    def next_u8(self):
        """Return the low 8 bits of the next 32-bit value."""
        return self.next_u32() & 0xFF

    def next_bool(self):
        """Return True when the lowest bit of the next byte is set."""
        return self.next_u8() & 1 == 1