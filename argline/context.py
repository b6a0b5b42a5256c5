"""
Token cursor used by a single parse pass.

A Context walks the raw tokens forward only. The one mutation it allows is
prepend(), which re-injects a token right at the cursor so it becomes the next
value returned by next(); the engine uses it to hand the value half of a
"name=value" token to whichever argument claims the name. Re-injected tokens
are not user tokens: they never move `position`, so fault messages keep
naming the token the user actually typed.
"""
from .faults import ExhaustedError, FaultCode, getdoc


class Context:
    """
    Forward cursor over the raw tokens with push-back at the cursor.

    Invariants
    - position counts consumed input tokens only; it grows by one per next()
      that reads from the input and never for a re-injected token.
    - prepend() makes its token the very next one without touching the input.
    - at_end() is True iff next() would fail.
    """

    def __init__(self, tokens=(), /):
        if isinstance(tokens, str):
            raise TypeError("context tokens must be an iterable of strings, not a string")
        self._tokens = []
        for token in tokens:
            if not isinstance(token, str):
                raise TypeError("context tokens must be strings")
            self._tokens.append(token)
        self._pending = []
        self._position = 0

    @property
    def position(self):
        """
        Number of input tokens consumed so far (also the 1-based ordinal of the last one).
        """
        return self._position

    def next(self):
        if self._pending:
            return self._pending.pop()
        if self.at_end():
            raise ExhaustedError(
                "no more tokens to read after %d consumed" % self._position,
                title="tokens exhausted",
                code=FaultCode.EXHAUSTED_TOKENS,
                index=self._position,
                docs=getdoc(FaultCode.EXHAUSTED_TOKENS),
            )
        token = self._tokens[self._position]
        self._position += 1
        return token

    def prepend(self, token, /):
        if not isinstance(token, str):
            raise TypeError("prepend() argument must be a string")
        # Last in, first out: the latest push-back is the next token.
        self._pending.append(token)

    def at_end(self):
        return not self._pending and self._position >= len(self._tokens)

    def __len__(self):
        # Remaining tokens, re-injected ones included.
        return len(self._pending) + len(self._tokens) - self._position

    def __repr__(self):
        return "context(position=%d, remaining=%r)" % (
            self._position, self._pending[::-1] + self._tokens[self._position:]
        )


__all__ = (
    "Context",
)
