from cypress_mcp.domain.value_objects.run_record import OUTPUT_BYTE_BUDGET


class BoundedOutput:
    """Keeps the first ``budget`` bytes of a stream and counts the rest."""

    def __init__(self, budget: int = OUTPUT_BYTE_BUDGET) -> None:
        self.budget = budget
        self.total_bytes = 0
        self._buffer = bytearray()

    def feed(self, chunk: bytes) -> None:
        self.total_bytes += len(chunk)
        room = self.budget - len(self._buffer)
        if room > 0:
            self._buffer.extend(chunk[:room])

    @property
    def truncated(self) -> bool:
        return self.total_bytes > self.budget

    def text(self) -> str:
        # A multi-byte character cut at the budget boundary is dropped, so
        # the result never encodes to more than budget bytes.
        return bytes(self._buffer).decode("utf-8", errors="ignore")
