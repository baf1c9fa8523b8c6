"""A flow-control window that asks for a refill once enough is used."""

from h2frames import frame_builder


class FlowWindow:
    """Tracks received bytes and produces WINDOW_UPDATE frames when needed."""

    def __init__(self, max_size: int, trigger: int = 1024) -> None:
        self.max_size = max_size
        self.trigger = trigger
        self._size = max_size

    def dec(self, amount: int) -> None:
        """Account for amount bytes received."""
        self._size -= amount

    def need_update(self) -> bool:
        return self.max_size - self._size >= self.trigger

    def update(self, stream_id: int = 0) -> bytes | None:
        """Refill the window, returning the WINDOW_UPDATE frame, or None if not due."""
        if not self.need_update():
            return None
        increment = self.max_size - self._size
        self._size += increment
        return frame_builder.update_window(increment, stream_id)

    def current(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"FlowWindow(max_size={self.max_size}, trigger={self.trigger}, current={self._size})"