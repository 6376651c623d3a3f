"""UserData buffer backing the key/value section of a log line."""


class UserData:
    """Append-only store of interleaved keys and values.

    Keys are not required to be unique; duplicates are kept in order.
    """

    def __init__(self):
        self._items: list[str | None] = []

    def append(self, value: str | None) -> None:
        """Append a single key or value entry."""
        self._items.append(value)

    def add_pair(self, key: str, value: str | None) -> None:
        """Append a key followed by its value."""
        self._items.append(key)
        self._items.append(value)

    def get(self, index: int) -> str | None:
        """Get the entry at ``index``; raises IndexError when out of range."""
        if index < 0 or index >= len(self._items):
            raise IndexError(
                f"UserData index {index} out of range for size {len(self._items)}"
            )
        return self._items[index]

    def size(self) -> int:
        """Number of entries (twice the number of pairs)."""
        return len(self._items)

    def pair_count(self) -> int:
        return len(self._items) // 2

    def snapshot(self) -> tuple[list[str | None], int]:
        """Live backing list paired with the number of valid entries."""
        return self._items, len(self._items)

    def __len__(self) -> int:
        return len(self._items)
