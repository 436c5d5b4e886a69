from typing import Protocol, runtime_checkable


@runtime_checkable
class Playable(Protocol):
    def play(self) -> None:
        """
        Marks the item as played. Must be safe to call more than once.
        """
        ...
