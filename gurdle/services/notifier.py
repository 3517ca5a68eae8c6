"""
Change Notifier

Synchronous publish/subscribe used by the game model to tell presentation
layers that its state changed.
"""

from typing import Any, Callable, List

Observer = Callable[[Any, str], None]


class ChangeNotifier:
    """
    Ordered list of observer callables.

    Each observer is called as ``observer(subject, reason)``. Delivery is
    synchronous: all observers run, in registration order, before
    ``notify`` returns.
    """

    def __init__(self):
        self._observers: List[Observer] = []

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> bool:
        """Unsubscribe an observer. Returns False if it was not registered."""
        try:
            self._observers.remove(observer)
            return True
        except ValueError:
            return False

    def notify(self, subject: Any, reason: str) -> None:
        # Iterate over a copy so observers may unsubscribe while being notified
        for observer in list(self._observers):
            observer(subject, reason)

    def __len__(self) -> int:
        return len(self._observers)
