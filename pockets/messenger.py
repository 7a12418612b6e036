"""Typed-free message passing between messengers and receivers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Tuple


class Receiver(ABC):
    """Receives messages from any number of messengers."""

    def __init__(self) -> None:
        self._messengers: List["Messenger"] = []

    @property
    def messengers(self) -> Tuple["Messenger", ...]:
        return tuple(self._messengers)

    @abstractmethod
    def receive(self, message: Any) -> None:
        """Handle a delivered message."""

    def detach(self) -> None:
        """Stop receiving from every messenger."""
        for messenger in list(self._messengers):
            messenger._remove_destructing_receiver(self)
        self._messengers.clear()

    def _register_messenger(self, messenger: "Messenger") -> None:
        self._messengers.append(messenger)

    def _unregister_messenger(self, messenger: "Messenger") -> None:
        self._messengers = [m for m in self._messengers if m is not messenger]


class Messenger:
    """Delivers messages to its receivers.

    Receivers may be added or removed while a message is being delivered;
    added ones hear from the next delivery on.
    """

    def __init__(self) -> None:
        self._receivers: List[Receiver] = []
        self._removal_queue: List[Receiver] = []
        self._destructed_queue: List[Receiver] = []
        self._delivering = False

    @property
    def receivers(self) -> Tuple[Receiver, ...]:
        return tuple(self._receivers)

    def __enter__(self) -> "Messenger":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    def deliver(self, message: Any) -> None:
        """Send ``message`` to every receiver."""
        self._delivering = True
        try:
            for receiver in list(self._receivers):
                if any(r is receiver for r in self._destructed_queue):
                    continue
                receiver.receive(message)
        finally:
            self._delivering = False
        removals, self._removal_queue = self._removal_queue, []
        for receiver in removals:
            self.remove_receiver(receiver)
        destructed, self._destructed_queue = self._destructed_queue, []
        for receiver in destructed:
            self._remove_destructing_receiver(receiver)

    def append_receiver(self, receiver: Receiver) -> None:
        """Start sending messages to ``receiver``."""
        self._receivers.append(receiver)
        receiver._register_messenger(self)

    def remove_receiver(self, receiver: Receiver) -> None:
        """Stop sending messages to ``receiver``."""
        if self._delivering:
            self._removal_queue.append(receiver)
            return
        receiver._unregister_messenger(self)
        self._receivers = [r for r in self._receivers if r is not receiver]

    def copy_from(self, other: "Messenger") -> "Messenger":
        """Replace this messenger's receivers with those of ``other``."""
        self.close()
        for receiver in list(other._receivers):
            self.append_receiver(receiver)
        return self

    def __copy__(self) -> "Messenger":
        return Messenger().copy_from(self)

    def close(self) -> None:
        """Unregister from every receiver."""
        for receiver in self._receivers:
            receiver._unregister_messenger(self)
        self._receivers = []

    def _remove_destructing_receiver(self, receiver: Receiver) -> None:
        if self._delivering:
            self._destructed_queue.append(receiver)
            return
        self._receivers = [r for r in self._receivers if r is not receiver]