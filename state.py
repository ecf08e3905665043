from __future__ import annotations

import logging
from typing import Callable, Generic, List, TypeVar

from conversion import convert

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ObservableValue(Generic[T]):
    """
    A value with subscribers. Assigning a new value notifies every
    subscriber synchronously, in the order they subscribed.
    """

    def __init__(self, initial: T) -> None:
        self._value = initial
        self._subscribers: List[Callable[[T], None]] = []

    @property
    def value(self) -> T:
        return self._value

    def set(self, new_value: T) -> None:
        self._value = new_value
        for callback in list(self._subscribers):
            callback(new_value)

    def subscribe(self, callback: Callable[[T], None]) -> Callable[[], None]:
        """Register callback; returns a function that removes it again."""
        self._subscribers.append(callback)
        logger.debug("Subscribed %r (%d subscriber(s))", callback, len(self._subscribers))

        def unsubscribe() -> None:
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe


class TemperatureInputState:
    """Raw Celsius input plus the Fahrenheit text derived from it."""

    def __init__(self) -> None:
        self.input_text: ObservableValue[str] = ObservableValue("")
        self._output_text: ObservableValue[str] = ObservableValue("")
        self.input_text.subscribe(self._recompute_output)
        logger.debug("Temperature input state created")

    @property
    def output_text(self) -> str:
        return self._output_text.value

    def subscribe_output(self, callback: Callable[[str], None]) -> Callable[[], None]:
        return self._output_text.subscribe(callback)

    def on_input_changed(self, new_text: str) -> None:
        self.input_text.set(new_text)

    def _recompute_output(self, text: str) -> None:
        self._output_text.set(convert(text))
