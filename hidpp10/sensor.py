"""Conversions between DPI and the sensor's internal resolution values."""

from __future__ import annotations

from abc import ABC, abstractmethod
from bisect import bisect_left
from collections.abc import Iterable, Iterator


class Sensor(ABC):
    """A mouse sensor with its own encoding of resolutions."""

    @abstractmethod
    def from_dpi(self, dpi: int) -> int:
        """Return the internal value nearest to *dpi*."""

    @abstractmethod
    def to_dpi(self, internal_value: int) -> int:
        """Return the resolution in DPI for an internal value."""

    @abstractmethod
    def minimum_resolution(self) -> int:
        """Return the lowest supported resolution."""

    @abstractmethod
    def maximum_resolution(self) -> int:
        """Return the highest supported resolution."""


class ListSensor(Sensor):
    """A sensor whose resolutions are indices into a sorted list, flagged with 0x80."""

    def __init__(self, resolutions: Iterable[int]) -> None:
        self._resolutions = tuple(resolutions)
        if not self._resolutions:
            raise ValueError("a sensor needs at least one resolution")

    @classmethod
    def from_range(cls, first: int, last: int, step: int) -> ListSensor:
        return cls(range(first, last + 1, step))

    def from_dpi(self, dpi: int) -> int:
        res = self._resolutions
        low, high = 0, len(res) - 1
        # 0 is not a valid resolution
        if res[low] == 0 and low < high:
            low += 1
        if dpi < res[low]:
            nearest = low
        elif dpi > res[high]:
            nearest = high
        else:
            i = bisect_left(res, dpi, low, high)
            if res[i] == dpi:
                nearest = i
            elif res[i] - dpi < dpi - res[i - 1]:
                nearest = i
            else:
                nearest = i - 1
        return 0x80 | (nearest & 0x7F)

    def to_dpi(self, internal_value: int) -> int:
        if internal_value == 0:
            return 0
        if not internal_value & 0x80:
            raise ValueError("Invalid resolution value")
        return self._resolutions[internal_value & 0x7F]

    def minimum_resolution(self) -> int:
        return min(self._resolutions)

    def maximum_resolution(self) -> int:
        return max(self._resolutions)

    def __iter__(self) -> Iterator[int]:
        return iter(self._resolutions)

    def __len__(self) -> int:
        return len(self._resolutions)


class RangeSensor(Sensor):
    """A sensor whose internal value is the DPI scaled by a fixed ratio."""

    def __init__(
        self,
        minimum: int,
        maximum: int,
        step: int,
        ratio_dividend: int,
        ratio_divisor: int,
    ) -> None:
        self._min = minimum
        self._max = maximum
        self._step = step
        self._dividend = ratio_dividend
        self._divisor = ratio_divisor

    def from_dpi(self, dpi: int) -> int:
        dpi = min(max(dpi, self._min), self._max)
        return (dpi * self._dividend + self._divisor // 2) // self._divisor

    def to_dpi(self, internal_value: int) -> int:
        if internal_value == 0:
            return 0
        dpi = (internal_value * self._divisor + self._dividend // 2) // self._dividend
        return min(dpi, self._max)

    def minimum_resolution(self) -> int:
        return self._min

    def maximum_resolution(self) -> int:
        return self._max

    def resolution_step_hint(self) -> int:
        return self._step


S6006 = ListSensor((400, 800, 1600, 2000))
S6090 = ListSensor.from_range(0, 3200, 200)
S9500 = RangeSensor(200, 5700, 50, 17, 400)
S9808 = RangeSensor(200, 8200, 50, 1, 50)