"""
Bridge: remotes (abstraction) and devices (implementation) vary
independently. Any remote drives any device.
"""

from abc import ABC, abstractmethod
from typing import List

MIN_VOLUME = 0
MAX_VOLUME = 100


class Device(ABC):
    label = "Device"
    channel_word = "Channel"

    def __init__(self):
        self.on = False
        self.volume = 30
        self.channel = 1
        self.log: List[str] = []

    def is_enabled(self) -> bool:
        return self.on

    def enable(self) -> None:
        self.on = True
        self.log.append(f"{self.label}: Turned ON")

    def disable(self) -> None:
        self.on = False
        self.log.append(f"{self.label}: Turned OFF")

    def set_volume(self, percent: int) -> None:
        self.volume = max(MIN_VOLUME, min(MAX_VOLUME, percent))
        self.log.append(f"{self.label}: Volume set to {self.volume}%")

    def set_channel(self, channel: int) -> None:
        self.channel = channel
        self.log.append(f"{self.label}: {self.channel_word} set to {channel}")

    @abstractmethod
    def describe(self) -> str: ...


class TV(Device):
    label = "TV"

    def describe(self) -> str:
        return f"TV on={self.on} volume={self.volume} channel={self.channel}"


class Radio(Device):
    label = "Radio"
    channel_word = "Station"

    def describe(self) -> str:
        return f"Radio on={self.on} volume={self.volume} station={self.channel}"


class Remote:
    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_down(self) -> None:
        self.device.set_volume(self.device.volume - 10)

    def volume_up(self) -> None:
        self.device.set_volume(self.device.volume + 10)

    def channel_down(self) -> None:
        self.device.set_channel(self.device.channel - 1)

    def channel_up(self) -> None:
        self.device.set_channel(self.device.channel + 1)


class AdvancedRemote(Remote):
    def mute(self) -> None:
        self.device.set_volume(0)

    def go_to_channel(self, channel: int) -> None:
        self.device.set_channel(channel)


def demo() -> List[str]:
    tv = TV()
    remote = Remote(tv)
    remote.toggle_power()
    remote.volume_up()
    remote.channel_up()

    radio = Radio()
    advanced = AdvancedRemote(radio)
    advanced.toggle_power()
    advanced.go_to_channel(101)
    advanced.mute()

    return ["Bridge:"] + [f"  {line}" for line in tv.log + radio.log]
