"""Observer: displays follow a weather station's temperature."""

from abc import ABC, abstractmethod
from typing import List


class Observer(ABC):
    @abstractmethod
    def update(self, temperature: float) -> None: ...


class WeatherStation:
    def __init__(self):
        self._observers: List[Observer] = []
        self.temperature: float = 0.0

    def attach(self, observer: Observer) -> None:
        if observer not in self._observers:
            self._observers.append(observer)

    def detach(self, observer: Observer) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self) -> None:
        for observer in list(self._observers):
            observer.update(self.temperature)

    def set_temperature(self, temperature: float) -> None:
        self.temperature = temperature
        self.notify()


class PhoneDisplay(Observer):
    def __init__(self):
        self.readings: List[str] = []

    def update(self, temperature: float) -> None:
        self.readings.append(f"Phone display: {temperature:.1f}°C")


class WebDisplay(Observer):
    def __init__(self):
        self.readings: List[str] = []

    def update(self, temperature: float) -> None:
        self.readings.append(f"Web display: {temperature:.1f}°C")


def demo() -> List[str]:
    station = WeatherStation()
    phone = PhoneDisplay()
    web = WebDisplay()
    station.attach(phone)
    station.attach(web)
    station.set_temperature(25.0)
    station.detach(web)
    station.set_temperature(30.5)
    return ["Observer:"] + [f"  {r}" for r in phone.readings + web.readings]
