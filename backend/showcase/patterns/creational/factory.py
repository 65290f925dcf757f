"""Factory Method: ``VehicleFactory`` hides which concrete vehicle is built."""

from abc import ABC, abstractmethod
from typing import Dict, List, Type


class Vehicle(ABC):
    @abstractmethod
    def drive(self) -> str:
        pass


class Car(Vehicle):
    def drive(self) -> str:
        return "Driving a car"


class Bike(Vehicle):
    def drive(self) -> str:
        return "Riding a bike"


class VehicleFactory:
    _types: Dict[str, Type[Vehicle]] = {"car": Car, "bike": Bike}

    def create_vehicle(self, vehicle_type: str) -> Vehicle:
        try:
            return self._types[vehicle_type]()
        except KeyError:
            raise ValueError(f"unknown vehicle type: {vehicle_type}")


def demo() -> List[str]:
    factory = VehicleFactory()
    return ["Factory Method:"] + [
        f"  {factory.create_vehicle(kind).drive()}" for kind in ("car", "bike")
    ]
