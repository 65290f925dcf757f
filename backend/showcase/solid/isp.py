"""
Interface Segregation Principle.

``WorkerBad`` forces a robot to implement eating and sleeping. The small
role interfaces let each class implement only what it can do.
"""

from abc import ABC, abstractmethod
from typing import List


class WorkerBad(ABC):
    @abstractmethod
    def work(self) -> str: ...

    @abstractmethod
    def eat(self) -> str: ...

    @abstractmethod
    def sleep(self) -> str: ...

    @abstractmethod
    def code(self) -> str: ...

    @abstractmethod
    def manage(self) -> str: ...


class RobotBad(WorkerBad):
    def work(self) -> str:
        return "robot working"

    def eat(self) -> str:
        raise NotImplementedError("robots don't eat")

    def sleep(self) -> str:
        raise NotImplementedError("robots don't sleep")

    def code(self) -> str:
        return "robot coding"

    def manage(self) -> str:
        raise NotImplementedError("this robot doesn't manage")


class Workable(ABC):
    @abstractmethod
    def work(self) -> str: ...


class Eater(ABC):
    @abstractmethod
    def eat(self) -> str: ...


class Sleeper(ABC):
    @abstractmethod
    def sleep(self) -> str: ...


class Coder(ABC):
    @abstractmethod
    def code(self) -> str: ...


class Managing(ABC):
    @abstractmethod
    def manage(self) -> str: ...


class Human(Workable, Eater, Sleeper, Coder, Managing):
    def __init__(self, name: str):
        self.name = name

    def work(self) -> str:
        return f"{self.name} working"

    def eat(self) -> str:
        return f"{self.name} eating"

    def sleep(self) -> str:
        return f"{self.name} sleeping"

    def code(self) -> str:
        return f"{self.name} coding"

    def manage(self) -> str:
        return f"{self.name} managing"


class Robot(Workable, Coder):
    def __init__(self, robot_id: str):
        self.robot_id = robot_id

    def work(self) -> str:
        return f"robot {self.robot_id} working"

    def code(self) -> str:
        return f"robot {self.robot_id} coding"


def do_work(worker: Workable) -> str:
    return worker.work()


def feed_worker(eater: Eater) -> str:
    return eater.eat()


def demo() -> List[str]:
    alice = Human("Alice")
    r2 = Robot("R2")
    return [
        "ISP: clients depend only on the methods they use",
        f"  {do_work(alice)}",
        f"  {do_work(r2)}",
        f"  {feed_worker(alice)}",
        f"  robot is an Eater: {isinstance(r2, Eater)}",
    ]
