"""
Template Method: ``DataProcessor.process`` fixes the read -> process -> write
skeleton; subclasses fill in the steps for their file format.
"""

from abc import ABC, abstractmethod
from typing import List


class DataProcessor(ABC):
    def __init__(self, filename: str):
        self.filename = filename
        self.steps: List[str] = []

    def process(self) -> List[str]:
        data = self.read_data()
        result = self.process_data(data)
        self.write_data(result)
        return list(self.steps)

    @abstractmethod
    def read_data(self) -> str: ...

    def process_data(self, data: str) -> str:
        self.steps.append(f"Processing {data}")
        return "processed_" + data

    @abstractmethod
    def write_data(self, data: str) -> None: ...


class CSVProcessor(DataProcessor):
    def read_data(self) -> str:
        self.steps.append(f"Reading CSV file: {self.filename}")
        return "csv_data"

    def write_data(self, data: str) -> None:
        self.steps.append(f"Writing CSV output: {data}")


class JSONProcessor(DataProcessor):
    def read_data(self) -> str:
        self.steps.append(f"Reading JSON file: {self.filename}")
        return "json_data"

    def write_data(self, data: str) -> None:
        self.steps.append(f"Writing JSON output: {data}")


def demo() -> List[str]:
    lines = ["Template Method:"]
    for processor in (CSVProcessor("data.csv"), JSONProcessor("data.json")):
        lines += [f"  {step}" for step in processor.process()]
    return lines
