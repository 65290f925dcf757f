"""Facade: one call hides a multi-step subsystem (computer boot, video conversion)."""

from typing import List

BOOT_ADDRESS = 0
BOOT_SECTOR = 0
SECTOR_SIZE = 1024


class CPU:
    def __init__(self, log: List[str]):
        self.log = log

    def freeze(self) -> None:
        self.log.append("CPU: Freezing")

    def jump(self, position: int) -> None:
        self.log.append(f"CPU: Jumping to position {position}")

    def execute(self) -> None:
        self.log.append("CPU: Executing")


class Memory:
    def __init__(self, log: List[str]):
        self.log = log

    def load(self, position: int, data: str) -> None:
        self.log.append(f"Memory: Loading '{data}' at position {position}")


class HardDrive:
    def __init__(self, log: List[str]):
        self.log = log

    def read(self, sector: int, size: int) -> str:
        self.log.append(f"HardDrive: Reading sector {sector} ({size} bytes)")
        return "boot_data"


class ComputerFacade:
    def __init__(self):
        self.log: List[str] = []
        self.cpu = CPU(self.log)
        self.memory = Memory(self.log)
        self.hard_drive = HardDrive(self.log)

    def start(self) -> List[str]:
        self.cpu.freeze()
        self.memory.load(BOOT_ADDRESS, self.hard_drive.read(BOOT_SECTOR, SECTOR_SIZE))
        self.cpu.jump(BOOT_ADDRESS)
        self.cpu.execute()
        return list(self.log)


class VideoConversionFacade:
    SUPPORTED = ("mp4", "ogg")

    def convert_video(self, filename: str, target_format: str) -> str:
        if target_format not in self.SUPPORTED:
            raise ValueError(f"unsupported target format: {target_format}")
        source_codec = filename.rsplit(".", 1)[-1] if "." in filename else "unknown"
        stem = filename.rsplit(".", 1)[0]
        return f"{stem}.{target_format} (converted from {source_codec}, audio fixed)"


def demo() -> List[str]:
    return (
        ["Facade:"]
        + [f"  {line}" for line in ComputerFacade().start()]
        + [f"  {VideoConversionFacade().convert_video('funny-cats.ogg', 'mp4')}"]
    )
