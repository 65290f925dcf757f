"""Mediator: chat users talk through a room instead of referencing each other."""

from typing import List


class ChatRoom:
    def __init__(self):
        self.users: List["ChatUser"] = []

    def add_user(self, user: "ChatUser") -> None:
        self.users.append(user)

    def send_message(self, message: str, sender: "ChatUser") -> None:
        for user in self.users:
            if user is not sender:
                user.receive(f"[{sender.name}]: {message}")


class ChatUser:
    def __init__(self, name: str, room: ChatRoom):
        self.name = name
        self.room = room
        self.inbox: List[str] = []
        room.add_user(self)

    def send(self, message: str) -> None:
        self.room.send_message(message, self)

    def receive(self, message: str) -> None:
        self.inbox.append(message)


def demo() -> List[str]:
    room = ChatRoom()
    alice = ChatUser("Alice", room)
    bob = ChatUser("Bob", room)
    charlie = ChatUser("Charlie", room)
    alice.send("Hi everyone!")
    bob.send("Hey Alice")

    lines = ["Mediator:"]
    for user in (alice, bob, charlie):
        lines.append(f"  {user.name} received: {user.inbox}")
    return lines
