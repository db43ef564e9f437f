from dataclasses import dataclass, field
from enum import Enum

from graphclone import CONTINUE, Cloner, clone, clone_deep, clone_deep_with
from graphclone.config import CloneSettings


class TaskStatus(Enum):
    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    COMPLETED = "completed"


@dataclass
class Task:
    description: str
    status: TaskStatus


@dataclass
class Agent:
    """An agent holding tasks, a peer list, and a live connection handle."""

    name: str
    tasks: list[Task] = field(default_factory=list)
    peers: list["Agent"] = field(default_factory=list)
    connection: object = None


def main() -> None:
    alice = Agent("alice", [Task("Write report", TaskStatus.PENDING)])
    bob = Agent("bob", [Task("Review report", TaskStatus.PENDING)])
    alice.peers.append(bob)
    bob.peers.append(alice)  # cycle

    # Deep clone: the whole graph is copied, the cycle is preserved
    snapshot = clone_deep(alice)
    snapshot.tasks[0].status = TaskStatus.COMPLETED
    print(f"Original status: {alice.tasks[0].status.value}")
    print(f"Snapshot status: {snapshot.tasks[0].status.value}")
    print(f"Cycle preserved: {snapshot.peers[0].peers[0] is snapshot}")

    # Shallow clone: new agent, same task list
    shallow = clone(alice)
    print(f"Shallow shares tasks: {shallow.tasks is alice.tasks}")

    # Customizer: keep live handles by reference instead of copying them
    alice.connection = object()

    def keep_connections(value, key=None, parent=None, registry=None):
        return value if key == "connection" else CONTINUE

    handled = clone_deep_with(alice, keep_connections)
    print(f"Connection shared: {handled.connection is alice.connection}")

    # Configured cloner: settings from GRAPHCLONE_* environment variables
    cloner = Cloner.from_settings(CloneSettings(flatten=True))
    flat = cloner(bob)
    print(f"Flattened to: {type(flat).__name__} with keys {sorted(vars(flat))}")


if __name__ == "__main__":
    main()
