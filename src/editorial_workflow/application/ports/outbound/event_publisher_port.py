"""领域事件发布出站端口"""

from typing import Protocol, runtime_checkable

from ....domain.events import DomainEvent


@runtime_checkable
class EventPublisherPort(Protocol):
    """事件发布端口"""

    def publish(self, event: DomainEvent) -> None:
        """
        发布领域事件

        Args:
            event: 领域事件
        """
        ...
