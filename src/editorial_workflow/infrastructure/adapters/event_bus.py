"""进程内事件总线

实现 EventPublisherPort：按事件类型分发给订阅者，并保留最近发布的事件（最多 history_limit 条，超出后丢弃最早的）。
"""

from __future__ import annotations

import threading
from collections import defaultdict, deque
from collections.abc import Callable

from loguru import logger

from ...domain.events import DomainEvent
from ...shared.constants import EVENT_HISTORY_LIMIT

EventHandler = Callable[[DomainEvent], None]


class InMemoryEventBus:
    """内存事件总线"""

    def __init__(self, keep_history: bool = True, history_limit: int = EVENT_HISTORY_LIMIT):
        self._lock = threading.Lock()
        self._handlers: dict[type[DomainEvent], list[EventHandler]] = defaultdict(list)
        self._keep_history = keep_history
        self._history: deque[DomainEvent] = deque(maxlen=history_limit)

    def subscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        """订阅事件（订阅 DomainEvent 即接收所有事件）"""
        with self._lock:
            self._handlers[event_type].append(handler)

    def unsubscribe(self, event_type: type[DomainEvent], handler: EventHandler) -> None:
        with self._lock:
            if handler in self._handlers.get(event_type, []):
                self._handlers[event_type].remove(handler)

    def publish(self, event: DomainEvent) -> None:
        with self._lock:
            if self._keep_history:
                self._history.append(event)
            handlers = [
                handler
                for event_type, registered in self._handlers.items()
                if isinstance(event, event_type)
                for handler in registered
            ]

        logger.debug(f"发布领域事件: {event.name} -> {len(handlers)} 个订阅者")

        for handler in handlers:
            try:
                handler(event)
            except Exception as e:
                # 单个订阅者失败不影响其他订阅者
                logger.warning(f"事件处理失败 {event.name}: {e}")

    @property
    def history(self) -> list[DomainEvent]:
        """最近发布的事件（按发布顺序）"""
        with self._lock:
            return list(self._history)

    def clear(self) -> None:
        with self._lock:
            self._history.clear()
