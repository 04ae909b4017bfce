# pathology/planning/frontier.py
import heapq
import itertools
from abc import ABC, abstractmethod
from collections import deque
from operator import attrgetter
from typing import Any, Callable, Generic, List, Optional, Tuple, TypeVar

T = TypeVar("T")


class Frontier(ABC, Generic[T]):
    """
    OpenSet 抽象: 只有 push / pop 两个操作
    pop 在为空时返回 None (而不是抛异常)，驱动循环据此终止。
    """

    @abstractmethod
    def push(self, node: T) -> None:
        pass

    @abstractmethod
    def pop(self) -> Optional[T]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    def __bool__(self) -> bool:
        return len(self) > 0


class LifoFrontier(Frontier[T]):
    """栈: 后进先出 (迭代加深)"""

    def __init__(self):
        self._stack: List[T] = []

    def push(self, node: T) -> None:
        self._stack.append(node)

    def pop(self) -> Optional[T]:
        return self._stack.pop() if self._stack else None

    def __len__(self) -> int:
        return len(self._stack)


class FifoFrontier(Frontier[T]):
    """队列: 先进先出，保持发现顺序 (广度搜索)"""

    def __init__(self):
        self._queue: deque = deque()

    def push(self, node: T) -> None:
        self._queue.append(node)

    def pop(self) -> Optional[T]:
        return self._queue.popleft() if self._queue else None

    def __len__(self) -> int:
        return len(self._queue)


class PriorityFrontier(Frontier[T]):
    """
    优先队列: pop 永远返回排序键最小的节点。
    heapq 本身就是最小堆，所以排序键直接使用，无需取反。
    堆元素为 (key, 插入序号, node)，序号保证同键时按插入顺序出队且节点本身永不参与比较。
    """

    def __init__(self, key: Callable[[T], Any] = attrgetter("sort_cost")):
        self._key = key
        self._heap: List[Tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def push(self, node: T) -> None:
        heapq.heappush(self._heap, (self._key(node), next(self._counter), node))

    def pop(self) -> Optional[T]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def __len__(self) -> int:
        return len(self._heap)
