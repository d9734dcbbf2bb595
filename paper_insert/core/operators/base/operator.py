from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional


class OperatorStatus(Enum):
    """检索阶段的执行状态"""
    PENDING = "PENDING"
    RUNNING = "RUNNING"
    COMPLETED = "COMPLETED"
    FAILED = "FAILED"


class Operator:
    """检索流程中一个阶段的接口

    子类实现 process：接收上一阶段的输出，返回交给下一阶段的值。
    算子实例不保存单次调用的数据，可在并发的检索之间共享。
    """

    async def process(self, input_data: Any) -> Any:
        raise NotImplementedError("Operator must implement process method")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


@dataclass
class OperatorNode:
    """SequentialPipeline 中的一个具名阶段及其本次执行的结果"""
    operator: Operator
    name: str
    status: OperatorStatus = OperatorStatus.PENDING
    result: Optional[Any] = None
    error: Optional[Exception] = None

    def __str__(self) -> str:
        return f"{self.name}({self.operator.__class__.__name__})[{self.status.value}]"

    def reset(self):
        self.status = OperatorStatus.PENDING
        self.result = None
        self.error = None

    def start(self):
        self.status = OperatorStatus.RUNNING

    def complete(self, result: Any):
        self.status = OperatorStatus.COMPLETED
        self.result = result

    def fail(self, error: Exception):
        self.status = OperatorStatus.FAILED
        self.error = error
