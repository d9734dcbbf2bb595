from typing import Any, Dict, List

from paper_insert.core.common import logger
from paper_insert.core.operators.base import Operator, OperatorNode, OperatorStatus


class SequentialPipeline:
    """顺序流水线实现

    每个阶段的输出作为下一个阶段的输入，任一阶段失败即终止，不做重试。
    节点状态属于流水线实例，并发的调用应各自构造流水线。
    """

    def __init__(self):
        self.operators: Dict[str, OperatorNode] = {}
        self.execution_order: List[str] = []

    def add_operator(self, name: str, operator: Operator) -> "SequentialPipeline":
        """在流水线末尾追加一个阶段

        Args:
            name: 阶段名称
            operator: 算子实例
        """
        if name in self.operators:
            raise ValueError(f"Operator with name {name} already exists")

        self.operators[name] = OperatorNode(operator=operator, name=name)
        self.execution_order.append(name)
        return self

    @property
    def failed_stage(self) -> str | None:
        for name in self.execution_order:
            if self.operators[name].status == OperatorStatus.FAILED:
                return name
        return None

    async def execute(self, initial_data: Any = None) -> Dict[str, Any]:
        """执行流水线

        Args:
            initial_data: 第一个阶段的输入

        Returns:
            Dict[str, Any]: 每个阶段的执行结果

        Raises:
            Exception: 失败阶段抛出的原始异常
        """
        for node in self.operators.values():
            node.reset()

        results = {}
        if initial_data is not None:
            results["initial"] = initial_data

        input_data = initial_data
        for name in self.execution_order:
            node = self.operators[name]
            node.start()
            logger.debug(f"执行阶段: {node}")
            try:
                result = await node.operator.process(input_data)
            except Exception as e:
                node.fail(e)
                logger.debug(f"阶段失败: {node}, error={e!r}")
                raise

            node.complete(result)
            results[name] = result
            input_data = result

        return results
