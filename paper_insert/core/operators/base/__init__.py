from paper_insert.core.operators.base.operator import Operator, OperatorNode, OperatorStatus

__all__ = ["Operator", "OperatorNode", "OperatorStatus"]
