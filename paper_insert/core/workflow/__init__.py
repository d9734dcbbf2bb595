from paper_insert.core.workflow.retrieval import RetrievalPipeline
from paper_insert.core.workflow.insert_paper import InsertPaperCommand

__all__ = ["RetrievalPipeline", "InsertPaperCommand"]
