from paper_insert.core.operators.sink.document import DocumentInserter, TextDocument

__all__ = [
    "DocumentInserter",
    "TextDocument",
]
