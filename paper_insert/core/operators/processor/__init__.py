from paper_insert.core.operators.processor.identifier_encoder import IdentifierEncoder, encode_identifier
from paper_insert.core.operators.processor.response_parser import ArxivResponseParser
from paper_insert.core.operators.processor.template_renderer import TemplateRenderer, render

__all__ = [
    "IdentifierEncoder",
    "encode_identifier",
    "ArxivResponseParser",
    "TemplateRenderer",
    "render",
]
