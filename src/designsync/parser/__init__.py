from designsync.parser.errors import ParseError
from designsync.parser.tokens import parse_class_token, parse_classes, split_class_token

__all__ = ["ParseError", "parse_class_token", "parse_classes", "split_class_token"]
