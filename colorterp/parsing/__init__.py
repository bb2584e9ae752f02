from .parser import parse_color, tokenize

__all__ = ['parse_color', 'tokenize']
