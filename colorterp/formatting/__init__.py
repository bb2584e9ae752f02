from .formatter import format_color, format_colors, format_float

__all__ = ['format_color', 'format_colors', 'format_float']
