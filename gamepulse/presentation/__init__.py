from .analysis import build_analysis, format_record, format_streak, render_text

__all__ = ["build_analysis", "format_record", "format_streak", "render_text"]
