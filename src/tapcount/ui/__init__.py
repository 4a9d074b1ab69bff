from .page import CounterCard, render_page

__all__ = ["CounterCard", "render_page"]
