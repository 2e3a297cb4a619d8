# statement_parser/gui_viewers/__init__.py

__all__ = ["App", "ConvertTab"]


# Lazily expose the widgets to avoid importing tkinter during package import
def __getattr__(name):
    if name == "App":
        from .app import App
        return App
    if name == "ConvertTab":
        from .convert_tab import ConvertTab
        return ConvertTab
    raise AttributeError(name)
