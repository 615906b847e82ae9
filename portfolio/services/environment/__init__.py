from .color_scheme import ColorSchemeSignal, ManualColorSchemeSignal, SystemColorSchemeSignal

__all__ = ["ColorSchemeSignal", "ManualColorSchemeSignal", "SystemColorSchemeSignal"]
