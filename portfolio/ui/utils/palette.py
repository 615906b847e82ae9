"""(light, dark) colour pairs shared by the views."""

ACCENT = ("#14b8a6", "#14b8a6")
ACCENT_HOVER = ("#0d9488", "#0f766e")
ACCENT_TEXT = ("#0d9488", "#5eead4")
ACCENT_SOFT = ("#ccfbf1", "#134e4a")

BACKGROUND = ("#f8fafc", "#0f172a")
SURFACE = ("#ffffff", "#1e293b")
BORDER = ("#ccfbf1", "#134e4a")

TEXT = ("#0f172a", "#ffffff")
TEXT_MUTED = ("#475569", "#cbd5e1")
TEXT_SUBTLE = ("#64748b", "#94a3b8")

SUN = "#eab308"
MOON = "#2dd4bf"

TITLE_FONT = ("Roboto", 40, "bold")
HEADING_FONT = ("Roboto", 22, "bold")
BODY_FONT = ("Roboto", 14)
SMALL_FONT = ("Roboto", 11)
