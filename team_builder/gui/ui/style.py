# team_builder/gui/ui/style.py
from tkinter import ttk, font as tkfont

PALETTES = {
    "dark": {
        "bg": "#1f2937", "fg": "#e5e7eb", "muted": "#9ca3af",
        "accent": "#0ea5e9", "used": "#374151", "filled": "#064e3b",
    },
    "light": {
        "bg": "#ffffff", "fg": "#222222", "muted": "#777777",
        "accent": "#0b3d91", "used": "#dddddd", "filled": "#e6f7ec",
    },
}

# ---------- Estilo base ----------
def apply_style(root, variant: str = "light", theme: str = "clam") -> dict:
    """
    Estilos 'Team.*' para botones de stat, slots y puntajes.
    Llamar una vez al iniciar la app. Devuelve la paleta usada.
    """
    style = ttk.Style(root)
    try:
        style.theme_use(theme)
    except Exception:
        pass

    palette = PALETTES.get(variant, PALETTES["light"])

    font_base = tkfont.nametofont("TkDefaultFont").copy()
    font_title = font_base.copy()
    font_title.configure(size=12, weight="bold")
    font_score = font_base.copy()
    font_score.configure(size=14, weight="bold")

    style.configure("Team.TFrame", background=palette["bg"])
    style.configure("Team.TLabel", background=palette["bg"], foreground=palette["fg"])
    style.configure("Team.Title.TLabel", background=palette["bg"], foreground=palette["fg"], font=font_title)
    style.configure("Team.Score.TLabel", background=palette["bg"], foreground=palette["accent"], font=font_score)
    style.configure("Team.Muted.TLabel", background=palette["bg"], foreground=palette["muted"])
    style.configure("Team.Stat.TButton", anchor="w", padding=(8, 4))
    style.map("Team.Stat.TButton", background=[("disabled", palette["used"])])
    style.configure("Team.Slot.TLabelframe", background=palette["bg"])
    style.configure("Team.Filled.TLabelframe", background=palette["filled"])
    return palette
