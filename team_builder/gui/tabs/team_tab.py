import tkinter as tk
from tkinter import ttk, messagebox

from team_builder.models.pokemon import STAT_KEYS, STAT_LABELS, STAT_SHORT_LABELS, TEAM_SIZE
from team_builder.services.sprite_provider import SpriteProvider
from team_builder.services.team_session import TeamSessionListener
from team_builder.utils.display import (
    completion_message, display_name, sprite_path, stat_bar_percent, stat_display_value,
)


class TeamBuilderTab(TeamSessionListener):
    """
    Pestaña del armador de equipos: se reconstruye completa desde el estado
    de la sesión en cada cambio (on_state_changed).
    El controlador se asigna después con bind(controller).
    """
    def __init__(self, master, sprites: SpriteProvider | None = None):
        self.master = master
        self.controller = None
        self.sprites = sprites or SpriteProvider()
        self._images = {}   # referencias vivas, Tk no las retiene
        self.mode_var = tk.StringVar(value="visible")
        self.loading_var = tk.StringVar(value="")

        top = ttk.Frame(self.master, style="Team.TFrame"); top.pack(fill="x", padx=8, pady=6)
        ttk.Label(top, text="Modo", style="Team.Title.TLabel").pack(side="left", padx=(0, 8))
        ttk.Radiobutton(top, text="Mostrar stats", value="visible", variable=self.mode_var,
                        command=self._on_mode).pack(side="left")
        ttk.Radiobutton(top, text="Stats ocultos", value="hidden", variable=self.mode_var,
                        command=self._on_mode).pack(side="left", padx=(6, 0))
        ttk.Label(top, textvariable=self.loading_var, style="Team.Muted.TLabel").pack(side="right")

        self.body = ttk.Frame(self.master, style="Team.TFrame")
        self.body.pack(fill="both", expand=True, padx=8, pady=(0, 8))

    def bind(self, controller) -> None:
        self.controller = controller
        self.mode_var.set(controller.session.mode)

    # ---------- callbacks de la sesión ----------
    def on_state_changed(self):
        self.refresh()

    def on_loading_changed(self, loading: bool):
        self.loading_var.set("Cargando…" if loading else "")
        self.master.update_idletasks()

    def on_no_candidate_available(self):
        messagebox.showwarning("Sin Pokémon", "No hay Pokémon que cumplan los filtros. Ajusta las opciones y reintenta.")

    def on_team_complete(self, is_new_high_score: bool, had_positive_high_score: bool):
        s = self.controller.session
        self.master.after(100, lambda: messagebox.showinfo(
            "Equipo", completion_message(s.current_score, s.high_score)))

    def on_team_full(self):
        messagebox.showinfo("Equipo", "¡Tu equipo ya está completo! Empieza uno nuevo para seguir.")

    def on_duplicate_stat_rejected(self):
        messagebox.showwarning("Stat", "¡Ese stat ya fue elegido!")

    def on_busy(self):
        messagebox.showinfo("Espera", "Ya se está generando un Pokémon.")

    # ---------- UI ----------
    def _on_mode(self):
        self.controller.change_mode(self.mode_var.get())

    def refresh(self):
        if self.controller is None:
            return
        for w in self.body.winfo_children():
            w.destroy()
        s = self.controller.session
        self.mode_var.set(s.mode)

        if s.current_candidate is not None:
            self._build_selection(s)
        elif not s.is_complete:
            frm = ttk.Frame(self.body, style="Team.TFrame"); frm.pack(fill="x", pady=6)
            ttk.Label(frm, text=self.controller.progress(), style="Team.TLabel").pack(side="left")
            ttk.Button(frm, text="Generar siguiente Pokémon", command=self.controller.generate)\
                .pack(side="left", padx=8)

        self._build_team(s)

        if s.roster:
            ttk.Button(self.body, text="Nuevo equipo", command=self.controller.new_team)\
                .pack(anchor="e", pady=(6, 0))

    def _build_selection(self, s):
        pokemon = s.current_candidate
        hidden = s.mode == "hidden"
        wrap = ttk.Frame(self.body, style="Team.TFrame"); wrap.pack(fill="x")

        left = ttk.Frame(wrap, style="Team.TFrame"); left.pack(side="left", fill="both", expand=True)
        ttk.Label(left, text="Elige un stat", style="Team.Title.TLabel").pack(anchor="w")
        if pokemon.show_name:
            ttk.Label(left, text=display_name(pokemon), style="Team.TLabel").pack(anchor="w", pady=(2, 0))
        if pokemon.show_sprite:
            img = self._sprite_image(pokemon, max_px=160)
            if img is not None:
                ttk.Label(left, image=img, style="Team.TLabel").pack(anchor="w", pady=4)

        stats = pokemon.stats
        if stats:
            max_stat = stats.max_core()
            for key in STAT_KEYS:
                value = stats.get(key)
                used = key in s.used_stats
                row = ttk.Frame(left, style="Team.TFrame"); row.pack(fill="x", pady=1)
                label = STAT_LABELS[key] + (" ✓" if used else "")
                btn = ttk.Button(row, text=f"{label}: {stat_display_value(value, s.mode)}",
                                 style="Team.Stat.TButton", width=22,
                                 command=lambda k=key: self.controller.select(k))
                btn.pack(side="left")
                if used:
                    btn.state(["disabled"])
                bar = ttk.Progressbar(row, length=160, maximum=100,
                                      value=0 if hidden else stat_bar_percent(value, max_stat))
                bar.pack(side="left", padx=6)

        right = ttk.Frame(wrap, style="Team.TFrame"); right.pack(side="left", fill="y", padx=(12, 0))
        max_chosen = max([c.selected_stat_value or 0 for c in s.roster] + [200])
        for key in STAT_KEYS:
            member = s.member_for_stat(key)
            value = member.selected_stat_value if member else None
            row = ttk.Frame(right, style="Team.TFrame"); row.pack(fill="x")
            ttk.Label(row, text=STAT_SHORT_LABELS[key], width=6, style="Team.TLabel").pack(side="left")
            ttk.Label(row, text="—" if value is None else str(value), width=5, style="Team.TLabel").pack(side="left")
            if value is not None:
                ttk.Progressbar(row, length=100, maximum=100, value=stat_bar_percent(value, max_chosen))\
                    .pack(side="left")

        ttk.Label(right, text="Puntaje actual", style="Team.Muted.TLabel").pack(anchor="w", pady=(8, 0))
        ttk.Label(right, text=str(s.current_score), style="Team.Score.TLabel").pack(anchor="w")
        ttk.Label(right, text="Récord", style="Team.Muted.TLabel").pack(anchor="w")
        ttk.Label(right, text=str(s.high_score), style="Team.Score.TLabel").pack(anchor="w")

    def _build_team(self, s):
        ttk.Label(self.body, text="Tu equipo", style="Team.Title.TLabel").pack(anchor="w", pady=(10, 2))
        slots = ttk.Frame(self.body, style="Team.TFrame"); slots.pack(fill="x")
        for i in range(TEAM_SIZE):
            if i < len(s.roster):
                pokemon = s.roster[i]
                box = ttk.Labelframe(slots, text=f"#{i + 1}", style="Team.Filled.TLabelframe")
                if pokemon.show_sprite:
                    img = self._sprite_image(pokemon, max_px=72)
                    if img is not None:
                        ttk.Label(box, image=img).pack()
                if pokemon.show_name:
                    ttk.Label(box, text=display_name(pokemon)).pack(anchor="w")
                if pokemon.selected_stat is not None:
                    ttk.Label(box, text=f"{STAT_SHORT_LABELS[pokemon.selected_stat]}: "
                                        f"{pokemon.selected_stat_value}").pack(anchor="w")
            else:
                box = ttk.Labelframe(slots, text=f"#{i + 1}", style="Team.Slot.TLabelframe")
                ttk.Label(box, text="?").pack()
            box.grid(row=0, column=i, padx=3, sticky="nsew")
            slots.columnconfigure(i, weight=1)

    def _sprite_image(self, pokemon, max_px: int):
        url = sprite_path(pokemon)
        key = (url, max_px)
        if key in self._images:
            return self._images[key]
        data = self.sprites.fetch(url)
        img = None
        if data:
            try:
                img = tk.PhotoImage(data=data)
                factor = max(1, img.width() // max_px)
                if factor > 1:
                    img = img.subsample(factor)
            except tk.TclError:
                img = None
        self._images[key] = img
        return img
