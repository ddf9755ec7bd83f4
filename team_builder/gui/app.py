import tkinter as tk
from tkinter import ttk

from team_builder.controllers.team_builder_controller import TeamBuilderController
from team_builder.gui.tabs.team_tab import TeamBuilderTab
from team_builder.gui.ui.style import apply_style
from team_builder.services.high_scores import HighScoreStore
from team_builder.services.pokemon_source import GenerationOptions, PokemonSource
from team_builder.services.stat_provider import StatProvider
from team_builder.services.team_session import TeamSession
from team_builder.utils.logging_setup import setup_logging

GENERATION_CHOICES = ["Todas"] + [str(g) for g in range(1, 10)]


class TeamBuilderApp(ttk.Frame):
    def __init__(self, master=None):
        super().__init__(master)
        self.master.title("Pokémon Team Builder")
        self.master.geometry("980x640")
        self.pack(fill="both", expand=True)

        # --- Opciones de generación (equivalente al formulario) ---
        frm = ttk.Frame(self); frm.pack(fill="x", padx=8, pady=(8, 0))
        ttk.Label(frm, text="Generación:").pack(side="left")
        self.gen_var = tk.StringVar(value="Todas")
        ttk.Combobox(frm, textvariable=self.gen_var, values=GENERATION_CHOICES, width=8, state="readonly")\
            .pack(side="left", padx=4)
        self.forms_var = tk.BooleanVar(value=True)
        ttk.Checkbutton(frm, text="Incluir formas", variable=self.forms_var).pack(side="left", padx=8)
        self.natures_var = tk.BooleanVar(value=True)
        ttk.Checkbutton(frm, text="Naturalezas", variable=self.natures_var).pack(side="left")

        nb = ttk.Notebook(self)
        nb.pack(fill="both", expand=True, padx=8, pady=8)
        page_team = ttk.Frame(nb, style="Team.TFrame")
        nb.add(page_team, text="Armar equipo")
        self.team_tab = TeamBuilderTab(page_team)

        session = TeamSession(
            source=PokemonSource(),
            stat_provider=StatProvider(),
            store=HighScoreStore(),
            listener=self.team_tab,
            options_provider=self.get_options,
        )
        self.controller = TeamBuilderController(session)
        self.team_tab.bind(self.controller)

    def get_options(self) -> GenerationOptions:
        gen = self.gen_var.get()
        return GenerationOptions(
            generations=None if gen == "Todas" else [int(gen)],
            include_forms=self.forms_var.get(),
            natures=self.natures_var.get(),
        )

    def start(self):
        self.controller.initialize()


def run():
    setup_logging()
    root = tk.Tk()
    apply_style(root, variant="light")
    app = TeamBuilderApp(master=root)
    root.after(50, app.start)
    app.mainloop()


if __name__ == "__main__":
    run()
