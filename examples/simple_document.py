"""
Exemple simple : document avec titres, liste et grille.
Affiche le markup Typst généré.
"""
from typst_builder import (
    Alignment, DocumentBuilder, Pattern,
    aligned, bullet_list, emph, fr, grid, grid_cell, heading, strong, vspace, pt,
)
from typst_builder.config import configure_logging
from typst_builder.elements import grids, headings, lists


def main():
    configure_logging()

    builder = DocumentBuilder()

    # Titre principal numéroté
    builder.add(heading([headings.level(1), headings.numbering(Pattern("1."))], ["Rapport mensuel"]))
    builder.paragraph("Synthèse des ", strong(children=["résultats"]), " du mois.")

    # Liste des points clés
    builder.heading("Points clés", level=2)
    builder.add(bullet_list([lists.marker("--")], [
        "Chiffre d'affaires en hausse",
        emph(children=["Nouveaux clients"]),
    ]))

    builder.add(vspace(pt(12)))

    # Grille 1/3 - 2/3
    builder.add(grid([grids.columns([fr(1), fr(2)]), grids.gutter(pt(6))], [
        "Indicateur",
        grid_cell([grids.cell_align(Alignment.RIGHT)], ["Valeur"]),
    ]))

    builder.add(aligned(Alignment.CENTER, [emph(children=["Fin du rapport"])]))

    print(builder.render())


if __name__ == "__main__":
    main()
