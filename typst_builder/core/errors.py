"""
Erreurs typst_builder.

Le renderer est total : aucune de ces erreurs n'est levée pendant le rendu.
Elles signalent une mauvaise construction de l'arbre (erreur du programmeur),
levées immédiatement et jamais rattrapées dans la librairie.
"""


class TypstBuilderError(Exception):
    """Erreur de base de typst_builder."""


class ConfigurationError(TypstBuilderError, ValueError):
    """Construction invalide : attribut, élément ou manifest mal configuré."""


class AttrKindMismatchError(ConfigurationError):
    """Attribut construit pour un type d'élément, passé au builder d'un autre."""

    def __init__(self, element: str, attr_kind: str, attr_text: str = ""):
        self.element = element
        self.attr_kind = attr_kind
        self.attr_text = attr_text
        detail = f" ({attr_text})" if attr_text else ""
        super().__init__(
            f"Attribut {attr_kind!r}{detail} invalide pour l'élément {element!r}"
        )


class UnknownElementError(ConfigurationError):
    """Élément absent du registry du manifest."""

    def __init__(self, element: str, known: list):
        self.element = element
        super().__init__(f"Élément inconnu : {element!r}. Registry : {known}")


class UnknownAttributeError(ConfigurationError):
    """Attribut non déclaré pour un élément du manifest."""

    def __init__(self, element: str, attr: str, known: list):
        self.element = element
        self.attr = attr
        super().__init__(
            f"Attribut inconnu {attr!r} pour l'élément {element!r}. Attributs : {known}"
        )
