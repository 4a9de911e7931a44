"""
Point d'entrée data avec imports retardés pour éviter les boucles.
Expose des getters plutôt que des objets chargés à l'import.
"""


def get_default_kitchen():
    from .loader import load_kitchen

    return load_kitchen()


def get_default_dishes():
    from .loader import load_dishes_csv

    return load_dishes_csv()
