"""
Built-in case: the mansion map and the clues found in each room.
"""

CASE_NAME = "Detective Quest"

MANSION = {
    "name": "Hall de Entrada",
    "left": {
        "name": "Biblioteca",
        "left": {"name": "Sotao"},
        "right": {"name": "Escritorio"},
    },
    "right": {
        "name": "Cozinha",
        "left": {"name": "Jardim"},
        "right": None,
    },
}

# Room name -> (clue text, suspect name) pairs recorded on every entry.
ROOM_CLUES = {
    "Biblioteca": [("Livros deslocados", "Joaquim")],
    "Cozinha": [("Pegadas úmidas na cozinha", "Maria")],
    "Sotao": [("Carta rasgada encontrada", "Carlos")],
    "Sótão": [("Carta rasgada encontrada", "Carlos")],
    # Less conclusive
    "Hall de Entrada": [("Pegadas na entrada", "Maria")],
}

UNKNOWN_SUSPECT = "Desconhecido"
