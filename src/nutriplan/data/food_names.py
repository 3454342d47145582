"""Mapping of free-text food names to reference food-table names.

Generative plan sources and template aliases use everyday names ("arroz",
"peito de frango"); the clinic's food table uses TACO-style descriptions
("Arroz, branco, cozido"). These helpers bridge the two.
"""

from __future__ import annotations

import re
import unicodedata
from typing import Optional


FOOD_NAME_MAP: dict[str, str] = {
    "pao frances": "Pão, francês",
    "pao de forma": "Pão, forma, trigo",
    "pao integral": "Pão, forma, integral",
    "torrada": "Torrada, pão",

    "arroz branco": "Arroz, branco, cozido",
    "arroz integral": "Arroz, integral, cozido",
    "arroz": "Arroz, branco, cozido",

    "feijao preto": "Feijão, preto, cozido",
    "feijao carioca": "Feijão, carioca, cozido",
    "feijao": "Feijão, carioca, cozido",

    "frango": "Frango, peito, grelhado",
    "peito de frango": "Frango, peito, grelhado",
    "carne bovina": "Carne, bovina, sem gordura",
    "carne": "Carne, bovina, sem gordura",
    "ovo": "Ovo, cozido",
    "ovo cozido": "Ovo, cozido",

    "leite": "Leite, vaca, integral",
    "leite integral": "Leite, vaca, integral",
    "leite desnatado": "Leite, vaca, desnatado",
    "iogurte": "Iogurte, natural",
    "queijo": "Queijo, minas",
    "requeijao": "Requeijão",

    "banana": "Banana, prata",
    "maca": "Maçã",
    "laranja": "Laranja",
    "mamao": "Mamão",

    "alface": "Alface",
    "tomate": "Tomate",
    "cenoura": "Cenoura, crua",
    "brocolis": "Brócolis, cozido",

    "amendoim": "Amendoim, torrado",
    "castanha": "Castanha-do-pará",

    "aveia": "Aveia, flocos",
    "azeite": "Azeite de oliva",
    "oleo": "Óleo, soja",
    "batata": "Batata, cozida",
    "macarrao": "Macarrão, cozido",
    "biscoito": "Biscoito, cream cracker",
}


def normalize_text(text: str) -> str:
    """Lowercase, strip accents, turn , . - into spaces and collapse whitespace.

    Examples:
        "Pão Francês" -> "pao frances"
        "Couve-flor, cozida" -> "couve flor cozida"
    """
    decomposed = unicodedata.normalize("NFD", text.lower())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    stripped = re.sub(r"[,.\-]", " ", stripped)
    return re.sub(r"\s+", " ", stripped).strip()


def map_food_name(suggestion: str) -> Optional[str]:
    """Find the reference food-table name for a free-text food name.

    Tries an exact match on the normalised text first, then the first table
    key that contains, or is contained in, the normalised text.

    Args:
        suggestion: Food name as written by a person or a generative source

    Returns:
        Reference name, or None if nothing matches
    """
    normalized = normalize_text(suggestion)
    if not normalized:
        return None

    if normalized in FOOD_NAME_MAP:
        return FOOD_NAME_MAP[normalized]

    for key, value in FOOD_NAME_MAP.items():
        if key in normalized or normalized in key:
            return value

    return None
