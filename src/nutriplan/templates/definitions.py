"""Built-in meal templates.

Templates describe common Brazilian meals at a nominal calorie level. The
matcher picks the closest template for each meal slot; item quantities can
then be scaled to the slot's calorie allocation.
"""

from __future__ import annotations

from nutriplan.templates.models import MealTemplate, MealType, item


# =============================================================================
# Breakfast
# =============================================================================

CLASSIC_BREAKFAST = MealTemplate(
    id="cafe-classico",
    name="Café Clássico Brasileiro",
    description="Pão, ovos, café com leite e fruta",
    meal_type=MealType.BREAKFAST,
    target_kcal=400,
    items=(
        item("Pão francês", 1, "unidade", "base", ["pao frances", "pao", "pão francês"]),
        item("Ovo cozido", 2, "unidade", "protein", ["ovo cozido", "ovo"]),
        item("Café com leite", 1, "xícara", "dairy", ["cafe com leite", "leite"]),
        item("Banana", 1, "unidade", "fruit", ["banana"]),
    ),
    tags=frozenset({"tradicional", "brasileiro"}),
)

FITNESS_BREAKFAST = MealTemplate(
    id="cafe-fit",
    name="Café Fitness",
    description="Aveia, frutas, iogurte e castanhas",
    meal_type=MealType.BREAKFAST,
    target_kcal=380,
    items=(
        item("Aveia", 3, "colher de sopa", "base", ["aveia"]),
        item("Iogurte natural", 1, "pote", "dairy", ["iogurte natural", "iogurte"]),
        item("Morango", 5, "unidade", "fruit", ["morango"]),
        item("Castanha", 3, "unidade", "fat", ["castanha", "castanha do para"]),
    ),
    tags=frozenset({"saudavel", "fitness", "rico-fibra"}),
)

VEGETARIAN_BREAKFAST = MealTemplate(
    id="cafe-vegetariano",
    name="Café Vegetariano",
    description="Pão integral, queijo minas, mamão e leite",
    meal_type=MealType.BREAKFAST,
    target_kcal=350,
    items=(
        item("Pão integral", 2, "fatia", "base", ["pao integral", "pao de forma integral"]),
        item("Queijo minas", 1, "fatia", "dairy", ["queijo minas", "queijo"]),
        item("Mamão", 1, "fatia", "fruit", ["mamao", "mamão"]),
        item("Leite desnatado", 1, "copo", "dairy", ["leite desnatado", "leite"], optional=True),
    ),
    tags=frozenset({"vegetarian", "tradicional"}),
)

LOW_CARB_BREAKFAST = MealTemplate(
    id="cafe-lowcarb",
    name="Café Low Carb",
    description="Omelete de queijo com tomate e café",
    meal_type=MealType.BREAKFAST,
    target_kcal=320,
    items=(
        item("Ovo mexido", 3, "unidade", "protein", ["ovo mexido", "ovo"]),
        item("Queijo minas", 1, "fatia", "dairy", ["queijo minas", "queijo"]),
        item("Tomate", 4, "rodela", "vegetable", ["tomate"]),
        item("Café sem açúcar", 1, "xícara", "base", ["cafe"], optional=True),
    ),
    tags=frozenset({"low-carb", "vegetarian", "rico-proteina"}),
)


# =============================================================================
# Snacks
# =============================================================================

YOGURT_MORNING_SNACK = MealTemplate(
    id="lanche-manha-iogurte",
    name="Lanche da Manhã com Iogurte",
    description="Iogurte natural com aveia",
    meal_type=MealType.MORNING_SNACK,
    target_kcal=180,
    items=(
        item("Iogurte natural", 1, "pote", "dairy", ["iogurte natural", "iogurte"]),
        item("Aveia", 1, "colher de sopa", "base", ["aveia"]),
    ),
    tags=frozenset({"vegetarian", "pratico"}),
)

FRUIT_SNACK = MealTemplate(
    id="lanche-fruta",
    name="Lanche de Fruta",
    description="Fruta com oleaginosas",
    meal_type=MealType.AFTERNOON_SNACK,
    target_kcal=150,
    items=(
        item("Maçã", 1, "unidade", "fruit", ["maca", "maçã"]),
        item("Amendoim", 10, "unidade", "fat", ["amendoim"]),
    ),
    tags=frozenset({"pratico", "natural"}),
)

LIGHT_EVENING_SNACK = MealTemplate(
    id="ceia-leve",
    name="Ceia Leve",
    description="Leite morno com banana",
    meal_type=MealType.EVENING_SNACK,
    target_kcal=120,
    items=(
        item("Leite desnatado", 1, "copo", "dairy", ["leite desnatado", "leite"]),
        item("Banana", 0.5, "unidade", "fruit", ["banana"]),
    ),
    tags=frozenset({"vegetarian", "leve"}),
)


# =============================================================================
# Lunch
# =============================================================================

EXECUTIVE_LUNCH = MealTemplate(
    id="almoco-executivo",
    name="Almoço Executivo",
    description="Arroz, feijão, frango e salada",
    meal_type=MealType.LUNCH,
    target_kcal=650,
    items=(
        item("Arroz branco", 4, "colher de sopa", "base", ["arroz branco", "arroz"]),
        item("Feijão preto", 1, "concha", "protein", ["feijao preto", "feijão"]),
        item("Peito de frango", 1, "filé", "protein", ["frango peito", "peito de frango", "frango"]),
        item("Alface", 3, "folha", "vegetable", ["alface"]),
        item("Tomate", 4, "rodela", "vegetable", ["tomate"]),
    ),
    tags=frozenset({"tradicional", "brasileiro", "balanceado"}),
)

LOW_CARB_LUNCH = MealTemplate(
    id="almoco-lowcarb",
    name="Almoço Low Carb",
    description="Carne, legumes e verduras",
    meal_type=MealType.LUNCH,
    target_kcal=550,
    items=(
        item("Carne bovina", 1, "bife", "protein", ["carne bovina", "carne"]),
        item("Brócolis", 1, "xícara", "vegetable", ["brocolis", "brócolis"]),
        item("Couve-flor", 1, "xícara", "vegetable", ["couve flor", "couve-flor"]),
        item("Azeite", 1, "colher de sopa", "fat", ["azeite"]),
    ),
    tags=frozenset({"low-carb", "rico-proteina"}),
)

VEGETARIAN_LUNCH = MealTemplate(
    id="almoco-vegetariano",
    name="Almoço Vegetariano",
    description="Arroz integral, feijão, ovo e legumes",
    meal_type=MealType.LUNCH,
    target_kcal=620,
    items=(
        item("Arroz integral", 4, "colher de sopa", "base", ["arroz integral", "arroz"]),
        item("Feijão carioca", 1, "concha", "protein", ["feijao carioca", "feijão"]),
        item("Ovo cozido", 2, "unidade", "protein", ["ovo cozido", "ovo"]),
        item("Cenoura", 3, "colher de sopa", "vegetable", ["cenoura"]),
        item("Azeite", 1, "colher de chá", "fat", ["azeite"], optional=True),
    ),
    tags=frozenset({"vegetarian", "tradicional", "balanceado"}),
)


# =============================================================================
# Dinner
# =============================================================================

LIGHT_DINNER = MealTemplate(
    id="jantar-leve",
    name="Jantar Leve",
    description="Sopa de legumes com frango",
    meal_type=MealType.DINNER,
    target_kcal=450,
    items=(
        item("Sopa de legumes", 1, "prato", "base", ["sopa legumes", "sopa"]),
        item("Frango desfiado", 3, "colher de sopa", "protein", ["frango desfiado", "frango"]),
    ),
    tags=frozenset({"leve", "facil-digestao"}),
)

TRADITIONAL_DINNER = MealTemplate(
    id="jantar-tradicional",
    name="Jantar Tradicional",
    description="Arroz, carne e salada",
    meal_type=MealType.DINNER,
    target_kcal=580,
    items=(
        item("Arroz integral", 3, "colher de sopa", "base", ["arroz integral", "arroz"]),
        item("Carne moída", 2, "colher de sopa", "protein", ["carne moida", "carne"]),
        item("Salada verde", 1, "prato", "vegetable", ["alface", "salada"]),
    ),
    tags=frozenset({"tradicional", "balanceado"}),
)

VEGETARIAN_DINNER = MealTemplate(
    id="jantar-vegetariano",
    name="Jantar Vegetariano",
    description="Omelete de legumes com batata e salada",
    meal_type=MealType.DINNER,
    target_kcal=480,
    items=(
        item("Omelete de legumes", 1, "unidade", "protein", ["omelete", "ovo"]),
        item("Batata cozida", 1, "unidade", "base", ["batata cozida", "batata"]),
        item("Salada verde", 1, "prato", "vegetable", ["alface", "salada"]),
    ),
    tags=frozenset({"vegetarian", "leve"}),
)

LOW_CARB_DINNER = MealTemplate(
    id="jantar-lowcarb",
    name="Jantar Low Carb",
    description="Peixe grelhado com legumes",
    meal_type=MealType.DINNER,
    target_kcal=420,
    items=(
        item("Filé de tilápia", 1, "filé", "protein", ["tilapia", "peixe"]),
        item("Abobrinha refogada", 1, "xícara", "vegetable", ["abobrinha"]),
        item("Azeite", 1, "colher de chá", "fat", ["azeite"]),
    ),
    tags=frozenset({"low-carb", "rico-proteina", "leve"}),
)


# Catalog order matters: equidistant candidates resolve to the earlier entry.
BUILTIN_TEMPLATES: tuple[MealTemplate, ...] = (
    CLASSIC_BREAKFAST,
    FITNESS_BREAKFAST,
    EXECUTIVE_LUNCH,
    LOW_CARB_LUNCH,
    LIGHT_DINNER,
    TRADITIONAL_DINNER,
    FRUIT_SNACK,
    VEGETARIAN_BREAKFAST,
    LOW_CARB_BREAKFAST,
    YOGURT_MORNING_SNACK,
    VEGETARIAN_LUNCH,
    VEGETARIAN_DINNER,
    LOW_CARB_DINNER,
    LIGHT_EVENING_SNACK,
)
