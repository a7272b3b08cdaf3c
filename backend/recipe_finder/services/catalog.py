"""
Static ingredient and recipe catalogs.
Validated once at import and read-only for the process lifetime.
"""

from recipe_finder.schemas.recipe import Ingredient, Recipe

_INGREDIENT_ROWS = [
    ("tofu", "Tofu"),
    ("mushroom", "Shiitake mushroom"),
    ("carrot", "Carrot"),
    ("garlic", "Garlic"),
    ("ginger", "Ginger"),
    ("spring-onion", "Spring onion"),
    ("soy-sauce", "Soy sauce"),
    ("salt", "Salt"),
    ("sugar", "Sugar"),
    ("egg", "Egg"),
    ("tomato", "Tomato"),
    ("potato", "Potato"),
    ("green-pepper", "Green pepper"),
    ("vinegar", "Vinegar"),
    ("chili", "Dried chili"),
    ("pork", "Pork"),
    ("chicken", "Chicken"),
    ("peanut", "Peanut"),
    ("cabbage", "Napa cabbage"),
    ("rice", "Rice"),
]

INGREDIENTS: tuple[Ingredient, ...] = tuple(Ingredient(id=i, name=n) for i, n in _INGREDIENT_ROWS)

_INGREDIENT_NAMES: dict[str, str] = {ing.id: ing.name for ing in INGREDIENTS}


def _recipe(
    recipe_id: str,
    name: str,
    ingredients: list[tuple[str, str]],
    steps: list[str],
    difficulty: str,
    time: int,
    tips: list[str] | None = None,
) -> Recipe:
    return Recipe(
        id=recipe_id,
        name=name,
        image=f"/images/recipes/{recipe_id}.jpg",
        ingredients=[{"id": i, "amount": a} for i, a in ingredients],
        steps=steps,
        difficulty=difficulty,
        time=time,
        tips=tips,
    )


RECIPES: tuple[Recipe, ...] = (
    _recipe(
        "mushroom-tofu-pot",
        "Mushroom and tofu clay pot",
        [
            ("tofu", "1 block"),
            ("mushroom", "6"),
            ("carrot", "1/2"),
            ("garlic", "3 cloves"),
            ("ginger", "3 slices"),
            ("spring-onion", "1 stalk"),
            ("soy-sauce", "2 tbsp"),
            ("salt", "to taste"),
            ("sugar", "1 tsp"),
        ],
        [
            "Cut the tofu into cubes and pan-fry until golden.",
            "Slice the mushrooms and carrot.",
            "Fry garlic and ginger in oil until fragrant.",
            "Add mushrooms and carrot and stir-fry for 2 minutes.",
            "Add tofu, soy sauce, sugar and half a cup of water; simmer for 10 minutes.",
            "Season with salt and finish with spring onion.",
        ],
        "easy",
        20,
        ["Soak dried shiitake first for a deeper flavour.", "Use firm tofu so it holds its shape."],
    ),
    _recipe(
        "tomato-egg",
        "Stir-fried tomato and egg",
        [("tomato", "2"), ("egg", "3"), ("spring-onion", "1 stalk"), ("salt", "1/2 tsp"), ("sugar", "1 tsp")],
        [
            "Beat the eggs with a pinch of salt.",
            "Scramble the eggs until just set and remove from the wok.",
            "Stir-fry the tomato wedges until they release juice.",
            "Return the eggs, season with salt and sugar, and top with spring onion.",
        ],
        "easy",
        10,
        ["A little sugar balances the acidity of the tomato."],
    ),
    _recipe(
        "shredded-potato",
        "Hot and sour shredded potato",
        [("potato", "2"), ("chili", "4"), ("vinegar", "1 tbsp"), ("garlic", "2 cloves"), ("salt", "to taste")],
        [
            "Julienne the potatoes and rinse off the starch.",
            "Fry the chili and garlic in hot oil.",
            "Add the potato and stir-fry over high heat for 2 minutes.",
            "Splash in the vinegar, season with salt and serve.",
        ],
        "easy",
        15,
        ["Rinse the potato well so it stays crisp."],
    ),
    _recipe(
        "kung-pao-chicken",
        "Kung pao chicken",
        [
            ("chicken", "300 g"),
            ("peanut", "50 g"),
            ("chili", "8"),
            ("garlic", "3 cloves"),
            ("ginger", "3 slices"),
            ("spring-onion", "2 stalks"),
            ("soy-sauce", "1 tbsp"),
            ("vinegar", "1 tbsp"),
            ("sugar", "1 tbsp"),
        ],
        [
            "Dice the chicken and marinate with soy sauce.",
            "Mix vinegar, sugar and soy sauce into a sauce.",
            "Fry the chili until dark red, then add ginger and garlic.",
            "Add the chicken and stir-fry until cooked through.",
            "Pour in the sauce, add spring onion and peanuts, and toss.",
        ],
        "medium",
        25,
        ["Add the peanuts at the end so they stay crunchy."],
    ),
    _recipe(
        "pepper-pork",
        "Pork with green pepper",
        [("pork", "250 g"), ("green-pepper", "2"), ("garlic", "2 cloves"), ("soy-sauce", "1 tbsp"), ("salt", "to taste")],
        [
            "Slice the pork thinly and marinate with soy sauce.",
            "Stir-fry the pork until it changes colour and remove.",
            "Stir-fry garlic and green pepper until blistered.",
            "Return the pork, season with salt and serve.",
        ],
        "medium",
        20,
    ),
    _recipe(
        "vinegar-cabbage",
        "Vinegar-glazed napa cabbage",
        [("cabbage", "1/2 head"), ("vinegar", "2 tbsp"), ("chili", "3"), ("sugar", "1 tsp"), ("salt", "to taste")],
        [
            "Tear the cabbage into pieces, separating stems and leaves.",
            "Fry the chili briefly in hot oil.",
            "Stir-fry the stems first, then the leaves.",
            "Add vinegar, sugar and salt and toss over high heat.",
        ],
        "easy",
        10,
        ["Keep the heat high so the cabbage does not turn watery."],
    ),
    _recipe(
        "egg-fried-rice",
        "Egg fried rice",
        [("rice", "2 bowls"), ("egg", "2"), ("carrot", "1/2"), ("spring-onion", "1 stalk"), ("salt", "to taste")],
        [
            "Beat the eggs and dice the carrot.",
            "Scramble the eggs and break them into small pieces.",
            "Add the carrot and cold rice and stir-fry until loose and hot.",
            "Season with salt and finish with spring onion.",
        ],
        "easy",
        15,
        ["Day-old rice fries better than freshly cooked rice."],
    ),
    _recipe(
        "braised-pork",
        "Red-braised pork belly",
        [
            ("pork", "500 g"),
            ("ginger", "4 slices"),
            ("spring-onion", "2 stalks"),
            ("soy-sauce", "3 tbsp"),
            ("sugar", "2 tbsp"),
        ],
        [
            "Blanch the pork cubes and drain.",
            "Melt the sugar in the wok until amber.",
            "Add the pork and coat it in the caramel.",
            "Add ginger, spring onion, soy sauce and hot water to cover.",
            "Simmer covered for 60 minutes.",
            "Reduce the sauce over high heat until glossy.",
        ],
        "hard",
        90,
        ["Use hot water when braising so the meat stays tender.", "Watch the caramel closely; it burns fast."],
    ),
)

_RECIPES_BY_ID: dict[str, Recipe] = {r.id: r for r in RECIPES}


def get_ingredient_name(ingredient_id: str) -> str | None:
    """Catalog display name, or None for unknown ids."""
    return _INGREDIENT_NAMES.get(ingredient_id)


def display_name(ingredient_id: str) -> str:
    """Display name for an id; unknown ids are echoed back unchanged."""
    return _INGREDIENT_NAMES.get(ingredient_id) or ingredient_id


def get_recipe(recipe_id: str) -> Recipe | None:
    return _RECIPES_BY_ID.get(recipe_id)
