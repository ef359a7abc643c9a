"""Editable static menu, price and template data for boxed meals."""

from __future__ import annotations

# Canonical catalog values consumed by catering.data (which wraps them into CatalogEntry records).
SAUCES: dict[str, dict[str, str | int | None]] = {
    "classic-lemon-pepper": {"name": "Classic Lemon Pepper", "heat_level": 1},
    "northeast-hot-lemon": {"name": "Northeast Hot Lemon", "heat_level": 2},
    "frankford-cajun": {"name": "Frankford Cajun", "heat_level": 2},
    "garlic-parmesan": {"name": "Garlic Parmesan", "heat_level": 0},
    "sweet-teriyaki": {"name": "Sweet Teriyaki", "heat_level": 0},
    "sweet-bbq": {"name": "Sweet BBQ", "heat_level": 0},
    "tailgate-bbq": {"name": "Tailgate BBQ", "heat_level": 0},
    "mild-buffalo": {"name": "Mild Buffalo", "heat_level": 1},
    "classic-buffalo": {"name": "Classic Buffalo", "heat_level": 2},
    "philly-classic-hot": {"name": "Philly Classic Hot", "heat_level": 3},
    "hot-honey": {"name": "Hot Honey", "heat_level": 3},
    "mango-habanero": {"name": "Mango Habanero", "heat_level": 4},
    "broad-pattison-burn": {"name": "Broad & Pattison Burn", "heat_level": 4},
    "ghost-pepper": {"name": "Ghost Pepper", "heat_level": 5},
    "grittys-revenge": {"name": "Gritty's Revenge", "heat_level": 5},
}

PREMIUM_SAUCE_IDS: frozenset[str] = frozenset({"mango-habanero", "hot-honey", "ghost-pepper"})

DIPS: dict[str, dict[str, str | int | None]] = {
    "ranch": {"name": "Ranch"},
    "blue-cheese": {"name": "Blue Cheese"},
    "honey-mustard": {"name": "Honey Mustard"},
    "cajun-ranch": {"name": "Cajun Ranch"},
    "vegan-ranch": {"name": "Vegan Ranch"},
}

# Prices are what a box pays on top of its base price; chips are included.
SIDES: dict[str, dict[str, str | None]] = {
    "chips": {"name": "Miss Vickie's Chips", "price": "0.00"},
    "coleslaw": {"name": "Sally Sherman Coleslaw", "price": "1.50"},
    "potato-salad": {"name": "Sally Sherman Potato Salad", "price": "1.50"},
    "veggie-sticks": {"name": "Fresh Veggie Sticks", "price": "1.00"},
    "fries": {"name": "Seasoned Fries", "price": "2.00"},
}

DESSERTS: dict[str, dict[str, str | None]] = {
    "no-dessert": {"name": "No Dessert", "price": "0.00"},
    "marble-pound-cake": {"name": "Daisy's Marble Pound Cake", "price": "2.50"},
    "gourmet-brownie": {"name": "Daisy's Gourmet Brownie", "price": "2.50"},
    "ny-cheesecake": {"name": "Classic New York Cheesecake", "price": "3.00"},
    "red-velvet-cake": {"name": "Creamy Red Velvet", "price": "3.00"},
    "creme-brulee-cheesecake": {"name": "Creme Brulee Cheesecake", "price": "3.50"},
}

BOX_BASE_PRICE = "12.50"
WING_COUNT_UPCHARGES: dict[int, str] = {6: "0.00", 10: "3.00", 12: "4.50"}
CATEGORY_UPCHARGES: dict[str, str] = {"plant_based": "2.00", "boneless": "0.00", "bone_in": "1.50"}
STYLE_UPCHARGE = "1.50"
PREMIUM_SAUCE_UPCHARGE = "0.50"
PREMIUM_SPLIT_SLOT_UPCHARGE = "0.25"

# Boxed meal templates; "category" puts all wings in one category.
TEMPLATES: list[dict[str, object]] = [
    {
        "template_id": "office-favorite",
        "name": "Office Favorite",
        "tagline": "Mild & Crowd-Pleasing",
        "config": {
            "wing_count": 6,
            "category": "boneless",
            "sauce_id": "sweet-bbq",
            "dips": ["ranch", "honey-mustard"],
            "side_id": "chips",
            "dessert_id": "ny-cheesecake",
        },
    },
    {
        "template_id": "game-day",
        "name": "Game Day Combo",
        "tagline": "Classic Buffalo Heat",
        "config": {
            "wing_count": 6,
            "category": "bone_in",
            "style": "mixed",
            "sauce_id": "classic-buffalo",
            "dips": ["ranch", "blue-cheese"],
            "side_id": "coleslaw",
            "dessert_id": "gourmet-brownie",
        },
    },
    {
        "template_id": "fire-ice",
        "name": "Fire & Ice",
        "tagline": "Bold & Adventurous",
        "config": {
            "wing_count": 6,
            "category": "boneless",
            "sauce_id": "hot-honey",
            "dips": ["ranch", "blue-cheese"],
            "side_id": "potato-salad",
            "dessert_id": "creme-brulee-cheesecake",
        },
    },
    {
        "template_id": "veggie-delight",
        "name": "Veggie Delight",
        "tagline": "Plant-Based & Refreshing",
        "config": {
            "wing_count": 6,
            "category": "plant_based",
            "prep_method": "fried",
            "sauce_id": "sweet-teriyaki",
            "dips": ["vegan-ranch", "honey-mustard"],
            "side_id": "veggie-sticks",
            "dessert_id": "no-dessert",
        },
    },
]
