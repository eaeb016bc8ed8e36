"""Editable static sample catalog shown when no catalog file is given."""

from __future__ import annotations

SAMPLE_CATALOG: dict[str, list[dict[str, object]]] = {
    "categories": [
        {
            "name": "Pizza",
            "dishes": [
                {"id": 1, "name": "Pizza Margherita", "sizes": [{"price": 500, "imageUrl": None}]},
                {"id": 2, "name": "Pizza Pepperoni", "sizes": [{"price": 590, "imageUrl": None}]},
                {"id": 3, "name": "Pizza Quattro Formaggi", "sizes": [{"price": 640, "imageUrl": None}]},
            ],
        },
        {
            "name": "Main",
            "dishes": [
                {"id": 10, "name": "Pasta Carbonara", "sizes": [{"price": 300, "imageUrl": None}]},
                {"id": 11, "name": "Pasta Bolognese", "sizes": [{"price": 320, "imageUrl": None}]},
                {"id": 12, "name": "Chicken Schnitzel", "sizes": [{"price": 410, "imageUrl": None}]},
                {"id": 13, "name": "Beef Stroganoff", "sizes": [{"price": 450, "imageUrl": None}]},
            ],
        },
        {
            "name": "Soups",
            "dishes": [
                {"id": 20, "name": "Borscht", "sizes": [{"price": 250, "imageUrl": None}]},
                {"id": 21, "name": "Mushroom Soup", "sizes": [{"price": 230, "imageUrl": None}]},
            ],
        },
        {
            "name": "Drinks",
            "dishes": [
                {"id": 30, "name": "Lemonade", "sizes": [{"price": 150, "imageUrl": None}]},
                {"id": 31, "name": "Black Tea", "sizes": [{"price": 90, "imageUrl": None}]},
                {"id": 32, "name": "Tap Water", "sizes": [{"price": 0, "imageUrl": None}]},
            ],
        },
    ],
}
