user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

bio_phrases = [
    "Home cook who never measures the garlic.",
    "Weeknight dinners in under thirty minutes.",
    "Baking bread badly, one loaf at a time.",
    "Spice collector and curry enthusiast.",
    "Feeding a family of five on a budget.",
    "Vegetarian recipes that even carnivores finish.",
]

ingredient_pool = [
    ("salt", "1", "tsp"),
    ("black pepper", "1/2", "tsp"),
    ("olive oil", "2", "tbsp"),
    ("garlic cloves", "3", ""),
    ("red onion", "1", ""),
    ("cherry tomatoes", "250", "g"),
    ("parmesan", "40", "g"),
    ("fresh basil", "1", "handful"),
    ("chicken breast", "2", ""),
    ("smoked paprika", "1", "tsp"),
    ("ground cumin", "1", "tsp"),
    ("yogurt", "150", "ml"),
    ("baby spinach", "100", "g"),
    ("mushrooms", "200", "g"),
    ("lemon juice", "1", "tbsp"),
    ("soy sauce", "2", "tbsp"),
    ("white rice", "300", "g"),
    ("pasta", "400", "g"),
    ("butter", "30", "g"),
    ("eggs", "2", ""),
]

tags_pool = [
    "quick",
    "vegetarian",
    "vegan",
    "gluten-free",
    "spicy",
    "comfort",
    "budget",
    "one-pot",
    "high-protein",
    "dessert",
]

cuisines = [
    "italian",
    "indian",
    "mexican",
    "japanese",
    "british",
    "french",
    "thai",
    "greek",
]

image_pool = [
    "https://images.example.org/recipes/meal1.jpg",
    "https://images.example.org/recipes/meal2.jpg",
    "https://images.example.org/recipes/meal3.jpg",
    "https://images.example.org/recipes/meal4.jpg",
    "https://images.example.org/recipes/meal5.jpg",
]

user_agents = [
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 14_5) AppleWebKit/605.1.15 Safari/605.1.15",
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 Chrome/126.0 Safari/537.36",
    "Mozilla/5.0 (iPhone; CPU iPhone OS 17_5 like Mac OS X) AppleWebKit/605.1.15 Mobile/15E148",
]
