from bento.utilities.config import DATA_DIR

# Centralized paths for data files (single source of truth)
RECIPES_FILE = DATA_DIR / 'recipes.json'
INGREDIENTS_FILE = DATA_DIR / 'ingredients.json'

__all__ = ['DATA_DIR', 'RECIPES_FILE', 'INGREDIENTS_FILE']
