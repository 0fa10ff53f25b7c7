# Expected catalog header: Name,MuscleGroup,SubregionPairs
HEADER_NAME = 'name'
HEADER_GROUP = 'musclegroup'
HEADER_SUBREGION_PREFIX = 'subregion'
HEADER_HINT = 'Name,MuscleGroup,SubregionPairs'

# Explicit Display Order (User Preference)
GROUP_ORDER = ['Chest', 'Shoulder', 'Biceps', 'Triceps', 'Legs', 'Back', 'Abs']

# Colors for group headings and subregion chips
GROUP_COLORS = {
    'Chest': '#ffd166',
    'Shoulder': '#f78c6b',
    'Biceps': '#ef476f',
    'Triceps': '#f6bd60',
    'Legs': '#073b4c',
    'Back': '#118ab2',
    'Abs': '#06d6a0',
}
DEFAULT_GROUP_COLOR = '#b0bec5'

DATA_DIR = 'data'
CATALOG_FILE = 'exercises.csv'
