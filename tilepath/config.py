# Search settings
# Cost of one horizontal or vertical step
ORTHOGONAL_COST = 10
# Cost of one diagonal step (integer-scaled sqrt(2) * ORTHOGONAL_COST)
DIAGONAL_COST = 14
# Allow 8-neighbour expansion by default
ALLOW_DIAGONAL = False
# Permit diagonal steps that squeeze past a blocked orthogonal neighbour
CUT_CORNERS = False
# Upper bound on node expansions per search (None = unbounded)
MAX_EXPANSIONS = None

# Tile map settings
# Map file: JSON definition of the tile layers (located in tilepath/maps)
MAP_FILE = 'maps/default.json'
# Name of the layer holding collision tiles
COLLIDE_LAYER = 'collide'
# Tile property name and value marking a collidable tile
COLLIDE_KEY = 'COLLIDE'
COLLIDE_VALUE = '1'
# Tile edge length in pixels
TILE_SIZE = 32

# Path highlight fill color as RGBA floats in [0, 1]
PATH_FILL_COLOR = (0.2, 0.6, 1.0, 0.5)

# Sprite movement speed in tiles per second
SPRITE_SPEED = 4.0

# Demo window settings
FPS = 60
BACKGROUND_COLOR = (30, 30, 30)
FLOOR_COLOR = (70, 70, 70)
WALL_COLOR = (150, 150, 150)
SPRITE_COLOR = (220, 60, 60)
