"""Fixed game dimensions, speeds and hitbox layout."""

SCREEN_WIDTH = 1920
SCREEN_HEIGHT = 1080

PLAYER_SPAWN_X = 50.0
PLAYER_SPAWN_Y = 50.0

PLAYER_SPEED = 620.0
PLAYER_SPRITE_WIDTH = 210
PLAYER_SPRITE_HEIGHT = 190
PLAYER_SPRITE_SCALE = 0.15
PLAYER_HITBOX_COUNT = 4
PLAYER_HITBOX_X_OFFSET = 75
PLAYER_HITBOX_Y_OFFSET = 55
PLAYER_HITBOX_WIDTH = 70
PLAYER_HITBOX_HEIGHT = 70
PLAYER_HEADBOX_X_OFFSET = 90
PLAYER_HEADBOX_Y_OFFSET = 25
PLAYER_HEADBOX_WIDTH = 80
PLAYER_HEADBOX_HEIGHT = 40
PLAYER_TAILBOX_X_OFFSET = 0
PLAYER_TAILBOX_Y_OFFSET = 90
PLAYER_TAILBOX_WIDTH = 40
PLAYER_TAILBOX_HEIGHT = 20
PLAYER_LOWER_TAILBOX_X_OFFSET = 20
PLAYER_LOWER_TAILBOX_Y_OFFSET = 110
PLAYER_LOWER_TAILBOX_WIDTH = 30
PLAYER_LOWER_TAILBOX_HEIGHT = 15

PLAYER_ANIMATION_FRAMES = 11
PLAYER_SHEET_FRAMES = 9
PLAYER_FRAME_TIME = 0.03

LIZARD_SPEED = 565.0
SAW_SPEED = 600.0
OBJECT_SPAWN_RATE_MIN = 0.65
OBJECT_SPAWN_RATE_MAX = 1.7
FIRST_SPAWN_TIME = 0.25
DEBUG_MODE = True
MAX_ENTITIES = 100
ENTITY_SPAWN_HEIGHT_OFFSET = 100
ENTITY_OFFSCREEN_MARGIN = 100
SAW_SCALE = 0.08
SAW_HITBOX_RADIUS = 42
SAW_HITBOX_OFFSET = 48
LIZARD_SCALE = 1.1
LIZARD_HITBOX_X = 80
LIZARD_HITBOX_Y = 60
LIZARD_HITBOX_OFFSET = 0
SAW_ROTATION_SPEED = 50.0