# --- Display ---
WIDTH = 800
HEIGHT = 500
FPS = 60

# --- World / Physics (per 60 Hz tick) ---
GRAVITY = 0.6
JUMP_FORCE = 12.0
DOUBLE_JUMP_FORCE = 10.0
MAX_JUMPS = 2
LAND_TOLERANCE = 10         # how far the feet may already sink below a top and still land
LANDING_TIE_BREAK = "last"  # "last" = last matching platform wins, "closest" = nearest top wins

# --- Player ---
PLAYER_START_X = 100.0
PLAYER_START_Y = 300.0
PLAYER_W = 40
PLAYER_H = 40               # normal height
PLAYER_SMALL_H = 20         # crawl / dash height
PLAYER_LIVES = 3
MOVE_SPEED = 4.0
CRAWL_SPEED = 2.0
DASH_SPEED = 10.0
DASH_TIME = 12              # frames

# --- Respawn ---
RESPAWN_OFFSET_X = 100.0    # from camera x
RESPAWN_Y = 300.0

# --- Camera / Cleanup ---
CAMERA_LEAD = 150.0
CLEANUP_MARGIN = 200.0

# --- Level generation ---
GROUND_Y = 420
GROUND_W = 600
GROUND_H = 60
CLUSTERS_PER_SEGMENT = 3
PLATFORM_MIN_W = 100
PLATFORM_MAX_W = 220
PLATFORM_H = 20
PLATFORM_MIN_Y = 260
PLATFORM_MAX_Y = 380
GAP_MIN_W = 80
GAP_MAX_W = 200
SEED_DEFAULT = 12345

# --- Enemies ---
ENEMY_CHANCE = 0.6
ENEMY_W = 30
ENEMY_H = 30
ENEMY_MIN_SPEED = 1.5
ENEMY_MAX_SPEED = 2.5
STOMP_BOUNCE = -6.0
STOMP_REWARD = 100

# --- Colors (RGB) ---
COLOR_BG = (241, 245, 249)
COLOR_FG = (2, 6, 23)
COLOR_HINT = (100, 116, 139)
COLOR_PLAT = (120, 53, 15)
COLOR_ENEMY = (220, 38, 38)
COLOR_PLAYER = (29, 78, 216)
COLOR_PLAYER_SMALL = (59, 130, 246)
COLOR_PANEL = (40, 60, 90)
COLOR_PANEL_EDGE = (90, 130, 180)
