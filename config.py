# Screen Dimensions
SCREEN_WIDTH = 800
SCREEN_HEIGHT = 700
TARGET_FPS = 60
WINDOW_TITLE = "Clickable Nanobot Experience"

# Swarm Settings
SWARM_CAPACITY = 30  # Deployment starts once this many nanobots are on screen
SWARM_STEP = 12  # Units moved down per frame while deploying
SWARM_OFFSCREEN_MARGIN = 100  # Removed once y reaches SCREEN_HEIGHT + margin
SWARM_SPAWN_X_MARGIN = 100
SWARM_SPAWN_Y_MIN = 150
SWARM_SPAWN_Y_MAX = 450

# Sprite dimensions for swarm members, per mode
SWARM_SPRITE_WIDTH = 70
SWARM_SPRITE_HEIGHT_SEARCH = 75
SWARM_SPRITE_HEIGHT_OPERATION = 126

# Central nanobot idle animation
IDLE_BOB_START_OFFSET = -60  # relative to SCREEN_HEIGHT / 2
IDLE_BOB_UPPER_OFFSET = -75
IDLE_BOB_LOWER_OFFSET = -45
IDLE_BOB_SPEED = 0.5

# Assets
ASSETS_DIR = "assets"
SEARCH_MODE_IMAGE = "SearchMode.png"
OPERATION_MODE_IMAGE = "OperationMode.png"
CLICKABLE_LAYOUT_CSV = "assets/clickableLayout.csv"

# UI Settings
BACKGROUND_COLOR = (10, 36, 99, 255)  # #0A2463
BUTTON_COLOR_DEFAULT = (98, 144, 200, 255)  # #6290C8
BUTTON_COLOR_HOVER = (10, 50, 0, 255)  # #0A3200
BUTTON_TEXT_COLOR = (255, 255, 255, 255)
BUTTON_STROKE_COLOR = (0, 0, 0, 255)
BUTTON_FONT_SIZE = 12

# Description panel
DESCRIPTION_PANEL_COLOR = (57, 32, 97, 180)  # Semi-transparent purple
DESCRIPTION_BORDER_COLOR = (255, 255, 255, 255)
DESCRIPTION_TEXT_COLOR = (255, 255, 255, 255)
DESCRIPTION_PANEL_WIDTH = 230
DESCRIPTION_PANEL_HEIGHT = 300
DESCRIPTION_TEXT_WIDTH = 150
DESCRIPTION_TEXT_HEIGHT = 250
DESCRIPTION_SIDE_OFFSET = 160  # Distance of panel center from the canvas edge
DESCRIPTION_Y_OFFSET = -90  # relative to SCREEN_HEIGHT / 2
DESCRIPTION_FONT_SIZE = 14

SEARCH_MODE_TEXT = (
    'The nanobots start in a hyper-mobile "search mode", where they are the most'
    " capable of traversing the body. They utilize an array of 10 cameras around"
    " their carapace to get a 360 degree visualization of their surroundings."
)

OPERATION_MODE_TEXT = (
    "Once a nanobot has reached its designated target, it will shift into"
    ' "operation mode" by opening the storage module in its tip. Inside the'
    " nanobot is an array of miniature tools used for conducting medical aid on"
    " the body. These tools consist of 2 calipers/claws, a medical saw, a"
    " scalpel, and a syringe for administering antibiotics and healing"
    " medication to any wounds."
)
