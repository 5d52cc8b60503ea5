"""
Shared constants for the brand/exhibitor views
"""

# ===== RESPONSIVE LAYOUT CONSTANTS =====
BREAKPOINT = 800  # Mobile vs Desktop threshold (px)

# Grid settings for desktop
DESKTOP_COLUMNS = 3

# Card height
EXHIBITOR_CARD_HEIGHT = 300

# Grid spacing
GRID_SPACING = 10
GRID_RUN_SPACING = 10

# Colors
BACKGROUND_COLOR = "#F9FAFB"

# Image shown when a record has none or it fails to load
PLACEHOLDER_IMAGE = "https://placehold.co/400x300?text=No+image"
