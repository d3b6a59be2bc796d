"""Package defaults
"""

DEFAULT_CURRENT = 1
DEFAULT_PAGE_SIZE = 10
DEFAULT_PAGE_SIZE_OPTIONS = [10, 20, 50, 100]

# Show the size changer by default once total exceeds this many items
TOTAL_BOUNDARY_SHOW_SIZE_CHANGER = 50

# Pages shown on either side of the current page
BUFFER_SIZE = 2
BUFFER_SIZE_LESS_ITEMS = 1

# Pages moved by the jump markers
JUMP_DISTANCE = 5
JUMP_DISTANCE_LESS_ITEMS = 3

# Front end
LOG_LINES = 1
