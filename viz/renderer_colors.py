# viz/renderer_colors.py
BG = (15, 17, 22)
GRID = (32, 36, 44)
FOOD = (220, 70, 70)
HEAD = (120, 230, 140)
BODY = (40, 160, 70)
TEXT = (220, 220, 230)
GAME_OVER = (240, 110, 90)
