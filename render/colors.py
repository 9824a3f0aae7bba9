"""
critter_sim module: render/colors.py

Central color palette.
"""

BG = (0, 0, 0)
FOOD = (0, 255, 0)
SPRITE = (255, 255, 255)
HUD_TEXT = (235, 235, 235)
