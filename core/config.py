# -*- coding: utf-8 -*-
# core/config.py

# QSettings identity, same pattern as QSettings("MyTools", "RapidNotes")
SETTINGS_ORGANIZATION = 'FastTipBox'
SETTINGS_APPLICATION = 'TipBox'

TIPS_KEY = 'TipBox_Tips'
CATEGORIES_KEY = 'TipBox_Categories'
ONBOARDING_KEY = 'hasSeenOnboarding'

LOG_FILE = 'app_log.txt'
LOG_FORMAT = '%(asctime)s - %(levelname)s - %(filename)s:%(lineno)d - %(message)s'

COLORS = {
    'accent':   '#F4C430',  # saffron, shared by every built-in category
}

DEFAULT_CATEGORY_COLOR = COLORS['accent']
DEFAULT_CATEGORY_ICON = 'folder'

# Choices offered by the add/edit category forms
CATEGORY_ICONS = [
    'folder', 'fork.knife', 'sparkles', 'heart', 'dollarsign.circle',
    'house', 'car', 'book', 'leaf', 'star',
    'lightbulb', 'hammer', 'cart', 'gift', 'pawprint'
]

CATEGORY_PALETTE = [
    '#F4C430', '#FF6B6B', '#4ECDC4', '#45B7D1', '#96CEB4',
    '#D4A5A5', '#9B59B6', '#3498DB', '#E67E22', '#2ECC71'
]
