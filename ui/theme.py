PALETTE = {
    "surface": "#1f232a",
    "panel": "#242a33",
    "card_border": "#3f4a5a",
    "muted_text": "#aeb7c3",
    "reading_text": "#FFD700",
    "accent": "#2CC985",
    "accent_hover": "#229966",
    "button_neutral": "#555f6e",
    "button_neutral_hover": "#677283",
}

SPACING = {
    "outer": 12,
    "inner": 10,
    "compact": 6,
    "control_y": 8,
}

RADIUS = {
    "card": 10,
    "control": 8,
}


def frame_style(fg_color, radius):
    return {
        "fg_color": fg_color,
        "corner_radius": radius,
        "border_width": 1,
        "border_color": PALETTE["card_border"],
    }


def neutral_button_style():
    return {
        "fg_color": PALETTE["button_neutral"],
        "hover_color": PALETTE["button_neutral_hover"],
        "corner_radius": RADIUS["control"],
    }


def accent_button_style():
    return {
        "fg_color": PALETTE["accent"],
        "hover_color": PALETTE["accent_hover"],
        "corner_radius": RADIUS["control"],
    }
