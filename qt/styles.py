QSS = """
QWidget {
  background: #1f232a;
  color: #e6ebf2;
  font-family: "Segoe UI";
  font-size: 13px;
}

QWidget#RootWindow {
  background: #242a33;
}

QLabel {
  background: transparent;
}

QLabel#SpeedLabel, QLabel#SourceLabel {
  color: #aeb7c3;
  font-size: 12px;
}

QPushButton {
  background: #2b323d;
  border: 1px solid #3f4a5a;
  border-radius: 8px;
  padding: 6px 12px;
}

QPushButton:hover {
  background: #343d4a;
}

QPushButton#StartButton {
  background: #2CC985;
  color: #0e1612;
  border: 1px solid #229966;
  font-weight: 600;
}

QPushButton#StartButton:hover {
  background: #229966;
}
"""


STYLE_PROFILES = {
    "wordbyword": {
        "bg_root": "#1f232a",
        "bg_shell": "#242a33",
        "bg_panel": "#2b323d",
        "border_panel": "#3f4a5a",
        "accent": "#2CC985",
        "accent_hover": "#229966",
        "accent_text": "#0e1612",
        "ui_hover": "#343d4a",
        "text_main": "#e6ebf2",
        "text_muted": "#aeb7c3",
        "reading_text": "#FFD700",
    },
    "professional": {
        "bg_root": "#1c1f24",
        "bg_shell": "#24282f",
        "bg_panel": "#2c323b",
        "border_panel": "#4a5362",
        "accent": "#3BA5F0",
        "accent_hover": "#2f8dcd",
        "accent_text": "#0d1a26",
        "ui_hover": "#3a4453",
        "text_main": "#e9edf4",
        "text_muted": "#b6c0cd",
        "reading_text": "#e9edf4",
    },
    "paper": {
        "bg_root": "#f5f5f0",
        "bg_shell": "#fbfbf7",
        "bg_panel": "#ecebe4",
        "border_panel": "#c9c6bb",
        "accent": "#3b7d4f",
        "accent_hover": "#2f6640",
        "accent_text": "#ffffff",
        "ui_hover": "#e0ded4",
        "text_main": "#1d1d1b",
        "text_muted": "#5e5c55",
        "reading_text": "#121212",
    },
}


def resolve_profile(profile: str) -> dict:
    return STYLE_PROFILES.get((profile or "").strip().lower(), STYLE_PROFILES["wordbyword"])


def build_qss(profile: str = "wordbyword") -> str:
    selected = resolve_profile(profile)
    qss = QSS
    replacements = {
        "#1f232a": selected["bg_root"],
        "#242a33": selected["bg_shell"],
        "#2b323d": selected["bg_panel"],
        "#3f4a5a": selected["border_panel"],
        "#2CC985": selected["accent"],
        "#229966": selected["accent_hover"],
        "#0e1612": selected["accent_text"],
        "#343d4a": selected.get("ui_hover", "#343d4a"),
        "#e6ebf2": selected["text_main"],
        "#aeb7c3": selected["text_muted"],
    }
    for source, target in replacements.items():
        qss = qss.replace(source, target)
    return qss


def reading_text_style(profile: str = "wordbyword", font_size: int = 28) -> str:
    selected = resolve_profile(profile)
    size = max(8, int(font_size))
    return f"color: {selected['reading_text']}; font-size: {size}px; font-weight: 700;"
