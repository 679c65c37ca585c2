from pathlib import Path

import dev_runner
from qt import styles


def test_build_qss_substitutes_profile_colors():
    qss = styles.build_qss("professional")

    assert styles.STYLE_PROFILES["professional"]["accent"] in qss
    assert "#2CC985" not in qss


def test_unknown_profile_falls_back_to_default():
    assert styles.build_qss("does-not-exist") == styles.build_qss("wordbyword")


def test_reading_text_style_enforces_minimum_size():
    style = styles.reading_text_style("paper", font_size=3)

    assert "font-size: 8px" in style
    assert styles.STYLE_PROFILES["paper"]["reading_text"] in style


def test_should_restart_on_python_or_settings_changes():
    assert dev_runner.should_restart([(1, str(Path("core") / "timeline.py"))]) is True
    assert dev_runner.should_restart([(2, "wordbyword_settings.json")]) is True
    assert dev_runner.should_restart([(2, "notes.txt")]) is False
