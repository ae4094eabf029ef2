import logging

import pytest

from calprint.models.highlight import HighlightStyle, Shape

SAMPLE_CONFIG = """
[highlights]
sick = { shape = "circle", colour = [220, 50, 47] }
away = { shape = "rectangle", colour = "skyblue" }

[data]
2022-01-31.Mon = ""
2022-02-01.Tue = "sick"
2022-02-02.Wed = "sick"
2022-02-03.Thu = ""
2022-02-04.Fri = "away"
"""


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Isolate tests from CALPRINT_* variables and leftover log handlers."""
    for key in (
        "CALPRINT_CONFIG_FILE",
        "CALPRINT_OUTPUT_FILE",
        "CALPRINT_LAYOUT",
        "CALPRINT_LOG_DIR",
        "CALPRINT_LOG_FILENAME",
    ):
        monkeypatch.delenv(key, raising=False)
    yield
    logging.getLogger().handlers.clear()


@pytest.fixture
def styles():
    """Highlight table with one style of each shape."""
    return {
        "sick": HighlightStyle(name="sick", shape=Shape.CIRCLE, colour=(220, 50, 47)),
        "away": HighlightStyle(name="away", shape=Shape.RECTANGLE, colour=(135, 206, 235)),
    }


@pytest.fixture
def sample_config_text():
    return SAMPLE_CONFIG


@pytest.fixture
def config_file(tmp_path):
    """Write the sample config to a temporary calendar.toml."""
    path = tmp_path / "calendar.toml"
    path.write_text(SAMPLE_CONFIG)
    return path
