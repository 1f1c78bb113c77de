"""
Test script for configuration system.
"""
import sys
import json
from pathlib import Path

import pytest

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.game import Side
from othello.search import SearchBudget

DEFAULT_CONFIG_FILE = Path(__file__).parent / "configs" / "default_config.json"


def test_config_round_trip(tmp_path):
    """Test creating, saving and loading a config."""
    config = get_default_config()
    config.search.max_depth = 4
    config.game.human_side = "white"

    test_path = tmp_path / "nested" / "config.json"
    config.save(str(test_path))
    loaded = Config.load(str(test_path))

    assert loaded.to_dict() == config.to_dict()
    assert loaded.search.max_depth == 4


def test_default_config_file_matches_defaults():
    config = Config.load(str(DEFAULT_CONFIG_FILE))
    assert config.to_dict() == get_default_config().to_dict()


def test_search_config_to_budget():
    config = get_default_config()
    assert config.search.to_budget() == SearchBudget(max_depth=11, time_limit=5.0)

    config.search.max_depth = 0
    with pytest.raises(ValueError):
        config.search.to_budget()


def test_human_side():
    config = get_default_config()
    assert config.game.get_human_side() is Side.BLACK
    config.game.human_side = "White"
    assert config.game.get_human_side() is Side.WHITE
    config.game.human_side = "red"
    with pytest.raises(ValueError):
        config.game.get_human_side()


def test_unknown_key_rejected(tmp_path):
    path = tmp_path / "bad.json"
    path.write_text(json.dumps({"search": {"max_depth": 3, "ply_limit": 9}}))
    with pytest.raises(TypeError):
        Config.load(str(path))


def test_partial_config_uses_defaults():
    config = Config.from_dict({"search": {"time_limit": 0.5}})
    assert config.search.time_limit == 0.5
    assert config.search.max_depth == 11
    assert config.logging.log_level == "INFO"
