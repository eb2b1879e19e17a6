"""
Environment configuration tests
"""

import sys
from pathlib import Path

import pytest

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from media_player_sim.config import SimulationConfig, get_config, print_config

ENV_VARS = (
    'MEDIASIM_CYCLES', 'MEDIASIM_BUFFER_SIZE', 'MEDIASIM_SAMPLE_RATE',
    'MEDIASIM_FRAME_RATE', 'MEDIASIM_CODEC_DELAY_MS', 'MEDIASIM_VERBOSE',
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


class TestGetConfig:

    def test_defaults(self):
        config = get_config()
        assert config == SimulationConfig()
        assert config.cycles == 10
        assert config.buffer_size == 1024
        assert config.sample_rate == 44100.0
        assert config.codec_delay_ms == 100
        assert config.verbose is False

    def test_overrides(self, monkeypatch):
        monkeypatch.setenv('MEDIASIM_CYCLES', '3')
        monkeypatch.setenv('MEDIASIM_BUFFER_SIZE', '256')
        monkeypatch.setenv('MEDIASIM_CODEC_DELAY_MS', '0')
        monkeypatch.setenv('MEDIASIM_VERBOSE', '1')
        config = get_config()
        assert config.cycles == 3
        assert config.buffer_size == 256
        assert config.codec_delay_ms == 0
        assert config.verbose is True

    @pytest.mark.parametrize("name,value", [
        ('MEDIASIM_CYCLES', '0'),
        ('MEDIASIM_CYCLES', 'ten'),
        ('MEDIASIM_BUFFER_SIZE', '-4'),
        ('MEDIASIM_CODEC_DELAY_MS', '-1'),
        ('MEDIASIM_SAMPLE_RATE', '0'),
        ('MEDIASIM_SAMPLE_RATE', 'nan'),
        ('MEDIASIM_SAMPLE_RATE', 'inf'),
    ])
    def test_invalid_values(self, monkeypatch, name, value):
        monkeypatch.setenv(name, value)
        with pytest.raises(ValueError, match=name):
            get_config()

    def test_print_config(self, capsys):
        print_config(SimulationConfig(cycles=4))
        out = capsys.readouterr().out
        assert "Simulation:" in out
        assert "cycles: 4" in out
        assert "buffer_size: 1024" in out
