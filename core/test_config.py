import pytest
import yaml

from core.config import ConfigManager
from core.config_types import ProbeConfig
from core.exceptions import ConfigError

def write_config(tmp_path, data):
    path = tmp_path / 'config.yaml'
    path.write_text(yaml.dump(data))
    return str(path)

def test_missing_file_uses_defaults(tmp_path):
    config = ConfigManager(str(tmp_path / 'absent.yaml'))
    assert config.probe == ProbeConfig()
    assert config.ui.output_format == 'text'
    assert not (tmp_path / 'absent.yaml').exists()

def test_sections_are_parsed(tmp_path):
    path = write_config(tmp_path, {
        'probe': {'timeout': 1.5, 'resend_interval': 0.25, 'default_port': 19133},
        'logging': {'level': 'debug'},
        'ui': {'output_format': 'json'},
    })
    config = ConfigManager(path)
    assert config.probe.timeout == 1.5
    assert config.probe.resend_interval == 0.25
    assert config.probe.default_port == 19133
    assert config.ui.output_format == 'json'

def test_default_config_round_trips(tmp_path):
    path = str(tmp_path / 'config.yaml')
    ConfigManager(path).create_default_config()
    config = ConfigManager(path)
    assert config.probe == ProbeConfig()

@pytest.mark.parametrize('probe', [
    {'timeout': 0},
    {'resend_interval': -1},
    {'timeout': 1.0, 'resend_interval': 1.0},
    {'default_port': 0},
    {'default_port': 70000},
    {'retries': 3},
    {'timeout': True},
    {'resend_interval': True, 'timeout': 5.0},
    {'default_port': True},
])
def test_invalid_probe_section_rejected(tmp_path, probe):
    with pytest.raises(ConfigError):
        ConfigManager(write_config(tmp_path, {'probe': probe}))

def test_invalid_log_level_rejected(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(write_config(tmp_path, {'logging': {'level': 'LOUD'}}))

def test_invalid_output_format_rejected(tmp_path):
    with pytest.raises(ConfigError):
        ConfigManager(write_config(tmp_path, {'ui': {'output_format': 'xml'}}))

def test_non_mapping_file_rejected(tmp_path):
    path = tmp_path / 'config.yaml'
    path.write_text('- just\n- a list\n')
    with pytest.raises(ConfigError):
        ConfigManager(str(path))

def test_cli_overrides_are_revalidated(tmp_path):
    config = ConfigManager(str(tmp_path / 'absent.yaml'))
    config.probe.resend_interval = 0
    with pytest.raises(ConfigError):
        config.validate()
