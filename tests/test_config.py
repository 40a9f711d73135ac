import pytest

from litmine.config import DEFAULT_CONFIG, load_config, merge_config
from litmine.errors import ConfigError


def test_defaults():
    cfg = load_config()
    assert cfg['sentiment']['block_size'] == 80
    assert cfg['chap']['exclude'] == [0]
    cfg['report']['top'] = 99
    assert DEFAULT_CONFIG['report']['top'] == 10


def test_yaml_overrides_only_named_keys(tmp_path):
    path = tmp_path / 'cfg.yaml'
    path.write_text('sentiment:\n  block_size: 40\nngrams:\n  n: 3\n', encoding='utf-8')
    cfg = load_config(path)
    assert cfg['sentiment']['block_size'] == 40
    assert cfg['sentiment']['label'] == 'negative'
    assert cfg['ngrams']['n'] == 3
    assert cfg['ngrams']['min_count'] == 20


def test_empty_yaml_gives_defaults(tmp_path):
    path = tmp_path / 'cfg.yaml'
    path.write_text('', encoding='utf-8')
    assert load_config(path) == DEFAULT_CONFIG


@pytest.mark.parametrize('overrides', [
    {'nope': {}},
    {'sentiment': {'nope': 1}},
    {'sentiment': 80},
])
def test_unknown_keys_are_rejected(overrides):
    with pytest.raises(ConfigError):
        merge_config(DEFAULT_CONFIG, overrides)


def test_yaml_must_be_a_mapping(tmp_path):
    path = tmp_path / 'cfg.yaml'
    path.write_text('- a\n- b\n', encoding='utf-8')
    with pytest.raises(ConfigError):
        load_config(path)
