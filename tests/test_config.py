# test_config.py

import pytest

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from promptline.config import TransformerConfig, DEFAULT_MODEL_IDS
from promptline.errors import ConfigurationError
from promptline.__main__ import parse_args, build_config


def test_defaults_without_environment():
    config = TransformerConfig.from_env(environ={})
    assert config.provider == "gemini"
    assert config.model_id == DEFAULT_MODEL_IDS["gemini"]
    assert config.api_key is None
    assert config.endpoint is None
    assert config.copy_reset_delay == 2.0


def test_environment_is_read():
    config = TransformerConfig.from_env(environ={
        'GEMINI_API_KEY': 'from-env',
        'PROMPTLINE_MODEL_ID': 'gemini-pro',
        'AWS_REGION': 'eu-west-1',
    })
    assert config.api_key == 'from-env'
    assert config.model_id == 'gemini-pro'
    assert config.region == 'eu-west-1'


def test_first_matching_variable_wins():
    config = TransformerConfig.from_env(environ={
        'PROMPTLINE_API_KEY': 'primary',
        'GOOGLE_API_KEY': 'secondary',
    })
    assert config.api_key == 'primary'


def test_overrides_beat_environment():
    config = TransformerConfig.from_env(
        {'api_key': 'explicit', 'model_id': None, 'timeout': '5'},
        environ={'GEMINI_API_KEY': 'from-env', 'PROMPTLINE_MODEL_ID': 'env-model'}
    )
    assert config.api_key == 'explicit'
    assert config.model_id == 'env-model'
    assert config.timeout == 5.0


def test_bedrock_gets_its_own_default_model():
    config = TransformerConfig.from_env({'provider': 'bedrock'}, environ={})
    assert config.model_id == DEFAULT_MODEL_IDS["bedrock"]


def test_unknown_provider():
    with pytest.raises(ConfigurationError, match="Unknown provider"):
        TransformerConfig(provider="openai")


def test_cli_flags_build_config(monkeypatch):
    for key in ('PROMPTLINE_API_KEY', 'GEMINI_API_KEY', 'GOOGLE_API_KEY',
                'NEXT_PUBLIC_GEMINI_API_KEY', 'PROMPTLINE_MODEL_ID',
                'PROMPTLINE_PROVIDER', 'PROMPTLINE_ENDPOINT'):
        monkeypatch.delenv(key, raising=False)

    args = parse_args(['--model', 'gemini-1.5-pro', '--api-key', 'k', '-e', 'http://host:5000'])
    config = build_config(args)

    assert not args.serve
    assert args.port == 5000
    assert config.model_id == 'gemini-1.5-pro'
    assert config.api_key == 'k'
    assert config.endpoint == 'http://host:5000'
