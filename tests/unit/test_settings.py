from pathlib import Path

from bidder_params.settings import STATIC_SCHEMA_DIR, Settings


def test_defaults_point_at_shipped_schemas():
    s = Settings.from_env({})
    assert s.schema_dir == STATIC_SCHEMA_DIR
    assert s.schema_ext == ".json"
    assert s.strict is False


def test_env_overrides():
    s = Settings.from_env(
        {
            "BIDDER_PARAMS_SCHEMA_DIR": "/etc/bidder-params",
            "BIDDER_PARAMS_SCHEMA_EXT": "schema",
            "BIDDER_PARAMS_STRICT": "True",
        }
    )
    assert s.schema_dir == Path("/etc/bidder-params")
    assert s.schema_ext == ".schema"
    assert s.strict is True
