import pytest

from nerdcave.errors import ConfigError
from nerdcave.settings import DEFAULT_STYLES, load_settings


@pytest.fixture
def no_dotenv(tmp_path):
    return str(tmp_path / "missing.env")


def test_defaults(clean_env, no_dotenv):
    settings = load_settings(dotenv_path=no_dotenv)
    assert settings.log_level == "WARNING"
    assert settings.log_dir == "logs"
    assert settings.styles == DEFAULT_STYLES


def test_yaml_file_overrides_defaults(clean_env, no_dotenv, tmp_path):
    path = tmp_path / "nerdcave.yaml"
    path.write_text("log_level: debug\nlog_dir: out\nstyles:\n  error: magenta\n")

    settings = load_settings(str(path), dotenv_path=no_dotenv)

    assert settings.log_level == "DEBUG"
    assert settings.log_dir == "out"
    assert settings.styles["error"] == "magenta"
    assert settings.styles["success"] == DEFAULT_STYLES["success"]


def test_environment_beats_yaml(clean_env, no_dotenv, tmp_path):
    path = tmp_path / "nerdcave.yaml"
    path.write_text("log_level: DEBUG\n")
    clean_env.setenv("NERDCAVE_CONFIG", str(path))
    clean_env.setenv("NERDCAVE_LOG_LEVEL", "error")
    clean_env.setenv("NERDCAVE_LOG_DIR", "/tmp/cave-logs")

    settings = load_settings(dotenv_path=no_dotenv)

    assert settings.log_level == "ERROR"
    assert settings.log_dir == "/tmp/cave-logs"


def test_dotenv_file_is_read(clean_env, tmp_path):
    env_file = tmp_path / ".env"
    env_file.write_text("NERDCAVE_LOG_LEVEL=INFO\n")

    assert load_settings(dotenv_path=str(env_file)).log_level == "INFO"


def test_missing_file(clean_env, no_dotenv, tmp_path):
    with pytest.raises(ConfigError, match="Cannot read"):
        load_settings(str(tmp_path / "nope.yaml"), dotenv_path=no_dotenv)


def test_malformed_yaml(clean_env, no_dotenv, tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("log_level: [unclosed\n")
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_settings(str(path), dotenv_path=no_dotenv)


def test_non_mapping_yaml(clean_env, no_dotenv, tmp_path):
    path = tmp_path / "list.yaml"
    path.write_text("- one\n- two\n")
    with pytest.raises(ConfigError, match="mapping"):
        load_settings(str(path), dotenv_path=no_dotenv)


def test_unknown_log_level(clean_env, no_dotenv):
    clean_env.setenv("NERDCAVE_LOG_LEVEL", "chatty")
    with pytest.raises(ConfigError, match="log level"):
        load_settings(dotenv_path=no_dotenv)
