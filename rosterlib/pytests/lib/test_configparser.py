import pytest

from rosterlib.database.settings import DatabaseSettings
from rosterlib.exceptions import NoConfigurationError
from rosterlib.lib import configparser
from rosterlib.lib.configparser import RosterConfig, get_config, register_config


_CONFIG = """\
[General]
logfile = /tmp/roster.log
loglevel = debug
sqldebug = yes

[Database]
rdbms = postgres
address = db.example.com
port = 5433
dbname = roster_test
dbusername = manager
"""


@pytest.fixture
def config_file(tmp_path):
    filename = tmp_path / 'roster.conf'
    filename.write_text(_CONFIG)
    return str(filename)


@pytest.fixture
def db_settings(monkeypatch):
    settings = DatabaseSettings()
    monkeypatch.setattr('rosterlib.database.settings.db_settings', settings)
    return settings


def test_load(config_file):
    config = RosterConfig()
    config.load(config_file)

    assert config.filename == config_file
    assert config.get('General', 'logfile') == '/tmp/roster.log'
    assert config.get_log_filename() == '/tmp/roster.log'
    assert config.get_log_level() == 'DEBUG'
    assert config.get_sqldebug() is True
    assert config.get('General', 'missing') is None
    assert config.get('Missing', 'logfile') is None


def test_load_without_filename():
    with pytest.raises(TypeError):
        RosterConfig().load(None)


def test_load_missing_file(tmp_path):
    config = RosterConfig()
    config.load(str(tmp_path / 'missing.conf'))
    assert config.filename is None
    assert not config.has_section('General')


def test_defaults():
    config = RosterConfig()
    assert config.get_log_level() == 'WARNING'
    assert config.get_log_filename() is None
    assert config.get_sqldebug() is False
    assert config.items('General') == []


def test_get_settings(config_file, db_settings):
    config = RosterConfig()
    config.load(config_file)

    settings = config.get_settings()
    assert settings is db_settings
    assert settings.rdbms == 'postgres'
    assert settings.address == 'db.example.com'
    assert settings.port == 5433
    assert settings.dbname == 'roster_test'
    assert settings.username == 'manager'


def test_get_settings_without_database_section(db_settings):
    settings = RosterConfig().get_settings()
    assert settings.rdbms == 'sqlite'
    assert settings.dbname == ':memory:'


def test_load_settings_and_flush(tmp_path):
    config = RosterConfig()
    settings = DatabaseSettings(rdbms='sqlite', dbname='/var/lib/roster.db')
    config.load_settings(settings)
    assert config.get_settings() is settings

    filename = str(tmp_path / 'new.conf')
    config.filename = filename
    config.flush()

    other = RosterConfig()
    other.load(filename)
    assert other.get('Database', 'rdbms') == 'sqlite'
    assert other.get('Database', 'dbname') == '/var/lib/roster.db'


def test_set_and_remove():
    config = RosterConfig()
    config.set('General', 'loglevel', 'info')
    assert config.has_section('General')
    assert config.items('General') == [('loglevel', 'info')]

    config.remove('General', 'loglevel')
    assert config.get('General', 'loglevel') is None
    # Removing from a missing section does nothing
    config.remove('Database', 'rdbms')


def test_get_config(monkeypatch):
    monkeypatch.setattr(configparser, '_config', None)
    with pytest.raises(NoConfigurationError):
        get_config()

    config = RosterConfig()
    register_config(config)
    assert get_config() is config
