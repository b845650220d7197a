from pathlib import Path

from careerhub_server import ServerConfig


def test_defaults(tmp_path, monkeypatch):
	monkeypatch.chdir(tmp_path)
	config = ServerConfig()
	assert config.port == 3000
	assert config.host == "127.0.0.1"
	assert config.data_file == (tmp_path / "careerData.json").resolve()
	assert config.url == "http://127.0.0.1:3000"


def test_string_path_is_resolved_and_parent_created(tmp_path):
	config = ServerConfig(data_file=str(tmp_path / "nested" / "data.json"))
	assert isinstance(config.data_file, Path)
	assert config.data_file.is_absolute()
	assert config.data_file.parent.is_dir()
