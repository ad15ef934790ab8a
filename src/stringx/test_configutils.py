import os

import stringx.configutils


class TestConfigutils:
    def test_extract_value_from_argv(self):
        argv = ["/usr/bin/stringx", "--separator=,", "-v", "--config", "my.conf"]

        value = stringx.configutils.extract_value_from_argv("separator", argv)
        assert value == ","

        value = stringx.configutils.extract_value_from_argv("config", argv)
        assert value == "my.conf"

        value = stringx.configutils.extract_value_from_argv("pattern", argv)
        assert value is None

        value = stringx.configutils.extract_value_from_argv("pattern", argv, default="x")
        assert value == "x"

    def test_flag_without_value(self):
        assert stringx.configutils.extract_value_from_argv("config", ["--config"]) is None

    def test_default_config_files_order(self, tmp_path):
        configs = stringx.configutils.default_config_files(
            user_config_dir=str(tmp_path / "user"),
            system_config_dir=str(tmp_path / "system"),
            cwd=str(tmp_path / "work"),
        )
        assert configs == [
            os.path.realpath(tmp_path / "system" / "stringx.conf"),
            os.path.realpath(tmp_path / "user" / "stringx.conf"),
            os.path.realpath(tmp_path / "work" / "stringx.conf"),
        ]

    def test_duplicate_directories_collapse(self, tmp_path):
        configs = stringx.configutils.default_config_files(
            user_config_dir=str(tmp_path), system_config_dir=str(tmp_path), cwd=str(tmp_path)
        )
        assert configs == [os.path.realpath(tmp_path / "stringx.conf")]

    def test_user_config_dir_follows_xdg(self, monkeypatch, tmp_path):
        monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))
        assert stringx.configutils.default_user_config_dir() == os.path.join(str(tmp_path), "stringx")

    def test_get_existing_config_files(self, tmp_path):
        (tmp_path / "work").mkdir()
        (tmp_path / "work" / "stringx.conf").write_text("skip-empty = yes\n")

        configs = stringx.configutils.get_existing_config_files(
            user_config_dir=str(tmp_path / "user"),
            system_config_dir=str(tmp_path / "system"),
            cwd=str(tmp_path / "work"),
        )
        assert configs == [os.path.realpath(tmp_path / "work" / "stringx.conf")]
